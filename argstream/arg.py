# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the declared-argument descriptors a caller hands to the `Cli` engine.

Each descriptor names one thing the calling program expects on the command line.
The engine records every descriptor it is asked about in its known-argument ledger
so later errors can point at the declared argument and build a word bank for
spelling suggestions.

Descriptors:
- `Flag`: boolean, value-free option (`--verbose`, `-v`).
- `Optional`: value-bearing option (`--rate 10`, `--rate=10`, `-r 10`).
- `Positional`: a value matched by position; its name is only used in messages.

Example:
    Flag("verbose").with_switch("v")    # --verbose, -v
    Optional("rate").with_switch("r")   # --rate <rate>, -r <rate>
    Positional("path")                  # <path>
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from argstream.exceptions import ParserMisuseError

FLAG_PREFIX = "--"
SWITCH_PREFIX = "-"


def _validate_switch(switch: str | None) -> None:
    if switch is not None and len(switch) != 1:
        raise ParserMisuseError(f"Switch must be a single character, got '{switch}'")


@dataclass(frozen=True)
class Flag:
    """
    A boolean option, optionally reachable through a single-character switch.

    Attributes:
        name (str): Long-form name without the leading `--`.
        switch (str | None): Short-form character without the leading `-`.
    """

    name: str
    switch: str | None = None

    def __post_init__(self) -> None:
        _validate_switch(self.switch)

    def with_switch(self, switch: str) -> Flag:
        """Return a copy of this flag that also answers to `-<switch>`."""
        return replace(self, switch=switch)

    def __str__(self) -> str:
        return f"{FLAG_PREFIX}{self.name}"


@dataclass(frozen=True)
class Optional:
    """
    A value-bearing option. The value may be attached (`--name=value`) or follow
    the option as the next bare word (`--name value`).
    """

    flag: Flag

    def __init__(self, name: str, switch: str | None = None) -> None:
        object.__setattr__(self, "flag", Flag(name, switch))

    @property
    def name(self) -> str:
        return self.flag.name

    @property
    def switch(self) -> str | None:
        return self.flag.switch

    def with_switch(self, switch: str) -> Optional:
        """Return a copy of this option that also answers to `-<switch>`."""
        return Optional(self.name, switch)

    def __str__(self) -> str:
        return f"{self.flag} <{self.name}>"


@dataclass(frozen=True)
class Positional:
    """A value identified by its position among the bare words."""

    name: str

    def __str__(self) -> str:
        return f"<{self.name}>"


Arg = Flag | Optional | Positional


def flag_name(arg: Arg) -> str | None:
    """Return the long-form name of a flag or option, None for positionals."""
    if isinstance(arg, (Flag, Optional)):
        return arg.name
    return None
