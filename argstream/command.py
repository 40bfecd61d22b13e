# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the dispatch layer that lets a type populate itself from a `Cli`.

`FromCli` is the one contract the engine knows about: a classmethod that takes the
live engine and returns an instance or raises. Because a subcommand is just another
`FromCli` type, parsers nest to any depth without the engine knowing the concrete
types involved.

The recommended argument discovery order inside `from_cli` is:
1. flags
2. options
3. positionals
4. subcommands

Example:
    class Add(Runner):
        def __init__(self, lhs: int, rhs: int, verbose: bool) -> None:
            ...

        @classmethod
        def from_cli(cls, cli: Cli) -> "Add":
            return cls(
                verbose=cli.check_flag(Flag("verbose")),
                lhs=cli.require_positional(Positional("lhs"), type=int),
                rhs=cli.require_positional(Positional("rhs"), type=int),
            )

        def exec(self, context: Any) -> Any:
            print(self.lhs + self.rhs)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from argstream.cli import Cli

T = TypeVar("T", bound="FromCli")


class FromCli(ABC):
    """A type that can be constructed by querying a `Cli`."""

    @classmethod
    @abstractmethod
    def from_cli(cls: type[T], cli: Cli) -> T:
        """Collect tokens from the command line to build an instance."""
        raise NotImplementedError


class Command(ABC):
    """An executable command; `context` is whatever state the program shares."""

    @abstractmethod
    def exec(self, context: Any) -> Any:
        raise NotImplementedError


class Runner(FromCli, Command):
    """A command that can both parse itself and run."""
