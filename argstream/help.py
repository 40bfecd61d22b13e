# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text container used by the `Cli` engine.

The engine only needs two things from it: the designated help flag, so it can
notice when the user asks for help, and a usage line to print beneath a missing
positional error. Formatting of the text itself is left to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from argstream.arg import Flag


@dataclass(frozen=True)
class Help:
    """
    Help text plus the flag that requests it.

    Attributes:
        text (str): The full help text shown when help is requested.
        flag (Flag): Flag that requests help. Defaults to `--help, -h`.
        usage_line (int | None): 0-indexed line of `text` describing overall usage.
    """

    text: str = ""
    flag: Flag = field(default_factory=lambda: Flag("help", "h"))
    usage_line: int | None = None

    def usage(self) -> str | None:
        """Return the line of the help text that states overall usage, if known."""
        if self.usage_line is None:
            return None
        lines = self.text.splitlines()
        if 0 <= self.usage_line < len(lines):
            return lines[self.usage_line]
        return None

    def render(self, console: Console) -> None:
        """Print the help text without rich markup processing."""
        console.print(self.text, markup=False, highlight=False)
