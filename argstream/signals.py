# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Argstream engine.

Signals are raised to interrupt normal parsing without being treated as
traditional errors. They inherit from `FlowSignal`, a subclass of `BaseException`,
so that a caller's `except Exception` block never swallows them.

Signals:
- HelpSignal: The user raised the help flag; render help instead of an error.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argstream.help import Help


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argstream.

    These are not errors. They redirect control to the caller, which decides
    what to render and how to exit.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information instead of reporting an error."""

    def __init__(self, help: Help | None = None, message: str = "Help signal received."):
        super().__init__(message)
        self.help = help
