# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Argstream engine.

User-input problems are raised as subclasses of `CliError`. Each carries the
declared argument (or literal text) that caused it, an optional suggestion, and
the `Help` in effect so the caller can print a usage line beneath the message.

Programmer misuse of the engine is raised as `ParserMisuseError`. It is not a
`CliError` and callers handling user input should let it propagate.

Exception Hierarchy:
- ArgStreamError
    ├── CliError
    │   ├── BadType
    │   ├── DuplicateOptions
    │   ├── UnexpectedValue
    │   ├── ExpectingValue
    │   ├── MissingPositional
    │   ├── UnexpectedArg
    │   ├── UnknownSubcommand
    │   ├── SuggestSubcommand
    │   ├── SuggestArg
    │   ├── OutOfContextArgSuggest
    │   └── ExceedingMaxCount
    ├── ParserMisuseError
    │   └── TokenTextError
    └── ConfigError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argstream.help import Help


class ArgStreamError(Exception):
    """Base exception for the Argstream engine."""


class ParserMisuseError(ArgStreamError):
    """Raised when the engine is driven in a way its contract forbids."""


class TokenTextError(ParserMisuseError):
    """Raised when reading text from a token kind that carries none."""


class ConfigError(ArgStreamError):
    """Raised when a configuration file cannot be read or validated."""


class CliError(ArgStreamError):
    """Base class for every error caused by the user's command line."""

    suggestion: str | None = None

    def __init__(self, message: str, help: Help | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.help = help

    def usage(self) -> str | None:
        """Usage line to print beneath the message, if one is configured."""
        return self.help.usage() if self.help else None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return False
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def _key(self) -> tuple[Any, ...]:
        return (self.message,)


class BadType(CliError):
    """A value could not be parsed as the requested type."""

    def __init__(self, arg: Any, value: str, reason: str, help: Help | None = None):
        super().__init__(f"argument '{arg}' did not process '{value}' due to {reason}", help)
        self.arg = arg
        self.value = value
        self.reason = reason


class DuplicateOptions(CliError):
    """A flag or option was raised more than once where at most one is allowed."""

    def __init__(self, arg: Any, help: Help | None = None):
        super().__init__(f"option '{arg}' was requested more than once, but can only be supplied once", help)
        self.arg = arg

    def _key(self) -> tuple[Any, ...]:
        return (self.arg,)


class UnexpectedValue(CliError):
    """A value was attached to a flag that does not take one."""

    def __init__(self, arg: Any, value: str, help: Help | None = None):
        super().__init__(f"flag '{arg}' cannot accept values but one was supplied \"{value}\"", help)
        self.arg = arg
        self.value = value

    def _key(self) -> tuple[Any, ...]:
        return (self.arg, self.value)


class ExpectingValue(CliError):
    """An option was raised without any reachable value."""

    def __init__(self, arg: Any, help: Help | None = None):
        super().__init__(f"option '{arg}' accepts one value but zero were supplied", help)
        self.arg = arg

    def _key(self) -> tuple[Any, ...]:
        return (self.arg,)


class MissingPositional(CliError):
    """A required positional argument was not supplied."""

    def __init__(self, arg: Any, help: Help | None = None):
        super().__init__(f"missing required argument '{arg}'", help)
        self.arg = arg

    def _key(self) -> tuple[Any, ...]:
        return (self.arg,)


class UnexpectedArg(CliError):
    """A token was left over after every expected argument was declared."""

    def __init__(self, text: str, help: Help | None = None):
        super().__init__(f"unknown argument '{text}'", help)
        self.text = text

    def _key(self) -> tuple[Any, ...]:
        return (self.text,)


class UnknownSubcommand(CliError):
    """A subcommand word was not recognized and no suggestion is available."""

    def __init__(self, arg: Any, word: str, help: Help | None = None):
        super().__init__(f"'{word}' is not a valid subcommand for '{arg}'", help)
        self.arg = arg
        self.word = word

    def _key(self) -> tuple[Any, ...]:
        return (self.arg, self.word)


class SuggestSubcommand(CliError):
    """A subcommand word was not recognized but is close to a valid one."""

    def __init__(self, word: str, suggestion: str, help: Help | None = None):
        super().__init__(f"unknown subcommand '{word}'; did you mean '{suggestion}'?", help)
        self.word = word
        self.suggestion = suggestion

    def _key(self) -> tuple[Any, ...]:
        return (self.word, self.suggestion)


class SuggestArg(CliError):
    """An option was not recognized but is close to a declared one."""

    def __init__(self, text: str, suggestion: str, help: Help | None = None):
        super().__init__(f"unknown argument '{text}'; did you mean '{suggestion}'?", help)
        self.text = text
        self.suggestion = suggestion

    def _key(self) -> tuple[Any, ...]:
        return (self.text, self.suggestion)


class OutOfContextArgSuggest(CliError):
    """An option appeared before the subcommand whose parser it belongs to."""

    def __init__(self, option: str, word: str, help: Help | None = None):
        super().__init__(
            f"argument '{option}' is unknown or invalid in the current context; "
            f"maybe move it after '{word}'?",
            help,
        )
        self.option = option
        self.word = word
        self.suggestion = word

    def _key(self) -> tuple[Any, ...]:
        return (self.option, self.word)


class ExceedingMaxCount(CliError):
    """A flag or option was raised more times than its declared cap."""

    def __init__(self, limit: int, count: int, arg: Any, help: Help | None = None):
        super().__init__(
            f"option '{arg}' was requested {count} times, but cannot exceed {limit}", help
        )
        self.limit = limit
        self.count = count
        self.arg = arg

    def _key(self) -> tuple[Any, ...]:
        return (self.limit, self.count, self.arg)
