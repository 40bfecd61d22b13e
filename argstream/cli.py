# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Cli`, the token-stream consumption engine at the heart of
Argstream.

A `Cli` is built once from the raw process arguments. The calling program then
declares, in any order, the flags, options, positionals, and subcommands it
expects. Every query claims the matching tokens from the stream so no occurrence
is ever handed to two declared arguments, and later queries see only what is left.
When everything has been declared, `is_empty()` reports anything the program did
not ask for.

Key Features:
- Long flags (`--name`), bundled short switches (`-abc`), and `=`-attached values
- Values for options may be attached (`--rate=9`) or follow (`--rate 9`)
- Typed extraction through `coerce_value` (int, float, bool, Enum, datetime, ...)
- Subcommand matching with detection of options placed before the subcommand
- "Did you mean" suggestions bounded by an edit-distance threshold
- Help flag detection that takes priority over any other error
- Terminator (`--`) handling with explicit access to the trailing words

Example Usage:
    cli = Cli.from_args(["prog", "--verbose", "add", "9", "10"], threshold=2)
    verbose = cli.check_flag(Flag("verbose").with_switch("v"))
    lhs = cli.require_positional(Positional("lhs"), type=int)
    rhs = cli.require_positional(Positional("rhs"), type=int)
    cli.is_empty()

Queries raise a `CliError` subclass on bad input, or `HelpSignal` when the user
asked for help and a `Help` has been installed with `help()`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence, TypeVar

from argstream.arg import (
    FLAG_PREFIX,
    SWITCH_PREFIX,
    Arg,
    Flag,
    Optional,
    Positional,
    flag_name,
)
from argstream.coerce import coerce_value
from argstream.exceptions import (
    BadType,
    DuplicateOptions,
    ExceedingMaxCount,
    ExpectingValue,
    MissingPositional,
    OutOfContextArgSuggest,
    ParserMisuseError,
    SuggestArg,
    SuggestSubcommand,
    UnexpectedArg,
    UnexpectedValue,
    UnknownSubcommand,
)
from argstream.help import Help
from argstream.logger import logger
from argstream.signals import HelpSignal
from argstream.suggest import closest_match
from argstream.tokens import Tag, Token, TokenKind, TokenStream, tokenize

if TYPE_CHECKING:
    from argstream.command import FromCli

C = TypeVar("C", bound="FromCli")

_MISSING = object()


class Cli:
    """
    Declarative, order-independent query surface over a lexed argument list.

    The recommended discovery order inside a `from_cli` routine is flags,
    options, positionals, then subcommands.

    Attributes:
        threshold (int): Maximum edit distance for spelling suggestions. Zero
            disables suggestions entirely.
    """

    def __init__(self, threshold: int = 0) -> None:
        self._stream: TokenStream = TokenStream()
        self._known_args: list[Arg] = []
        self._help: Help | None = None
        self._asking_for_help: bool = False
        self.threshold: int = 0
        self.with_threshold(threshold)

    @classmethod
    def from_args(cls, args: Iterable[str], threshold: int = 0) -> Cli:
        """Build a `Cli` and lex `args` (first element is the program name)."""
        return cls(threshold=threshold).tokenize(args)

    def tokenize(self, args: Iterable[str]) -> Cli:
        """Lex `args` into this engine's token stream, replacing any prior stream."""
        self._stream = tokenize(args)
        return self

    def with_threshold(self, cost: int) -> Cli:
        """Set the maximum edit distance used when offering spelling suggestions."""
        if cost < 0:
            raise ParserMisuseError(f"threshold must be non-negative, got {cost}")
        self.threshold = cost
        return self

    @property
    def tokens(self) -> list[Token | None]:
        """Snapshot of the token slots; claimed slots are `None`."""
        return list(self._stream.slots)

    @property
    def occurrences(self) -> dict[Tag, list[int]]:
        """Snapshot of the unclaimed option occurrences by tag."""
        return {tag: list(locs) for tag, locs in self._stream.index.items()}

    @property
    def known_args(self) -> list[Arg]:
        return list(self._known_args)

    @property
    def asking_for_help(self) -> bool:
        return self._asking_for_help

    # ------------------------------------------------------------------ help

    def help(self, help: Help) -> None:
        """
        Install the help collaborator and check for its flag.

        If help has not already been requested, the help flag is claimed from the
        stream right away so every later error can give way to it.
        """
        self._help = help
        if not self._asking_for_help and self.is_help_enabled():
            self._asking_for_help = self.check_flag(help.flag)

    def is_help_enabled(self) -> bool:
        return self._help is not None

    def disable_help(self) -> None:
        """Remove the installed help collaborator."""
        self._help = None

    def _prioritize_help(self) -> None:
        if self._asking_for_help and self._help is not None:
            raise HelpSignal(self._help)

    # ------------------------------------------------------------ primitives

    def _take_flag_locs(self, name: str) -> list[int]:
        return self._stream.index.pop(Tag.flag(name), [])

    def _take_switch_locs(self, char: str) -> list[int]:
        return self._stream.index.pop(Tag.switch(char), [])

    def _take_locs(self, flag: Flag) -> list[int]:
        locs = self._take_flag_locs(flag.name)
        if flag.switch is not None:
            locs.extend(self._take_switch_locs(flag.switch))
        return sorted(locs)

    def _pull_flag(self, locations: list[int], with_unattached: bool) -> list[str | None]:
        """
        Claim the flag/switch at each slot and any value directly behind it.

        An attached value is always claimed. A following bare word is claimed only
        when `with_unattached` is set.
        """
        slots = self._stream.slots
        values: list[str | None] = []
        for loc in locations:
            slots[loc] = None
            value: str | None = None
            if loc + 1 < len(slots):
                following = slots[loc + 1]
                if following is not None and (
                    following.kind is TokenKind.ATTACHED_ARGUMENT
                    or (with_unattached and following.kind is TokenKind.UNATTACHED_ARGUMENT)
                ):
                    slots[loc + 1] = None
                    value = following.take_str()
            values.append(value)
        return values

    def _next_unattached(self) -> str | None:
        """Claim the next bare word, stopping at a terminator."""
        slots = self._stream.slots
        for pos, token in enumerate(slots):
            if token is None:
                continue
            if token.kind is TokenKind.TERMINATOR:
                return None
            if token.kind is TokenKind.UNATTACHED_ARGUMENT:
                slots[pos] = None
                return token.take_str()
        return None

    def _first_unattached_pos(self) -> int | None:
        for pos, token in enumerate(self._stream.slots):
            if token is not None and token.kind is TokenKind.UNATTACHED_ARGUMENT:
                return pos
        return None

    def _pop_known(self) -> Arg:
        return self._known_args.pop()

    def _flag_name_bank(self) -> list[str]:
        """Names of every declared flag and option, for spelling suggestions."""
        return [name for name in map(flag_name, self._known_args) if name is not None]

    def _coerce(self, value: str, type: Any) -> Any:
        try:
            return coerce_value(value, type)
        except (ValueError, TypeError) as error:
            self._prioritize_help()
            raise BadType(self._pop_known(), value, str(error), self._help) from error

    # ----------------------------------------------------------------- flags

    def check_flag_all(self, flag: Flag) -> int:
        """
        Claim every occurrence of `flag` and return how many there were.

        Raises:
            UnexpectedValue: If any occurrence carries an `=`-attached value.
        """
        locs = self._take_locs(flag)
        self._known_args.append(flag)
        occurrences = self._pull_flag(locs, with_unattached=False)
        for value in occurrences:
            if value is not None:
                self._prioritize_help()
                raise UnexpectedValue(self._pop_known(), value, self._help)
        if occurrences and self._help is not None and self._help.flag.name == flag.name:
            self._asking_for_help = True
        logger.debug("Flag '%s' raised %d time(s).", flag, len(occurrences))
        return len(occurrences)

    def check_flag(self, flag: Flag) -> bool:
        """
        Return whether `flag` was raised exactly once.

        Raises:
            DuplicateOptions: If the flag was raised more than once.
        """
        count = self.check_flag_all(flag)
        if count > 1:
            self._prioritize_help()
            raise DuplicateOptions(self._pop_known(), self._help)
        return count == 1

    def check_flag_n(self, flag: Flag, n: int) -> int:
        """
        Return how many times `flag` was raised, up to `n`.

        Raises:
            ExceedingMaxCount: If the flag was raised more than `n` times.
        """
        count = self.check_flag_all(flag)
        if count > n:
            self._prioritize_help()
            raise ExceedingMaxCount(n, count, self._pop_known(), self._help)
        return count

    # --------------------------------------------------------------- options

    def _pull_option(self, option: Optional) -> list[str | None]:
        locs = self._take_locs(option.flag)
        self._known_args.append(option)
        values = self._pull_flag(locs, with_unattached=True)
        logger.debug("Option '%s' raised %d time(s).", option.flag, len(values))
        return values

    def _require_value(self, value: str | None) -> str:
        if value is None:
            self._prioritize_help()
            raise ExpectingValue(self._pop_known(), self._help)
        return value

    def check_option_all(self, option: Optional, type: Any = str) -> list[Any] | None:
        """
        Return every value supplied to `option`, in command-line order.

        Returns:
            list[Any] | None: Parsed values, or None if the option never occurred.

        Raises:
            ExpectingValue: If an occurrence has no value.
            BadType: If a value cannot be parsed as `type`.
        """
        values = self._pull_option(option)
        if not values:
            return None
        return [self._coerce(self._require_value(value), type) for value in values]

    def check_option(self, option: Optional, type: Any = str) -> Any | None:
        """
        Return the single value supplied to `option`, or None if it never occurred.

        Raises:
            DuplicateOptions: If the option occurred more than once.
            ExpectingValue: If the occurrence has no value.
            BadType: If the value cannot be parsed as `type`.
        """
        values = self._pull_option(option)
        if not values:
            return None
        if len(values) > 1:
            self._prioritize_help()
            raise DuplicateOptions(self._pop_known(), self._help)
        return self._coerce(self._require_value(values[0]), type)

    def check_option_n(self, option: Optional, n: int, type: Any = str) -> list[Any] | None:
        """
        Return up to `n` values supplied to `option`.

        Raises:
            ExceedingMaxCount: If more than `n` values were supplied.
        """
        values = self.check_option_all(option, type)
        if values is not None and len(values) > n:
            self._prioritize_help()
            raise ExceedingMaxCount(n, len(values), self._pop_known(), self._help)
        return values

    # ----------------------------------------------------------- positionals

    def _pull_positional(self, positional: Positional, type: Any) -> Any:
        self._known_args.append(positional)
        value = self._next_unattached()
        if value is None:
            return _MISSING
        try:
            return coerce_value(value, type)
        except (ValueError, TypeError) as error:
            self._prioritize_help()
            self._prioritize_suggestion()
            raise BadType(self._pop_known(), value, str(error), self._help) from error

    def check_positional(self, positional: Positional, type: Any = str) -> Any | None:
        """
        Return the next bare word parsed as `type`, or None if none remain.

        Raises:
            BadType: If the word cannot be parsed as `type`.
            SuggestArg: If parsing failed and a leftover long flag looks like a
                misspelled declared option.
        """
        value = self._pull_positional(positional, type)
        return None if value is _MISSING else value

    def require_positional(self, positional: Positional, type: Any = str) -> Any:
        """
        Return the next bare word parsed as `type`.

        Raises:
            MissingPositional: If no bare words remain.
            UnexpectedArg: If no bare words remain but unclaimed tokens do.
        """
        value = self._pull_positional(positional, type)
        if value is _MISSING:
            self._prioritize_help()
            self.is_empty()
            raise MissingPositional(self._pop_known(), self._help)
        return value

    def _prioritize_suggestion(self) -> None:
        """Raise `SuggestArg` for the earliest leftover long flag close to a declared one."""
        if self._asking_for_help or self.threshold == 0:
            return
        bank = self._flag_name_bank()
        entries = sorted(self._stream.index.items(), key=lambda item: item[1][0])
        for tag, locs in entries:
            token = self._stream.slots[locs[0]]
            if tag.is_switch or token is None or token.kind is not TokenKind.FLAG:
                continue
            word = closest_match(tag.name, bank, self.threshold)
            if word is not None:
                logger.debug("Suggesting '%s' for unknown flag '%s'.", word, tag.name)
                raise SuggestArg(f"{FLAG_PREFIX}{tag.name}", f"{FLAG_PREFIX}{word}", self._help)

    # ----------------------------------------------------------- subcommands

    def check_command(self, positional: Positional, command: type[C]) -> C | None:
        """
        Build `command` from the stream if a bare word remains to name it.

        `command.from_cli` is expected to call `match_command` to claim the word.

        Returns:
            C | None: The populated command, or None if no bare words remain.
        """
        self._known_args.append(positional)
        if self._first_unattached_pos() is None:
            return None
        return command.from_cli(self)

    def match_command(self, words: Sequence[str]) -> str:
        """
        Claim the next bare word and match it against the accepted `words`.

        Raises:
            OutOfContextArgSuggest: If an unclaimed option appears before the word.
            SuggestArg: If that option looks like a misspelled declared flag.
            SuggestSubcommand: If the word is close to one of `words`.
            UnknownSubcommand: If the word matches nothing.
            ParserMisuseError: If no positional was declared or no bare word remains.
        """
        if not any(isinstance(arg, Positional) for arg in self._known_args):
            raise ParserMisuseError("a positional must be declared before calling `match_command`")
        pos = self._first_unattached_pos()
        if pos is None:
            raise ParserMisuseError("`check_command` must find a bare word before `match_command`")
        word = self._next_unattached()
        if word is None:
            raise ParserMisuseError("the bare word found by `match_command` could not be claimed")

        stray = self._capture_bad_flag(pos)
        if stray is not None:
            prefix, key, _ = stray
            self._prioritize_help()
            raise OutOfContextArgSuggest(f"{prefix}{key}", word, self._help)

        if word in words:
            return word

        suggestion = closest_match(word, words, self.threshold)
        self._prioritize_help()
        if suggestion is not None:
            logger.debug("Suggesting subcommand '%s' for '%s'.", suggestion, word)
            raise SuggestSubcommand(word, suggestion, self._help)
        raise UnknownSubcommand(self._pop_known(), word, self._help)

    # ---------------------------------------------------------- completeness

    def _find_first_flag_left(self, breakpoint: int) -> tuple[Tag, int] | None:
        """Return the earliest unclaimed option occurrence before slot `breakpoint`."""
        found: tuple[Tag, int] | None = None
        for tag, locs in self._stream.index.items():
            first = locs[0]
            if first < breakpoint and (found is None or first < found[1]):
                found = (tag, first)
        return found

    def _capture_bad_flag(self, breakpoint: int) -> tuple[str, str, int] | None:
        """
        Report the earliest unclaimed option before `breakpoint`.

        Returns:
            tuple[str, str, int] | None: `(prefix, name, slot)` of the stray option.

        Raises:
            SuggestArg: If the stray option is a long flag close to a declared one.
        """
        found = self._find_first_flag_left(breakpoint)
        if found is None:
            return None
        self._prioritize_help()
        tag, pos = found
        token = self._stream.slots[pos]
        if token is None:
            raise ParserMisuseError(f"option '{tag}' points at a claimed slot {pos}")
        if token.kind in (TokenKind.SWITCH, TokenKind.EMPTY_SWITCH):
            return SWITCH_PREFIX, tag.name, pos
        if token.kind is TokenKind.FLAG:
            word = closest_match(tag.name, self._flag_name_bank(), self.threshold)
            if word is not None:
                logger.debug("Suggesting '%s' for unknown flag '%s'.", word, tag.name)
                raise SuggestArg(f"{FLAG_PREFIX}{tag.name}", f"{FLAG_PREFIX}{word}", self._help)
            return FLAG_PREFIX, tag.name, pos
        raise ParserMisuseError(f"option '{tag}' points at a {token.kind.value} token")

    def is_empty(self) -> None:
        """
        Verify that every token has been claimed.

        Raises:
            UnexpectedArg: For the first unclaimed option, bare word, or terminator.
            SuggestArg: If the unclaimed option looks like a misspelled flag.
        """
        self._prioritize_help()
        stray = self._capture_bad_flag(len(self._stream.slots))
        if stray is not None:
            prefix, key, _ = stray
            raise UnexpectedArg(f"{prefix}{key}", self._help)
        for token in self._stream.slots:
            if token is None or token.kind is TokenKind.IGNORE:
                continue
            if token.kind is TokenKind.TERMINATOR:
                raise UnexpectedArg(FLAG_PREFIX, self._help)
            raise UnexpectedArg(token.take_str(), self._help)

    def check_remainder(self) -> list[str]:
        """
        Claim the terminator and every word behind it.

        Returns:
            list[str]: The words after `--`, in order. Empty if there is no terminator.

        Raises:
            UnexpectedValue: If a value was attached to the terminator (`--=value`).
        """
        slots = self._stream.slots
        start = next(
            (
                pos
                for pos, token in enumerate(slots)
                if token is not None and token.kind is TokenKind.TERMINATOR
            ),
            None,
        )
        if start is None:
            return []
        remainder: list[str] = []
        for pos in range(start, len(slots)):
            token = slots[pos]
            if token is None:
                continue
            slots[pos] = None
            if token.kind is TokenKind.IGNORE:
                remainder.append(token.take_str())
            elif token.kind is TokenKind.ATTACHED_ARGUMENT:
                self._prioritize_help()
                raise UnexpectedValue(Flag(""), token.take_str(), self._help)
            elif token.kind is not TokenKind.TERMINATOR:
                raise ParserMisuseError(f"unexpected {token.kind.value} token behind terminator")
        return remainder
