# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical analysis of raw process arguments into a slot-based token stream.

The lexer walks the arguments left to right once, without backtracking, and
produces two structures:

- `slots`: an ordered list where every entry holds a `Token` or `None` once the
  engine has claimed it. Claiming is permanent.
- `index`: a mapping from `Tag` (a long flag name or a short switch character)
  to the slot positions where that option occurred, in first-seen order.

Token kinds:
- UNATTACHED_ARGUMENT: a bare word (`file.txt`).
- ATTACHED_ARGUMENT: a value joined to an option with `=` (`--rate=9`).
- FLAG: a long option (`--rate`).
- SWITCH: one character of a short bundle (`-abc` yields three).
- EMPTY_SWITCH: a lone `-`.
- TERMINATOR: the literal `--`.
- IGNORE: any word after the terminator.

Every token records the index of the original argument it came from, with the
program name excluded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from argstream.arg import FLAG_PREFIX, SWITCH_PREFIX
from argstream.exceptions import TokenTextError
from argstream.logger import logger


class TokenKind(Enum):
    """Kinds of tokens produced by the lexer."""

    UNATTACHED_ARGUMENT = "unattached_argument"
    ATTACHED_ARGUMENT = "attached_argument"
    FLAG = "flag"
    SWITCH = "switch"
    EMPTY_SWITCH = "empty_switch"
    IGNORE = "ignore"
    TERMINATOR = "terminator"


TEXT_KINDS = frozenset(
    {TokenKind.UNATTACHED_ARGUMENT, TokenKind.ATTACHED_ARGUMENT, TokenKind.IGNORE}
)


@dataclass(frozen=True)
class Token:
    """
    A single lexed token.

    Attributes:
        kind (TokenKind): What the token represents.
        index (int): Position of the originating argument (program name excluded).
        text (str | None): Payload for argument and ignored tokens.
        char (str | None): The switch character for SWITCH tokens.
    """

    kind: TokenKind
    index: int
    text: str | None = None
    char: str | None = None

    @classmethod
    def unattached(cls, index: int, text: str) -> Token:
        return cls(TokenKind.UNATTACHED_ARGUMENT, index, text=text)

    @classmethod
    def attached(cls, index: int, text: str) -> Token:
        return cls(TokenKind.ATTACHED_ARGUMENT, index, text=text)

    @classmethod
    def flag(cls, index: int) -> Token:
        return cls(TokenKind.FLAG, index)

    @classmethod
    def switch(cls, index: int, char: str) -> Token:
        return cls(TokenKind.SWITCH, index, char=char)

    @classmethod
    def empty_switch(cls, index: int) -> Token:
        return cls(TokenKind.EMPTY_SWITCH, index)

    @classmethod
    def ignore(cls, index: int, text: str) -> Token:
        return cls(TokenKind.IGNORE, index, text=text)

    @classmethod
    def terminator(cls, index: int) -> Token:
        return cls(TokenKind.TERMINATOR, index)

    def take_str(self) -> str:
        """
        Return the text payload of the token.

        Raises:
            TokenTextError: If the token is a flag, switch, or terminator.
        """
        if self.kind not in TEXT_KINDS or self.text is None:
            raise TokenTextError(f"Cannot read text from a {self.kind.value} token")
        return self.text


@dataclass(frozen=True)
class Tag:
    """Normalized identity of an option occurrence: a long name or a switch char."""

    is_switch: bool
    name: str

    @classmethod
    def flag(cls, name: str) -> Tag:
        return cls(False, name)

    @classmethod
    def switch(cls, char: str) -> Tag:
        return cls(True, char)

    def __str__(self) -> str:
        return f"{SWITCH_PREFIX if self.is_switch else FLAG_PREFIX}{self.name}"


@dataclass
class TokenStream:
    """Token slots plus the occurrence index built alongside them."""

    slots: list[Token | None] = field(default_factory=list)
    index: dict[Tag, list[int]] = field(default_factory=dict)

    def _register(self, tag: Tag) -> None:
        self.index.setdefault(tag, []).append(len(self.slots))

    def push_flag(self, i: int, name: str) -> None:
        self._register(Tag.flag(name))
        self.slots.append(Token.flag(i))

    def push_switches(self, i: int, bundle: str) -> None:
        """Push one SWITCH per character of `bundle`, or an EMPTY_SWITCH if empty."""
        if not bundle:
            self._register(Tag.switch(""))
            self.slots.append(Token.empty_switch(i))
            return
        for char in bundle:
            self._register(Tag.switch(char))
            self.slots.append(Token.switch(i, char))

    def push(self, token: Token) -> None:
        self.slots.append(token)

    def __len__(self) -> int:
        return len(self.slots)


def tokenize(args: Iterable[str]) -> TokenStream:
    """
    Lex raw process arguments into a `TokenStream`.

    The first argument is treated as the program name and skipped.

    Args:
        args (Iterable[str]): The raw argument list, e.g. `sys.argv`.

    Returns:
        TokenStream: The token slots and occurrence index.
    """
    stream = TokenStream()
    terminated = False
    iterator = iter(args)
    next(iterator, None)
    for i, arg in enumerate(iterator):
        if terminated:
            stream.push(Token.ignore(i, arg))
            continue

        if not arg.startswith(SWITCH_PREFIX):
            stream.push(Token.unattached(i, arg))
            continue

        value: str | None = None
        if "=" in arg:
            arg, value = arg.split("=", 1)

        if arg.startswith(FLAG_PREFIX):
            name = arg[len(FLAG_PREFIX) :]
            if not name:
                stream.push(Token.terminator(i))
                terminated = True
            else:
                stream.push_flag(i, name)
        else:
            stream.push_switches(i, arg[len(SWITCH_PREFIX) :])

        if value is not None:
            stream.push(Token.attached(i, value))

    logger.debug("Lexed %d token(s) with %d option tag(s).", len(stream), len(stream.index))
    return stream
