"""Token types produced when a pattern is split into its lexical parts."""

from __future__ import annotations

import copy
from enum import Enum, auto
from typing import Iterable


class TokenType(Enum):
    """Every kind of token a pattern can contain."""

    DEFAULT = auto()
    ANYTHING = auto()
    DIGIT = auto()
    WORD = auto()
    CHAR_CLASS_START = auto()
    CHAR_CLASS_END = auto()
    RANGE = auto()
    LITERAL = auto()
    CLASS = auto()
    ZERO_OR_MORE = auto()
    ONE_OR_MORE = auto()


_QUANTIFIERS = frozenset({TokenType.ZERO_OR_MORE, TokenType.ONE_OR_MORE})


def _single_char(value: str, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


class Token:
    """A token identified only by its type."""

    __slots__ = ("type",)

    def __init__(self, type: TokenType = TokenType.DEFAULT) -> None:
        self.type = TokenType(type)

    def is_quantitative(self) -> bool:
        """Return True if the token repeats the token before it."""
        return self.type in _QUANTIFIERS

    def _key(self) -> tuple:
        return (self.type,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token) or type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        return f"Token({self.type.name})"

    def __str__(self) -> str:
        return f"Type: {self.type.name}"


class LiteralToken(Token):
    """A single literal character."""

    __slots__ = ("literal",)

    def __init__(self, literal: str) -> None:
        super().__init__(TokenType.LITERAL)
        self.literal = _single_char(literal, "literal")

    def _key(self) -> tuple:
        return (self.type, self.literal)

    def __repr__(self) -> str:
        return f"LiteralToken({self.literal!r})"

    def __str__(self) -> str:
        return f"Type: LITERAL equal to {self.literal} ({ord(self.literal)})"


class RangeToken(Token):
    """A character range such as ``a-z`` inside a class."""

    __slots__ = ("start", "end")

    def __init__(self, start: str, end: str) -> None:
        super().__init__(TokenType.RANGE)
        self.start = _single_char(start, "range start")
        self.end = _single_char(end, "range end")

    def _key(self) -> tuple:
        return (self.type, self.start, self.end)

    def __repr__(self) -> str:
        return f"RangeToken({self.start!r}, {self.end!r})"

    def __str__(self) -> str:
        return (
            f"Type: RANGE between {self.start} ({ord(self.start)}) "
            f"and {self.end} ({ord(self.end)})"
        )


class ClassToken(Token):
    """A bracketed character class holding its member tokens."""

    __slots__ = ("tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        super().__init__(TokenType.CLASS)
        self.tokens: list[Token] = [copy.deepcopy(token) for token in tokens]

    def _key(self) -> tuple:
        return (self.type, tuple(self.tokens))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        return f"ClassToken({self.tokens!r})"

    def __str__(self) -> str:
        lines = ["[CLASS]", "Type: CLASS containing : "]
        lines.extend(str(token) for token in self.tokens)
        lines.append("[CLASS]")
        return "\n".join(lines)