"""Splitting a pattern into tokens and grouping them into syntax nodes."""

from __future__ import annotations

from typing import Iterable, Iterator

from .astnode import AstNode
from .tokens import ClassToken, LiteralToken, RangeToken, Token, TokenType

UNBOUNDED = 2**31 - 1
"""Upper repeat bound used for ``*`` and ``+``."""


class InvalidPatternError(ValueError):
    """Raised when a pattern cannot be tokenized."""

    def __init__(self, message: str = "Invalid pattern exception") -> None:
        super().__init__(message)


_SIMPLE = {
    "+": TokenType.ONE_OR_MORE,
    "*": TokenType.ZERO_OR_MORE,
    ".": TokenType.ANYTHING,
}

_ESCAPED_TYPES = {"d": TokenType.DIGIT, "w": TokenType.WORD}
_ESCAPED_LITERALS = {"s": " ", "n": "\n", "t": "\t"}


def translate_escaped(char: str) -> Token:
    """Return the token denoted by a backslash followed by ``char``."""
    if char in _ESCAPED_TYPES:
        return Token(_ESCAPED_TYPES[char])
    return LiteralToken(_ESCAPED_LITERALS.get(char, char))


def _next_char(chars: Iterator[str]) -> str:
    try:
        return next(chars)
    except StopIteration:
        raise InvalidPatternError() from None


def _span(start: str, end: str) -> Token:
    return LiteralToken(start) if start == end else RangeToken(start, end)


def is_syntax_valid(tokens: Iterable[Token]) -> bool:
    """Return False if a quantifier starts the list or follows another one."""
    previous_quantifier = True
    for token in tokens:
        quantifier = token.is_quantitative()
        if previous_quantifier and quantifier:
            return False
        previous_quantifier = quantifier
    return True


def tokenize(pattern: str) -> list[Token]:
    """Split ``pattern`` into tokens, raising InvalidPatternError if malformed."""
    tokens: list[Token] = []
    members: list[Token] | None = None
    chars = iter(pattern)

    for char in chars:
        if members is None:
            if char == "[":
                members = []
            elif char in _SIMPLE:
                tokens.append(Token(_SIMPLE[char]))
            elif char == "\\":
                tokens.append(translate_escaped(_next_char(chars)))
            else:
                tokens.append(LiteralToken(char))
        elif char == "]":
            if not members:
                raise InvalidPatternError()
            tokens.append(ClassToken(members))
            members = None
        elif char == "\\":
            members.append(translate_escaped(_next_char(chars)))
        elif char == "-" and members and isinstance(members[-1], LiteralToken):
            start = members[-1].literal
            following = _next_char(chars)
            if following == "\\":
                escaped = translate_escaped(_next_char(chars))
                if isinstance(escaped, LiteralToken):
                    members[-1] = _span(start, escaped.literal)
                else:
                    members.extend([LiteralToken("-"), escaped])
            elif following != "]":
                members[-1] = _span(start, following)
            else:
                members.append(LiteralToken("-"))
                tokens.append(ClassToken(members))
                members = None
        else:
            members.append(LiteralToken(char))

    if members is not None or not is_syntax_valid(tokens):
        raise InvalidPatternError()
    return tokens


def transform_to_ast(tokens: Iterable[Token]) -> list[AstNode]:
    """Turn tokens into nodes, folding each quantifier into the node before it."""
    ast: list[AstNode] = []
    for token in tokens:
        if not token.is_quantitative():
            ast.append(AstNode(token))
            continue
        if not ast:
            raise InvalidPatternError()
        node = ast[-1]
        if token.type is TokenType.ZERO_OR_MORE:
            node.min_count, node.max_count = 0, UNBOUNDED
        elif token.type is TokenType.ONE_OR_MORE:
            node.min_count, node.max_count = 1, UNBOUNDED
    return ast