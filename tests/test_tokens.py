import copy

import pytest

from regextok.tokens import ClassToken, LiteralToken, RangeToken, Token, TokenType


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TokenType.ZERO_OR_MORE, True),
        (TokenType.ONE_OR_MORE, True),
        (TokenType.ANYTHING, False),
        (TokenType.DIGIT, False),
        (TokenType.WORD, False),
        (TokenType.DEFAULT, False),
    ],
)
def test_is_quantitative_for_plain_tokens(kind, expected):
    assert Token(kind).is_quantitative() is expected


def test_subclass_tokens_are_not_quantitative():
    assert not LiteralToken("a").is_quantitative()
    assert not RangeToken("a", "z").is_quantitative()
    assert not ClassToken().is_quantitative()


def test_default_token_type():
    assert Token().type is TokenType.DEFAULT


def test_subclass_types():
    assert LiteralToken("x").type is TokenType.LITERAL
    assert RangeToken("a", "b").type is TokenType.RANGE
    assert ClassToken().type is TokenType.CLASS


def test_literal_str():
    assert str(LiteralToken("a")) == "Type: LITERAL equal to a (97)"


def test_range_str():
    assert str(RangeToken("a", "z")) == "Type: RANGE between a (97) and z (122)"


def test_class_str_wraps_members():
    char_class = ClassToken([LiteralToken("a"), RangeToken("0", "9")])
    lines = str(char_class).split("\n")
    assert lines[0] == "[CLASS]"
    assert lines[1] == "Type: CLASS containing : "
    assert lines[2] == str(LiteralToken("a"))
    assert lines[3] == str(RangeToken("0", "9"))
    assert lines[-1] == "[CLASS]"


def test_literal_requires_single_character():
    with pytest.raises(ValueError):
        LiteralToken("ab")
    with pytest.raises(ValueError):
        LiteralToken("")


def test_range_requires_single_characters():
    with pytest.raises(ValueError):
        RangeToken("ab", "c")
    with pytest.raises(ValueError):
        RangeToken("a", "")


def test_equality_by_value():
    assert LiteralToken("a") == LiteralToken("a")
    assert LiteralToken("a") != LiteralToken("b")
    assert RangeToken("a", "c") == RangeToken("a", "c")
    assert RangeToken("a", "c") != RangeToken("a", "d")
    assert Token(TokenType.DIGIT) == Token(TokenType.DIGIT)
    assert Token(TokenType.DIGIT) != Token(TokenType.WORD)


def test_different_kinds_are_not_equal():
    assert Token(TokenType.LITERAL) != LiteralToken("a")
    assert ClassToken() != Token(TokenType.CLASS)


def test_class_token_copies_members():
    inner = ClassToken([LiteralToken("a")])
    outer = ClassToken([inner])
    inner.tokens.append(LiteralToken("b"))
    assert outer.tokens == [ClassToken([LiteralToken("a")])]


def test_class_token_members_are_mutable_list():
    char_class = ClassToken()
    char_class.tokens.append(LiteralToken("q"))
    assert char_class.tokens == [LiteralToken("q")]


def test_deepcopy_of_class_token_is_independent():
    original = ClassToken([LiteralToken("a")])
    duplicate = copy.deepcopy(original)
    assert duplicate == original
    duplicate.tokens.append(LiteralToken("b"))
    assert len(original.tokens) == 1


def test_equal_tokens_collapse_in_a_set():
    literals = {LiteralToken("a"), LiteralToken("a"), LiteralToken("b")}
    assert len(literals) == 2
    classes = {ClassToken([RangeToken("a", "f")]), ClassToken([RangeToken("a", "f")])}
    assert len(classes) == 1
    assert ClassToken([RangeToken("a", "f")]) in classes