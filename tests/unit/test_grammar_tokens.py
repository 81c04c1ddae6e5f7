"""Unit tests for relex.grammar.tokens — enums, SourceSlice, and Token."""
from __future__ import annotations

import dataclasses

import pytest

from relex.grammar.tokens import INT32_MAX, INT32_MIN, Operator, SourceSlice, Token, TokenType


def _slice(source: str, start: int, end: int) -> SourceSlice:
    byte_start = len(source[:start].encode("utf-8"))
    byte_end = byte_start + len(source[start:end].encode("utf-8"))
    return SourceSlice(source, start, end, byte_start, byte_end)


# ---------------------------------------------------------------------------
# Operator enum
# ---------------------------------------------------------------------------


class TestOperatorEnum:
    def test_operator_set_is_closed_at_eleven(self) -> None:
        assert len(Operator) == 11

    @pytest.mark.parametrize("op, symbol", [
        (Operator.PLUS, "+"),
        (Operator.MINUS, "-"),
        (Operator.MULTIPLY, "*"),
        (Operator.DIVIDE, "/"),
        (Operator.MODULO, "%"),
        (Operator.EQUAL, "="),
        (Operator.NOT_EQUAL, "<>"),
        (Operator.GREATER, ">"),
        (Operator.GREATER_OR_EQUAL, ">="),
        (Operator.LESS, "<"),
        (Operator.LESS_OR_EQUAL, "<="),
    ])
    def test_symbol(self, op: Operator, symbol: str) -> None:
        assert op.symbol == symbol


class TestTokenTypeEnum:
    def test_token_type_members(self) -> None:
        assert {t.name for t in TokenType} == {
            "OPERATOR", "IDENTIFIER", "NUMBER", "OPENING_BRACKET", "CLOSING_BRACKET",
        }

    def test_int32_bounds(self) -> None:
        assert INT32_MIN == -2147483648
        assert INT32_MAX == 2147483647


# ---------------------------------------------------------------------------
# SourceSlice
# ---------------------------------------------------------------------------


class TestSourceSlice:
    def test_text_is_substring_of_source(self) -> None:
        s = _slice("foo bar", 4, 7)
        assert s.text == "bar"
        assert str(s) == "bar"
        assert len(s) == 3

    def test_slice_shares_the_source_buffer(self) -> None:
        source = "alpha beta"
        s = _slice(source, 0, 5)
        assert s.source is source

    def test_equality_with_str(self) -> None:
        assert _slice("abc", 0, 2) == "ab"
        assert _slice("abc", 0, 2) != "abc"

    def test_equal_text_at_different_offsets_is_not_equal(self) -> None:
        assert _slice("a a", 0, 1) != _slice("a a", 2, 3)

    def test_hashable(self) -> None:
        assert len({_slice("a a", 0, 1), _slice("a a", 0, 1)}) == 1

    def test_byte_length_counts_utf8_bytes(self) -> None:
        s = _slice("xé", 0, 2)
        assert len(s) == 2
        assert s.byte_length == 3

    def test_frozen(self) -> None:
        s = _slice("abc", 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.start = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------


class TestToken:
    def test_position_and_offset(self) -> None:
        lexeme = _slice("x + y", 2, 3)
        token = Token(TokenType.OPERATOR, Operator.PLUS, 1, 3, lexeme)
        assert token.position == (1, 3)
        assert token.offset == 2
        assert token.text == "+"

    def test_is_op(self) -> None:
        token = Token(TokenType.OPERATOR, Operator.LESS, 1, 1, _slice("<", 0, 1))
        assert token.is_operator
        assert token.is_op(Operator.LESS)
        assert not token.is_op(Operator.LESS_OR_EQUAL)

    def test_non_operator_is_never_op(self) -> None:
        token = Token(TokenType.NUMBER, 1, 1, 1, _slice("1", 0, 1))
        assert not token.is_operator
        assert not token.is_op(Operator.PLUS)

    @pytest.mark.parametrize("token, expected", [
        (Token(TokenType.OPERATOR, Operator.NOT_EQUAL, 1, 2, _slice("a<>", 1, 3)),
         "Token(OPERATOR(NOT_EQUAL), 1:2)"),
        (Token(TokenType.IDENTIFIER, _slice("foo", 0, 3), 1, 1, _slice("foo", 0, 3)),
         "Token(IDENTIFIER('foo'), 1:1)"),
        (Token(TokenType.NUMBER, 42, 3, 7, _slice("42", 0, 2)),
         "Token(NUMBER(42), 3:7)"),
        (Token(TokenType.OPENING_BRACKET, None, 1, 1, _slice("(", 0, 1)),
         "Token(OPENING_BRACKET, 1:1)"),
    ])
    def test_repr(self, token: Token, expected: str) -> None:
        assert repr(token) == expected

    def test_frozen(self) -> None:
        token = Token(TokenType.NUMBER, 1, 1, 1, _slice("1", 0, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.line = 2  # type: ignore[misc]
