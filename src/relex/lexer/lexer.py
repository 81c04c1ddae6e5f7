"""relex Lexer: turns source text into a lazily produced token stream.

The lexer is a pull-based scanner.  Each call to ``next_token()``
skips whitespace and ``//`` line comments, records the position of the
next character, dispatches on that character, and consumes exactly one
token.  Tokens are not buffered; iterating a ``Lexer`` scans as it goes.

Token shapes:
    - Identifiers start with an ASCII letter or ``_`` and continue with
      any alphanumeric character or ``_``.
    - Numbers are runs of digits parsed as 32-bit signed integers.  A run
      that does not fit, or is not plain ASCII digits, has the value 0.
    - Operators: ``+ - * / % = > >= < <= <>``.
    - Brackets: ``(`` and ``)``.

There is no error token.  The first character that cannot start a token
ends the scan exactly like end of input does.  ``stopped_at()`` tells the
two apart for callers that want to report it.
"""
from __future__ import annotations

import logging
import unicodedata
from enum import Enum, auto
from typing import Final

from relex.grammar.tokens import (
    INT32_MAX,
    INT32_MIN,
    Operator,
    SourceSlice,
    Token,
    TokenType,
    TokenValue,
)
from relex.lexer.cursor import Cursor, utf8_width

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_IDENT_START: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# General categories that continue a number run once a digit has started it.
_NUMERIC_CATEGORIES: Final[frozenset[str]] = frozenset({"Nd", "Nl", "No"})

# The ASCII information separators are not whitespace to this grammar.
_NOT_WHITESPACE: Final[frozenset[str]] = frozenset("\x1c\x1d\x1e\x1f")

# Operators that are never the prefix of a longer one.
_SINGLE_OPERATORS: Final[dict[str, Operator]] = {
    "+": Operator.PLUS,
    "-": Operator.MINUS,
    "*": Operator.MULTIPLY,
    "%": Operator.MODULO,
    "=": Operator.EQUAL,
}

_BRACKETS: Final[dict[str, TokenType]] = {
    "(": TokenType.OPENING_BRACKET,
    ")": TokenType.CLOSING_BRACKET,
}


class LexerState(Enum):
    """Lifecycle of a ``Lexer``.  ``EXHAUSTED`` is terminal."""

    SCANNING = auto()
    EXHAUSTED = auto()


def parse_int32(digits: str) -> int:
    """Parse a digit run as a 32-bit signed integer, or return 0."""
    if not digits.isascii() or not digits.isdigit():
        return 0
    value = int(digits)
    if value < INT32_MIN or value > INT32_MAX:
        return 0
    return value


class Lexer:
    """Pull-based relex lexer.

    Parameters
    ----------
    source:
        The complete source text to scan.  Tokens keep views into it.
    """

    __slots__ = ("_cursor", "_state", "_stopped_at", "_stopped_position")

    def __init__(self, source: str) -> None:
        self._cursor: Cursor = Cursor(source)
        self._state: LexerState = LexerState.SCANNING
        self._stopped_at: SourceSlice | None = None
        self._stopped_position: tuple[int, int] | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        return self._cursor.source

    @property
    def state(self) -> LexerState:
        return self._state

    def is_exhausted(self) -> bool:
        return self._state is LexerState.EXHAUSTED

    def position(self) -> tuple[int, int]:
        """Return the ``(line, col)`` the next scan would start from."""
        return self._cursor.position()

    def stopped_at(self) -> SourceSlice | None:
        """Return the unrecognised character that ended the scan, if any.

        ``None`` while scanning and when the scan ended at end of input.
        """
        return self._stopped_at

    def stopped_position(self) -> tuple[int, int] | None:
        """Return the ``(line, col)`` of ``stopped_at()``, if any."""
        return self._stopped_position

    def next_token(self) -> Token | None:
        """Scan and return the next token, or ``None`` once exhausted."""
        if self._state is LexerState.EXHAUSTED:
            return None

        cursor = self._cursor
        while True:
            self._trim_whitespace()
            line, col = cursor.position()
            start_index = cursor.index
            start_offset = cursor.offset
            ch = cursor.current

            if ch == "/" and cursor.peek() == "/":
                self._trim_comment()
                continue

            scanned = self._scan(ch)
            if scanned is None:
                self._exhaust(start_index, start_offset)
                return None

            token_type, value = scanned
            return Token(
                type=token_type,
                value=value,
                line=line,
                col=col,
                lexeme=cursor.slice_from(start_index, start_offset),
            )

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _scan(self, ch: str) -> tuple[TokenType, TokenValue] | None:
        """Consume one token starting at ``ch``; ``None`` if none starts here."""
        cursor = self._cursor

        if ch in _IDENT_START:
            return TokenType.IDENTIFIER, self._scan_identifier()

        if ch in _DIGITS:
            return TokenType.NUMBER, parse_int32(self._scan_digits().text)

        if ch in _SINGLE_OPERATORS:
            cursor.advance()
            return TokenType.OPERATOR, _SINGLE_OPERATORS[ch]

        if ch == "/":
            cursor.advance()
            return TokenType.OPERATOR, Operator.DIVIDE

        if ch == ">":
            cursor.advance()
            if cursor.current == "=":
                cursor.advance()
                return TokenType.OPERATOR, Operator.GREATER_OR_EQUAL
            return TokenType.OPERATOR, Operator.GREATER

        if ch == "<":
            cursor.advance()
            if cursor.current == "=":
                cursor.advance()
                return TokenType.OPERATOR, Operator.LESS_OR_EQUAL
            if cursor.current == ">":
                cursor.advance()
                return TokenType.OPERATOR, Operator.NOT_EQUAL
            return TokenType.OPERATOR, Operator.LESS

        if ch in _BRACKETS:
            cursor.advance()
            return _BRACKETS[ch], None

        return None

    def _scan_identifier(self) -> SourceSlice:
        cursor = self._cursor
        start_index, start_offset = cursor.index, cursor.offset
        while not cursor.is_exhausted() and (cursor.current.isalnum() or cursor.current == "_"):
            cursor.advance()
        return cursor.slice_from(start_index, start_offset)

    def _scan_digits(self) -> SourceSlice:
        cursor = self._cursor
        start_index, start_offset = cursor.index, cursor.offset
        while not cursor.is_exhausted() and (
            unicodedata.category(cursor.current) in _NUMERIC_CATEGORIES
        ):
            cursor.advance()
        return cursor.slice_from(start_index, start_offset)

    def _trim_comment(self) -> None:
        """Consume a ``//`` comment up to, not including, the line feed."""
        cursor = self._cursor
        while not cursor.is_exhausted() and cursor.current != "\n":
            cursor.advance()

    def _trim_whitespace(self) -> None:
        cursor = self._cursor
        while not cursor.is_exhausted():
            ch = cursor.current
            if not ch.isspace() or ch in _NOT_WHITESPACE:
                return
            cursor.advance()

    def _exhaust(self, start_index: int, start_offset: int) -> None:
        self._state = LexerState.EXHAUSTED
        cursor = self._cursor
        if cursor.is_exhausted():
            return
        # Stopped on a character no rule accepts, not at end of input.
        # The cursor is left on it.
        line, col = cursor.position()
        self._stopped_position = (line, col)
        self._stopped_at = SourceSlice(
            cursor.source,
            start_index,
            start_index + 1,
            start_offset,
            start_offset + utf8_width(cursor.current),
        )
        logger.debug(
            "Scan stopped on unrecognised character %r at %d:%d (byte %d)",
            self._stopped_at.text,
            line,
            col,
            start_offset,
        )


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str) -> list[Token]:
    """Scan a whole source string and return every token.

    Parameters
    ----------
    source:
        relex source text.

    Returns
    -------
    list[Token]
        All tokens up to end of input or the first unrecognised
        character.

    Example
    -------
    ::

        from relex.lexer import tokenize
        tokens = tokenize("(a + 1) <> b")
    """
    return list(Lexer(source))
