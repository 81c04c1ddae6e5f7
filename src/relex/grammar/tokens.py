"""Token definitions for the relex expression language.

Defines the complete token vocabulary produced by the lexer.  Every
token kind is a member of the ``TokenType`` enum, every operator is a
member of the ``Operator`` enum, and every scanned token is a ``Token``
dataclass carrying its kind, payload, source position, and a
``SourceSlice`` view of the lexeme it was scanned from.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

# Upper and lower bounds of a NUMBER payload (32-bit signed).
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


class Operator(Enum):
    """Arithmetic and relational operators."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    EQUAL = "="
    NOT_EQUAL = "<>"
    GREATER = ">"
    GREATER_OR_EQUAL = ">="
    LESS = "<"
    LESS_OR_EQUAL = "<="

    @property
    def symbol(self) -> str:
        """Return the operator as it is written in source."""
        return self.value


class TokenType(Enum):
    """Exhaustive enumeration of relex token kinds."""

    OPERATOR = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    OPENING_BRACKET = auto()
    CLOSING_BRACKET = auto()


@dataclass(frozen=True, slots=True)
class SourceSlice:
    """A view into the source buffer a token was scanned from.

    The slice keeps a reference to the buffer rather than a copy of the
    text; ``text`` materialises the substring on demand.

    Parameters
    ----------
    source:
        The complete source buffer handed to the lexer.
    start:
        0-based code-point index of the first character.
    end:
        0-based code-point index one past the last character.
    byte_start:
        0-based UTF-8 byte offset of the first character.
    byte_end:
        0-based UTF-8 byte offset one past the last character.
    """

    source: str
    start: int
    end: int
    byte_start: int
    byte_end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    @property
    def byte_length(self) -> int:
        return self.byte_end - self.byte_start

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SourceSlice({self.text!r}, {self.byte_start}..{self.byte_end})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.text == other
        if isinstance(other, SourceSlice):
            return self.text == other.text and self.byte_start == other.byte_start
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.text, self.byte_start))


TokenValue = Union[Operator, SourceSlice, int, None]


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token with source-location metadata.

    ``type`` and ``value`` together form the token kind:

    ===================  ===============
    ``type``             ``value``
    ===================  ===============
    ``OPERATOR``         ``Operator``
    ``IDENTIFIER``       ``SourceSlice``
    ``NUMBER``           ``int``
    ``*_BRACKET``        ``None``
    ===================  ===============

    Parameters
    ----------
    type:
        The ``TokenType`` variant for this token.
    value:
        The kind-specific payload, see above.
    line:
        1-based line number of the first character of the lexeme.
    col:
        1-based column number of the first character of the lexeme.
    lexeme:
        View of every source character the token consumed.
    """

    type: TokenType
    value: TokenValue
    line: int
    col: int
    lexeme: SourceSlice

    def __repr__(self) -> str:
        if self.type is TokenType.OPERATOR:
            payload = f"({self.value.name})"  # type: ignore[union-attr]
        elif self.type is TokenType.IDENTIFIER:
            payload = f"({str(self.value)!r})"
        elif self.type is TokenType.NUMBER:
            payload = f"({self.value})"
        else:
            payload = ""
        return f"Token({self.type.name}{payload}, {self.line}:{self.col})"

    @property
    def position(self) -> tuple[int, int]:
        """Return ``(line, col)`` of the token start."""
        return (self.line, self.col)

    @property
    def offset(self) -> int:
        """Return the UTF-8 byte offset of the token start."""
        return self.lexeme.byte_start

    @property
    def text(self) -> str:
        return self.lexeme.text

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    def is_op(self, op: Operator) -> bool:
        """Return True if this token is the operator ``op``."""
        return self.type is TokenType.OPERATOR and self.value is op
