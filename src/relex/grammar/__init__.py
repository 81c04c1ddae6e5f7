"""relex grammar module.

Exports token definitions.
"""
from __future__ import annotations

from relex.grammar.tokens import (
    INT32_MAX,
    INT32_MIN,
    Operator,
    SourceSlice,
    Token,
    TokenType,
    TokenValue,
)

__all__ = [
    "Operator",
    "TokenType",
    "TokenValue",
    "Token",
    "SourceSlice",
    "INT32_MIN",
    "INT32_MAX",
]
