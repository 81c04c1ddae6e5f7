"""relex Lexer module.

Exports the ``Lexer`` class, its ``Cursor``, and the ``tokenize``
convenience function.
"""
from __future__ import annotations

from relex.lexer.cursor import EOF_CHAR, Cursor
from relex.lexer.escapes import decode_escape
from relex.lexer.lexer import Lexer, LexerState, parse_int32, tokenize

__all__ = [
    "Lexer",
    "LexerState",
    "Cursor",
    "EOF_CHAR",
    "tokenize",
    "parse_int32",
    "decode_escape",
]
