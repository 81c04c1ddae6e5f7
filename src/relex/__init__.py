"""relex — reusable lexer for a small expression language.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import relex

    # Pull tokens one at a time
    lexer = relex.Lexer("(width + 2) * height // area")
    token = lexer.next_token()

    # Or scan everything at once
    tokens = relex.tokenize("a >= b <> c")

    relex.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from relex.grammar.tokens import Operator, SourceSlice, Token, TokenType
from relex.lexer.lexer import Lexer, LexerState, tokenize

__all__ = [
    "__version__",
    "Lexer",
    "LexerState",
    "tokenize",
    "Token",
    "TokenType",
    "Operator",
    "SourceSlice",
]
