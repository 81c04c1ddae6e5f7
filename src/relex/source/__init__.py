"""Source acquisition.

Reads relex source files into the in-memory buffer handed to the
lexer.  All read failures surface here, before a lexer exists.
"""
from __future__ import annotations

from relex.source.reader import SourceReadError, read_source

__all__ = ["read_source", "SourceReadError"]
