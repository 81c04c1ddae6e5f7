"""Backslash escape decoding.

No token rule in the current grammar produces string or character
literals, so nothing in the lexer calls :func:`decode_escape` yet.  It is
kept for the literal rules that will need it.  Only the three
single-character control escapes are supported; ``\\u`` and ``\\x`` are
reserved and abort, as does anything unknown.
"""
from __future__ import annotations

from typing import Final

_ESCAPE_MAP: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

# Escapes that are part of the language but not decoded yet.
RESERVED_ESCAPES: Final[frozenset[str]] = frozenset({"u", "x"})


def decode_escape(ch: str) -> str:
    """Return the character denoted by the escape ``\\<ch>``.

    Parameters
    ----------
    ch:
        The character following the backslash.

    Returns
    -------
    str
        The decoded character.

    Raises
    ------
    NotImplementedError
        For ``u``, ``x``, and any other escape not in the table.
    """
    try:
        return _ESCAPE_MAP[ch]
    except KeyError:
        if ch in RESERVED_ESCAPES:
            raise NotImplementedError(f"\\{ch} escapes are not implemented") from None
        raise NotImplementedError(f"Unknown escape sequence \\{ch}") from None
