"""Character cursor over a relex source buffer.

The cursor walks the source one Unicode scalar value at a time and
keeps exactly one character of lookahead.  It tracks four coordinates
for the lookahead character:

- ``index``: 0-based code-point index, used to slice the buffer
- ``offset``: 0-based UTF-8 byte offset
- ``row`` / ``col``: 1-based line and column

Once the source runs out the lookahead becomes ``EOF_CHAR`` and stays
there; advancing past the end is a no-op.
"""
from __future__ import annotations

from relex.grammar.tokens import SourceSlice

# Lookahead value once the source is exhausted.
EOF_CHAR: str = "\0"


def utf8_width(ch: str) -> int:
    """Return the number of bytes ``ch`` occupies in UTF-8."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


class Cursor:
    """Single-character lookahead cursor.

    Parameters
    ----------
    source:
        The complete source text.  It is never modified.
    """

    __slots__ = ("_source", "_length", "_index", "_offset", "_row", "_col", "_current")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._length: int = len(source)
        self._index: int = 0
        self._offset: int = 0
        self._row: int = 1
        self._col: int = 1
        self._current: str = source[0] if source else EOF_CHAR

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        return self._source

    @property
    def current(self) -> str:
        """The lookahead character, or ``EOF_CHAR``."""
        return self._current

    @property
    def index(self) -> int:
        return self._index

    @property
    def offset(self) -> int:
        return self._offset

    def position(self) -> tuple[int, int]:
        """Return the ``(row, col)`` of the lookahead character."""
        return (self._row, self._col)

    def is_exhausted(self) -> bool:
        """Return True once the lookahead is the end sentinel."""
        return self._index >= self._length

    def advance(self) -> str | None:
        """Consume the lookahead character.

        Returns
        -------
        str | None
            The new lookahead character, or ``None`` once the source is
            exhausted.
        """
        if self._index >= self._length:
            return None
        consumed = self._current
        self._index += 1
        self._offset += utf8_width(consumed)
        if consumed == "\n":
            self._row += 1
            self._col = 1
        else:
            self._col += 1
        if self._index < self._length:
            self._current = self._source[self._index]
            return self._current
        self._current = EOF_CHAR
        return None

    def peek(self) -> str | None:
        """Return the character after the lookahead without consuming it."""
        idx = self._index + 1
        return self._source[idx] if idx < self._length else None

    def slice_from(self, start_index: int, start_offset: int) -> SourceSlice:
        """Return a view from a recorded start up to the lookahead."""
        return SourceSlice(
            source=self._source,
            start=start_index,
            end=self._index,
            byte_start=start_offset,
            byte_end=self._offset,
        )
