"""Unit tests for relex.source — reading source files."""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from relex.source import SourceReadError, read_source

WriteSource = Callable[..., Path]


class TestReadSource:
    def test_reads_utf8_text(self, write_source: WriteSource) -> None:
        assert read_source(write_source("naïve + 1\n")) == "naïve + 1\n"

    def test_accepts_str_path(self, write_source: WriteSource) -> None:
        assert read_source(str(write_source(b"x"))) == "x"

    def test_line_endings_are_preserved(self, write_source: WriteSource) -> None:
        path = write_source(b"a\r\nb\r\n", name="crlf.rx")
        assert read_source(path) == "a\r\nb\r\n"

    def test_empty_file(self, write_source: WriteSource) -> None:
        assert read_source(write_source(b"", name="empty.rx")) == ""


class TestReadErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.rx"
        with pytest.raises(SourceReadError) as exc_info:
            read_source(path)
        assert exc_info.value.path == str(path)
        assert exc_info.value.reason == "file not found"
        assert "missing.rx" in str(exc_info.value)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            read_source(tmp_path)

    def test_invalid_utf8(self, write_source: WriteSource) -> None:
        path = write_source(b"ab\xff", name="bad.rx")
        with pytest.raises(SourceReadError) as exc_info:
            read_source(path)
        assert "invalid UTF-8 at byte 2" in str(exc_info.value)
