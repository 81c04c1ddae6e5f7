"""Read relex source text from disk."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceReadError(Exception):
    """Raised when a source file cannot be read.

    Parameters
    ----------
    path:
        The path that was being read.
    reason:
        Human-readable description of the failure.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = str(path)
        self.reason = reason


def read_source(path: str | Path) -> str:
    """Read a UTF-8 source file and return its complete text.

    Parameters
    ----------
    path:
        Path of the file to read.

    Returns
    -------
    str
        The decoded file contents.

    Raises
    ------
    SourceReadError
        If the file does not exist, cannot be read, or is not valid UTF-8.
    """
    file_path = Path(path)
    try:
        # Bytes, not read_text(): line endings must reach the lexer as-is.
        data = file_path.read_bytes()
    except FileNotFoundError:
        raise SourceReadError(path, "file not found") from None
    except IsADirectoryError:
        raise SourceReadError(path, "is a directory") from None
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SourceReadError(path, f"invalid UTF-8 at byte {exc.start}") from exc
    logger.debug("Read %d characters from %s", len(text), file_path)
    return text
