"""Fixtures shared by the relex unit, integration and quickstart tests."""
from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

import pytest

_PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@pytest.fixture(scope="session")
def project_version() -> str:
    """Version declared in ``pyproject.toml``; ``__version__`` must match it."""
    match = re.search(
        r'^version = "([^"]+)"', _PYPROJECT.read_text(encoding="utf-8"), re.MULTILINE
    )
    assert match is not None, "pyproject.toml has no version"
    return match.group(1)


@pytest.fixture()
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a ``.rx`` file under ``tmp_path``.

    Text is encoded as UTF-8; bytes are written unchanged so tests can
    build files with ``\\r\\n`` endings or invalid UTF-8.
    """

    def _write(content: str | bytes, name: str = "expr.rx") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
        return path

    return _write
