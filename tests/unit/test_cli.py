"""Unit tests for relex.cli.main — the ``lex`` and ``version`` commands."""
from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from relex.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def source_file(write_source: Callable[..., Path]) -> Path:
    return write_source("// area\n(width + 2) * height\n")


class TestLexCommand:
    def test_debug_output(self, runner: CliRunner, source_file: Path) -> None:
        result = runner.invoke(cli, ["lex", str(source_file), "--format", "debug"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Token(OPENING_BRACKET, 2:1)"
        assert "Token(IDENTIFIER('height'), 2:15)" in lines
        assert lines[-1].startswith("Elapsed time: ")

    def test_json_output_without_timing(self, runner: CliRunner, source_file: Path) -> None:
        result = runner.invoke(
            cli, ["lex", str(source_file), "--format", "json", "--no-timing", "--offsets"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 7
        assert data[1] == {"kind": "IDENTIFIER", "value": "width", "line": 2, "col": 2, "offset": 9, "length": 5}

    def test_multiple_files_are_scanned_in_order(
        self, runner: CliRunner, write_source: Callable[..., Path]
    ) -> None:
        first = write_source("1", name="a.rx")
        second = write_source("2", name="b.rx")
        result = runner.invoke(
            cli, ["lex", str(first), str(second), "--format", "debug", "--no-timing"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Token(NUMBER(1), 1:1)", "Token(NUMBER(2), 1:1)"]

    def test_no_files_is_a_no_op(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lex"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_missing_file_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["lex", str(tmp_path / "nope.rx")])
        assert result.exit_code == 1

    def test_table_output(self, runner: CliRunner, source_file: Path) -> None:
        result = runner.invoke(cli, ["lex", str(source_file), "--no-timing"])
        assert result.exit_code == 0
        assert "MULTIPLY" in result.output

    def test_invalid_format_rejected(self, runner: CliRunner, source_file: Path) -> None:
        result = runner.invoke(cli, ["lex", str(source_file), "--format", "xml"])
        assert result.exit_code != 0


class TestVersionCommand:
    def test_version_command(self, runner: CliRunner) -> None:
        from relex import __version__

        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert f"v{__version__}" in result.output

    def test_log_level_option_configures_logging(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ["--log-level", "debug", "version"])
        assert result.exit_code == 0
        assert calls[0]["level"] == logging.DEBUG
