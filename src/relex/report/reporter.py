"""Token reporting: drain a lexer, time it, and render the result.

Usage
-----
::

    from relex.report import ReportConfig, TokenReporter

    reporter = TokenReporter(ReportConfig(output_format="table"))
    report = reporter.scan("a + 1", label="<inline>")
    reporter.render(report)
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Literal

from rich.console import Console
from rich.table import Table

from relex.grammar.tokens import Token, TokenType
from relex.lexer.lexer import Lexer
from relex.report.serializer import TokenSerializer

logger = logging.getLogger(__name__)

OutputFormat = Literal["table", "debug", "json", "yaml"]

OUTPUT_FORMATS: tuple[str, ...] = ("table", "debug", "json", "yaml")


@dataclass
class ReportConfig:
    """Configuration for :class:`TokenReporter`.

    Parameters
    ----------
    output_format:
        ``table`` (rich table), ``debug`` (one token repr per line),
        ``json`` or ``yaml``.
    show_offsets:
        Include UTF-8 byte offset and length of every lexeme.
    show_timing:
        Print the time spent scanning after the tokens.
    """

    output_format: OutputFormat = "table"
    show_offsets: bool = False
    show_timing: bool = True

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}. "
                f"Available: {', '.join(OUTPUT_FORMATS)}"
            )


@dataclass
class ScanReport:
    """The outcome of scanning one source buffer.

    Parameters
    ----------
    label:
        Name of the source, usually its path.
    tokens:
        Every token produced, in order.
    elapsed_seconds:
        Wall-clock time spent draining the lexer.
    stopped_at:
        The unrecognised character that ended the scan, or ``None`` if
        the scan reached end of input.
    stopped_position:
        ``(line, col)`` of ``stopped_at``.
    """

    label: str
    tokens: list[Token] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    stopped_at: str | None = None
    stopped_position: tuple[int, int] | None = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def stopped_early(self) -> bool:
        return self.stopped_at is not None


def _format_elapsed(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


class TokenReporter:
    """Scans sources and renders their tokens to a rich console.

    Parameters
    ----------
    config:
        Rendering options.  Defaults to :class:`ReportConfig`.
    console:
        Destination console.  Defaults to stdout.
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self._config = config or ReportConfig()
        self._console = console or Console()
        self._serializer = TokenSerializer(include_offsets=self._config.show_offsets)

    @property
    def config(self) -> ReportConfig:
        return self._config

    def scan(self, source: str, label: str = "<string>") -> ScanReport:
        """Drain a fresh lexer over ``source`` and time the drain."""
        lexer = Lexer(source)
        start = time.perf_counter()
        tokens = list(lexer)
        elapsed = time.perf_counter() - start

        report = ScanReport(label=label, tokens=tokens, elapsed_seconds=elapsed)
        stopped = lexer.stopped_at()
        if stopped is not None:
            report.stopped_at = stopped.text
            report.stopped_position = lexer.stopped_position()
        logger.debug(
            "Scanned %s: %d token(s) in %.6fs", label, report.token_count, elapsed
        )
        return report

    def render(self, report: ScanReport) -> None:
        """Print ``report`` in the configured format."""
        fmt = self._config.output_format
        if fmt == "table":
            self._console.print(self._build_table(report))
        elif fmt == "debug":
            for token in report.tokens:
                self._console.print(repr(token), markup=False, highlight=False)
        elif fmt == "json":
            self._print_plain(self._serializer.to_json(report.tokens))
        else:
            self._print_plain(self._serializer.to_yaml(report.tokens).rstrip("\n"))

        if report.stopped_early:
            line, col = report.stopped_position or (0, 0)
            self._console.print(
                f"[yellow]Warning:[/yellow] {report.label}: scan stopped at "
                f"{line}:{col} on unrecognised character {report.stopped_at!r}",
                highlight=False,
            )
        if self._config.show_timing:
            self._console.print(
                f"Elapsed time: {_format_elapsed(report.elapsed_seconds)}",
                highlight=False,
            )

    def _print_plain(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _build_table(self, report: ScanReport) -> Table:
        table = Table(title=f"Tokens: {report.label}")
        table.add_column("Location", min_width=8)
        table.add_column("Kind", style="bold")
        table.add_column("Value")
        if self._config.show_offsets:
            table.add_column("Bytes", justify="right")

        for token in report.tokens:
            row = [
                f"{token.line}:{token.col}",
                token.type.name,
                _display_value(token),
            ]
            if self._config.show_offsets:
                row.append(f"{token.lexeme.byte_start}..{token.lexeme.byte_end}")
            table.add_row(*row)
        return table


def _display_value(token: Token) -> str:
    if token.type is TokenType.OPERATOR:
        return f"{token.value.name} ({token.text})"  # type: ignore[union-attr]
    if token.type is TokenType.IDENTIFIER:
        return str(token.value)
    if token.type is TokenType.NUMBER:
        return str(token.value)
    return token.text
