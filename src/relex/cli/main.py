"""CLI entry point for relex.

Invoked as::

    relex [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m relex.cli.main

Commands
--------
lex         Scan source files and print their tokens
version     Show version information
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from relex.report import OUTPUT_FORMATS, ReportConfig, TokenReporter
from relex.source import SourceReadError, read_source

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _read_source_or_exit(path: str) -> str:
    """Read a source file, exiting on error."""
    try:
        return read_source(path)
    except SourceReadError as exc:
        err_console.print(f"[red]Error:[/red] {exc}", highlight=False)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="relex")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging threshold for diagnostic output on stderr.",
)
def cli(log_level: str) -> None:
    """Reusable lexer for a small expression language."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from relex import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]relex[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# lex command
# ---------------------------------------------------------------------------


@cli.command(name="lex")
@click.argument("files", nargs=-1, type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="table",
    help="Token output format",
)
@click.option("--offsets", is_flag=True, default=False, help="Show UTF-8 byte offsets of each lexeme")
@click.option("--no-timing", is_flag=True, default=False, help="Do not print the elapsed scan time")
def lex_command(files: tuple[str, ...], output_format: str, offsets: bool, no_timing: bool) -> None:
    """Scan source files and print their tokens.

    FILES are paths to source files.  Each file is read and scanned in
    turn; with no FILES nothing is done.

    Examples:

    \b
        relex lex expr.rx
        relex lex expr.rx --format json --offsets
    """
    config = ReportConfig(
        output_format=output_format.lower(),  # type: ignore[arg-type]
        show_offsets=offsets,
        show_timing=not no_timing,
    )
    reporter = TokenReporter(config, console=console)

    for path in files:
        source = _read_source_or_exit(path)
        reporter.render(reporter.scan(source, label=path))


if __name__ == "__main__":
    cli()
