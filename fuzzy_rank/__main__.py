from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from fuzzy_rank import __version__
from fuzzy_rank.dictionary import load_dictionary
from fuzzy_rank.models import Match
from fuzzy_rank.rendering import highlight_match
from fuzzy_rank.search import best_match, find
from fuzzy_rank.tui import FuzzyFinderTui

__all__ = [
    "FuzzyFinderTui",
    "cli",
    "run",
]

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-rank {__version__}")
    raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_match_line(match: Match) -> Text:
    return Text.assemble(f"{match.score:>6} {match.index:>6} ", highlight_match(match))


cli = typer.Typer(
    add_completion=False,
    help="Rank dictionary entries against a fuzzy pattern.",
)


@cli.command()
def run(
    dictionary: Path = typer.Argument(
        ...,
        help="Newline-delimited list of candidates (file names, symbols, ...).",
    ),
    query: str | None = typer.Option(
        None,
        "--query",
        "-q",
        help="Print matches for this pattern instead of starting the finder.",
    ),
    best: bool = typer.Option(
        False,
        "--best",
        help="Only print the best match.",
    ),
    limit: int = typer.Option(
        FuzzyFinderTui.DEFAULT_RESULT_LIMIT,
        "--limit",
        "-n",
        min=1,
        help="Maximum number of matches to show.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help=f"Logging verbosity, one of {', '.join(LOG_LEVELS)}.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Rank dictionary entries against a fuzzy pattern."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        typer.echo(f"Unknown log level: {log_level}", err=True)
        raise typer.Exit(code=2)
    _configure_logging(level)

    try:
        candidates = load_dictionary(dictionary)
    except OSError as exc:
        typer.echo(f"Cannot read dictionary {dictionary}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=1) from exc

    if query is None:
        FuzzyFinderTui(candidates, limit=limit).run()
        return

    pattern = query.strip()
    if best:
        match = best_match(pattern, candidates)
        matches = [match] if match is not None else []
    else:
        matches = find(pattern, candidates)[:limit]

    if not matches:
        typer.echo(f"No candidates match {pattern!r}.", err=True)
        raise typer.Exit(code=1)

    logger.info("Printing %d matches for %r", len(matches), pattern)
    console = Console(highlight=False, soft_wrap=True)
    for match in matches:
        console.print(format_match_line(match))


if __name__ == "__main__":
    cli()
