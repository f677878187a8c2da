"""Command-line entry point for pubfeed."""

from __future__ import annotations

import asyncio
import logging
import sys

import httpx
import structlog
import typer
from rich.console import Console

from pubfeed.errors import PubfeedError
from pubfeed.models import RunSummary
from pubfeed.services import InspireClient, PublicationAggregator, PublicationPipeline
from pubfeed.settings import Settings, get_settings

console = Console()
app = typer.Typer(help="pubfeed – fetch recent member publications from INSPIRE-HEP")
logger = structlog.get_logger(__name__)


def configure_logging(level: str) -> None:
    """Send structured log events to stderr, filtered at `level`."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.request_timeout)


def _print_progress(identifier: str, count: int) -> None:
    console.print(f"  {identifier}... {count} papers")


async def _run(settings: Settings) -> RunSummary:
    async with _build_client(settings) as client:
        aggregator = PublicationAggregator(
            InspireClient(client=client, settings=settings),
            delay=settings.request_delay,
            on_progress=_print_progress,
        )
        pipeline = PublicationPipeline(settings, aggregator)
        return await pipeline.run()


@app.command()
def fetch() -> None:
    """Fetch recent member papers and write the publications data file."""
    settings = get_settings()
    configure_logging(settings.log_level)
    console.print(f"Reading members from {settings.members_path}")
    try:
        summary = asyncio.run(_run(settings))
    except PubfeedError as exc:
        logger.error("pipeline.failed", error=str(exc))
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(
        f"Fetched papers since {summary.cutoff} for {summary.authors_queried} authors"
    )
    console.print(f"Total unique papers: {summary.unique_papers}")
    console.print(f"After keyword filtering: {summary.kept_papers} papers")
    console.print(f"[green]Written to[/green] {summary.output_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
