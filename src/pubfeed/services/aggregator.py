"""Merge per-author results, then filter and order them for publishing."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, Sequence

import structlog

from pubfeed.models import AggregatedPaper, Paper, PublicationEntry
from .inspire import AuthorSource

logger = structlog.get_logger(__name__)

ProgressCallback = Callable[[str, int], None]


def matches_keywords(paper: Paper, keywords: Iterable[str]) -> bool:
    text = f"{paper.title} {paper.abstract}".lower()
    return any(keyword.lower() in text for keyword in keywords)


def sort_by_date(entries: Iterable[PublicationEntry]) -> list[PublicationEntry]:
    """Newest first; entries without a date go last."""
    return sorted(entries, key=lambda entry: entry.date or "", reverse=True)


class PublicationAggregator:
    """Runs author queries strictly one after another with a pause in between."""

    def __init__(
        self,
        source: AuthorSource,
        *,
        delay: float = 0.2,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._source = source
        self._delay = delay
        self._sleep = sleep
        self._on_progress = on_progress

    async def aggregate(
        self, identifiers: Sequence[str], cutoff: str
    ) -> dict[str, AggregatedPaper]:
        papers: dict[str, AggregatedPaper] = {}
        for identifier in identifiers:
            results = await self._source.query_author(identifier, cutoff)
            for paper in results:
                item = papers.get(paper.inspire_id)
                if item is None:
                    item = papers[paper.inspire_id] = AggregatedPaper(paper=paper)
                item.credit(identifier)
            logger.info("aggregate.author", bai=identifier, count=len(results))
            if self._on_progress is not None:
                self._on_progress(identifier, len(results))
            await self._sleep(self._delay)
        logger.info("aggregate.done", authors=len(identifiers), unique=len(papers))
        return papers

    @staticmethod
    def select(
        papers: dict[str, AggregatedPaper], keywords: Sequence[str]
    ) -> list[PublicationEntry]:
        """Keep keyword matches and project them to output entries, newest first."""
        kept = [
            PublicationEntry.from_aggregate(item)
            for item in papers.values()
            if matches_keywords(item.paper, keywords)
        ]
        return sort_by_date(kept)
