"""End-to-end run: roster in, publications file out."""

from __future__ import annotations

from datetime import datetime

import structlog

from pubfeed.exporters import write_publications
from pubfeed.models import RunSummary
from pubfeed.settings import Settings
from pubfeed.utils import compute_cutoff
from .aggregator import PublicationAggregator
from .roster import author_identifiers, load_roster

logger = structlog.get_logger(__name__)


class PublicationPipeline:
    """Coordinates roster loading, aggregation, filtering and export."""

    def __init__(self, settings: Settings, aggregator: PublicationAggregator) -> None:
        self._settings = settings
        self._aggregator = aggregator

    async def run(self, *, now: datetime | None = None) -> RunSummary:
        roster = load_roster(self._settings.members_path)
        identifiers = author_identifiers(roster)
        cutoff = compute_cutoff(now, months=self._settings.lookback_months)
        logger.info("pipeline.start", cutoff=cutoff, authors=len(identifiers))

        papers = await self._aggregator.aggregate(identifiers, cutoff)
        entries = self._aggregator.select(papers, self._settings.keywords)
        logger.info("pipeline.filtered", unique=len(papers), kept=len(entries))

        output = write_publications(self._settings.output_path, entries)
        return RunSummary(
            cutoff=cutoff,
            authors_queried=len(identifiers),
            unique_papers=len(papers),
            kept_papers=len(entries),
            output_path=output,
        )
