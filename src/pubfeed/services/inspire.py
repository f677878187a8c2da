"""INSPIRE-HEP literature client."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog

from pubfeed.errors import QueryError
from pubfeed.models import Paper
from pubfeed.settings import Settings

logger = structlog.get_logger(__name__)

FIELDS = "titles,authors.full_name,arxiv_eprints,preprint_date,abstracts"


class AuthorSource(Protocol):
    """Anything that can list recent papers for one author identifier."""

    async def query_author(self, identifier: str, cutoff: str) -> list[Paper]:
        ...


def build_query(identifier: str, cutoff: str) -> str:
    return f"a {identifier} and de > {cutoff}"


def parse_hit(hit: dict[str, Any]) -> Paper:
    """Map one API hit onto a Paper, tolerating missing fields."""
    metadata = hit.get("metadata") or {}
    titles = metadata.get("titles") or [{}]
    eprints = metadata.get("arxiv_eprints") or [{}]
    abstracts = metadata.get("abstracts") or [{}]
    return Paper(
        inspire_id=str(hit.get("id", "")),
        title=titles[0].get("title") or "",
        authors=[
            author.get("full_name", "")
            for author in metadata.get("authors") or []
        ],
        arxiv=eprints[0].get("value") or None,
        date=metadata.get("preprint_date") or None,
        abstract=abstracts[0].get("value") or "",
    )


class InspireClient:
    """Queries the literature endpoint one author at a time."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    def _params(self, identifier: str, cutoff: str) -> dict[str, str | int]:
        return {
            "sort": "mostrecent",
            "size": self._settings.page_size,
            "fields": FIELDS,
            "q": build_query(identifier, cutoff),
        }

    async def query_author(self, identifier: str, cutoff: str) -> list[Paper]:
        params = self._params(identifier, cutoff)
        logger.debug("inspire.query", bai=identifier, q=params["q"])
        try:
            response = await self._client.get(self._settings.inspire_base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "inspire.query_failed", bai=identifier, status=exc.response.status_code
            )
            return []
        except httpx.HTTPError as exc:
            raise QueryError(f"INSPIRE request for {identifier} failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise QueryError(f"INSPIRE returned a non-JSON body for {identifier}") from exc
        if not isinstance(payload, dict):
            raise QueryError(f"INSPIRE returned an unexpected payload for {identifier}")
        hits = (payload.get("hits") or {}).get("hits") or []
        return [parse_hit(hit) for hit in hits]
