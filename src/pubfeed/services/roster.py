"""Roster loading: who we fetch publications for."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog
import yaml
from pydantic import ValidationError

from pubfeed.errors import RosterError
from pubfeed.models import RosterEntry

logger = structlog.get_logger(__name__)


def load_roster(path: Path) -> list[RosterEntry]:
    """Read the members file and validate every entry."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RosterError(f"Cannot read roster {path}: {exc}") from exc
    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RosterError(f"Roster {path} is not valid YAML: {exc}") from exc
    if payload is None:
        payload = []
    if not isinstance(payload, list):
        raise RosterError(f"Roster {path} must contain a list of members")
    entries: list[RosterEntry] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise RosterError(f"Roster entry #{position} in {path} is not a mapping")
        try:
            entries.append(RosterEntry.model_validate(item))
        except ValidationError as exc:
            raise RosterError(f"Roster entry #{position} in {path} is invalid: {exc}") from exc
    logger.debug("roster.loaded", path=str(path), members=len(entries))
    return entries


def author_identifiers(entries: Iterable[RosterEntry]) -> list[str]:
    """Identifiers of members linked to an INSPIRE profile, in roster order."""
    identifiers: list[str] = []
    seen: set[str] = set()
    for entry in entries:
        bai = (entry.inspire or "").strip()
        if not bai or bai in seen:
            continue
        seen.add(bai)
        identifiers.append(bai)
    return identifiers
