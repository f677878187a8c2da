"""YAML export of the publications data file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import structlog
import yaml

from pubfeed.errors import OutputError
from pubfeed.models import PublicationEntry

logger = structlog.get_logger(__name__)


class _Quoted(str):
    """String value that is always emitted double-quoted."""


class PublicationDumper(yaml.SafeDumper):
    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_quoted(dumper: yaml.SafeDumper, data: _Quoted) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


PublicationDumper.add_representer(_Quoted, _represent_quoted)


def _quote_values(value: Any) -> Any:
    if isinstance(value, str):
        return _Quoted(value)
    if isinstance(value, list):
        return [_quote_values(item) for item in value]
    if isinstance(value, dict):
        return {key: _quote_values(item) for key, item in value.items()}
    return value


def dump_publications(entries: Iterable[PublicationEntry]) -> str:
    payload = [_quote_values(entry.model_dump()) for entry in entries]
    return yaml.dump(
        payload,
        Dumper=PublicationDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )


def write_publications(path: Path, entries: Iterable[PublicationEntry]) -> Path:
    """Overwrite `path` with the serialized entries."""
    content = dump_publications(entries)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write publications to {path}: {exc}") from exc
    logger.info("export.written", path=str(path), bytes=len(content.encode("utf-8")))
    return path
