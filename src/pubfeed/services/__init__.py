"""Service abstractions for pubfeed."""

from .aggregator import PublicationAggregator, matches_keywords, sort_by_date
from .inspire import AuthorSource, InspireClient, build_query, parse_hit
from .pipeline import PublicationPipeline
from .roster import author_identifiers, load_roster

__all__ = [
    "AuthorSource",
    "InspireClient",
    "build_query",
    "parse_hit",
    "PublicationAggregator",
    "matches_keywords",
    "sort_by_date",
    "PublicationPipeline",
    "author_identifiers",
    "load_roster",
]
