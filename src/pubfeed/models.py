"""Core data models used throughout pubfeed."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class RosterEntry(BaseModel):
    """A member listed in the roster file."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    inspire: str | None = None


class Paper(BaseModel):
    """One literature record as returned by the INSPIRE API."""

    inspire_id: str
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    arxiv: str | None = None
    date: str | None = None
    abstract: str = ""


class AggregatedPaper(BaseModel):
    """A record together with the roster identifiers credited on it."""

    paper: Paper
    credited: list[str] = Field(default_factory=list)

    def credit(self, identifier: str) -> None:
        if identifier not in self.credited:
            self.credited.append(identifier)


class PublicationEntry(BaseModel):
    """Record written to the publications data file."""

    title: str
    authors: list[str] = Field(default_factory=list)
    eucaif_authors: list[str] = Field(default_factory=list)
    arxiv: str | None = None
    date: str | None = None
    abstract: str = ""

    @classmethod
    def from_aggregate(cls, item: AggregatedPaper) -> "PublicationEntry":
        paper = item.paper
        return cls(
            title=paper.title,
            authors=list(paper.authors),
            eucaif_authors=list(item.credited),
            arxiv=paper.arxiv,
            date=paper.date,
            abstract=paper.abstract,
        )


class RunSummary(BaseModel):
    """Counters reported at the end of a run."""

    cutoff: str
    authors_queried: int
    unique_papers: int
    kept_papers: int
    output_path: Path
