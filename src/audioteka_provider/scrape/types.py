from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SourceInfo:
    id: str
    description: str
    link: str


@dataclass
class Candidate:
    """Minimal book record read from one search-results entry."""

    id: str
    title: str
    authors: List[str]
    url: str
    cover: Optional[str]
    rating: Optional[float]
    source: SourceInfo


@dataclass
class DetailFields:
    narrator: str = ""
    duration: str = ""
    publisher: str = ""
    type: str = ""
    genres: List[str] = field(default_factory=list)
    series: List[str] = field(default_factory=list)
    rating: Optional[float] = None
    cover: Optional[str] = None


@dataclass
class FullRecord(Candidate):
    """Candidate extended with detail-page fields.

    Enrichment fields stay ``None`` (or empty) when the detail page could not
    be fetched or parsed. ``subtitle``, ``description``, ``published_date`` and
    ``tags`` belong to the response contract but Audioteka never fills them.
    """

    narrator: Optional[str] = None
    duration: Optional[str] = None
    publisher: Optional[str] = None
    type: Optional[str] = None
    genres: Optional[List[str]] = None
    series: Optional[str] = None
    languages: List[str] = field(default_factory=list)
    identifiers: Dict[str, str] = field(default_factory=dict)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    published_date: Optional[str] = None
    tags: Optional[List[str]] = None

    @classmethod
    def from_candidate(cls, candidate: Candidate, **extra) -> "FullRecord":
        base = {f.name: getattr(candidate, f.name) for f in fields(Candidate)}
        base.update(extra)
        return cls(**base)

    def as_candidate(self) -> Candidate:
        return Candidate(**{f.name: getattr(self, f.name) for f in fields(Candidate)})
