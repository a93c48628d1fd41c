from __future__ import annotations

from typing import List, Optional

from audioteka_provider.schemas.search import MatchSchema, SearchResponse, SeriesSchema
from audioteka_provider.scrape.types import FullRecord


def format_match(record: FullRecord) -> MatchSchema:
    return MatchSchema(
        title=record.title,
        subtitle=_value(record.subtitle),
        author=", ".join(record.authors),
        narrator=_value(record.narrator),
        publisher=_value(record.publisher),
        publishedYear=_year_from_date(record.published_date),
        description=_value(record.description),
        cover=_value(record.cover),
        isbn=_value(record.identifiers.get("isbn")),
        asin=_value(record.identifiers.get("asin")),
        genres=record.genres,
        tags=record.tags,
        # Audioteka never exposes the position within a series
        series=[SeriesSchema(series=record.series)] if record.series else None,
        language=record.languages[0] if record.languages else None,
        duration=_value(record.duration),
    )


def format_matches(records: List[FullRecord]) -> SearchResponse:
    return SearchResponse(matches=[format_match(record) for record in records])


def _value(value: Optional[str]) -> Optional[str]:
    return value or None


def _year_from_date(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    digits = "".join(ch for ch in value if ch.isdigit())
    if len(digits) >= 4:
        return digits[:4]
    return None
