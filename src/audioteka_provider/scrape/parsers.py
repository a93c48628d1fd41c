from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from audioteka_provider.core.logging import logger
from audioteka_provider.scrape.selectors import ExtractionPolicy
from audioteka_provider.scrape.types import Candidate, DetailFields, SourceInfo

_NUMBER_RE = re.compile(r"[-+]?\d+(?:[.,]\d+)?")


def parse_rating(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    match = _NUMBER_RE.search(text)
    if not match:
        return None
    try:
        value = float(match.group(0).replace(",", "."))
    except ValueError:
        return None
    # 0 is what the site shows for unrated titles
    return value or None


def parse_search_results(
    html: str, policy: ExtractionPolicy, base_url: str, source: SourceInfo
) -> List[Candidate]:
    soup = BeautifulSoup(html, "html.parser")
    entries = soup.select(policy.search_entry)
    logger.info("Found %d search entries", len(entries))

    candidates: List[Candidate] = []
    for entry in entries:
        candidate = _build_candidate(entry, policy, base_url, source)
        if candidate:
            candidates.append(candidate)
    return candidates


def _build_candidate(
    entry: Tag, policy: ExtractionPolicy, base_url: str, source: SourceInfo
) -> Optional[Candidate]:
    title = _text(entry.select_one(policy.title))
    href = _attr(entry.select_one(policy.link), "href")
    author = _text(entry.select_one(policy.author))
    if not title or not href or not author:
        logger.debug("Skipping incomplete entry (title=%r, href=%r, author=%r)", title, href, author)
        return None

    url = urljoin(base_url, href)
    item_id = _attr(entry, policy.id_attribute) or url.rstrip("/").split("/")[-1]
    return Candidate(
        id=item_id,
        title=title,
        authors=[author],
        url=url,
        cover=_attr(entry.select_one(policy.cover), "src"),
        rating=parse_rating(_text(entry.select_one(policy.rating))),
        source=source,
    )


def parse_detail_page(html: str, policy: ExtractionPolicy) -> DetailFields:
    soup = BeautifulSoup(html, "html.parser")
    narrators = _texts(soup.select(policy.row_value("narrator", linked=True)))
    return DetailFields(
        narrator=", ".join(narrators),
        duration=_text(soup.select_one(policy.row_value("duration"))),
        publisher=_text(soup.select_one(policy.row_value("publisher", linked=True))),
        type=_text(soup.select_one(policy.row_value("type"))),
        genres=_texts(soup.select(policy.row_value("genres", linked=True))),
        series=_texts(soup.select(policy.series)) if policy.series else [],
        rating=parse_rating(_text(soup.select_one(policy.detail_rating))) if policy.detail_rating else None,
        cover=_attr(soup.select_one(policy.detail_cover), "src") if policy.detail_cover else None,
    )


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text(" ", strip=True)


def _texts(nodes: List[Tag]) -> List[str]:
    return [text for text in (_text(node) for node in nodes) if text]


def _attr(node: Optional[Tag], name: str) -> Optional[str]:
    if node is None:
        return None
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None
