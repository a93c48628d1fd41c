from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import ClassVar, List, Optional
from urllib.parse import quote

import httpx

from audioteka_provider.core.config import Settings
from audioteka_provider.core.logging import logger
from audioteka_provider.scrape.parsers import parse_detail_page, parse_search_results
from audioteka_provider.scrape.selectors import AUDIOTEKA_POLICY, ExtractionPolicy
from audioteka_provider.scrape.types import Candidate, DetailFields, FullRecord, SourceInfo

# characters left unescaped by a JavaScript-style encodeURIComponent
_QUERY_SAFE = "!~*'()"


@dataclass(frozen=True)
class AudiotekaProvider:
    """Scrapes Audioteka search and product pages into ``FullRecord`` values.

    Instances hold configuration only, so one provider can serve any number of
    concurrent requests. Each ``lookup`` opens its own HTTP client.
    """

    slug: ClassVar[str] = "audioteka"
    name: ClassVar[str] = "Audioteka"

    base_url: str = "https://audioteka.com"
    search_url: str = "https://audioteka.com/pl/search"
    language: str = "pol"
    policy: ExtractionPolicy = AUDIOTEKA_POLICY
    timeout: Optional[float] = None
    max_concurrency: int = 5
    user_agent: Optional[str] = None
    transport: Optional[httpx.AsyncBaseTransport] = None

    @property
    def source(self) -> SourceInfo:
        return SourceInfo(id=self.slug, description=self.name, link=self.base_url)

    def build_search_url(self, query: str) -> str:
        return f"{self.search_url}?query={quote(query, safe=_QUERY_SAFE)}"

    def client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self.user_agent} if self.user_agent else None
        return httpx.AsyncClient(
            headers=headers,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    async def lookup(self, query: str, author: Optional[str] = None) -> List[FullRecord]:
        async with self.client() as client:
            candidates = await self.search(client, query, author)
            if not candidates:
                return []

            semaphore = asyncio.Semaphore(max(1, self.max_concurrency))

            async def bounded(candidate: Candidate) -> FullRecord:
                async with semaphore:
                    return await self.enrich(client, candidate)

            # gather keeps input order whatever the completion order
            return list(await asyncio.gather(*(bounded(candidate) for candidate in candidates)))

    async def search(
        self, client: httpx.AsyncClient, query: str, author: Optional[str] = None
    ) -> List[Candidate]:
        # author is only logged; the search endpoint is queried by title alone
        logger.info('Searching for "%s" by "%s"', query, author or "")
        url = self.build_search_url(query)
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            candidates = parse_search_results(resp.text, self.policy, self.base_url, self.source)
        except Exception as exc:
            logger.warning("Search failed for %s: %s", url, exc)
            return []
        logger.info("Search %s returned %d candidates", url, len(candidates))
        return candidates

    async def enrich(self, client: httpx.AsyncClient, candidate: Candidate) -> FullRecord:
        logger.info("Fetching full metadata for: %s", candidate.title)
        try:
            resp = await client.get(candidate.url)
            resp.raise_for_status()
            detail = parse_detail_page(resp.text, self.policy)
        except Exception as exc:
            logger.warning("Falling back to search metadata for %s: %s", candidate.title, exc)
            return FullRecord.from_candidate(candidate)
        record = self.merge(candidate, detail)
        logger.debug("Full metadata for %s: %r", candidate.title, record)
        return record

    def merge(self, candidate: Candidate, detail: DetailFields) -> FullRecord:
        return FullRecord.from_candidate(
            candidate,
            cover=detail.cover or candidate.cover,
            rating=detail.rating if detail.rating is not None else candidate.rating,
            narrator=detail.narrator,
            duration=detail.duration,
            publisher=detail.publisher,
            type=detail.type,
            genres=list(detail.genres),
            series=detail.series[0] if detail.series else None,
            languages=[self.language],
            identifiers={self.slug: candidate.id},
        )


def build_provider(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> AudiotekaProvider:
    return AudiotekaProvider(
        base_url=settings.base_url,
        search_url=settings.search_url,
        language=settings.language,
        timeout=settings.provider_timeout,
        max_concurrency=settings.max_concurrency,
        user_agent=settings.user_agent,
        transport=transport,
    )
