from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

import httpx
import pytest

from audioteka_provider.core.config import get_settings as settings_cache
from audioteka_provider.scrape.provider import AudiotekaProvider

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeSite:
    """In-memory stand-in for audioteka.com keyed by request path."""

    def __init__(self) -> None:
        self.pages: Dict[str, dict] = {}
        self.requests: List[httpx.Request] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def add(
        self,
        path: str,
        body: str = "",
        status: int = 200,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> None:
        self.pages[path] = {"body": body, "status": status, "error": error, "delay": delay}

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(request.url.path)
        if page is None:
            return httpx.Response(404, text="Nie znaleziono")
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if page["delay"]:
                await asyncio.sleep(page["delay"])
            if page["error"] is not None:
                raise page["error"]
            return httpx.Response(page["status"], text=page["body"])
        finally:
            self.in_flight -= 1

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch):
    monkeypatch.delenv("ATK_PROVIDER_TIMEOUT", raising=False)
    settings_cache.cache_clear()
    yield
    settings_cache.cache_clear()


@pytest.fixture()
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture()
def diuna_site(site: FakeSite) -> FakeSite:
    site.add("/pl/search", load_fixture("search_diuna.html"))
    site.add("/pl/audiobook/diuna", load_fixture("detail_diuna.html"))
    site.add("/pl/audiobook/mesjasz-diuny", load_fixture("detail_bare.html"))
    return site


@pytest.fixture()
def provider(site: FakeSite) -> AudiotekaProvider:
    return AudiotekaProvider(transport=site.transport)
