# File: tests/conftest.py
import asyncio
from typing import Any, Dict, Optional

import pytest

from page_scout.config import CrawlerConfig
from page_scout.crawler.fetcher import Fetcher
from page_scout.crawler.limiter import ConcurrencyLimiter

BASE_URL = "https://example.com"


class StubFetcher(Fetcher):
    """
    Fetcher без сети: отдаёт HTML из словаря url -> html и считает,
    сколько запросов выполняется одновременно. Если значение в словаре
    является исключением, оно выбрасывается.
    """

    def __init__(self, site: Dict[str, Any], limiter: ConcurrencyLimiter, delay: float = 0.01) -> None:
        super().__init__(session=None, limiter=limiter)
        self.site = site
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def _get(self, url: str) -> Optional[str]:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            body = self.site.get(url)
            if isinstance(body, Exception):
                raise body
            return body
        finally:
            self.in_flight -= 1


@pytest.fixture()
def make_config():
    """Factory for CrawlerConfig with test-friendly defaults."""

    def _make(**overrides) -> CrawlerConfig:
        data = {"base_url": BASE_URL, "max_concurrency": 5, "max_pages": 50, "timeout": 2.0}
        data.update(overrides)
        return CrawlerConfig(**data)

    return _make


@pytest.fixture()
def make_fetcher():
    """Factory for StubFetcher bound to a fresh limiter."""

    def _make(site: Dict[str, Any], concurrency: int = 5, delay: float = 0.01) -> StubFetcher:
        return StubFetcher(site, ConcurrencyLimiter(concurrency), delay=delay)

    return _make
