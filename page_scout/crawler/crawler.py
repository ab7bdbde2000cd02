# === FILE: page_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, List, Optional

from aiohttp import ClientSession, ClientTimeout

from page_scout.config import CrawlerConfig
from page_scout.crawler.cancellation import CancellationToken
from page_scout.crawler.fetcher import Fetcher
from page_scout.crawler.limiter import ConcurrencyLimiter
from page_scout.crawler.models import PageRecord
from page_scout.crawler.state import CrawlState, Verdict
from page_scout.crawler.urls import hostname_of, normalize_url
from page_scout.exceptions import InvalidURLError
from page_scout.parser.html_parser import extract_page_data, get_urls_from_html

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Асинхронный краулер одного хоста с жёстким лимитом страниц.

    Очередь (frontier) разбирает фиксированный пул обработчиков; обход
    завершён, когда очередь пуста и ни один обработчик не занят.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.base_url: str = config.base_url
        # неправильный стартовый URL прерывает запуск сразу
        normalize_url(self.base_url)
        self.base_host: str = hostname_of(self.base_url)
        self.token = CancellationToken()
        self.state = CrawlState(config.max_pages, self.token)
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("PageScout")
        self._active_workers = 0
        self._queue: Optional[asyncio.Queue[str]] = None

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session, ConcurrencyLimiter(self.config.max_concurrency))
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @property
    def idle(self) -> bool:
        """True, когда очередь пуста и ни один обработчик не работает."""
        queue_empty = self._queue is None or self._queue.empty()
        return queue_empty and self._active_workers == 0

    def stop(self) -> None:
        """Остановить обход извне: новые страницы не берутся, запросы прерываются."""
        self.state.stop("stopped by caller")

    async def crawl(self) -> Dict[str, PageRecord]:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with AsyncCrawler(...)'")
        self.logger.info("Старт обхода: %s", self.base_url)
        start = time.monotonic()
        queue: asyncio.Queue[str] = asyncio.Queue()
        self._queue = queue
        queue.put_nowait(self.base_url)
        workers = [
            asyncio.create_task(self._worker(queue)) for _ in range(self.config.worker_count)
        ]
        try:
            await queue.join()
        finally:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
        pages = self.state.pages
        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с (%.2f стр/с)",
            len(pages), duration, len(pages) / duration if duration else 0,
        )
        return pages

    async def _worker(self, queue: asyncio.Queue[str]) -> None:
        while True:
            try:
                url = await queue.get()
            except asyncio.CancelledError:
                break
            self._active_workers += 1
            try:
                await self._process(url, queue)
            except Exception:
                # одна страница не должна ронять весь обход
                self.logger.exception("Unexpected error while crawling %s", url)
            finally:
                self._active_workers -= 1
                queue.task_done()

    async def _process(self, url: str, queue: asyncio.Queue[str]) -> None:
        if self.state.stopped:
            return
        try:
            key = normalize_url(url)
            same_host = hostname_of(url) == self.base_host
        except InvalidURLError:
            self.logger.debug("Skip invalid URL %r", url)
            return

        verdict = self.state.try_reserve(key, url, same_host=same_host)
        if verdict is not Verdict.RESERVED:
            self.logger.debug("Skip %s: %s", url, verdict.value)
            return

        self.logger.info("crawling %s", url)
        recorded = False
        try:
            html = await self.fetcher.fetch_html(url, self.token)  # type: ignore[union-attr]
            if html is None:
                return
            unparked = self.state.record(key, extract_page_data(html, url))
            if unparked is None:
                self.logger.debug("Discard %s: crawl already stopped", url)
                return
            recorded = True
        finally:
            # любой выход без записи страницы освобождает слот бюджета
            if not recorded:
                self._requeue(self.state.release(key), queue)

        # бюджет только что заполнился: отложенные URL упрутся в лимит и остановят обход
        self._requeue(unparked, queue)
        for link in self._fan_out_links(html):
            if self.state.stopped:
                break
            if self.state.is_full():
                self.state.stop("page budget reached")
                break
            queue.put_nowait(link)

    def _fan_out_links(self, html: str) -> List[str]:
        # ссылки для обхода разрешаются относительно base_url, а не текущей страницы
        return get_urls_from_html(html, self.base_url)

    def _requeue(self, urls: List[str], queue: asyncio.Queue[str]) -> None:
        for url in urls:
            queue.put_nowait(url)
