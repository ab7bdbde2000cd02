# File: page_scout/engine.py
"""page_scout.engine: слой оркестрации для запуска обхода из CLI и тестов."""

from __future__ import annotations

import asyncio
import signal
from typing import Dict, Optional

from page_scout.config import CrawlerConfig
from page_scout.crawler.crawler import AsyncCrawler
from page_scout.crawler.fetcher import Fetcher
from page_scout.crawler.models import PageRecord
from page_scout.logger import logger

__all__ = ["crawl_site"]


def _interrupt(crawler: AsyncCrawler) -> None:
    logger.warning("Прервано пользователем: обход останавливается, собранные страницы сохранятся")
    crawler.stop()


async def crawl_site(config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> Dict[str, PageRecord]:
    """
    Запускает AsyncCrawler в контексте и возвращает словарь
    нормализованный URL -> PageRecord.

    Пока идёт обход, Ctrl-C (SIGINT) не прерывает цикл событий, а вызывает
    ``crawler.stop()``: запросы отменяются и возвращается то, что уже собрано.
    """
    logger.info(
        "Starting crawl of %s (concurrency=%d, max_pages=%d)",
        config.base_url, config.max_concurrency, config.max_pages,
    )
    async with AsyncCrawler(config, fetcher=fetcher) as crawler:
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGINT, _interrupt, crawler)
            handles_sigint = True
        except (NotImplementedError, RuntimeError):
            # Windows или не главный поток: остаётся KeyboardInterrupt
            handles_sigint = False
        try:
            return await crawler.crawl()
        finally:
            if handles_sigint:
                loop.remove_signal_handler(signal.SIGINT)
