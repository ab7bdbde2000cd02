# page_scout/crawler/fetcher.py
"""
Fetcher module: GET requests through the concurrency limiter, with every
failure collapsed into ``None``.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from aiohttp import ClientError, ClientSession

from page_scout.crawler.cancellation import CancellationToken
from page_scout.crawler.limiter import ConcurrencyLimiter

__all__ = ("Fetcher",)

logger = logging.getLogger("PageScout")


class Fetcher:
    """Fetches HTML pages; non-HTML, HTTP errors, network errors and cancellation all give None."""

    def __init__(self, session: Optional[ClientSession], limiter: ConcurrencyLimiter) -> None:
        self.session = session
        self.limiter = limiter

    async def fetch_html(self, url: str, token: CancellationToken) -> Optional[str]:
        """
        Fetch *url* once a limiter slot is free.

        Returns the page text, or None if the page is unusable or *token*
        trips before or during the request.
        """
        if token.cancelled:
            return None
        return await self.limiter.run(self._fetch_cancellable, url, token)

    async def _fetch_cancellable(self, url: str, token: CancellationToken) -> Optional[str]:
        # the token may have tripped while we were queued in the limiter
        if token.cancelled:
            return None
        request = asyncio.ensure_future(self._get(url))
        cancelled = asyncio.ensure_future(token.wait())
        try:
            done, pending = await asyncio.wait(
                {request, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (request, cancelled):
                if not task.done():
                    task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        if request in done:
            return request.result()
        logger.debug("Aborted %s: crawl cancelled", url)
        return None

    async def _get(self, url: str) -> Optional[str]:
        if self.session is None:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    logger.debug("Skip %s: HTTP %s", url, resp.status)
                    return None
                ctype = resp.headers.get("Content-Type", "").lower()
                if "text/html" not in ctype:
                    logger.debug("Skip %s: content-type %r", url, ctype)
                    return None
                return await resp.text(errors="replace")
        except (ClientError, asyncio.TimeoutError) as e:
            logger.debug("Failed %s: %s", url, e)
            return None
