# page_scout/crawler/state.py
"""
Shared crawl state: recorded pages, the page budget and the stop flag.

Every mutation goes through one lock, so the "not seen yet and under budget,
then reserve" sequence is a single atomic step. A URL is *reserved* while its
fetch is in flight; reservations count against the budget, so the number of
recorded pages can never overshoot ``max_pages``.
"""
from __future__ import annotations

import enum
import logging
import threading
from typing import Dict, List, Optional, Set

from page_scout.crawler.cancellation import CancellationToken
from page_scout.crawler.models import PageRecord

__all__ = ("CrawlState", "Verdict")

logger = logging.getLogger("PageScout")


class Verdict(enum.Enum):
    """Outcome of :meth:`CrawlState.try_reserve`."""

    RESERVED = "reserved"
    STOPPED = "stopped"
    DUPLICATE = "duplicate"
    LIMIT = "limit"
    DEFERRED = "deferred"
    FOREIGN = "foreign"


class CrawlState:
    """Lock-guarded owner of the page map, reservations and the stop flag."""

    def __init__(self, max_pages: int, token: Optional[CancellationToken] = None) -> None:
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self.max_pages = max_pages
        self.token = token or CancellationToken()
        self._lock = threading.Lock()
        self._pages: Dict[str, PageRecord] = {}
        self._reserved: Set[str] = set()
        self._parked: List[str] = []
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def pages(self) -> Dict[str, PageRecord]:
        """Snapshot of the recorded pages."""
        with self._lock:
            return dict(self._pages)

    def is_full(self) -> bool:
        with self._lock:
            return len(self._pages) >= self.max_pages

    def try_reserve(self, key: str, url: str, *, same_host: bool) -> Verdict:
        """
        Gate *url* (normalized as *key*) and reserve it for fetching.

        DEFERRED means every remaining budget slot is held by an in-flight
        fetch; *url* is parked and handed back by :meth:`release` if one of
        those fetches fails.
        """
        with self._lock:
            if self._stopped:
                return Verdict.STOPPED
            if key in self._pages or key in self._reserved:
                return Verdict.DUPLICATE
            if len(self._pages) >= self.max_pages:
                self._stop_locked("page budget reached")
                return Verdict.LIMIT
            if len(self._pages) + len(self._reserved) >= self.max_pages:
                self._parked.append(url)
                return Verdict.DEFERRED
            if not same_host:
                return Verdict.FOREIGN
            self._reserved.add(key)
            return Verdict.RESERVED

    def record(self, key: str, page: PageRecord) -> Optional[List[str]]:
        """
        Turn the reservation for *key* into a recorded page.

        Returns None (and drops the page) if the crawl was stopped while the
        fetch was in flight. Otherwise returns the parked URLs to put back on
        the frontier: empty unless this page filled the budget, in which case
        they will hit LIMIT at the gate and stop the crawl.
        """
        with self._lock:
            self._reserved.discard(key)
            if self._stopped or key in self._pages:
                return None
            self._pages[key] = page
            if len(self._pages) >= self.max_pages:
                parked, self._parked = self._parked, []
                return parked
            return []

    def release(self, key: str) -> List[str]:
        """Drop the reservation for *key*; return parked URLs to retry."""
        with self._lock:
            self._reserved.discard(key)
            if self._stopped:
                self._parked.clear()
                return []
            parked, self._parked = self._parked, []
            return parked

    def stop(self, reason: str = "stopped") -> bool:
        """Set the stop flag and trip the cancellation token (only the first call counts)."""
        with self._lock:
            return self._stop_locked(reason)

    def _stop_locked(self, reason: str) -> bool:
        if self._stopped:
            return False
        self._stopped = True
        self._parked.clear()
        self.token.cancel()
        logger.info("Crawl stopping: %s (%d pages)", reason, len(self._pages))
        return True
