# page_scout/crawler/limiter.py
"""
Admission control for outbound fetches.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

__all__ = ("ConcurrencyLimiter",)

T = TypeVar("T")


class ConcurrencyLimiter:
    """Runs at most *capacity* coroutines at once; waiters are admitted FIFO."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._semaphore = asyncio.Semaphore(capacity)
        self._active = 0
        self.peak = 0

    @property
    def active(self) -> int:
        return self._active

    async def run(self, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """Await ``func(*args, **kwargs)`` once a slot is free."""
        async with self._semaphore:
            self._active += 1
            self.peak = max(self.peak, self._active)
            try:
                return await func(*args, **kwargs)
            finally:
                self._active -= 1
