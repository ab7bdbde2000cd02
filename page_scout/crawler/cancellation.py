# page_scout/crawler/cancellation.py
"""Кооперативная отмена обхода: один токен на весь запуск."""
from __future__ import annotations

import asyncio

__all__ = ("CancellationToken",)


class CancellationToken:
    """
    Одноразовый сигнал отмены.

    Срабатывает ровно один раз; повторные вызовы :meth:`cancel` ничего не меняют.
    Отмена совещательная: она не даёт начаться новой работе и прерывает
    ожидающие запросы, но не трогает уже записанное состояние.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> bool:
        """Взвести сигнал. Возвращает True, если он сработал именно сейчас."""
        if self._event.is_set():
            return False
        self._event.set()
        return True

    async def wait(self) -> None:
        await self._event.wait()
