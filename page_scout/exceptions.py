# File: page_scout/exceptions.py
"""page_scout.exceptions: Исключения, которые PageScout выбрасывает наружу."""

from __future__ import annotations

__all__ = ["PageScoutError", "InvalidURLError"]


class PageScoutError(Exception):
    """Базовое исключение PageScout."""


class InvalidURLError(PageScoutError, ValueError):
    """URL нельзя разобрать как абсолютный адрес."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url
