# page_scout/crawler/models.py
"""
Data models for the PageScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(slots=True, frozen=True)
class PageRecord:
    """Structured data extracted from one crawled page."""

    url: str
    h1: str = ""
    first_paragraph: str = ""
    outgoing_links: Tuple[str, ...] = field(default_factory=tuple)
    image_urls: Tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping of the record."""
        return {
            "url": self.url,
            "h1": self.h1,
            "first_paragraph": self.first_paragraph,
            "outgoing_links": list(self.outgoing_links),
            "image_urls": list(self.image_urls),
        }
