# === FILE: page_scout/parser/html_parser.py ===
"""HTML extraction helpers for PageScout.

Turns raw markup into a :class:`~page_scout.crawler.models.PageRecord`:

* h1 — text of the first ``<h1>`` or ``""``.
* first_paragraph — first ``<p>`` inside ``<main>`` if there is one, otherwise
  the first ``<p>`` of the document.
* outgoing_links — every non-empty ``<a href>`` resolved to an absolute URL.
* image_urls — every non-empty ``<img src>`` resolved to an absolute URL.

Broken markup never raises: the affected fields simply come back empty.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from page_scout.crawler.models import PageRecord

__all__: Sequence[str] = (
    "get_h1_from_html",
    "get_first_paragraph_from_html",
    "get_urls_from_html",
    "get_images_from_html",
    "extract_page_data",
)

logger = logging.getLogger("PageScout")


def _soup(html: str) -> Optional[BeautifulSoup]:
    try:
        return BeautifulSoup(html, "html.parser")
    except Exception as exc:  # html.parser may reject badly broken markup
        logger.debug("Unparseable HTML: %s", exc)
        return None


def _text(tag: Optional[Tag]) -> str:
    return tag.get_text().strip() if isinstance(tag, Tag) else ""


def _resolve_attr(soup: Optional[BeautifulSoup], name: str, attr: str, base_url: str) -> list[str]:
    if soup is None:
        return []
    urls: list[str] = []
    for tag in soup.find_all(name):
        if not isinstance(tag, Tag):
            continue
        value = tag.get(attr)
        if not isinstance(value, str) or not value:
            continue
        try:
            urls.append(urljoin(base_url, value.strip()))
        except ValueError:
            logger.debug("Skip unresolvable %s=%r", attr, value)
    return urls


def get_h1_from_html(html: str) -> str:
    soup = _soup(html)
    return _text(soup.find("h1")) if soup is not None else ""


def _first_paragraph(soup: BeautifulSoup) -> str:
    main = soup.find("main")
    paragraph = main.find("p") if isinstance(main, Tag) else None
    if paragraph is None:
        paragraph = soup.find("p")
    return _text(paragraph)


def get_first_paragraph_from_html(html: str) -> str:
    soup = _soup(html)
    return _first_paragraph(soup) if soup is not None else ""


def get_urls_from_html(html: str, base_url: str) -> list[str]:
    """Absolute URLs of all ``<a href>`` in document order, resolved against *base_url*."""
    return _resolve_attr(_soup(html), "a", "href", base_url)


def get_images_from_html(html: str, base_url: str) -> list[str]:
    """Absolute URLs of all ``<img src>`` in document order, resolved against *base_url*."""
    return _resolve_attr(_soup(html), "img", "src", base_url)


def extract_page_data(html: str, page_url: str) -> PageRecord:
    """Parse *html* once and build the page record; relative URLs resolve against *page_url*."""
    soup = _soup(html)
    if soup is None:
        return PageRecord(url=page_url)

    return PageRecord(
        url=page_url,
        h1=_text(soup.find("h1")),
        first_paragraph=_first_paragraph(soup),
        outgoing_links=tuple(_resolve_attr(soup, "a", "href", page_url)),
        image_urls=tuple(_resolve_attr(soup, "img", "src", page_url)),
    )
