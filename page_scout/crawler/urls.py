# page_scout/crawler/urls.py
"""
URL normalization utilities for PageScout.

The normalized form is a deduplication key only: ``host + path``, lowercased,
without scheme, query, fragment or trailing slashes. It is never fetched or
parsed again.
"""
from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from page_scout.exceptions import InvalidURLError

__all__ = ("normalize_url", "hostname_of")


def _split(url: str) -> SplitResult:
    try:
        parsed = urlsplit(url.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidURLError(str(url)) from exc
    if not parsed.scheme or not parsed.hostname:
        raise InvalidURLError(url)
    return parsed


def normalize_url(url: str) -> str:
    """
    Convert *url* into its deduplication key.

    ``https://BLOG.boot.dev/Path/`` and ``http://blog.boot.dev/path?a=1#x``
    both become ``blog.boot.dev/path``; the root path becomes an empty string.
    Raises InvalidURLError when *url* is not an absolute URL.
    """
    parsed = _split(url)
    path = parsed.path.lower().rstrip("/")
    return f"{parsed.hostname}{path}"


def hostname_of(url: str) -> str:
    """Return the lowercased hostname of *url* (InvalidURLError if there is none)."""
    return _split(url).hostname or ""
