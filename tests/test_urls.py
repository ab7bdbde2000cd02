# File: tests/test_urls.py
import pytest

from page_scout.crawler.urls import hostname_of, normalize_url
from page_scout.exceptions import InvalidURLError


@pytest.mark.parametrize(
    "url",
    [
        "https://blog.boot.dev/path",
        "http://blog.boot.dev/path",
        "https://blog.boot.dev/path/",
        "https://BLOG.BOOT.DEV/PATH",
        "https://blog.boot.dev/path?a=1",
        "https://blog.boot.dev/path#frag",
        "https://blog.boot.dev/path//",
    ],
)
def test_normalize_collapses_variants(url):
    assert normalize_url(url) == "blog.boot.dev/path"


def test_normalize_mixed_case_with_slash():
    assert normalize_url("https://BLOG.boot.dev/Path/") == "blog.boot.dev/path"


def test_normalize_root_path():
    assert normalize_url("https://blog.boot.dev") == "blog.boot.dev"
    assert normalize_url("https://blog.boot.dev/") == "blog.boot.dev"


def test_normalize_nested_path():
    assert normalize_url("https://blog.boot.dev/a/b/c/") == "blog.boot.dev/a/b/c"


def test_normalize_is_idempotent_on_reparse():
    once = normalize_url("https://Blog.Boot.dev/A/")
    assert normalize_url(f"https://{once}") == once


@pytest.mark.parametrize("bad", ["not-a-url", "", "/relative/path", "mailto:someone@example.com", "http://[::1"])
def test_normalize_rejects_invalid(bad):
    with pytest.raises(InvalidURLError):
        normalize_url(bad)


def test_invalid_url_error_is_value_error():
    with pytest.raises(ValueError):
        normalize_url("not-a-url")


def test_hostname_of():
    assert hostname_of("https://Example.COM:8080/x") == "example.com"
    with pytest.raises(InvalidURLError):
        hostname_of("nothing")
