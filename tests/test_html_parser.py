# File: tests/test_html_parser.py
"""Тесты извлечения данных страницы (page_scout.parser.html_parser)."""
from page_scout.crawler.models import PageRecord
from page_scout.parser.html_parser import (
    extract_page_data,
    get_first_paragraph_from_html,
    get_h1_from_html,
    get_images_from_html,
    get_urls_from_html,
)

BASE = "https://example.com"


def test_h1():
    assert get_h1_from_html("<html><body><h1>  Test Title </h1></body></html>") == "Test Title"


def test_h1_missing():
    assert get_h1_from_html("<html><body><p>No H1 here</p></body></html>") == ""


def test_first_paragraph_prefers_main():
    html = """<html><body>
      <p>Outside paragraph.</p>
      <main>
        <p>Main paragraph.</p>
      </main>
    </body></html>"""
    assert get_first_paragraph_from_html(html) == "Main paragraph."


def test_first_paragraph_without_main():
    html = "<html><body><p>First outside paragraph.</p><p>Second outside paragraph.</p></body></html>"
    assert get_first_paragraph_from_html(html) == "First outside paragraph."


def test_first_paragraph_main_without_p_falls_back():
    html = "<html><body><main><div>no p</div></main><p>Fallback</p></body></html>"
    assert get_first_paragraph_from_html(html) == "Fallback"


def test_first_paragraph_missing():
    assert get_first_paragraph_from_html("<html><body><h1>Title</h1></body></html>") == ""


def test_urls_relative_and_absolute():
    html = """<html><body>
      <a href="/about">About</a>
      <a href="https://other.com/page">Other</a>
      <a>No href</a>
      <a href="">Empty</a>
    </body></html>"""
    assert get_urls_from_html(html, BASE) == ["https://example.com/about", "https://other.com/page"]


def test_urls_none():
    assert get_urls_from_html("<html><body><p>No links here</p></body></html>", BASE) == []


def test_urls_skip_unresolvable_href():
    html = '<a href="http://[broken">bad</a><a href="/ok">ok</a>'
    assert get_urls_from_html(html, BASE) == ["https://example.com/ok"]


def test_images():
    html = '<img src="/logo.png"><img src="https://cdn.site.com/banner.jpg"><img alt="no src">'
    assert get_images_from_html(html, BASE) == [
        "https://example.com/logo.png",
        "https://cdn.site.com/banner.jpg",
    ]


def test_extract_page_data():
    html = (
        '<html><body><h1>Test Page</h1><p>first</p><p>second</p>'
        '<a href="/x">x</a><img src="/y.png"></body></html>'
    )
    assert extract_page_data(html, BASE) == PageRecord(
        url=BASE,
        h1="Test Page",
        first_paragraph="first",
        outgoing_links=("https://example.com/x",),
        image_urls=("https://example.com/y.png",),
    )


def test_extract_prioritizes_main_regardless_of_order():
    html = """
    <html><body>
        <p>This paragraph is outside main</p>
        <main>
          <h1>Title</h1>
          <p>This paragraph is inside main</p>
          <a href="/main-link">Main Link</a>
        </main>
        <a href="/outside-link">Outside Link</a>
    </body></html>"""
    page = extract_page_data(html, BASE)
    assert page.h1 == "Title"
    assert page.first_paragraph == "This paragraph is inside main"
    assert page.outgoing_links == ("https://example.com/main-link", "https://example.com/outside-link")


def test_extract_missing_elements():
    page = extract_page_data("<html><body><p>Only paragraph</p></body></html>", BASE)
    assert page == PageRecord(url=BASE, first_paragraph="Only paragraph")


def test_extract_resolves_against_page_url():
    page = extract_page_data('<a href="next">n</a>', "https://example.com/blog/post")
    assert page.outgoing_links == ("https://example.com/blog/next",)


def test_malformed_markup_does_not_raise():
    page = extract_page_data("<html><body><h1>Unclosed <p>text <a href='/z'", BASE)
    assert isinstance(page, PageRecord)
    assert page.url == BASE
