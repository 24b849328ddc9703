"""Tests for building the index page from a readme and the API entry."""

from bs4 import BeautifulSoup

from src.doclet_page import DocletPage, PageRegistry
from src.link_registry import LinkRegistry
from src.main_page import build_main_page, merge_api_section, split_readme_title
from src.symbol_record import SymbolRecord


def _entry(**kw: object) -> DocletPage:
    return DocletPage(
        kind="namespace",
        name="lib",
        longname="lib",
        link="index.html",
        heading="Namespace: lib",
        doctitle="Namespace: lib",
        **kw,
    )


def test_title_comes_from_first_h1() -> None:
    """Verify the first h1 becomes the title and is removed from the readme."""
    title, soup = split_readme_title("<h1>My Lib</h1><p>Intro</p><h1>Second</h1>")
    assert title == "My Lib"
    assert str(soup) == "<p>Intro</p><h1>Second</h1>"


def test_title_defaults_to_home() -> None:
    """Verify a readme without h1, or no readme at all, gives "Home"."""
    assert split_readme_title("<p>Intro</p>")[0] == "Home"
    assert split_readme_title(None) == ("Home", None)


def test_existing_api_section_is_replaced() -> None:
    """Verify content between the API heading and the next heading is replaced."""
    soup = BeautifulSoup(
        "<p>Intro</p><h2>API</h2><p>old</p><p>older</p><h2>License</h2><p>MIT</p>",
        "html.parser",
    )
    merge_api_section(soup, _entry(description="<p>New API docs</p>"), LinkRegistry())
    assert str(soup) == (
        '<p>Intro</p><h2 id="api">API</h2><p>New API docs</p><h2>License</h2><p>MIT</p>'
    )


def test_trailing_api_section_is_replaced() -> None:
    """Verify an API section at the end of the readme is replaced up to the end."""
    soup = BeautifulSoup("<h2>API</h2><p>old</p>", "html.parser")
    merge_api_section(soup, _entry(description="<p>New</p>"), LinkRegistry())
    assert str(soup) == '<h2 id="api">API</h2><p>New</p>'


def test_api_section_is_appended_with_member_list() -> None:
    """Verify a missing API section is appended from the summary and class list."""
    links = LinkRegistry()
    links.register("lib.A", "lib.A.html")
    member = SymbolRecord(longname="lib.A", name="A", kind="class", memberof="lib")
    entry = _entry(summary="<p>Sum</p>", description="<p>Long</p>", members={"class": [member]})
    soup = BeautifulSoup("<p>Intro</p>", "html.parser")

    merge_api_section(soup, entry, links)
    assert str(soup) == (
        '<p>Intro</p><h2 id="api">API</h2><p>Sum</p>'
        '<ul class="subsection-list"><li><a href="lib.A.html">A</a></li></ul>'
    )


def test_api_section_falls_back_to_description() -> None:
    """Verify the description is used when there is no summary."""
    soup = BeautifulSoup("<p>Intro</p>", "html.parser")
    merge_api_section(soup, _entry(description="<p>Long</p>"), LinkRegistry())
    assert str(soup) == '<p>Intro</p><h2 id="api">API</h2><p>Long</p>'


def test_build_main_page() -> None:
    """Verify the main page carries the readme title and merged content."""
    links = LinkRegistry()
    page = build_main_page(
        "<h1>Title</h1><p>Intro</p>",
        PageRegistry(links),
        links,
        "index.html",
        _entry(description="<p>Docs</p>"),
    )
    assert page.kind == "mainpage"
    assert page.doctitle == "Title"
    assert page.link == "index.html"
    assert page.description == '<p>Intro</p><h2 id="api">API</h2><p>Docs</p>'


def test_build_main_page_without_readme_uses_entry() -> None:
    """Verify the entry article becomes the content when there is no readme."""
    links = LinkRegistry()
    page = build_main_page(None, PageRegistry(links), links, "index.html", _entry(description="<p>Docs</p>"))
    assert page.doctitle == "Home"
    assert "<p>Docs</p>" in page.description
