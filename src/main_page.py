"""Logic for building the index page from the readme and the API entry."""

import re

from bs4 import BeautifulSoup, Tag

from src.doclet_page import MAINPAGE_KIND, DocletPage, PageRegistry
from src.link_registry import LinkRegistry
from src.render_page import render_article

DEFAULT_TITLE = "Home"
API_HEADING = "API"
API_ID = "api"
HEADING_TAG_RE = re.compile(r"^h[1-6]$")
SECTION_KINDS = ("class", "namespace")


def split_readme_title(readme: str | None) -> tuple[str, BeautifulSoup | None]:
    """Remove the readme's first h1 and return its text as the page title."""
    if not readme:
        return DEFAULT_TITLE, None
    soup = BeautifulSoup(readme, "html.parser")
    h1 = soup.find("h1")
    if h1 is None:
        return DEFAULT_TITLE, soup
    title = h1.get_text()
    h1.extract()
    return title, soup


def merge_api_section(readme: BeautifulSoup, entry: DocletPage, links: LinkRegistry) -> None:
    """Add, or replace the contents of, the readme's "API" section."""
    heading = next(
        (h for h in readme.find_all(HEADING_TAG_RE) if h.get_text(strip=True) == API_HEADING),
        None,
    )
    if heading is not None:
        heading["id"] = API_ID
        next_heading = None
        for node in list(heading.next_siblings):
            if isinstance(node, Tag) and HEADING_TAG_RE.match(node.name):
                next_heading = node
                break
            node.extract()
        for node in _fragment(entry.description):
            if next_heading is not None:
                next_heading.insert_before(node)
            else:
                heading.parent.append(node)
        return

    new_heading = readme.new_tag("h2", id=API_ID)
    new_heading.string = API_HEADING
    readme.append(new_heading)

    children = [m for kind in SECTION_KINDS for m in entry.members.get(kind, [])]
    if entry.summary and children:
        content = entry.summary + '<ul class="subsection-list">'
        content += "".join(f"<li>{links.link_to(m.longname, m.name)}</li>" for m in children)
        content += "</ul>"
    else:
        content = entry.description
    for node in _fragment(content):
        readme.append(node)


def build_main_page(
    readme: str | None,
    pages: PageRegistry,
    links: LinkRegistry,
    index_url: str,
    entry: DocletPage | None = None,
) -> DocletPage:
    """Build the index page, merging the API entry page into the readme."""
    title, soup = split_readme_title(readme)
    if entry is not None:
        if soup is None:
            soup = BeautifulSoup(render_article(entry, links), "html.parser")
        else:
            merge_api_section(soup, entry, links)
    description = str(soup) if soup is not None else ""
    return pages.special_page(MAINPAGE_KIND, title, index_url, description=description)


def _fragment(markup: str) -> list:
    return list(BeautifulSoup(markup, "html.parser").contents)
