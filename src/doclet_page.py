"""Page model: one page per container record, plus the special pages.

Pages and the set of source files they reference are tracked on a
``PageRegistry`` that lives for a single build.
"""

import html
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.kinds import KIND_TITLES
from src.link_registry import LinkRegistry
from src.symbol_record import DocParam, Example, SymbolRecord

CAPTION_RE = re.compile(r"^\s*<caption>([\s\S]+?)</caption>(\s*[\n\r])([\s\S]+)$", re.IGNORECASE)
MAINPAGE_KIND = "mainpage"
GLOBALS_KIND = "globalobj"
SOURCE_KIND = "source"
TUTORIAL_KIND = "tutorial"


@dataclass
class DocletPage:
    """A page to render, with its members grouped by kind."""

    kind: str
    name: str
    longname: str
    link: str
    heading: str
    doctitle: str
    description: str = ""
    summary: str = ""
    classdesc: str = ""
    signature: str = ""
    attribs: str = ""
    params: list[DocParam] = field(default_factory=list)
    properties: list[DocParam] = field(default_factory=list)
    examples: list[Example] = field(default_factory=list)
    see: list[str] = field(default_factory=list)
    members: dict[str, list[SymbolRecord]] = field(default_factory=dict)
    record: SymbolRecord | None = None
    path: str | None = None
    code: str = ""  # escaped file content, for source pages
    resolve_links: bool = True


def format_examples(examples: list) -> list[Example]:
    """Split a leading <caption> off each example."""
    formatted = []
    for example in examples:
        if isinstance(example, Example):
            formatted.append(example)
            continue
        m = CAPTION_RE.match(example)
        formatted.append(Example(code=m.group(3), caption=m.group(1)) if m else Example(code=example))
    return formatted


def format_see(see: list[str], link: str) -> list[str]:
    """Turn "#anchor" see entries into links onto the record's own page."""
    page = link.split("#", 1)[0]
    formatted = []
    for s in see:
        if s.startswith("#") and len(s) > 1:
            s = f'<a href="{html.escape(page + s)}">{html.escape(s, quote=False)}</a>'
        formatted.append(s)
    return formatted


def page_heading(kind: str, name: str, ancestors: Iterable[str] = ()) -> str:
    """Render the page header, e.g. ``Class: <span class="ancestors">..</span>Name``."""
    title = KIND_TITLES.get(kind)
    prefix = f"{title}: " if title else ""
    return f'{prefix}<span class="ancestors">{"".join(ancestors)}</span>{html.escape(name, quote=False)}'


class PageRegistry:
    """Creates at most one page per record and tracks referenced source files."""

    def __init__(self, links: LinkRegistry) -> None:
        """Create an empty registry backed by the build's link registry."""
        self.links = links
        self._pages: dict[int, DocletPage] = {}
        self.sources: dict[str, str | None] = {}  # resolved path -> shortened path

    def page_for(
        self,
        record: SymbolRecord,
        children: Iterable[SymbolRecord] = (),
        *,
        resolve_links: bool = True,
    ) -> DocletPage:
        """Return the page for a record, creating it on first use."""
        existing = self._pages.get(id(record))
        if existing is not None:
            return existing

        children = list(children)
        for r in (record, *children):
            r.examples = format_examples(r.examples)
            r.see = format_see(r.see, r.link or self.links.create_link(r))

        title = KIND_TITLES.get(record.kind)
        page = DocletPage(
            kind=record.kind,
            name=record.name,
            longname=record.longname,
            link=record.link or self.links.create_link(record),
            heading=page_heading(record.kind, record.name, record.ancestors),
            doctitle=(f"{title}: " if title else "") + record.longname,
            description=record.description,
            summary=record.summary,
            classdesc=record.classdesc,
            signature=record.signature,
            attribs=record.attribs,
            params=record.params,
            properties=record.properties,
            examples=record.examples,
            see=record.see,
            members=group_by_kind(children),
            record=record,
            path=record.meta.source if record.meta else None,
            resolve_links=resolve_links,
        )
        self._pages[id(record)] = page
        if page.path and page.path not in self.sources:
            self.sources[page.path] = None
        return page

    def special_page(
        self,
        kind: str,
        name: str,
        link: str,
        children: Iterable[SymbolRecord] = (),
        *,
        description: str = "",
    ) -> DocletPage:
        """Build the main page, the globals page or a tutorial page."""
        children = list(children)
        for r in children:
            r.examples = format_examples(r.examples)
            r.see = format_see(r.see, r.link or link)
        if kind == MAINPAGE_KIND:
            doctitle = name
        elif kind == GLOBALS_KIND:
            doctitle = "Globals"
        else:
            doctitle = (f"{KIND_TITLES[kind]}: " if kind in KIND_TITLES else "") + name
        return DocletPage(
            kind=kind,
            name=name,
            longname=link,
            link=link,
            heading=page_heading(kind, name),
            doctitle=doctitle,
            description=description,
            members=group_by_kind(children),
        )


def group_by_kind(records: Iterable[SymbolRecord]) -> dict[str, list[SymbolRecord]]:
    """Group records by kind, keeping their order."""
    grouped: dict[str, list[SymbolRecord]] = {}
    for r in records:
        if r.kind:
            grouped.setdefault(r.kind, []).append(r)
    return grouped
