"""Logic for building a page's table-of-contents tree."""

import html
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.extract_headings import extract_headings
from src.is_classlike_kind import is_classlike_kind
from src.is_member_kind import is_member_kind
from src.kinds import CONTAINER_KINDS, KIND_TITLES, MEMBER_KINDS
from src.pluralise import pluralise

if TYPE_CHECKING:
    from src.doclet_page import DocletPage

DEFAULT_MIN_LEVEL = 6


@dataclass
class TocNode:
    """One table-of-contents entry; name is HTML markup."""

    id: str | None
    name: str
    level: int = 0
    section: bool = False
    children: list["TocNode"] = field(default_factory=list)
    siblings: list["TocNode"] = field(default_factory=list)


def build_heading_tree(headings: list[tuple[str, str, int]]) -> list[TocNode]:
    """Nest (id, text, level) headings into a tree.

    Headings at or above max(min level, 2) become roots. Any other heading
    starts at the last root and keeps descending into the last child until
    the depth reaches its level. That is not a nearest-ancestor-by-level
    placement, and existing output depends on it.
    """
    nodes = [TocNode(id=i, name=html.escape(text, quote=False), level=lvl) for i, text, lvl in headings]
    min_level = min((n.level for n in nodes), default=DEFAULT_MIN_LEVEL)
    root_limit = max(min_level, 2)

    roots: list[TocNode] = []
    for node in nodes:
        if node.level <= root_limit:
            roots.append(node)
            continue
        if not roots:
            continue
        parent = roots[-1]
        level = parent.level + 1
        while parent.children and level < node.level:
            level += 1
            parent = parent.children[-1]
        parent.children.append(node)
    return roots


def build_toc_structure(page: "DocletPage") -> list[TocNode]:
    """Build the table of contents for a page."""
    titles = build_heading_tree(extract_headings(page.description))

    if is_classlike_kind(page.kind):
        usage = [TocNode("details", "Details")]
        if page.params:
            usage.append(TocNode("params", "Parameters"))
        if page.properties:
            usage.append(TocNode("properties", "Properties"))
        if page.examples:
            usage.append(TocNode("examples", "Examples"))
        headings = [
            TocNode("description", "Description", section=True, siblings=titles),
            TocNode("usage", "Usage", section=True, children=usage),
        ]
    elif page.kind == "globalobj":
        headings = []
    else:
        headings = titles

    for kind in (*CONTAINER_KINDS, *MEMBER_KINDS):
        members = page.members.get(kind)
        if not members:
            continue
        section_id = pluralise("method" if kind == "function" else kind)
        name = pluralise(KIND_TITLES[kind])
        children = []
        if is_member_kind(kind):
            children = [
                TocNode(m.id, ("" if kind == "constant" else m.attribs) + html.escape(m.name, quote=False))
                for m in members
            ]
        headings.append(TocNode(section_id, name, section=True, children=children))
    return headings
