"""Logic for building the site-wide navigation tree.

The tree is built once per build. A single ``seen`` set, owned by one call
to ``NavigationBuilder.build``, guarantees that no longname is listed twice,
even when a record is reachable through more than one membership path.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.kinds import CLASSLIKE_KINDS, CONTAINER_KINDS, MAX_RESOLUTION_DEPTH
from src.link_registry import GLOBAL_LONGNAME, LinkRegistry
from src.symbol_record import SymbolRecord
from src.symbol_store import IS_UNDEFINED, SymbolStore
from src.tutorial import Tutorial

logger = logging.getLogger(__name__)

API_HEADING = "API"
TOP_LEVEL = 3
# Entries nested deeper than this are bare links unless they have children.
BARE_LINK_LEVEL = 5
NAV_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Modules", "module"),
    ("Namespaces", "namespace"),
    ("Classes", "class"),
    ("Interfaces", "interface"),
    ("Events", "event"),
    ("Mixins", "mixin"),
    ("Externals", "external"),
)
GLOBAL_KINDS = ("member", "function", "constant", "typedef")
NAME_PREFIX_RE = re.compile(r"\b(module|event):")


@dataclass
class NavNode:
    """One navigation entry, possibly with nested entries."""

    title: str
    link: str | None = None
    longname: str | None = None
    heading_level: int | None = None
    children: list["NavNode"] = field(default_factory=list)

    @property
    def expandable(self) -> bool:
        """Whether the entry renders as a collapsible group."""
        return bool(self.children)


@dataclass
class NavSection:
    """A headed list of navigation entries."""

    heading: str
    items: list[NavNode] = field(default_factory=list)
    heading_link: str | None = None
    heading_level: int = TOP_LEVEL


def display_name(name: str) -> str:
    """Strip module:/event: prefixes from a name shown in navigation."""
    return NAME_PREFIX_RE.sub("", name)


class NavigationBuilder:
    """Builds the deduplicated navigation tree for one build."""

    def __init__(
        self,
        store: SymbolStore,
        links: LinkRegistry,
        *,
        use_longname_in_nav: bool = False,
        max_depth: int = MAX_RESOLUTION_DEPTH,
    ) -> None:
        """Initialize the builder over a resolved store."""
        self.store = store
        self.links = links
        self.use_longname_in_nav = use_longname_in_nav
        self.max_depth = max_depth

    def build(
        self,
        api_entry: str | None = None,
        tutorials: Iterable[Tutorial] = (),
    ) -> list[NavSection]:
        """Build every navigation section, in display order."""
        seen: set[str] = set()
        sections: list[NavSection] = []

        api = self._api_section(api_entry, seen)
        if api:
            sections.append(api)

        for heading, kind in NAV_CATEGORIES:
            section = self._member_section(heading, self.store.of_kind(kind), seen)
            if section:
                sections.append(section)

        tutorial_nodes = self._tutorial_nodes(tutorials, seen, 0)
        if tutorial_nodes:
            sections.append(NavSection("Tutorials", tutorial_nodes))

        globals_section = self._globals_section(seen)
        if globals_section:
            sections.append(globals_section)
        return sections

    def api_entry_record(self, api_entry: str | None) -> SymbolRecord | None:
        """Return the API entry record when exactly one root container matches."""
        if not api_entry:
            return None
        matches = [
            r
            for r in self.store.query(longname=api_entry, kind=CONTAINER_KINDS)
            if r.is_root
        ]
        if len(matches) != 1:
            logger.warning(
                "API entry %s matched %d root containers; skipping API section",
                api_entry,
                len(matches),
            )
            return None
        return matches[0]

    def _api_section(self, api_entry: str | None, seen: set[str]) -> NavSection | None:
        entry = self.api_entry_record(api_entry)
        if entry is None or entry.longname in seen:
            return None
        seen.add(entry.longname)
        items = self._structured(entry.longname, seen, TOP_LEVEL + 1)
        return NavSection(API_HEADING, items)

    def _structured(self, longname: str, seen: set[str], level: int) -> list[NavNode]:
        """Recursively list class-like members of longname."""
        if level - TOP_LEVEL > self.max_depth:
            logger.warning("Navigation depth cap reached below %s", longname)
            return []
        nodes: list[NavNode] = []
        for item in self.store.members_of(longname, CLASSLIKE_KINDS):
            if item.longname in seen:
                continue
            seen.add(item.longname)
            children = self._structured(item.longname, seen, level + 1)
            nodes.append(
                NavNode(
                    title=display_name(item.name),
                    link=self.links.url_for(item.longname),
                    longname=item.longname,
                    heading_level=level if (level < BARE_LINK_LEVEL or children) else None,
                    children=children,
                ),
            )
        return nodes

    def _member_section(
        self,
        heading: str,
        items: list[SymbolRecord],
        seen: set[str],
    ) -> NavSection | None:
        nodes: list[NavNode] = []
        for item in items:
            if not item.longname:
                # Nothing to collide with, so never marked as seen.
                nodes.append(NavNode(title=display_name(item.name)))
                continue
            if item.longname in seen:
                continue
            seen.add(item.longname)
            name = item.longname if self.use_longname_in_nav else item.name
            nodes.append(
                NavNode(
                    title=display_name(name),
                    link=self.links.url_for(item.longname),
                    longname=item.longname,
                ),
            )
        return NavSection(heading, nodes) if nodes else None

    def _tutorial_nodes(
        self,
        tutorials: Iterable[Tutorial],
        seen: set[str],
        depth: int,
    ) -> list[NavNode]:
        if depth > self.max_depth:
            return []
        nodes: list[NavNode] = []
        for t in tutorials:
            key = f"tutorial:{t.name}"
            if key in seen:
                continue
            seen.add(key)
            nodes.append(
                NavNode(
                    title=t.title,
                    link=self.links.tutorial_to_url(t.name),
                    children=self._tutorial_nodes(t.children, seen, depth + 1),
                ),
            )
        return nodes

    def _globals_section(self, seen: set[str]) -> NavSection | None:
        globals_ = self.store.query(kind=GLOBAL_KINDS, memberof=IS_UNDEFINED)
        if not globals_:
            return None
        nodes: list[NavNode] = []
        for g in globals_:
            if not g.longname:
                nodes.append(NavNode(title=g.name))
                continue
            if g.kind != "typedef" and g.longname not in seen:
                nodes.append(
                    NavNode(title=g.name, link=self.links.url_for(g.longname), longname=g.longname),
                )
            seen.add(g.longname)
        if not nodes:
            # Heading links straight to the globals page.
            return NavSection("Global", heading_link=self.links.url_for(GLOBAL_LONGNAME))
        return NavSection("Globals", nodes)
