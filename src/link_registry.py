"""Build-scoped registry of page URLs for longnames, and link rendering."""

import html
import re

from src.file_slug import file_slug
from src.is_container_kind import is_container_kind
from src.symbol_record import SymbolRecord

FILE_EXTENSION = ".html"
GLOBAL_LONGNAME = "global"

# {@link target}, {@link target|text}, {@link target text}, [text]{@link target}
INLINE_LINK_RE = re.compile(
    r"(?:\[(?P<pre>[^\]]+)\])?\{@link(?:code|plain)?\s+(?P<target>[^\s|}]+)"
    r"(?:\s*\|\s*|\s+)?(?P<text>[^}]*)\}",
)
TYPE_TOKEN_RE = re.compile(r"[A-Za-z_$][\w$.:~#/-]*")


class LinkRegistry:
    """Allocates unique file names and resolves longnames to links."""

    def __init__(self) -> None:
        """Create an empty registry for one build."""
        self.longname_to_url: dict[str, str] = {}
        self.files: dict[str, str] = {}  # lower-cased file name -> claimed-by string
        self.fragments: dict[str, set[str]] = {}  # file -> fragment ids used in it

    def register(self, longname: str, url: str) -> None:
        """Register a URL for a longname; the first registration wins."""
        if longname and longname not in self.longname_to_url:
            self.longname_to_url[longname] = url

    def url_for(self, longname: str | None) -> str | None:
        """Return the registered URL for a longname, if any."""
        if not longname:
            return None
        return self.longname_to_url.get(longname)

    def unique_filename(self, name: str) -> str:
        """Claim a case-insensitively unique file name for the given string."""
        base = file_slug(name)
        while base.lower() in self.files:
            base += "_"
        self.files[base.lower()] = name
        return base + FILE_EXTENSION

    def filename_for(self, longname: str) -> str:
        """Return the page file for a longname, claiming one when needed."""
        url = self.url_for(longname)
        if url and "#" not in url:
            return url
        url = self.unique_filename(longname)
        self.register(longname, url)
        return url

    def create_link(self, record: SymbolRecord) -> str:
        """Return the URL a record is documented at.

        Containers get their own page; members become a fragment on the page
        of whatever they are a member of (or the globals page).
        """
        if is_container_kind(record.kind):
            return self.filename_for(record.longname)
        existing = self.url_for(record.longname)
        if existing:
            return existing
        filename = self.filename_for(record.memberof or GLOBAL_LONGNAME)
        if record.name != record.longname or record.scope == "global":
            return f"{filename}#{self._fragment(filename, record.longname, record.name)}"
        return filename

    def tutorial_to_url(self, name: str) -> str:
        """Return (and claim) the page file for a tutorial."""
        key = f"tutorial:{name}"
        url = self.url_for(key)
        if not url:
            url = self.unique_filename(f"tutorial-{name}")
            self.register(key, url)
        return url

    def link_to(
        self,
        longname: str | None,
        text: str | None = None,
        css_class: str | None = None,
    ) -> str:
        """Render a link to a longname, or escaped plain text when unresolved."""
        label = html.escape(text if text is not None else (longname or ""), quote=False)
        url = self.url_for(longname)
        if url is None and longname and _is_type_expression(longname):
            return self._link_type_expression(longname) if text is None else label
        if url is None:
            return label
        cls = f' class="{html.escape(css_class)}"' if css_class else ""
        return f'<a href="{html.escape(url)}"{cls}>{label}</a>'

    def resolve_links(self, text: str) -> str:
        """Replace inline {@link} tags with rendered links."""

        def repl(m: re.Match) -> str:
            target = m.group("target")
            label = (m.group("pre") or m.group("text") or "").strip() or target
            return self.link_to(target, label)

        return INLINE_LINK_RE.sub(repl, text)

    def _fragment(self, filename: str, longname: str, name: str) -> str:
        used = self.fragments.setdefault(filename, set())
        fragment = re.sub(r"[^\w$.-]+", "_", name) or "_"
        while fragment in used:
            fragment += "_"
        used.add(fragment)
        self.register(longname, f"{filename}#{fragment}")
        return fragment

    def _link_type_expression(self, expression: str) -> str:
        """Link every registered name inside a type expression like Array.<Foo>."""
        parts: list[str] = []
        last = 0
        for m in TYPE_TOKEN_RE.finditer(expression):
            parts.append(html.escape(expression[last : m.start()], quote=False))
            token = m.group(0).rstrip(".")
            url = self.url_for(token)
            rendered = html.escape(token, quote=False)
            parts.append(f'<a href="{html.escape(url)}">{rendered}</a>' if url else rendered)
            parts.append(html.escape(m.group(0)[len(token) :], quote=False))
            last = m.end()
        parts.append(html.escape(expression[last:], quote=False))
        return "".join(parts)


def _is_type_expression(s: str) -> bool:
    return any(c in s for c in "<>|(),[]")
