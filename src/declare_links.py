"""Logic for declaring every record's page link to the link registry."""

from pathlib import Path

from src.link_registry import LinkRegistry
from src.symbol_record import SymbolRecord


def declare_links(
    records: list[SymbolRecord],
    links: LinkRegistry,
    api_entry: str | None = None,
    index_url: str | None = None,
) -> None:
    """Assign link, id and source path to each record and register its link."""
    # The API entry is documented on the index page instead of its own page.
    if api_entry and index_url:
        links.register(api_entry, index_url)

    for r in records:
        r.attribs = ""
        r.link = links.create_link(r)
        r.id = r.link.split("#")[-1] if "#" in r.link else r.name
        links.register(r.longname, r.link)
        if r.meta:
            directory = r.meta.path
            r.meta.source = (
                str(Path(directory) / r.meta.filename)
                if directory and directory != "null"
                else r.meta.filename
            )
