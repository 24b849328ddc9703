"""Logic for linking source files and building their pages."""

import html
import logging
import os
from pathlib import Path, PurePath

from src.doclet_page import SOURCE_KIND, DocletPage, PageRegistry
from src.link_registry import LinkRegistry
from src.symbol_record import SymbolRecord

logger = logging.getLogger(__name__)


def shorten_paths(paths: list[str]) -> dict[str, str]:
    """Map each path to a forward-slash path relative to their common directory."""
    if not paths:
        return {}
    dirs = [os.path.dirname(os.path.abspath(p)) for p in paths]
    try:
        common = os.path.commonpath(dirs)
    except ValueError:
        # Paths on different drives share no prefix.
        common = ""
    shortened = {}
    for p in paths:
        rel = os.path.relpath(os.path.abspath(p), common) if common else p
        shortened[p] = PurePath(rel).as_posix()
    return shortened


def source_pages(
    records: list[SymbolRecord],
    pages: PageRegistry,
    links: LinkRegistry,
    *,
    encoding: str = "utf-8",
    generate: bool = True,
) -> list[DocletPage]:
    """Register a link for every referenced source file and build its page.

    Files that cannot be read are logged and skipped.
    """
    built: list[DocletPage] = []
    shortened = shorten_paths(list(pages.sources))
    for resolved, short in shortened.items():
        pages.sources[resolved] = short
        url = links.url_for(short) or links.unique_filename(short)
        links.register(short, url)
        if not generate:
            continue
        try:
            code = Path(resolved).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error while generating source file %s: %s", resolved, e)
            continue
        page = pages.special_page(SOURCE_KIND, short, url)
        page.code = html.escape(code, quote=False)
        page.resolve_links = False
        built.append(page)

    for r in records:
        if r.meta and r.meta.source in pages.sources:
            r.meta.shortpath = pages.sources[r.meta.source]
    return built
