"""Orchestration logic for publishing symbol records as HTML pages."""

import argparse
import logging
from pathlib import Path
from typing import Any

from src.build_context import BuildContext
from src.declare_links import declare_links
from src.doclet_page import GLOBALS_KIND, TUTORIAL_KIND, DocletPage
from src.inheritance_resolver import InheritanceResolver
from src.kinds import CONTAINER_KINDS, MEMBER_KINDS
from src.load_config import load_config
from src.load_records import load_records
from src.main_page import build_main_page
from src.navigation_tree import NavigationBuilder, NavSection
from src.prune_records import prune_records
from src.render_navigation import render_navigation
from src.render_page import render_page
from src.render_toc import render_toc
from src.sign_records import sign_records
from src.source_pages import source_pages
from src.symbol_store import IS_UNDEFINED, SymbolStore
from src.toc_tree import build_toc_structure
from src.tutorial import Tutorial, load_tutorials

logger = logging.getLogger(__name__)

RECORD_SUFFIXES = ("*.json", "*.yml", "*.yaml")


def run_publish(args: argparse.Namespace) -> int:
    """Execute the full publishing pipeline."""
    config = load_config(args.config)
    _apply_overrides(config, args)

    paths = _record_files(args.records, config)
    if not paths:
        msg = f"No record files found under: {args.records}"
        raise SystemExit(msg)

    records = prune_records(load_records(paths), include_private=config["opts"]["private"])
    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    ctx = BuildContext(SymbolStore(records), config, out_root)

    readme = _read_optional(config["opts"].get("readme"), ctx.encoding)
    tutorials_dir = config["opts"].get("tutorials")
    tutorials = load_tutorials(Path(tutorials_dir), ctx.encoding) if tutorials_dir else []

    written = publish(ctx, readme=readme, tutorials=tutorials)
    print(f"Generated {written} HTML pages into: {out_root}")
    return 0


def publish(
    ctx: BuildContext,
    *,
    readme: str | None = None,
    tutorials: list[Tutorial] | None = None,
) -> int:
    """Resolve, paginate and write every page of one build; return pages written."""
    store, links = ctx.store, ctx.links
    tutorials = tutorials or []
    defaults = ctx.config["templates"]["default"]

    declare_links(store.records, links, ctx.api_entry, ctx.index_url)
    InheritanceResolver(store, links).resolve()
    sign_records(store.records, links)

    pages = []
    seen: set[str] = set()
    for r in store.of_kind(CONTAINER_KINDS):
        # Duplicates share a filename, so the first record owns the page.
        if r.longname in seen:
            logger.warning("Skipping page for duplicate longname %s", r.longname)
            continue
        seen.add(r.longname)
        pages.append(ctx.pages.page_for(r, store.members_of(r.longname)))

    entry_page = None
    if ctx.api_entry:
        # The entry is documented on the index page instead of its own page.
        matches = store.query(longname=ctx.api_entry, kind=CONTAINER_KINDS)
        if matches:
            entry_page = ctx.pages.page_for(matches[0])
            pages.remove(entry_page)

    if defaults.get("output_source_files"):
        pages.extend(source_pages(store.records, ctx.pages, links, encoding=ctx.encoding))

    navigation = NavigationBuilder(
        store,
        links,
        use_longname_in_nav=bool(defaults.get("use_longname_in_nav")),
    ).build(ctx.api_entry, tutorials)

    globals_ = store.query(kind=MEMBER_KINDS, memberof=IS_UNDEFINED)
    if globals_:
        pages.insert(0, ctx.pages.special_page(GLOBALS_KIND, "Globals", ctx.global_url, globals_))
    pages.insert(0, build_main_page(readme, ctx.pages, links, ctx.index_url, entry_page))
    pages.extend(_tutorial_pages(ctx, tutorials))

    total = len(pages)
    print(f"Writing {total} pages...")
    written = 0
    for page in pages:
        if _write_page(ctx, page, navigation):
            written += 1
    return written


def _write_page(ctx: BuildContext, page: DocletPage, navigation: list[NavSection]) -> bool:
    """Render one page to disk; a failure is logged and the page skipped."""
    classy = ctx.config["templates"]["classy"]
    content = render_page(
        page,
        ctx.links,
        nav_html=render_navigation(navigation, page.link),
        toc_html=render_toc(build_toc_structure(page)),
        site_name=classy.get("name") if classy.get("show_name") else "",
        include_date=bool(ctx.config["templates"]["default"].get("include_date")),
    )
    out_file = ctx.out_dir / page.link
    try:
        out_file.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Could not write page %s: %s", out_file, e)
        return False
    return True


def _tutorial_pages(ctx: BuildContext, tutorials: list[Tutorial]) -> list[DocletPage]:
    pages = []
    pending = list(tutorials)
    while pending:
        t = pending.pop(0)
        url = ctx.links.tutorial_to_url(t.name)
        pages.append(ctx.pages.special_page(TUTORIAL_KIND, t.title, url, description=t.content))
        pending.extend(t.children)
    return pages


def _record_files(records: Path, config: dict[str, Any]) -> list[Path]:
    """Collect record files from a file or directory plus configured includes."""
    if records.is_dir():
        paths = sorted({p for pattern in RECORD_SUFFIXES for p in records.rglob(pattern)})
    elif records.exists():
        paths = [records]
    else:
        paths = []
    for extra in config["source"]["include"]:
        p = Path(extra)
        if p.exists() and p not in paths:
            paths.append(p)
        elif not p.exists():
            logger.warning("Configured record file %s not found", p)
    return paths


def _read_optional(path: str | None, encoding: str) -> str | None:
    if not path:
        return None
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", path, e)
        return None


def _apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> None:
    """Let command-line options take precedence over the config file."""
    if args.api_entry:
        config["templates"]["classy"]["api_entry"] = args.api_entry
    if args.private:
        config["opts"]["private"] = True
    if args.readme:
        config["opts"]["readme"] = str(args.readme)
    if args.tutorials:
        config["opts"]["tutorials"] = str(args.tutorials)
    if args.no_source_files:
        config["templates"]["default"]["output_source_files"] = False
