"""Logic for rendering a page as a complete HTML document."""

import html
from datetime import datetime

from src.doclet_page import (
    MAINPAGE_KIND,
    SOURCE_KIND,
    TUTORIAL_KIND,
    DocletPage,
    format_examples,
)
from src.is_classlike_kind import is_classlike_kind
from src.kinds import CONTAINER_KINDS, KIND_TITLES, MEMBER_KINDS
from src.link_registry import LinkRegistry
from src.pluralise import pluralise
from src.symbol_record import DocParam, Example, SymbolRecord
from src.type_string import type_strings


def render_page(
    page: DocletPage,
    links: LinkRegistry,
    *,
    nav_html: str = "",
    toc_html: str = "",
    site_name: str = "",
    include_date: bool = True,
) -> str:
    """Render a page with its navigation and table of contents."""
    title = f"{site_name}: {page.doctitle}" if site_name else page.doctitle
    footer = "Documentation generated by classy-publish"
    if include_date:
        footer += f" on {datetime.now().strftime('%a %b %d %Y %H:%M:%S')}"

    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{html.escape(title, quote=False)}</title>",
        "</head>",
        "<body>",
        f'<nav id="nav">{nav_html}</nav>',
        f"<main>{render_article(page, links)}</main>",
        f'<aside id="toc">{toc_html}</aside>',
        f"<footer>{footer}</footer>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(parts)


def render_article(page: DocletPage, links: LinkRegistry) -> str:
    """Render the main article of a page, resolving inline links when enabled."""
    parts = [f'<h1 class="page-title">{page.heading}</h1>']
    if page.kind == SOURCE_KIND:
        parts.append(f'<pre class="source linenums"><code>{page.code}</code></pre>')
    elif page.kind in (MAINPAGE_KIND, TUTORIAL_KIND):
        parts.append(f'<section class="readme">{page.description}</section>')
    else:
        parts.extend(_render_overview(page, links))
        parts.extend(_render_container_sections(page, links))
        parts.extend(_render_member_sections(page, links))

    article = "\n".join(["<article>", *parts, "</article>"])
    return links.resolve_links(article) if page.resolve_links else article


def _render_overview(page: DocletPage, links: LinkRegistry) -> list[str]:
    """Render the summary, description and usage of the page's own record."""
    parts = ['<section class="container-overview">']
    record = page.record
    if page.summary:
        parts.append(f'<div class="summary">{page.summary}</div>')
    description = page.classdesc + page.description
    if description:
        parts.append(f'<div class="description" id="description">{description}</div>')

    if record is not None and is_classlike_kind(page.kind):
        parts.append('<section id="usage">')
        parts.append(f'<h3 id="details">{page.attribs}{html.escape(page.name, quote=False)}{page.signature}</h3>')
        parts.extend(_render_details(record, links))
        if page.params:
            parts += ['<h4 id="params">Parameters</h4>', _param_table(page.params, links)]
        if page.properties:
            parts += ['<h4 id="properties">Properties</h4>', _param_table(page.properties, links)]
        if page.examples:
            parts += ['<h4 id="examples">Examples</h4>', *_render_examples(page.examples)]
        parts.append("</section>")
    parts.append("</section>")
    return parts


def _render_container_sections(page: DocletPage, links: LinkRegistry) -> list[str]:
    parts = []
    for kind in CONTAINER_KINDS:
        members = page.members.get(kind)
        if not members:
            continue
        section_id = pluralise(kind)
        parts.append(f'<h3 class="subsection-title" id="{section_id}">{pluralise(KIND_TITLES[kind])}</h3>')
        items = "".join(f"<li>{links.link_to(m.longname, m.name)}{_summary(m)}</li>" for m in members)
        parts.append(f'<ul class="subsection-list">{items}</ul>')
    return parts


def _render_member_sections(page: DocletPage, links: LinkRegistry) -> list[str]:
    parts = []
    for kind in MEMBER_KINDS:
        members = page.members.get(kind)
        if not members:
            continue
        section_id = pluralise("method" if kind == "function" else kind)
        parts.append(f'<section id="{section_id}">')
        parts.append(f'<h3 class="subsection-title">{pluralise(KIND_TITLES[kind])}</h3>')
        for m in members:
            parts.extend(_render_member(m, links))
        parts.append("</section>")
    return parts


def _render_member(member: SymbolRecord, links: LinkRegistry) -> list[str]:
    attribs = "" if member.kind == "constant" else member.attribs
    parts = [
        f'<h4 class="name" id="{html.escape(member.id)}">'
        f"{attribs}{html.escape(member.name, quote=False)}{member.signature}</h4>",
    ]
    if member.summary:
        parts.append(f'<div class="summary">{member.summary}</div>')
    if member.description:
        parts.append(f'<div class="description">{member.description}</div>')
    if member.params:
        parts += ["<h5>Parameters</h5>", _param_table(member.params, links)]
    if member.properties:
        parts += ["<h5>Properties</h5>", _param_table(member.properties, links)]
    parts.extend(_render_details(member, links))
    for label, values in (("Returns", member.returns), ("Throws", member.exceptions)):
        if values:
            parts.append(f"<h5>{label}</h5>")
            parts.extend(
                f'<div class="param-desc">{type_strings(v.type, links)} {v.description}</div>'
                for v in values
            )
    if member.examples:
        parts += ["<h5>Examples</h5>", *_render_examples(member.examples)]
    return parts


def _render_details(record: SymbolRecord, links: LinkRegistry) -> list[str]:
    """Render the definition list of source location, inheritance and see-also."""
    rows = []
    if record.augments:
        rows.append(("Extends", ", ".join(links.link_to(a) for a in record.augments)))
    if record.implements:
        rows.append(("Implements", ", ".join(links.link_to(i) for i in record.implements)))
    if record.overrides:
        rows.append(("Overrides", ", ".join(links.link_to(o) for o in record.overrides)))
    if record.meta and record.meta.shortpath:
        source = links.link_to(record.meta.shortpath)
        if record.meta.lineno:
            source += f", line {record.meta.lineno}"
        rows.append(("Source", source))
    if record.see:
        items = "".join(
            f"<li>{s if s.startswith('<a') else links.link_to(s)}</li>" for s in record.see
        )
        rows.append(("See", f"<ul>{items}</ul>"))
    if not rows:
        return []
    body = "".join(f'<dt class="tag-{label.lower()}">{label}:</dt><dd>{value}</dd>' for label, value in rows)
    return [f'<dl class="details">{body}</dl>']


def _param_table(params: list[DocParam], links: LinkRegistry) -> str:
    rows = []
    for p in params:
        attributes = []
        if p.optional:
            attributes.append("&lt;optional&gt;")
        if p.nullable is True:
            attributes.append("&lt;nullable&gt;")
        if p.variable:
            attributes.append("&lt;repeatable&gt;")
        default = html.escape(p.default_value, quote=False) if p.default_value is not None else ""
        rows.append(
            f'<tr><td class="name"><code>{html.escape(p.name, quote=False)}</code></td>'
            f'<td class="type">{type_strings(p.type, links)}</td>'
            f'<td class="attributes">{"<br>".join(attributes)}</td>'
            f'<td class="default">{default}</td>'
            f'<td class="description">{p.description}</td></tr>',
        )
    header = "<tr><th>Name</th><th>Type</th><th>Attributes</th><th>Default</th><th>Description</th></tr>"
    return f'<table class="params"><thead>{header}</thead><tbody>{"".join(rows)}</tbody></table>'


def _render_examples(examples: list[str] | list[Example]) -> list[str]:
    parts = []
    for ex in format_examples(examples):
        if ex.caption:
            parts.append(f'<p class="code-caption">{ex.caption}</p>')
        parts.append(f'<pre class="prettyprint"><code>{html.escape(ex.code, quote=False)}</code></pre>')
    return parts


def _summary(record: SymbolRecord) -> str:
    return f'<div class="summary">{record.summary}</div>' if record.summary else ""
