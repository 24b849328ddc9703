"""Logic for rendering a table-of-contents tree as HTML."""

import html

from src.toc_tree import TocNode


def render_toc(items: list[TocNode], *, inline: bool = False) -> str:
    """Render TOC entries as nested lists; siblings render as unindented lists."""
    content = ""
    for item in items:
        title = f'<a href="#{html.escape(item.id)}">{item.name}</a>' if item.id else item.name
        body = f'<h5 class="toc-section">{title}</h5>' if item.section else title
        siblings = render_toc(item.siblings, inline=True)
        children = render_toc(item.children)
        content += f"<li>{body}{siblings}{children}</li>"
    if not content:
        return ""
    cls = ' class="no-indent"' if inline else ""
    return f"<ul{cls}>{content}</ul>"
