"""Logic for rendering the navigation tree as HTML for one page."""

import html

from src.navigation_tree import NavNode, NavSection


def render_navigation(sections: list[NavSection], current_link: str | None = None) -> str:
    """Render navigation sections, marking the current page's path active."""
    parts: list[str] = []
    for section in sections:
        level = section.heading_level
        heading = html.escape(section.heading, quote=False)
        if section.heading_link:
            heading = f'<a href="{html.escape(section.heading_link)}">{heading}</a>'
        parts.append(f"<h{level}>{heading}</h{level}>")
        if section.items:
            parts.append(_render_list(section.items, current_link))
    return "".join(parts)


def active_path(nodes: list[NavNode], current_link: str | None) -> list[NavNode]:
    """Return the nodes from the root down to the entry linking to current_link."""
    if not current_link:
        return []
    for node in nodes:
        if node.link == current_link:
            return [node]
        below = active_path(node.children, current_link)
        if below:
            return [node, *below]
    return []


def _render_list(nodes: list[NavNode], current_link: str | None) -> str:
    active = {id(n) for n in active_path(nodes, current_link)}
    items = "".join(_render_node(n, current_link, id(n) in active) for n in nodes)
    return f"<ul>{items}</ul>" if items else ""


def _render_node(node: NavNode, current_link: str | None, active: bool) -> str:
    cls = ' class="active"' if active else ""
    text = html.escape(node.title, quote=False)
    if node.link:
        link_cls = ' class="active"' if active and node.link == current_link else ""
        title = f'<a href="{html.escape(node.link)}"{link_cls}>{text}</a>'
    else:
        title = text
    level = node.heading_level
    heading = f"<h{level}>{title}</h{level}>" if level else title
    if not node.expandable:
        return f"<li{cls}>{heading}</li>"
    children = _render_list(node.children, current_link if active else None)
    details_attrs = ' class="active" open="open"' if active else ""
    return f"<li{cls}><details{details_attrs}><summary>{heading}</summary>{children}</details></li>"
