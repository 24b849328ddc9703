"""Logic for deriving display attributes (static, readonly, ...) of a record."""

import html

from src.symbol_record import DocParam, SymbolRecord

SCOPED_KINDS = {"function", "member", "constant"}


def get_attribs(item: SymbolRecord | DocParam) -> list[str]:
    """Return the attribute labels shown next to a record or tag value."""
    attribs: list[str] = []
    if isinstance(item, SymbolRecord):
        if item.async_:
            attribs.append("async")
        if item.generator:
            attribs.append("generator")
        if item.virtual:
            attribs.append("abstract")
        if item.access and item.access != "public":
            attribs.append(item.access)
        if item.scope not in (None, "instance", "global") and item.kind in SCOPED_KINDS:
            attribs.append(item.scope)
        if item.readonly and item.kind == "member":
            attribs.append("readonly")
        if item.kind == "constant":
            attribs.append("constant")
    if item.nullable is True:
        attribs.append("nullable")
    elif item.nullable is False:
        attribs.append("non-null")
    return attribs


def attribs_string(attribs: list[str]) -> str:
    """Join attributes as an escaped parenthesised list, without "constant"."""
    if not attribs:
        return ""
    return html.escape(f"({', '.join(a for a in attribs if a != 'constant')})", quote=False)
