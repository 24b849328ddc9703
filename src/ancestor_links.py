"""Logic for building breadcrumb links from a record's membership chain."""

from src.kinds import MAX_RESOLUTION_DEPTH, SCOPE_TO_PUNC
from src.link_registry import LinkRegistry
from src.symbol_record import SymbolRecord
from src.symbol_store import SymbolStore


def get_ancestors(store: SymbolStore, record: SymbolRecord) -> list[SymbolRecord]:
    """Return the records record is nested in, outermost first."""
    ancestors: list[SymbolRecord] = []
    seen = {id(record)}
    current = record
    for _ in range(MAX_RESOLUTION_DEPTH):
        parent = store.get(current.memberof)
        if parent is None or id(parent) in seen:
            break
        seen.add(id(parent))
        ancestors.insert(0, parent)
        current = parent
    return ancestors


def ancestor_links(
    store: SymbolStore,
    record: SymbolRecord,
    links: LinkRegistry,
) -> list[str]:
    """Render breadcrumb links for each ancestor of a record."""
    out = [
        links.link_to(a.longname, SCOPE_TO_PUNC.get(a.scope or "", "") + a.name)
        for a in get_ancestors(store, record)
    ]
    if out:
        out[-1] += SCOPE_TO_PUNC.get(record.scope or "", "")
    return out
