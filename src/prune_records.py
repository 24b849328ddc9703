"""Logic for dropping records that should never be published."""

from src.symbol_record import SymbolRecord

ANONYMOUS_MEMBEROF = "<anonymous>"


def prune_records(
    records: list[SymbolRecord],
    *,
    include_private: bool = False,
) -> list[SymbolRecord]:
    """Remove undocumented, ignored, anonymous and (optionally) private records."""
    kept = []
    for r in records:
        if r.undocumented or r.ignore:
            continue
        if r.memberof == ANONYMOUS_MEMBEROF:
            continue
        if r.access == "private" and not include_private:
            continue
        kept.append(r)
    return kept
