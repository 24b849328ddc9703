"""In-memory symbol store with explicit indexes by longname, kind and membership."""

import logging
from collections.abc import Iterable

from src.symbol_record import SymbolRecord

logger = logging.getLogger(__name__)


class _Undefined:
    """Sentinel filter value matching fields that are absent."""

    def __repr__(self) -> str:
        return "IS_UNDEFINED"


IS_UNDEFINED = _Undefined()


class SymbolStore:
    """Queryable, ordered collection of symbol records."""

    def __init__(self, records: Iterable[SymbolRecord]) -> None:
        """Index the records, keeping their original order."""
        self.records: list[SymbolRecord] = list(records)
        self._position = {id(r): i for i, r in enumerate(self.records)}
        self.by_longname: dict[str, list[SymbolRecord]] = {}
        self.by_kind: dict[str, list[SymbolRecord]] = {}
        self.by_memberof: dict[str | None, list[SymbolRecord]] = {}
        self.by_source: dict[tuple[str, str], list[SymbolRecord]] = {}

        for r in self.records:
            self.by_longname.setdefault(r.longname, []).append(r)
            self.by_kind.setdefault(r.kind, []).append(r)
            self.by_memberof.setdefault(r.memberof or None, []).append(r)
            if r.meta:
                self.by_source.setdefault((r.meta.path, r.meta.filename), []).append(r)

        for longname, matches in self.by_longname.items():
            if longname and len(matches) > 1:
                logger.warning(
                    "Duplicate longname %s (%d records); first one wins",
                    longname,
                    len(matches),
                )

    def __len__(self) -> int:
        """Return the number of stored records."""
        return len(self.records)

    def get(self, longname: str | None) -> SymbolRecord | None:
        """Return the first record with the given longname, if any."""
        if not longname:
            return None
        matches = self.by_longname.get(longname)
        return matches[0] if matches else None

    def members_of(
        self,
        longname: str | None,
        kinds: Iterable[str] | None = None,
    ) -> list[SymbolRecord]:
        """Return records whose memberof equals longname, optionally by kind."""
        members = self.by_memberof.get(longname or None, [])
        if kinds is None:
            return list(members)
        wanted = set(kinds)
        return [m for m in members if m.kind in wanted]

    def of_kind(self, kinds: str | Iterable[str]) -> list[SymbolRecord]:
        """Return records of any of the given kinds, in store order."""
        if isinstance(kinds, str):
            return list(self.by_kind.get(kinds, []))
        found = [r for k in set(kinds) for r in self.by_kind.get(k, [])]
        return self._ordered(found)

    def in_source(self, path: str, filename: str) -> list[SymbolRecord]:
        """Return records declared in the given source file."""
        return list(self.by_source.get((path, filename), []))

    def query(self, **filters: object) -> list[SymbolRecord]:
        """Return records matching every field in filters, in store order.

        Each value is a scalar, a collection of acceptable values, or
        IS_UNDEFINED.
        """
        candidates = self._candidates(filters)
        return [r for r in candidates if all(_matches(r, k, v) for k, v in filters.items())]

    def _candidates(self, filters: dict[str, object]) -> list[SymbolRecord]:
        longname = filters.get("longname")
        if isinstance(longname, str):
            return list(self.by_longname.get(longname, []))
        memberof = filters.get("memberof")
        if isinstance(memberof, str):
            return list(self.by_memberof.get(memberof, []))
        if memberof is IS_UNDEFINED:
            return list(self.by_memberof.get(None, []))
        kind = filters.get("kind")
        if isinstance(kind, str):
            return list(self.by_kind.get(kind, []))
        if isinstance(kind, (list, tuple, set, frozenset)):
            return self.of_kind(kind)
        return list(self.records)

    def _ordered(self, records: list[SymbolRecord]) -> list[SymbolRecord]:
        return sorted(records, key=lambda r: self._position[id(r)])


def _matches(record: SymbolRecord, key: str, expected: object) -> bool:
    actual = getattr(record, key, None)
    if expected is IS_UNDEFINED:
        return actual in (None, "")
    if isinstance(expected, (list, tuple, set, frozenset)):
        return actual in expected
    return actual == expected
