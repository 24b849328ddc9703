"""Tests for the symbol store and its queries."""

from src.symbol_record import SourceMeta, SymbolRecord
from src.symbol_store import IS_UNDEFINED, SymbolStore


def _store() -> SymbolStore:
    return SymbolStore(
        [
            SymbolRecord(longname="ns", name="ns", kind="namespace"),
            SymbolRecord(longname="ns.A", name="A", kind="class", memberof="ns"),
            SymbolRecord(longname="ns.f", name="f", kind="function", memberof="ns", scope="static"),
            SymbolRecord(
                longname="g",
                name="g",
                kind="function",
                scope="global",
                meta=SourceMeta(filename="g.js", path="lib"),
            ),
            SymbolRecord(longname="ns.A", name="A", kind="interface", memberof="ns"),
        ],
    )


def test_get_returns_first_duplicate() -> None:
    """Verify the first record wins for a duplicated longname."""
    store = _store()
    found = store.get("ns.A")
    assert found is not None
    assert found.kind == "class"
    assert store.get(None) is None


def test_members_of() -> None:
    """Verify membership lookups, optionally filtered by kind."""
    store = _store()
    assert [r.longname for r in store.members_of("ns")] == ["ns.A", "ns.f", "ns.A"]
    assert [r.kind for r in store.members_of("ns", ["function"])] == ["function"]
    assert store.members_of("missing") == []


def test_of_kind_keeps_store_order() -> None:
    """Verify records of several kinds come back in store order."""
    store = _store()
    kinds = [r.kind for r in store.of_kind(("interface", "namespace"))]
    assert kinds == ["namespace", "interface"]


def test_query_with_any_of_and_undefined() -> None:
    """Verify collection values match any-of and IS_UNDEFINED matches absence."""
    store = _store()
    roots = store.query(kind=("namespace", "function"), memberof=IS_UNDEFINED)
    assert [r.longname for r in roots] == ["ns", "g"]
    assert [r.longname for r in store.query(scope="static")] == ["ns.f"]
    assert store.query(longname="ns.A", kind="interface")[0].kind == "interface"


def test_in_source() -> None:
    """Verify records can be looked up by source file."""
    store = _store()
    assert [r.longname for r in store.in_source("lib", "g.js")] == ["g"]
    assert store.in_source("lib", "other.js") == []
