"""Tests for inherited documentation and generic type resolution."""

from src.inheritance_resolver import InheritanceResolver, copy_inherited_tags
from src.link_registry import LinkRegistry
from src.symbol_record import DocParam, DocType, SourceMeta, SymbolRecord, TemplateParam
from src.symbol_store import SymbolStore


def _rec(longname: str, kind: str, filename: str = "a.js", **kw: object) -> SymbolRecord:
    name = kw.pop("name", longname.split("#")[-1].split(".")[-1])
    return SymbolRecord(
        longname=longname,
        name=str(name),
        kind=kind,
        meta=SourceMeta(filename=filename, path="/src"),
        **kw,
    )


def _resolve(records: list[SymbolRecord]) -> SymbolStore:
    store = SymbolStore(records)
    InheritanceResolver(store, LinkRegistry()).resolve()
    return store


def test_class_inherits_missing_description() -> None:
    """Verify that an empty description is copied from the augmented class."""
    base = _rec("Base", "class", description="Base docs")
    derived = _rec("Derived", "class", "b.js", augments=["Base"])
    _resolve([base, derived])
    assert derived.description == "Base docs"


def test_local_documentation_is_kept() -> None:
    """Verify that a record's own documentation is never overwritten."""
    base = _rec("Base", "class", description="Base docs", see=["Other"])
    derived = _rec("Derived", "class", "b.js", augments=["Base"], description="Mine")
    _resolve([base, derived])
    assert derived.description == "Mine"
    assert derived.see == ["Other"]


def test_inherited_values_are_deep_copies() -> None:
    """Verify that mutating an inherited value leaves the ancestor untouched."""
    base = _rec("Base", "class", params=[DocParam(name="x", type=DocType(names=["number"]))])
    derived = _rec("Derived", "class", "b.js", augments=["Base"])
    _resolve([base, derived])

    derived.params[0].name = "y"
    derived.params[0].type.names.append("string")
    assert base.params[0].name == "x"
    assert base.params[0].type.names == ["number"]


def test_exceptions_block_inheritance() -> None:
    """Verify that a locally documented exception stops tags being inherited."""
    base = _rec("Base", "class", description="Base docs")
    derived = _rec(
        "Derived",
        "class",
        "b.js",
        augments=["Base"],
        exceptions=[DocParam(type=DocType(names=["Error"]))],
    )
    _resolve([base, derived])
    assert derived.description == ""


def test_member_inherits_through_container() -> None:
    """Verify that a member picks up docs from the same member of the parent's base."""
    base = _rec("Base", "class", "base.js")
    base_run = _rec(
        "Base#run",
        "function",
        "base.js",
        memberof="Base",
        scope="instance",
        description="Runs it",
    )
    derived = _rec("Derived", "class", "derived.js", augments=["Base"])
    derived_run = _rec("Derived#run", "function", "derived.js", memberof="Derived", scope="instance")
    _resolve([base, base_run, derived, derived_run])

    assert derived_run.description == "Runs it"
    assert derived_run.augments == ["Base#run"]


def test_member_scope_must_match() -> None:
    """Verify that a static member does not inherit from an instance member."""
    base = _rec("Base", "class", "base.js")
    base_run = _rec(
        "Base#run", "function", "base.js", memberof="Base", scope="instance", description="x"
    )
    derived = _rec("Derived", "class", "derived.js", augments=["Base"])
    derived_run = _rec("Derived.run", "function", "derived.js", memberof="Derived", scope="static")
    _resolve([base, base_run, derived, derived_run])
    assert derived_run.description == ""


def test_template_parameter_substitution() -> None:
    """Verify that Array<T> in an inherited type becomes string[] for Base<string>."""
    base = _rec("Base", "class", "base.js", templates={"T": TemplateParam()})
    items = _rec(
        "Base#items",
        "member",
        "base.js",
        memberof="Base",
        scope="instance",
        type=DocType(names=["Array.<T>"]),
    )
    derived = _rec("Derived", "class", "derived.js", augments=["Base<string>"])
    derived_items = _rec("Derived#items", "member", "derived.js", memberof="Derived", scope="instance")
    _resolve([base, items, derived, derived_items])

    assert derived_items.type is not None
    assert derived_items.type.names == ["string[]"]
    # The ancestor keeps its own parameter.
    assert items.type.names == ["T[]"]


def test_template_default_used_without_argument() -> None:
    """Verify that a type parameter falls back to its declared default."""
    base = _rec("Base", "class", "base.js", templates={"T": TemplateParam(default_value="number")})
    get = _rec(
        "Base#get",
        "function",
        "base.js",
        memberof="Base",
        scope="instance",
        returns=[DocParam(type=DocType(names=["Promise.<T>"]))],
    )
    derived = _rec("Derived", "class", "derived.js", augments=["Base"])
    derived_get = _rec("Derived#get", "function", "derived.js", memberof="Derived", scope="instance")
    _resolve([base, get, derived, derived_get])

    assert derived_get.returns[0].type.names == ["number"]


def test_transitive_template_binding() -> None:
    """Verify that bindings follow an ancestor's own generic augments."""
    root = _rec("Root", "class", "root.js", templates={"U": TemplateParam()}, description="Root")
    mid = _rec("Mid", "class", "mid.js", templates={"T": TemplateParam()}, augments=["Root<T>"])
    leaf = _rec(
        "Leaf",
        "class",
        "leaf.js",
        augments=["Mid<string>"],
        params=[DocParam(name="u", type=DocType(names=["U"]))],
    )
    _resolve([root, mid, leaf])
    assert leaf.params[0].type.names == ["string"]


def test_first_candidate_wins() -> None:
    """Verify that only the first declared ancestor supplies documentation."""
    first = _rec("First", "interface", "f.js", description="From first")
    second = _rec("Second", "interface", "s.js", description="From second")
    impl = _rec("Impl", "interface", "i.js", implements=["First", "Second"])
    _resolve([first, second, impl])
    assert impl.description == "From first"


def test_resolution_is_idempotent() -> None:
    """Verify that resolving twice gives the same result."""
    base = _rec("Base", "class", "base.js", templates={"T": TemplateParam()})
    items = _rec(
        "Base#items",
        "member",
        "base.js",
        memberof="Base",
        scope="instance",
        type=DocType(names=["Array.<T>", "void"]),
    )
    derived = _rec("Derived", "class", "derived.js", augments=["Base<string|number>"])
    derived_items = _rec("Derived#items", "member", "derived.js", memberof="Derived", scope="instance")
    store = SymbolStore([base, items, derived, derived_items])
    resolver = InheritanceResolver(store, LinkRegistry())

    resolver.resolve()
    first = (list(derived_items.type.names), list(derived_items.augments))
    resolver.resolve()
    assert (derived_items.type.names, derived_items.augments) == first
    assert first[0] == ["(string|number)[]"]


def test_augments_cycle_terminates() -> None:
    """Verify that a cyclic inheritance chain does not loop forever."""
    a = _rec("A", "class", "a.js", augments=["B"], templates={"T": TemplateParam()})
    b = _rec("B", "class", "b.js", augments=["A"], description="B docs")
    _resolve([a, b])
    assert a.description == "B docs"
    assert b.description == "B docs"


def test_records_without_meta_are_skipped() -> None:
    """Verify that only records carrying source metadata are resolved."""
    base = _rec("Base", "class", description="Base docs")
    derived = SymbolRecord(longname="Derived", name="Derived", kind="class", augments=["Base"])
    _resolve([base, derived])
    assert derived.description == ""


def test_ancestors_are_populated() -> None:
    """Verify that breadcrumb links are set from the membership chain."""
    ns = _rec("ns", "namespace")
    cls = _rec("ns.Widget", "class", memberof="ns", scope="static")
    method = _rec("ns.Widget#draw", "function", memberof="ns.Widget", scope="instance")
    _resolve([ns, cls, method])
    assert method.ancestors == ["ns", ".Widget#"]
    assert cls.ancestors == ["ns."]


def test_copy_inherited_tags_treats_empty_type_as_missing() -> None:
    """Verify that an empty type is replaced by the source's type."""
    source = SymbolRecord(longname="S", name="S", kind="member", type=DocType(names=["string"]))
    target = SymbolRecord(longname="T", name="T", kind="member", type=DocType())
    copy_inherited_tags(source, target)
    assert target.type is not None
    assert target.type.names == ["string"]
