"""Logic for resolving inherited documentation and generic type parameters.

Every record carrying source metadata is walked once. Members pick up
inheritance edges from their container, documentation tags missing locally
are deep-copied from the first ancestor that can be found, and type names in
params, properties, type and returns are rewritten with the type-parameter
bindings collected along the way. Nothing here ever rejects a record:
unmatched parents and ancestors are simply skipped.
"""

import copy
import logging

from src.ancestor_links import ancestor_links
from src.is_container_kind import is_container_kind
from src.kinds import MAX_RESOLUTION_DEPTH, SCOPE_TO_PUNC
from src.link_registry import LinkRegistry
from src.rewrite_type_names import rewrite_type_name, rewrite_type_names
from src.split_generic_reference import split_generic_reference
from src.symbol_record import DocType, SymbolRecord
from src.symbol_store import SymbolStore

logger = logging.getLogger(__name__)

INHERITABLE_TAGS = (
    "description",
    "examples",
    "see",
    "params",
    "properties",
    "type",
    "returns",
)
TYPED_TAGS = ("params", "properties", "type", "returns")
HERITAGE_ATTRS = ("augments", "implements")


class InheritanceResolver:
    """Materializes inherited tags and generic types on records in place."""

    def __init__(
        self,
        store: SymbolStore,
        links: LinkRegistry,
        max_depth: int = MAX_RESOLUTION_DEPTH,
    ) -> None:
        """Initialize the resolver over a store and its link registry."""
        self.store = store
        self.links = links
        self.max_depth = max_depth

    def resolve(self, records: list[SymbolRecord] | None = None) -> None:
        """Resolve every record (defaults to the whole store), in order."""
        for record in self.store.records if records is None else records:
            if record.meta is not None:
                self.resolve_record(record)
            record.ancestors = ancestor_links(self.store, record, self.links)

    def resolve_record(self, record: SymbolRecord) -> None:
        """Resolve inheritance and type parameters for a single record."""
        candidates = self._candidate_set(record)
        bindings = self._own_bindings(record)

        if not is_container_kind(record.kind):
            self._inherit_from_container(record, candidates, bindings)

        if candidates and not record.blocks_inheritance:
            # First declared wins
            bare, args = next(iter(candidates.items()))
            ancestor = self._find_inheritable(record, bare)
            if ancestor is None:
                logger.debug("No inheritable record %s for %s", bare, record.longname)
            else:
                copy_inherited_tags(ancestor, record)
                self._bind_chain(ancestor, args, bindings, 0, set())

        self._rewrite_types(record, bindings)

    def _candidate_set(self, record: SymbolRecord) -> dict[str, list[str]]:
        """Ordered map of bare ancestor references to their type arguments."""
        candidates: dict[str, list[str]] = {}
        refs = [*record.implements, *record.augments, *record.implements, *record.overrides]
        for ref in refs:
            bare, args = split_generic_reference(ref)
            if bare:
                candidates.setdefault(bare, args)
        return candidates

    def _own_bindings(self, record: SymbolRecord) -> dict[str, str]:
        bindings: dict[str, str] = {}
        for key, param in record.templates.items():
            value = "|".join(param.type_names) or param.default_value or key
            if value != key:
                bindings[key] = value
        return bindings

    def _inherit_from_container(
        self,
        record: SymbolRecord,
        candidates: dict[str, list[str]],
        bindings: dict[str, str],
    ) -> None:
        """Let a member ride along with its container's inheritance edges."""
        parent = self._find_container(record)
        if parent is None:
            return

        for key, param in parent.templates.items():
            value = "|".join(param.type_names)
            if value:
                bindings[key] = value

        punc = SCOPE_TO_PUNC.get(record.scope or "instance", "#")
        for attr in HERITAGE_ATTRS:
            for target in getattr(parent, attr):
                bare, args = split_generic_reference(target)
                if not bare:
                    continue
                self._bind_params(self.store.get(bare), args, bindings)
                ancestor_name = f"{bare}{punc}{record.name}"
                if ancestor_name in candidates:
                    continue
                candidates[ancestor_name] = []
                own = getattr(record, attr)
                if ancestor_name not in own:
                    own.append(ancestor_name)

    def _find_container(self, record: SymbolRecord) -> SymbolRecord | None:
        """Find the record's container among records from the same source file."""
        if not record.memberof or record.meta is None:
            return None
        for other in self.store.in_source(record.meta.path, record.meta.filename):
            if other is record:
                continue
            if record.memberof in (other.name, other.longname):
                return other
        return None

    def _find_inheritable(self, record: SymbolRecord, longname: str) -> SymbolRecord | None:
        filters: dict[str, object] = {"longname": longname, "kind": record.kind}
        if is_container_kind(record.kind):
            matches = self.store.query(**filters)
        else:
            if record.scope:
                filters["scope"] = record.scope
            matches = [
                *self.store.query(**filters, name=record.name),
                *self.store.query(**filters, alias=record.name),
            ]
        return next((m for m in matches if m is not record), None)

    def _bind_params(
        self,
        target: SymbolRecord | None,
        args: list[str],
        bindings: dict[str, str],
        *,
        overwrite: bool = True,
    ) -> dict[str, str]:
        """Bind target's type parameters positionally, else to their defaults."""
        local: dict[str, str] = {}
        if target is None:
            return local
        for index, (key, param) in enumerate(target.templates.items()):
            value = args[index] if index < len(args) else param.default_value
            if not value:
                continue
            local[key] = value
            if overwrite:
                bindings[key] = value
            else:
                bindings.setdefault(key, value)
        return local

    def _bind_chain(
        self,
        target: SymbolRecord | None,
        args: list[str],
        bindings: dict[str, str],
        depth: int,
        visited: set[int],
    ) -> None:
        """Bind target's parameters, then follow its own augments transitively.

        Deeper hops never override a binding made closer to the record.
        """
        if target is None or depth > self.max_depth or id(target) in visited:
            return
        visited.add(id(target))
        local = self._bind_params(target, args, bindings, overwrite=depth == 0)
        for ref in target.augments:
            bare, next_args = split_generic_reference(ref)
            next_args = ["|".join(rewrite_type_name(a, local)) for a in next_args]
            self._bind_chain(self.store.get(bare), next_args, bindings, depth + 1, visited)

    def _rewrite_types(self, record: SymbolRecord, bindings: dict[str, str]) -> None:
        for key in TYPED_TAGS:
            value = getattr(record, key)
            for v in value if isinstance(value, list) else [value]:
                doc_type = v if isinstance(v, DocType) else getattr(v, "type", None)
                if doc_type is not None and doc_type.names:
                    doc_type.names = rewrite_type_names(doc_type.names, bindings)


def copy_inherited_tags(source: SymbolRecord, target: SymbolRecord) -> None:
    """Deep-copy each inheritable tag from source that target leaves empty."""
    for key in INHERITABLE_TAGS:
        inherited = getattr(source, key)
        if _is_empty(getattr(target, key)) and not _is_empty(inherited):
            setattr(target, key, copy.deepcopy(inherited))


def _is_empty(value: object) -> bool:
    if isinstance(value, DocType):
        return not value.names
    return not value
