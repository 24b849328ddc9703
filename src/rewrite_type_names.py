"""Best-effort rewriting of type names: unwrapping and type-parameter substitution."""

from src.split_generic_reference import split_generic_reference, split_top_level

NO_VALUE_TYPE = "void"
ASYNC_WRAPPERS = ("Promise",)
ARRAY_WRAPPERS = ("Array",)
MAX_REWRITE_DEPTH = 16


def rewrite_type_names(names: list[str], bindings: dict[str, str]) -> list[str]:
    """Rewrite a list of type names into a unique, substituted list.

    Async wrappers are unwrapped, array wrappers become ``X[]``, top-level
    unions are split, bound type parameters are substituted and the "no value"
    type is dropped.
    """
    seen: dict[str, None] = {}
    for name in names:
        for rewritten in rewrite_type_name(name, bindings):
            seen.setdefault(rewritten, None)
    return [n for n in seen if n and n != NO_VALUE_TYPE]


def rewrite_type_name(name: str, bindings: dict[str, str], depth: int = 0) -> list[str]:
    """Rewrite one type name; may expand into several names for unions."""
    t = _strip_modifiers(name)
    if depth > MAX_REWRITE_DEPTH:
        return [t]
    if _is_parenthesised(t):
        t = t[1:-1].strip()

    parts = split_top_level(t, "|")
    if len(parts) > 1:
        return [r for p in parts if p for r in rewrite_type_name(p, bindings, depth + 1)]

    bare, args = split_generic_reference(t)
    if bare in ASYNC_WRAPPERS and len(args) == 1:
        return rewrite_type_name(args[0], bindings, depth + 1)
    if bare in ARRAY_WRAPPERS and len(args) == 1:
        return [_array_of(args[0], bindings, depth)]
    if t.endswith("[]") and t != "[]":
        return [_array_of(t[:-2], bindings, depth)]
    bound = bindings.get(t)
    if bound is None or bound == t:
        return [t]
    # Bound values are already concrete; only normalise them.
    return rewrite_type_name(bound, {}, depth + 1)


def _array_of(element: str, bindings: dict[str, str], depth: int) -> str:
    inner = rewrite_type_name(element, bindings, depth + 1)
    joined = "|".join(inner)
    if len(inner) > 1 or "|" in joined:
        return f"({joined})[]"
    return f"{joined}[]"


def _is_parenthesised(t: str) -> bool:
    """Whether one pair of parentheses encloses the whole of t."""
    if not (t.startswith("(") and t.endswith(")")):
        return False
    depth = 0
    for i, ch in enumerate(t):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i == len(t) - 1
    return False


def _strip_modifiers(name: str) -> str:
    """Drop optional/nullable markers: ?T, !T, T=."""
    t = name.strip()
    while t[:1] in ("?", "!") and len(t) > 1:
        t = t[1:]
    if t.endswith("=") and len(t) > 1:
        t = t[:-1]
    return t.strip()
