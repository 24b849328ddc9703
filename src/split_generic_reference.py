"""Best-effort splitting of generic references such as ``Base.<K, V>``."""

OPENERS = {"<": ">", "(": ")", "[": "]", "{": "}"}
CLOSERS = {v: k for k, v in OPENERS.items()}


def split_top_level(text: str, sep: str) -> list[str]:
    """Split text on sep, ignoring separators nested inside any brackets.

    Unbalanced brackets never raise; depth simply stops at zero.
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS and depth > 0:
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return [p.strip() for p in parts]


def split_generic_reference(ref: str) -> tuple[str, list[str]]:
    """Split a reference into its bare name and positional type arguments."""
    start = ref.find("<")
    if start < 0:
        return ref.strip(), []
    bare = ref[:start].rstrip().removesuffix(".")
    end = ref.rfind(">")
    inner = ref[start + 1 : end] if end > start else ref[start + 1 :]
    args = [a for a in split_top_level(inner, ",") if a]
    return bare, args

