"""Utility for turning longnames into safe output file base names."""

import re

# Characters that are unsafe in file names on common platforms.
UNSAFE_RE = re.compile(r"[\\/?*:|'\"<>]")
NS_PREFIX_RE = re.compile(r"^(event|module|external|package):")


def file_slug(longname: str) -> str:
    """Make a stable filename-ish token from a longname.

    Namespace prefixes become hyphenated, scope punctuation and unsafe
    characters are replaced, and a trailing call signature is dropped.
    """
    name = NS_PREFIX_RE.sub(r"\1-", longname or "")
    name = re.sub(r"\([\s\S]*\)$", "", name)  # foo(bar) -> foo
    name = UNSAFE_RE.sub("_", name)
    name = name.replace("~", "-").replace("#", "_")
    name = re.sub(r"^\.-", "", name)
    # Avoid pathological emptiness
    return name or "_"
