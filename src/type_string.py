"""Utilities for standardising type names for display."""

import re

from src.link_registry import LinkRegistry
from src.symbol_record import DocType

PROMISE_RE = re.compile(r"Promise\.<(.*)>")
COLLECTION_RE = re.compile(r"(Map|Record|Set)\.<")
ARRAY_RE = re.compile(r"Array\.<(.*)>")
INNER_RE = re.compile(r"(.*>)(?:.*?)~(.*)")
GENERIC_DOT_RE = re.compile(r"(.*?)\.(<.*?>.*)")


def type_string(name: str) -> str:
    """Turn JSDoc's dotted generic syntax into a readable type string.

    ``Promise.<X>`` becomes ``X``, ``Array.<X>`` becomes ``X[]`` and
    ``Map.<K, V>`` becomes ``Map<K, V>``.
    """
    name = PROMISE_RE.sub(r"\1", name)
    name = COLLECTION_RE.sub(r"\1<", name)
    name = ARRAY_RE.sub(r"\1[]", name)
    name = INNER_RE.sub(r"\1~\2", name)
    return GENERIC_DOT_RE.sub(r"\1", name)


def type_strings(doc_type: DocType | None, links: LinkRegistry) -> str:
    """Render each of a type's names as a linked display string."""
    if doc_type is None:
        return ""
    return ", ".join(links.link_to(type_string(n)) for n in doc_type.names)
