"""Predicate for checking if a record kind can own members."""

from src.kinds import CONTAINER_KINDS


def is_container_kind(kind: str) -> bool:
    """Check if the kind represents a container (module, class, namespace, etc.)."""
    return kind.lower() in CONTAINER_KINDS
