"""Predicate for checking if a record is class-like."""

from src.kinds import CLASSLIKE_KINDS


def is_classlike_kind(kind: str) -> bool:
    """Check if the kind represents a class-like container."""
    return kind.lower() in CLASSLIKE_KINDS
