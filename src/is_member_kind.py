"""Predicate for checking if a record is a member."""

from src.kinds import MEMBER_KINDS


def is_member_kind(kind: str) -> bool:
    """Check if the kind represents a member (function, constant, etc.)."""
    return kind.lower() in MEMBER_KINDS
