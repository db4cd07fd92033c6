"""Predicate for checking if a kind names a member."""

MEMBER_KINDS = ("field", "property", "constructor", "method", "event")


def is_member_kind(kind: str) -> bool:
    """Check if the kind represents a member (method, property, etc.)."""
    return kind.lower() in MEMBER_KINDS
