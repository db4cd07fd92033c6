"""Predicate for checking if a kind names a type (class, struct, etc.)."""

TYPE_KINDS = ("class", "struct", "interface", "enum", "delegate")


def is_type_kind(kind: str) -> bool:
    """Check if the kind represents a type (class, struct, etc.)."""
    return kind.lower() in TYPE_KINDS
