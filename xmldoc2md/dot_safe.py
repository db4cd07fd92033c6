"""Utility for turning type full names into stable page file names."""

import re

# Keep letters, digits, underscore, dash and dots; everything else is dropped.
UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.\-]+")


def dot_safe(name: str) -> str:
    """Make a stable, lower-case filename token for a type full name.

    Generic arity markers become hyphens (``Stack`1`` -> ``stack-1``) and
    nested type separators become dots (``Outer+Inner`` -> ``outer.inner``).
    """
    name = name.replace("+", ".")
    name = name.replace("`", "-")
    name = UNSAFE_RE.sub("", name).strip(".-")
    return name.lower() or "unknown"
