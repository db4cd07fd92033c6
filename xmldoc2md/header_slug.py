"""Utility for generating anchors for Markdown headers."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug: lower, drop punctuation, hyphenate spaces."""
    s = s.strip().lower()
    s = re.sub(r"[^\w\- ]+", "", s)
    s = re.sub(r"\s", "-", s)
    return s or "section"
