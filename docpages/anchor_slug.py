"""Utility for generating element ids for sections and members."""

import re


def anchor_slug(*parts: str) -> str:
    """Join parts into an id: lower-case, non-alnum runs become one hyphen."""
    s = "-".join(p.strip() for p in parts if p and p.strip()).lower()
    s = re.sub(r"[^a-z0-9_$]+", "-", s).strip("-")
    return s or "section"
