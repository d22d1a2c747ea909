"""Utility for turning package names into identifier-friendly symbols."""

import re


def camelize(name: str) -> str:
    """Camel-case a name split on whitespace, underscores and dashes."""
    words = [w for w in re.split(r"[\s_\-]+", name) if w]
    if not words:
        return name
    head, *rest = words
    return head.lower() + "".join(w[0].upper() + w[1:].lower() for w in rest)
