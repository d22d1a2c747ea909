"""Data model for a parsed registry module specifier."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedURL:
    """Structured view of a module specifier, used for display grouping."""

    registry: str
    org: str | None = None
    package: str | None = None
    version: str | None = None
    module: str | None = None  # path inside the package, e.g. http/server.ts
