"""Data models for representing extracted doc nodes."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class JsDoc:
    """Represents a parsed JSDoc comment (markdown body plus tags)."""

    doc: str = ""
    tags: tuple[dict[str, Any], ...] = ()


@dataclass(frozen=True)
class DocNode:
    """Represents one documented export (class, function, namespace, etc.)."""

    name: str
    kind: str  # class/enum/function/interface/namespace/typeAlias/variable/...
    js_doc: JsDoc | None = None
    declaration_kind: str = "export"
    elements: tuple["DocNode", ...] = ()  # namespace children, in source order
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def definition(self) -> dict[str, Any]:
        """Return the kind-specific payload, e.g. ``classDef`` for a class."""
        return self.raw.get(f"{self.kind}Def") or {}
