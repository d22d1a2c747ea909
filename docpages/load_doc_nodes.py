"""Logic for loading doc nodes emitted by ``deno doc --json``."""

import logging
from pathlib import Path
from typing import Any

import yaml

from docpages.doc_node import DocNode, JsDoc

logger = logging.getLogger(__name__)


def build_js_doc(raw: Any) -> JsDoc | None:
    """Build a JsDoc from its raw mapping, or None when absent."""
    if not isinstance(raw, dict):
        return None
    doc = raw.get("doc") or ""
    tags = tuple(t for t in raw.get("tags") or [] if isinstance(t, dict))
    return JsDoc(doc=str(doc).strip(), tags=tags)


def build_doc_node(raw: dict[str, Any]) -> DocNode | None:
    """Build a DocNode (and its namespace children) from a raw mapping."""
    name = raw.get("name")
    kind = raw.get("kind")
    if name is None or not kind:
        logger.warning("Skipping doc node without name or kind: %r", raw)
        return None
    elements: tuple[DocNode, ...] = ()
    if kind == "namespace":
        children = (raw.get("namespaceDef") or {}).get("elements") or []
        elements = build_doc_nodes(children)
    return DocNode(
        name=str(name),
        kind=str(kind),
        js_doc=build_js_doc(raw.get("jsDoc")),
        declaration_kind=str(raw.get("declarationKind") or "export"),
        elements=elements,
        raw=raw,
    )


def build_doc_nodes(items: list[Any]) -> tuple[DocNode, ...]:
    """Build doc nodes from a list of raw mappings, keeping source order."""
    nodes = []
    for it in items:
        if not isinstance(it, dict):
            continue
        node = build_doc_node(it)
        if node:
            nodes.append(node)
    return tuple(nodes)


def load_doc_nodes(path: Path) -> tuple[DocNode, ...]:
    """Load a JSON (or YAML) doc node file.

    The payload is either a list of nodes or a mapping with a ``nodes`` key.
    """
    if not path.exists():
        msg = f"Doc node file not found: {path}"
        raise SystemExit(msg)
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(doc, dict):
        doc = doc.get("nodes")
    if not isinstance(doc, list):
        msg = f"Expected a list of doc nodes in: {path}"
        raise SystemExit(msg)
    return build_doc_nodes(doc)
