"""Shared fixtures for building doc nodes from raw deno doc mappings."""

from collections.abc import Callable
from typing import Any

import pytest

from docpages.doc_node import DocNode
from docpages.load_doc_nodes import build_doc_node

MODULE_URL = "deno.land/x/mod@1.0.0/mod.ts"


def raw_node(name: str, kind: str, doc: str | None = None, **extra: Any) -> dict[str, Any]:
    """Build a raw node mapping shaped like ``deno doc --json`` output."""
    raw: dict[str, Any] = {"name": name, "kind": kind, "declarationKind": "export"}
    if doc is not None:
        raw["jsDoc"] = {"doc": doc}
    raw.update(extra)
    return raw


@pytest.fixture
def make_node() -> Callable[..., DocNode]:
    """Return a factory building DocNodes from raw mapping arguments."""

    def factory(name: str, kind: str, doc: str | None = None, **extra: Any) -> DocNode:
        node = build_doc_node(raw_node(name, kind, doc, **extra))
        assert node is not None
        return node

    return factory
