"""Tests for loading deno doc JSON output."""

import json
from pathlib import Path

import pytest

from docpages.filter_private import filter_private
from docpages.load_doc_nodes import build_doc_nodes, load_doc_nodes

NODES = [
    {
        "name": "Ns",
        "kind": "namespace",
        "jsDoc": {"doc": "  A namespace.  ", "tags": [{"kind": "deprecated"}]},
        "namespaceDef": {
            "elements": [
                {"name": "inner", "kind": "function", "declarationKind": "private"},
                {"name": "Other", "kind": "class"},
            ]
        },
    },
    {"kind": "class"},
    "junk",
    {"name": "x", "kind": "variable", "variableDef": {"kind": "let"}},
]


def test_load_doc_nodes_list(tmp_path: Path) -> None:
    """Verify loading a plain list, skipping malformed entries."""
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(NODES), encoding="utf-8")
    nodes = load_doc_nodes(path)
    assert [n.name for n in nodes] == ["Ns", "x"]
    ns = nodes[0]
    assert ns.js_doc is not None
    assert ns.js_doc.doc == "A namespace."
    assert ns.js_doc.tags == ({"kind": "deprecated"},)
    assert [e.name for e in ns.elements] == ["inner", "Other"]
    assert nodes[1].definition() == {"kind": "let"}
    assert nodes[1].js_doc is None


def test_load_doc_nodes_mapping(tmp_path: Path) -> None:
    """Verify loading a mapping with a nodes key."""
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps({"version": 1, "nodes": NODES[3:]}), encoding="utf-8")
    assert [n.name for n in load_doc_nodes(path)] == ["x"]


def test_load_doc_nodes_errors(tmp_path: Path) -> None:
    """Verify that missing files and non-list payloads exit with a message."""
    with pytest.raises(SystemExit, match="not found"):
        load_doc_nodes(tmp_path / "absent.json")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"nodes": "nope"}), encoding="utf-8")
    with pytest.raises(SystemExit, match="Expected a list"):
        load_doc_nodes(bad)


def test_filter_private_recurses() -> None:
    """Verify that private nodes are dropped inside namespaces too."""
    nodes = build_doc_nodes(NODES)
    filtered = filter_private(nodes)
    assert [e.name for e in filtered[0].elements] == ["Other"]
    assert filter_private(nodes, include_private=True) == nodes
