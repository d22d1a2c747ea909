"""Tests for grouping doc nodes by kind."""

from collections.abc import Callable

from docpages.doc_node import DocNode
from docpages.doc_node_collection import as_collection, is_type_only


def test_as_collection_partitions_input(make_node: Callable[..., DocNode]) -> None:
    """Verify that every node lands in exactly one group, in source order."""
    nodes = [
        make_node("f", "function"),
        make_node("A", "class"),
        make_node("f", "function"),
        make_node("", "moduleDoc", "Module doc"),
        make_node("B", "class"),
    ]
    collection = as_collection(nodes)
    assert sum(len(group) for group in collection.values()) == len(nodes)
    assert sorted(id(n) for g in collection.values() for n in g) == sorted(
        id(n) for n in nodes
    )
    assert [n.name for n in collection["class"]] == ["A", "B"]
    assert collection["function"] == [nodes[0], nodes[2]]
    assert list(collection) == ["function", "class", "moduleDoc"]


def test_as_collection_empty() -> None:
    """Verify that no nodes give an empty collection."""
    assert as_collection([]) == {}


def test_is_type_only(make_node: Callable[..., DocNode]) -> None:
    """Verify the type-only predicate over node sets."""
    iface = make_node("A", "interface")
    alias = make_node("B", "typeAlias")
    var = make_node("A", "variable")
    assert is_type_only([iface, alias])
    assert not is_type_only([iface, var])
