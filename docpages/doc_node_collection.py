"""Grouping of doc nodes by kind."""

from collections.abc import Iterable

from docpages.doc_node import DocNode

TYPE_ONLY_KINDS = frozenset({"interface", "typeAlias"})

DocNodeCollection = dict[str, list[DocNode]]


def as_collection(nodes: Iterable[DocNode]) -> DocNodeCollection:
    """Group nodes by kind, preserving source order inside each group."""
    collection: DocNodeCollection = {}
    for node in nodes:
        collection.setdefault(node.kind, []).append(node)
    return collection


def is_type_only(nodes: Iterable[DocNode]) -> bool:
    """For a given set of nodes, check if they only contain type-only nodes."""
    return all(node.kind in TYPE_ONLY_KINDS for node in nodes)
