"""Logic for walking a dotted item path through namespace nodes."""

import logging
from collections.abc import Sequence

from docpages.doc_node import DocNode

logger = logging.getLogger(__name__)


def resolve_item_path(
    entries: Sequence[DocNode], path: Sequence[str]
) -> tuple[tuple[DocNode, ...], tuple[DocNode, ...]]:
    """Descend into each named namespace of ``path`` in turn.

    Returns the namespaces walked and the entry list reached. A segment that
    names no namespace in the current list is skipped and the walk continues
    from the same list with the next segment.
    """
    # TODO: decide whether an unresolved segment should yield "Entry not found"
    # instead of falling back to the enclosing entry list.
    current = tuple(entries)
    namespaces = []
    for name in path:
        namespace = next(
            (n for n in current if n.kind == "namespace" and n.name == name), None
        )
        if namespace is None:
            logger.debug("Namespace %r not found, staying at current level", name)
            continue
        namespaces.append(namespace)
        current = namespace.elements
    return tuple(namespaces), current


def find_item_nodes(entries: Sequence[DocNode], name: str) -> list[DocNode]:
    """Select every non-import node named ``name``, in source order."""
    return [n for n in entries if n.name == name and n.kind != "import"]
