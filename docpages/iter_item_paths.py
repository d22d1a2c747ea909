"""Utility for listing the dotted item paths a module exposes."""

from collections.abc import Iterable, Sequence

from docpages.doc_node import DocNode

NON_ITEM_KINDS = frozenset({"import", "moduleDoc"})


def iter_item_paths(
    entries: Sequence[DocNode], prefix: tuple[str, ...] = ()
) -> Iterable[str]:
    """Yield each distinct item path once, recursing into namespaces."""
    seen: set[str] = set()
    for node in entries:
        if node.kind in NON_ITEM_KINDS or not node.name:
            continue
        if node.name not in seen:
            seen.add(node.name)
            yield ".".join((*prefix, node.name))
        if node.kind == "namespace":
            yield from iter_item_paths(node.elements, (*prefix, node.name))
