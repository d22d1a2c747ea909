"""Filter for dropping private declarations from doc node lists."""

from dataclasses import replace

from docpages.doc_node import DocNode


def filter_private(
    nodes: tuple[DocNode, ...], *, include_private: bool = False
) -> tuple[DocNode, ...]:
    """Drop nodes declared private, recursing into namespaces."""
    if include_private:
        return nodes
    kept = []
    for node in nodes:
        if node.declaration_kind == "private":
            continue
        if node.elements:
            node = replace(node, elements=filter_private(node.elements))
        kept.append(node)
    return tuple(kept)
