"""Kind-keyed dispatch for code blocks, doc sections and TOCs.

Each render site (code block, doc body, sidebar TOC) looks up the node's kind
in one table; a ``None`` slot means the site skips that kind. Function nodes
are never rendered one by one: the whole overload set goes to one merged
renderer, appended after the per-node output.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from docpages.doc_node import DocNode
from docpages.render_class import class_code_block, class_doc, class_toc
from docpages.render_enum import enum_code_block, enum_doc, enum_toc
from docpages.render_function import fn_code_block, fn_doc
from docpages.render_interface import interface_code_block, interface_doc, interface_toc
from docpages.render_namespace import namespace_doc, namespace_toc
from docpages.render_type_alias import type_alias_code_block, type_alias_doc, type_alias_toc
from docpages.render_variable import variable_code_block

DocRenderer = Callable[[DocNode, tuple[str, ...], str], str]


@dataclass(frozen=True)
class KindRenderer:
    """Per-kind renderers; None means the site does not render this kind."""

    code_block: Callable[[DocNode], str] | None = None
    doc: DocRenderer | None = None
    toc: Callable[[DocNode], str] | None = None


@dataclass(frozen=True)
class OverloadRenderer:
    """Renderers taking every node of a kind at once."""

    code_block: Callable[[list[DocNode]], str] | None = None
    doc: Callable[[list[DocNode]], str] | None = None


def _ignore_path(render: Callable[[DocNode], str]) -> DocRenderer:
    return lambda node, path, url: render(node)


KIND_RENDERERS: dict[str, KindRenderer] = {
    "class": KindRenderer(class_code_block, _ignore_path(class_doc), class_toc),
    "enum": KindRenderer(enum_code_block, _ignore_path(enum_doc), enum_toc),
    "interface": KindRenderer(
        interface_code_block, _ignore_path(interface_doc), interface_toc
    ),
    "namespace": KindRenderer(None, namespace_doc, namespace_toc),
    "typeAlias": KindRenderer(
        type_alias_code_block, _ignore_path(type_alias_doc), type_alias_toc
    ),
    "variable": KindRenderer(variable_code_block, None, None),
}

OVERLOAD_RENDERERS: dict[str, OverloadRenderer] = {
    "function": OverloadRenderer(fn_code_block, fn_doc),
}


def render_code_block(nodes: Sequence[DocNode]) -> list[str]:
    """Render one code block per node, plus one for the function overloads."""
    elements = []
    for node in nodes:
        renderer = KIND_RENDERERS.get(node.kind)
        if renderer and renderer.code_block:
            elements.append(renderer.code_block(node))
    for kind, overload in OVERLOAD_RENDERERS.items():
        group = [n for n in nodes if n.kind == kind]
        if group and overload.code_block:
            elements.append(overload.code_block(group))
    return elements


def render_doc(nodes: Sequence[DocNode], path: Sequence[str], url: str) -> list[str]:
    """Render one doc section per node, plus one for the function overloads."""
    elements = []
    for node in nodes:
        renderer = KIND_RENDERERS.get(node.kind)
        if renderer and renderer.doc:
            section = renderer.doc(node, tuple(path), url)
            if section:
                elements.append(section)
    for kind, overload in OVERLOAD_RENDERERS.items():
        group = [n for n in nodes if n.kind == kind]
        if group and overload.doc:
            elements.append(overload.doc(group))
    return elements


def interface_pair_toc_node(nodes: Sequence[DocNode]) -> DocNode | None:
    """Pick the interface out of a two-node set, e.g. ``interface A`` + ``const A``.

    This is a heuristic for the common interface/value pairing only; other
    two-node combinations get no TOC.
    """
    return next((n for n in nodes if n.kind == "interface"), None)


def render_doc_toc(nodes: Sequence[DocNode]) -> str | None:
    """Render the sidebar TOC of an item page, or None when there is none."""
    if len(nodes) == 1:
        node = nodes[0]
    elif len(nodes) == 2:
        node = interface_pair_toc_node(nodes)
        if node is None:
            return None
    else:
        return None
    renderer = KIND_RENDERERS.get(node.kind)
    if renderer and renderer.toc:
        return renderer.toc(node)
    return None
