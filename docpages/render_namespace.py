"""Logic for rendering namespace docs and TOCs."""

from html import escape

from docpages.anchor_slug import anchor_slug
from docpages.doc_node import DocNode
from docpages.doc_node_collection import as_collection
from docpages.render_section import SECTION_KINDS, render_section


def namespace_doc(node: DocNode, path: tuple[str, ...], url: str) -> str:
    """Render the namespace's children as kind sections.

    Child links are built from ``path`` (the namespaces already walked) plus
    the namespace's own name.
    """
    collection = as_collection(node.elements)
    child_path = (*path, node.name)
    parts = [
        render_section(title, kind, collection[kind], url, child_path)
        for kind, title in SECTION_KINDS
        if kind in collection
    ]
    return "\n".join(parts)


def namespace_toc(node: DocNode) -> str:
    """Render links to the kind sections present in the namespace."""
    collection = as_collection(node.elements)
    parts = ['<div class="toc">', f'<h3 class="toc-header">{escape(node.name)}</h3>', "<ul>"]
    parts.extend(
        f'<li><a href="#{anchor_slug(title)}">{escape(title)}</a></li>'
        for kind, title in SECTION_KINDS
        if kind in collection
    )
    parts += ["</ul>", "</div>"]
    return "\n".join(parts)
