"""Logic for rendering kind sections that list nodes with links."""

from html import escape

from docpages.anchor_slug import anchor_slug
from docpages.doc_node import DocNode
from docpages.render_js_doc import summary_of

# Order and titles of the per-kind sections on module and namespace pages.
SECTION_KINDS: list[tuple[str, str]] = [
    ("namespace", "Namespaces"),
    ("class", "Classes"),
    ("enum", "Enums"),
    ("variable", "Variables"),
    ("function", "Functions"),
    ("interface", "Interfaces"),
    ("typeAlias", "Type Aliases"),
]


def item_href(url: str, item: str) -> str:
    """Return the page path of a named item inside a module."""
    sep = "" if url.endswith("/") else "/"
    return f"/{url}{sep}~/{item}"


def render_section(
    title: str,
    kind: str,
    nodes: list[DocNode],
    url: str,
    path: tuple[str, ...] = (),
) -> str:
    """Render one titled section listing nodes, each linked to its item page.

    Nodes sharing a name (function overloads) are listed once.
    """
    parts = [
        f'<section class="node-{kind}" id="{anchor_slug(title)}">',
        f'<h2 class="section">{escape(title)}</h2>',
    ]
    seen: set[str] = set()
    for node in nodes:
        if node.name in seen:
            continue
        seen.add(node.name)
        href = item_href(url, ".".join((*path, node.name)))
        parts.append('<div class="node">')
        parts.append(f'<h3><a href="{escape(href)}">{escape(node.name)}</a></h3>')
        summary = summary_of(node.js_doc)
        if summary:
            parts.append(summary)
        parts.append("</div>")
    parts.append("</section>")
    return "\n".join(parts)
