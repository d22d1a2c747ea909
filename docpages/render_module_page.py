"""Logic for rendering the module root page: TOC and kind sections."""

from html import escape

from docpages.anchor_slug import anchor_slug
from docpages.doc_node_collection import DocNodeCollection
from docpages.render_js_doc import render_js_doc
from docpages.render_section import SECTION_KINDS, render_section
from docpages.render_usage import render_usage


def render_module_toc(collection: DocNodeCollection, *, library: bool = False) -> str:
    """Render the "This Module" (or "This Library") TOC and the imports list."""
    parts = [
        "<div>",
        f'<h3 class="toc-header">This {"Library" if library else "Module"}</h3>',
        "<ul>",
    ]
    parts.extend(
        f'<li><a href="#{anchor_slug(title)}">{title}</a></li>'
        for kind, title in SECTION_KINDS
        if kind in collection
    )
    parts.append("</ul>")
    imports = collection.get("import")
    if imports:
        parts += ['<h3 class="toc-header">Imports</h3>', "<ul>"]
        for imp in imports:
            src = (imp.raw.get("importDef") or {}).get("src") or imp.name
            parts.append(f"<li>{escape(str(src))}</li>")
        parts.append("</ul>")
    parts.append("</div>")
    return "\n".join(parts)


def render_doc_nodes(
    collection: DocNodeCollection,
    url: str,
    *,
    show_usage: bool = True,
    default_symbol: str = "mod",
) -> str:
    """Render the module body: usage, module doc, then one section per kind."""
    parts = ['<div class="main-box">']
    if show_usage:
        parts.append(render_usage(url, default_symbol=default_symbol))
    module_docs = collection.get("moduleDoc")
    if module_docs:
        parts.append(render_js_doc(module_docs[0].js_doc))
    parts.extend(
        render_section(title, kind, collection[kind], url)
        for kind, title in SECTION_KINDS
        if kind in collection
    )
    parts.append("</div>")
    return "\n".join(p for p in parts if p)
