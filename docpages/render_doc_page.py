"""Assembly of module root pages and item pages."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from html import escape

from docpages.doc_meta import DocMeta, build_doc_meta, render_meta_tags
from docpages.doc_node import DocNode, JsDoc
from docpages.doc_node_collection import as_collection, is_type_only
from docpages.kind_dispatch import render_code_block, render_doc, render_doc_toc
from docpages.render_class import is_abstract
from docpages.render_context import RenderContext
from docpages.render_js_doc import is_deprecated, render_js_doc, render_tag
from docpages.render_module_page import render_doc_nodes, render_module_toc
from docpages.render_sidebar_header import render_sidebar_header
from docpages.render_usage import render_usage
from docpages.resolve_item_path import find_item_nodes, resolve_item_path

NOT_FOUND_TITLE = "Entry not found"


@dataclass(frozen=True)
class DocPage:
    """A rendered page plus the state gathered while rendering it."""

    html: str
    meta: DocMeta | None
    namespaces: tuple[DocNode, ...] = ()  # namespaces walked for an item page
    not_found: bool = False


def html_document(head: str, body: str) -> str:
    """Wrap head and body fragments into a full HTML document."""
    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
            head,
            "</head>",
            "<body>",
            body,
            "</body>",
            "</html>",
            "",
        ]
    )


def render_error_message(title: str, message: str) -> str:
    """Render an inline error panel."""
    return (
        '<div class="error" role="alert">'
        f'<h2 class="error-title">{escape(title)}</h2>'
        f"<p>{escape(message)}</p>"
        "</div>"
    )


def canonical_js_doc(nodes: Sequence[DocNode]) -> JsDoc | None:
    """Return the first non-empty JSDoc among the nodes (no merging)."""
    for node in nodes:
        if node.js_doc and (node.js_doc.doc or node.js_doc.tags):
            return node.js_doc
    return None


def render_doc_page(ctx: RenderContext, item: str | None = None) -> DocPage:
    """Render the module root page, or the page of one dotted item path."""
    if item:
        return _render_item_page(ctx, item)
    return _render_module_page(ctx)


def _head(ctx: RenderContext, meta: DocMeta) -> str:
    return render_meta_tags(meta, ctx.config["site"].get("twitter"))


def _render_module_page(ctx: RenderContext) -> DocPage:
    collection = as_collection(ctx.entries)
    module_doc = next((n for n in ctx.entries if n.kind == "moduleDoc"), None)
    doc = module_doc.js_doc.doc if module_doc and module_doc.js_doc else ""
    meta = build_doc_meta(
        ctx.base_url, ctx.url, doc, site_title=ctx.site_title, config=ctx.config
    )
    body = "\n".join(
        [
            '<div class="content">',
            '<nav class="left-nav">',
            render_sidebar_header(ctx.url, ctx.config),
            render_module_toc(collection, library=ctx.library),
            "</nav>",
            render_doc_nodes(
                collection,
                ctx.url,
                show_usage=ctx.show_usage(),
                default_symbol=ctx.config["default_import_symbol"],
            ),
            "</div>",
        ]
    )
    return DocPage(html=html_document(_head(ctx, meta), body), meta=meta)


def _render_item_page(ctx: RenderContext, item: str) -> DocPage:
    path = item.split(".")
    name = path.pop()
    namespaces, entries = resolve_item_path(ctx.entries, path)
    ctx = replace(ctx, namespaces=namespaces)
    nodes = find_item_nodes(entries, name)
    if not nodes:
        return _render_not_found(ctx, item)

    js_doc = canonical_js_doc(nodes)
    meta = build_doc_meta(
        ctx.base_url,
        ctx.url,
        js_doc.doc if js_doc else "",
        item,
        site_title=ctx.site_title,
        config=ctx.config,
    )
    nav = ['<nav class="left-nav">', render_sidebar_header(ctx.url, ctx.config)]
    toc = render_doc_toc(nodes)
    if toc:
        nav.append(toc)
    nav.append("</nav>")

    article = ['<article class="main-box">', f'<h1 class="doc-title">{escape(item)}</h1>']
    if ctx.show_usage():
        article.append(
            render_usage(
                ctx.url,
                item,
                is_type_only(nodes),
                default_symbol=ctx.config["default_import_symbol"],
            )
        )
    if is_abstract(nodes[0]):
        article.append(render_tag("abstract", "yellow", large=True))
    if is_deprecated(js_doc):
        article.append(render_tag("deprecated", "gray", large=True))
    main_doc = render_js_doc(
        js_doc, tags=["deprecated"], tags_with_doc=True, element_id="mainDoc"
    )
    if main_doc:
        article.append(main_doc)
    article.extend(render_code_block(nodes))
    article.extend(render_doc(nodes, path, ctx.url))
    article.append("</article>")

    body = "\n".join(['<div class="content">', *nav, *article, "</div>"])
    return DocPage(
        html=html_document(_head(ctx, meta), body),
        meta=meta,
        namespaces=ctx.namespaces,
    )


def _render_not_found(ctx: RenderContext, item: str) -> DocPage:
    message = (
        f'The document entry named "{item}" was not found in specifier "{ctx.url}".'
    )
    body = "\n".join(
        [
            '<main class="main">',
            f'<h1 class="main-header">{escape(ctx.site_title)}</h1>',
            render_error_message(NOT_FOUND_TITLE, message),
            "</main>",
        ]
    )
    head = f"<title>{escape(NOT_FOUND_TITLE)} | {escape(ctx.site_title)}</title>"
    return DocPage(
        html=html_document(head, body),
        meta=None,
        namespaces=ctx.namespaces,
        not_found=True,
    )
