"""Logic for rendering JSDoc bodies, tags and badges."""

from collections.abc import Iterable
from html import escape

from docpages.doc_node import JsDoc
from docpages.markdown_renderer import render_markdown


def is_deprecated(js_doc: JsDoc | None) -> bool:
    """Check if the JSDoc carries a ``@deprecated`` tag."""
    return js_doc is not None and any(t.get("kind") == "deprecated" for t in js_doc.tags)


def render_tag(label: str, color: str, *, large: bool = False) -> str:
    """Render a small colored badge such as ``abstract`` or ``deprecated``."""
    size = " tag-large" if large else ""
    return f'<span class="tag tag-{color}{size}">{escape(label)}</span>'


def render_js_doc(
    js_doc: JsDoc | None,
    *,
    tags: Iterable[str] = (),
    tags_with_doc: bool = False,
    element_id: str | None = None,
) -> str:
    """Render the markdown body followed by the selected tags.

    Only tags whose kind is in ``tags`` are shown. With ``tags_with_doc`` the
    tag's own doc text is rendered under its label.
    """
    if not js_doc:
        return ""
    wanted = set(tags)
    parts = []
    body = render_markdown(js_doc.doc)
    if body:
        parts.append(body)
    for tag in js_doc.tags:
        kind = tag.get("kind")
        if kind not in wanted:
            continue
        parts.append(f'<div class="js-doc-tag">{render_tag(str(kind), "gray")}')
        doc = tag.get("doc")
        if tags_with_doc and doc:
            parts.append(render_markdown(str(doc)))
        parts.append("</div>")
    if not parts:
        return ""
    id_attr = f' id="{escape(element_id)}"' if element_id else ""
    return f'<div class="markdown"{id_attr}>' + "\n".join(parts) + "</div>"


def summary_of(js_doc: JsDoc | None) -> str:
    """Render the first paragraph of a JSDoc body, used in listings."""
    if not js_doc or not js_doc.doc:
        return ""
    first = js_doc.doc.split("\n\n", 1)[0]
    return render_markdown(first)
