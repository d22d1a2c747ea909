"""Logic for rendering type alias code blocks, docs and TOCs."""

from html import escape

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.ts_repr import type_params_repr, type_repr


def type_alias_code_block(node: DocNode) -> str:
    """Render ``type Name<T> = ...;``."""
    td = node.definition()
    tps = type_params_repr(td.get("typeParams"))
    return html_codeblock("typescript", f"type {node.name}{tps} = {type_repr(td.get('tsType'))};")


def type_alias_doc(node: DocNode) -> str:
    """Render the type parameters of a type alias, if any."""
    type_params = node.definition().get("typeParams") or []
    if not type_params:
        return ""
    parts = ['<section id="type-parameters">', '<h2 class="section">Type Parameters</h2>', "<ul>"]
    parts.extend(
        f"<li><code>{escape(type_params_repr([tp])[1:-1])}</code></li>" for tp in type_params
    )
    parts += ["</ul>", "</section>"]
    return "\n".join(parts)


def type_alias_toc(node: DocNode) -> str:
    """Render the type alias sidebar TOC."""
    parts = ['<div class="toc">', f'<h3 class="toc-header">{escape(node.name)}</h3>']
    if node.definition().get("typeParams"):
        parts.append('<ul><li><a href="#type-parameters">Type Parameters</a></li></ul>')
    parts.append("</div>")
    return "\n".join(parts)
