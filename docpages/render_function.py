"""Logic for rendering function overload sets."""

from html import escape
from typing import Any

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.render_js_doc import render_js_doc
from docpages.ts_repr import params_repr, type_params_repr, type_repr


def call_signature(name: str, function_def: dict[str, Any]) -> str:
    """Print ``name<T>(params): Ret`` for a ``functionDef`` mapping."""
    tps = type_params_repr(function_def.get("typeParams"))
    params = params_repr(function_def.get("params"))
    ret = function_def.get("returnType")
    suffix = f": {type_repr(ret)}" if ret else ""
    return f"{name}{tps}({params}){suffix}"


def function_signature(node: DocNode) -> str:
    """Print a full function declaration line."""
    fn = node.definition()
    prefix = "async " if fn.get("isAsync") else ""
    star = "*" if fn.get("isGenerator") else ""
    return f"{prefix}function{star} {call_signature(node.name, fn)};"


def fn_code_block(nodes: list[DocNode]) -> str:
    """Render every overload of a function in one code block."""
    return html_codeblock("typescript", "\n".join(function_signature(n) for n in nodes))


def fn_doc(nodes: list[DocNode]) -> str:
    """Render the parameter/return docs of each overload."""
    parts = ['<section class="functions">']
    many = len(nodes) > 1
    for i, node in enumerate(nodes):
        fn = node.definition()
        if many:
            parts.append(f'<h2 class="section" id="overload-{i}">Overload {i + 1}</h2>')
            parts.append(html_codeblock("typescript", function_signature(node)))
            doc = render_js_doc(node.js_doc)
            if doc:
                parts.append(doc)
        parts.extend(_render_params(node, fn))
        ret = fn.get("returnType")
        if ret:
            parts.append('<h3 class="section">Returns</h3>')
            parts.append(f"<p><code>{escape(type_repr(ret))}</code></p>")
    parts.append("</section>")
    return "\n".join(parts)


def _render_params(node: DocNode, fn: dict[str, Any]) -> list[str]:
    """Render a parameter list with any matching ``@param`` docs."""
    params = fn.get("params") or []
    if not params:
        return []
    param_docs = {}
    if node.js_doc:
        param_docs = {
            t.get("name"): t.get("doc") for t in node.js_doc.tags if t.get("kind") == "param"
        }
    parts = ['<h3 class="section">Parameters</h3>', "<dl>"]
    for p in params:
        name = p.get("name") or ""
        parts.append(f"<dt><code>{escape(params_repr([p]))}</code></dt>")
        doc = param_docs.get(name)
        if doc:
            parts.append(f"<dd>{escape(str(doc))}</dd>")
    parts.append("</dl>")
    return parts
