"""Logic for rendering variable code blocks."""

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.ts_repr import type_repr


def variable_code_block(node: DocNode) -> str:
    """Render ``const name: Type;``."""
    vd = node.definition()
    keyword = vd.get("kind") or "const"
    ts_type = vd.get("tsType")
    annotation = f": {type_repr(ts_type)}" if ts_type else ""
    return html_codeblock("typescript", f"{keyword} {node.name}{annotation};")
