"""Logic for rendering enum code blocks, docs and TOCs."""

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.load_doc_nodes import build_js_doc
from docpages.render_members import Member, render_member_sections, render_member_toc
from docpages.ts_repr import type_repr


def enum_members(node: DocNode) -> list[Member]:
    """Collect enum members with their initializers."""
    members = []
    for m in node.definition().get("members") or []:
        name = str(m.get("name"))
        init = m.get("init")
        members.append(
            Member(
                group="Members",
                name=name,
                signature=f"{name} = {type_repr(init)}" if init else name,
                js_doc=build_js_doc(m.get("jsDoc")),
            )
        )
    return members


def enum_code_block(node: DocNode) -> str:
    """Render the enum declaration."""
    lines = [f"enum {node.name} {{"]
    lines.extend(f"  {m.signature}," for m in enum_members(node))
    lines.append("}")
    return html_codeblock("typescript", "\n".join(lines))


def enum_doc(node: DocNode) -> str:
    """Render the members section of an enum."""
    return render_member_sections(enum_members(node))


def enum_toc(node: DocNode) -> str:
    """Render the enum sidebar TOC."""
    return render_member_toc(node.name, enum_members(node))
