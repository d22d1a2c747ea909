"""Logic for rendering interface code blocks, docs and TOCs."""

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.load_doc_nodes import build_js_doc
from docpages.render_members import Member, render_member_sections, render_member_toc
from docpages.ts_repr import params_repr, type_params_repr, type_repr


def interface_members(node: DocNode) -> list[Member]:
    """Collect call signatures, index signatures, properties and methods."""
    idef = node.definition()
    members = []
    for i, sig in enumerate(idef.get("callSignatures") or []):
        text = f"{type_params_repr(sig.get('typeParams'))}({params_repr(sig.get('params'))})"
        if sig.get("tsType"):
            text += f": {type_repr(sig['tsType'])}"
        members.append(
            Member(
                group="Call Signatures",
                name=f"call signature {i + 1}" if i else "call signature",
                signature=text,
                js_doc=build_js_doc(sig.get("jsDoc")),
            )
        )
    for sig in idef.get("indexSignatures") or []:
        readonly = "readonly " if sig.get("readonly") else ""
        text = f"{readonly}[{params_repr(sig.get('params'))}]: {type_repr(sig.get('tsType'))}"
        members.append(Member(group="Index Signatures", name=text, signature=text))
    for prop in idef.get("properties") or []:
        name = str(prop.get("name"))
        if prop.get("computed"):
            name = f"[{name}]"
        optional = "?" if prop.get("optional") else ""
        text = f"{name}{optional}"
        if prop.get("tsType"):
            text += f": {type_repr(prop['tsType'])}"
        members.append(
            Member(
                group="Properties",
                name=name,
                signature=text,
                js_doc=build_js_doc(prop.get("jsDoc")),
                flags=("optional",) if prop.get("optional") else (),
            )
        )
    for method in idef.get("methods") or []:
        name = str(method.get("name"))
        optional = "?" if method.get("optional") else ""
        text = (
            f"{name}{optional}{type_params_repr(method.get('typeParams'))}"
            f"({params_repr(method.get('params'))})"
        )
        if method.get("returnType"):
            text += f": {type_repr(method['returnType'])}"
        members.append(
            Member(
                group="Methods",
                name=name,
                signature=text,
                js_doc=build_js_doc(method.get("jsDoc")),
                flags=("optional",) if method.get("optional") else (),
            )
        )
    return members


def interface_code_block(node: DocNode) -> str:
    """Render the interface declaration with its member signatures."""
    idef = node.definition()
    head = f"interface {node.name}{type_params_repr(idef.get('typeParams'))}"
    extends = idef.get("extends") or []
    if extends:
        head += f" extends {', '.join(type_repr(t) for t in extends)}"
    lines = [head + " {"]
    lines.extend(f"  {m.signature};" for m in interface_members(node))
    lines.append("}")
    return html_codeblock("typescript", "\n".join(lines))


def interface_doc(node: DocNode) -> str:
    """Render the member sections of an interface."""
    return render_member_sections(interface_members(node))


def interface_toc(node: DocNode) -> str:
    """Render the interface sidebar TOC."""
    return render_member_toc(node.name, interface_members(node))
