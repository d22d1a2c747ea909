"""Logic for rendering class code blocks, docs and TOCs."""

from docpages.doc_node import DocNode
from docpages.html_codeblock import html_codeblock
from docpages.load_doc_nodes import build_js_doc
from docpages.render_function import call_signature
from docpages.render_members import Member, render_member_sections, render_member_toc
from docpages.ts_repr import params_repr, type_params_repr, type_repr


def is_abstract(node: DocNode) -> bool:
    """Check if the node is an abstract class."""
    return node.kind == "class" and bool(node.definition().get("isAbstract"))


def class_members(node: DocNode) -> list[Member]:
    """Collect constructors, properties and methods as members."""
    cd = node.definition()
    members = []
    for ctor in cd.get("constructors") or []:
        if ctor.get("accessibility") == "private":
            continue
        members.append(
            Member(
                group="Constructors",
                name="constructor",
                signature=f"constructor({params_repr(ctor.get('params'))})",
                js_doc=build_js_doc(ctor.get("jsDoc")),
            )
        )
    for prop in cd.get("properties") or []:
        if prop.get("accessibility") == "private":
            continue
        optional = "?" if prop.get("optional") else ""
        sig = f"{prop.get('name')}{optional}"
        if prop.get("tsType"):
            sig += f": {type_repr(prop['tsType'])}"
        members.append(
            Member(
                group="Static Properties" if prop.get("isStatic") else "Properties",
                name=str(prop.get("name")),
                signature=sig,
                js_doc=build_js_doc(prop.get("jsDoc")),
                flags=_flags(prop, "readonly", "abstract", "optional"),
            )
        )
    for method in cd.get("methods") or []:
        if method.get("accessibility") == "private":
            continue
        name = str(method.get("name"))
        sig = call_signature(name, method.get("functionDef") or {})
        if method.get("kind") in {"getter", "setter"}:
            sig = f"{'get' if method['kind'] == 'getter' else 'set'} {sig}"
        members.append(
            Member(
                group="Static Methods" if method.get("isStatic") else "Methods",
                name=name,
                signature=sig,
                js_doc=build_js_doc(method.get("jsDoc")),
                flags=_flags(method, "abstract", "optional"),
            )
        )
    return members


def _flags(raw: dict, *names: str) -> tuple[str, ...]:
    keys = {"readonly": "readonly", "abstract": "isAbstract", "optional": "optional"}
    return tuple(n for n in names if raw.get(keys[n]))


def class_code_block(node: DocNode) -> str:
    """Render the class declaration with its member signatures."""
    cd = node.definition()
    head = "abstract class " if cd.get("isAbstract") else "class "
    head += node.name + type_params_repr(cd.get("typeParams"))
    if cd.get("extends"):
        super_params = cd.get("superTypeParams") or []
        head += f" extends {cd['extends']}"
        if super_params:
            head += f"<{', '.join(type_repr(t) for t in super_params)}>"
    implements = cd.get("implements") or []
    if implements:
        head += f" implements {', '.join(type_repr(t) for t in implements)}"
    lines = [head + " {"]
    for m in class_members(node):
        static = "static " if m.group.startswith("Static") else ""
        readonly = "readonly " if "readonly" in m.flags else ""
        lines.append(f"  {static}{readonly}{m.signature};")
    lines.append("}")
    return html_codeblock("typescript", "\n".join(lines))


def class_doc(node: DocNode) -> str:
    """Render the member sections of a class."""
    return render_member_sections(class_members(node))


def class_toc(node: DocNode) -> str:
    """Render the class sidebar TOC."""
    return render_member_toc(node.name, class_members(node))
