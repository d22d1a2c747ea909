"""Logic for printing TypeScript types, parameters and type parameters."""

from typing import Any


def type_repr(ts_type: dict[str, Any] | None) -> str:
    """Print a ``tsType`` mapping as TypeScript source text."""
    if not ts_type:
        return "unknown"
    kind = ts_type.get("kind")
    if kind == "keyword":
        return str(ts_type.get("keyword") or ts_type.get("repr") or "")
    if kind == "typeRef":
        ref = ts_type.get("typeRef") or {}
        name = str(ref.get("typeName") or ts_type.get("repr") or "")
        args = ref.get("typeParams") or []
        if args:
            return f"{name}<{', '.join(type_repr(a) for a in args)}>"
        return name
    if kind == "array":
        inner = ts_type.get("array") or {}
        text = type_repr(inner)
        if inner.get("kind") in {"union", "intersection", "fnOrConstructor"}:
            text = f"({text})"
        return f"{text}[]"
    if kind == "union":
        return " | ".join(type_repr(t) for t in ts_type.get("union") or [])
    if kind == "intersection":
        return " & ".join(type_repr(t) for t in ts_type.get("intersection") or [])
    if kind == "tuple":
        return f"[{', '.join(type_repr(t) for t in ts_type.get('tuple') or [])}]"
    if kind == "parenthesized":
        return f"({type_repr(ts_type.get('parenthesized'))})"
    if kind == "typeOperator":
        op = ts_type.get("typeOperator") or {}
        return f"{op.get('operator', '')} {type_repr(op.get('tsType'))}".strip()
    if kind == "typeQuery":
        return f"typeof {ts_type.get('typeQuery') or ts_type.get('repr', '')}"
    if kind == "indexedAccess":
        ia = ts_type.get("indexedAccess") or {}
        return f"{type_repr(ia.get('objType'))}[{type_repr(ia.get('indexType'))}]"
    if kind == "fnOrConstructor":
        fn = ts_type.get("fnOrConstructor") or {}
        prefix = "new " if fn.get("constructor") else ""
        tps = type_params_repr(fn.get("typeParams"))
        return f"{prefix}{tps}({params_repr(fn.get('params'))}) => {type_repr(fn.get('tsType'))}"
    if kind == "literal":
        lit = ts_type.get("literal") or {}
        if lit.get("kind") == "string":
            return f'"{lit.get("string", "")}"'
        if lit.get("kind") == "template":
            return f"`{ts_type.get('repr', '')}`"
    if kind == "typeLiteral":
        return "{ ... }"
    if kind == "this":
        return "this"
    return str(ts_type.get("repr") or "unknown")


def param_repr(param: dict[str, Any]) -> str:
    """Print one function parameter."""
    kind = param.get("kind")
    if kind == "rest":
        return f"...{param_repr(param.get('arg') or {})}"
    if kind == "assign":
        return f"{param_repr(param.get('left') or {})} = {param.get('right', '')}"
    if kind == "object":
        name = "{ ... }"
    elif kind == "array":
        name = "[ ... ]"
    else:
        name = str(param.get("name") or "")
    optional = "?" if param.get("optional") else ""
    ts_type = param.get("tsType")
    return f"{name}{optional}: {type_repr(ts_type)}" if ts_type else f"{name}{optional}"


def params_repr(params: list[dict[str, Any]] | None) -> str:
    """Print a comma-separated parameter list (without parentheses)."""
    return ", ".join(param_repr(p) for p in params or [])


def type_params_repr(type_params: list[dict[str, Any]] | None) -> str:
    """Print ``<T extends X = Y, ...>`` or an empty string."""
    if not type_params:
        return ""
    out = []
    for tp in type_params:
        text = str(tp.get("name") or "")
        if tp.get("constraint"):
            text += f" extends {type_repr(tp['constraint'])}"
        if tp.get("default"):
            text += f" = {type_repr(tp['default'])}"
        out.append(text)
    return f"<{', '.join(out)}>"
