"""Tests for printing TypeScript types and parameters."""

from docpages.ts_repr import param_repr, params_repr, type_params_repr, type_repr

STRING = {"kind": "keyword", "keyword": "string", "repr": "string"}
NUMBER = {"kind": "keyword", "keyword": "number", "repr": "number"}


def test_type_repr() -> None:
    """Verify common type shapes."""
    assert type_repr(None) == "unknown"
    assert type_repr(STRING) == "string"
    assert type_repr({"kind": "union", "union": [STRING, NUMBER]}) == "string | number"
    assert (
        type_repr({"kind": "array", "array": {"kind": "union", "union": [STRING, NUMBER]}})
        == "(string | number)[]"
    )
    ref = {"kind": "typeRef", "typeRef": {"typeName": "Promise", "typeParams": [STRING]}}
    assert type_repr(ref) == "Promise<string>"
    assert type_repr({"kind": "literal", "literal": {"kind": "string", "string": "a"}}) == '"a"'
    assert type_repr({"kind": "mystery", "repr": "X"}) == "X"


def test_params() -> None:
    """Verify identifier, optional, rest and default parameters."""
    a = {"kind": "identifier", "name": "a", "tsType": STRING}
    b = {"kind": "identifier", "name": "b", "optional": True}
    rest = {"kind": "rest", "arg": {"kind": "identifier", "name": "c"}, "tsType": NUMBER}
    assign = {"kind": "assign", "left": {"kind": "identifier", "name": "d"}, "right": "1"}
    assert param_repr(rest) == "...c"
    assert params_repr([a, b, assign]) == "a: string, b?, d = 1"
    assert params_repr(None) == ""


def test_type_params() -> None:
    """Verify constraints and defaults on type parameters."""
    assert type_params_repr(None) == ""
    tps = [{"name": "T", "constraint": STRING, "default": STRING}, {"name": "U"}]
    assert type_params_repr(tps) == "<T extends string = string, U>"
