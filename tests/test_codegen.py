from __future__ import annotations

import math

import pytest

from unbundler.codegen import CodeGenerator, format_number, generate, quote_string
from unbundler.exceptions import UnsupportedNodeError
from unbundler.js_ast import Node


def _roundtrip(parse, source: str) -> str:
    return generate(parse(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a = b + c * d;", "a = b + c * d;"),
        ("x = (a + b) * c;", "x = (a + b) * c;"),
        ("x = a - (b - c);", "x = a - (b - c);"),
        ("x = a ? b : c, d;", "x = a ? b : c, d;"),
        ("x = !(a && b);", "x = !(a && b);"),
        ("x = - -a;", "x = - -a;"),
        ("x = typeof a;", "x = typeof a;"),
        ("i++;", "i++;"),
        ("new (a())();", "new (a())();"),
        ("new a.b();", "new a.b();"),
        ("(function () {})();", "(function() {}());"),
        ("(1).toString();", "(1).toString();"),
        ("a[b].c(d, e);", "a[b].c(d, e);"),
        ("x = [1, , 2];", "x = [1, , 2];"),
        ("x = 'it\\'s';", "x = 'it\\'s';"),
    ],
)
def test_expressions(parse, source, expected) -> None:
    assert _roundtrip(parse, source) == expected


def test_statements_are_indented(parse) -> None:
    source = "function f(a, b) { if (a) { return b; } else return; }"

    assert _roundtrip(parse, source) == (
        "function f(a, b) {\n"
        "  if (a) {\n"
        "    return b;\n"
        "  } else\n"
        "    return;\n"
        "}"
    )


def test_dangling_else_is_braced(parse) -> None:
    source = "if (a) { if (b) c(); } else d();"
    tree = parse(source)
    outer = tree["body"][0]
    unbraced = outer.replace(consequent=outer["consequent"]["body"][0])

    text = generate(unbraced)

    assert text.startswith("if (a) {\n")
    assert "} else\n  d();" in text


def test_loops_and_switch(parse) -> None:
    source = (
        "for (var i = 0; i < n; i++) x(i);"
        "for (k in o) {}"
        "while (a) b();"
        "do { c(); } while (d);"
        "switch (v) { case 1: one(); break; default: other(); }"
    )

    assert _roundtrip(parse, source) == (
        "for (var i = 0; i < n; i++)\n"
        "  x(i);\n"
        "for (k in o) {}\n"
        "while (a)\n"
        "  b();\n"
        "do {\n"
        "  c();\n"
        "} while (d);\n"
        "switch (v) {\n"
        "  case 1:\n"
        "    one();\n"
        "    break;\n"
        "  default:\n"
        "    other();\n"
        "}"
    )


def test_try_catch_finally(parse) -> None:
    assert _roundtrip(parse, "try { a(); } catch (e) { b(e); } finally { c(); }") == (
        "try {\n  a();\n} catch (e) {\n  b(e);\n} finally {\n  c();\n}"
    )


def test_object_literals(parse) -> None:
    assert _roundtrip(parse, "x = {a: 1, 'b-c': 2, [k]: 3, get d() { return 4; }};") == (
        "x = {\n"
        "  a: 1,\n"
        "  'b-c': 2,\n"
        "  [k]: 3,\n"
        "  get d() {\n"
        "    return 4;\n"
        "  }\n"
        "};"
    )
    assert _roundtrip(parse, "({}).x;") == "({}.x);"


def test_es2015_constructs(parse) -> None:
    assert _roundtrip(parse, "const f = (a, ...rest) => ({a});") == "const f = (a, ...rest) => ({\n  a\n});"
    assert _roundtrip(parse, "let {a, b: [c]} = o;") == "let {a, b: [c]} = o;"
    assert _roundtrip(parse, "class A extends B { static m() {} }") == "class A extends B {\n  static m() {}\n}"
    assert _roundtrip(parse, "x = `a${b}c`;") == "x = `a${b}c`;"


def test_quote_string_escapes() -> None:
    assert quote_string("it's") == "'it\\'s'"
    assert quote_string("a\nb\\") == "'a\\nb\\\\'"
    assert quote_string("\x01") == "'\\x01'"
    assert quote_string("\u2028") == "'\\u2028'"


def test_format_number() -> None:
    assert format_number(2.0) == "2"
    assert format_number(2.5) == "2.5"
    assert format_number(7) == "7"
    assert format_number(math.inf) == "Infinity"
    assert format_number(math.nan) == "NaN"


def test_literal_without_raw_is_quoted() -> None:
    assert generate(Node.make("Literal", value="./Foo")) == "'./Foo'"
    assert generate(Node.make("Literal", value=None)) == "null"


def test_unknown_nodes_fall_back_to_source_text() -> None:
    source = "<div/>;"
    node = Node.make("JSXElement", range=(0, 6))

    assert CodeGenerator(source=source).generate(node) == "<div/>"
    with pytest.raises(UnsupportedNodeError):
        generate(node)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("for (var a = ('x' in o); a; ) {}", "for (var a = ('x' in o); a;) {}"),
        ("for (a = b || ('x' in o); ; ) {}", "for (a = b || ('x' in o);;) {}"),
        ("for (var f = function () { return 'x' in o; }; ; ) {}", None),
    ],
)
def test_in_operator_inside_for_initialiser_stays_parseable(parse, source, expected) -> None:
    text = _roundtrip(parse, source)

    if expected is not None:
        assert text == expected
    reparsed = parse(text)
    init = reparsed["body"][0]["init"]
    assert init is not None
    assert "in o" in text


def test_in_operator_outside_for_initialiser_is_bare(parse) -> None:
    assert _roundtrip(parse, "x = 'a' in o; for (;;) { y = 'b' in o; }") == (
        "x = 'a' in o;\nfor (;;) {\n  y = 'b' in o;\n}"
    )
