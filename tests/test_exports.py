from __future__ import annotations

import pytest

from unbundler.exports import (
    ExportNameRegistry,
    fallback_module_name,
    find_module_exports,
    flatten_member_expression,
    literal_text,
    module_index,
    primary_export_name,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a.b.c;", "a.b.c"),
        ("a['x'];", "a.x"),
        ("exports[0];", "exports.0"),
        ("a.b['c'];", ".c"),
        ("name;", "name"),
        ("'text';", "text"),
        ("(function Named() {});", "Named"),
        ("(function () {});", ""),
        ("a + b;", ""),
    ],
)
def test_flatten_member_expression(first_expression, source, expected) -> None:
    assert flatten_member_expression(first_expression(source)) == expected


def test_literal_text_matches_javascript_stringification() -> None:
    assert literal_text(2.0) == "2"
    assert literal_text(2.5) == "2.5"
    assert literal_text(None) == "null"
    assert literal_text(True) == "true"
    assert literal_text("x") == "x"


def test_module_exports_assignment_names_module(parse) -> None:
    body = parse("module.exports = Foo;")["body"]

    assert find_module_exports(body) == {"Foo": True}


def test_minified_exports_param_still_matches(parse) -> None:
    body = parse("e.exports = Widget; t.exports = Other;")["body"]

    assert list(find_module_exports(body)) == ["Widget", "Other"]


def test_bare_exports_and_unrelated_assignments(parse) -> None:
    body = parse("exports = Direct; exports.default = Ignored; x.exportsy = Nope;")["body"]

    assert list(find_module_exports(body)) == ["Direct"]


def test_repeated_candidates_are_suffixed(parse) -> None:
    body = parse("module.exports = Foo; module.exports = Foo; module.exports = Foo;")["body"]

    assert list(find_module_exports(body)) == ["Foo", "Foo__1", "Foo__2"]


def test_nested_assignments_are_found(parse) -> None:
    body = parse("if (x) { (function () { module.exports = Inner; })(); }")["body"]

    assert list(find_module_exports(body)) == ["Inner"]


def test_no_export_pattern_gives_empty_mapping(parse) -> None:
    assert find_module_exports(parse("var a = 1;")["body"]) == {}


def test_primary_export_name_requires_function_module(first_expression) -> None:
    module = first_expression("(function (e) { e.exports = First; e.exports = Second; });")

    assert primary_export_name(module) == "First"
    assert primary_export_name(first_expression("({});")) == ""


def test_registry_suffixes_names_claimed_by_earlier_modules() -> None:
    registry = ExportNameRegistry()

    assert registry.claim(0, "Foo") == "Foo"
    assert registry.claim(1, "Foo") == "Foo__1"
    assert registry.claim(2, "") == fallback_module_name(2) == "module-2"
    assert registry.names == {0: "Foo", 1: "Foo__1", 2: "module-2"}


def test_registry_does_not_guard_fallback_names() -> None:
    registry = ExportNameRegistry()

    registry.claim(0, "module-1")
    assert registry.claim(1, "") == "module-1"


def test_registry_resolves_require_arguments() -> None:
    registry = ExportNameRegistry()
    registry.claim(0, "Foo")
    registry.claim(2, "Bar")

    assert registry.resolve(0) == "Foo"
    assert registry.resolve(2.0) == "Bar"
    assert registry.resolve("2") == "Bar"
    assert registry.resolve(99) is None
    assert registry.resolve(1) is None
    assert registry.resolve("./Foo") is None


@pytest.mark.parametrize(
    "value, expected",
    [(3, 3), (3.0, 3), ("12", 12), ("0", 0), ("01", None), ("00", None), (3.5, None), (True, None), ("x", None), (None, None)],
)
def test_module_index(value, expected) -> None:
    assert module_index(value) == expected
