from __future__ import annotations

from unbundler.extractor import extract_webpack_expression_modules
from unbundler.locator import find_webpack_expression, is_webpack_wrapper
from unbundler.parser import parse_bundle


def test_canonical_wrapper_is_returned_by_identity(parse) -> None:
    tree = parse("(function (modules) { return modules; })([function () {}]);")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["expression"]
    assert is_webpack_wrapper(found)


def test_unary_and_statement_layers_locate_the_same_call(parse) -> None:
    tree = parse("!function (e) { return e; }([]);")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["expression"]["argument"]


def test_stacked_unary_layers_locate_the_same_call(parse) -> None:
    tree = parse("!void +(function (m) {})([1]);")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["expression"]["argument"]["argument"]["argument"]
    assert is_webpack_wrapper(found)


def test_block_and_parenthesised_layers_locate_the_same_call(parse) -> None:
    tree = parse("{ !(void (function (m) {})([1])); }")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["body"][0]["expression"]["argument"]["argument"]
    assert len(found["arguments"][0]["elements"]) == 1


def test_wrapper_nested_in_function_body(parse) -> None:
    tree = parse("function outer() { (function (m) {})([]); }")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["body"]["body"][0]["expression"]


def test_wrapper_inside_outer_iife(parse) -> None:
    tree = parse("(function () { (function (m) {})([1]); })();")

    found = find_webpack_expression(tree)

    assert found is not None
    assert len(found["arguments"][0]["elements"]) == 1


def test_arrow_wrapper(parse) -> None:
    tree = parse("((m) => m)([]);")

    assert find_webpack_expression(tree) is tree["body"][0]["expression"]


def test_first_statement_wins(parse) -> None:
    tree = parse("(function (a) {})([1]); (function (b) {})([2, 3]);")

    found = find_webpack_expression(tree)

    assert found is tree["body"][0]["expression"]


def test_arguments_are_not_searched(parse) -> None:
    tree = parse("register((function (m) {})([]));")

    assert find_webpack_expression(tree) is None


def test_shape_mismatches_are_not_wrappers(parse) -> None:
    assert find_webpack_expression(parse("(function (a, b) {})([]);")) is None
    assert find_webpack_expression(parse("(function (a) {})({});")) is None
    assert find_webpack_expression(parse("(function (a) {})([], []);")) is None
    assert find_webpack_expression(parse("var x = (function (a) {})([]);")) is None
    assert find_webpack_expression(None) is None


def test_rerun_on_output_finds_no_wrapper(parse, sample_bundle) -> None:
    wrapper = find_webpack_expression(parse(sample_bundle))
    modules = extract_webpack_expression_modules(wrapper)

    for source in modules.values():
        assert find_webpack_expression(parse_bundle(source)) is None
