"""Type expression parser tests."""

from __future__ import annotations

import pytest
from class_json_sampler.type_catalog.type_expressions import (
    TypeExpression,
    TypeExpressionError,
    parse_type_expression,
)


def test_parses_simple_and_primitive_names() -> None:
    assert parse_type_expression("int") == TypeExpression(name="int")
    assert parse_type_expression("  String ") == TypeExpression(name="String")


def test_qualified_names_reduce_to_simple_names() -> None:
    expression = parse_type_expression("java.util.List<java.lang.String>")

    assert expression.name == "List"
    assert expression.arguments == (TypeExpression(name="String"),)


def test_parses_nested_type_arguments() -> None:
    expression = parse_type_expression("Map<String, List<Map<Long,Integer>>>")

    assert expression.presentable_text == "Map<String, List<Map<Long, Integer>>>"
    assert expression.arguments[1].arguments[0].name == "Map"


def test_parses_array_dimensions() -> None:
    expression = parse_type_expression("byte[][]")

    assert expression.name == "byte"
    assert expression.array_dimensions == 2
    assert parse_type_expression("List<String>[ ]").presentable_text == "List<String>[]"


def test_parses_wildcards() -> None:
    unbounded = parse_type_expression("List<?>").arguments[0]
    upper = parse_type_expression("List<? extends Number>").arguments[0]
    lower = parse_type_expression("List<? super Integer>").arguments[0]

    assert unbounded.is_wildcard and unbounded.bound is None
    assert upper.bound == TypeExpression(name="Number")
    assert upper.bound_kind == "extends"
    assert lower.presentable_text == "? super Integer"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "List<",
        "List<String",
        "List<String>>",
        "Map<String,>",
        "int x",
        "List<[]>",
        "a-b",
    ],
)
def test_rejects_malformed_expressions(text: str) -> None:
    with pytest.raises(TypeExpressionError):
        parse_type_expression(text)


def test_rejects_non_string_input() -> None:
    with pytest.raises(TypeExpressionError):
        parse_type_expression(None)  # type: ignore[arg-type]
