"""Tests for type expression rendering."""

from __future__ import annotations

from explicate.types.expression import (
    ArrayExpr,
    NestedQualifiedName,
    PrimitiveExpr,
    QualifiedName,
    RawExpr,
    ReferenceExpr,
    ShortName,
    VariableExpr,
    WildcardExpr,
    render,
)


def _ref(qualified: str, rendering, *arguments) -> ReferenceExpr:  # noqa: ANN001
    return ReferenceExpr(qualified_name=qualified, rendering=rendering, arguments=tuple(arguments))


class TestRender:
    """Serialization of type expressions to Java text."""

    def test_leaves(self) -> None:
        assert render(PrimitiveExpr("int")) == "int"
        assert render(VariableExpr("T")) == "T"
        assert render(RawExpr("com.acme.Thing")) == "com.acme.Thing"

    def test_renderings(self) -> None:
        assert render(_ref("java.util.List", ShortName("List"))) == "List"
        assert render(_ref("a.b.List", QualifiedName("a.b.List"))) == "a.b.List"
        assert (
            render(_ref("java.util.Map.Entry", NestedQualifiedName("Map", "Entry"))) == "Map.Entry"
        )

    def test_arguments_are_comma_separated(self) -> None:
        expression = _ref(
            "java.util.Map",
            ShortName("Map"),
            _ref("java.lang.String", ShortName("String")),
            ArrayExpr(PrimitiveExpr("int")),
        )

        assert render(expression) == "Map<String, int[]>"

    def test_wildcards(self) -> None:
        bounded = _ref(
            "java.util.List",
            ShortName("List"),
            WildcardExpr(_ref("java.lang.Number", ShortName("Number"))),
        )

        assert render(bounded) == "List<? extends Number>"
        assert render(_ref("java.util.List", ShortName("List"), WildcardExpr())) == "List<?>"

    def test_array_of_generic(self) -> None:
        expression = ArrayExpr(
            _ref("java.util.List", ShortName("List"), _ref("java.lang.String", ShortName("String")))
        )

        assert render(expression) == "List<String>[]"
