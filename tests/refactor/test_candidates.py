"""Tests for candidate selection."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from explicate.index.parser import JavaCompilationUnit, LocalDeclaration
from explicate.refactor.candidates import evaluate, is_eligible

ParseJava = Callable[[str], JavaCompilationUnit]


def _declaration(parse_java: ParseJava, statement: str) -> LocalDeclaration:
    unit = parse_java(f"class A {{ void m() {{ {statement} }} }}")
    return unit.local_declarations()[0]


class TestEvaluate:
    """Eligibility rules."""

    def test_eligible_declaration(self, parse_java: ParseJava) -> None:
        declaration = _declaration(parse_java, "var n = 5;")

        verdict = evaluate(declaration)

        assert verdict.eligible
        assert verdict.candidate is not None
        assert verdict.candidate.variable_name == "n"
        assert declaration.unit.text_of(verdict.candidate.initializer) == "5"

    @pytest.mark.parametrize(
        ("statement", "reason"),
        [
            ("int n = 5;", "explicit_type"),
            ("int a = 1, b = 2;", "multiple_declarators"),
            ("var f = (Runnable) null;", None),
            ("var f = x -> x;", "lambda"),
            ("var f = ((x -> x));", "lambda"),
            ("var f = String::length;", "method_reference"),
            ("var c = new Comparator<>() { };", "diamond_anonymous_class"),
        ],
    )
    def test_reasons(self, parse_java: ParseJava, statement: str, reason: str | None) -> None:
        verdict = evaluate(_declaration(parse_java, statement))

        assert verdict.reason == reason
        assert verdict.eligible is (reason is None)

    def test_unsupported_initializers_are_flagged(self, parse_java: ParseJava) -> None:
        verdict = evaluate(_declaration(parse_java, "var f = x -> x;"))

        assert verdict.unsupported_initializer

    def test_anonymous_class_with_explicit_arguments_is_eligible(
        self, parse_java: ParseJava
    ) -> None:
        """Only the diamond form has an unreliable type."""
        declaration = _declaration(parse_java, "var c = new Comparator<String>() { };")

        assert is_eligible(declaration)

    def test_plain_diamond_is_eligible(self, parse_java: ParseJava) -> None:
        assert is_eligible(_declaration(parse_java, "var l = new ArrayList<>();"))

    def test_array_initializer_is_rejected(self, parse_java: ParseJava) -> None:
        unit = parse_java("class A { void m() { var a = {1, 2}; } }")
        declarations = unit.local_declarations()

        assert declarations
        assert not is_eligible(declarations[0])

    def test_evaluation_has_no_side_effects(self, parse_java: ParseJava) -> None:
        declaration = _declaration(parse_java, "var n = 5;")
        before = declaration.unit.text

        evaluate(declaration)
        evaluate(declaration)

        assert declaration.unit.text == before
