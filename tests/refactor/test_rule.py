"""Tests for the UseExplicitTypes rule."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from explicate.config.models import SynthesisConfig, parse_java_version
from explicate.core.errors import ErrorCode
from explicate.index.parser import JavaCompilationUnit, LocalDeclaration
from explicate.mutation.ops import SourceMutator
from explicate.refactor.rewriter import ExplicitDeclaration
from explicate.refactor.rule import CandidateState, UseExplicitTypes
from explicate.types.oracle import LiteralTypeOracle, StaticTypeOracle
from explicate.types.semantic import OtherType, SemanticType

ParseJava = Callable[[str], JavaCompilationUnit]


def _method(body: str, imports: str = "") -> str:
    return f"{imports}\nclass A {{\n    void m() {{\n        {body}\n    }}\n}}\n"


class RejectingMutator(SourceMutator):
    """Host that declines every replacement."""

    def replace(self, old: LocalDeclaration, new: ExplicitDeclaration) -> bool:  # noqa: ARG002
        return False


class ExplodingOracle:
    def resolve(self, expression: Any, unit: JavaCompilationUnit) -> SemanticType | None:  # noqa: ARG002
        raise RuntimeError("oracle crashed")


class TestMetadata:
    """Static rule metadata and language-level gating."""

    def test_identity(self) -> None:
        metadata = UseExplicitTypes.metadata

        assert metadata.identifier == "UseExplicitTypes"
        assert metadata.minimal_java_version == "10"
        assert "ImplicitToExplicit" in metadata.tags
        assert any("jeps/286" in url for url in metadata.see_urls)

    @pytest.mark.parametrize(
        ("version", "supported"),
        [("1.8", False), ("9", False), ("10", True), ("17", True), ("21", True)],
    )
    def test_supports(self, version: str, supported: bool) -> None:
        assert UseExplicitTypes.metadata.supports(version) is supported

    def test_parse_java_version(self) -> None:
        assert parse_java_version("1.8") == 8
        assert parse_java_version("17.0.2") == 17
        with pytest.raises(ValueError):
            parse_java_version("latest")


class TestApply:
    """End-to-end application on one declaration."""

    def test_primitive_declaration(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var n = 5;"))
        host = SourceMutator(unit)
        rule = UseExplicitTypes(LiteralTypeOracle())

        applied = rule.apply(unit.local_declarations()[0], host)

        assert applied
        assert "int n = 5;" in host.render()
        assert host.added_imports == []

    def test_modifiers_and_annotations_are_kept(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method('@SuppressWarnings("x") final var s = "a";'))
        host = SourceMutator(unit)

        outcome = UseExplicitTypes(LiteralTypeOracle()).process(unit.local_declarations()[0], host)

        assert outcome.applied
        assert outcome.declaration == '@SuppressWarnings("x") final String s = "a";'
        assert '@SuppressWarnings("x") final String s = "a";' in host.render()

    def test_import_is_committed_with_the_replacement(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var names = names();"))
        host = SourceMutator(unit)
        oracle = StaticTypeOracle({"names()": "java.util.List<java.lang.String>"})

        outcome = UseExplicitTypes(oracle).process(unit.local_declarations()[0], host)

        assert outcome.state is CandidateState.APPLIED
        assert outcome.type_text == "List<String>"
        assert outcome.imports_added == ("java.util.List",)
        assert host.render().startswith("import java.util.List;\n")


class TestAbstain:
    """Every failure abstains without touching the unit."""

    def test_lambda(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var f = (x) -> x;"))
        host = SourceMutator(unit)

        outcome = UseExplicitTypes(LiteralTypeOracle()).process(unit.local_declarations()[0], host)

        assert outcome.state is CandidateState.ABSTAINED
        assert outcome.stage is CandidateState.FILTERED
        assert outcome.reason == "lambda"
        assert outcome.error is not None
        assert outcome.error.code == ErrorCode.UNSUPPORTED_INITIALIZER
        assert host.render() == unit.text

    def test_diamond_anonymous_class(self, parse_java: ParseJava) -> None:
        source = _method(
            "var c = new Comparator<>() { public int compare(String a, String b) { return 0; } };",
            imports="import java.util.Comparator;",
        )
        unit = parse_java(source)
        host = SourceMutator(unit)
        oracle = StaticTypeOracle({}, fallback=LiteralTypeOracle())

        applied = UseExplicitTypes(oracle).apply(unit.local_declarations()[0], host)

        assert not applied
        assert host.render() == source

    def test_explicit_type_is_not_a_candidate(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("int n = 5;"))

        outcome = UseExplicitTypes(LiteralTypeOracle()).process(
            unit.local_declarations()[0], SourceMutator(unit)
        )

        assert outcome.reason == "explicit_type"
        assert outcome.error is None

    def test_unresolved_initializer(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var x = compute();"))
        host = SourceMutator(unit)

        outcome = UseExplicitTypes(LiteralTypeOracle()).process(unit.local_declarations()[0], host)

        assert outcome.stage is CandidateState.RESOLVING
        assert outcome.reason == "resolution_failure"
        assert host.render() == unit.text

    def test_intersection_cast(self, parse_java: ParseJava) -> None:
        """An intersection cast has no single type to spell out."""
        unit = parse_java(_method("var c = (java.io.Serializable & Runnable) () -> {}; c.run();"))
        host = SourceMutator(unit)

        outcome = UseExplicitTypes(LiteralTypeOracle()).process(unit.local_declarations()[0], host)

        assert outcome.state is CandidateState.ABSTAINED
        assert outcome.reason == "resolution_failure"
        assert outcome.imports_added == ()
        assert host.render() == unit.text

    def test_synthesis_failure_leaves_imports_untouched(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var x = pick();"))
        host = SourceMutator(unit)
        oracle = StaticTypeOracle(
            {"pick()": "java.util.List<java.util.List<java.util.List<java.lang.String>>>"}
        )
        rule = UseExplicitTypes(oracle, config=SynthesisConfig(max_depth=2))

        outcome = rule.process(unit.local_declarations()[0], host)

        assert outcome.stage is CandidateState.SYNTHESIZING
        assert outcome.reason == "synthesis_failure"
        assert host.added_imports == []
        assert host.render() == unit.text

    def test_intersection_type_fails_synthesis(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var x = pick();"))
        oracle = StaticTypeOracle({"pick()": OtherType("java.io.Serializable & java.lang.Comparable")})

        outcome = UseExplicitTypes(oracle).process(unit.local_declarations()[0], SourceMutator(unit))

        assert outcome.reason == "synthesis_failure"

    def test_rejected_mutation_adds_no_import(self, parse_java: ParseJava) -> None:
        """Imports are only committed once the replacement was accepted."""
        unit = parse_java(_method("var names = names();"))
        host = RejectingMutator(unit)
        oracle = StaticTypeOracle({"names()": "java.util.List<java.lang.String>"})

        outcome = UseExplicitTypes(oracle).process(unit.local_declarations()[0], host)

        assert outcome.stage is CandidateState.REWRITING
        assert outcome.reason == "mutation_rejected"
        assert host.added_imports == []
        assert host.render() == unit.text

    def test_unexpected_fault_is_contained(self, parse_java: ParseJava) -> None:
        unit = parse_java(_method("var x = compute();"))
        host = SourceMutator(unit)

        outcome = UseExplicitTypes(ExplodingOracle()).process(unit.local_declarations()[0], host)

        assert outcome.state is CandidateState.ABSTAINED
        assert outcome.reason == "unexpected_fault"
        assert outcome.error is not None
        assert outcome.error.code == ErrorCode.INTERNAL_ERROR
        assert outcome.error.details["exception"] == "RuntimeError"
        assert host.render() == unit.text
