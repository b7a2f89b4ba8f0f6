"""Explicit type synthesis.

Turns a SemanticType into a TypeExpression whose every reference node
carries its spelling for the target unit. Synthesis never raises: failures
are returned in the SynthesisResult, and any import staged by the failed
attempt is dropped from the context.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from explicate.config.constants import DEFAULT_TYPE_DEPTH, NESTED_CLASS_MARKER, PRIMITIVE_TYPES
from explicate.core.errors import RewriteError
from explicate.refactor.context import CompilationContext
from explicate.refactor.disambiguator import (
    can_use_short,
    is_implicitly_visible,
    is_outer_visible,
    is_visible_without_import,
)
from explicate.refactor.imports import ensure_import
from explicate.types.descriptors import DescriptorError, parse_descriptor
from explicate.types.expression import (
    ArrayExpr,
    NestedQualifiedName,
    PrimitiveExpr,
    QualifiedName,
    RawExpr,
    ReferenceExpr,
    Rendering,
    ShortName,
    TypeExpression,
    VariableExpr,
    WildcardExpr,
    render,
)
from explicate.types.semantic import (
    ArrayType,
    OtherType,
    PrimitiveType,
    ReferenceType,
    SemanticType,
    TypeVariable,
    WildcardType,
    is_nested_namespace,
    namespace,
    short_name,
)

_IDENTIFIER = r"[A-Za-z_$][\w$]*"
_IDENTIFIER_RE = re.compile(_IDENTIFIER)
_QUALIFIED_NAME_RE = re.compile(rf"{_IDENTIFIER}(?:\.{_IDENTIFIER})*")


@dataclass(frozen=True)
class SynthesisResult:
    """Either a type expression or the reason none could be built."""

    expression: TypeExpression | None = None
    failure: RewriteError | None = None

    @property
    def ok(self) -> bool:
        return self.expression is not None

    @property
    def text(self) -> str | None:
        return render(self.expression) if self.expression is not None else None


class TypeSynthesizer:
    """Renders semantic types for one compilation context at a time.

    The synthesizer holds no per-candidate state; the context is passed to
    every call.
    """

    def __init__(self, max_depth: int = DEFAULT_TYPE_DEPTH) -> None:
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def synthesize(self, semantic_type: SemanticType, context: CompilationContext) -> SynthesisResult:
        mark = context.mark()
        try:
            expression = self._build(semantic_type, context, 0)
        except RewriteError as e:
            context.rollback(mark)
            return SynthesisResult(failure=e)
        return SynthesisResult(expression=expression)

    def _build(self, semantic_type: SemanticType, context: CompilationContext, depth: int) -> TypeExpression:
        if depth >= self._max_depth:
            raise RewriteError.synthesis_failure(
                f"type nested deeper than {self._max_depth}", max_depth=self._max_depth
            )
        if isinstance(semantic_type, PrimitiveType):
            if semantic_type.name not in PRIMITIVE_TYPES:
                raise RewriteError.synthesis_failure(
                    f"'{semantic_type.name}' is not a primitive type", name=semantic_type.name
                )
            return PrimitiveExpr(semantic_type.name)
        if isinstance(semantic_type, ArrayType):
            return ArrayExpr(self._build(semantic_type.component, context, depth + 1))
        if isinstance(semantic_type, ReferenceType):
            return self._reference(semantic_type, context, depth)
        if isinstance(semantic_type, WildcardType):
            if semantic_type.bound is None:
                return WildcardExpr()
            return WildcardExpr(self._build(semantic_type.bound, context, depth + 1))
        if isinstance(semantic_type, TypeVariable):
            if not _IDENTIFIER_RE.fullmatch(semantic_type.name):
                raise RewriteError.synthesis_failure(
                    f"'{semantic_type.name}' is not a type variable name", name=semantic_type.name
                )
            return VariableExpr(semantic_type.name)
        if isinstance(semantic_type, OtherType):
            return self._raw(semantic_type, depth)
        raise RewriteError.synthesis_failure(f"unknown type description {semantic_type!r}")

    def _reference(self, reference: ReferenceType, context: CompilationContext, depth: int) -> ReferenceExpr:
        qualified = reference.qualified_name
        if not _QUALIFIED_NAME_RE.fullmatch(qualified):
            raise RewriteError.synthesis_failure(
                f"'{qualified}' is not a qualified type name", name=qualified
            )
        rendering = self._choose_rendering(qualified, context)
        arguments = tuple(self._build(arg, context, depth + 1) for arg in reference.type_arguments)
        return ReferenceExpr(qualified_name=qualified, rendering=rendering, arguments=arguments)

    def _choose_rendering(self, qualified: str, context: CompilationContext) -> Rendering:
        if NESTED_CLASS_MARKER in qualified:
            # Binary nested names never go through the short-name heuristics
            return QualifiedName(qualified.replace(NESTED_CLASS_MARKER, "."))
        simple = short_name(qualified)
        if is_implicitly_visible(qualified):
            return ShortName(simple)
        outer = namespace(qualified)
        if outer and is_nested_namespace(qualified) and is_outer_visible(outer, context):
            return NestedQualifiedName(short_name(outer), simple)
        if not can_use_short(simple, qualified, context):
            return QualifiedName(qualified)
        if is_nested_namespace(qualified):
            # Never import a nested type just to shorten it
            if is_visible_without_import(qualified, context):
                return ShortName(simple)
            return QualifiedName(qualified)
        ensure_import(qualified, context)
        return ShortName(simple)

    def _raw(self, other: OtherType, depth: int) -> RawExpr:
        text = other.raw.strip()
        try:
            parse_descriptor(text, max_depth=self._max_depth - depth)
        except DescriptorError as e:
            raise RewriteError.synthesis_failure(
                f"'{other.raw}' is not a type reference", raw=other.raw, reason=str(e)
            ) from e
        return RawExpr(text)


def synthesize(
    semantic_type: SemanticType,
    context: CompilationContext,
    *,
    max_depth: int = DEFAULT_TYPE_DEPTH,
) -> SynthesisResult:
    """Convenience wrapper around ``TypeSynthesizer(max_depth).synthesize``."""
    return TypeSynthesizer(max_depth).synthesize(semantic_type, context)

