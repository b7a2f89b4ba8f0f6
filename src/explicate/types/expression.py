"""Structured type expressions, the output of synthesis.

A TypeExpression mirrors a SemanticType, except that every reference node
records how its name is spelled in the target compilation unit. The tree is
serialized once, by ``render``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class ShortName:
    """Unqualified spelling, resolvable through an import or ``java.lang``."""

    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class QualifiedName:
    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class NestedQualifiedName:
    """``Outer.Inner`` where ``Outer`` is directly imported."""

    outer: str
    inner: str

    def render(self) -> str:
        return f"{self.outer}.{self.inner}"


Rendering = Union[ShortName, QualifiedName, NestedQualifiedName]


@dataclass(frozen=True, slots=True)
class PrimitiveExpr:
    name: str


@dataclass(frozen=True, slots=True)
class ArrayExpr:
    component: TypeExpression


@dataclass(frozen=True, slots=True)
class WildcardExpr:
    bound: TypeExpression | None = None


@dataclass(frozen=True, slots=True)
class VariableExpr:
    name: str


@dataclass(frozen=True, slots=True)
class RawExpr:
    text: str


@dataclass(frozen=True, slots=True)
class ReferenceExpr:
    qualified_name: str
    rendering: Rendering
    arguments: tuple[TypeExpression, ...] = field(default_factory=tuple)


TypeExpression = Union[PrimitiveExpr, ArrayExpr, WildcardExpr, VariableExpr, RawExpr, ReferenceExpr]


def render(expression: TypeExpression) -> str:
    """Serialize a type expression to Java source text."""
    if isinstance(expression, PrimitiveExpr):
        return expression.name
    if isinstance(expression, ArrayExpr):
        return f"{render(expression.component)}[]"
    if isinstance(expression, WildcardExpr):
        if expression.bound is None:
            return "?"
        return f"? extends {render(expression.bound)}"
    if isinstance(expression, VariableExpr):
        return expression.name
    if isinstance(expression, RawExpr):
        return expression.text
    base = expression.rendering.render()
    if not expression.arguments:
        return base
    return f"{base}<{', '.join(render(arg) for arg in expression.arguments)}>"
