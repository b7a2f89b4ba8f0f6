"""Candidate selection for explicit-type rewrites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from explicate.index.parser import has_diamond, unwrap_parentheses

if TYPE_CHECKING:
    from explicate.index.parser import LocalDeclaration

# Initializers that have no standalone type, or whose resolved type is unreliable
UNSUPPORTED_INITIALIZERS = {
    "lambda_expression": "lambda",
    "method_reference": "method_reference",
    "array_initializer": "array_initializer",
}


@dataclass(frozen=True)
class Candidate:
    """A ``var`` declaration eligible for an explicit type."""

    declaration: LocalDeclaration
    variable_name: str
    initializer: Any


@dataclass(frozen=True)
class FilterVerdict:
    candidate: Candidate | None = None
    reason: str | None = None
    unsupported_initializer: bool = False

    @property
    def eligible(self) -> bool:
        return self.candidate is not None


def unsupported_initializer_kind(initializer: Any) -> str | None:
    """Kind of initializer that rules the declaration out, or None."""
    node = unwrap_parentheses(initializer)
    if node is None:
        return None
    if node.type in UNSUPPORTED_INITIALIZERS:
        return UNSUPPORTED_INITIALIZERS[node.type]
    if node.type == "object_creation_expression":
        has_body = any(child.type == "class_body" for child in node.children)
        if has_body and has_diamond(node.child_by_field_name("type")):
            return "diamond_anonymous_class"
    return None


def evaluate(declaration: LocalDeclaration) -> FilterVerdict:
    """Decide whether ``declaration`` is a candidate. No side effects."""
    if len(declaration.declarators) != 1:
        return FilterVerdict(reason="multiple_declarators")
    if not declaration.is_inferred:
        return FilterVerdict(reason="explicit_type")
    if declaration.has_error:
        return FilterVerdict(reason="syntax_error")
    initializer = declaration.initializer
    if initializer is None:
        return FilterVerdict(reason="no_initializer")
    kind = unsupported_initializer_kind(initializer)
    if kind is not None:
        return FilterVerdict(reason=kind, unsupported_initializer=True)
    name = declaration.variable_name
    if name is None:
        return FilterVerdict(reason="no_variable_name")
    return FilterVerdict(
        candidate=Candidate(declaration=declaration, variable_name=name, initializer=initializer)
    )


def is_eligible(declaration: LocalDeclaration) -> bool:
    return evaluate(declaration).eligible
