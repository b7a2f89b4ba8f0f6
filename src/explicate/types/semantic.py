"""Semantic type descriptions produced by a type oracle.

These values are read-only inputs to synthesis. They describe what a type
*is*, never how it should be spelled in a given compilation unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    """A primitive type such as ``int`` or ``boolean``."""

    name: str


@dataclass(frozen=True, slots=True)
class ArrayType:
    component: SemanticType


@dataclass(frozen=True, slots=True)
class ReferenceType:
    """A class or interface type with its (ordered) type arguments."""

    qualified_name: str
    type_arguments: tuple[SemanticType, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class WildcardType:
    """``? extends bound``, or the unbounded ``?`` when bound is None."""

    bound: SemanticType | None = None


@dataclass(frozen=True, slots=True)
class TypeVariable:
    name: str


@dataclass(frozen=True, slots=True)
class OtherType:
    """Anything the oracle could only describe as text."""

    raw: str


SemanticType = Union[
    PrimitiveType, ArrayType, ReferenceType, WildcardType, TypeVariable, OtherType
]


def short_name(qualified_name: str) -> str:
    """Last dot-separated segment: ``java.util.Map.Entry`` -> ``Entry``."""
    return qualified_name.rsplit(".", 1)[-1]


def namespace(qualified_name: str) -> str:
    """Everything before the last segment; empty for the default package."""
    head, sep, _ = qualified_name.rpartition(".")
    return head if sep else ""


def is_nested_namespace(name: str) -> bool:
    """Whether the enclosing segment of ``name`` is a type rather than a package.

    Relies on the Java naming convention: packages are lower case and types
    start with an upper-case letter.
    """
    enclosing = namespace(name)
    return bool(enclosing) and short_name(enclosing)[:1].isupper()


def describe(semantic_type: SemanticType) -> str:
    """Fully qualified, human readable rendering used in logs and reports."""
    if isinstance(semantic_type, PrimitiveType):
        return semantic_type.name
    if isinstance(semantic_type, ArrayType):
        return f"{describe(semantic_type.component)}[]"
    if isinstance(semantic_type, ReferenceType):
        if not semantic_type.type_arguments:
            return semantic_type.qualified_name
        args = ", ".join(describe(arg) for arg in semantic_type.type_arguments)
        return f"{semantic_type.qualified_name}<{args}>"
    if isinstance(semantic_type, WildcardType):
        if semantic_type.bound is None:
            return "?"
        return f"? extends {describe(semantic_type.bound)}"
    if isinstance(semantic_type, TypeVariable):
        return semantic_type.name
    return semantic_type.raw
