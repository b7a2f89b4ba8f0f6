"""Type model: semantic types from the oracle, and synthesized type expressions."""

from explicate.types.descriptors import (
    DescriptorError,
    ImportScope,
    parse_descriptor,
    resolve_type_text,
)
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
from explicate.types.imports import ImportDirective
from explicate.types.semantic import (
    ArrayType,
    OtherType,
    PrimitiveType,
    ReferenceType,
    SemanticType,
    TypeVariable,
    WildcardType,
    describe,
)

__all__ = [
    # Semantic types
    "ArrayType",
    "OtherType",
    "PrimitiveType",
    "ReferenceType",
    "SemanticType",
    "TypeVariable",
    "WildcardType",
    "describe",
    # Type expressions
    "ArrayExpr",
    "NestedQualifiedName",
    "PrimitiveExpr",
    "QualifiedName",
    "RawExpr",
    "ReferenceExpr",
    "Rendering",
    "ShortName",
    "TypeExpression",
    "VariableExpr",
    "WildcardExpr",
    "render",
    # Imports and descriptors
    "DescriptorError",
    "ImportDirective",
    "ImportScope",
    "parse_descriptor",
    "resolve_type_text",
]
