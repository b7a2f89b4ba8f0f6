"""Syntactic layer - tree-sitter access to Java compilation units."""

from explicate.index.parser import (
    JavaCompilationUnit,
    JavaParser,
    LocalDeclaration,
    NodeKey,
    has_diamond,
    node_key,
    unwrap_parentheses,
)

__all__ = [
    "JavaCompilationUnit",
    "JavaParser",
    "LocalDeclaration",
    "NodeKey",
    "has_diamond",
    "node_key",
    "unwrap_parentheses",
]
