"""Interfaces the rewrite rule consumes from its host engine.

The rule never parses, resolves or edits on its own; it asks a TypeOracle
for types and a RewriteHost to apply the replacement and register imports.
``explicate.types.oracle`` and ``explicate.mutation.ops`` hold reference
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from explicate.index.parser import JavaCompilationUnit, LocalDeclaration
    from explicate.refactor.rewriter import ExplicitDeclaration
    from explicate.types.imports import ImportDirective
    from explicate.types.semantic import SemanticType


class TypeOracle(Protocol):
    def resolve(self, expression: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        """Type of ``expression``, or None when it cannot be resolved for any reason."""
        ...


class MutationEngine(Protocol):
    def replace(self, old: LocalDeclaration, new: ExplicitDeclaration) -> bool:
        """Atomically replace ``old`` (keyed on its identity); False when rejected."""
        ...


class ImportRegistry(Protocol):
    @property
    def imports(self) -> Sequence[ImportDirective]:
        """Current import directives of the unit, in declaration order."""
        ...

    def add_import(self, qualified_name: str) -> None: ...


class RewriteHost(MutationEngine, ImportRegistry, Protocol):
    """Mutation engine and import registry of one compilation unit."""
