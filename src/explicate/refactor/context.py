"""Per-candidate compilation context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from explicate.types.imports import ImportDirective

if TYPE_CHECKING:
    from explicate.index.parser import LocalDeclaration
    from explicate.refactor.host import ImportRegistry


@dataclass
class CompilationContext:
    """Imports visible to one candidate, plus the imports it wants to add.

    A context is built for exactly one candidate and passed explicitly to
    every step. ``pending`` imports are visible to later name decisions of the
    same candidate, and only reach the unit once the replacement succeeded.
    """

    imports: tuple[ImportDirective, ...]
    site: LocalDeclaration | None = None
    pending: list[ImportDirective] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Set semantics on (name, is_wildcard), first occurrence keeps its position
        self.imports = tuple(dict.fromkeys(self.imports))

    @classmethod
    def for_declaration(
        cls, declaration: LocalDeclaration, registry: ImportRegistry
    ) -> CompilationContext:
        return cls(imports=tuple(registry.imports), site=declaration)

    def visible_imports(self) -> tuple[ImportDirective, ...]:
        return self.imports + tuple(self.pending)

    def stage(self, directive: ImportDirective) -> bool:
        """Buffer a new import; False if it is already visible."""
        if directive in self.imports or directive in self.pending:
            return False
        self.pending.append(directive)
        return True

    def mark(self) -> int:
        return len(self.pending)

    def rollback(self, mark: int) -> None:
        """Drop imports staged after ``mark``."""
        del self.pending[mark:]
