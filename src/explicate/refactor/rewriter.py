"""Declaration rewriting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from explicate.core.logging import get_logger

if TYPE_CHECKING:
    from explicate.refactor.candidates import Candidate
    from explicate.refactor.context import CompilationContext
    from explicate.refactor.host import RewriteHost

log = get_logger(__name__)


@dataclass(frozen=True)
class ExplicitDeclaration:
    """The replacement for a ``var`` declaration."""

    annotations: tuple[str, ...]
    modifiers: tuple[str, ...]
    type_text: str
    variable_name: str
    initializer: str

    def render(self) -> str:
        head = " ".join((*self.annotations, *self.modifiers, self.type_text))
        return f"{head} {self.variable_name} = {self.initializer};"


def build_declaration(candidate: Candidate, type_text: str) -> ExplicitDeclaration:
    declaration = candidate.declaration
    return ExplicitDeclaration(
        annotations=tuple(declaration.annotations),
        modifiers=tuple(declaration.modifiers),
        type_text=type_text,
        variable_name=candidate.variable_name,
        initializer=declaration.unit.text_of(candidate.initializer),
    )


def rewrite(
    candidate: Candidate,
    type_text: str,
    context: CompilationContext,
    host: RewriteHost,
) -> ExplicitDeclaration | None:
    """Submit the replacement, then commit the context's staged imports.

    Returns the new declaration, or None when the host rejected the
    replacement. A rejected replacement commits no import.
    """
    new = build_declaration(candidate, type_text)
    if not host.replace(candidate.declaration, new):
        log.debug("replacement_rejected", variable=candidate.variable_name)
        return None
    for directive in context.pending:
        host.add_import(directive.name)
    return new
