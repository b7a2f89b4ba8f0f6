"""In-memory mutation engine for one Java compilation unit.

Declaration replacements are keyed on node identity and applied as
minimal splices over the original source; import additions are buffered
and written into the import section. Nothing touches disk: ``render``
returns the rewritten source and ``delta`` summarizes the change.
"""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from explicate.core.logging import get_logger
from explicate.index.parser import NodeKey
from explicate.types.imports import ImportDirective

if TYPE_CHECKING:
    from explicate.index.parser import JavaCompilationUnit, LocalDeclaration
    from explicate.refactor.rewriter import ExplicitDeclaration

log = get_logger(__name__)


@dataclass(frozen=True)
class Splice:
    """Replace ``source[start:end]`` with ``text``."""

    start: int
    end: int
    text: str


@dataclass
class MutationDelta:
    """Structured delta from rewriting one unit."""

    mutation_id: str
    declarations_replaced: int
    imports_added: list[str] = field(default_factory=list)
    old_hash: str = ""
    new_hash: str = ""
    insertions: int = 0
    deletions: int = 0

    @property
    def changed(self) -> bool:
        return self.old_hash != self.new_hash


class SourceMutator:
    """Mutation engine and import registry over one parsed compilation unit.

    A replacement is rejected when the declaration does not belong to this
    unit's parse, was already replaced, is no longer a ``var`` declaration,
    or when the new declaration does not keep its name, modifiers,
    annotations and initializer.
    """

    def __init__(self, unit: JavaCompilationUnit) -> None:
        self._unit = unit
        self._known = {d.key for d in unit.local_declarations()}
        self._replaced: dict[NodeKey, Splice] = {}
        self._imports: list[ImportDirective] = list(unit.imports)
        self._added: list[ImportDirective] = []

    @property
    def unit(self) -> JavaCompilationUnit:
        return self._unit

    @property
    def imports(self) -> list[ImportDirective]:
        return list(self._imports)

    @property
    def added_imports(self) -> list[ImportDirective]:
        return list(self._added)

    def replace(self, old: LocalDeclaration, new: ExplicitDeclaration) -> bool:
        if old.unit is not self._unit or old.key not in self._known:
            log.debug("replace_rejected", reason="unknown_node", key=str(old.key))
            return False
        if old.key in self._replaced:
            log.debug("replace_rejected", reason="already_replaced", key=str(old.key))
            return False
        type_node = old.type_node
        initializer = old.initializer
        if type_node is None or initializer is None or not old.is_inferred:
            log.debug("replace_rejected", reason="not_inferred", key=str(old.key))
            return False
        if (
            new.variable_name != old.variable_name
            or new.initializer != self._unit.text_of(initializer)
            or new.modifiers != tuple(old.modifiers)
            or new.annotations != tuple(old.annotations)
        ):
            log.debug("replace_rejected", reason="structural_conflict", key=str(old.key))
            return False
        self._replaced[old.key] = Splice(type_node.start_byte, type_node.end_byte, new.type_text)
        return True

    def add_import(self, qualified_name: str) -> None:
        directive = ImportDirective(name=qualified_name)
        if directive in self._imports:
            return
        self._imports.append(directive)
        self._added.append(directive)

    def render(self) -> str:
        """The unit's source with every accepted replacement and import applied."""
        splices = list(self._replaced.values())
        if self._added:
            splices.append(self._import_splice())
        content = self._unit.source
        for splice in sorted(splices, key=lambda s: (s.start, s.end), reverse=True):
            content = content[: splice.start] + splice.text.encode("utf-8") + content[splice.end :]
        return content.decode("utf-8")

    def delta(self) -> MutationDelta:
        old_text = self._unit.text
        new_text = self.render()
        old_lines = old_text.splitlines()
        new_lines = new_text.splitlines()
        return MutationDelta(
            mutation_id=str(uuid.uuid4())[:8],
            declarations_replaced=len(self._replaced),
            imports_added=[d.name for d in self._added],
            old_hash=_hash_content(old_text),
            new_hash=_hash_content(new_text),
            insertions=max(0, len(new_lines) - len(old_lines)),
            deletions=max(0, len(old_lines) - len(new_lines)),
        )

    def _import_splice(self) -> Splice:
        lines = "\n".join(directive.to_source() for directive in self._added)
        if self._unit.import_nodes:
            anchor = self._unit.import_nodes[-1].end_byte
            return Splice(anchor, anchor, f"\n{lines}")
        if self._unit.package_node is not None:
            anchor = self._unit.package_node.end_byte
            return Splice(anchor, anchor, f"\n\n{lines}")
        return Splice(0, 0, f"{lines}\n\n")


def _hash_content(content: str) -> str:
    """Hash content for delta tracking."""
    return hashlib.sha256(content.encode()).hexdigest()[:12]


__all__ = ["MutationDelta", "SourceMutator", "Splice"]
