"""Import directives of a compilation unit."""

from __future__ import annotations

from dataclasses import dataclass

from explicate.types.semantic import short_name


@dataclass(frozen=True, slots=True)
class ImportDirective:
    """A single-type import, or an on-demand import of a whole package.

    For a wildcard directive ``name`` is the package (``java.util`` for
    ``import java.util.*;``); otherwise it is the imported type's qualified name.
    """

    name: str
    is_wildcard: bool = False

    @property
    def simple_name(self) -> str | None:
        """Name the directive makes visible, None for wildcard directives."""
        return None if self.is_wildcard else short_name(self.name)

    def covers(self, qualified_name: str) -> bool:
        """Whether this directive alone makes ``qualified_name`` visible by its simple name."""
        if self.is_wildcard:
            head, sep, _ = qualified_name.rpartition(".")
            return bool(sep) and head == self.name
        return self.name == qualified_name

    def to_source(self) -> str:
        return f"import {self.name}.*;" if self.is_wildcard else f"import {self.name};"
