"""Import staging for adopted short names."""

from __future__ import annotations

from explicate.refactor.context import CompilationContext
from explicate.refactor.disambiguator import is_implicitly_visible
from explicate.types.imports import ImportDirective
from explicate.types.semantic import namespace, short_name


def ensure_import(qualified_name: str, context: CompilationContext) -> ImportDirective | None:
    """Make ``qualified_name`` importable under its simple name.

    Idempotent. Nothing is staged when the type is already covered by a
    single-type or on-demand import, when any single-type import already uses
    the same simple name, or when the type needs no import at all (``java.lang``
    and the default package). Otherwise a single-type import is staged on the
    context and returned.
    """
    if is_implicitly_visible(qualified_name) or not namespace(qualified_name):
        return None
    simple = short_name(qualified_name)
    for directive in context.visible_imports():
        if directive.covers(qualified_name) or directive.simple_name == simple:
            return None
    directive = ImportDirective(name=qualified_name)
    context.stage(directive)
    return directive
