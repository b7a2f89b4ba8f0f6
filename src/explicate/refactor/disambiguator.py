"""Short-name disambiguation.

Decides whether a type can be spelled by its simple name in a compilation
unit. Every function here is a pure function of its arguments.

The wildcard rule is deliberately permissive: an on-demand import of a
*different* package is never treated as a conflict, even though that
package might declare a type with the same simple name. Only single-type
imports and ``java.lang`` are checked for collisions.

The on-demand import of a type's own package is accepted before the
``java.lang`` collision check, so ``com.acme.String`` under
``import com.acme.*;`` is spelled ``String`` although the compiler reads
that as ``java.lang.String``.
"""

from __future__ import annotations

from explicate.config.constants import IMPLICIT_PACKAGE, IMPLICIT_TYPE_NAMES, NESTED_CLASS_MARKER
from explicate.refactor.context import CompilationContext
from explicate.types.semantic import namespace, short_name


def is_implicitly_visible(qualified_name: str) -> bool:
    """Whether the type belongs to ``java.lang`` itself (not a subpackage)."""
    return namespace(qualified_name) == IMPLICIT_PACKAGE


def has_nested_marker(qualified_name: str) -> bool:
    return NESTED_CLASS_MARKER in qualified_name


def has_direct_import(qualified_name: str, context: CompilationContext) -> bool:
    return any(
        not directive.is_wildcard and directive.name == qualified_name
        for directive in context.visible_imports()
    )


def can_use_short(short: str, qualified_name: str, context: CompilationContext) -> bool:
    """Whether ``short`` may stand for ``qualified_name`` in ``context``.

    First matching rule wins:
    1. ``java.lang`` types are always visible.
    2. Binary nested names (``Outer$Inner``) never use the short form.
    3. A single-type import of the same type.
    4. An on-demand import of the type's package.
    5. A single-type import of another type with the same simple name conflicts.
    6. A ``java.lang`` type with the same simple name conflicts.
    7. Otherwise the short form is free (an import may still be needed).
    """
    if is_implicitly_visible(qualified_name):
        return True
    if has_nested_marker(qualified_name):
        return False
    imports = context.visible_imports()
    if any(not d.is_wildcard and d.name == qualified_name for d in imports):
        return True
    if any(d.is_wildcard and d.covers(qualified_name) for d in imports):
        return True
    if any(not d.is_wildcard and d.simple_name == short and d.name != qualified_name for d in imports):
        return False
    if short in IMPLICIT_TYPE_NAMES:
        return False
    return True


def is_visible_without_import(qualified_name: str, context: CompilationContext) -> bool:
    """Whether the simple name already resolves to ``qualified_name``."""
    if is_implicitly_visible(qualified_name):
        return True
    return any(d.covers(qualified_name) for d in context.visible_imports())


def is_outer_visible(outer: str, context: CompilationContext) -> bool:
    """Whether the enclosing type of a nested type can be named by its simple name.

    True for a single-type import of ``outer``, and for ``java.lang`` types
    whose simple name no single-type import shadows.
    """
    if has_direct_import(outer, context):
        return True
    if not is_implicitly_visible(outer):
        return False
    simple = short_name(outer)
    return not any(
        not d.is_wildcard and d.simple_name == simple and d.name != outer
        for d in context.visible_imports()
    )
