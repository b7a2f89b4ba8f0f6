"""Reference type oracles.

The rewrite rule only depends on the ``TypeOracle`` protocol. The oracles
here cover what can be decided syntactically (literals, casts, explicit
``new`` expressions) and a table-driven oracle for hosts that resolve types
elsewhere.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, Any

from explicate.core.logging import get_logger
from explicate.index.parser import has_diamond, unwrap_parentheses
from explicate.types.descriptors import DescriptorError, parse_descriptor, resolve_type_text
from explicate.types.semantic import ArrayType, PrimitiveType, ReferenceType, SemanticType

if TYPE_CHECKING:
    from explicate.index.parser import JavaCompilationUnit
    from explicate.refactor.host import TypeOracle

log = get_logger(__name__)

_INTEGER_LITERALS = frozenset(
    {
        "decimal_integer_literal",
        "hex_integer_literal",
        "octal_integer_literal",
        "binary_integer_literal",
    }
)
_FLOATING_LITERALS = frozenset({"decimal_floating_point_literal", "hex_floating_point_literal"})
_STRING = ReferenceType("java.lang.String")


class LiteralTypeOracle:
    """Resolves expressions whose type is spelled out in the expression itself.

    Handles literals, casts, and ``new`` expressions with explicit type
    arguments. Simple names are qualified through the unit's imports;
    ``known_types`` lets on-demand imports take part in that resolution.
    Everything else (method calls, names, diamonds, anonymous classes) is
    reported as unresolved.
    """

    def __init__(self, known_types: Collection[str] = ()) -> None:
        self._known_types = frozenset(known_types)

    def resolve(self, expression: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        node = unwrap_parentheses(expression)
        if node is None:
            return None
        kind = node.type
        if kind in _INTEGER_LITERALS:
            text = unit.text_of(node)
            return PrimitiveType("long" if text[-1] in "lL" else "int")
        if kind in _FLOATING_LITERALS:
            text = unit.text_of(node)
            return PrimitiveType("float" if text[-1] in "fF" else "double")
        if kind in ("true", "false"):
            return PrimitiveType("boolean")
        if kind == "character_literal":
            return PrimitiveType("char")
        if kind in ("string_literal", "text_block"):
            return _STRING
        if kind == "cast_expression":
            types = node.children_by_field_name("type")
            if len(types) != 1:
                # Intersection casts have no single spelling
                return None
            return self._resolve_type_node(types[0], unit)
        if kind == "object_creation_expression":
            return self._resolve_creation(node, unit)
        if kind == "array_creation_expression":
            return self._resolve_array_creation(node, unit)
        return None

    def _resolve_type_node(self, type_node: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        if type_node is None:
            return None
        text = unit.text_of(type_node)
        try:
            return resolve_type_text(text, unit.imports, known_types=self._known_types)
        except DescriptorError as e:
            log.debug("oracle_type_text_unparsed", text=text, reason=str(e))
            return None

    def _resolve_creation(self, node: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        if any(child.type == "class_body" for child in node.children):
            return None
        type_node = node.child_by_field_name("type")
        if type_node is None or has_diamond(type_node):
            return None
        return self._resolve_type_node(type_node, unit)

    def _resolve_array_creation(self, node: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        component = self._resolve_type_node(node.child_by_field_name("type"), unit)
        if component is None:
            return None
        rank = 0
        for child in node.children:
            if child.type == "dimensions_expr":
                rank += 1
            elif child.type == "dimensions":
                rank += unit.text_of(child).count("[")
        result: SemanticType = component
        for _ in range(rank):
            result = ArrayType(result)
        return result


class StaticTypeOracle:
    """Looks initializers up by their source text.

    Values are SemanticType objects or fully qualified descriptor strings.
    Misses are delegated to ``fallback`` when one is given.
    """

    def __init__(
        self,
        types: Mapping[str, SemanticType | str],
        *,
        fallback: TypeOracle | None = None,
    ) -> None:
        self._types = dict(types)
        self._fallback = fallback

    def resolve(self, expression: Any, unit: JavaCompilationUnit) -> SemanticType | None:
        text = unit.text_of(expression)
        found = self._types.get(text)
        if found is None:
            if self._fallback is None:
                return None
            return self._fallback.resolve(expression, unit)
        if isinstance(found, str):
            try:
                return parse_descriptor(found)
            except DescriptorError as e:
                log.debug("oracle_descriptor_unparsed", descriptor=found, reason=str(e))
                return None
        return found

