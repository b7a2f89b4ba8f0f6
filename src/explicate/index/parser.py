"""Tree-sitter parsing of Java compilation units.

This module is the AST accessor used by the rewrite rule:
- Import directives of a unit, in declaration order
- Local variable declarations, in document order
- Read access to a declaration's type, declarators, modifiers and initializer

Nothing here resolves types; it is purely syntactic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from explicate.config.constants import INFERRED_TYPE_KEYWORD
from explicate.types.imports import ImportDirective

_WHITESPACE_RE = re.compile(r"\s+")
_COMMENT_NODES = frozenset({"comment", "line_comment", "block_comment"})


@dataclass(frozen=True, slots=True)
class NodeKey:
    """Identity of a syntax node within one parse of one unit."""

    start_byte: int
    end_byte: int
    kind: str


def node_key(node: Any) -> NodeKey:
    return NodeKey(node.start_byte, node.end_byte, node.type)


def unwrap_parentheses(node: Any) -> Any:
    """Innermost expression of ``((expr))``."""
    while node is not None and node.type == "parenthesized_expression":
        inner = [child for child in node.named_children if child.type not in _COMMENT_NODES]
        if len(inner) != 1:
            break
        node = inner[0]
    return node


def has_diamond(type_node: Any) -> bool:
    """Whether a ``new`` expression's type uses empty type arguments (``Foo<>``)."""
    if type_node is None or type_node.type != "generic_type":
        return False
    for child in type_node.children:
        if child.type == "type_arguments":
            return not child.named_children
    return False


@dataclass
class JavaCompilationUnit:
    """A parsed Java source file."""

    source: bytes
    tree: Any  # Tree-sitter Tree (not serializable)
    error_count: int
    imports: list[ImportDirective] = field(default_factory=list)
    import_nodes: list[Any] = field(default_factory=list, repr=False)
    package_node: Any = field(default=None, repr=False)

    @property
    def root_node(self) -> Any:
        return self.tree.root_node

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")

    def text_of(self, node: Any) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def local_declarations(self) -> list[LocalDeclaration]:
        """All local variable declarations, outermost first, in document order."""
        found: list[LocalDeclaration] = []
        stack = [self.root_node]
        while stack:
            node = stack.pop()
            if node.type == "local_variable_declaration":
                found.append(LocalDeclaration(unit=self, node=node))
            stack.extend(reversed(node.children))
        return found


@dataclass
class LocalDeclaration:
    """Read accessor over one ``local_variable_declaration`` node."""

    unit: JavaCompilationUnit
    node: Any = field(repr=False)

    @property
    def key(self) -> NodeKey:
        return node_key(self.node)

    @property
    def text(self) -> str:
        return self.unit.text_of(self.node)

    @property
    def type_node(self) -> Any:
        return self.node.child_by_field_name("type")

    @property
    def declarators(self) -> list[Any]:
        return list(self.node.children_by_field_name("declarator"))

    @property
    def is_inferred(self) -> bool:
        """Whether the declared type is the ``var`` marker."""
        type_node = self.type_node
        return (
            type_node is not None
            and type_node.type == "type_identifier"
            and self.unit.text_of(type_node) == INFERRED_TYPE_KEYWORD
        )

    @property
    def has_error(self) -> bool:
        return bool(self.node.has_error)

    @property
    def variable_name(self) -> str | None:
        declarators = self.declarators
        if len(declarators) != 1:
            return None
        name = declarators[0].child_by_field_name("name")
        return self.unit.text_of(name) if name is not None else None

    @property
    def initializer(self) -> Any:
        """Initializer expression node of a single-declarator declaration."""
        declarators = self.declarators
        if len(declarators) != 1:
            return None
        return declarators[0].child_by_field_name("value")

    @property
    def modifiers_node(self) -> Any:
        for child in self.node.children:
            if child.type == "modifiers":
                return child
        return None

    @property
    def modifiers(self) -> list[str]:
        """Keyword modifiers (only ``final`` is legal on a local)."""
        node = self.modifiers_node
        if node is None:
            return []
        return [
            self.unit.text_of(child)
            for child in node.children
            if child.type not in ("marker_annotation", "annotation")
        ]

    @property
    def annotations(self) -> list[str]:
        node = self.modifiers_node
        if node is None:
            return []
        return [
            self.unit.text_of(child)
            for child in node.children
            if child.type in ("marker_annotation", "annotation")
        ]


@dataclass
class JavaParser:
    """
    Tree-sitter parser for Java sources.

    Usage::

        parser = JavaParser()
        unit = parser.parse(source)
        for declaration in unit.local_declarations():
            ...
    """

    _parser: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Initialize the parser."""
        try:
            import tree_sitter
            import tree_sitter_java
        except ImportError as e:
            raise ImportError(
                "tree-sitter and tree-sitter-java are required. "
                "Install with: pip install tree-sitter tree-sitter-java"
            ) from e

        self._parser = tree_sitter.Parser()
        self._parser.language = tree_sitter.Language(tree_sitter_java.language())

    def parse(self, source: str | bytes) -> JavaCompilationUnit:
        """
        Parse one compilation unit.

        Args:
            source: Java source text.

        Returns:
            JavaCompilationUnit with tree, imports and error count.
        """
        content = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(content)

        error_count = 0
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            stack.extend(node.children)

        unit = JavaCompilationUnit(source=content, tree=tree, error_count=error_count)
        for child in tree.root_node.children:
            if child.type == "package_declaration":
                unit.package_node = child
            elif child.type == "import_declaration":
                unit.import_nodes.append(child)
                directive = _import_directive(unit, child)
                if directive is not None:
                    unit.imports.append(directive)
        return unit


def _import_directive(unit: JavaCompilationUnit, node: Any) -> ImportDirective | None:
    """Type import described by an ``import_declaration``; None for static imports."""
    name: str | None = None
    is_wildcard = False
    for child in node.children:
        if child.type == "static":
            return None
        if child.type in ("identifier", "scoped_identifier") and name is None:
            name = _WHITESPACE_RE.sub("", unit.text_of(child))
        elif child.type == "asterisk":
            is_wildcard = True
    if name is None:
        return None
    return ImportDirective(name=name, is_wildcard=is_wildcard)
