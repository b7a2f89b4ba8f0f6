"""Parsing of textual type descriptions into SemanticType values.

Two entry points share one recursive-descent parser:

- ``parse_descriptor`` reads a fully qualified description, the form an oracle
  reports (``java.util.Map<java.lang.String, int[]>``).
- ``resolve_type_text`` reads source-level type text and resolves every simple
  name against an import set (``Map<String, int[]>`` under ``import java.util.Map;``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Iterable

from explicate.config.constants import (
    IMPLICIT_PACKAGE,
    IMPLICIT_TYPE_NAMES,
    MAX_TYPE_DEPTH_CEILING,
    PRIMITIVE_TYPES,
)
from explicate.types.imports import ImportDirective
from explicate.types.semantic import (
    ArrayType,
    PrimitiveType,
    ReferenceType,
    SemanticType,
    TypeVariable,
    WildcardType,
    short_name,
)

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<name>[A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)|(?P<dims>\[\s*\])|(?P<punct>[<>,?]))"
)

# Words that can never name a type
_RESERVED_WORDS = frozenset(
    {
        "abstract", "assert", "break", "case", "catch", "class", "const", "continue",
        "default", "do", "else", "enum", "extends", "false", "final", "finally", "for",
        "goto", "if", "implements", "import", "instanceof", "interface", "native", "new",
        "null", "package", "private", "protected", "public", "return", "static",
        "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "void", "volatile", "while", "_",
    }
)

# Maps a (possibly dotted) name to its qualified name, or None for a type variable.
NameResolver = Callable[[str], "str | None"]


class DescriptorError(ValueError):
    """Raised when type text is not a well-formed type reference."""


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN_RE.match(stripped, pos)
        if match is None or match.end() == pos:
            raise DescriptorError(f"Unexpected character at {pos} in {text!r}")
        if match.group("name") is not None:
            tokens.append(re.sub(r"\s+", "", match.group("name")))
        elif match.group("dims") is not None:
            tokens.append("[]")
        else:
            tokens.append(match.group("punct"))
        pos = match.end()
    return tokens


class _TypeTextParser:
    def __init__(self, text: str, resolve_name: NameResolver, max_depth: int) -> None:
        self._text = text
        self._tokens = _tokenize(text)
        self._pos = 0
        self._resolve_name = resolve_name
        self._max_depth = max_depth

    def parse(self) -> SemanticType:
        if not self._tokens:
            raise DescriptorError("Empty type text")
        result = self._type(0)
        if self._pos != len(self._tokens):
            raise DescriptorError(
                f"Trailing input {self._tokens[self._pos]!r} in {self._text!r}"
            )
        return result

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise DescriptorError(f"Unexpected end of {self._text!r}")
        self._pos += 1
        return token

    def _expect(self, token: str) -> None:
        found = self._next()
        if found != token:
            raise DescriptorError(f"Expected {token!r} but found {found!r} in {self._text!r}")

    def _type(self, depth: int) -> SemanticType:
        if depth >= self._max_depth:
            raise DescriptorError(f"Type nested deeper than {self._max_depth} in {self._text!r}")
        token = self._next()
        result: SemanticType
        if token == "?":
            if self._peek() == "extends":
                self._next()
                result = WildcardType(self._type(depth + 1))
            elif self._peek() == "super":
                raise DescriptorError(f"Lower-bounded wildcards are not supported: {self._text!r}")
            else:
                result = WildcardType()
        elif token in PRIMITIVE_TYPES:
            result = PrimitiveType(token)
        elif token[0].isalpha() or token[0] in "_$":
            if any(s in _RESERVED_WORDS or s in PRIMITIVE_TYPES for s in token.split(".")):
                raise DescriptorError(f"Reserved word in type name {token!r} in {self._text!r}")
            arguments: list[SemanticType] = []
            if self._peek() == "<":
                self._next()
                arguments.append(self._type(depth + 1))
                while self._peek() == ",":
                    self._next()
                    arguments.append(self._type(depth + 1))
                self._expect(">")
            qualified = self._resolve_name(token)
            if qualified is None:
                if arguments:
                    raise DescriptorError(f"Type variable {token!r} cannot take arguments")
                result = TypeVariable(token)
            else:
                result = ReferenceType(qualified, tuple(arguments))
        else:
            raise DescriptorError(f"Unexpected {token!r} in {self._text!r}")
        while self._peek() == "[]":
            self._next()
            result = ArrayType(result)
        return result


def parse_descriptor(
    text: str,
    *,
    type_variables: Collection[str] = (),
    max_depth: int = MAX_TYPE_DEPTH_CEILING,
) -> SemanticType:
    """Parse a fully qualified type description.

    Bare names listed in ``type_variables`` become TypeVariable nodes; every
    other name is taken as already qualified.

    Raises:
        DescriptorError: text is not a well-formed type reference.
    """

    def resolve(name: str) -> str | None:
        return None if name in type_variables else name

    return _TypeTextParser(text, resolve, max_depth).parse()


class ImportScope:
    """Resolves simple type names the way the compiler does for one unit.

    Single-type imports shadow ``java.lang``; ``java.lang`` shadows
    on-demand (wildcard) imports. Wildcard imports can only be resolved for
    names listed in ``known_types`` since the package contents are not known
    otherwise.
    """

    def __init__(
        self,
        imports: Iterable[ImportDirective],
        *,
        known_types: Collection[str] = (),
        type_variables: Collection[str] = (),
    ) -> None:
        self._direct: dict[str, str] = {}
        self._wildcards: list[str] = []
        for directive in imports:
            if directive.is_wildcard:
                self._wildcards.append(directive.name)
            else:
                self._direct.setdefault(short_name(directive.name), directive.name)
        self._known_types = frozenset(known_types)
        self._type_variables = frozenset(type_variables)

    def resolve_simple(self, name: str) -> str | None:
        """Qualified name for a simple name, or None when nothing declares it."""
        if name in self._direct:
            return self._direct[name]
        if name in IMPLICIT_TYPE_NAMES:
            return f"{IMPLICIT_PACKAGE}.{name}"
        for package in self._wildcards:
            candidate = f"{package}.{name}"
            if candidate in self._known_types:
                return candidate
        return None

    def resolve(self, name: str) -> str | None:
        """Resolve a possibly dotted name; None means a type variable."""
        head, _, rest = name.partition(".")
        if not rest:
            if name in self._type_variables:
                return None
            return self.resolve_simple(name) or name
        enclosing = self.resolve_simple(head)
        if enclosing is None:
            return name
        return f"{enclosing}.{rest}"


def resolve_type_text(
    text: str,
    imports: Iterable[ImportDirective],
    *,
    known_types: Collection[str] = (),
    type_variables: Collection[str] = (),
    max_depth: int = MAX_TYPE_DEPTH_CEILING,
) -> SemanticType:
    """Parse source-level type text and qualify its names under ``imports``.

    Raises:
        DescriptorError: text is not a well-formed type reference.
    """
    scope = ImportScope(imports, known_types=known_types, type_variables=type_variables)
    return _TypeTextParser(text, scope.resolve, max_depth).parse()
