"""Tests for config/constants.py module.

Covers:
- Java language facts
- Rule metadata constants
- Internal implementation constants
"""

from __future__ import annotations

from explicate.config.constants import (
    DEFAULT_TYPE_DEPTH,
    IMPLICIT_PACKAGE,
    IMPLICIT_TYPE_NAMES,
    MAX_TYPE_DEPTH_CEILING,
    PRIMITIVE_TYPES,
    RULE_ID,
    RULE_MINIMAL_JAVA_VERSION,
    RULE_SEE_URLS,
    RULE_TAGS,
)


class TestJavaLanguageFacts:
    """Tests for Java language constants."""

    def test_eight_primitives(self) -> None:
        assert len(PRIMITIVE_TYPES) == 8
        assert {"int", "long", "boolean", "char"} <= PRIMITIVE_TYPES
        assert "void" not in PRIMITIVE_TYPES

    def test_implicit_package(self) -> None:
        assert IMPLICIT_PACKAGE == "java.lang"

    def test_implicit_names_are_simple(self) -> None:
        """The java.lang name set holds simple names only."""
        assert all("." not in name for name in IMPLICIT_TYPE_NAMES)
        assert {"String", "Object", "Integer", "Thread", "Override"} <= IMPLICIT_TYPE_NAMES

    def test_implicit_names_exclude_other_packages(self) -> None:
        assert "List" not in IMPLICIT_TYPE_NAMES
        assert "Entry" not in IMPLICIT_TYPE_NAMES


class TestRuleMetadataConstants:
    """Tests for rule metadata constants."""

    def test_identity(self) -> None:
        assert RULE_ID == "UseExplicitTypes"
        assert RULE_MINIMAL_JAVA_VERSION == "10"
        assert RULE_TAGS == frozenset({"ImplicitToExplicit"})

    def test_see_urls(self) -> None:
        assert any("jeps/286" in url for url in RULE_SEE_URLS)
        assert any("useexplicittypes" in url for url in RULE_SEE_URLS)


class TestInternalConstants:
    """Tests for internal implementation constants."""

    def test_default_depth_within_ceiling(self) -> None:
        assert 1 <= DEFAULT_TYPE_DEPTH <= MAX_TYPE_DEPTH_CEILING
