"""Tests for import directives."""

from __future__ import annotations

from explicate.types.imports import ImportDirective


class TestImportDirective:
    def test_direct_import(self) -> None:
        directive = ImportDirective("java.util.List")

        assert directive.simple_name == "List"
        assert directive.covers("java.util.List")
        assert not directive.covers("java.util.ArrayList")
        assert directive.to_source() == "import java.util.List;"

    def test_wildcard_covers_package_members_only(self) -> None:
        """On-demand imports cover the package itself, not its subpackages."""
        directive = ImportDirective("java.util", is_wildcard=True)

        assert directive.simple_name is None
        assert directive.covers("java.util.List")
        assert not directive.covers("java.util.concurrent.Future")
        assert not directive.covers("java.utility.Thing")
        assert directive.to_source() == "import java.util.*;"

    def test_set_semantics(self) -> None:
        directives = {
            ImportDirective("java.util"),
            ImportDirective("java.util", is_wildcard=True),
            ImportDirective("java.util"),
        }

        assert len(directives) == 2
