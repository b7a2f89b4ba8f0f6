"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides the shared Java parser fixtures.
"""

import sys
from pathlib import Path

# Insert local src directory at the beginning of sys.path
# This ensures that the local explicate package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of explicate modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("explicate"):
        del sys.modules[module_name]

import pytest  # noqa: E402

from explicate.index.parser import JavaCompilationUnit, JavaParser  # noqa: E402


@pytest.fixture(scope="session")
def java_parser() -> JavaParser:
    """One tree-sitter Java parser shared by the whole session."""
    return JavaParser()


@pytest.fixture
def parse_java(java_parser: JavaParser):
    """Parse a Java snippet into a compilation unit."""

    def _parse(source: str) -> JavaCompilationUnit:
        return java_parser.parse(source)

    return _parse
