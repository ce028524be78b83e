"""Pytest fixtures for mdlint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdlint.linting import MarkdownLinter


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def docs_dir(temp_dir: Path) -> Path:
    """Create a docs directory with one clean and one broken document."""
    docs = temp_dir / "docs"
    docs.mkdir()
    (docs / "clean.md").write_text(CLEAN_DOCUMENT)
    (docs / "broken.md").write_text(MISPLACED_DEFINITION_DOCUMENT)
    return docs


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project directory with a .mdlint.yaml."""
    (temp_dir / ".mdlint.yaml").write_text(
        "heading-sentence-case: false\n"
        "fenced-code-fence-length:\n"
        "  fence_length: 3\n"
    )
    return temp_dir


@pytest.fixture
def linter() -> MarkdownLinter:
    """Linter with the preset configuration."""
    return MarkdownLinter()


@pytest.fixture
def placement_only() -> MarkdownLinter:
    """Linter running only reference-link-section-placement."""
    return MarkdownLinter({"default": False, "reference-link-section-placement": True})


CLEAN_DOCUMENT = """\
Document title
==============

Introduction with a [link][intro].

[intro]: https://example.com/intro


First section
-------------

 -  First item
 -  Second item
     -  Nested item

~~~~ python
print("hello")
~~~~
"""

MISPLACED_DEFINITION_DOCUMENT = """\
Section
-------

Text with a [link][example].

[example]: https://example.com/

More content after the reference.
"""


@pytest.fixture
def clean_document() -> str:
    """Document that passes every rule of the preset."""
    return CLEAN_DOCUMENT


@pytest.fixture
def broken_document() -> str:
    """Document with one misplaced reference definition (line 6)."""
    return MISPLACED_DEFINITION_DOCUMENT
