"""
Shared pytest fixtures for the grouporder test suite.

This module provides:
- A factory for ImportRecords with a chosen specifier kind and span
- Sample groups of module names
- Temporary project directories with a pyproject.toml

Fixture Naming Convention:
- make_* : Factory fixtures
- sample_* : Fixtures that provide sample content
- tmp_* : Fixtures that create temporary directories/files
"""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from grouporder import ImportRecord, SpecifierKind, Span


RecordFactory = Callable[..., ImportRecord]


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def make_record() -> RecordFactory:
    """
    Factory for ImportRecords.

    Usage:
        make_record("react")                                 # default import
        make_record("react", SpecifierKind.NAMESPACE)        # namespace import
        make_record("react", span=None)                      # no position data
    """

    def _make(
        source: str,
        kind: SpecifierKind | None = SpecifierKind.DEFAULT,
        span: Span | None = Span(0, 20),
    ) -> ImportRecord:
        specifiers = (kind,) if kind is not None else ()
        return ImportRecord(source_module=source, specifiers=specifiers, span=span)

    return _make


@pytest.fixture
def sample_modules() -> list[str]:
    """A group of third-party module names in unsorted order."""
    return ["zod", "axios", "react"]


# =============================================================================
# Project Fixtures
# =============================================================================

@pytest.fixture
def tmp_project(tmp_path: Path) -> Callable[[str], Path]:
    """
    Create a project directory containing the given pyproject.toml text.

    Returns a function taking the TOML body and returning the project root.
    """

    def _create(toml: str) -> Path:
        (tmp_path / "pyproject.toml").write_text(textwrap.dedent(toml))
        return tmp_path

    return _create
