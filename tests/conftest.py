"""Pytest configuration and shared fixtures for configini tests."""

import tempfile
from pathlib import Path
from textwrap import dedent
from typing import Iterator

import pytest

from configini import IniConfig


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config() -> IniConfig:
    """Create an empty IniConfig with default settings."""
    return IniConfig()


@pytest.fixture
def sample_text() -> str:
    """Two sections, one with spaces inside its value."""
    return dedent("""\
        [owner]
        name = Ada Lovelace
        [db]
        port = 5432
        """)


def sections_of(doc: IniConfig) -> list[tuple[str | None, list[tuple[str, str]]]]:
    """Flatten a document into comparable (name, pairs) tuples.

    Args:
        doc: Document to flatten
    """
    return [(i.name, list(i.items())) for i in doc.sections()]
