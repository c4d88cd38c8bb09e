"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_tailwind.core import TailwindConverter, TokenParser


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def parser() -> TokenParser:
    """Parser with the built-in tables."""
    return TokenParser()


@pytest.fixture
def converter() -> TailwindConverter:
    """Converter with the built-in tables."""
    return TailwindConverter()


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in theme library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_tailwind" / "themes" / "library"
