"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_notation.engraving import LayoutConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def layout() -> LayoutConfig:
    """The default 300 x 280 layout."""
    return LayoutConfig()


@pytest.fixture
def wide_layout() -> LayoutConfig:
    """A wider canvas, to check that content stays centred."""
    return LayoutConfig(width=480)
