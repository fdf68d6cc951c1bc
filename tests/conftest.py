"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def color_tokens() -> dict:
    """Nested color tokens in Tailwind's shape."""
    return {
        "black": "#000000",
        "blue": {"light": "#93c5fd", "DEFAULT": "#3b82f6", "dark": "#1e3a8a"},
        "state-of-the-art": "#7c3aed",
    }


@pytest.fixture
def tokens_yaml() -> str:
    """A small design-token document."""
    return """\
theme:
  spacing:
    3: 0.75rem
    5: 1.25rem
  extend:
    screens:
      desktop: 1280px
    colors:
      black: "#000000"
      blue: "#1d4ed8"
      teal: "#0f766e"
      grey:
        light: "#e5e7eb"
    fontSize:
      base: 1rem
      20: 1.25rem
"""
