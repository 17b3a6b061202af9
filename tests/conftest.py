"""Shared pytest fixtures for stylemap tests."""

from __future__ import annotations

import pytest

from stylemap.context import StyleContext


@pytest.fixture
def styles() -> StyleContext:
    """Return a fresh style context with default settings."""
    return StyleContext()
