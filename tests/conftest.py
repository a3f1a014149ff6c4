"""Shared test fixtures for pagelist."""

from __future__ import annotations

import pytest

from pagelist.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Reset cached web settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
