"""Shared test fixtures."""

import os

import pytest

from navassist.config import get_settings


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables that affect settings."""
    for var in [name for name in os.environ if name.upper().startswith("NAVASSIST_")]:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
