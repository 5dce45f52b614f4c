"""Pytest configuration for unit tests."""

import pytest

from schemacraft.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep every test on default settings regardless of the environment."""
    for name in ("STRICT_PRIMARY_KEY", "RENDER_INDENT", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(f"SCHEMACRAFT_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
