"""Test configuration and fixtures.

Environment defaults are set before any ``inwords`` import so the cached
settings see them.
"""
import os

import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_JSON", "true")

from inwords.config.settings import get_settings  # noqa: E402


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test that manipulates the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True, scope="session")
def _configure_logging():
    from inwords.config.logging import configure_logging

    configure_logging()
