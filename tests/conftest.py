"""Shared pytest configuration."""

import pytest

from logfacade_tools.config import reset_settings

pytest_plugins = ["logfacade_tools.testing.pytest_fixtures"]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Every test starts without cached settings."""
    reset_settings()
    yield
    reset_settings()
