"""Shared fixtures."""

import pytest

from stringtools.config import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with the built-in defaults."""
    reset_settings()
    yield
    reset_settings()
