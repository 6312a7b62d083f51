"""Shared pytest configuration."""

import pytest

from tmx_nodes.common.config.settings import reset_settings

pytest_plugins = ["tests.fixtures.tmx"]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test reads settings from its own environment."""
    reset_settings()
    yield
    reset_settings()
