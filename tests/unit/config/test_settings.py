"""Tests for runtime settings.

Tests the Settings class and environment variable handling.
"""

import os
from unittest.mock import patch

import pytest

from tmx_nodes.common.config.settings import (
    Environment,
    LogLevel,
    Settings,
    get_settings,
    reset_settings,
)
from tmx_nodes.common.constants import ServiceConstants


class TestEnvironment:
    """Tests for Environment enum."""

    def test_environment_values(self):
        """Test Environment enum values."""
        assert Environment.DEVELOPMENT.value == "development"
        assert Environment.STAGING.value == "staging"
        assert Environment.PRODUCTION.value == "production"

    def test_log_level_from_string(self):
        assert LogLevel("WARNING") == LogLevel.WARNING


class TestSettings:
    """Tests for Settings class."""

    def test_default_settings(self):
        """Test defaults when no TMX_ variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == LogLevel.INFO
        assert settings.request_timeout == ServiceConstants.REQUEST_TIMEOUT_SECONDS
        assert settings.update_workers == ServiceConstants.UPDATE_WORKERS
        assert settings.session_query_uri == ServiceConstants.SESSION_QUERY_URI
        assert settings.update_uri == ServiceConstants.UPDATE_URI
        assert settings.profiler_uri == ServiceConstants.PROFILER_URI
        assert settings.is_production is False

    def test_environment_overrides(self):
        """Test every setting can be overridden from the environment."""
        env = {
            "TMX_ENVIRONMENT": "production",
            "TMX_LOG_LEVEL": "DEBUG",
            "TMX_REQUEST_TIMEOUT": "2.5",
            "TMX_UPDATE_WORKERS": "4",
            "TMX_SESSION_QUERY_URI": "https://q.example.test",
            "TMX_UPDATE_URI": "https://u.example.test",
            "TMX_PROFILER_URI": "https://p.example.test",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.is_production is True
        assert settings.log_level == LogLevel.DEBUG
        assert settings.request_timeout == 2.5
        assert settings.update_workers == 4
        assert settings.session_query_uri == "https://q.example.test"
        assert settings.update_uri == "https://u.example.test"
        assert settings.profiler_uri == "https://p.example.test"

    @pytest.mark.parametrize("name, value", [
        ("TMX_REQUEST_TIMEOUT", "0"),
        ("TMX_REQUEST_TIMEOUT", "-1"),
        ("TMX_UPDATE_WORKERS", "0"),
    ])
    def test_invalid_values_rejected(self, name, value):
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(ValueError):
                Settings()

    def test_unknown_environment_rejected(self):
        with patch.dict(os.environ, {"TMX_ENVIRONMENT": "qa"}):
            with pytest.raises(ValueError):
                Settings()


class TestSettingsSingleton:

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self):
        """Test reset_settings picks up changed variables."""
        with patch.dict(os.environ, {"TMX_UPDATE_WORKERS": "3"}):
            reset_settings()
            assert get_settings().update_workers == 3
