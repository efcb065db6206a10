"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (no environment needed)
- Loading from environment variables
- Environment detection
- Validation (log_level, failure policy)
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment, HandlerFailurePolicy


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test Settings defaults."""

    def test_defaults(self):
        """Settings load without any environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.database_url == "sqlite+aiosqlite:///./checkout.db"
        assert settings.event_handler_failure_policy is HandlerFailurePolicy.PROPAGATE
        assert settings.register_default_event_handlers is True
        assert settings.events_strict_mode is True
        assert settings.is_development is True


class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_values_from_environment(self):
        env_values = {
            "ENVIRONMENT": "testing",
            "LOG_LEVEL": "debug",
            "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
            "EVENT_HANDLER_FAILURE_POLICY": "isolate",
            "REGISTER_DEFAULT_EVENT_HANDLERS": "false",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_testing is True
        assert settings.log_level == "DEBUG"
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.event_handler_failure_policy is HandlerFailurePolicy.ISOLATE
        assert settings.register_default_event_handlers is False

    @pytest.mark.parametrize(
        ("environment", "prop"),
        [
            ("development", "is_development"),
            ("testing", "is_testing"),
            ("ci", "is_ci"),
            ("production", "is_production"),
        ],
    )
    def test_environment_detection(self, environment, prop):
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            settings = Settings(_env_file=None)

        assert getattr(settings, prop) is True


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError, match="log_level must be one of"):
                Settings(_env_file=None)

    def test_invalid_failure_policy(self):
        with patch.dict(
            os.environ, {"EVENT_HANDLER_FAILURE_POLICY": "retry"}, clear=True
        ):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        with patch.dict(os.environ, {"APP_NAME": "First"}):
            get_settings.cache_clear()
            first = get_settings()
        with patch.dict(os.environ, {"APP_NAME": "Second"}):
            get_settings.cache_clear()
            second = get_settings()

        assert first.app_name == "First"
        assert second.app_name == "Second"
