"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (service starts with no environment)
- Settings loading from environment variables
- Environment detection
- Validation (log level, URLs)
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


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
        """Test every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.openapi_url == "/openapi.json"
        assert settings.enum_docs_enabled is True


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": " debug "}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log level is rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError, match="log_level must be one of"):
                Settings()

    def test_api_base_url_trailing_slash_removed(self):
        """Test trailing slashes are stripped from api_base_url."""
        env = {"API_BASE_URL": "https://api.example.com/"}
        with patch.dict(os.environ, env, clear=True):
            assert Settings().api_base_url == "https://api.example.com"

    def test_enum_docs_can_be_disabled(self):
        """Test boolean parsing from environment."""
        with patch.dict(os.environ, {"ENUM_DOCS_ENABLED": "false"}, clear=True):
            assert Settings().enum_docs_enabled is False

    def test_invalid_environment(self):
        """Test unknown environment is rejected."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestEnvironmentDetection:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("value", "dev", "testing", "prod"),
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, False, False),
            ("production", False, False, True),
        ],
    )
    def test_properties(self, value, dev, testing, prod):
        """Test is_development / is_testing / is_production."""
        with patch.dict(os.environ, {"ENVIRONMENT": value}, clear=True):
            settings = Settings()

        assert settings.is_development is dev
        assert settings.is_testing is testing
        assert settings.is_production is prod


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestServerSettings:
    """Test server bind settings."""

    def test_port_from_environment(self):
        """Test PORT is parsed as an int."""
        with patch.dict(os.environ, {"PORT": "9000", "HOST": "127.0.0.1"}, clear=True):
            settings = Settings()

        assert settings.port == 9000
        assert settings.host == "127.0.0.1"

    def test_port_out_of_range(self):
        """Test ports outside 1-65535 are rejected."""
        with patch.dict(os.environ, {"PORT": "70000"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()
