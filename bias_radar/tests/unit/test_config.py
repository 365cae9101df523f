"""
Unit tests for bias_radar.app.core.config module.

Tests the Settings class and configuration loading from environment variables.
"""

import pytest
from pydantic import ValidationError
from unittest.mock import patch

from bias_radar.app.core.config import Settings, get_settings, validate_env_cli


ENV_VARS = [
    "APP_TITLE", "ANALYSIS_DELAY_SECONDS", "SUMMARY_MAX_CHARACTERS",
    "EMOTIONAL_LANGUAGE_LIMIT", "SESSION_COOKIE_NAME", "MAX_SESSIONS",
    "LOG_LEVEL", "LOG_JSON", "FRONTEND_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for the Settings class."""

    def test_settings_default_values(self, clean_env):
        """Test that Settings loads with default values when no env vars are set."""
        original_config = Settings.model_config.copy()
        test_config = original_config.copy()
        test_config['env_file'] = None

        with patch.object(Settings, 'model_config', test_config):
            settings = Settings()

            assert settings.app_title == "Bias Radar"
            assert settings.analysis_delay_seconds == 2.0
            assert settings.summary_max_characters == 120
            assert settings.emotional_language_limit == 4
            assert settings.session_cookie_name == "bias_radar_session"
            assert settings.max_sessions == 1000
            assert settings.log_level == "INFO"
            assert settings.log_json is False
            assert settings.frontend_origins == "http://localhost:3000,http://127.0.0.1:3000"

    def test_settings_with_environment_variables(self, clean_env):
        """Test that Settings loads custom values from environment variables."""
        clean_env.setenv("ANALYSIS_DELAY_SECONDS", "0.5")
        clean_env.setenv("SUMMARY_MAX_CHARACTERS", "200")
        clean_env.setenv("MAX_SESSIONS", "50")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_JSON", "true")

        settings = Settings()

        assert settings.analysis_delay_seconds == 0.5
        assert settings.summary_max_characters == 200
        assert settings.max_sessions == 50
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_analysis_delay_validation(self, clean_env):
        """Test bounds of analysis_delay_seconds."""
        clean_env.setenv("ANALYSIS_DELAY_SECONDS", "0")
        assert Settings().analysis_delay_seconds == 0.0

        clean_env.setenv("ANALYSIS_DELAY_SECONDS", "-1")
        with pytest.raises(ValidationError) as exc_info:
            Settings()
        assert "greater than or equal to 0" in str(exc_info.value)

        clean_env.setenv("ANALYSIS_DELAY_SECONDS", "31")
        with pytest.raises(ValidationError) as exc_info:
            Settings()
        assert "less than or equal to 30" in str(exc_info.value)

    def test_settings_case_insensitive_env_vars(self, clean_env):
        """Test that environment variables are case-insensitive."""
        clean_env.setenv("analysis_delay_seconds", "1.5")
        clean_env.setenv("LOG_level", "DEBUG")

        settings = Settings()

        assert settings.analysis_delay_seconds == 1.5
        assert settings.log_level == "DEBUG"

    def test_allowed_origins_with_custom_values(self, clean_env):
        """Test allowed_origins with custom frontend_origins."""
        clean_env.setenv("FRONTEND_ORIGINS", "http://localhost:8080, https://example.com ,http://test.com")

        settings = Settings()

        assert settings.allowed_origins == ["http://localhost:8080", "https://example.com", "http://test.com"]


class TestGetSettings:
    def test_get_settings_returns_settings(self, clean_env):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_reraises_validation_error(self, clean_env, capsys):
        clean_env.setenv("MAX_SESSIONS", "0")

        with pytest.raises(ValidationError):
            get_settings()

        assert "Configuration validation error" in capsys.readouterr().err


class TestValidateEnvCli:
    def test_valid_environment(self, clean_env, capsys):
        validate_env_cli()
        assert "Environment configuration is valid" in capsys.readouterr().out

    def test_invalid_environment_exits(self, clean_env, capsys):
        clean_env.setenv("SUMMARY_MAX_CHARACTERS", "5")

        with pytest.raises(SystemExit) as exc_info:
            validate_env_cli()

        assert exc_info.value.code == 1
        assert "summary_max_characters" in capsys.readouterr().out
