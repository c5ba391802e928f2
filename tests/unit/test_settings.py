"""Tests for please_config/settings.py."""

import pytest
from pydantic import ValidationError

from please_config.settings import DEFAULT_MAX_CONFIG_BYTES, LoaderSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove loader settings from the environment."""
    for name in (
        "PLEASE_CONFIG_LOG_LEVEL",
        "PLEASE_CONFIG_LOG_JSON",
        "PLEASE_CONFIG_MAX_CONFIG_BYTES",
        "PLEASE_CONFIG_GITHUB_API_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoaderSettings:
    """Test loader settings."""

    def test_defaults(self):
        """Test default values."""
        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.max_config_bytes == DEFAULT_MAX_CONFIG_BYTES == 1024 * 1024
        assert settings.github_api_url == "https://api.github.com"

    def test_environment_overrides(self, monkeypatch):
        """Test PLEASE_CONFIG_* variables override defaults."""
        monkeypatch.setenv("PLEASE_CONFIG_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PLEASE_CONFIG_MAX_CONFIG_BYTES", "2048")
        monkeypatch.setenv("PLEASE_CONFIG_GITHUB_API_URL", "https://github.example.com/api/v3")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.max_config_bytes == 2048
        assert settings.github_api_url == "https://github.example.com/api/v3"

    def test_case_insensitive_names(self, monkeypatch):
        """Test environment variable names are case insensitive."""
        monkeypatch.setenv("please_config_log_level", "WARNING")

        assert get_settings().log_level == "WARNING"

    def test_max_config_bytes_must_be_positive(self):
        """Test a zero size bound is rejected."""
        with pytest.raises(ValidationError):
            LoaderSettings(max_config_bytes=0)
