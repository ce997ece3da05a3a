"""
Tests for autoscaler_broker/core/config.py

Covers: defaults, environment overrides, validation, singleton caching.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from autoscaler_broker.core.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings.from_env()

        assert settings.catalog_path is None
        assert settings.apiserver_uri == "http://localhost:8080"
        assert settings.apiserver_timeout == 10.0
        assert settings.log_level == "INFO"

    def test_environment_overrides(self):
        env = {
            "BROKER_CATALOG_PATH": "/etc/broker/catalog.json",
            "BROKER_APISERVER_URI": "https://api.example.com/",
            "BROKER_APISERVER_TIMEOUT": "2.5",
            "BROKER_LOG_LEVEL": "debug",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = Settings.from_env()

        assert settings.catalog_path == Path("/etc/broker/catalog.json")
        assert settings.apiserver_uri == "https://api.example.com"
        assert settings.apiserver_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_rejects_non_http_uri(self):
        with pytest.raises(ValidationError):
            Settings(apiserver_uri="ftp://api.example.com")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            Settings(apiserver_timeout=0)


class TestGetSettings:
    """Tests for the settings singleton."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self):
        with patch.dict("os.environ", {"BROKER_APISERVER_URI": "http://first:1"}):
            first = get_settings()
        reset_settings()
        with patch.dict("os.environ", {"BROKER_APISERVER_URI": "http://second:2"}):
            second = get_settings()

        assert first.apiserver_uri == "http://first:1"
        assert second.apiserver_uri == "http://second:2"

    def test_non_numeric_timeout_env_is_validation_error(self):
        with patch.dict("os.environ", {"BROKER_APISERVER_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValidationError):
                Settings.from_env()
