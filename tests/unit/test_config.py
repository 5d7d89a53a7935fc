"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from fixedwidth.core.config import AppSettings, CacheConfig, LoggingConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.cache.enabled is True
    assert settings.logging.level == "WARNING"
    assert settings.logging.json_output is False


def test_cache_config_env_override(monkeypatch):
    monkeypatch.setenv("FIXEDWIDTH_CACHE_ENABLED", "false")
    assert CacheConfig().enabled is False


def test_logging_config_env_override(monkeypatch):
    monkeypatch.setenv("FIXEDWIDTH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FIXEDWIDTH_LOG_JSON_OUTPUT", "true")

    config = LoggingConfig()

    assert config.level == "DEBUG"
    assert config.json_output is True


def test_root_settings_read_env_at_construction(monkeypatch):
    monkeypatch.setenv("FIXEDWIDTH_LOG_LEVEL", "INFO")
    assert AppSettings().logging.level == "INFO"
