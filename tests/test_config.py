from __future__ import annotations

from pathlib import Path

from users_api.core import config as core_config


def test_defaults(monkeypatch, tmp_path):
    for var in ("USERS_FILE", "PORT", "HOST", "APP_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.port == 3000
        assert settings.users_file == Path.cwd() / "users.json"
        assert settings.app_env == "dev"
        assert settings.log_level == "DEBUG"
    finally:
        core_config.get_settings.cache_clear()


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "http")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().port == 3000
    finally:
        core_config.get_settings.cache_clear()


def test_non_dev_environment_defaults_to_info_logging(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.app_env == "prod"
        assert settings.log_level == "INFO"
    finally:
        core_config.get_settings.cache_clear()


def test_explicit_log_level_wins_over_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().log_level == "WARNING"
    finally:
        core_config.get_settings.cache_clear()
