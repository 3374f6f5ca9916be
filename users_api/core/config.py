"""
Configuration helpers for the users API.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    users_file: Path
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    users_file = Path(os.getenv("USERS_FILE") or "users.json").expanduser()
    if not users_file.is_absolute():
        users_file = Path.cwd() / users_file

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    default_log_level = "DEBUG" if app_env == "dev" else "INFO"

    return Settings(
        app_env=app_env,
        users_file=users_file,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or default_log_level).upper(),
    )
