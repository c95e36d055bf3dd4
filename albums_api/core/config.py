"""
Configuration helpers for the albums service.

Settings are read from environment variables once and cached, so routers and
services never fetch os.environ directly. The CLI overrides individual fields
with ``dataclasses.replace``.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_ALBUMS_PATH = "/tmp/albums.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    albums_path: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        albums_path=os.getenv("ALBUMS_PATH") or DEFAULT_ALBUMS_PATH,
        host=os.getenv("ALBUMS_HOST", "localhost"),
        port=_int(os.getenv("ALBUMS_PORT", "8080"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
