"""Runtime settings sourced from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8080",
)


@dataclass(frozen=True)
class Settings:
    log_level_name: str
    cors_origins: Tuple[str, ...]
    cors_allow_credentials: bool
    service_version: str

    @property
    def log_level(self) -> int:
        return getattr(logging, self.log_level_name, logging.INFO)


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _parse_origins(value: str | None) -> Tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings state sourced from the environment."""
    return Settings(
        log_level_name=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        cors_allow_credentials=_normalize_bool(os.getenv("CORS_ALLOW_CREDENTIALS"), default=True),
        service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
