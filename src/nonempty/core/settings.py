"""Environment-driven settings for the nonempty library.

The data operations take no configuration; what is configurable is the ambient
layer around them: how verbose logging is, whether it renders JSON, and whether
the process-wide random source used by ``shuffle`` is seeded.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked when loaded, not on first use
    - **Environment-driven:** Reads ``NONEMPTY_*`` env vars and ``.env`` files
    - **Sensible defaults:** Works out of the box, unseeded and at INFO

Examples:
    >>> from nonempty.core.settings import NonEmptySettings
    >>> NonEmptySettings(shuffle_seed=7).shuffle_seed
    7

Tags:
    settings, configuration, pydantic, environment, nonempty
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NonEmptySettings(BaseSettings):
    """Settings for the ambient layer of nonempty.

    Fields
    ──────
    log_level     : Structlog log level (DEBUG, INFO, ...)
    json_logs     : JSON rendering; None auto-detects (JSON when not a TTY)
    shuffle_seed  : Seed for the process-wide random source; None is unseeded
    service_name  : ``service.name`` stamped on every log line
    """

    model_config = SettingsConfigDict(
        env_prefix="NONEMPTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None
    service_name: str = "nonempty"

    # ── Randomness ───────────────────────────────────────────────
    shuffle_seed: int | None = Field(
        default=None,
        description="Seed for the default random source used by shuffle",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, NonEmptySettings] = {}


def get_settings(*, _force_reload: bool = False) -> NonEmptySettings:
    """Load, validate, and cache a :class:`NonEmptySettings` instance.

    Parameters
    ----------
    _force_reload:
        Bypass cache and reload from the environment.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = NonEmptySettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Forget the cached settings (tests and reconfiguration)."""
    _settings_cache.clear()


__all__ = [
    "LOG_LEVELS",
    "NonEmptySettings",
    "get_settings",
    "clear_settings_cache",
]
