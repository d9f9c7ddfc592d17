"""Runtime configuration for fetching payloads."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


class ConverterSettings(BaseSettings):
    """Fetcher and logging settings read from ``JSON_TO_TS_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="JSON_TO_TS_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    follow_redirects: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


__all__ = ["ConverterSettings"]
