"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from health_metrics.domain.models import UnitPreference

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_IMPERIAL_ALIASES = {"imperial", "lb", "lbs", "us"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    default_unit_preference: str = "metric"
    metrics_debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_unit_preference(raw: str | None) -> UnitPreference:
    """Parse a unit preference from env, defaulting to metric."""
    if raw is None:
        return UnitPreference.METRIC
    cleaned = raw.strip().lower()
    if cleaned in _IMPERIAL_ALIASES:
        return UnitPreference.IMPERIAL
    return UnitPreference.METRIC
