"""Pydantic Settings for application configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings using Pydantic."""

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Fixed offset (local minus UTC) used instead of the host zone
    utc_offset_minutes: int | None = Field(
        default=None,
        ge=-24 * 60,
        le=24 * 60,
        description="UTC offset in minutes for start/end of day adjustment",
    )

    # Day length used by day arithmetic
    milliseconds_per_day: int = 86_400_000

    model_config = SettingsConfigDict(
        env_prefix="WORKDATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
