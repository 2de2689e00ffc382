"""
Configuration settings for value-guard.

All settings are loaded from environment variables with sensible defaults.
Use a .env file for local development.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches to JSON logs

    # === Date checks ===
    DEFAULT_TIMEZONE: Optional[str] = None  # IANA name for naive dates; None = process local zone

    # === Monitoring ===
    METRICS_ENABLED: bool = True


# Global settings instance
settings = Settings()
