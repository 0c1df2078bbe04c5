"""Configuration management for the release retainer.

This module provides centralized configuration using Pydantic Settings,
supporting environment variables and .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetentionSettings(BaseSettings):
    """Retention calculation defaults."""

    default_max_results: int = Field(
        default=3,
        description="Releases kept per project/environment when the caller does not say",
    )
    data_dir: Path = Field(default=Path("data"), description="Directory of record files")
    record_format: str = Field(default="json")

    @field_validator("record_format")
    @classmethod
    def validate_record_format(cls, v: str) -> str:
        """Validate record file format."""
        valid_formats = ["json", "yaml"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid record format: {v}. Must be one of {valid_formats}")
        return v.lower()

    model_config = SettingsConfigDict(env_prefix="RETENTION_")


class ObservabilitySettings(BaseSettings):
    """Logging settings."""

    level: str = Field(default="INFO")
    format: str = Field(default="json")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log output format."""
        if v.lower() not in ("json", "console"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'console'")
        return v.lower()

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    app_name: str = Field(default="Release Retainer")
    app_version: str = Field(default="1.0.0")

    retention: RetentionSettings = Field(default_factory=RetentionSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


def reload_settings() -> Settings:
    """Reload settings from environment.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
