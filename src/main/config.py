"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import (
    DEFAULT_FIRST_MEASUREMENT_DATE,
    DEFAULT_TIMEZONE,
    DEFAULT_VALUE_PRECISION,
    EnumEnvironment,
    EnumLogLevel,
)
from src.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service identity and server settings."""

    title: str = Field(default="Meter Periods", description="Service title")
    description: str = Field(
        default="Calendar navigation and series alignment for meter readings",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class MeteringSettings(BaseSettings):
    """Where and since when the meter records."""

    first_measurement_date: date = Field(
        default=date.fromisoformat(DEFAULT_FIRST_MEASUREMENT_DATE),
        description="Day the first measurement was recorded",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone of the meter's local wall clock",
    )
    value_precision: int = Field(
        default=DEFAULT_VALUE_PRECISION,
        ge=0,
        le=9,
        description="Decimal places measurement values are rounded to",
    )

    model_config = SettingsConfigDict(
        env_prefix="METERING_", case_sensitive=False, extra="ignore"
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone '{value}'") from exc
        return value


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    metering: MeteringSettings = Field(default_factory=MeteringSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """Load settings from the environment; tests patch this to inject overrides."""
    return AppSettings()


settings = get_settings()
