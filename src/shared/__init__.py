"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides utilities, constants and enums used across
multiple layers of the application:
- Environment names and log levels
- Metering defaults (timezone, first measurement date)
- Structured logging setup

It must not depend on the Domain, Application or Main layers.
"""

from .consts import (
    DEFAULT_FIRST_MEASUREMENT_DATE,
    DEFAULT_TIMEZONE,
    DEFAULT_VALUE_PRECISION,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_FIRST_MEASUREMENT_DATE",
    "DEFAULT_TIMEZONE",
    "DEFAULT_VALUE_PRECISION",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
