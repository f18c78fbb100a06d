"""Configuration structures used by application use cases."""

from .metering_config import MeteringConfig
from .system_info import SystemInfo

__all__ = ["MeteringConfig", "SystemInfo"]
