"""Service status reported by the /health and /info endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Mapping


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"


@dataclass(slots=True)
class SystemHealth:
    """Named self-check outcomes and the status they add up to."""

    status: ServiceStatus
    checks: Dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_checks(
        cls, checks: Mapping[str, bool], critical: Iterable[str] = ()
    ) -> "SystemHealth":
        """
        Aggregate self checks.

        A failed ``critical`` check means periods cannot be resolved at all and
        the service is down; any other failure only degrades it.
        """
        results = dict(checks)
        if any(not results.get(name, False) for name in critical):
            status = ServiceStatus.DOWN
        elif all(results.values()):
            status = ServiceStatus.UP
        else:
            status = ServiceStatus.DEGRADED
        return cls(status=status, checks=results)


@dataclass(slots=True)
class ApplicationInfo:
    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    # Meter timezone, first measurement date and value precision.
    metering: Dict[str, Any] = field(default_factory=dict)
