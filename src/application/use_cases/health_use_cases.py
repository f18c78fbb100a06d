"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Dict, Optional
from zoneinfo import ZoneInfoNotFoundError

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.models import MeteringConfig, SystemInfo
from src.domain.entities.health import ApplicationInfo, SystemHealth
from src.shared import get_logger

logger = get_logger(__name__)


def evaluate_health(metering: MeteringConfig) -> SystemHealth:
    """Run the self checks: the meter timezone loads and the clock is sane."""
    checks: Dict[str, bool] = {}

    try:
        metering.tzinfo()
        checks["timezone"] = True
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.error("health.timezone.failed", timezone=metering.timezone, error=str(exc))
        checks["timezone"] = False

    checks["first_measurement"] = checks["timezone"] and (
        metering.first_measurement <= metering.now().date()
    )
    return SystemHealth.from_checks(checks, critical=("timezone",))


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(self, metering: MeteringConfig) -> None:
        self._metering = metering

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(evaluate_health(self._metering))


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(self, metering: MeteringConfig, system_info: SystemInfo) -> None:
        self._metering = metering
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = evaluate_health(self._metering)

        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=uptime_seconds,
            status=system_health.status,
            metering={
                "timezone": self._metering.timezone,
                "first_measurement_date": self._metering.first_measurement.isoformat(),
                "value_precision": self._metering.value_precision,
            },
        )

        return ApplicationInfoDTO.from_domain(info)
