from __future__ import annotations

from datetime import datetime, timezone

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.domain.entities.health import ApplicationInfo, ServiceStatus, SystemHealth


def test_system_health_dto_from_domain() -> None:
    health = SystemHealth(
        status=ServiceStatus.DEGRADED,
        checks={"timezone": True, "first_measurement": False},
    )
    dto = SystemHealthDTO.from_domain(health)
    assert dto.status is ServiceStatus.DEGRADED
    assert dto.checks["first_measurement"] is False


def test_application_info_dto_from_domain() -> None:
    now = datetime.now(timezone.utc)
    info = ApplicationInfo(
        name="Meter Periods",
        description="desc",
        version="1.0.0",
        environment="testing",
        git_commit="abc",
        build_time="now",
        started_at=now,
        uptime_seconds=12.5,
        status=ServiceStatus.UP,
        metering={"timezone": "Europe/Amsterdam"},
    )
    dto = ApplicationInfoDTO.from_domain(info)
    assert dto.name == "Meter Periods"
    assert dto.started_at == now
    assert dto.metering == {"timezone": "Europe/Amsterdam"}
