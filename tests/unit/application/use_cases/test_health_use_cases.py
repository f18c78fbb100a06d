from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest

from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
    evaluate_health,
)
from src.domain.entities.health import ServiceStatus


def test_evaluate_health_up(metering_config) -> None:
    health = evaluate_health(metering_config)
    assert health.status is ServiceStatus.UP
    assert health.checks == {"timezone": True, "first_measurement": True}


def test_evaluate_health_degraded_when_first_measurement_in_future(
    metering_config,
) -> None:
    health = evaluate_health(replace(metering_config, first_measurement=date(2030, 1, 1)))
    assert health.status is ServiceStatus.DEGRADED
    assert health.checks["first_measurement"] is False


def test_evaluate_health_down_on_unknown_timezone(metering_config) -> None:
    health = evaluate_health(replace(metering_config, timezone="Mars/Olympus_Mons"))
    assert health.status is ServiceStatus.DOWN
    assert health.checks["timezone"] is False


@pytest.mark.asyncio
async def test_get_health_status_use_case_returns_dto(metering_config) -> None:
    dto = await GetHealthStatusUseCase(metering_config).execute()
    assert dto.status is ServiceStatus.UP


@pytest.mark.asyncio
async def test_get_application_info_use_case(metering_config, system_info) -> None:
    started_at = datetime.now(timezone.utc) - timedelta(seconds=30)

    dto = await GetApplicationInfoUseCase(metering_config, system_info).execute(
        started_at
    )

    assert dto.name == "Meter Periods"
    assert dto.uptime_seconds >= 30
    assert dto.metering == {
        "timezone": "Europe/Amsterdam",
        "first_measurement_date": "2014-03-03",
        "value_precision": 3,
    }


@pytest.mark.asyncio
async def test_get_application_info_without_start_time(
    metering_config, system_info
) -> None:
    dto = await GetApplicationInfoUseCase(metering_config, system_info).execute(None)
    assert dto.uptime_seconds == 0
