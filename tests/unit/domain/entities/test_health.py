from __future__ import annotations

import pytest

from src.domain.entities.health import ServiceStatus, SystemHealth


def test_system_health_defaults_to_no_checks() -> None:
    assert SystemHealth(status=ServiceStatus.UP).checks == {}


@pytest.mark.parametrize(
    "checks, expected",
    [
        ({"timezone": True, "first_measurement": True}, ServiceStatus.UP),
        ({"timezone": True, "first_measurement": False}, ServiceStatus.DEGRADED),
        ({"timezone": False, "first_measurement": True}, ServiceStatus.DOWN),
        ({}, ServiceStatus.DOWN),
    ],
)
def test_from_checks_aggregates_status(checks, expected) -> None:
    health = SystemHealth.from_checks(checks, critical=("timezone",))

    assert health.status is expected
    assert health.checks == checks


def test_from_checks_without_critical_checks_only_degrades() -> None:
    health = SystemHealth.from_checks({"timezone": False})

    assert health.status is ServiceStatus.DEGRADED
