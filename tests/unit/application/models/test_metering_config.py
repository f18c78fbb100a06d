from __future__ import annotations

from datetime import date, datetime

from src.application.models import MeteringConfig
from src.domain.entities.period import DayDescription, LastHourDescription


def test_now_is_naive_local_time() -> None:
    config = MeteringConfig(first_measurement=date(2014, 3, 3))
    now = config.now()
    assert now.tzinfo is None
    assert abs((now - datetime.now(config.tzinfo()).replace(tzinfo=None)).total_seconds()) < 5


def test_resolve_wires_rolling_period_to_clock(metering_config) -> None:
    period = metering_config.resolve("/recent")
    assert isinstance(period, LastHourDescription)
    assert period.end_of_period() == metering_config.now()


def test_has_measurements_uses_first_measurement(metering_config) -> None:
    assert metering_config.has_measurements(DayDescription(2014, 2, 3))
    assert not metering_config.has_measurements(DayDescription(2014, 2, 2))
    assert not metering_config.has_measurements(DayDescription(2022, 2, 16))
