from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.application.models import MeteringConfig, SystemInfo  # noqa: E402
from src.domain.entities.measurement import ValueWithTimestamp  # noqa: E402
from src.domain.entities.period import (  # noqa: E402
    DayDescription,
    MonthDescription,
    YearDescription,
)

FROZEN_NOW = datetime(2022, 3, 15, 10, 30, 12)


@dataclass(frozen=True)
class FrozenMeteringConfig(MeteringConfig):
    """Metering configuration whose clock never moves."""

    frozen_now: datetime = FROZEN_NOW

    def now(self) -> datetime:
        return self.frozen_now


class FakeClock:
    """Settable clock for rolling periods."""

    def __init__(self, now: datetime = FROZEN_NOW) -> None:
        self.current = now
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.current


@pytest.fixture()
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def metering_config() -> FrozenMeteringConfig:
    return FrozenMeteringConfig(
        first_measurement=date(2014, 3, 3),
        timezone="Europe/Amsterdam",
        value_precision=3,
    )


@pytest.fixture()
def system_info() -> SystemInfo:
    return SystemInfo(
        title="Meter Periods",
        description="desc",
        version="1.0",
        environment="testing",
        git_commit="abc",
        build_time="now",
    )


@pytest.fixture()
def march_third() -> DayDescription:
    return DayDescription(2022, 2, 3)


@pytest.fixture()
def february() -> MonthDescription:
    return MonthDescription(2022, 1)


@pytest.fixture()
def year_2022() -> YearDescription:
    return YearDescription(2022)


@pytest.fixture()
def sparse_day_entries() -> List[ValueWithTimestamp]:
    return [
        ValueWithTimestamp(datetime(2022, 3, 2, 2), 12),
        ValueWithTimestamp(datetime(2022, 3, 2, 5), 15),
        ValueWithTimestamp(datetime(2022, 3, 2, 10), 10),
    ]
