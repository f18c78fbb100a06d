"""Metering configuration handed to the period and series use cases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from src.domain.entities.period import PeriodDescription
from src.domain.services.period_codec import period_from_url
from src.shared.consts import DEFAULT_TIMEZONE, DEFAULT_VALUE_PRECISION


@dataclass(frozen=True)
class MeteringConfig:
    """Where the meter lives in time.

    ``first_measurement`` gates which periods can hold data; ``timezone``
    defines the local wall clock every bucket is expressed in.
    """

    first_measurement: date
    timezone: str = DEFAULT_TIMEZONE
    value_precision: int = DEFAULT_VALUE_PRECISION

    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def now(self) -> datetime:
        """Current local wall-clock time, without tzinfo."""
        return datetime.now(self.tzinfo()).replace(tzinfo=None)

    def resolve(self, path: str) -> PeriodDescription:
        """Decode a period path, wiring rolling periods to the local clock."""
        return period_from_url(path, clock=self.now)

    def has_measurements(self, period: PeriodDescription) -> bool:
        return period.has_measurements(self.first_measurement, self.now())
