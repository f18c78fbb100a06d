"""
Domain Entities - Period Descriptions

A period description identifies the calendar window currently being viewed
and knows how to navigate to its neighbours, how to address itself on the
wire and how its buckets are laid out.

The variants form a closed set (see ``PeriodDescription``). Callers that need
to tell variants apart use the ``kind`` discriminant instead of probing the
class. All instants are naive local wall-clock datetimes; a day always holds
24 hourly buckets, whatever the civil DST rules say.

Months are zero-based inside every variant (January is 0) and one-based on
the wire and in ``datetime`` values.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from enum import Enum
from typing import Callable, ClassVar, List, NoReturn, Optional, Union

from src.domain.entities.errors import InvalidPeriodError, UnsupportedNavigationError

DAYS_OF_WEEK = ["Ma", "Di", "Wo", "Do", "Vr", "Za", "Zo"]

FULL_MONTH_NAMES = [
    "januari",
    "februari",
    "maart",
    "april",
    "mei",
    "juni",
    "juli",
    "augustus",
    "september",
    "oktober",
    "november",
    "december",
]

ABBREV_MONTH_NAMES = [
    "jan",
    "feb",
    "mrt",
    "apr",
    "mei",
    "jun",
    "jul",
    "aug",
    "sep",
    "okt",
    "nov",
    "dec",
]

LAST_HOUR_TITLE = "Afgelopen uur"

_LAST_MICROSECOND = timedelta(microseconds=1)


class PeriodKind(str, Enum):
    """Discriminant of the period description variants."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    LAST_HOUR = "last_hour"


class PeriodSize(str, Enum):
    """Calendar size of a period."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"


class GraphTickPositions(str, Enum):
    """Whether chart ticks sit on bucket values or between them."""

    ON_VALUE = "on_value"
    BETWEEN_VALUES = "between_values"


class TimeUnit(str, Enum):
    """Unit a bucket grid steps by."""

    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


_FIXED_STEPS = {
    TimeUnit.DAY: timedelta(days=1),
    TimeUnit.HOUR: timedelta(hours=1),
    TimeUnit.MINUTE: timedelta(minutes=1),
    TimeUnit.SECOND: timedelta(seconds=1),
}


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Shift a (year, zero-based month) pair by ``delta`` months."""
    years, month = divmod(month + delta, 12)
    return year + years, month


def days_in_month(year: int, month: int) -> int:
    """Number of days in a zero-based month."""
    return calendar.monthrange(year, month + 1)[1]


@dataclass(frozen=True, slots=True)
class DomainStep:
    """Stepping rule for a bucket grid: one bucket every ``every`` units."""

    unit: TimeUnit
    every: int = 1

    def advance(self, instant: datetime) -> datetime:
        if self.unit is TimeUnit.MONTH:
            year, month = shift_month(instant.year, instant.month - 1, self.every)
            return instant.replace(year=year, month=month + 1)
        return instant + _FIXED_STEPS[self.unit] * self.every

    def between(self, start: datetime, end: datetime) -> List[datetime]:
        """All instants from ``start`` up to and including ``end``."""
        instants: List[datetime] = []
        current = start
        while current <= end:
            instants.append(current)
            try:
                current = self.advance(current)
            except (OverflowError, ValueError):
                # No representable instant after the last bucket of year 9999.
                break
        return instants


def _shifted(instant: datetime, delta: timedelta) -> datetime:
    """``instant + delta``, rejecting results outside the supported years."""
    try:
        return instant + delta
    except OverflowError as exc:
        raise InvalidPeriodError(
            f"{instant.isoformat()} has no neighbour {delta} away",
            details={"instant": instant.isoformat(), "min": MINYEAR, "max": MAXYEAR},
        ) from exc


def _require_int(name: str, value: object, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPeriodError(
            f"{name} must be an integer", details={name: value}
        )
    if not low <= value <= high:
        raise InvalidPeriodError(
            f"{name} {value} is outside {low}..{high}",
            details={name: value, "min": low, "max": high},
        )


def _local_now() -> datetime:
    return datetime.now()


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


class _PeriodBase:
    """Behaviour shared by every period description variant."""

    __slots__ = ()

    kind: ClassVar[PeriodKind]
    period_size: ClassVar[PeriodSize]
    graph_tick_positions: ClassVar[GraphTickPositions]

    def start_of_period(self) -> datetime:
        raise NotImplementedError

    def end_of_period(self) -> datetime:
        raise NotImplementedError

    def get_expected_domain_values(self) -> DomainStep:
        raise NotImplementedError

    def to_title(self) -> str:
        raise NotImplementedError

    def to_short_title(self) -> str:
        return self.to_title()

    def contains(self, instant: datetime) -> bool:
        return self.start_of_period() <= instant <= self.end_of_period()

    def bucket_starts(self) -> List[datetime]:
        """Start instants of every bucket in the period, ascending."""
        return self.get_expected_domain_values().between(
            self.start_of_period(), self.end_of_period()
        )

    def bucket_count(self) -> int:
        return len(self.bucket_starts())

    def chart_tick_instants(self) -> List[datetime]:
        return self.get_chart_ticks().between(
            self.start_of_period(), self.end_of_period()
        )

    def get_chart_ticks(self) -> DomainStep:
        return self.get_expected_domain_values()

    def is_before_first_measurement(
        self, first_measurement: Union[date, datetime]
    ) -> bool:
        return self.end_of_period() < _as_datetime(first_measurement)

    def is_in_future(self, now: Optional[datetime] = None) -> bool:
        return self.start_of_period() > (now or _local_now())

    def has_measurements(
        self,
        first_measurement: Union[date, datetime],
        now: Optional[datetime] = None,
    ) -> bool:
        """Whether any measurement can exist inside this period."""
        return not self.is_before_first_measurement(
            first_measurement
        ) and not self.is_in_future(now)

    def _index_to_instant(
        self, index_or_instant: Union[int, datetime], step: DomainStep
    ) -> datetime:
        if isinstance(index_or_instant, datetime):
            instant = index_or_instant
        else:
            _require_int("index", index_or_instant, 0, self.bucket_count() - 1)
            instant = self.start_of_period()
            for _ in range(index_or_instant):
                instant = step.advance(instant)
        if not self.contains(instant):
            raise InvalidPeriodError(
                f"{instant.isoformat()} is outside {self.to_url()}",
                details={"instant": instant.isoformat(), "period": self.to_url()},
            )
        return instant

    def to_url(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class YearDescription(_PeriodBase):
    """A calendar year, bucketed by month."""

    year: int

    kind: ClassVar[PeriodKind] = PeriodKind.YEAR
    period_size: ClassVar[PeriodSize] = PeriodSize.YEAR
    graph_tick_positions: ClassVar[GraphTickPositions] = GraphTickPositions.ON_VALUE

    def __post_init__(self) -> None:
        _require_int("year", self.year, MINYEAR, MAXYEAR)

    def previous(self) -> "YearDescription":
        return YearDescription(self.year - 1)

    def next(self) -> "YearDescription":
        return YearDescription(self.year + 1)

    def up(self) -> None:
        return None

    def at_index(self, index_or_instant: Union[int, datetime]) -> "MonthDescription":
        if isinstance(index_or_instant, datetime):
            instant = self._index_to_instant(index_or_instant, DomainStep(TimeUnit.MONTH))
            return MonthDescription(instant.year, instant.month - 1)
        return MonthDescription(self.year, index_or_instant)

    def to_url(self) -> str:
        return f"/year/{self.year}"

    def to_title(self) -> str:
        return str(self.year)

    def start_of_period(self) -> datetime:
        return datetime(self.year, 1, 1)

    def end_of_period(self) -> datetime:
        return datetime(self.year, 12, 31, 23, 59, 59, 999999)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.MONTH)

    def normalize(self, instant: datetime) -> datetime:
        return datetime(instant.year, instant.month, 1)

    def format_tick(self, index: int) -> str:
        return ABBREV_MONTH_NAMES[index]

    def time_format_string(self) -> str:
        return "%b"


@dataclass(frozen=True, slots=True)
class MonthDescription(_PeriodBase):
    """A calendar month, bucketed by day."""

    year: int
    month: int

    kind: ClassVar[PeriodKind] = PeriodKind.MONTH
    period_size: ClassVar[PeriodSize] = PeriodSize.MONTH
    graph_tick_positions: ClassVar[GraphTickPositions] = GraphTickPositions.ON_VALUE

    def __post_init__(self) -> None:
        _require_int("year", self.year, MINYEAR, MAXYEAR)
        _require_int("month", self.month, 0, 11)

    @classmethod
    def this_month(cls, now: Optional[datetime] = None) -> "MonthDescription":
        now = now or _local_now()
        return cls(now.year, now.month - 1)

    def previous(self) -> "MonthDescription":
        return MonthDescription(*shift_month(self.year, self.month, -1))

    def next(self) -> "MonthDescription":
        return MonthDescription(*shift_month(self.year, self.month, 1))

    def up(self) -> YearDescription:
        return YearDescription(self.year)

    def at_index(self, index_or_instant: Union[int, datetime]) -> "DayDescription":
        instant = self._index_to_instant(index_or_instant, DomainStep(TimeUnit.DAY))
        return DayDescription(instant.year, instant.month - 1, instant.day)

    def to_url(self) -> str:
        return f"/month/{self.year}/{self.month + 1}"

    def to_title(self) -> str:
        return f"{FULL_MONTH_NAMES[self.month]} {self.year}"

    def start_of_period(self) -> datetime:
        return datetime(self.year, self.month + 1, 1)

    def end_of_period(self) -> datetime:
        last_day = days_in_month(self.year, self.month)
        return datetime(self.year, self.month + 1, last_day, 23, 59, 59, 999999)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.DAY)

    def get_chart_ticks(self) -> DomainStep:
        return DomainStep(TimeUnit.DAY, every=2)

    def normalize(self, instant: datetime) -> datetime:
        return datetime(instant.year, instant.month, instant.day)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def format_tick(self, index: int) -> str:
        return str(index + 1)

    def time_format_string(self) -> str:
        return "%d"


@dataclass(frozen=True, slots=True)
class DayDescription(_PeriodBase):
    """A calendar day, bucketed by hour."""

    year: int
    month: int
    day: int

    kind: ClassVar[PeriodKind] = PeriodKind.DAY
    period_size: ClassVar[PeriodSize] = PeriodSize.DAY
    graph_tick_positions: ClassVar[GraphTickPositions] = (
        GraphTickPositions.BETWEEN_VALUES
    )

    def __post_init__(self) -> None:
        _require_int("year", self.year, MINYEAR, MAXYEAR)
        _require_int("month", self.month, 0, 11)
        _require_int("day", self.day, 1, days_in_month(self.year, self.month))

    @classmethod
    def today(cls, now: Optional[datetime] = None) -> "DayDescription":
        return cls.from_date(now or _local_now())

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "DayDescription":
        return cls(value.year, value.month - 1, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def previous(self) -> "DayDescription":
        return DayDescription.from_date(
            _shifted(self.start_of_period(), -timedelta(days=1))
        )

    def next(self) -> "DayDescription":
        return DayDescription.from_date(
            _shifted(self.start_of_period(), timedelta(days=1))
        )

    def up(self) -> MonthDescription:
        return MonthDescription(self.year, self.month)

    def at_index(self, index_or_instant: Union[int, datetime]) -> "HourDescription":
        instant = self._index_to_instant(index_or_instant, DomainStep(TimeUnit.HOUR))
        return HourDescription(self.year, self.month, self.day, instant.hour)

    def to_url(self) -> str:
        return f"/day/{self.year}/{self.month + 1}/{self.day}"

    def to_title(self) -> str:
        weekday = DAYS_OF_WEEK[self.to_date().weekday()]
        return f"{weekday} {self.to_short_title()}"

    def to_short_title(self) -> str:
        return f"{self.day} {FULL_MONTH_NAMES[self.month]} {self.year}"

    def start_of_period(self) -> datetime:
        return datetime(self.year, self.month + 1, self.day)

    def end_of_period(self) -> datetime:
        return datetime(self.year, self.month + 1, self.day, 23, 59, 59, 999999)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.HOUR)

    def get_chart_ticks(self) -> DomainStep:
        return DomainStep(TimeUnit.HOUR, every=2)

    def normalize(self, instant: datetime) -> datetime:
        return instant.replace(minute=0, second=0, microsecond=0)

    def format_tick(self, index: int) -> str:
        return str(index)

    def time_format_string(self) -> str:
        return "%H:%M"


@dataclass(frozen=True, slots=True)
class HourDescription(_PeriodBase):
    """A single clock hour, bucketed by minute."""

    year: int
    month: int
    day: int
    hour: int

    kind: ClassVar[PeriodKind] = PeriodKind.HOUR
    period_size: ClassVar[PeriodSize] = PeriodSize.HOUR
    graph_tick_positions: ClassVar[GraphTickPositions] = (
        GraphTickPositions.BETWEEN_VALUES
    )

    def __post_init__(self) -> None:
        _require_int("year", self.year, MINYEAR, MAXYEAR)
        _require_int("month", self.month, 0, 11)
        _require_int("day", self.day, 1, days_in_month(self.year, self.month))
        _require_int("hour", self.hour, 0, 23)

    @classmethod
    def from_datetime(cls, value: datetime) -> "HourDescription":
        return cls(value.year, value.month - 1, value.day, value.hour)

    def previous(self) -> "HourDescription":
        return HourDescription.from_datetime(
            _shifted(self.start_of_period(), -timedelta(hours=1))
        )

    def next(self) -> "HourDescription":
        return HourDescription.from_datetime(
            _shifted(self.start_of_period(), timedelta(hours=1))
        )

    def up(self) -> DayDescription:
        return DayDescription(self.year, self.month, self.day)

    def at_index(self, index_or_instant: Union[int, datetime]) -> "MinuteDescription":
        instant = self._index_to_instant(index_or_instant, DomainStep(TimeUnit.MINUTE))
        return MinuteDescription.from_datetime(instant)

    def to_url(self) -> str:
        return f"/hour/{self.year}/{self.month + 1}/{self.day}/{self.hour}"

    def to_title(self) -> str:
        return f"{self.up().to_title()} {self.hour:02d}:00"

    def to_short_title(self) -> str:
        return f"{self.up().to_short_title()} {self.hour:02d}:00"

    def start_of_period(self) -> datetime:
        return datetime(self.year, self.month + 1, self.day, self.hour)

    def end_of_period(self) -> datetime:
        return self.start_of_period() + (timedelta(hours=1) - _LAST_MICROSECOND)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.MINUTE)

    def get_chart_ticks(self) -> DomainStep:
        return DomainStep(TimeUnit.MINUTE, every=10)

    def normalize(self, instant: datetime) -> datetime:
        return instant.replace(second=0, microsecond=0)

    def format_tick(self, index: int) -> str:
        return f"{self.hour:02d}:{index:02d}"

    def time_format_string(self) -> str:
        return "%H:%M"


@dataclass(frozen=True, slots=True)
class MinuteDescription(_PeriodBase):
    """A single clock minute, bucketed by second. Bottom of the hierarchy."""

    year: int
    month: int
    day: int
    hour: int
    minute: int

    kind: ClassVar[PeriodKind] = PeriodKind.MINUTE
    period_size: ClassVar[PeriodSize] = PeriodSize.MINUTE
    graph_tick_positions: ClassVar[GraphTickPositions] = GraphTickPositions.ON_VALUE

    def __post_init__(self) -> None:
        _require_int("year", self.year, MINYEAR, MAXYEAR)
        _require_int("month", self.month, 0, 11)
        _require_int("day", self.day, 1, days_in_month(self.year, self.month))
        _require_int("hour", self.hour, 0, 23)
        _require_int("minute", self.minute, 0, 59)

    @classmethod
    def from_datetime(cls, value: datetime) -> "MinuteDescription":
        return cls(value.year, value.month - 1, value.day, value.hour, value.minute)

    def previous(self) -> "MinuteDescription":
        return MinuteDescription.from_datetime(
            _shifted(self.start_of_period(), -timedelta(minutes=1))
        )

    def next(self) -> "MinuteDescription":
        return MinuteDescription.from_datetime(
            _shifted(self.start_of_period(), timedelta(minutes=1))
        )

    def up(self) -> HourDescription:
        return HourDescription(self.year, self.month, self.day, self.hour)

    def at_index(self, index_or_instant: Union[int, datetime]) -> NoReturn:
        raise UnsupportedNavigationError(self.__class__.__name__, "at_index")

    def to_url(self) -> str:
        return (
            f"/minute/{self.year}/{self.month + 1}/{self.day}"
            f"/{self.hour}/{self.minute}"
        )

    def to_title(self) -> str:
        return f"{self.up().up().to_title()} {self.hour:02d}:{self.minute:02d}"

    def to_short_title(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def start_of_period(self) -> datetime:
        return datetime(self.year, self.month + 1, self.day, self.hour, self.minute)

    def end_of_period(self) -> datetime:
        return self.start_of_period() + (timedelta(minutes=1) - _LAST_MICROSECOND)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.SECOND)

    def get_chart_ticks(self) -> DomainStep:
        return DomainStep(TimeUnit.SECOND, every=10)

    def normalize(self, instant: datetime) -> datetime:
        return instant.replace(microsecond=0)

    def format_tick(self, index: int) -> str:
        return f"{index:02d}s"

    def time_format_string(self) -> str:
        return "%H:%M:%S"


@dataclass(frozen=True, slots=True)
class LastHourDescription(_PeriodBase):
    """Rolling window of the 60 minutes up to now.

    The end of the window is read from the clock on every call, so two calls
    may return slightly different bounds. Sideways and outward navigation is
    not defined for a rolling window and raises.
    """

    clock: Callable[[], datetime] = field(
        default=_local_now, compare=False, repr=False
    )

    kind: ClassVar[PeriodKind] = PeriodKind.LAST_HOUR
    period_size: ClassVar[PeriodSize] = PeriodSize.HOUR
    graph_tick_positions: ClassVar[GraphTickPositions] = GraphTickPositions.ON_VALUE

    def previous(self) -> NoReturn:
        raise UnsupportedNavigationError(self.__class__.__name__, "previous")

    def next(self) -> NoReturn:
        raise UnsupportedNavigationError(self.__class__.__name__, "next")

    def up(self) -> NoReturn:
        raise UnsupportedNavigationError(self.__class__.__name__, "up")

    def at_index(self, index_or_instant: Union[int, datetime]) -> MinuteDescription:
        instant = self._index_to_instant(index_or_instant, DomainStep(TimeUnit.MINUTE))
        return MinuteDescription.from_datetime(instant)

    def to_url(self) -> str:
        return "/recent"

    def to_title(self) -> str:
        return LAST_HOUR_TITLE

    def end_of_period(self) -> datetime:
        return self.clock()

    def start_of_period(self) -> datetime:
        return self._start_for(self.end_of_period())

    def bucket_starts(self) -> List[datetime]:
        end = self.end_of_period()
        return self.get_expected_domain_values().between(self._start_for(end), end)

    def _start_for(self, end: datetime) -> datetime:
        return self.normalize(end) - timedelta(minutes=59)

    def get_expected_domain_values(self) -> DomainStep:
        return DomainStep(TimeUnit.MINUTE)

    def get_chart_ticks(self) -> DomainStep:
        return DomainStep(TimeUnit.MINUTE, every=10)

    def normalize(self, instant: datetime) -> datetime:
        return instant.replace(second=0, microsecond=0)

    def format_tick(self, index: int) -> str:
        return (self.start_of_period() + timedelta(minutes=index)).strftime("%H:%M")

    def time_format_string(self) -> str:
        return "%H:%M"


PeriodDescription = Union[
    YearDescription,
    MonthDescription,
    DayDescription,
    HourDescription,
    MinuteDescription,
    LastHourDescription,
]


def describe_period(size: PeriodSize, instant: datetime) -> PeriodDescription:
    """Return the canonical period of ``size`` containing ``instant``."""
    size = PeriodSize(size)
    if size is PeriodSize.YEAR:
        return YearDescription(instant.year)
    if size is PeriodSize.MONTH:
        return MonthDescription(instant.year, instant.month - 1)
    if size is PeriodSize.DAY:
        return DayDescription.from_date(instant)
    if size is PeriodSize.HOUR:
        return HourDescription.from_datetime(instant)
    return MinuteDescription.from_datetime(instant)
