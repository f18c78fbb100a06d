"""
Domain Service - Period Codec

Encodes period descriptions to and from the two external forms they take:

- URL paths (``/day/2022/3/3``), produced by ``to_url()`` on each variant and
  decoded by ``period_from_url``. Months are one-based on the wire.
- Tagged records (``{"type": "DayDescription", ...}``) used to persist and
  restore UI state. Restoring never fails: unknown or malformed records land
  on today's day.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from src.domain.entities.errors import InvalidPeriodError
from src.domain.entities.period import (
    DayDescription,
    HourDescription,
    LastHourDescription,
    MinuteDescription,
    MonthDescription,
    PeriodDescription,
    PeriodKind,
    YearDescription,
)
from src.shared import get_logger

logger = get_logger(__name__)

RECENT_SEGMENT = "recent"

# Number of numeric path segments each variant takes after its prefix.
_URL_ARITY = {
    PeriodKind.YEAR.value: 1,
    PeriodKind.MONTH.value: 2,
    PeriodKind.DAY.value: 3,
    PeriodKind.HOUR.value: 4,
    PeriodKind.MINUTE.value: 5,
}

_RECORD_TAGS = {
    PeriodKind.YEAR: "YearDescription",
    PeriodKind.MONTH: "MonthDescription",
    PeriodKind.DAY: "DayDescription",
    PeriodKind.HOUR: "HourDescription",
    PeriodKind.MINUTE: "MinuteDescription",
    PeriodKind.LAST_HOUR: "LastHourDescription",
}

_RECORD_FIELDS = {
    PeriodKind.YEAR: ("year",),
    PeriodKind.MONTH: ("year", "month"),
    PeriodKind.DAY: ("year", "month", "day"),
    PeriodKind.HOUR: ("year", "month", "day", "hour"),
    PeriodKind.MINUTE: ("year", "month", "day", "hour", "minute"),
    PeriodKind.LAST_HOUR: (),
}

_CONSTRUCTORS: Dict[PeriodKind, Callable[..., PeriodDescription]] = {
    PeriodKind.YEAR: YearDescription,
    PeriodKind.MONTH: MonthDescription,
    PeriodKind.DAY: DayDescription,
    PeriodKind.HOUR: HourDescription,
    PeriodKind.MINUTE: MinuteDescription,
    PeriodKind.LAST_HOUR: LastHourDescription,
}


def _split_path(path: str) -> List[str]:
    return [segment for segment in path.strip().split("/") if segment]


def period_from_url(
    path: str, clock: Optional[Callable[[], datetime]] = None
) -> PeriodDescription:
    """Decode a path produced by ``to_url()`` back into a period description.

    Args:
        path: URL path such as ``/month/2022/3``; a leading slash is optional.
        clock: Clock handed to a decoded ``LastHourDescription``.

    Raises:
        InvalidPeriodError: When the path does not follow the URL scheme or
            names an invalid calendar period.
    """
    segments = _split_path(path)
    if not segments:
        raise InvalidPeriodError("Empty period path", details={"path": path})

    prefix, numbers = segments[0].lower(), segments[1:]

    if prefix == RECENT_SEGMENT and not numbers:
        if clock is None:
            return LastHourDescription()
        return LastHourDescription(clock=clock)

    arity = _URL_ARITY.get(prefix)
    if arity is None or len(numbers) != arity:
        raise InvalidPeriodError(
            f"Unrecognized period path '{path}'", details={"path": path}
        )

    try:
        values = [int(number) for number in numbers]
    except ValueError as exc:
        raise InvalidPeriodError(
            f"Period path '{path}' contains non-numeric segments",
            details={"path": path},
        ) from exc

    kind = PeriodKind(prefix)
    if kind is not PeriodKind.YEAR:
        # one-based month on the wire
        values[1] -= 1
    return _CONSTRUCTORS[kind](*values)


def serialize_period(period: PeriodDescription) -> Dict[str, Any]:
    """Build the tagged record used to persist a period description."""
    record: Dict[str, Any] = {"type": _RECORD_TAGS[period.kind]}
    for name in _RECORD_FIELDS[period.kind]:
        record[name] = getattr(period, name)
    return record


def deserialize_period(
    record: Any,
    now: Optional[datetime] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> PeriodDescription:
    """Restore a period description from its tagged record.

    Unknown tags and malformed coordinates fall back to today's
    ``DayDescription`` so the caller always lands on a navigable period.
    """
    tag = record.get("type") if isinstance(record, Mapping) else None
    kind = next((k for k, t in _RECORD_TAGS.items() if t == tag), None)

    if kind is None:
        logger.warning("period.restore.fallback", reason="unknown_type", type=tag)
        return DayDescription.today(now)

    if kind is PeriodKind.LAST_HOUR:
        if clock is None:
            return LastHourDescription()
        return LastHourDescription(clock=clock)

    try:
        values = [record[name] for name in _RECORD_FIELDS[kind]]
        return _CONSTRUCTORS[kind](*values)
    except (KeyError, InvalidPeriodError) as exc:
        logger.warning(
            "period.restore.fallback",
            reason="invalid_coordinates",
            type=tag,
            error=str(exc),
        )
        return DayDescription.today(now)
