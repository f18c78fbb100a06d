"""
Domain Service - Measurement Wire Codec

Measurements travel as ``[timestamp, value]`` pairs. Timestamps are ISO-8601
strings; when they carry an offset they are converted to the local wall clock
of the meter and stripped of tzinfo, so they line up with period buckets.
"""

from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src.domain.entities.errors import MeasurementPayloadError
from src.domain.entities.measurement import ValueWithTimestamp

WATTS_PER_KILOWATT = 1000

WirePair = Tuple[str, float]


def parse_timestamp(value: Any, local_tz: Optional[tzinfo] = None) -> datetime:
    """Parse a wire timestamp into a naive local datetime."""
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            instant = datetime.fromisoformat(text)
        except ValueError as exc:
            raise MeasurementPayloadError(
                f"Invalid timestamp '{value}'", details={"timestamp": value}
            ) from exc
    else:
        raise MeasurementPayloadError(
            "Timestamp must be an ISO-8601 string",
            details={"timestamp": repr(value)},
        )

    if instant.tzinfo is not None:
        if local_tz is not None:
            instant = instant.astimezone(local_tz)
        instant = instant.replace(tzinfo=None)
    return instant


def parse_value(value: Any, precision: Optional[int] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MeasurementPayloadError(
            "Measurement value must be a number", details={"value": repr(value)}
        )
    number = float(value)
    if not math.isfinite(number):
        raise MeasurementPayloadError(
            "Measurement value must be finite", details={"value": repr(value)}
        )
    return round(number, precision) if precision is not None else number


def decode_entries(
    pairs: Iterable[Sequence[Any]],
    local_tz: Optional[tzinfo] = None,
    precision: Optional[int] = None,
    scale: float = 1,
) -> List[ValueWithTimestamp]:
    """
    Decode ``[timestamp, value]`` pairs into measurement entries.

    Args:
        pairs: Wire pairs in any order.
        local_tz: Meter timezone offset-aware timestamps are converted to.
        precision: Decimal places values are rounded to, after scaling.
        scale: Factor applied to every value, e.g. kW to W.

    Raises:
        MeasurementPayloadError: On a pair that is not a two-element sequence,
            an unparseable timestamp or a non-numeric value.
    """
    entries: List[ValueWithTimestamp] = []
    for position, pair in enumerate(pairs):
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
            raise MeasurementPayloadError(
                "Measurement must be a [timestamp, value] pair",
                details={"position": position},
            )
        if len(pair) != 2:
            raise MeasurementPayloadError(
                "Measurement must be a [timestamp, value] pair",
                details={"position": position, "length": len(pair)},
            )
        timestamp = parse_timestamp(pair[0], local_tz)
        value = parse_value(pair[1]) * scale
        if precision is not None:
            value = round(value, precision)
        entries.append(ValueWithTimestamp(timestamp=timestamp, value=value))
    return entries


def decode_series_mapping(
    payload: Mapping[str, Iterable[Sequence[Any]]],
    local_tz: Optional[tzinfo] = None,
    precision: Optional[int] = None,
) -> Dict[str, List[ValueWithTimestamp]]:
    """Decode a ``{series name: pairs}`` payload, e.g. one series per sensor."""
    if not isinstance(payload, Mapping):
        raise MeasurementPayloadError("Series payload must be an object")
    return {
        name: decode_entries(pairs, local_tz, precision)
        for name, pairs in payload.items()
    }


def encode_entries(entries: Iterable[ValueWithTimestamp]) -> List[WirePair]:
    return [(entry.timestamp.isoformat(), entry.value) for entry in entries]


def kw_to_w(value: float) -> float:
    return value * WATTS_PER_KILOWATT
