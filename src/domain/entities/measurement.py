"""Domain entities for metered values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MeasurementField(str, Enum):
    """Measured quantity a series belongs to."""

    GAS = "gas"
    STROOM = "stroom"
    WATER = "water"
    CURRENT_POWER = "current_power"
    TEMPERATURE = "temperature"


_UNITS = {
    MeasurementField.GAS: "m³",
    MeasurementField.STROOM: "kWh",
    MeasurementField.WATER: "L",
    MeasurementField.CURRENT_POWER: "W",
    MeasurementField.TEMPERATURE: "°C",
}


def unit_to_string(field: MeasurementField) -> str:
    """Return the displayable unit for a measurement field."""
    return _UNITS[MeasurementField(field)]


@dataclass(frozen=True, slots=True)
class ValueWithTimestamp:
    """A single measured value at a local wall-clock instant."""

    timestamp: datetime
    value: float


# The rendering layer historically called these measurement entries.
MeasurementEntry = ValueWithTimestamp


def printable_total(usage: float) -> str:
    """Round ``usage`` to one decimal, half up, with a decimal comma."""
    rounded = math.floor(usage * 10 + 0.5) / 10
    text = str(int(rounded)) if rounded.is_integer() else str(rounded)
    return text.replace(".", ",")
