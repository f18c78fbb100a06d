from __future__ import annotations

from datetime import datetime

import pytest

from src.domain.entities.measurement import (
    MeasurementEntry,
    MeasurementField,
    ValueWithTimestamp,
    printable_total,
    unit_to_string,
)


def test_value_with_timestamp_is_structural() -> None:
    first = ValueWithTimestamp(timestamp=datetime(2022, 3, 3, 2), value=12.0)
    second = MeasurementEntry(timestamp=datetime(2022, 3, 3, 2), value=12.0)
    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize(
    "field,unit",
    [
        (MeasurementField.GAS, "m³"),
        (MeasurementField.STROOM, "kWh"),
        (MeasurementField.WATER, "L"),
        (MeasurementField.CURRENT_POWER, "W"),
        ("temperature", "°C"),
    ],
)
def test_unit_to_string(field, unit) -> None:
    assert unit_to_string(field) == unit


@pytest.mark.parametrize(
    "usage,expected",
    [(0.12, "0,1"), (12.0, "12"), (3.25, "3,3"), (1234.56, "1234,6"), (0, "0")],
)
def test_printable_total(usage, expected) -> None:
    assert printable_total(usage) == expected
