from __future__ import annotations

import pytest

from src.domain.entities.graph import (
    CurrentPowerUsageGraphDescription,
    GasGraphDescription,
    IndoorTemperatureGraphDescription,
    StroomGraphDescription,
    WaterGraphDescription,
    graph_description_for,
    month_tick_indices,
)
from src.domain.entities.measurement import MeasurementField
from src.domain.entities.period import (
    DayDescription,
    HourDescription,
    LastHourDescription,
    MinuteDescription,
    MonthDescription,
    YearDescription,
)


def test_month_tick_indices_for_31_days() -> None:
    indices = month_tick_indices(31)
    assert indices[0] == 0
    assert indices[-1] == 30
    assert 28 in indices
    assert 29 not in indices
    assert indices == list(range(0, 30, 2)) + [30]


def test_month_tick_indices_suppress_tick_two_before_end() -> None:
    # 30 days: index 28 is even but sits two before the last day
    indices = month_tick_indices(30)
    assert 28 not in indices
    assert indices[-2:] == [26, 29]

    assert month_tick_indices(28) == [0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22, 24, 27]
    assert month_tick_indices(29)[-2:] == [26, 28]


def test_displayed_tick_indices_per_period_size() -> None:
    gas = GasGraphDescription
    assert gas(YearDescription(2022)).displayed_tick_indices == list(range(12))
    assert gas(MonthDescription(2022, 1)).displayed_tick_indices == month_tick_indices(28)
    assert gas(DayDescription(2022, 2, 3)).displayed_tick_indices == list(range(23))
    assert gas(HourDescription(2022, 2, 3, 9)).displayed_tick_indices == list(
        range(0, 60, 5)
    )
    assert gas(MinuteDescription(2022, 2, 3, 9, 1)).displayed_tick_indices == [
        0,
        10,
        20,
        30,
        40,
        50,
    ]


@pytest.mark.parametrize(
    "graph_cls,period,expected",
    [
        (WaterGraphDescription, YearDescription(2022), 30000),
        (WaterGraphDescription, MonthDescription(2022, 2), 1500),
        (WaterGraphDescription, DayDescription(2022, 2, 3), 200),
        (GasGraphDescription, DayDescription(2022, 2, 3), 3),
        (StroomGraphDescription, MonthDescription(2022, 2), 20),
        (StroomGraphDescription, YearDescription(2022), 600),
        (CurrentPowerUsageGraphDescription, LastHourDescription(), 3000),
        (IndoorTemperatureGraphDescription, DayDescription(2022, 2, 3), 25),
    ],
)
def test_max_y_lookup(graph_cls, period, expected) -> None:
    assert graph_cls(period).max_y == expected


def test_min_y_defaults_to_zero_except_temperature() -> None:
    day = DayDescription(2022, 2, 3)
    assert GasGraphDescription(day).min_y == 0
    assert IndoorTemperatureGraphDescription(day).min_y == 15


def test_units_and_value_formatting() -> None:
    day = DayDescription(2022, 2, 3)
    assert GasGraphDescription(day).unit == "m³"
    assert StroomGraphDescription(day).unit == "kWh"
    assert WaterGraphDescription(day).format_value(123.4) == "123 L"
    assert GasGraphDescription(day).format_value(1.23456) == "1.235 m³"
    assert IndoorTemperatureGraphDescription(day).format_value(19.44) == "19.4 °C"


def test_year_view_uses_text_labels() -> None:
    assert GasGraphDescription(YearDescription(2022)).has_text_labels
    assert GasGraphDescription(YearDescription(2022)).x_label_height == 40
    assert not GasGraphDescription(DayDescription(2022, 2, 3)).has_text_labels
    assert GasGraphDescription(DayDescription(2022, 2, 3)).x_label_height == 20


def test_graph_description_for_picks_variant() -> None:
    period = MonthDescription(2022, 2)
    graph = graph_description_for(MeasurementField.WATER, period)
    assert isinstance(graph, WaterGraphDescription)
    assert graph.period is period
    assert isinstance(graph_description_for("gas", period), GasGraphDescription)


def test_graph_description_is_rebuilt_per_period() -> None:
    day = graph_description_for(MeasurementField.WATER, DayDescription(2022, 2, 3))
    month = graph_description_for(MeasurementField.WATER, day.period.up())
    assert day.max_y != month.max_y
