"""
Domain Entities - Graph Descriptions

Display metadata for a measurement field viewed over a period: colours,
unit, y-axis bounds and which buckets get a tick label. A graph description
is rebuilt whenever the period it describes changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Type

from src.domain.entities.measurement import MeasurementField, unit_to_string
from src.domain.entities.period import PeriodDescription, PeriodSize


def month_tick_indices(day_count: int) -> List[int]:
    """Tick indices for a month of ``day_count`` days.

    Shows alternating day ticks, always shows day 1 and the last day, but
    suppresses the tick exactly two before the end to avoid crowding.
    """
    indices = []
    for index in range(day_count):
        if index == 0 or index == day_count - 1:
            indices.append(index)
        elif index % 2 == 0 and index != day_count - 2:
            indices.append(index)
    return indices


@dataclass(frozen=True)
class GraphDescription:
    """Base class for per-field display metadata."""

    period: PeriodDescription

    field: ClassVar[MeasurementField]
    bar_color: ClassVar[str]
    light_color: ClassVar[str]
    tooltip_value_format: ClassVar[str] = ".3f"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]]
    min_y_by_size: ClassVar[Dict[PeriodSize, float]] = {}

    @property
    def unit(self) -> str:
        return unit_to_string(self.field)

    @property
    def displayable_unit(self) -> str:
        return self.unit

    @property
    def max_y(self) -> float:
        return self.max_y_by_size[self.period.period_size]

    @property
    def min_y(self) -> float:
        return self.min_y_by_size.get(self.period.period_size, 0)

    @property
    def x_label_height(self) -> int:
        return 40 if self.period.period_size is PeriodSize.YEAR else 20

    @property
    def has_text_labels(self) -> bool:
        return self.period.period_size is PeriodSize.YEAR

    @property
    def displayed_tick_indices(self) -> List[int]:
        size = self.period.period_size
        if size is PeriodSize.YEAR:
            return list(range(0, 12))
        if size is PeriodSize.MONTH:
            return month_tick_indices(self.period.bucket_count())
        if size is PeriodSize.DAY:
            return list(range(0, 23))
        if size is PeriodSize.HOUR:
            return list(range(0, 60, 5))
        return list(range(0, 60, 10))

    def format_value(self, value: float) -> str:
        return f"{value:{self.tooltip_value_format}} {self.displayable_unit}"


@dataclass(frozen=True)
class GasGraphDescription(GraphDescription):
    field: ClassVar[MeasurementField] = MeasurementField.GAS
    bar_color: ClassVar[str] = "#e73711"
    light_color: ClassVar[str] = "#f5a493"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]] = {
        PeriodSize.YEAR: 400,
        PeriodSize.MONTH: 20,
        PeriodSize.DAY: 3,
        PeriodSize.HOUR: 0.5,
        PeriodSize.MINUTE: 0.05,
    }


@dataclass(frozen=True)
class StroomGraphDescription(GraphDescription):
    field: ClassVar[MeasurementField] = MeasurementField.STROOM
    bar_color: ClassVar[str] = "#f0ad4e"
    light_color: ClassVar[str] = "#f8d6a6"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]] = {
        PeriodSize.YEAR: 600,
        PeriodSize.MONTH: 20,
        PeriodSize.DAY: 2,
        PeriodSize.HOUR: 0.5,
        PeriodSize.MINUTE: 0.05,
    }


@dataclass(frozen=True)
class WaterGraphDescription(GraphDescription):
    field: ClassVar[MeasurementField] = MeasurementField.WATER
    bar_color: ClassVar[str] = "#428bca"
    light_color: ClassVar[str] = "#a0c5e4"
    tooltip_value_format: ClassVar[str] = ".0f"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]] = {
        PeriodSize.YEAR: 30000,
        PeriodSize.MONTH: 1500,
        PeriodSize.DAY: 200,
        PeriodSize.HOUR: 50,
        PeriodSize.MINUTE: 10,
    }


@dataclass(frozen=True)
class CurrentPowerUsageGraphDescription(GraphDescription):
    """Live electricity draw in watts, shown over the rolling last hour."""

    field: ClassVar[MeasurementField] = MeasurementField.CURRENT_POWER
    bar_color: ClassVar[str] = "#f0ad4e"
    light_color: ClassVar[str] = "#fbe3c3"
    tooltip_value_format: ClassVar[str] = ".0f"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]] = {
        size: 3000 for size in PeriodSize
    }


@dataclass(frozen=True)
class IndoorTemperatureGraphDescription(GraphDescription):
    field: ClassVar[MeasurementField] = MeasurementField.TEMPERATURE
    bar_color: ClassVar[str] = "#d9534f"
    light_color: ClassVar[str] = "#f2c0bf"
    tooltip_value_format: ClassVar[str] = ".1f"
    max_y_by_size: ClassVar[Dict[PeriodSize, float]] = {size: 25 for size in PeriodSize}
    min_y_by_size: ClassVar[Dict[PeriodSize, float]] = {size: 15 for size in PeriodSize}


_GRAPH_DESCRIPTIONS: Dict[MeasurementField, Type[GraphDescription]] = {
    MeasurementField.GAS: GasGraphDescription,
    MeasurementField.STROOM: StroomGraphDescription,
    MeasurementField.WATER: WaterGraphDescription,
    MeasurementField.CURRENT_POWER: CurrentPowerUsageGraphDescription,
    MeasurementField.TEMPERATURE: IndoorTemperatureGraphDescription,
}


def graph_description_for(
    field: MeasurementField, period: PeriodDescription
) -> GraphDescription:
    """Build the graph description of ``field`` for ``period``."""
    return _GRAPH_DESCRIPTIONS[MeasurementField(field)](period)
