"""
Domain Entities Package

This package contains the core domain entities: calendar periods,
measured values and the graph metadata derived from them.
"""

from .errors import (
    DomainError,
    InvalidPeriodError,
    MeasurementPayloadError,
    PeriodError,
    UnsupportedNavigationError,
)
from .graph import (
    CurrentPowerUsageGraphDescription,
    GasGraphDescription,
    GraphDescription,
    IndoorTemperatureGraphDescription,
    StroomGraphDescription,
    WaterGraphDescription,
    graph_description_for,
)
from .health import ApplicationInfo, ServiceStatus, SystemHealth
from .measurement import (
    MeasurementEntry,
    MeasurementField,
    printable_total,
    ValueWithTimestamp,
    unit_to_string,
)
from .period import (
    DayDescription,
    DomainStep,
    GraphTickPositions,
    HourDescription,
    LastHourDescription,
    MinuteDescription,
    MonthDescription,
    PeriodDescription,
    PeriodKind,
    PeriodSize,
    TimeUnit,
    YearDescription,
    describe_period,
)

__all__ = [
    "DomainError",
    "PeriodError",
    "InvalidPeriodError",
    "UnsupportedNavigationError",
    "MeasurementPayloadError",
    "GraphDescription",
    "GasGraphDescription",
    "StroomGraphDescription",
    "WaterGraphDescription",
    "CurrentPowerUsageGraphDescription",
    "IndoorTemperatureGraphDescription",
    "graph_description_for",
    "ApplicationInfo",
    "ServiceStatus",
    "SystemHealth",
    "MeasurementEntry",
    "MeasurementField",
    "ValueWithTimestamp",
    "unit_to_string",
    "printable_total",
    "PeriodDescription",
    "PeriodKind",
    "PeriodSize",
    "GraphTickPositions",
    "TimeUnit",
    "DomainStep",
    "YearDescription",
    "MonthDescription",
    "DayDescription",
    "HourDescription",
    "MinuteDescription",
    "LastHourDescription",
    "describe_period",
]
