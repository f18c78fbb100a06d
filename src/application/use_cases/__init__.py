"""
Use Cases Package - Application Layer

This package contains the application use cases that orchestrate
the domain services and period descriptions.
"""

from .graph_use_cases import DescribeGraphUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .period_use_cases import (
    DrillDownPeriodUseCase,
    GetTodayUseCase,
    NavigatePeriodUseCase,
    NavigationDirection,
    ResolvePeriodUseCase,
    RestorePeriodUseCase,
)
from .series_use_cases import AlignSeriesMappingUseCase, AlignSeriesUseCase

__all__ = [
    "DescribeGraphUseCase",
    "GetApplicationInfoUseCase",
    "GetHealthStatusUseCase",
    "DrillDownPeriodUseCase",
    "GetTodayUseCase",
    "NavigatePeriodUseCase",
    "NavigationDirection",
    "ResolvePeriodUseCase",
    "RestorePeriodUseCase",
    "AlignSeriesMappingUseCase",
    "AlignSeriesUseCase",
]
