"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .graph_dto import GraphDescriptionDTO
from .health_dto import ApplicationInfoDTO, SystemHealthDTO
from .period_dto import PeriodDTO, PeriodNavigationDTO, PeriodStateDTO
from .series_dto import (
    MultiSeriesRequestDTO,
    MultiSeriesResponseDTO,
    SeriesRequestDTO,
    SeriesResponseDTO,
    ValueWithTimestampDTO,
)

__all__ = [
    "GraphDescriptionDTO",
    "ApplicationInfoDTO",
    "SystemHealthDTO",
    "PeriodDTO",
    "PeriodNavigationDTO",
    "PeriodStateDTO",
    "SeriesRequestDTO",
    "MultiSeriesRequestDTO",
    "SeriesResponseDTO",
    "MultiSeriesResponseDTO",
    "ValueWithTimestampDTO",
]
