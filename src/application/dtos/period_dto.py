"""
Period DTOs - Application Layer

Serializable views of period descriptions: everything a client needs to
render the period header, its navigation buttons and its chart axis.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.errors import InvalidPeriodError, UnsupportedNavigationError
from src.domain.entities.period import (
    GraphTickPositions,
    PeriodDescription,
    PeriodKind,
    PeriodSize,
)
from src.domain.services.period_codec import serialize_period


class PeriodStateDTO(BaseModel):
    """Persisted period state as stored by clients.

    Fields are deliberately loose: a stale or hand-edited record must still
    reach the restore logic, which falls back to today for anything invalid.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {"type": "DayDescription", "year": 2022, "month": 2, "day": 3}
        },
    )

    type: Optional[Any] = Field(default=None, description="Variant tag")
    year: Optional[Any] = Field(default=None, description="Calendar year")
    month: Optional[Any] = Field(default=None, description="Zero-based month")
    day: Optional[Any] = Field(default=None, description="Day of month")
    hour: Optional[Any] = Field(default=None, description="Hour of day")
    minute: Optional[Any] = Field(default=None, description="Minute of hour")

    @classmethod
    def from_domain(cls, period: PeriodDescription) -> "PeriodStateDTO":
        return cls(**serialize_period(period))

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class PeriodNavigationDTO(BaseModel):
    """URLs of the neighbouring periods; ``None`` where navigation stops."""

    previous: Optional[str] = Field(default=None, description="Previous period URL")
    next: Optional[str] = Field(default=None, description="Next period URL")
    up: Optional[str] = Field(default=None, description="Enclosing period URL")

    @classmethod
    def from_domain(cls, period: PeriodDescription) -> "PeriodNavigationDTO":
        def _url(operation: str) -> Optional[str]:
            try:
                target = getattr(period, operation)()
            except (UnsupportedNavigationError, InvalidPeriodError):
                return None
            return target.to_url() if target is not None else None

        return cls(previous=_url("previous"), next=_url("next"), up=_url("up"))


class PeriodDTO(BaseModel):
    """DTO for a resolved period description."""

    kind: PeriodKind = Field(description="Period variant")
    url: str = Field(description="Canonical URL path of the period")
    title: str = Field(description="Display title")
    short_title: str = Field(description="Compact display title")
    period_size: PeriodSize = Field(description="Granularity of the period")
    graph_tick_positions: GraphTickPositions = Field(
        description="Whether chart ticks sit on or between bars"
    )
    start: datetime = Field(description="First instant of the period, local time")
    end: datetime = Field(description="Last instant of the period, local time")
    bucket_count: int = Field(description="Number of buckets in the period")
    chart_ticks: List[datetime] = Field(
        default_factory=list, description="Instants carrying a chart tick"
    )
    time_format: str = Field(description="strftime pattern for bucket labels")
    has_measurements: bool = Field(
        description="Whether measurements can exist inside the period"
    )
    navigation: PeriodNavigationDTO = Field(description="Neighbouring periods")
    state: PeriodStateDTO = Field(description="Record to persist and restore")

    @classmethod
    def from_domain(
        cls, period: PeriodDescription, has_measurements: bool
    ) -> "PeriodDTO":
        return cls(
            kind=period.kind,
            url=period.to_url(),
            title=period.to_title(),
            short_title=period.to_short_title(),
            period_size=period.period_size,
            graph_tick_positions=period.graph_tick_positions,
            start=period.start_of_period(),
            end=period.end_of_period(),
            bucket_count=period.bucket_count(),
            chart_ticks=period.chart_tick_instants(),
            time_format=period.time_format_string(),
            has_measurements=has_measurements,
            navigation=PeriodNavigationDTO.from_domain(period),
            state=PeriodStateDTO.from_domain(period),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "kind": "day",
                "url": "/day/2022/3/3",
                "title": "Do 3 maart 2022",
                "short_title": "3 maart 2022",
                "period_size": "day",
                "graph_tick_positions": "between_values",
                "start": "2022-03-03T00:00:00",
                "end": "2022-03-03T23:59:59.999999",
                "bucket_count": 24,
                "chart_ticks": ["2022-03-03T00:00:00", "2022-03-03T02:00:00"],
                "time_format": "%H:%M",
                "has_measurements": True,
                "navigation": {
                    "previous": "/day/2022/3/2",
                    "next": "/day/2022/3/4",
                    "up": "/month/2022/3",
                },
                "state": {"type": "DayDescription", "year": 2022, "month": 2, "day": 3},
            }
        }
    }
