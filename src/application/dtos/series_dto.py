"""
Series DTOs - Application Layer

Request and response payloads for aligning measurements on a period grid.
Measurements arrive as ``[timestamp, value]`` pairs, exactly as the meter
backend emits them.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, RootModel

from src.domain.entities.measurement import MeasurementField, ValueWithTimestamp

# Values are checked by the wire codec so booleans and numeric strings fail.
WirePairDTO = Tuple[str, Any]


class SeriesRequestDTO(RootModel[List[WirePairDTO]]):
    """Bare list of ``[timestamp, value]`` pairs."""

    model_config = {
        "json_schema_extra": {
            "example": [
                ["2022-03-03T00:00:00", 0.12],
                ["2022-03-03T01:00:00", 0.3],
            ]
        }
    }


class MultiSeriesRequestDTO(RootModel[Dict[str, List[WirePairDTO]]]):
    """Named series, e.g. one per temperature sensor."""

    model_config = {
        "json_schema_extra": {
            "example": {
                "living": [["2022-03-03T00:00:00", 19.5]],
                "bedroom": [["2022-03-03T00:00:00", 17.25]],
            }
        }
    }


class ValueWithTimestampDTO(BaseModel):
    """DTO for a single aligned measurement."""

    timestamp: datetime = Field(description="Bucket start, local time")
    value: float = Field(description="Measured value")

    @classmethod
    def from_domain(cls, entry: ValueWithTimestamp) -> "ValueWithTimestampDTO":
        return cls(timestamp=entry.timestamp, value=entry.value)


class SeriesResponseDTO(BaseModel):
    """DTO for one series aligned on a period."""

    period: str = Field(description="URL of the period the series is aligned on")
    field: Optional[MeasurementField] = Field(
        default=None, description="Measured quantity, when known"
    )
    bucket_count: int = Field(
        description=(
            "Size of the period's bucket grid; year series are passed through"
            " as received and may hold fewer entries"
        )
    )
    entries: List[ValueWithTimestampDTO] = Field(
        default_factory=list, description="One entry per bucket, ascending"
    )
    total: float = Field(description="Sum of all entries")
    printable_total: str = Field(description="Total formatted for display")

    model_config = {
        "json_schema_extra": {
            "example": {
                "period": "/day/2022/3/3",
                "field": "gas",
                "bucket_count": 24,
                "entries": [
                    {"timestamp": "2022-03-03T00:00:00", "value": 0.12},
                    {"timestamp": "2022-03-03T01:00:00", "value": 0.0},
                ],
                "total": 0.12,
                "printable_total": "0,1 m³",
            }
        }
    }


class MultiSeriesResponseDTO(BaseModel):
    """DTO for several named series aligned on the same period."""

    period: str = Field(description="URL of the period the series are aligned on")
    bucket_count: int = Field(
        description=(
            "Size of the period's bucket grid; year series are passed through"
            " as received and may hold fewer entries"
        )
    )
    series: Dict[str, List[ValueWithTimestampDTO]] = Field(
        default_factory=dict, description="Aligned entries per series name"
    )
