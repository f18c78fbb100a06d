"""DTOs for graph display metadata."""

from typing import List

from pydantic import BaseModel, Field

from src.domain.entities.graph import GraphDescription
from src.domain.entities.measurement import MeasurementField
from src.domain.entities.period import GraphTickPositions


class GraphDescriptionDTO(BaseModel):
    """How to draw one measurement field over one period."""

    field: MeasurementField = Field(description="Measured quantity")
    period: str = Field(description="URL of the period")
    title: str = Field(description="Title of the period")
    unit: str = Field(description="Display unit")
    bar_color: str = Field(description="Bar colour")
    light_color: str = Field(description="Muted colour for secondary bars")
    min_y: float = Field(description="Lower bound of the y axis")
    max_y: float = Field(description="Upper bound of the y axis")
    tooltip_value_format: str = Field(description="Format spec for tooltip values")
    x_label_height: int = Field(description="Height reserved for x labels, pixels")
    has_text_labels: bool = Field(description="Whether x labels are words")
    graph_tick_positions: GraphTickPositions = Field(
        description="Whether ticks sit on or between bars"
    )
    time_format: str = Field(description="strftime pattern for bucket labels")
    displayed_tick_indices: List[int] = Field(
        default_factory=list, description="Bucket indices that get a label"
    )
    tick_labels: List[str] = Field(
        default_factory=list, description="Label for each displayed tick"
    )

    @classmethod
    def from_domain(cls, graph: GraphDescription) -> "GraphDescriptionDTO":
        period = graph.period
        indices = graph.displayed_tick_indices
        return cls(
            field=graph.field,
            period=period.to_url(),
            title=period.to_title(),
            unit=graph.displayable_unit,
            bar_color=graph.bar_color,
            light_color=graph.light_color,
            min_y=graph.min_y,
            max_y=graph.max_y,
            tooltip_value_format=graph.tooltip_value_format,
            x_label_height=graph.x_label_height,
            has_text_labels=graph.has_text_labels,
            graph_tick_positions=period.graph_tick_positions,
            time_format=period.time_format_string(),
            displayed_tick_indices=indices,
            tick_labels=[period.format_tick(index) for index in indices],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "field": "water",
                "period": "/month/2022/3",
                "title": "maart 2022",
                "unit": "L",
                "bar_color": "#428bca",
                "light_color": "#a0c5e4",
                "min_y": 0,
                "max_y": 1500,
                "tooltip_value_format": ".0f",
                "x_label_height": 20,
                "has_text_labels": False,
                "graph_tick_positions": "on_value",
                "time_format": "%d",
                "displayed_tick_indices": [0, 2, 4],
                "tick_labels": ["1", "3", "5"],
            }
        }
    }
