"""Use case for graph display metadata."""

from src.application.dtos.graph_dto import GraphDescriptionDTO
from src.application.models import MeteringConfig
from src.domain.entities.graph import graph_description_for
from src.domain.entities.measurement import MeasurementField


class DescribeGraphUseCase:
    """Use case building the graph description of a field over a period."""

    def __init__(self, metering: MeteringConfig) -> None:
        self._metering = metering

    async def execute(
        self, field: MeasurementField, period_path: str
    ) -> GraphDescriptionDTO:
        period = self._metering.resolve(period_path)
        return GraphDescriptionDTO.from_domain(graph_description_for(field, period))
