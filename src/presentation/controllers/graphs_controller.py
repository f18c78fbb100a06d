"""
Graphs Router - Presentation Layer

This module defines the FastAPI router for graph display metadata.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.graph_dto import GraphDescriptionDTO
from src.application.use_cases.graph_use_cases import DescribeGraphUseCase
from src.domain.entities.errors import InvalidPeriodError
from src.domain.entities.measurement import MeasurementField

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/graphs", tags=["Graphs"])


@router.get("/{field}/{period_path:path}", response_model=GraphDescriptionDTO)
@inject
async def get_graph_description(
    field: MeasurementField,
    period_path: str,
    describe_graph_use_case: DescribeGraphUseCase = Depends(
        Provide["describe_graph_use_case"]
    ),
) -> GraphDescriptionDTO:
    """
    Get the display metadata for ``field`` over a period.

    Includes y-axis bounds, colours and the labels of the ticks to show.
    """
    try:
        return await describe_graph_use_case.execute(field, period_path)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
