"""
Series Router - Presentation Layer

This module defines the FastAPI router that aligns raw measurements on the
bucket grid of a period.
"""

from typing import Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.series_dto import (
    MultiSeriesRequestDTO,
    MultiSeriesResponseDTO,
    SeriesRequestDTO,
    SeriesResponseDTO,
)
from src.application.use_cases.series_use_cases import (
    AlignSeriesMappingUseCase,
    AlignSeriesUseCase,
)
from src.domain.entities.errors import InvalidPeriodError, MeasurementPayloadError
from src.domain.entities.measurement import MeasurementField

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/series", tags=["Series"])


@router.post("/{period_path:path}/align", response_model=SeriesResponseDTO)
@inject
async def align_series(
    period_path: str,
    payload: SeriesRequestDTO,
    field: Optional[MeasurementField] = Query(
        None, description="Measured quantity; current_power values are in kW"
    ),
    align_series_use_case: AlignSeriesUseCase = Depends(
        Provide["align_series_use_case"]
    ),
) -> SeriesResponseDTO:
    """
    Align ``[timestamp, value]`` pairs on the buckets of a period.

    The response holds exactly one entry per bucket; empty buckets are
    zero-filled and measurements outside the period are dropped.
    """
    try:
        return await align_series_use_case.execute(
            period_path, payload.root, field=field
        )
    except (InvalidPeriodError, MeasurementPayloadError) as e:
        logger.info("series.align.rejected", period_path=period_path, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{period_path:path}/align-many", response_model=MultiSeriesResponseDTO)
@inject
async def align_series_mapping(
    period_path: str,
    payload: MultiSeriesRequestDTO,
    align_series_mapping_use_case: AlignSeriesMappingUseCase = Depends(
        Provide["align_series_mapping_use_case"]
    ),
) -> MultiSeriesResponseDTO:
    """Align several named series, e.g. one per temperature sensor."""
    try:
        return await align_series_mapping_use_case.execute(period_path, payload.root)
    except (InvalidPeriodError, MeasurementPayloadError) as e:
        logger.info("series.align.rejected", period_path=period_path, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
