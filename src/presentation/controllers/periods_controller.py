"""
Periods Router - Presentation Layer

This module defines the FastAPI router for period navigation endpoints.
Period paths use the same scheme as ``to_url()``, e.g.
``/periods/day/2022/3/3`` or ``/periods/recent``.
"""

from datetime import datetime

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.period_dto import PeriodDTO, PeriodStateDTO
from src.application.use_cases.period_use_cases import (
    DrillDownPeriodUseCase,
    GetTodayUseCase,
    NavigatePeriodUseCase,
    NavigationDirection,
    ResolvePeriodUseCase,
    RestorePeriodUseCase,
)
from src.domain.entities.errors import InvalidPeriodError, UnsupportedNavigationError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/periods", tags=["Periods"])


@router.get("/today", response_model=PeriodDTO)
@inject
async def get_today(
    get_today_use_case: GetTodayUseCase = Depends(Provide["get_today_use_case"]),
) -> PeriodDTO:
    """Return the day containing the current local time."""
    return await get_today_use_case.execute()


@router.post("/restore", response_model=PeriodDTO)
@inject
async def restore_period(
    state: PeriodStateDTO,
    restore_period_use_case: RestorePeriodUseCase = Depends(
        Provide["restore_period_use_case"]
    ),
) -> PeriodDTO:
    """
    Restore a persisted period record.

    Unknown or malformed records never fail: they resolve to today.
    """
    return await restore_period_use_case.execute(state)


async def _navigate(
    use_case: NavigatePeriodUseCase,
    period_path: str,
    direction: NavigationDirection,
) -> PeriodDTO:
    try:
        target = await use_case.execute(period_path, direction)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnsupportedNavigationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if target is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Period '{period_path}' has no enclosing period",
        )
    return target


@router.get("/{period_path:path}/previous", response_model=PeriodDTO)
@inject
async def get_previous_period(
    period_path: str,
    navigate_period_use_case: NavigatePeriodUseCase = Depends(
        Provide["navigate_period_use_case"]
    ),
) -> PeriodDTO:
    """Return the period immediately before the given one."""
    return await _navigate(
        navigate_period_use_case, period_path, NavigationDirection.PREVIOUS
    )


@router.get("/{period_path:path}/next", response_model=PeriodDTO)
@inject
async def get_next_period(
    period_path: str,
    navigate_period_use_case: NavigatePeriodUseCase = Depends(
        Provide["navigate_period_use_case"]
    ),
) -> PeriodDTO:
    """Return the period immediately after the given one."""
    return await _navigate(
        navigate_period_use_case, period_path, NavigationDirection.NEXT
    )


@router.get("/{period_path:path}/up", response_model=PeriodDTO)
@inject
async def get_enclosing_period(
    period_path: str,
    navigate_period_use_case: NavigatePeriodUseCase = Depends(
        Provide["navigate_period_use_case"]
    ),
) -> PeriodDTO:
    """Return the next coarser period containing the given one."""
    return await _navigate(navigate_period_use_case, period_path, NavigationDirection.UP)


@router.get("/{period_path:path}/at/{index}", response_model=PeriodDTO)
@inject
async def get_period_at_index(
    period_path: str,
    index: int,
    drill_down_period_use_case: DrillDownPeriodUseCase = Depends(
        Provide["drill_down_period_use_case"]
    ),
) -> PeriodDTO:
    """Zoom into the bucket at ``index`` of the given period."""
    try:
        return await drill_down_period_use_case.execute(period_path, index)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnsupportedNavigationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/{period_path:path}/at", response_model=PeriodDTO)
@inject
async def get_period_at_instant(
    period_path: str,
    instant: datetime = Query(..., description="Instant inside the period"),
    drill_down_period_use_case: DrillDownPeriodUseCase = Depends(
        Provide["drill_down_period_use_case"]
    ),
) -> PeriodDTO:
    """Zoom into the bucket containing ``instant``."""
    try:
        return await drill_down_period_use_case.execute(period_path, instant)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnsupportedNavigationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/{period_path:path}", response_model=PeriodDTO)
@inject
async def get_period(
    period_path: str,
    resolve_period_use_case: ResolvePeriodUseCase = Depends(
        Provide["resolve_period_use_case"]
    ),
) -> PeriodDTO:
    """Resolve a period path such as ``month/2022/3``."""
    try:
        return await resolve_period_use_case.execute(period_path)
    except InvalidPeriodError as e:
        logger.info("period.resolve.rejected", period_path=period_path, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
