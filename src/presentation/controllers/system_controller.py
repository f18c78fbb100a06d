"""Health and build information endpoints."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response, status

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.domain.entities.health import ServiceStatus
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Self-check outcomes; 503 when periods cannot be resolved at all."""
    health_status = await get_health_status_use_case.execute()
    if health_status.status is ServiceStatus.DOWN:
        logger.warning("health.check.down", checks=health_status.checks)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return health_status


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    started_at = getattr(request.app.state, "started_at", None)
    return await get_application_info_use_case.execute(started_at)
