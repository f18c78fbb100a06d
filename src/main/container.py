"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import MeteringConfig, SystemInfo
from src.application.use_cases.graph_use_cases import DescribeGraphUseCase
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.period_use_cases import (
    DrillDownPeriodUseCase,
    GetTodayUseCase,
    NavigatePeriodUseCase,
    ResolvePeriodUseCase,
    RestorePeriodUseCase,
)
from src.application.use_cases.series_use_cases import (
    AlignSeriesMappingUseCase,
    AlignSeriesUseCase,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    metering_config = providers.Singleton(
        MeteringConfig,
        first_measurement=config.metering.first_measurement_date,
        timezone=config.metering.timezone,
        value_precision=config.metering.value_precision,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
    )

    # Application (use cases)
    resolve_period_use_case = providers.Factory(
        ResolvePeriodUseCase,
        metering=metering_config,
    )

    get_today_use_case = providers.Factory(
        GetTodayUseCase,
        metering=metering_config,
    )

    navigate_period_use_case = providers.Factory(
        NavigatePeriodUseCase,
        metering=metering_config,
    )

    drill_down_period_use_case = providers.Factory(
        DrillDownPeriodUseCase,
        metering=metering_config,
    )

    restore_period_use_case = providers.Factory(
        RestorePeriodUseCase,
        metering=metering_config,
    )

    align_series_use_case = providers.Factory(
        AlignSeriesUseCase,
        metering=metering_config,
    )

    align_series_mapping_use_case = providers.Factory(
        AlignSeriesMappingUseCase,
        metering=metering_config,
    )

    describe_graph_use_case = providers.Factory(
        DescribeGraphUseCase,
        metering=metering_config,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        metering=metering_config,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        metering=metering_config,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for container resources.

    Builds the metering configuration eagerly so a broken timezone or
    first measurement date surfaces at startup rather than on the first
    request.
    """
    container = get_container()
    metering = container.metering_config()

    try:
        logger.info(
            "container.resources.initialized",
            timezone=metering.timezone,
            first_measurement=metering.first_measurement.isoformat(),
        )
        yield container
    finally:
        logger.info("container.resources.shutdown")
