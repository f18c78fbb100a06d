"""
FastAPI application for meter periods.

Logging is configured from the environment before settings load, then again
from the loaded settings, so configuration errors are logged consistently.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import (
    graphs_router,
    periods_router,
    series_router,
    system_router,
)
from src.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()
settings = get_settings()
update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold the container open while serving."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.lifespan.start", started_at=app.state.started_at.isoformat())

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.lifespan.stop")


def create_app() -> FastAPI:
    """Build the API with its container wired to the current settings."""
    settings = get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        lifespan=lifespan,
    )

    # Periods are fetched by a browser front-end served from elsewhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    for router in (periods_router, graphs_router, series_router, system_router):
        app.include_router(router)

    return app


app = create_app()
