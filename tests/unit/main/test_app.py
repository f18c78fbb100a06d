from __future__ import annotations

import pytest

from src.main import app as app_module
from src.main.app import create_app


@pytest.mark.asyncio
async def test_lifespan_records_start_and_container() -> None:
    app = create_app()

    async with app.router.lifespan_context(app):
        assert app.state.started_at.tzinfo is not None
        assert app.state.container is not None


def test_module_level_app_uses_settings_title() -> None:
    assert app_module.app.title == app_module.settings.ge.title


def test_routes_for_every_router_are_registered() -> None:
    paths = {route.path for route in create_app().routes}

    assert {
        "/periods/today",
        "/periods/restore",
        "/periods/{period_path:path}",
        "/graphs/{field}/{period_path:path}",
        "/series/{period_path:path}/align",
        "/series/{period_path:path}/align-many",
        "/health",
        "/info",
    } <= paths
