from __future__ import annotations

import asyncio
from datetime import date

import pytest

from src.application.models import MeteringConfig
from src.application.use_cases.period_use_cases import ResolvePeriodUseCase
from src.main.config import AppSettings, MeteringSettings
from src.main.container import app_lifespan, get_container, init_container


@pytest.mark.asyncio
async def test_init_and_get_container() -> None:
    settings = AppSettings()
    container = init_container(settings)
    assert hasattr(container, "metering_config")
    assert get_container() is container

    async with app_lifespan() as managed:
        assert managed is container


def test_metering_config_built_from_settings() -> None:
    settings = AppSettings(
        metering=MeteringSettings(
            first_measurement_date=date(2016, 5, 1),
            timezone="UTC",
            value_precision=2,
        )
    )
    container = init_container(settings)

    metering = container.metering_config()

    assert isinstance(metering, MeteringConfig)
    assert metering.first_measurement == date(2016, 5, 1)
    assert metering.timezone == "UTC"
    assert metering.value_precision == 2
    assert container.metering_config() is metering


def test_use_cases_are_factories() -> None:
    container = init_container(AppSettings())
    first = container.resolve_period_use_case()
    assert isinstance(first, ResolvePeriodUseCase)
    assert container.resolve_period_use_case() is not first


def test_system_info_environment_is_plain_string() -> None:
    container = init_container(AppSettings())
    assert container.system_info().environment == "development"


@pytest.mark.asyncio
async def test_app_lifespan_yields_container() -> None:
    container = init_container(AppSettings())

    async with app_lifespan() as managed:
        await asyncio.sleep(0)
        assert managed.metering_config() is container.metering_config()


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
