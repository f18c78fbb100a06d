from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.application.dtos.period_dto import PeriodStateDTO
from src.application.use_cases.period_use_cases import (
    DrillDownPeriodUseCase,
    GetTodayUseCase,
    NavigatePeriodUseCase,
    NavigationDirection,
    ResolvePeriodUseCase,
    RestorePeriodUseCase,
)
from src.domain.entities.errors import InvalidPeriodError, UnsupportedNavigationError
from src.domain.entities.period import PeriodKind


@pytest.mark.asyncio
async def test_resolve_period(metering_config) -> None:
    dto = await ResolvePeriodUseCase(metering_config).execute("month/2022/2")

    assert dto.kind is PeriodKind.MONTH
    assert dto.bucket_count == 28
    assert dto.has_measurements is True


@pytest.mark.asyncio
async def test_resolve_future_period_has_no_measurements(metering_config) -> None:
    dto = await ResolvePeriodUseCase(metering_config).execute("/day/2022/3/16")
    assert dto.has_measurements is False


@pytest.mark.asyncio
async def test_resolve_invalid_path_raises(metering_config) -> None:
    with pytest.raises(InvalidPeriodError):
        await ResolvePeriodUseCase(metering_config).execute("/month/2022/13")


@pytest.mark.asyncio
async def test_today_uses_configured_clock(metering_config) -> None:
    dto = await GetTodayUseCase(metering_config).execute()
    assert dto.url == "/day/2022/3/15"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,direction,expected",
    [
        ("/month/2022/1", NavigationDirection.PREVIOUS, "/month/2021/12"),
        ("/day/2022/2/28", NavigationDirection.NEXT, "/day/2022/3/1"),
        ("/day/2022/3/3", NavigationDirection.UP, "/month/2022/3"),
        ("/hour/2022/3/3/0", "previous", "/hour/2022/3/2/23"),
    ],
)
async def test_navigate(metering_config, path, direction, expected) -> None:
    dto = await NavigatePeriodUseCase(metering_config).execute(path, direction)
    assert dto is not None
    assert dto.url == expected


@pytest.mark.asyncio
async def test_navigate_up_from_year_returns_none(metering_config) -> None:
    use_case = NavigatePeriodUseCase(metering_config)
    assert await use_case.execute("/year/2022", NavigationDirection.UP) is None


@pytest.mark.asyncio
async def test_navigate_last_hour_raises(metering_config) -> None:
    with pytest.raises(UnsupportedNavigationError):
        await NavigatePeriodUseCase(metering_config).execute(
            "/recent", NavigationDirection.NEXT
        )


@pytest.mark.asyncio
async def test_drill_down_by_index_and_instant(metering_config) -> None:
    use_case = DrillDownPeriodUseCase(metering_config)

    by_index = await use_case.execute("/month/2022/2", 0)
    by_instant = await use_case.execute("/month/2022/2", datetime(2022, 2, 1))

    assert by_index.url == by_instant.url == "/day/2022/2/1"


@pytest.mark.asyncio
async def test_drill_down_converts_aware_instant(metering_config) -> None:
    use_case = DrillDownPeriodUseCase(metering_config)

    dto = await use_case.execute(
        "/day/2022/3/3", datetime(2022, 3, 3, 13, 15, tzinfo=timezone.utc)
    )

    assert dto.url == "/hour/2022/3/3/14"


@pytest.mark.asyncio
async def test_drill_down_below_minute_raises(metering_config) -> None:
    with pytest.raises(UnsupportedNavigationError):
        await DrillDownPeriodUseCase(metering_config).execute(
            "/minute/2022/3/3/10/5", 0
        )


@pytest.mark.asyncio
async def test_restore_known_record(metering_config) -> None:
    state = PeriodStateDTO(type="MonthDescription", year=2022, month=1)
    dto = await RestorePeriodUseCase(metering_config).execute(state)
    assert dto.url == "/month/2022/2"


@pytest.mark.asyncio
async def test_restore_malformed_record_falls_back_to_today(metering_config) -> None:
    state = PeriodStateDTO(type="DayDescription", year=2022, month=1, day=31)
    dto = await RestorePeriodUseCase(metering_config).execute(state)
    assert dto.url == "/day/2022/3/15"
