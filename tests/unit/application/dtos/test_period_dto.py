from __future__ import annotations

from datetime import datetime

from src.application.dtos.period_dto import (
    PeriodDTO,
    PeriodNavigationDTO,
    PeriodStateDTO,
)
from src.domain.entities.period import (
    DayDescription,
    LastHourDescription,
    PeriodKind,
    YearDescription,
)


def test_period_dto_from_day(march_third) -> None:
    dto = PeriodDTO.from_domain(march_third, has_measurements=True)

    assert dto.kind is PeriodKind.DAY
    assert dto.url == "/day/2022/3/3"
    assert dto.title == "Do 3 maart 2022"
    assert dto.bucket_count == 24
    assert dto.start == datetime(2022, 3, 3)
    assert len(dto.chart_ticks) == 12
    assert dto.time_format == "%H:%M"
    assert dto.navigation.previous == "/day/2022/3/2"
    assert dto.navigation.next == "/day/2022/3/4"
    assert dto.navigation.up == "/month/2022/3"
    assert dto.state.to_record() == {
        "type": "DayDescription",
        "year": 2022,
        "month": 2,
        "day": 3,
    }


def test_navigation_stops_at_year() -> None:
    navigation = PeriodNavigationDTO.from_domain(YearDescription(2022))
    assert navigation.up is None
    assert navigation.previous == "/year/2021"


def test_navigation_is_empty_for_last_hour(fake_clock) -> None:
    navigation = PeriodNavigationDTO.from_domain(LastHourDescription(clock=fake_clock))
    assert navigation.previous is None
    assert navigation.next is None
    assert navigation.up is None


def test_period_state_keeps_unknown_fields() -> None:
    state = PeriodStateDTO.model_validate({"type": "WeekDescription", "week": 9})
    assert state.to_record() == {"type": "WeekDescription", "week": 9}


def test_period_dto_json_serialization() -> None:
    dto = PeriodDTO.from_domain(DayDescription(2022, 2, 3), has_measurements=False)
    body = dto.model_dump(mode="json")
    assert body["kind"] == "day"
    assert body["graph_tick_positions"] == "between_values"
    assert body["has_measurements"] is False


def test_navigation_stops_at_calendar_edges() -> None:
    first = PeriodNavigationDTO.from_domain(DayDescription(1, 0, 1))
    last = PeriodNavigationDTO.from_domain(YearDescription(9999))

    assert first.previous is None
    assert first.next == "/day/1/1/2"
    assert last.next is None
    assert last.previous == "/year/9998"
