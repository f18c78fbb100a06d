"""
Period Use Cases - Application Layer

Resolve period paths, move between periods and restore persisted period
state. Every result is stamped with whether measurements can exist in the
period, judged against the configured first measurement date.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from src.application.dtos.period_dto import PeriodDTO, PeriodStateDTO
from src.application.models import MeteringConfig
from src.domain.entities.period import DayDescription, PeriodDescription
from src.domain.services.period_codec import deserialize_period
from src.shared import get_logger

logger = get_logger(__name__)


class NavigationDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    UP = "up"


class _PeriodUseCase:
    def __init__(self, metering: MeteringConfig) -> None:
        self._metering = metering

    def _to_dto(self, period: PeriodDescription) -> PeriodDTO:
        return PeriodDTO.from_domain(
            period, has_measurements=self._metering.has_measurements(period)
        )


class ResolvePeriodUseCase(_PeriodUseCase):
    """Use case for decoding a period path."""

    async def execute(self, period_path: str) -> PeriodDTO:
        period = self._metering.resolve(period_path)
        return self._to_dto(period)


class GetTodayUseCase(_PeriodUseCase):
    """Use case returning the day containing the current local time."""

    async def execute(self) -> PeriodDTO:
        return self._to_dto(DayDescription.today(self._metering.now()))


class NavigatePeriodUseCase(_PeriodUseCase):
    """Use case for moving from a period to a neighbouring one."""

    async def execute(
        self, period_path: str, direction: NavigationDirection
    ) -> Optional[PeriodDTO]:
        """
        Navigate one step from the period at ``period_path``.

        Returns:
            The target period, or ``None`` when moving up from the top of the
            hierarchy.

        Raises:
            InvalidPeriodError: If the path does not decode.
            UnsupportedNavigationError: If the period cannot move that way.
        """
        period = self._metering.resolve(period_path)
        target = getattr(period, NavigationDirection(direction).value)()
        if target is None:
            return None

        logger.debug(
            "period.navigated",
            source=period.to_url(),
            direction=NavigationDirection(direction).value,
            target=target.to_url(),
        )
        return self._to_dto(target)


class DrillDownPeriodUseCase(_PeriodUseCase):
    """Use case for zooming into one bucket of a period."""

    async def execute(
        self, period_path: str, index_or_instant: Union[int, datetime]
    ) -> PeriodDTO:
        period = self._metering.resolve(period_path)
        if isinstance(index_or_instant, datetime) and index_or_instant.tzinfo:
            index_or_instant = index_or_instant.astimezone(
                self._metering.tzinfo()
            ).replace(tzinfo=None)
        target = period.at_index(index_or_instant)
        return self._to_dto(target)


class RestorePeriodUseCase(_PeriodUseCase):
    """Use case restoring a persisted period, falling back to today."""

    async def execute(self, state: PeriodStateDTO) -> PeriodDTO:
        period = deserialize_period(
            state.to_record(), now=self._metering.now(), clock=self._metering.now
        )
        return self._to_dto(period)
