from __future__ import annotations

import pytest

from src.application.use_cases.graph_use_cases import DescribeGraphUseCase
from src.domain.entities.errors import InvalidPeriodError
from src.domain.entities.measurement import MeasurementField


@pytest.mark.asyncio
async def test_describe_graph(metering_config) -> None:
    dto = await DescribeGraphUseCase(metering_config).execute(
        MeasurementField.STROOM, "/day/2022/3/3"
    )
    assert dto.max_y == 2
    assert dto.unit == "kWh"
    assert dto.displayed_tick_indices == list(range(23))


@pytest.mark.asyncio
async def test_describe_graph_invalid_period(metering_config) -> None:
    with pytest.raises(InvalidPeriodError):
        await DescribeGraphUseCase(metering_config).execute(
            MeasurementField.GAS, "/fortnight/2022"
        )
