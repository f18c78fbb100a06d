"""
Series Use Cases - Application Layer

Decode wire measurements and align them on the bucket grid of a period.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

from src.application.dtos.series_dto import (
    MultiSeriesResponseDTO,
    SeriesResponseDTO,
    ValueWithTimestampDTO,
)
from src.application.models import MeteringConfig
from src.domain.entities.measurement import (
    MeasurementField,
    printable_total,
    unit_to_string,
)
from src.domain.services.padding import pad_data
from src.domain.services.wire_codec import (
    WATTS_PER_KILOWATT,
    decode_entries,
    decode_series_mapping,
)
from src.shared import get_logger

logger = get_logger(__name__)


class AlignSeriesUseCase:
    """Use case aligning one measurement series on a period."""

    def __init__(self, metering: MeteringConfig) -> None:
        self._metering = metering

    async def execute(
        self,
        period_path: str,
        pairs: Iterable[Sequence[Any]],
        field: Optional[MeasurementField] = None,
    ) -> SeriesResponseDTO:
        """
        Align ``pairs`` on the buckets of the period at ``period_path``.

        Current power readings are reported by the meter in kW and are
        converted to W before rounding.

        Raises:
            InvalidPeriodError: If the path does not decode.
            MeasurementPayloadError: If a pair cannot be decoded.
        """
        period = self._metering.resolve(period_path)
        field = MeasurementField(field) if field is not None else None
        scale = WATTS_PER_KILOWATT if field is MeasurementField.CURRENT_POWER else 1

        entries = decode_entries(
            pairs,
            local_tz=self._metering.tzinfo(),
            precision=self._metering.value_precision,
            scale=scale,
        )
        aligned = pad_data(entries, period)

        total = sum(entry.value for entry in aligned)
        printable = printable_total(total)
        if field is not None:
            printable = f"{printable} {unit_to_string(field)}"

        logger.info(
            "series.aligned",
            period=period.to_url(),
            field=field.value if field else None,
            received=len(entries),
            aligned=len(aligned),
        )
        return SeriesResponseDTO(
            period=period.to_url(),
            field=field,
            bucket_count=period.bucket_count(),
            entries=[ValueWithTimestampDTO.from_domain(entry) for entry in aligned],
            total=round(total, self._metering.value_precision),
            printable_total=printable,
        )


class AlignSeriesMappingUseCase:
    """Use case aligning several named series on the same period."""

    def __init__(self, metering: MeteringConfig) -> None:
        self._metering = metering

    async def execute(
        self, period_path: str, payload: Mapping[str, Iterable[Sequence[Any]]]
    ) -> MultiSeriesResponseDTO:
        period = self._metering.resolve(period_path)
        decoded = decode_series_mapping(
            payload,
            local_tz=self._metering.tzinfo(),
            precision=self._metering.value_precision,
        )
        series = {
            name: [
                ValueWithTimestampDTO.from_domain(entry)
                for entry in pad_data(entries, period)
            ]
            for name, entries in decoded.items()
        }

        logger.info(
            "series.mapping_aligned", period=period.to_url(), series=len(series)
        )
        return MultiSeriesResponseDTO(
            period=period.to_url(),
            bucket_count=period.bucket_count(),
            series=series,
        )
