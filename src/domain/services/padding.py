"""
Domain Service - Series Alignment

Turns a sparse list of measurements into a dense series with exactly one
entry per bucket of a period.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List

from src.domain.entities.measurement import ValueWithTimestamp
from src.domain.entities.period import PeriodDescription, PeriodSize
from src.shared import get_logger

logger = get_logger(__name__)


def pad_data(
    entries: Iterable[ValueWithTimestamp], period: PeriodDescription
) -> List[ValueWithTimestamp]:
    """Align ``entries`` on the bucket grid of ``period``.

    The result holds one entry per bucket, ascending by bucket start. A
    bucket takes the first input entry that normalizes into it; buckets
    without data get a zero entry stamped at the bucket start. Entries that
    fall outside the period do not belong to any bucket and are left out.

    Year periods are returned unchanged: monthly data is dense upstream.
    """
    entries = list(entries)

    if period.period_size is PeriodSize.YEAR:
        return entries

    by_bucket: Dict[datetime, ValueWithTimestamp] = {}
    duplicates = 0
    for entry in entries:
        bucket = period.normalize(entry.timestamp)
        if bucket in by_bucket:
            duplicates += 1
            continue
        by_bucket[bucket] = entry

    result: List[ValueWithTimestamp] = []
    padded = 0
    for bucket_start in period.bucket_starts():
        entry = by_bucket.pop(bucket_start, None)
        if entry is None:
            entry = ValueWithTimestamp(timestamp=bucket_start, value=0.0)
            padded += 1
        result.append(entry)

    if duplicates:
        logger.warning(
            "series.duplicate_buckets",
            period=period.to_url(),
            duplicates=duplicates,
        )
    if by_bucket:
        logger.debug(
            "series.entries_outside_period",
            period=period.to_url(),
            ignored=len(by_bucket),
        )

    logger.debug(
        "series.padded",
        period=period.to_url(),
        buckets=len(result),
        padded=padded,
    )
    return result
