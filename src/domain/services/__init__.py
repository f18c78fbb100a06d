"""
Domain Services Package

Pure functions operating on period descriptions and measurements.
"""

from .padding import pad_data
from .period_codec import deserialize_period, period_from_url, serialize_period
from .wire_codec import (
    decode_entries,
    decode_series_mapping,
    encode_entries,
    kw_to_w,
    parse_timestamp,
)

__all__ = [
    "pad_data",
    "period_from_url",
    "serialize_period",
    "deserialize_period",
    "decode_entries",
    "decode_series_mapping",
    "encode_entries",
    "kw_to_w",
    "parse_timestamp",
]
