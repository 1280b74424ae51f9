"""Contiguous ranges of periods and their set algebra."""

from periodindex.ranges.rangecore import (
    TimeRange,
    TimeRangeComparison,
    coalesce,
)
from periodindex.ranges.rangeframe import (
    range_to_frame,
    ranges_to_frame,
)

__all__ = [
    "TimeRange",
    "TimeRangeComparison",
    "coalesce",
    "range_to_frame",
    "ranges_to_frame",
]
