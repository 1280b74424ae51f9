"""Tabular export of time ranges.

Turns ranges into pandas DataFrames with one row per period, using the same
start_ts / end_ts convention as the rest of the package (end_ts is the last
microsecond the period covers).
"""

from datetime import timedelta
from typing import Iterable

import pandas as pd

from periodindex.ranges.rangecore import TimeRange


RANGE_COLUMNS = ["range_id", "kind", "index", "period", "start_ts", "end_ts"]


def _period_rows(time_range: TimeRange, range_id: int) -> list[dict]:
    kind = time_range.start.name()
    rows = []
    for period in time_range:
        rows.append({
            "range_id": range_id,
            "kind": kind,
            "index": period.to_monotonic(),
            "period": str(period),
            "start_ts": period.calendar_instant(),
            "end_ts": period.succ().calendar_instant() - timedelta(microseconds=1),
        })
    return rows


def range_to_frame(time_range: TimeRange) -> pd.DataFrame:
    """
    One row per period of a range.

    Args:
        time_range: Range to export

    Returns:
        DataFrame with columns range_id, kind, index, period, start_ts, end_ts

    Example:
        >>> df = range_to_frame(TimeRange(Month.parse("Jan-2021"), 3))
        >>> df["period"].tolist()
        ['Jan-2021', 'Feb-2021', 'Mar-2021']
    """
    return pd.DataFrame(_period_rows(time_range, 0), columns=RANGE_COLUMNS)


def ranges_to_frame(ranges: Iterable[TimeRange]) -> pd.DataFrame:
    """
    Concatenate several ranges, numbering them with range_id in input order.

    Useful for inspecting the output of coalesce() or a list of cache gaps.
    """
    rows = []
    for range_id, time_range in enumerate(ranges):
        rows.extend(_period_rows(time_range, range_id))
    return pd.DataFrame(rows, columns=RANGE_COLUMNS)


__all__ = [
    "RANGE_COLUMNS",
    "range_to_frame",
    "ranges_to_frame",
]
