"""Contiguous Time Ranges
-----------------------

A TimeRange is an inclusive run of consecutive periods of one kind, stored as
(start, length) so it takes constant space however long it is.

    TimeRange(start, length) covers start, start.succ(), ..., start.succ_n(length - 1)

Key rules:
  1. A range always holds at least one period. Operations that would produce
     an empty range return None instead.
  2. Both operands of the algebra must be ranges of the same period kind.
  3. Ranges are immutable; every operation returns new ranges.

Examples:
    >>> a = TimeRange.from_start_end(Day.parse("2021-01-01"), Day.parse("2021-01-10"))
    >>> b = TimeRange.from_start_end(Day.parse("2021-01-05"), Day.parse("2021-01-20"))
    >>> str(a.intersect(b))
    '2021-01-05 to 2021-01-10'
    >>> a.compare(b)
    <TimeRangeComparison.EARLIER: 'earlier'>
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Optional, Set, Tuple, Type, TypeVar

from periodindex.resolution.resolutionbase import (
    DateResolution,
    SubDateResolution,
    TimeResolution,
    check_index,
)

P = TypeVar("P", bound=TimeResolution)


class TimeRangeComparison(Enum):
    """
    How one range sits relative to another, derived from subtract().

    SUPERSET: the other range is strictly inside, with remainders on both sides
    EARLIER:  only a remainder before the other range
    LATER:    only a remainder after the other range
    SUBSET:   no remainder (inside or equal to the other range)

    Partial overlap is not a separate case; use intersect() for that.
    """

    SUPERSET = "superset"
    SUBSET = "subset"
    EARLIER = "earlier"
    LATER = "later"


@dataclass(frozen=True)
class TimeRange(Generic[P]):
    """
    Inclusive range of `length` consecutive periods beginning at `start`.

    Raises:
        TypeError: If start is not a period or length is not an int
        ValueError: If length < 1
        OverflowError: If the end lies outside the signed 64-bit index domain
    """

    start: P
    length: int

    def __post_init__(self):
        if not isinstance(self.start, TimeResolution):
            raise TypeError(f"Range start must be a period, got {type(self.start).__name__}")
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise TypeError(f"Range length must be an int, got {type(self.length).__name__}")
        if self.length < 1:
            raise ValueError("Time range cannot be created with fewer than one period")
        check_index(self.start.to_monotonic() + self.length - 1)

    # ---- Construction ----

    @classmethod
    def maybe_new(cls, start: P, length: int) -> Optional[TimeRange[P]]:
        """Range of `length` periods, or None when length < 1."""
        if length < 1:
            return None
        return cls(start, length)

    @classmethod
    def from_start_end(cls, start: P, end: P) -> Optional[TimeRange[P]]:
        """
        Range from start to end inclusive, or None if start > end.

        Example:
            >>> TimeRange.from_start_end(Month.parse("Jan-2021"), Month.parse("Mar-2021")).length
            3
        """
        if start > end:
            return None
        return cls(start, 1 + start.between(end))

    @classmethod
    def from_set(cls, periods: Iterable[P]) -> Optional[TimeRange[P]]:
        """
        Range covering exactly the given periods.

        Returns None if the set is empty or not contiguous.
        """
        ordered = sorted(set(periods))
        if not ordered:
            return None
        first, last = ordered[0], ordered[-1]
        # Distinct sorted periods are contiguous iff they span exactly len - 1 steps
        if first.between(last) != len(ordered) - 1:
            return None
        return cls(first, len(ordered))

    @classmethod
    def from_indexes(cls, kind: Type[P], indexes: Iterable[int]) -> List[TimeRange[P]]:
        """
        Group raw monotonic indexes into maximal contiguous ranges.

        Single pass over the sorted, de-duplicated indexes: the open range is
        extended while the next index is previous + 1, otherwise it is closed
        and a new one opened. Result is disjoint and ascending.

        Example:
            >>> [(r.start.to_monotonic(), r.length) for r in TimeRange.from_indexes(Day, {1, 2, 3, 7, 8, 10})]
            [(1, 3), (7, 2), (10, 1)]
        """
        ranges: List[TimeRange[P]] = []
        run_start: Optional[int] = None
        prev: Optional[int] = None

        for idx in sorted(set(indexes)):
            if prev is not None and idx == prev + 1:
                prev = idx
                continue
            if run_start is not None:
                ranges.append(cls(kind.from_monotonic(run_start), prev - run_start + 1))
            run_start = prev = idx

        if run_start is not None:
            ranges.append(cls(kind.from_monotonic(run_start), prev - run_start + 1))

        return ranges

    # ---- Accessors ----

    @property
    def end(self) -> P:
        return self.start.succ_n(self.length - 1)

    def __len__(self):
        return self.length

    def kind(self) -> Type[P]:
        return type(self.start)

    # ---- Queries ----

    def contains(self, point: P) -> bool:
        """True if start <= point <= end."""
        return self.start <= point <= self.end

    def __contains__(self, point) -> bool:
        if type(point) is not type(self.start):
            return False
        return self.contains(point)

    def index_of(self, point: P) -> Optional[int]:
        """Offset of point within the range, or None if outside."""
        if not self.contains(point):
            return None
        return self.start.between(point)

    # ---- Algebra ----

    def _check_same_kind(self, other: TimeRange) -> None:
        if not isinstance(other, TimeRange):
            raise TypeError(f"Expected a TimeRange, got {type(other).__name__}")
        if type(other.start) is not type(self.start):
            raise TypeError(
                f"Cannot combine a {self.start.name()} range with a {other.start.name()} range"
            )

    def intersect(self, other: TimeRange[P]) -> Optional[TimeRange[P]]:
        """Overlap of the two ranges, or None if they are disjoint."""
        self._check_same_kind(other)
        return TimeRange.from_start_end(
            max(self.start, other.start),
            min(self.end, other.end),
        )

    def union(self, other: TimeRange[P]) -> Optional[TimeRange[P]]:
        """
        Smallest range covering both, only when they intersect.

        Disjoint (including merely adjacent) ranges return None.
        """
        if self.intersect(other) is None:
            return None
        return TimeRange.from_start_end(
            min(self.start, other.start),
            max(self.end, other.end),
        )

    def subtract(self, other: TimeRange[P]) -> Tuple[Optional[TimeRange[P]], Optional[TimeRange[P]]]:
        """
        Parts of self not covered by other, as (left, right).

        left  = self.start .. min(other.start - 1, self.end)
        right = max(other.end + 1, self.start) .. self.end

        Either side is None when empty. An empty side is never computed, so
        ranges touching the ends of the index domain do not overflow.
        """
        self._check_same_kind(other)
        left = right = None
        if other.start > self.start:
            left = TimeRange.from_start_end(self.start, min(other.start.pred(), self.end))
        if other.end < self.end:
            right = TimeRange.from_start_end(max(other.end.succ(), self.start), self.end)
        return left, right

    def compare(self, other: TimeRange[P]) -> TimeRangeComparison:
        left, right = self.subtract(other)
        if left is not None and right is not None:
            return TimeRangeComparison.SUPERSET
        if left is not None:
            return TimeRangeComparison.EARLIER
        if right is not None:
            return TimeRangeComparison.LATER
        return TimeRangeComparison.SUBSET

    # ---- Iteration / export ----

    def iterate(self) -> Iterator[P]:
        """Lazily yield the `length` periods from start to end."""
        kind = type(self.start)
        first = self.start.to_monotonic()
        for idx in range(first, first + self.length):
            yield kind.from_monotonic(idx)

    def __iter__(self) -> Iterator[P]:
        return self.iterate()

    def to_indexes(self) -> List[int]:
        first = self.start.to_monotonic()
        return list(range(first, first + self.length))

    def to_set(self) -> Set[P]:
        return set(self.iterate())

    def to_frame(self):
        """One row per period as a pandas DataFrame (see rangeframe.range_to_frame)."""
        from periodindex.ranges.rangeframe import range_to_frame

        return range_to_frame(self)

    # ---- Rescaling ----

    def to_sub_date_resolution(self, kind: Type[SubDateResolution]) -> TimeRange:
        """
        Range of sub-day periods covering this range of date-aligned periods.

        Raises:
            TypeError: If this is not a range of date-aligned periods
            ValueError: If no period of `kind` starts within the covered days
                (buckets wider than a day can skip whole days)

        Example:
            >>> days = TimeRange(Day.parse("2021-01-01"), 2)
            >>> days.to_sub_date_resolution(Hour).length
            48
        """
        if not isinstance(self.start, DateResolution):
            raise TypeError(f"{self.start.name()} is not a date-aligned period kind")
        first_day = self.start.calendar_start_date()
        last_day = self.end.end_date()
        result = TimeRange.from_start_end(
            kind.first_on_date(first_day),
            kind.last_on_date(last_day),
        )
        if result is None:
            raise ValueError(
                f"No {kind.kind_name()} period starts between {first_day} and {last_day}"
            )
        return result

    def rescale(self, kind: Type[DateResolution]) -> TimeRange:
        """Range of another date-aligned kind touching this range."""
        if not isinstance(self.start, DateResolution):
            raise TypeError(f"{self.start.name()} is not a date-aligned period kind")
        first = kind.from_date(self.start.calendar_start_date())
        last = kind.from_date(self.end.end_date())
        return TimeRange(first, 1 + first.between(last))

    def __str__(self):
        return f"{self.start} to {self.end}"


def coalesce(kind: Type[P], indexes: Iterable[int]) -> List[TimeRange[P]]:
    """Group raw monotonic indexes into maximal contiguous ranges of `kind`."""
    return TimeRange.from_indexes(kind, indexes)


__all__ = [
    "TimeRange",
    "TimeRangeComparison",
    "coalesce",
]
