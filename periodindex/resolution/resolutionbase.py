"""Period Index Contract
----------------------

Abstract base classes every period kind implements.

A period kind ("resolution") maps calendar time onto a signed 64-bit integer,
the monotonic index. Once a kind can convert to and from that index, all
stepping and distance arithmetic is plain integer arithmetic, independent of
month lengths, leap years, week start days or bucket widths.

Contracts:
  - TimeResolution:    to/from monotonic index, succ/pred, between,
                       calendar_instant, name
  - DateResolution:    periods one calendar day or longer
                       (adds calendar_start_date and derived end/day count)
  - SubDateResolution: periods shorter than a day
                       (adds occurs_on_date and first/last on a given day)

A kind implements at most one of the two refinements.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Type, TypeVar

from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from periodindex.ranges.rangecore import TimeRange


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

P = TypeVar("P", bound="TimeResolution")


def check_index(index: int) -> int:
    """
    Validate a monotonic index.

    Args:
        index: Candidate index

    Returns:
        The index, unchanged

    Raises:
        TypeError: If index is not an int (bool is rejected too)
        OverflowError: If index is outside the signed 64-bit domain
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Monotonic index must be an int, got {type(index).__name__}")
    if index < INT64_MIN or index > INT64_MAX:
        raise OverflowError(f"Monotonic index {index} is outside the signed 64-bit range")
    return index


def _check_step(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Step must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Step must be non-negative, got {n}")
    return n


class TimeResolution(ABC):
    """
    A discrete, totally ordered period identified by its monotonic index.

    Instances are immutable values. Equality, ordering and hashing use the
    index and are only defined between periods of exactly the same kind.

    Subclasses implement:
      - calendar_instant(): earliest instant the period covers
      - kind_name(): human-readable kind label
      - from_datetime(dt): period containing a naive datetime
      - parse(text) and __str__: textual round trip
    """

    __slots__ = ("_index",)

    def __init__(self, index: int):
        self._index = check_index(index)

    # ---- Monotonic index ----

    def to_monotonic(self) -> int:
        return self._index

    @classmethod
    def from_monotonic(cls: Type[P], index: int) -> P:
        return cls(index)

    # ---- Stepping ----

    def succ_n(self: P, n: int) -> P:
        """Period n steps later. Raises OverflowError outside the int64 domain."""
        return type(self)(self._index + _check_step(n))

    def pred_n(self: P, n: int) -> P:
        """Period n steps earlier. Raises OverflowError outside the int64 domain."""
        return type(self)(self._index - _check_step(n))

    def succ(self: P) -> P:
        return self.succ_n(1)

    def pred(self: P) -> P:
        return self.pred_n(1)

    def between(self: P, other: P) -> int:
        """
        Signed distance from self to other.

        Negative if other precedes self.

        Example:
            >>> Day.parse("2021-01-01").between(Day.parse("2021-01-31"))
            30
        """
        self._check_same_kind(other)
        return other._index - self._index

    # ---- Calendar / labels ----

    @abstractmethod
    def calendar_instant(self) -> datetime:
        """Earliest naive instant the period covers (display and debugging only)."""

    def naive_date_time(self) -> datetime:
        return self.calendar_instant()

    @classmethod
    @abstractmethod
    def kind_name(cls) -> str:
        """Kind label, e.g. 'Day' or 'Minutes[Length:5]'."""

    def name(self) -> str:
        return type(self).kind_name()

    @classmethod
    @abstractmethod
    def from_datetime(cls: Type[P], dt: datetime) -> P:
        """Period containing the given naive datetime."""

    @classmethod
    @abstractmethod
    def parse(cls: Type[P], text: str) -> P:
        """Parse the textual form produced by str(period)."""

    # ---- Value semantics ----

    def _check_same_kind(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {self.name()} with {type(other).__name__}"
            )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index == other._index

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index != other._index

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index < other._index

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index <= other._index

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index > other._index

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._index >= other._index

    def __hash__(self):
        return hash((type(self), self._index))

    def __setattr__(self, key, value):
        if hasattr(self, "_index"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self):
        return f"{type(self).__name__}({self._index})"


class DateResolution(TimeResolution):
    """
    A period that is one calendar day or longer.

    Subclasses implement calendar_start_date() and from_date(). The end date,
    day count, formatting and rescaling are derived from those.
    """

    __slots__ = ()

    @abstractmethod
    def calendar_start_date(self) -> date:
        """First calendar day the period covers."""

    @classmethod
    @abstractmethod
    def from_date(cls: Type[P], d: date) -> P:
        """Period containing the given date."""

    @classmethod
    def from_datetime(cls: Type[P], dt: datetime) -> P:
        return cls.from_date(dt.date())

    def start(self) -> date:
        return self.calendar_start_date()

    def calendar_instant(self) -> datetime:
        return datetime.combine(self.calendar_start_date(), time())

    def end_date(self) -> date:
        """Last calendar day the period covers."""
        return self.succ().calendar_start_date() - relativedelta(days=1)

    def end(self) -> date:
        return self.end_date()

    def day_count(self) -> int:
        """Number of calendar days in the period."""
        return (self.end_date() - self.calendar_start_date()).days + 1

    def num_days(self) -> int:
        return self.day_count()

    def format(self, fmt: str) -> str:
        """strftime on the start date."""
        return self.calendar_start_date().strftime(fmt)

    def to_sub_date_resolution(self, kind: Type[SubDateResolution]) -> TimeRange:
        """
        Range of sub-day periods covering this period.

        Raises:
            ValueError: If no period of `kind` starts within this period

        Example:
            >>> Day.parse("2021-01-01").to_sub_date_resolution(Hour)
            TimeRange(start=Hour(447072), length=24)
        """
        from periodindex.ranges.rangecore import TimeRange

        return TimeRange(self, 1).to_sub_date_resolution(kind)

    def rescale(self, kind: Type[DateResolution]) -> TimeRange:
        """
        Range of another date-aligned kind touching this period.

        Example:
            >>> Quarter.parse("Q1-2021").rescale(Month)
            TimeRange(start=Month(24252), length=3)
        """
        from periodindex.ranges.rangecore import TimeRange

        return TimeRange(self, 1).rescale(kind)


class SubDateResolution(TimeResolution):
    """A period shorter than a day."""

    __slots__ = ()

    @abstractmethod
    def occurs_on_date(self) -> date:
        """Calendar day the period falls on."""

    @classmethod
    @abstractmethod
    def first_on_date(cls: Type[P], day: date) -> P:
        """First period of this kind that occurs on the given day."""

    @classmethod
    def last_on_date(cls: Type[P], day: date) -> P:
        """Last period of this kind that occurs on the given day."""
        return cls.first_on_date(day + relativedelta(days=1)).pred()

    # Names kept from the calendar-day vocabulary
    @classmethod
    def first_on_day(cls: Type[P], day: date) -> P:
        return cls.first_on_date(day)

    @classmethod
    def last_on_day(cls: Type[P], day: date) -> P:
        return cls.last_on_date(day)


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "check_index",
    "TimeResolution",
    "DateResolution",
    "SubDateResolution",
]
