"""Date-Aligned Period Kinds
--------------------------

Day, Month, Quarter and Year on the proleptic Gregorian calendar.

Monotonic indexes:
  - Day:     days since 0000-01-01 (so 0001-01-01 is 366)
  - Month:   year * 12 + (month - 1)
  - Quarter: year * 4 + (quarter - 1)
  - Year:    the year number

Python's date type starts at 0001-01-01, so calendar conversions are only
available from that day on. Indexes before it remain valid for arithmetic.

Text forms:
  - Day:     "2021-01-01"
  - Month:   "Jan-2021"
  - Quarter: "Q1-2021" (an ISO date parses to the quarter containing it)
  - Year:    "2021"
"""

from __future__ import annotations
import re
from datetime import date
from typing import Optional, Union

from periodindex.resolution.resolutionbase import DateResolution
from periodindex.resolution.resolutionformat import register_resolution
from periodindex.resolution.resolutionnormalize import (
    MONTH_ABBREVIATIONS,
    normalize_period_text,
    parse_iso_date,
    month_num_from_name,
    extract_quarter,
)
from periodindex.resolution.resolutionweek import Week


# Days from 0000-01-01 to 0001-01-01 (year 0 is a leap year)
_DAY_ORDINAL_OFFSET = 365


# ---- Day ----

class Day(DateResolution):
    """
    A single calendar day.

    Example:
        >>> d = Day.parse("2021-01-01")
        >>> d.to_monotonic()
        738156
        >>> str(d.succ())
        '2021-01-02'
    """

    __slots__ = ()

    @classmethod
    def kind_name(cls) -> str:
        return "Day"

    @classmethod
    def from_date(cls, d: date) -> Day:
        return cls(d.toordinal() + _DAY_ORDINAL_OFFSET)

    def calendar_start_date(self) -> date:
        return date.fromordinal(self._index - _DAY_ORDINAL_OFFSET)

    def end_date(self) -> date:
        return self.calendar_start_date()

    def day_count(self) -> int:
        return 1

    @classmethod
    def parse(cls, text: str) -> Day:
        d = parse_iso_date(normalize_period_text(text))
        if d is None:
            raise ValueError(f"Error parsing Day from input: {text!r}")
        return cls.from_date(d)

    def year(self) -> Year:
        return Year.from_date(self.calendar_start_date())

    def quarter(self) -> Quarter:
        return Quarter.from_date(self.calendar_start_date())

    def month(self) -> Month:
        return Month.from_date(self.calendar_start_date())

    def week(self, start_day: Optional[Union[str, int]] = None) -> Week:
        """Week containing this day. Defaults to the configured week start."""
        return Week.starting(start_day).from_date(self.calendar_start_date())

    def year_num(self) -> int:
        return self.calendar_start_date().year

    def month_num(self) -> int:
        return self.calendar_start_date().month

    def __str__(self):
        return self.calendar_start_date().isoformat()


# ---- Month ----

class Month(DateResolution):
    """
    A calendar month.

    Example:
        >>> m = Month.parse("Jan-2021")
        >>> m.to_monotonic()
        24252
        >>> m.day_count()
        31
    """

    __slots__ = ()

    @classmethod
    def kind_name(cls) -> str:
        return "Month"

    @classmethod
    def from_date(cls, d: date) -> Month:
        return cls(d.year * 12 + d.month - 1)

    def calendar_start_date(self) -> date:
        year, month0 = divmod(self._index, 12)
        return date(year, month0 + 1, 1)

    @classmethod
    def parse(cls, text: str) -> Month:
        """Parse 'Jan-2021'."""
        text_norm = normalize_period_text(text)
        match = re.fullmatch(r"([A-Za-z]{3})-(\d{1,4})", text_norm)
        if not match:
            raise ValueError(f"Error parsing Month from input: {text!r}")
        month = month_num_from_name(match.group(1))
        if month is None:
            raise ValueError(f"Error parsing Month from input: unknown month name {match.group(1)!r}")
        return cls.from_date(date(int(match.group(2)), month, 1))

    def year(self) -> Year:
        return Year.from_date(self.calendar_start_date())

    def quarter(self) -> Quarter:
        return Quarter.from_date(self.calendar_start_date())

    def year_num(self) -> int:
        return self._index // 12

    def month_num(self) -> int:
        return self._index % 12 + 1

    def __str__(self):
        return f"{MONTH_ABBREVIATIONS[self.month_num() - 1]}-{self.year_num():04d}"


# ---- Quarter ----

class Quarter(DateResolution):
    """
    A calendar quarter (Q1 = Jan-Mar, ..., Q4 = Oct-Dec).

    Example:
        >>> q = Quarter.parse("Q3-2021")
        >>> q.calendar_start_date()
        datetime.date(2021, 7, 1)
        >>> str(q.succ())
        'Q4-2021'
    """

    __slots__ = ()

    @classmethod
    def kind_name(cls) -> str:
        return "Quarter"

    @classmethod
    def from_date(cls, d: date) -> Quarter:
        return cls(d.year * 4 + (d.month - 1) // 3)

    def calendar_start_date(self) -> date:
        return date(self.year_num(), self.quarter_num() * 3 - 2, 1)

    @classmethod
    def parse(cls, text: str) -> Quarter:
        """Parse 'Q1-2021', or an ISO date to the quarter containing it."""
        text_norm = normalize_period_text(text)
        quarter, year = extract_quarter(text_norm)
        if quarter is not None:
            return cls(year * 4 + quarter - 1)
        d = parse_iso_date(text_norm)
        if d is not None:
            return cls.from_date(d)
        raise ValueError(f"Error parsing Quarter from input: {text!r}")

    def first_month(self) -> Month:
        return Month.from_date(self.calendar_start_date())

    def last_month(self) -> Month:
        return Month.from_date(self.end_date())

    def year(self) -> Year:
        return Year(self.year_num())

    def year_num(self) -> int:
        return self._index // 4

    def quarter_num(self) -> int:
        return self._index % 4 + 1

    def __str__(self):
        return f"Q{self.quarter_num()}-{self.year_num()}"


# ---- Year ----

class Year(DateResolution):
    """
    A calendar year.

    Example:
        >>> y = Year.parse("2020")
        >>> y.day_count()
        366
    """

    __slots__ = ()

    @classmethod
    def kind_name(cls) -> str:
        return "Year"

    @classmethod
    def from_date(cls, d: date) -> Year:
        return cls(d.year)

    def calendar_start_date(self) -> date:
        return date(self._index, 1, 1)

    @classmethod
    def parse(cls, text: str) -> Year:
        text_norm = normalize_period_text(text)
        if not re.fullmatch(r"-?\d+", text_norm):
            raise ValueError(f"Error parsing Year from input: {text!r}")
        return cls(int(text_norm))

    def first_month(self) -> Month:
        return Month(self._index * 12)

    def last_month(self) -> Month:
        return Month(self._index * 12 + 11)

    def first_quarter(self) -> Quarter:
        return Quarter(self._index * 4)

    def last_quarter(self) -> Quarter:
        return Quarter(self._index * 4 + 3)

    def year_num(self) -> int:
        return self._index

    def __str__(self):
        return str(self._index)


register_resolution(Day, label="Day")
register_resolution(Month, label="Month")
register_resolution(Quarter, label="Quarter")
register_resolution(Year, label="Year")


__all__ = [
    "Day",
    "Month",
    "Quarter",
    "Year",
]
