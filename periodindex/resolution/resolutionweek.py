"""Week Period Kind
-----------------

Seven-day weeks starting on a configurable weekday.

Each start day gets its own Week subclass, so a Monday week and a Sunday
week are different kinds: they never compare equal and cannot be mixed in
one range. Subclasses are created on first use and cached:

    >>> MondayWeek = Week.starting("Monday")
    >>> MondayWeek is Week.starting(0)
    True

Week index 0 is the week starting on the first start weekday on or after
2021-01-04 (a Monday). Text form: "Week starting 2021-12-06".

Monday weeks are ISO 8601 weeks and also parse ISO week notation
("2025-W02") through the isoweek library.
"""

from __future__ import annotations
from datetime import date
from functools import lru_cache
from typing import Optional, Type, Union

from dateutil.relativedelta import relativedelta

try:
    from isoweek import Week as IsoWeek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from periodindex.resolution.resolutionbase import DateResolution
from periodindex.resolution.resolutionformat import register_resolution
from periodindex.resolution.resolutionnormalize import (
    WEEKDAY_NAMES,
    normalize_period_text,
    parse_iso_date,
    weekday_num_from_name,
    extract_iso_week,
)
from periodindex.utils.config import get_default_week_start


_BASE_MONDAY = date(2021, 1, 4)
_PREFIX = "Week starting "


def _base(weekday: int) -> date:
    return _BASE_MONDAY + relativedelta(days=weekday)


def _resolve_weekday(start_day: Union[str, int]) -> int:
    if isinstance(start_day, int) and not isinstance(start_day, bool):
        if 0 <= start_day <= 6:
            return start_day
        raise ValueError(f"Week start day must be 0 (Monday) - 6 (Sunday), got {start_day}")
    num = weekday_num_from_name(str(start_day))
    if num is None:
        raise ValueError(f"Unknown week start day: {start_day!r}")
    return num


class Week(DateResolution):
    """
    A seven-day week. Use Week.starting(day) to get a concrete kind.

    Example:
        >>> W = Week.starting("Monday")
        >>> w = W.parse("Week starting 2021-12-06")
        >>> str(w.succ())
        'Week starting 2021-12-13'
        >>> w.name()
        'Week[StartDay:Monday]'
    """

    __slots__ = ()

    # Set on the generated subclasses
    START_WEEKDAY: Optional[int] = None

    def __init__(self, index: int):
        if type(self).START_WEEKDAY is None:
            raise TypeError("Use Week.starting(day) to choose a week start day")
        super().__init__(index)

    @classmethod
    def starting(cls, start_day: Optional[Union[str, int]] = None) -> Type[Week]:
        """
        Week kind starting on the given weekday.

        Args:
            start_day: Weekday name ("Monday", "tue", ...) or number
                (0 = Monday ... 6 = Sunday). Defaults to
                PERIODINDEX_DEFAULT_WEEK_START (Monday if unset).

        Returns:
            Week subclass for that start day
        """
        if start_day is None:
            start_day = get_default_week_start()
        return _week_class(_resolve_weekday(start_day))

    @classmethod
    def default(cls) -> Type[Week]:
        return cls.starting(None)

    @classmethod
    def start_day_name(cls) -> str:
        return WEEKDAY_NAMES[cls.START_WEEKDAY]

    @classmethod
    def kind_name(cls) -> str:
        return f"Week[StartDay:{cls.start_day_name()}]"

    @classmethod
    def from_date(cls, d: date) -> Week:
        return cls((d - _base(cls.START_WEEKDAY)).days // 7)

    def calendar_start_date(self) -> date:
        return _base(self.START_WEEKDAY) + relativedelta(days=self._index * 7)

    def day_count(self) -> int:
        return 7

    @classmethod
    def parse(cls, text: str) -> Week:
        """
        Parse 'Week starting YYYY-MM-DD'.

        The date must fall on this kind's start weekday. Monday weeks also
        accept ISO week notation ('2025-W02').
        """
        text_norm = normalize_period_text(text)

        if cls.START_WEEKDAY == 0:
            iso_year, iso_week = extract_iso_week(text_norm)
            if iso_year is not None:
                iso = IsoWeek(iso_year, iso_week)
                # isoweek rolls week 53 of a 52-week year into the next year
                if iso.year != iso_year:
                    raise ValueError(f"ISO year {iso_year} has no week {iso_week}: {text!r}")
                return cls.from_date(iso.monday())

        if not text_norm.startswith(_PREFIX):
            raise ValueError(
                f"Unexpected input for format 'Week starting %Y-%m-%d': {text!r}"
            )
        d = parse_iso_date(text_norm[len(_PREFIX):])
        if d is None:
            raise ValueError(f"Error parsing Week from input: {text!r}")
        if d.weekday() != cls.START_WEEKDAY:
            raise ValueError(
                f"Unexpected start date {d}: got {WEEKDAY_NAMES[d.weekday()]} "
                f"but needed {cls.start_day_name()}"
            )
        return cls.from_date(d)

    def to_isoweek(self) -> IsoWeek:
        """ISO week for Monday weeks."""
        if self.START_WEEKDAY != 0:
            raise ValueError(f"{self.name()} is not an ISO week")
        return IsoWeek.withdate(self.calendar_start_date())

    def __str__(self):
        return f"{_PREFIX}{self.calendar_start_date().isoformat()}"


@lru_cache(maxsize=None)
def _week_class(weekday: int) -> Type[Week]:
    name = WEEKDAY_NAMES[weekday]
    cls = type(
        f"{name}Week",
        (Week,),
        {"__slots__": (), "START_WEEKDAY": weekday, "__module__": __name__},
    )
    register_resolution(cls, label="Week")
    return cls


# Register every start day up front so erased formatting can find them
for _weekday in range(7):
    _week_class(_weekday)


__all__ = [
    "Week",
]
