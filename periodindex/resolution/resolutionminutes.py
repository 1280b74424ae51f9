"""Fixed-Width Minute Buckets
---------------------------

Sub-day periods N minutes wide, aligned to the Unix epoch.

Index = floor(seconds since 1970-01-01 00:00 / (60 * N)), on naive
datetimes (no time zone is applied).

For buckets to tile days cleanly, N should divide an hour
(1, 2, 3, 4, 5, 6, 10, 12, 15, 20, 30, 60) or be a whole number of hours
dividing a day (60, 120, 180, 240, 360, 480, 720, 1440). Other widths work
for arithmetic but buckets will straddle day boundaries.

Text forms:
  - N = 1: "2021-01-01 10:05"
  - N > 1: "2021-01-01 10:00 => 2021-01-01 10:04" (first and last minute)

Aliases: Minute (1), FiveMinute (5), HalfHour (30), Hour (60).
"""

from __future__ import annotations
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Type

from periodindex.resolution.resolutionbase import SubDateResolution
from periodindex.resolution.resolutionformat import register_resolution
from periodindex.resolution.resolutionnormalize import (
    normalize_period_text,
    parse_minute_timestamp,
)


_EPOCH = datetime(1970, 1, 1)
_SECONDS_PER_MINUTE = 60
_SEPARATOR = " => "
_FORMAT = "%Y-%m-%d %H:%M"


def _epoch_seconds(dt: datetime) -> int:
    return (dt.replace(tzinfo=None) - _EPOCH) // timedelta(seconds=1)


class Minutes(SubDateResolution):
    """
    A bucket of LENGTH minutes. Use Minutes.of_length(n) for a concrete kind.

    Example:
        >>> FiveMinute = Minutes.of_length(5)
        >>> b = FiveMinute.from_datetime(datetime(2021, 1, 1, 10, 7))
        >>> str(b)
        '2021-01-01 10:05 => 2021-01-01 10:09'
        >>> b.name()
        'Minutes[Length:5]'
    """

    __slots__ = ()

    LENGTH: int = 0

    def __init__(self, index: int):
        if type(self).LENGTH <= 0:
            raise TypeError("Use Minutes.of_length(n) to choose a bucket width")
        super().__init__(index)

    @classmethod
    def of_length(cls, n: int) -> Type[Minutes]:
        """Minutes kind n minutes wide."""
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValueError(f"Bucket width must be a positive int, got {n!r}")
        return _minutes_class(n)

    @classmethod
    def kind_name(cls) -> str:
        return f"Minutes[Length:{cls.LENGTH}]"

    @classmethod
    def _bucket_seconds(cls) -> int:
        return cls.LENGTH * _SECONDS_PER_MINUTE

    @classmethod
    def from_datetime(cls, dt: datetime) -> Minutes:
        return cls(_epoch_seconds(dt) // cls._bucket_seconds())

    def calendar_instant(self) -> datetime:
        return _EPOCH + timedelta(seconds=self._index * self._bucket_seconds())

    def last_minute(self) -> datetime:
        """Start of the last whole minute inside the bucket."""
        return self.calendar_instant() + timedelta(minutes=self.LENGTH - 1)

    def occurs_on_date(self) -> date:
        return self.calendar_instant().date()

    @classmethod
    def first_on_date(cls, day: date) -> Minutes:
        midnight = datetime(day.year, day.month, day.day)
        # Ceiling: the first bucket starting on or after midnight
        return cls(-(-_epoch_seconds(midnight) // cls._bucket_seconds()))

    @classmethod
    def parse(cls, text: str) -> Minutes:
        text_norm = normalize_period_text(text)

        if cls.LENGTH == 1:
            start = parse_minute_timestamp(text_norm)
            if start is None:
                raise ValueError(f"Error parsing {cls.kind_name()} from input: {text!r}")
            return cls.from_datetime(start)

        parts = text_norm.split(_SEPARATOR.strip())
        if len(parts) != 2:
            raise ValueError(f"Error parsing {cls.kind_name()} from input: {text!r}")
        start = parse_minute_timestamp(parts[0].strip())
        end = parse_minute_timestamp(parts[1].strip())
        if start is None or end is None:
            raise ValueError(f"Error parsing {cls.kind_name()} from input: {text!r}")

        if _epoch_seconds(start) % cls._bucket_seconds() != 0:
            raise ValueError(f"Invalid start for {cls.kind_name()}: {start:{_FORMAT}}")
        if (end - start) // timedelta(minutes=1) + 1 != cls.LENGTH:
            raise ValueError(f"Invalid start-end combination for {cls.kind_name()}: {text!r}")

        return cls.from_datetime(start)

    def __str__(self):
        if self.LENGTH == 1:
            return f"{self.calendar_instant():{_FORMAT}}"
        return f"{self.calendar_instant():{_FORMAT}}{_SEPARATOR}{self.last_minute():{_FORMAT}}"


@lru_cache(maxsize=None)
def _minutes_class(n: int) -> Type[Minutes]:
    cls = type(
        f"Minutes{n}",
        (Minutes,),
        {"__slots__": (), "LENGTH": n, "__module__": __name__},
    )
    register_resolution(cls)
    return cls


Minute = Minutes.of_length(1)
FiveMinute = Minutes.of_length(5)
HalfHour = Minutes.of_length(30)
Hour = Minutes.of_length(60)

register_resolution(Minute, label="Minute")
register_resolution(FiveMinute, label="FiveMinute")
register_resolution(HalfHour, label="HalfHour")
register_resolution(Hour, label="Hour")


__all__ = [
    "Minutes",
    "Minute",
    "FiveMinute",
    "HalfHour",
    "Hour",
]
