"""Period kinds ("resolutions") and the contract they implement.

Public API:
    TimeResolution, DateResolution, SubDateResolution
        Abstract contracts

    Day, Month, Quarter, Year, Week, Minutes
        Gregorian period kinds (Week.starting(day), Minutes.of_length(n))

    Minute, FiveMinute, HalfHour, Hour
        Common minute buckets

    format_erased_resolution(tag, index) -> str
        Format a (kind tag, index) pair without knowing the kind

Examples:
    >>> from periodindex.resolution import Day, Month
    >>> d = Day.parse("2021-01-31")
    >>> str(d.succ())
    '2021-02-01'
    >>> d.month() == Month.parse("Jan-2021")
    True
"""

from periodindex.resolution.resolutionbase import (
    INT64_MIN,
    INT64_MAX,
    TimeResolution,
    DateResolution,
    SubDateResolution,
)
from periodindex.resolution.resolutionformat import (
    register_resolution,
    resolution_for,
    registered_resolutions,
    format_erased_resolution,
    parse_resolution,
)
from periodindex.resolution.resolutionweek import Week
from periodindex.resolution.resolutiondates import Day, Month, Quarter, Year
from periodindex.resolution.resolutionminutes import (
    Minutes,
    Minute,
    FiveMinute,
    HalfHour,
    Hour,
)

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "TimeResolution",
    "DateResolution",
    "SubDateResolution",
    "register_resolution",
    "resolution_for",
    "registered_resolutions",
    "format_erased_resolution",
    "parse_resolution",
    "Day",
    "Week",
    "Month",
    "Quarter",
    "Year",
    "Minutes",
    "Minute",
    "FiveMinute",
    "HalfHour",
    "Hour",
]
