"""Period Index - discrete calendar periods as integers

Public API for period kinds, contiguous ranges and the gap-aware request cache.

Usage:
    from periodindex import Day, Month, Week, Hour, TimeRange, Cache

    # Periods are addressed by a monotonic integer index
    day = Day.parse("2021-01-31")
    day.succ()                                  # Day for 2021-02-01
    day.between(Day.parse("2021-03-01"))        # 29

    # Contiguous ranges stored as (start, length)
    q1 = TimeRange.from_start_end(Month.parse("Jan-2021"), Month.parse("Mar-2021"))
    q1.intersect(TimeRange(Month.parse("Mar-2021"), 6))   # Mar-2021 only

    # Group raw indexes into maximal ranges
    coalesce(Day, [1, 2, 3, 7, 8, 10])          # three ranges

    # Cache period-keyed data and find what is still missing
    cache = Cache.empty()
    cache.get(set(q1))                          # CacheMiss(gaps=[{Jan, Feb, Mar}])
    cache.add(set(q1), {Month.parse("Feb-2021"): 42.0})
    cache.get(set(q1))                          # CacheHit(data={Feb-2021: 42.0})
"""

__version__ = "0.1.0"

# ============================================================================
# Period Kinds
# ============================================================================

from .resolution import (
    TimeResolution,          # Contract every period kind implements
    DateResolution,          # Periods of one day or longer
    SubDateResolution,       # Periods shorter than a day
    Day,
    Week,                    # Week.starting("Monday") ... Week.starting("Sunday")
    Month,
    Quarter,
    Year,
    Minutes,                 # Minutes.of_length(n)
    Minute,
    FiveMinute,
    HalfHour,
    Hour,
)

# ============================================================================
# Kind Registry
# ============================================================================

from .resolution import (
    register_resolution,       # Register a period kind under its tag
    resolution_for,            # Look up a period kind by tag
    format_erased_resolution,  # Format (tag, index) without knowing the kind
    parse_resolution,          # Parse text as the kind registered under tag
)

# ============================================================================
# Contiguous Ranges
# ============================================================================

from .ranges import (
    TimeRange,               # (start, length) range with set algebra
    TimeRangeComparison,     # SUPERSET / SUBSET / EARLIER / LATER
    coalesce,                # Raw indexes -> maximal contiguous ranges
    range_to_frame,          # Range -> pandas DataFrame
    ranges_to_frame,         # Several ranges -> pandas DataFrame
)

# ============================================================================
# Request Cache
# ============================================================================

from .cache import (
    Cache,                   # Gap-aware request cache
    CacheHit,                # Every requested key resolved
    CacheMiss,               # Gaps still to fetch
    CacheConflictError,      # Conflicting data under on_conflict="raise"
    missing_pieces,          # Maximal unresolved runs of a request
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # Period Kinds
    # ========================================================================
    "TimeResolution",
    "DateResolution",
    "SubDateResolution",
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

    # ========================================================================
    # Kind Registry
    # ========================================================================
    "register_resolution",
    "resolution_for",
    "format_erased_resolution",
    "parse_resolution",

    # ========================================================================
    # Contiguous Ranges
    # ========================================================================
    "TimeRange",
    "TimeRangeComparison",
    "coalesce",
    "range_to_frame",
    "ranges_to_frame",

    # ========================================================================
    # Request Cache
    # ========================================================================
    "Cache",
    "CacheHit",
    "CacheMiss",
    "CacheConflictError",
    "missing_pieces",
]
