"""Smoke tests: the package imports and the headline operations work."""

import periodindex
from periodindex import Cache, CacheHit, Day, Hour, Month, TimeRange, format_erased_resolution


def test_version():
    """Test the package exposes a version"""
    assert periodindex.__version__ == "0.1.0"


def test_public_api():
    """Test every name in __all__ is importable"""
    for name in periodindex.__all__:
        assert hasattr(periodindex, name), name


def test_end_to_end():
    """Test parse, range, erased formatting and cache together"""
    q1 = TimeRange.from_start_end(Month.parse("Jan-2021"), Month.parse("Mar-2021"))
    assert q1.length == 3
    assert q1.to_sub_date_resolution(Hour).length == 90 * 24

    day = Day.parse("2021-01-01")
    assert format_erased_resolution(day.name(), day.to_monotonic()) == "Day:2021-01-01"

    cache = Cache.empty()
    cache.add(q1.to_set(), {Month.parse("Feb-2021"): 42.0})
    assert cache.get(q1.to_set()) == CacheHit({Month.parse("Feb-2021"): 42.0})
