"""Tests for the period index contract shared by every period kind.

These tests verify, for all built-in kinds:
- Monotonic index bijectivity and step inverses
- Signed distance (between)
- Ordering, equality and hashing within one kind only
- Loud failure on 64-bit overflow and bad input

Run with: pytest tests/test_resolution.py -v
"""

import pytest
from datetime import date, datetime

from periodindex import (
    Day,
    Month,
    Week,
    Hour,
    Minutes,
    TimeResolution,
    DateResolution,
    SubDateResolution,
)
from periodindex.resolution.resolutionbase import INT64_MIN, INT64_MAX

from tests.conftest import ALL_KINDS


def _kind_id(kind):
    return kind.kind_name()


# ============================================================================
# Monotonic Index
# ============================================================================

class TestMonotonicIndex:
    """Test to_monotonic / from_monotonic"""

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=_kind_id)
    @pytest.mark.parametrize("index", [INT64_MIN, -5, 0, 1, 738156, INT64_MAX])
    def test_bijective_round_trip(self, kind, index):
        """Test from_monotonic(i).to_monotonic() == i"""
        assert kind.from_monotonic(index).to_monotonic() == index

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=_kind_id)
    def test_from_monotonic_builds_same_kind(self, kind):
        """Test from_monotonic returns an instance of the kind"""
        period = kind.from_monotonic(42)
        assert type(period) is kind
        assert isinstance(period, TimeResolution)

    def test_index_must_be_int(self):
        """Test non-int indexes are rejected"""
        with pytest.raises(TypeError):
            Day(1.5)
        with pytest.raises(TypeError):
            Day(True)

    def test_index_outside_int64_overflows(self):
        """Test indexes outside the signed 64-bit range fail loudly"""
        with pytest.raises(OverflowError):
            Day(INT64_MAX + 1)
        with pytest.raises(OverflowError):
            Month(INT64_MIN - 1)


# ============================================================================
# Stepping
# ============================================================================

class TestStepping:
    """Test succ/pred and succ_n/pred_n"""

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=_kind_id)
    @pytest.mark.parametrize("n", [0, 1, 7, 1000])
    def test_step_inverses(self, kind, n):
        """Test p.succ_n(n).pred_n(n) == p"""
        p = kind.from_monotonic(12345)
        assert p.succ_n(n).pred_n(n) == p
        assert p.pred_n(n).succ_n(n) == p

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=_kind_id)
    def test_succ_is_one_step(self, kind):
        """Test succ/pred move the index by exactly one"""
        p = kind.from_monotonic(100)
        assert p.succ().to_monotonic() == 101
        assert p.pred().to_monotonic() == 99
        assert p.succ_n(1) == p.succ()

    def test_negative_step_rejected(self):
        """Test negative n is a caller error"""
        with pytest.raises(ValueError):
            Day(10).succ_n(-1)
        with pytest.raises(ValueError):
            Day(10).pred_n(-1)

    def test_step_past_int64_overflows(self):
        """Test stepping out of the 64-bit domain raises instead of wrapping"""
        with pytest.raises(OverflowError):
            Day(INT64_MAX).succ()
        with pytest.raises(OverflowError):
            Hour(INT64_MIN).pred()


# ============================================================================
# Distance
# ============================================================================

class TestBetween:
    """Test signed distance between periods"""

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=_kind_id)
    def test_between_antisymmetric(self, kind):
        """Test between(a, b) == -between(b, a) and between(a, a) == 0"""
        a = kind.from_monotonic(10)
        b = kind.from_monotonic(-32)
        assert a.between(b) == -b.between(a)
        assert a.between(a) == 0

    def test_between_days(self):
        """Test distance across a month boundary"""
        assert Day.parse("2021-01-01").between(Day.parse("2021-01-31")) == 30
        assert Day.parse("2021-01-31").between(Day.parse("2021-03-01")) == 29

    def test_between_negative_when_earlier(self):
        """Test distance is negative if other precedes self"""
        assert Month.parse("Mar-2021").between(Month.parse("Jan-2021")) == -2

    def test_between_different_kinds_rejected(self):
        """Test distance between different kinds is a TypeError"""
        with pytest.raises(TypeError):
            Day(5).between(Month(5))


# ============================================================================
# Value Semantics
# ============================================================================

class TestValueSemantics:
    """Test equality, ordering, hashing and immutability"""

    def test_ordering_follows_index(self):
        """Test periods order by index"""
        assert Day(1) < Day(2) <= Day(2) < Day(3)
        assert max(Day(4), Day(9), Day(-1)) == Day(9)

    def test_different_kinds_never_equal(self):
        """Test same index in different kinds is not equal"""
        assert Day(5) != Month(5)
        assert Week.starting("Monday")(5) != Week.starting("Sunday")(5)

    def test_different_kinds_not_orderable(self):
        """Test ordering across kinds raises TypeError"""
        with pytest.raises(TypeError):
            Day(5) < Month(6)

    def test_hash_consistent_with_equality(self):
        """Test equal periods hash equal"""
        assert len({Day(1), Day(1), Day(2)}) == 2
        assert len({Day(1), Month(1)}) == 2

    def test_immutable(self):
        """Test periods cannot be mutated"""
        d = Day(1)
        with pytest.raises(AttributeError):
            d._index = 2
        assert d.to_monotonic() == 1

    def test_repr(self):
        """Test repr shows kind and index"""
        assert repr(Day(738156)) == "Day(738156)"


# ============================================================================
# Calendar Refinements
# ============================================================================

class TestRefinements:
    """Test date-aligned and sub-day refinements"""

    def test_day_is_date_aligned(self):
        """Test Day implements the date-aligned refinement only"""
        assert issubclass(Day, DateResolution)
        assert not issubclass(Day, SubDateResolution)

    def test_minutes_is_sub_day(self):
        """Test minute buckets implement the sub-day refinement only"""
        assert issubclass(Hour, SubDateResolution)
        assert not issubclass(Hour, DateResolution)

    def test_calendar_instant_date_aligned(self):
        """Test calendar_instant is midnight of the start date"""
        assert Month.parse("Feb-2021").calendar_instant() == datetime(2021, 2, 1)
        assert Month.parse("Feb-2021").naive_date_time() == datetime(2021, 2, 1)

    def test_end_date_and_day_count(self):
        """Test derived end date and day count"""
        feb = Month.parse("Feb-2021")
        assert feb.end_date() == date(2021, 2, 28)
        assert feb.day_count() == 28
        assert Month.parse("Feb-2020").day_count() == 29

    def test_last_on_date_derived(self):
        """Test last_on_date is first_on_date of the next day minus one"""
        day = date(2021, 1, 1)
        assert Hour.last_on_date(day) == Hour.first_on_date(date(2021, 1, 2)).pred()
        assert Hour.last_on_date(day).calendar_instant() == datetime(2021, 1, 1, 23)

    def test_name(self):
        """Test kind labels"""
        assert Day(0).name() == "Day"
        assert Month(0).name() == "Month"
        assert Week.starting("Monday")(0).name() == "Week[StartDay:Monday]"
        assert Minutes.of_length(5)(0).name() == "Minutes[Length:5]"

    def test_abstract_contract_not_instantiable(self):
        """Test the abstract contracts cannot be instantiated"""
        with pytest.raises(TypeError):
            TimeResolution(0)
        with pytest.raises(TypeError):
            DateResolution(0)
