"""Tests for the date-aligned period kinds: Day, Month, Quarter, Year.

Run with: pytest tests/test_dates.py -v
"""

import pytest
from datetime import date, datetime

from periodindex import Day, Month, Quarter, Year, Week


# ============================================================================
# Day
# ============================================================================

class TestDay:
    """Test Day period kind"""

    def test_index_origin(self):
        """Test index counts days from 0000-01-01"""
        assert Day.from_date(date(1, 1, 1)).to_monotonic() == 366
        assert Day.from_date(date(2021, 1, 1)).to_monotonic() == 738156

    def test_roundtrip_date(self):
        """Test a date falls within its Day"""
        dt = date(2021, 12, 6)
        d = Day.from_date(dt)
        assert d.calendar_start_date() <= dt <= d.end_date()
        assert d.day_count() == 1

    def test_parse(self):
        """Test parsing '%Y-%m-%d'"""
        assert Day.parse("2021-01-01").start() == date(2021, 1, 1)
        assert Day.parse("2021-01-01").succ().start() == date(2021, 1, 2)
        assert Day.parse("2021-01-01").succ().pred().start() == date(2021, 1, 1)

    def test_str_round_trip(self):
        """Test str() parses back to the same Day"""
        d = Day.parse("2020-02-29")
        assert str(d) == "2020-02-29"
        assert Day.parse(str(d)) == d

    def test_parse_invalid(self):
        """Test malformed text raises ValueError"""
        for text in ["2021-13-01", "Jan-2021", "", "2021/01/01"]:
            with pytest.raises(ValueError):
                Day.parse(text)

    def test_from_datetime(self):
        """Test a datetime maps to the day containing it"""
        assert Day.from_datetime(datetime(2021, 3, 5, 23, 59)) == Day.parse("2021-03-05")

    def test_containing_periods(self):
        """Test year/quarter/month/week of a day"""
        d = Day.parse("2021-12-08")
        assert d.year() == Year(2021)
        assert d.quarter() == Quarter.parse("Q4-2021")
        assert d.month() == Month.parse("Dec-2021")
        assert d.week("Monday") == Week.starting("Monday").parse("Week starting 2021-12-06")
        assert d.year_num() == 2021
        assert d.month_num() == 12

    def test_week_uses_default_start(self):
        """Test Day.week() without a start day uses Monday by default"""
        d = Day.parse("2021-12-08")
        assert type(d.week()) is Week.starting("Monday")

    def test_format(self):
        """Test strftime on the start date"""
        assert Day.parse("2021-07-04").format("%d/%m/%Y") == "04/07/2021"


# ============================================================================
# Month
# ============================================================================

class TestMonth:
    """Test Month period kind"""

    def test_index(self):
        """Test index is year * 12 + month - 1"""
        assert Month.parse("Jan-2020").to_monotonic() == 24240
        assert Month.parse("Jan-2021").to_monotonic() == 24252

    def test_start(self):
        """Test start date from index"""
        assert Month(24240).start() == date(2020, 1, 1)
        assert Month(24249).start() == date(2020, 10, 1)

    def test_roundtrip_date(self):
        """Test dates fall within their Month"""
        dt = date(2021, 12, 6)
        m = Month.from_date(dt)
        assert m.start() <= dt <= m.end_date()
        assert Month.from_date(date(2019, 7, 1)).start() == date(2019, 7, 1)

    def test_parse(self):
        """Test parsing '%b-%Y'"""
        assert Month.parse("Jan-2021").start() == date(2021, 1, 1)
        assert Month.parse("Jan-2021").succ().start() == date(2021, 2, 1)
        assert Month.parse("Jan-2021").succ().pred().start() == date(2021, 1, 1)
        assert Month.parse("dec-2021") == Month.parse("Dec-2021")

    def test_year_boundary(self):
        """Test stepping over a year end"""
        assert str(Month.parse("Dec-2021").succ()) == "Jan-2022"
        assert str(Month.parse("Jan-2022").pred()) == "Dec-2021"

    def test_parse_invalid(self):
        """Test unknown month names raise ValueError"""
        with pytest.raises(ValueError):
            Month.parse("Foo-2021")
        with pytest.raises(ValueError):
            Month.parse("2021-01")

    def test_day_count(self):
        """Test variable month lengths"""
        assert Month.parse("Jan-2021").day_count() == 31
        assert Month.parse("Apr-2021").day_count() == 30
        assert Month.parse("Feb-2021").day_count() == 28
        assert Month.parse("Feb-2024").day_count() == 29

    def test_containing_periods(self):
        """Test year and quarter of a month"""
        m = Month.parse("May-2021")
        assert m.year() == Year(2021)
        assert m.quarter() == Quarter.parse("Q2-2021")
        assert m.month_num() == 5
        assert m.year_num() == 2021


# ============================================================================
# Quarter
# ============================================================================

class TestQuarter:
    """Test Quarter period kind"""

    def test_start(self):
        """Test start dates around a year boundary"""
        assert Quarter(2021 * 4).start() == date(2021, 1, 1)
        assert Quarter(2021 * 4 + 1).start() == date(2021, 4, 1)
        assert Quarter(2021 * 4 + 2).start() == date(2021, 7, 1)
        assert Quarter(2021 * 4 - 1).start() == date(2020, 10, 1)

    def test_parse_quarter_syntax(self):
        """Test parsing 'Q{n}-{year}'"""
        assert Quarter.parse("Q1-2021").start() == date(2021, 1, 1)
        assert Quarter.parse("Q1-2021").succ().start() == date(2021, 4, 1)
        assert Quarter.parse("Q1-2021").succ().pred().start() == date(2021, 1, 1)

    def test_parse_date_syntax(self):
        """Test parsing an ISO date to the quarter containing it"""
        assert Quarter.parse("2021-01-01").start() == date(2021, 1, 1)
        assert Quarter.parse("2021-05-17") == Quarter.parse("Q2-2021")

    def test_str(self):
        """Test textual form"""
        assert str(Quarter.parse("Q4-2021")) == "Q4-2021"
        assert str(Quarter.parse("Q4-2021").succ()) == "Q1-2022"

    def test_parse_invalid(self):
        """Test malformed quarters raise ValueError"""
        with pytest.raises(ValueError):
            Quarter.parse("Q5-2021")

    def test_months(self):
        """Test first and last month of a quarter"""
        q = Quarter.parse("Q3-2021")
        assert q.first_month() == Month.parse("Jul-2021")
        assert q.last_month() == Month.parse("Sep-2021")
        assert q.end_date() == date(2021, 9, 30)
        assert q.day_count() == 92
        assert q.year() == Year(2021)
        assert q.quarter_num() == 3


# ============================================================================
# Year
# ============================================================================

class TestYear:
    """Test Year period kind"""

    def test_index_is_year_number(self):
        """Test index equals the year"""
        assert Year.parse("2021").to_monotonic() == 2021
        assert Year.from_date(date(2021, 6, 1)) == Year(2021)

    def test_day_count_leap(self):
        """Test leap and common years"""
        assert Year(2020).day_count() == 366
        assert Year(2021).day_count() == 365
        assert Year(1900).day_count() == 365
        assert Year(2000).day_count() == 366

    def test_children(self):
        """Test first/last months and quarters"""
        y = Year(2021)
        assert y.first_month() == Month.parse("Jan-2021")
        assert y.last_month() == Month.parse("Dec-2021")
        assert y.first_quarter() == Quarter.parse("Q1-2021")
        assert y.last_quarter() == Quarter.parse("Q4-2021")
        assert y.end_date() == date(2021, 12, 31)

    def test_parse_invalid(self):
        """Test non-numeric years raise ValueError"""
        with pytest.raises(ValueError):
            Year.parse("FY2021")

    def test_rescale_to_months(self):
        """Test a year rescales to its twelve months"""
        months = Year(2021).rescale(Month)
        assert months.start == Month.parse("Jan-2021")
        assert months.length == 12
