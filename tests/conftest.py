"""Shared test fixtures for periodindex tests."""

import pytest
from datetime import date

from periodindex import Day, Month, Week, Minute, FiveMinute, HalfHour, Hour, Minutes, Quarter, Year
from periodindex.utils.config import CACHE_CONFLICT_ENV, DEFAULT_WEEK_START_ENV


ALL_KINDS = [
    Day,
    Month,
    Quarter,
    Year,
    Week.starting("Monday"),
    Week.starting("Thursday"),
    Week.starting("Sunday"),
    Minute,
    FiveMinute,
    HalfHour,
    Hour,
    Minutes.of_length(7),
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Run every test without periodindex environment overrides."""
    monkeypatch.delenv(CACHE_CONFLICT_ENV, raising=False)
    monkeypatch.delenv(DEFAULT_WEEK_START_ENV, raising=False)


@pytest.fixture
def new_year_2021():
    """First day of 2021 as a Day."""
    return Day.from_date(date(2021, 1, 1))


@pytest.fixture
def january_days(new_year_2021):
    """Every Day of January 2021, in order."""
    return [new_year_2021.succ_n(i) for i in range(31)]
