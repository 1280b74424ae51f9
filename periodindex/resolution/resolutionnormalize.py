"""Period Text Normalization
---------------------------

Utility functions for cleaning up period text before parsing.

Examples:
  >>> normalize_period_text("  Week starting   2021-12-06 ")
  'Week starting 2021-12-06'

  >>> normalize_period_text("2021-01-01 10:00 — 2021-01-01 10:04")
  '2021-01-01 10:00 - 2021-01-01 10:04'

  >>> parse_iso_date("2021-03-05")
  datetime.date(2021, 3, 5)
"""

import re
import unicodedata
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser


MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def normalize_period_text(text: str) -> str:
    """
    Normalize period text for consistent parsing.

    Transformations:
      - Strip whitespace
      - Normalize Unicode (NFC)
      - Normalize dashes (—, –, −, ‒ → -)
      - Collapse repeated whitespace

    Case is preserved: month abbreviations and the "Q" prefix are matched
    case-insensitively by the helpers below.

    Args:
        text: Raw period text

    Returns:
        Normalized text
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text.strip())

    for dash in ("—", "–", "−", "‒"):
        text = text.replace(dash, "-")

    text = re.sub(r"\s+", " ", text)

    return text.strip()


def parse_iso_date(text: str) -> Optional[date]:
    """
    Parse a strict ISO date (YYYY-MM-DD).

    Args:
        text: Normalized text

    Returns:
        date, or None if the text is not a full ISO date

    Examples:
        >>> parse_iso_date("2021-01-01")
        datetime.date(2021, 1, 1)

        >>> parse_iso_date("Jan-2021")
        None
    """
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", text):
        return None
    try:
        return dateutil_parser.isoparse(text).date()
    except ValueError:
        return None


def parse_minute_timestamp(text: str) -> Optional[datetime]:
    """
    Parse 'YYYY-MM-DD HH:MM' to a naive datetime.

    Examples:
        >>> parse_minute_timestamp("2021-01-01 10:05")
        datetime.datetime(2021, 1, 1, 10, 5)

        >>> parse_minute_timestamp("2021-01-01 10:05:30")
        None
    """
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d %H:%M")
    except ValueError:
        return None


def month_num_from_name(name: str) -> Optional[int]:
    """
    Map a three-letter month abbreviation to 1-12.

    Examples:
        >>> month_num_from_name("Jan")
        1

        >>> month_num_from_name("sep")
        9

        >>> month_num_from_name("Sept")
        None
    """
    for i, abbrev in enumerate(MONTH_ABBREVIATIONS, 1):
        if name.lower() == abbrev.lower():
            return i
    return None


def weekday_num_from_name(name: str) -> Optional[int]:
    """
    Map a weekday name to 0 (Monday) - 6 (Sunday).

    Accepts full names and three-letter abbreviations, any case.

    Examples:
        >>> weekday_num_from_name("Monday")
        0

        >>> weekday_num_from_name("sun")
        6
    """
    name = name.strip().lower()
    for i, full in enumerate(WEEKDAY_NAMES):
        if name == full.lower() or name == full[:3].lower():
            return i
    return None


def extract_quarter(text: str) -> tuple[Optional[int], Optional[int]]:
    """
    Extract (quarter, year) from 'Q{n}-{year}'.

    Examples:
        >>> extract_quarter("Q3-2021")
        (3, 2021)

        >>> extract_quarter("Q5-2021")
        (None, None)
    """
    match = re.fullmatch(r"[qQ]([1-4])-(-?\d+)", text)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


def extract_iso_week(text: str) -> tuple[Optional[int], Optional[int]]:
    """
    Extract (year, week) from ISO week notation.

    Examples:
        >>> extract_iso_week("2025-W02")
        (2025, 2)

        >>> extract_iso_week("2025W2")
        (2025, 2)
    """
    match = re.fullmatch(r"(\d{4})-?[wW](\d{1,2})", text)
    if not match:
        return None, None
    week = int(match.group(2))
    if not 1 <= week <= 53:
        return None, None
    return int(match.group(1)), week


__all__ = [
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "normalize_period_text",
    "parse_iso_date",
    "parse_minute_timestamp",
    "month_num_from_name",
    "weekday_num_from_name",
    "extract_quarter",
    "extract_iso_week",
]
