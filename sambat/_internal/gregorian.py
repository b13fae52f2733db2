"""Conversion between Bikram Sambat and proleptic Gregorian dates.

Two fixed anchors tie the calendars together:

    BS 1969-09-18 == AD 1913-01-01   (used for BS -> AD)
    AD 1913-04-13 == BS 1970-01-01   (used for AD -> BS)

Both directions count whole days from their anchor and then walk years
and months of the target calendar.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from sambat._internal.constants import (
    GREGORIAN_LEAP_MONTHS,
    GREGORIAN_MONTHS,
    GREGORIAN_NEPALI_ANCHOR,
    GREGORIAN_START_YEAR,
    NEPAL_TZ,
    NEPAL_UTC_OFFSET,
    NEPALI_GREGORIAN_ANCHOR,
    NEPALI_START,
)
from sambat._internal.daycount import YMD, date_from_day_offset, day_count_since
from sambat.errors import OutOfRangeError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_lengths(year: int) -> tuple[int, ...]:
    """Return the twelve Gregorian month lengths for ``year``."""
    return GREGORIAN_LEAP_MONTHS if is_leap_year(year) else GREGORIAN_MONTHS


def nepali_to_gregorian(year: int, month: int, day: int) -> YMD:
    """Convert a Bikram Sambat date to a Gregorian (year, month, day).

    The distance from BS 1969-09-18 is laid out over Gregorian years
    starting at 1913, then over the months of the year reached.

    Examples:
        >>> nepali_to_gregorian(1970, 1, 1)
        (1913, 4, 13)
    """
    difference = day_count_since((year, month, day), NEPALI_GREGORIAN_ANCHOR)

    g_year = GREGORIAN_START_YEAR
    while difference >= (366 if is_leap_year(g_year) else 365):
        difference -= 366 if is_leap_year(g_year) else 365
        g_year += 1

    g_month = 1
    for length in gregorian_month_lengths(g_year):
        if difference < length:
            break
        difference -= length
        g_month += 1

    return (g_year, g_month, 1 + difference)


def gregorian_to_nepali(date: _datetime.date) -> YMD:
    """Convert a Gregorian date to a Bikram Sambat (year, month, day).

    Args:
        date: A Gregorian date on or after 1913-04-13.

    Raises:
        OutOfRangeError: If date is before 1913-04-13 or after the last
            Bikram Sambat year in the table.

    Examples:
        >>> gregorian_to_nepali(_datetime.date(1913, 4, 13))
        (1970, 1, 1)
    """
    difference = (date - GREGORIAN_NEPALI_ANCHOR).days
    if difference < 0:
        raise OutOfRangeError(
            f"Gregorian date must be on or after {GREGORIAN_NEPALI_ANCHOR.isoformat()}, "
            f"got {date.isoformat()}"
        )
    return date_from_day_offset(*NEPALI_START, difference)


def to_nepal_time(value: _datetime.datetime) -> _datetime.datetime:
    """Return the wall-clock time in Nepal for a Gregorian timestamp.

    Naive values are read as UTC and shifted by the fixed +05:45 offset.
    Aware values are converted to the same fixed offset. The result is
    naive.

    Raises:
        OutOfRangeError: If the shifted value falls past datetime.max.
    """
    try:
        if value.tzinfo is None or value.utcoffset() is None:
            return value + NEPAL_UTC_OFFSET
        return value.astimezone(NEPAL_TZ).replace(tzinfo=None)
    except OverflowError as exc:
        raise OutOfRangeError(f"{value} is out of range in Nepal time") from exc


__all__ = [
    "is_leap_year",
    "gregorian_month_lengths",
    "nepali_to_gregorian",
    "gregorian_to_nepali",
    "to_nepal_time",
]
