"""Day counting over the Bikram Sambat table.

Dates are handled as plain (year, month, day) tuples here so the value type
and the Gregorian bridge can share the same arithmetic. Absolute day
counts are measured from the first day of the first table year.

This module is not part of the public API.
"""

from __future__ import annotations

from sambat._internal.table import (
    FIRST_TABLE_YEAR,
    LAST_TABLE_YEAR,
    days_in_month,
    days_in_year,
)
from sambat.errors import OutOfRangeError

YMD = tuple[int, int, int]


def count_total_days(year: int, month: int, day: int) -> int:
    """Return the number of days from the start of the table to a date.

    The count is ``(day - 1)`` plus the lengths of the months before
    ``month`` in ``year`` plus the lengths of all table years before
    ``year``. Months or years missing from the table contribute nothing.

    Examples:
        >>> count_total_days(1969, 1, 1)
        0
        >>> count_total_days(1970, 1, 1)
        366
    """
    total = day - 1
    for m in range(1, month):
        total += days_in_month(year, m)
    for y in range(FIRST_TABLE_YEAR, year):
        total += days_in_year(y)
    return total


def day_count_since(date: YMD, reference: YMD) -> int:
    """Return the number of days between two Bikram Sambat dates.

    The result is a distance: it is the same whichever date comes first,
    so it cannot be used to order dates.

    Args:
        date: (year, month, day) of the first date.
        reference: (year, month, day) of the second date.

    Returns:
        The non-negative number of days separating the dates.
    """
    return abs(count_total_days(*date) - count_total_days(*reference))


def date_from_day_offset(
    start_year: int,
    start_month: int,
    start_day: int,
    offset: int,
) -> YMD:
    """Walk ``offset`` days forward from a Bikram Sambat start date.

    Whole years are consumed first while the offset covers the current
    year, then whole months, and the remainder lands on the day.

    Args:
        start_year: Year to start walking from.
        start_month: Month to start walking from.
        start_day: Day the remainder is added to.
        offset: Non-negative number of days to walk.

    Returns:
        The (year, month, day) reached.

    Raises:
        OutOfRangeError: If offset is negative or runs past the last
            year in the table.

    Examples:
        >>> date_from_day_offset(1970, 1, 1, 0)
        (1970, 1, 1)
        >>> date_from_day_offset(1970, 1, 1, 365)
        (1971, 1, 1)
    """
    if offset < 0:
        raise OutOfRangeError(f"day offset must not be negative, got {offset}")

    year = start_year
    while offset >= days_in_year(year):
        if year >= LAST_TABLE_YEAR:
            raise OutOfRangeError(
                f"day offset runs past Bikram Sambat year {LAST_TABLE_YEAR}"
            )
        offset -= days_in_year(year)
        year += 1

    month = start_month
    while offset >= days_in_month(year, month):
        if month >= 12:
            raise OutOfRangeError(f"day offset runs past the end of year {year}")
        offset -= days_in_month(year, month)
        month += 1

    return (year, month, start_day + offset)


__all__ = [
    "count_total_days",
    "day_count_since",
    "date_from_day_offset",
]
