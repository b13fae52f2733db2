"""Validation utilities for Sambat.

The year is always validated because every derived value needs a table
row. The remaining fields are only checked when a caller asks for strict
construction.

This module is not part of the public API.
"""

from __future__ import annotations

from sambat._internal.constants import MAX_YEAR, MIN_YEAR
from sambat._internal.table import days_in_month
from sambat.errors import OutOfRangeError

# Inclusive limits for the time-of-day fields
_TIME_LIMITS: dict[str, tuple[int, int]] = {
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "millisecond": (0, 999),
    "microsecond": (0, 999),
}


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The Bikram Sambat year to validate.

    Raises:
        OutOfRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        OutOfRangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise OutOfRangeError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day exists in the given Bikram Sambat month.

    Raises:
        OutOfRangeError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise OutOfRangeError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(**fields: int) -> None:
    """Validate time-of-day fields passed by name.

    Raises:
        OutOfRangeError: If any field is outside its range.
    """
    for name, value in fields.items():
        low, high = _TIME_LIMITS[name]
        if value < low or value > high:
            raise OutOfRangeError(
                f"{name} must be between {low} and {high}, got {value}"
            )


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
