"""Internal utilities for Sambat.

This module contains private implementation details:
    - The Bikram Sambat month-length table
    - Day counting over the table
    - The Gregorian bridge
    - Validation helpers and constants

Note: This module is not part of the public API.
"""

from __future__ import annotations

from sambat._internal.daycount import (
    count_total_days,
    date_from_day_offset,
    day_count_since,
)
from sambat._internal.gregorian import (
    gregorian_to_nepali,
    is_leap_year,
    nepali_to_gregorian,
    to_nepal_time,
)
from sambat._internal.table import days_in_month, days_in_year, is_supported_year
from sambat._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "count_total_days",
    "date_from_day_offset",
    "day_count_since",
    "days_in_month",
    "days_in_year",
    "gregorian_to_nepali",
    "is_leap_year",
    "is_supported_year",
    "nepali_to_gregorian",
    "to_nepal_time",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
