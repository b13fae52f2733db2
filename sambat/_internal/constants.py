"""Internal constants for Sambat.

Supported range, epoch anchors and the fixed Nepal offset used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

# Supported Bikram Sambat years for NepaliDateTime
MIN_YEAR: int = 1970
MAX_YEAR: int = 2250

# Sub-second conversions
MICROS_PER_MILLISECOND: int = 1_000

# Anchor used when converting to Gregorian: BS 1969-09-18 == AD 1913-01-01
NEPALI_GREGORIAN_ANCHOR: tuple[int, int, int] = (1969, 9, 18)
GREGORIAN_START_YEAR: int = 1913

# Anchor used when converting from Gregorian: AD 1913-04-13 == BS 1970-01-01
GREGORIAN_NEPALI_ANCHOR: _datetime.date = _datetime.date(1913, 4, 13)
NEPALI_START: tuple[int, int, int] = (1970, 1, 1)

# Nepal Standard Time, no daylight saving
NEPAL_UTC_OFFSET: _datetime.timedelta = _datetime.timedelta(hours=5, minutes=45)
NEPAL_TZ: _datetime.timezone = _datetime.timezone(NEPAL_UTC_OFFSET, "NPT")

# Days in each Gregorian month
GREGORIAN_MONTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
GREGORIAN_LEAP_MONTHS: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Year range the fixed-width formatter renders with four digits
FOUR_DIGIT_YEAR_LIMIT: int = 9999


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MICROS_PER_MILLISECOND",
    "NEPALI_GREGORIAN_ANCHOR",
    "GREGORIAN_START_YEAR",
    "GREGORIAN_NEPALI_ANCHOR",
    "NEPALI_START",
    "NEPAL_UTC_OFFSET",
    "NEPAL_TZ",
    "GREGORIAN_MONTHS",
    "GREGORIAN_LEAP_MONTHS",
    "FOUR_DIGIT_YEAR_LIMIT",
]
