"""Sambat: Bikram Sambat calendar conversion for Python.

Sambat converts dates between the Bikram Sambat (Nepali) calendar and the
proleptic Gregorian calendar for BS years 1970-2250, and reads and writes
Nepali timestamps in an ISO 8601 style text form.

Core Types:
    NepaliDateTime: Bikram Sambat date with a time of day

Format Functions:
    parse: Parse a string into a NepaliDateTime
    try_parse: Parse a string, returning None on failure
    format_default: Format as YYYY-MM-DD HH:MM:SS.mmm[uuu]
    format_iso8601: Format without the date/time separator

Exceptions:
    SambatError: Base exception
    OutOfRangeError: Value outside the supported range
    InvalidFormatError: Failed to parse string

Example:
    >>> import datetime
    >>> from sambat import NepaliDateTime
    >>> NepaliDateTime(2080, 1, 1).to_gregorian(aware=False)
    datetime.datetime(2023, 4, 14, 0, 0)
    >>> NepaliDateTime.from_gregorian(datetime.datetime(2023, 4, 13, 18, 15))
    NepaliDateTime(2080, 1, 1, 0, 0, 0, 0, 0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from sambat.core.datetime import NepaliDateTime

# Exceptions
from sambat.errors import (
    InvalidFormatError,
    OutOfRangeError,
    SambatError,
)

# Format functions
from sambat.format import format_default, format_iso8601, parse, try_parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "NepaliDateTime",
    # Exceptions
    "SambatError",
    "OutOfRangeError",
    "InvalidFormatError",
    # Format functions
    "parse",
    "try_parse",
    "format_default",
    "format_iso8601",
]
