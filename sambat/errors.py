"""Sambat exception hierarchy.

All Sambat-specific exceptions inherit from SambatError.
"""

from __future__ import annotations


class SambatError(Exception):
    """Base exception for all Sambat errors."""

    pass


class OutOfRangeError(SambatError):
    """A value falls outside the range the calendar table supports.

    Examples:
        - Bikram Sambat year outside 1970-2250
        - Year magnitude of 10000 or more given to the six-digit formatter
        - Gregorian date earlier than 1913-04-13
        - Month or day outside its range when strict validation is on
    """

    pass


class InvalidFormatError(SambatError):
    """Failed to parse a textual representation.

    Examples:
        - String not matching the YYYY-MM-DD[ HH[:MM[:SS[.ffffff]]]] grammar
        - JSON payload missing its value field
    """

    pass


__all__ = [
    "SambatError",
    "OutOfRangeError",
    "InvalidFormatError",
]
