"""Text formatting and parsing for NepaliDateTime.

Functions:
    parse: Parse a string, raising InvalidFormatError on mismatch.
    try_parse: Parse a string, returning None on failure.
    format_default: ``YYYY-MM-DD HH:MM:SS.mmm[uuu]``.
    format_iso8601: Compact form without the date/time separator.
"""

from __future__ import annotations

from sambat.format.iso8601 import format_default, format_iso8601, parse, try_parse

__all__: list[str] = [
    "parse",
    "try_parse",
    "format_default",
    "format_iso8601",
]
