"""ISO 8601 style formatting and parsing for NepaliDateTime.

Functions:
    parse: Parse a string into a NepaliDateTime.
    try_parse: Like parse, but return None on failure.
    format_default: Format as ``YYYY-MM-DD HH:MM:SS.mmm[uuu]``.
    format_iso8601: Format without the date/time separator, widening the
        year to six digits outside +/-9999.

Accepted input:
    - YYYY-MM-DD or YYYYMMDD, with an optional sign and 4-6 year digits
    - followed optionally by ' ' or 'T' and HH, HH:MM, HH:MM:SS
    - seconds may carry a 1-6 digit fraction after '.' or ','; its digits
      are read as one integer, thousands as milliseconds and the rest
      as microseconds
    - a trailing Z or +HH[:MM] / -HH[:MM] designator is accepted and ignored

Examples:
    >>> from sambat.format import parse, format_default
    >>> d = parse("2080-01-15 10:30:45.123456")
    >>> (d.millisecond, d.microsecond)
    (123, 456)
    >>> format_default(d)
    '2080-01-15 10:30:45.123456'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sambat._internal.constants import FOUR_DIGIT_YEAR_LIMIT
from sambat.errors import InvalidFormatError, OutOfRangeError, SambatError

if TYPE_CHECKING:
    from sambat.core.datetime import NepaliDateTime

logger = logging.getLogger(__name__)

_PARSE_FORMAT = re.compile(
    r"([+-]?\d{4,6})-?(\d\d)-?(\d\d)"
    r"(?:[ T](\d\d)(?::?(\d\d)(?::?(\d\d)(?:[.,](\d{1,6}))?)?)?"
    r"( ?[zZ]| ?([-+])(\d\d)(?::?(\d\d))?)?)?"
)


def parse(s: str) -> NepaliDateTime:
    """Parse a string into a NepaliDateTime.

    Args:
        s: The string to parse.

    Returns:
        The parsed NepaliDateTime. Missing time fields are zero.

    Raises:
        InvalidFormatError: If the string does not match the grammar.
        OutOfRangeError: If the year is outside the supported range.

    Examples:
        >>> parse("2080-01-15")
        NepaliDateTime(2080, 1, 15, 0, 0, 0, 0, 0)

        >>> parse("20800115T1030+05:45")
        NepaliDateTime(2080, 1, 15, 10, 30, 0, 0, 0)
    """
    from sambat.core.datetime import NepaliDateTime

    match = _PARSE_FORMAT.fullmatch(s)
    if match is None:
        raise InvalidFormatError(f"Invalid NepaliDateTime format: {s!r}")

    year, month, day, hour, minute, second, fraction = match.group(1, 2, 3, 4, 5, 6, 7)

    millisecond = microsecond = 0
    if fraction:
        millisecond, microsecond = divmod(int(fraction), 1000)

    return NepaliDateTime(
        int(year),
        int(month),
        int(day),
        int(hour) if hour else 0,
        int(minute) if minute else 0,
        int(second) if second else 0,
        millisecond,
        microsecond,
    )


def try_parse(s: str) -> NepaliDateTime | None:
    """Parse a string into a NepaliDateTime, returning None on failure.

    Examples:
        >>> try_parse("not a date") is None
        True
    """
    if not isinstance(s, str):
        return None
    try:
        return parse(s)
    except SambatError as exc:
        logger.debug("could not parse %r: %s", s, exc)
        return None


def four_digits(n: int) -> str:
    """Zero-pad a year to four digits, keeping a leading '-' if negative.

    Examples:
        >>> four_digits(2080)
        '2080'
        >>> four_digits(-44)
        '-0044'
    """
    sign = "-" if n < 0 else ""
    return f"{sign}{abs(n):04d}"


def six_digits(n: int) -> str:
    """Render a year with an explicit sign for the wide ISO 8601 form.

    The magnitude follows the sign after a space and a single '0'; it is
    not zero-padded to a fixed width.

    Raises:
        OutOfRangeError: If abs(n) is 10000 or more.

    Examples:
        >>> six_digits(123)
        '+ 0123'
        >>> six_digits(-123)
        '- 0123'
    """
    if n < -FOUR_DIGIT_YEAR_LIMIT or n > FOUR_DIGIT_YEAR_LIMIT:
        raise OutOfRangeError(f"abs({n}) can't be >= {FOUR_DIGIT_YEAR_LIMIT + 1}")
    sign = "-" if n < 0 else "+"
    abs_n = abs(n)
    if abs_n < 100000:
        return f"{sign} 0{abs_n}"
    return f"{sign}{abs_n}"


def three_digits(n: int) -> str:
    return f"{n:03d}"


def two_digits(n: int) -> str:
    return f"{n:02d}"


def _subseconds(value: NepaliDateTime) -> str:
    micros = "" if value.microsecond == 0 else three_digits(value.microsecond)
    return f"{three_digits(value.millisecond)}{micros}"


def format_default(value: NepaliDateTime) -> str:
    """Format as ``YYYY-MM-DD HH:MM:SS.mmm[uuu]``.

    The microsecond digits are only written when non-zero.

    Examples:
        >>> from sambat import NepaliDateTime
        >>> format_default(NepaliDateTime(2080, 1, 15, 10, 30, 45, 123))
        '2080-01-15 10:30:45.123'
    """
    return (
        f"{four_digits(value.year)}-{two_digits(value.month)}-{two_digits(value.day)} "
        f"{two_digits(value.hour)}:{two_digits(value.minute)}:{two_digits(value.second)}"
        f".{_subseconds(value)}"
    )


def format_iso8601(value: NepaliDateTime) -> str:
    """Format without a separator between the date and the hour.

    Years within +/-9999 use four digits; anything wider goes through
    :func:`six_digits`, which refuses it.

    Raises:
        OutOfRangeError: If the year needs more than four digits.

    Examples:
        >>> from sambat import NepaliDateTime
        >>> format_iso8601(NepaliDateTime(2080, 1, 15, 10, 30, 45, 123))
        '2080-01-1510:30:45.123'
    """
    year = value.year
    if -FOUR_DIGIT_YEAR_LIMIT <= year <= FOUR_DIGIT_YEAR_LIMIT:
        y = four_digits(year)
    else:
        y = six_digits(year)
    return (
        f"{y}-{two_digits(value.month)}-{two_digits(value.day)}"
        f"{two_digits(value.hour)}:{two_digits(value.minute)}:{two_digits(value.second)}"
        f".{_subseconds(value)}"
    )


__all__ = [
    "parse",
    "try_parse",
    "format_default",
    "format_iso8601",
    "four_digits",
    "six_digits",
    "three_digits",
    "two_digits",
]
