"""NepaliDateTime: a Bikram Sambat date with a time of day.

This module provides the NepaliDateTime value type. Calendar arithmetic is
delegated to the internal table, day-count and Gregorian bridge modules;
ordering goes through the Gregorian calendar because the Bikram Sambat
day distance carries no direction.
"""

from __future__ import annotations

import datetime as _datetime
import logging

from sambat._internal.constants import MICROS_PER_MILLISECOND, NEPAL_TZ
from sambat._internal.daycount import day_count_since
from sambat._internal.gregorian import (
    gregorian_to_nepali,
    nepali_to_gregorian,
    to_nepal_time,
)
from sambat._internal.table import days_in_month, days_in_year
from sambat._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

logger = logging.getLogger(__name__)


class NepaliDateTime:
    """A date and time in the Bikram Sambat calendar.

    Only the year is checked on construction, since every derived value
    needs its table row. Month, day and time-of-day fields are stored as
    given unless ``strict=True`` is passed.

    Attributes:
        year: The Bikram Sambat year (1970-2250).
        month: The month, 1 = Baisakh .. 12 = Chaitra.
        day: The day of the month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        microsecond: The microsecond within the millisecond (0-999).

    Examples:
        >>> d = NepaliDateTime(2080, 1, 15, 10, 30)
        >>> d.year
        2080
        >>> d.to_gregorian(aware=False)
        datetime.datetime(2023, 4, 28, 10, 30)

        >>> NepaliDateTime(1969)
        Traceback (most recent call last):
        ...
        OutOfRangeError: year must be between 1970 and 2250, got 1969
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_millisecond",
        "_microsecond",
    )

    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        *,
        strict: bool = False,
    ) -> None:
        """Create a NepaliDateTime from component parts.

        Args:
            year: The Bikram Sambat year (1970-2250).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            microsecond: The microsecond within the millisecond (0-999).
            strict: Also validate month, day and time-of-day fields.

        Raises:
            OutOfRangeError: If the year is unsupported, or any other field
                is out of range and strict is set.
        """
        validate_year(year)
        if strict:
            validate_month(month)
            validate_day(year, month, day)
            validate_time(
                hour=hour,
                minute=minute,
                second=second,
                millisecond=millisecond,
                microsecond=microsecond,
            )

        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._millisecond = millisecond
        self._microsecond = microsecond

    # Alternative constructors

    @classmethod
    def from_gregorian(
        cls, value: _datetime.datetime | _datetime.date
    ) -> NepaliDateTime:
        """Create a NepaliDateTime from a Gregorian timestamp.

        A naive value is read as UTC and shifted by the fixed +05:45 Nepal
        offset before conversion; an aware value is converted to that
        offset. A plain date is taken as midnight, naive.

        Args:
            value: A datetime or date on or after 1913-04-13 in Nepal.

        Returns:
            The Bikram Sambat date and time in Nepal at that instant.

        Raises:
            OutOfRangeError: If the instant falls outside the calendar table.

        Examples:
            >>> NepaliDateTime.from_gregorian(datetime.datetime(1913, 4, 12, 18, 15))
            NepaliDateTime(1970, 1, 1, 0, 0, 0, 0, 0)
        """
        if not isinstance(value, _datetime.datetime):
            value = _datetime.datetime(value.year, value.month, value.day)

        local = to_nepal_time(value)
        year, month, day = gregorian_to_nepali(local.date())
        millisecond, microsecond = divmod(local.microsecond, MICROS_PER_MILLISECOND)
        logger.debug("converted %s to BS %d-%02d-%02d", value, year, month, day)
        return cls(
            year,
            month,
            day,
            local.hour,
            local.minute,
            local.second,
            millisecond,
            microsecond,
        )

    @classmethod
    def now(cls, instant: _datetime.datetime | None = None) -> NepaliDateTime:
        """Return the current date and time in Nepal.

        Args:
            instant: The moment to convert. Defaults to the system clock
                read as an aware UTC datetime.
        """
        if instant is None:
            instant = _datetime.datetime.now(_datetime.timezone.utc)
        return cls.from_gregorian(instant)

    @classmethod
    def parse(cls, s: str) -> NepaliDateTime:
        """Parse a string; see :func:`sambat.format.parse`."""
        from sambat.format.iso8601 import parse

        return parse(s)

    @classmethod
    def try_parse(cls, s: str) -> NepaliDateTime | None:
        """Parse a string, returning None instead of raising."""
        from sambat.format.iso8601 import try_parse

        return try_parse(s)

    # Properties

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def millisecond(self) -> int:
        return self._millisecond

    @property
    def microsecond(self) -> int:
        return self._microsecond

    @property
    def total_days_in_month(self) -> int:
        """Return the number of days in this date's month.

        Returns 0 if the month is outside 1-12.
        """
        return days_in_month(self._year, self._month)

    @property
    def total_days(self) -> int:
        """Alias of total_days_in_month."""
        return self.total_days_in_month

    @property
    def total_days_in_year(self) -> int:
        """Return the number of days in this date's year."""
        return days_in_year(self._year)

    @property
    def weekday(self) -> int:
        """Return the day of the week, 1 = Sunday .. 7 = Saturday.

        Examples:
            >>> NepaliDateTime(1970, 1, 1).weekday  # AD 1913-04-13, a Sunday
            1
        """
        return self.to_gregorian(aware=False).isoweekday() % 7 + 1

    # Conversion

    def to_gregorian(self, *, aware: bool = True) -> _datetime.datetime:
        """Return the equivalent Gregorian datetime.

        The time of day is carried over unchanged; the millisecond and
        microsecond fields are combined into the datetime's microsecond.

        Args:
            aware: Attach the fixed Nepal offset as tzinfo. With False the
                naive wall-clock value is returned.

        Examples:
            >>> NepaliDateTime(2080, 1, 1).to_gregorian()
            datetime.datetime(2023, 4, 14, 0, 0, tzinfo=datetime.timezone(datetime.timedelta(seconds=20700), 'NPT'))
        """
        year, month, day = nepali_to_gregorian(self._year, self._month, self._day)
        result = _datetime.datetime(
            year,
            month,
            day,
            self._hour,
            self._minute,
            self._second,
            self._millisecond * MICROS_PER_MILLISECOND + self._microsecond,
            tzinfo=NEPAL_TZ if aware else None,
        )
        logger.debug("converted BS %s to %s", self, result)
        return result

    def day_count_since(self, other: NepaliDateTime) -> int:
        """Return the number of whole days between this date and ``other``.

        The result is a distance and is the same in both directions.
        """
        return day_count_since(
            (self._year, self._month, self._day),
            (other._year, other._month, other._day),
        )

    # Copies

    def merge_time(
        self,
        hour: int,
        minute: int,
        second: int,
        millisecond: int = 0,
        microsecond: int = 0,
    ) -> NepaliDateTime:
        """Return a copy with a new time of day and the same date.

        Examples:
            >>> NepaliDateTime(2080, 1, 15).merge_time(9, 15, 0)
            NepaliDateTime(2080, 1, 15, 9, 15, 0, 0, 0)
        """
        return NepaliDateTime(
            self._year,
            self._month,
            self._day,
            hour,
            minute,
            second,
            millisecond,
            microsecond,
        )

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
        microsecond: int | None = None,
    ) -> NepaliDateTime:
        """Return a copy with the given fields replaced.

        Raises:
            OutOfRangeError: If the new year is unsupported.
        """
        return NepaliDateTime(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
            self._hour if hour is None else hour,
            self._minute if minute is None else minute,
            self._second if second is None else second,
            self._millisecond if millisecond is None else millisecond,
            self._microsecond if microsecond is None else microsecond,
        )

    # Formatting

    def to_iso8601_string(self) -> str:
        """Return the compact ISO 8601 form; see :func:`sambat.format.format_iso8601`."""
        from sambat.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def __str__(self) -> str:
        """Return ``YYYY-MM-DD HH:MM:SS.mmm[uuu]``."""
        from sambat.format.iso8601 import format_default

        return format_default(self)

    def __repr__(self) -> str:
        return (
            f"NepaliDateTime({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, "
            f"{self._millisecond}, {self._microsecond})"
        )

    # Comparison

    def is_before(self, other: NepaliDateTime) -> bool:
        """Return True if this moment is earlier than ``other``."""
        return self.to_gregorian(aware=False) < other.to_gregorian(aware=False)

    def is_after(self, other: NepaliDateTime) -> bool:
        """Return True if this moment is later than ``other``."""
        return self.to_gregorian(aware=False) > other.to_gregorian(aware=False)

    def _key(self) -> tuple[int, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._millisecond,
            self._microsecond,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NepaliDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NepaliDateTime):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NepaliDateTime):
            return NotImplemented
        return not self.is_after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NepaliDateTime):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NepaliDateTime):
            return NotImplemented
        return not self.is_before(other)


__all__ = ["NepaliDateTime"]
