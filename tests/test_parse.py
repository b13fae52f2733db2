"""Tests for parsing module."""

from __future__ import annotations

import pytest

from sambat import NepaliDateTime, parse, try_parse
from sambat.errors import InvalidFormatError, OutOfRangeError


class TestParse:
    """Tests for parse."""

    def test_full_timestamp(self) -> None:
        """Parse date, time and six fractional digits."""
        d = parse("2080-01-15 10:30:45.123456")
        assert d.year == 2080
        assert d.month == 1
        assert d.day == 15
        assert d.hour == 10
        assert d.minute == 30
        assert d.second == 45
        assert d.millisecond == 123
        assert d.microsecond == 456

    def test_date_only(self) -> None:
        """Time fields default to zero."""
        assert parse("2080-01-15") == NepaliDateTime(2080, 1, 15)

    def test_compact_date(self) -> None:
        """Hyphens are optional."""
        assert parse("20800115") == NepaliDateTime(2080, 1, 15)

    def test_t_separator(self) -> None:
        """'T' separates date and time."""
        assert parse("2080-01-15T10:30:45") == NepaliDateTime(2080, 1, 15, 10, 30, 45)

    def test_hour_only(self) -> None:
        """Minutes and seconds are optional."""
        assert parse("2080-01-15 10") == NepaliDateTime(2080, 1, 15, 10)

    def test_hour_minute(self) -> None:
        """Seconds are optional."""
        assert parse("2080-01-15 10:30") == NepaliDateTime(2080, 1, 15, 10, 30)

    def test_compact_time(self) -> None:
        """Colons are optional."""
        assert parse("2080-01-15T103045") == NepaliDateTime(2080, 1, 15, 10, 30, 45)

    def test_signed_year(self) -> None:
        """An explicit '+' sign is accepted."""
        assert parse("+2080-01-15").year == 2080

    @pytest.mark.parametrize(
        "fraction,millisecond,microsecond",
        [
            ("1", 0, 1),
            ("12", 0, 12),
            ("123", 0, 123),
            ("1234", 1, 234),
            ("123456", 123, 456),
            ("000001", 0, 1),
        ],
    )
    def test_fraction(self, fraction: str, millisecond: int, microsecond: int) -> None:
        """Fraction digits are one integer split at the thousands."""
        d = parse(f"2080-01-15 10:30:45.{fraction}")
        assert (d.millisecond, d.microsecond) == (millisecond, microsecond)

    def test_comma_fraction(self) -> None:
        """',' is accepted as the decimal mark."""
        d = parse("2080-01-15 10:30:45,5")
        assert (d.millisecond, d.microsecond) == (0, 5)

    def test_short_fraction_is_not_padded(self) -> None:
        """A three digit fraction lands in the microsecond field."""
        d = parse("2080-01-15 10:30:45.123")
        assert (d.millisecond, d.microsecond) == (0, 123)

    @pytest.mark.parametrize(
        "suffix", ["Z", "z", " Z", "+05:45", "-0545", "+05", " +05:45"]
    )
    def test_timezone_ignored(self, suffix: str) -> None:
        """Timezone designators are accepted and ignored."""
        assert parse(f"2080-01-15 10:30:45{suffix}") == NepaliDateTime(2080, 1, 15, 10, 30, 45)

    def test_unchecked_month_day(self) -> None:
        """Month and day are not validated."""
        d = parse("2080-13-40")
        assert (d.month, d.day) == (13, 40)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2080",
            "2080/01/15",
            "2080-1-15",
            "80-01-15",
            "2080-01-15 10:30:45.1234567",
            "2080-01-15 10:30:45.",
            "2080-01-15X10:30:45",
            " 2080-01-15",
            "2080-01-15 10:30:45 EST",
            "not a date",
        ],
    )
    def test_invalid_format(self, text: str) -> None:
        """Strings outside the grammar raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError, match="Invalid NepaliDateTime format"):
            parse(text)

    @pytest.mark.parametrize("text", ["1969-01-01", "2251-01-01", "-2080-01-15"])
    def test_year_out_of_range(self, text: str) -> None:
        """Unsupported years raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            parse(text)

    def test_classmethod(self) -> None:
        """NepaliDateTime.parse delegates to parse."""
        assert NepaliDateTime.parse("2080-01-15") == parse("2080-01-15")


class TestTryParse:
    """Tests for try_parse."""

    def test_valid(self) -> None:
        """Valid input parses normally."""
        assert try_parse("2080-01-15 10:30") == NepaliDateTime(2080, 1, 15, 10, 30)

    def test_invalid_format(self) -> None:
        """Invalid input gives None."""
        assert try_parse("2080/01/15") is None

    def test_out_of_range(self) -> None:
        """Unsupported years give None."""
        assert try_parse("1969-01-01") is None

    def test_not_a_string(self) -> None:
        """Non-string input gives None."""
        assert try_parse(None) is None  # type: ignore[arg-type]

    def test_classmethod(self) -> None:
        """NepaliDateTime.try_parse delegates to try_parse."""
        assert NepaliDateTime.try_parse("garbage") is None


class TestParseFormatInverse:
    """Tests for parsing formatted values."""

    @pytest.mark.parametrize(
        "value",
        [
            NepaliDateTime(2080, 1, 15, 10, 30, 45, 123, 456),
            NepaliDateTime(1970, 1, 1),
            NepaliDateTime(2250, 12, 30, 23, 59, 59, 999, 999),
            NepaliDateTime(2081, 6, 9, 0, 0, 0, 0, 7),
        ],
    )
    def test_parse_of_str(self, value: NepaliDateTime) -> None:
        """parse(str(value)) gives back the value."""
        assert parse(str(value)) == value
