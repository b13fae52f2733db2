"""Tests for formatting module."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from sambat import NepaliDateTime, format_default, format_iso8601
from sambat.errors import OutOfRangeError
from sambat.format.iso8601 import four_digits, six_digits, three_digits, two_digits


def _fields(year: int) -> SimpleNamespace:
    """An object with NepaliDateTime's fields but no year validation."""
    return SimpleNamespace(
        year=year, month=1, day=2, hour=3, minute=4, second=5, millisecond=6, microsecond=0
    )


class TestFormatDefault:
    """Tests for format_default and str()."""

    def test_full_precision(self) -> None:
        """Microseconds are appended when non-zero."""
        d = NepaliDateTime(2080, 1, 15, 10, 30, 45, 123, 456)
        assert format_default(d) == "2080-01-15 10:30:45.123456"
        assert str(d) == "2080-01-15 10:30:45.123456"

    def test_zero_microseconds_omitted(self) -> None:
        """Milliseconds always appear, microseconds only when non-zero."""
        assert str(NepaliDateTime(2080, 1, 15, 10, 30, 45, 123)) == "2080-01-15 10:30:45.123"

    def test_midnight(self) -> None:
        """Defaults format as midnight."""
        assert str(NepaliDateTime(2080, 1, 5)) == "2080-01-05 00:00:00.000"

    def test_padding(self) -> None:
        """Small values are zero-padded."""
        d = NepaliDateTime(2080, 2, 3, 4, 5, 6, 7, 8)
        assert str(d) == "2080-02-03 04:05:06.007008"


class TestFormatISO8601:
    """Tests for format_iso8601."""

    def test_no_separator(self) -> None:
        """The hour follows the day directly."""
        d = NepaliDateTime(2080, 1, 15, 10, 30, 45, 123, 456)
        assert format_iso8601(d) == "2080-01-1510:30:45.123456"
        assert d.to_iso8601_string() == "2080-01-1510:30:45.123456"

    def test_last_supported_year(self) -> None:
        """Year 2250 keeps a four-digit year."""
        assert NepaliDateTime(2250, 12, 30).to_iso8601_string() == "2250-12-3000:00:00.000"

    def test_four_digit_limit(self) -> None:
        """+/-9999 still use four digits."""
        assert format_iso8601(_fields(9999)) == "9999-01-0203:04:05.006"
        assert format_iso8601(_fields(-9999)) == "-9999-01-0203:04:05.006"

    @pytest.mark.parametrize("year", [10000, -10000, 123456])
    def test_wide_year_rejected(self, year: int) -> None:
        """Years needing more than four digits fail."""
        with pytest.raises(OutOfRangeError):
            format_iso8601(_fields(year))


class TestDigitHelpers:
    """Tests for the padding helpers."""

    @pytest.mark.parametrize(
        "n,expected",
        [(2080, "2080"), (7, "0007"), (45, "0045"), (123, "0123"), (-44, "-0044"), (-1234, "-1234")],
    )
    def test_four_digits(self, n: int, expected: str) -> None:
        """Years are padded to four digits after the sign."""
        assert four_digits(n) == expected

    def test_six_digits_within_guard(self) -> None:
        """Values under the guard get a sign, a space and a leading zero."""
        assert six_digits(123) == "+ 0123"
        assert six_digits(-123) == "- 0123"
        assert six_digits(9999) == "+ 09999"

    @pytest.mark.parametrize("n", [10000, -10000, 100000])
    def test_six_digits_guard(self, n: int) -> None:
        """Magnitudes of 10000 or more are refused."""
        with pytest.raises(OutOfRangeError, match="can't be >= 10000"):
            six_digits(n)

    def test_three_digits(self) -> None:
        """Zero-pad to three."""
        assert three_digits(5) == "005"
        assert three_digits(45) == "045"
        assert three_digits(456) == "456"

    def test_two_digits(self) -> None:
        """Zero-pad to two."""
        assert two_digits(5) == "05"
        assert two_digits(45) == "45"
