"""Tests for day counting over the Bikram Sambat table."""

from __future__ import annotations

import pytest

from sambat._internal.daycount import (
    count_total_days,
    date_from_day_offset,
    day_count_since,
)
from sambat._internal.table import NEPALI_YEARS
from sambat.errors import OutOfRangeError


class TestCountTotalDays:
    """Tests for absolute day counts."""

    def test_table_start_is_zero(self) -> None:
        """The first day of the table is day zero."""
        assert count_total_days(1969, 1, 1) == 0

    def test_anchor_date(self) -> None:
        """BS 1969-09-18 is eight months and seventeen days in."""
        assert count_total_days(1969, 9, 18) == 31 + 32 + 31 + 32 + 31 + 30 + 30 + 30 + 17

    def test_first_supported_year(self) -> None:
        """BS 1970-01-01 follows the 366 days of 1969."""
        assert count_total_days(1970, 1, 1) == 366

    def test_next_day(self) -> None:
        """Consecutive days differ by one across a month boundary."""
        last = NEPALI_YEARS[2080][1]
        assert count_total_days(2080, 2, 1) - count_total_days(2080, 1, last) == 1

    def test_next_year(self) -> None:
        """Consecutive days differ by one across a year boundary."""
        assert count_total_days(2081, 1, 1) - count_total_days(2080, 12, 30) == 1


class TestDayCountSince:
    """Tests for the day distance."""

    def test_same_date(self) -> None:
        """A date is zero days from itself."""
        assert day_count_since((2080, 1, 15), (2080, 1, 15)) == 0

    def test_is_symmetric(self) -> None:
        """Direction is discarded."""
        a = (2080, 1, 15)
        b = (2081, 5, 3)
        assert day_count_since(a, b) == day_count_since(b, a) > 0

    def test_whole_year(self) -> None:
        """One table year apart is the declared year length."""
        assert day_count_since((2081, 1, 1), (2080, 1, 1)) == NEPALI_YEARS[2080][0]


class TestDateFromDayOffset:
    """Tests for walking forward from a start date."""

    def test_zero_offset(self) -> None:
        """No offset lands on the start date."""
        assert date_from_day_offset(1970, 1, 1, 0) == (1970, 1, 1)

    def test_within_first_month(self) -> None:
        """Small offsets stay in Baisakh."""
        assert date_from_day_offset(1970, 1, 1, 30) == (1970, 1, 31)

    def test_month_boundary(self) -> None:
        """Offset equal to the first month length starts month two."""
        assert date_from_day_offset(1970, 1, 1, 31) == (1970, 2, 1)

    def test_year_boundary(self) -> None:
        """Offset equal to the year length starts the next year."""
        assert date_from_day_offset(1970, 1, 1, 365) == (1971, 1, 1)

    def test_last_day_of_year(self) -> None:
        """Offset one short of the year length is the last day."""
        assert date_from_day_offset(1970, 1, 1, 364) == (1970, 12, 30)

    def test_inverse_of_count(self) -> None:
        """Walking the counted distance returns the original date."""
        for date in [(1970, 1, 1), (2000, 6, 15), (2080, 12, 30), (2250, 12, 30)]:
            offset = count_total_days(*date) - count_total_days(1970, 1, 1)
            assert date_from_day_offset(1970, 1, 1, offset) == date

    def test_negative_offset(self) -> None:
        """Negative offsets are rejected."""
        with pytest.raises(OutOfRangeError):
            date_from_day_offset(1970, 1, 1, -1)

    def test_past_table_end(self) -> None:
        """Offsets beyond the last table year are rejected."""
        offset = count_total_days(2250, 12, 30) - count_total_days(1970, 1, 1) + 1
        with pytest.raises(OutOfRangeError):
            date_from_day_offset(1970, 1, 1, offset)
