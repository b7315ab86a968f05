"""Tests for the internal calendar helpers."""

from __future__ import annotations

import datetime

import pytest

from caldate._internal.calendar import (
    days_before_month,
    days_in_month,
    fold_month,
    is_leap_year,
    normalize,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)


class TestLeapYear:
    """Tests for is_leap_year()."""

    @pytest.mark.parametrize("year", [1904, 1996, 2000, 2020, 2024, 2048, 1600, 0, -4])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4, except plain centuries."""
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2021, 2100, 1800, 2050, 1, -1])
    def test_common_years(self, year: int) -> None:
        """Non-leap years."""
        assert not is_leap_year(year)


class TestDaysInMonth:
    """Tests for days_in_month()."""

    def test_thirty_one_day_months(self) -> None:
        """Jan, Mar, May, Jul, Aug, Oct, Dec."""
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2021, month) == 31

    def test_thirty_day_months(self) -> None:
        """Apr, Jun, Sep, Nov."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2021, month) == 30

    def test_february(self) -> None:
        """February depends on the leap rule."""
        assert days_in_month(2020, 2) == 29
        assert days_in_month(2021, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month: int) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2020, month)

    def test_days_before_month(self) -> None:
        """Cumulative days before the first of each month."""
        assert days_before_month(2021, 1) == 0
        assert days_before_month(2021, 3) == 59
        assert days_before_month(2020, 3) == 60
        assert days_before_month(2020, 12) == 335


class TestOrdinals:
    """Tests for ordinal conversion."""

    @pytest.mark.parametrize(
        "ymd",
        [(1, 1, 1), (1900, 1, 1), (1900, 3, 1), (2000, 2, 29), (2000, 12, 31), (2050, 12, 31), (2400, 12, 31)],
    )
    def test_matches_stdlib(self, ymd: tuple[int, int, int]) -> None:
        """Ordinals agree with datetime.date.toordinal()."""
        expected = datetime.date(*ymd).toordinal()
        assert ymd_to_ordinal(*ymd) == expected
        assert ordinal_to_ymd(expected) == ymd

    def test_ordinal_zero_is_end_of_year_zero(self) -> None:
        """Ordinal 0 is 0000-12-31."""
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ymd_to_ordinal(0, 12, 31) == 0

    def test_negative_ordinals(self) -> None:
        """Year 0 is a leap year of 366 days."""
        assert ordinal_to_ymd(-365) == (0, 1, 1)
        assert ordinal_to_ymd(-366) == (-1, 12, 31)
        assert ymd_to_ordinal(-1, 12, 31) == -366

    def test_weekday(self) -> None:
        """Ordinal 1 was a Monday."""
        assert ordinal_to_weekday(1) == 0
        assert ordinal_to_weekday(7) == 6
        assert ordinal_to_weekday(datetime.date(2020, 5, 7).toordinal()) == 3


class TestNormalize:
    """Tests for lenient resolution of out-of-range fields."""

    def test_fold_month(self) -> None:
        """Months outside 1-12 carry into the year."""
        assert fold_month(2020, 13) == (2021, 1)
        assert fold_month(2020, 0) == (2019, 12)
        assert fold_month(2020, -11) == (2019, 1)
        assert fold_month(2020, 25) == (2022, 1)

    def test_day_overflow(self) -> None:
        """Feb 31 2021 is March 3."""
        assert normalize(2021, 2, 31) == (2021, 3, 3)

    def test_day_zero(self) -> None:
        """Day 0 is the last day of the previous month."""
        assert normalize(2020, 1, 0) == (2019, 12, 31)

    def test_month_and_day_overflow(self) -> None:
        """Month carries first, then day."""
        assert normalize(2020, 14, 30) == (2021, 3, 2)

    def test_valid_date_unchanged(self) -> None:
        """Legal triples resolve to themselves."""
        assert normalize(2020, 2, 29) == (2020, 2, 29)
