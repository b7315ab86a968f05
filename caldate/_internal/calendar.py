"""Calendar utilities for Caldate.

This module provides internal functions for calendar calculations in
the proleptic Gregorian calendar: leap year logic, month lengths and
conversion between (year, month, day) triples and ordinal day numbers.

Ordinal 1 = 0001-01-01 (January 1, year 1). Ordinals of zero and below
continue backwards through astronomical year numbering, so every
integer maps to exactly one calendar day.

This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MAX_MONTH,
    MIN_MONTH,
    MONTHS_PER_YEAR,
)

# Days per Gregorian cycle
_DAYS_PER_400_YEARS = 146097
_DAYS_PER_100_YEARS = 36524
_DAYS_PER_4_YEARS = 1461
_DAYS_PER_YEAR = 365


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2020)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2021)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < MIN_MONTH or month > MAX_MONTH:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def fold_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Month 13 of 2020 is January 2021; month 0 of 2020 is December 2019.

    Args:
        year: The year.
        month: Any integer month.

    Returns:
        Tuple of (year, month) with month in 1-12.
    """
    years, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return (year + years, month_index + 1)


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The month must already be in 1-12. The day is not range checked:
    it is treated as an offset from the first of the month, so day 0
    is the last day of the previous month.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day, any integer.

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps this correct for years before 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1); divmod floors, so the
    # remainder is non-negative even for ordinals before year 1
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, _DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year (1-366) to month and day."""
    for month in range(MIN_MONTH, MAX_MONTH + 1):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def resolve_ordinal(year: int, month: int, day: int) -> int:
    """Return the ordinal of a possibly out-of-range triple.

    The month is folded into the year first, then the day is applied
    as an offset from the first of the resulting month.

    Examples:
        >>> ordinal_to_ymd(resolve_ordinal(2021, 2, 31))
        (2021, 3, 3)
        >>> ordinal_to_ymd(resolve_ordinal(2020, 1, 0))
        (2019, 12, 31)
    """
    year, month = fold_month(year, month)
    return ymd_to_ordinal(year, month, day)


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Resolve any triple onto the calendar day it denotes."""
    return ordinal_to_ymd(resolve_ordinal(year, month, day))


def ordinal_to_weekday(ordinal: int) -> int:
    """Convert an ordinal to day of week (Monday=0, Sunday=6).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return (ordinal - 1) % DAYS_PER_WEEK


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "fold_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "resolve_ordinal",
    "normalize",
    "ordinal_to_weekday",
]
