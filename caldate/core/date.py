"""Date class representing a calendar date.

This module provides the Date value type: a day, month and year stored
verbatim, with validation against the supported year range, comparison,
calendar arithmetic and pattern formatting.
"""

from __future__ import annotations

from caldate._internal.calendar import (
    days_before_month,
    days_in_month,
    fold_month,
    is_leap_year,
    normalize,
    ordinal_to_weekday,
    ordinal_to_ymd,
    resolve_ordinal,
)
from caldate._internal.constants import DEFAULT_PATTERN, MONTHS_PER_YEAR
from caldate._internal.validation import validate_date
from caldate.errors import ValidationError
from caldate.format.pattern import format_date
from caldate.units.month import Month
from caldate.units.weekday import Weekday


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful date field
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date holds day, month and year exactly as given. Construction never
    checks ranges, so Date(31, 2, 2021) is representable; validity is
    asked for explicitly with validate() or validate_strict(). A date is
    valid when the year is 1900-2050, the month is 1-12 and the day
    exists in that month.

    Instances are immutable. Arithmetic and formatting return new values.

    Attributes:
        day: The day of the month.
        month: The month.
        year: The year.

    Examples:
        >>> d = Date(7, 5, 2020)
        >>> d.day, d.month, d.year
        (7, 5, 2020)
        >>> str(d)
        '2020-05-07'

        >>> Date(29, 2, 2021).validate()  # 2021 is not a leap year
        False
    """

    __slots__ = ("_day", "_month", "_year")

    def __init__(self, day: int, month: int, year: int) -> None:
        """Create a Date from day, month and year.

        Args:
            day: The day of the month.
            month: The month.
            year: The year.

        Raises:
            TypeError: If any component is not an int.
        """
        object.__setattr__(self, "_day", _require_int("day", day))
        object.__setattr__(self, "_month", _require_int("month", month))
        object.__setattr__(self, "_year", _require_int("year", year))

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number.

        The ordinal is the number of days since year 1, where
        ordinal 1 = 0001-01-01.

        Examples:
            >>> Date.from_ordinal(737552)
            Date(day=7, month=5, year=2020)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(day, month, year)

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year field is a leap year.

        Examples:
            >>> Date(1, 1, 1900).is_leap_year  # Divisible by 100 but not 400
            False
            >>> Date(1, 1, 2000).is_leap_year  # Divisible by 400
            True
        """
        return is_leap_year(self._year)

    @property
    def day_of_week(self) -> Weekday:
        """Return the weekday of the calendar day this date resolves to.

        Examples:
            >>> Date(7, 5, 2020).day_of_week
            <Weekday.THURSDAY: 3>
        """
        return Weekday(ordinal_to_weekday(self.to_ordinal()))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366) of the resolved date.

        Examples:
            >>> Date(31, 12, 2020).day_of_year
            366
        """
        year, month, day = normalize(self._year, self._month, self._day)
        return days_before_month(year, month) + day

    @property
    def month_name(self) -> str:
        """Return the full English name of the resolved month."""
        _, month, _ = normalize(self._year, self._month, self._day)
        return Month(month).full_name

    def to_ordinal(self) -> int:
        """Return the ordinal day number of the calendar day this date denotes.

        Out-of-range fields roll over: the month is carried into the year,
        then the day counts from the first of that month.

        Examples:
            >>> Date(1, 3, 2021).to_ordinal() == Date(29, 2, 2021).to_ordinal()
            True
        """
        return resolve_ordinal(self._year, self._month, self._day)

    def validate(self) -> bool:
        """Return True if this date is valid.

        Never raises; use validate_strict() to learn why a date is invalid.

        Examples:
            >>> Date(29, 2, 2020).validate()
            True
            >>> Date(1, 1, 1899).validate()
            False
        """
        try:
            self.validate_strict()
        except ValidationError:
            return False
        return True

    def validate_strict(self) -> None:
        """Validate this date, raising with the reason if it is invalid.

        The year must be within 1900 to 2050, the month within 1 to 12,
        and the day must exist in that month of that year. Checks run in
        that order, so a bad year is reported even if the month and day
        are also bad.

        Raises:
            ValidationError: If the date is invalid. The error's kind names
                the failed check.

        Examples:
            >>> Date(31, 2, 2021).validate_strict()
            Traceback (most recent call last):
            ...
            caldate.errors.ValidationError: Invalid day for the given month and year
        """
        validate_date(self._year, self._month, self._day)

    def is_after(self, other: Date) -> bool:
        """Return True if this date is strictly after other.

        Compares the stored fields: year first, then month, then day.

        Raises:
            TypeError: If other is not a Date.
        """
        return self._key() > self._other_key(other)

    def is_before(self, other: Date) -> bool:
        """Return True if this date is strictly before other.

        Raises:
            TypeError: If other is not a Date.
        """
        return self._key() < self._other_key(other)

    def plus_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new Date with months and years rolled over as needed.

        Examples:
            >>> Date(28, 2, 2020).plus_days(2)
            Date(day=1, month=3, year=2020)

            >>> Date(1, 1, 2020).plus_days(-1)
            Date(day=31, month=12, year=2019)
        """
        return Date.from_ordinal(self.to_ordinal() + _require_int("days", days))

    def plus_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last day of that month.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new Date offset by the specified months.

        Examples:
            >>> Date(15, 1, 2020).plus_months(2)
            Date(day=15, month=3, year=2020)

            >>> Date(31, 1, 2020).plus_months(1)  # Clamps to Feb 29
            Date(day=29, month=2, year=2020)

            >>> Date(31, 3, 2021).plus_months(-1)  # Clamps to Feb 28
            Date(day=28, month=2, year=2021)
        """
        _require_int("months", months)
        year, month, day = normalize(self._year, self._month, self._day)

        total_months = year * MONTHS_PER_YEAR + (month - 1) + months
        new_year, new_month = fold_month(0, total_months + 1)

        new_day = min(day, days_in_month(new_year, new_month))
        return Date(new_day, new_month, new_year)

    def plus_years(self, years: int) -> Date:
        """Return a new Date with years added to the year field.

        Day and month are copied unchanged and the result is not
        corrected, so Feb 29 plus one year is Feb 29 of a non-leap year,
        which does not validate.

        Args:
            years: Number of years to add (can be negative).

        Examples:
            >>> Date(15, 1, 2020).plus_years(1)
            Date(day=15, month=1, year=2021)

            >>> Date(29, 2, 2020).plus_years(1)
            Date(day=29, month=2, year=2021)
        """
        return Date(self._day, self._month, self._year + _require_int("years", years))

    def format(self, pattern: str) -> str:
        """Format this date according to a pattern.

        Args:
            pattern: Pattern such as "yyyy-MM-dd", "dd/MM/yyyy" or
                "MMMM d, yyyy". See caldate.format.pattern for all letters.

        Returns:
            The formatted string.

        Raises:
            PatternError: If the pattern cannot be interpreted.

        Examples:
            >>> Date(7, 5, 2020).format("dd/MM/yyyy")
            '07/05/2020'
            >>> Date(7, 5, 2020).format("MMMM d, yyyy")
            'May 7, 2020'
        """
        return format_date(self, pattern)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    @staticmethod
    def _other_key(other: object) -> tuple[int, int, int]:
        if not isinstance(other, Date):
            raise TypeError(
                f"cannot compare Date with {type(other).__name__}"
            )
        return other._key()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Date], tuple[int, int, int]]:
        # copy and pickle rebuild through the constructor, not setattr
        return (type(self), (self._day, self._month, self._year))

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Two dates are equal when day, month and year are all equal.

        Examples:
            >>> Date(15, 6, 2020) == Date(15, 6, 2020)
            True
            >>> Date(15, 6, 2020) == Date(16, 6, 2020)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        """Return a hash over (day, month, year)."""
        return hash((self._day, self._month, self._year))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(day=7, month=5, year=2020)'.
        """
        return f"Date(day={self._day}, month={self._month}, year={self._year})"

    def __str__(self) -> str:
        """Return the date formatted as yyyy-MM-dd."""
        return self.format(DEFAULT_PATTERN)

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]
