"""Validation utilities for Caldate.

This module provides the ordered checks behind Date.validate_strict():
year range first, then month range, then day-of-month.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from caldate._internal.calendar import days_in_month
from caldate._internal.constants import MAX_MONTH, MAX_YEAR, MIN_MONTH, MIN_YEAR
from caldate.errors import ValidationError, ValidationErrorKind

logger = logging.getLogger(__name__)


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
            ValidationErrorKind.YEAR_OUT_OF_RANGE,
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < MIN_MONTH or month > MAX_MONTH:
        raise ValidationError(
            f"Month must be between {MIN_MONTH} and {MAX_MONTH}",
            ValidationErrorKind.MONTH_OUT_OF_RANGE,
        )


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    if day < 1 or day > days_in_month(year, month):
        raise ValidationError(
            "Invalid day for the given month and year",
            ValidationErrorKind.INVALID_DAY_FOR_MONTH,
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a supported date.

    Checks run in a fixed order so the first bad field is the one
    reported: year, then month, then day.

    Raises:
        ValidationError: If the date is invalid.

    Examples:
        >>> validate_date(2020, 2, 29)
        >>> validate_date(2021, 2, 29)
        Traceback (most recent call last):
        ...
        caldate.errors.ValidationError: Invalid day for the given month and year
    """
    try:
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
    except ValidationError as exc:
        logger.debug(
            "Rejected date day=%d month=%d year=%d: %s",
            day,
            month,
            year,
            exc.kind.value,
        )
        raise


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
