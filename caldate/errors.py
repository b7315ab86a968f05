"""Caldate exception hierarchy.

All Caldate-specific exceptions inherit from CaldateError.
"""

from __future__ import annotations

from enum import Enum


class CaldateError(Exception):
    """Base exception for all Caldate errors."""

    pass


class ValidationErrorKind(Enum):
    """Which validation check a date failed.

    Checks run in declaration order, so a date with several bad fields
    always reports the first one listed here.
    """

    YEAR_OUT_OF_RANGE = "year_out_of_range"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    INVALID_DAY_FOR_MONTH = "invalid_day_for_month"


class ValidationError(CaldateError):
    """A date failed validation.

    Raised by Date.validate_strict() when the stored fields do not form
    a legal date inside the supported year range.

    Attributes:
        message: Human-readable reason for the failure.
        kind: The check that failed.

    Examples:
        - Year outside 1900-2050
        - Month value outside 1-12
        - Day value outside valid range for month
    """

    def __init__(self, message: str, kind: ValidationErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class PatternError(CaldateError, ValueError):
    """A format pattern could not be interpreted.

    Examples:
        - Unknown pattern letter such as "Q"
        - Unterminated quoted literal
    """

    pass


__all__ = [
    "CaldateError",
    "ValidationErrorKind",
    "ValidationError",
    "PatternError",
]
