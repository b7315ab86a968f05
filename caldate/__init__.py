"""Caldate: a small calendar-date value type.

Caldate provides an immutable Date holding day, month and year, with
two-tier validation against the 1900-2050 range, comparison, calendar
arithmetic and pattern formatting.

Core Types:
    Date: Calendar date (day, month, year)

Units:
    Month: Month of the year with English names
    Weekday: Day of the week with English names

Format Functions:
    format_date: Format a Date using a pattern such as "yyyy-MM-dd"

Exceptions:
    CaldateError: Base exception
    ValidationError: Date failed validation (carries a ValidationErrorKind)
    PatternError: Format pattern could not be interpreted

Example:
    >>> from caldate import Date
    >>> d = Date(31, 1, 2020)
    >>> d.validate()
    True
    >>> d.plus_months(1)
    Date(day=29, month=2, year=2020)
    >>> d.format("MMMM d, yyyy")
    'January 31, 2020'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from caldate.core.date import Date

# Units
from caldate.units.month import Month
from caldate.units.weekday import Weekday

# Exceptions
from caldate.errors import (
    CaldateError,
    PatternError,
    ValidationError,
    ValidationErrorKind,
)

# Format functions
from caldate.format import format_date

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Units
    "Month",
    "Weekday",
    # Exceptions
    "CaldateError",
    "ValidationError",
    "ValidationErrorKind",
    "PatternError",
    # Format functions
    "format_date",
]
