"""Internal constants for Caldate.

These constants define the limits and tables used throughout the
library. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits accepted by validation
MIN_YEAR: int = 1900
MAX_YEAR: int = 2050

MIN_MONTH: int = 1
MAX_MONTH: int = 12

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Pattern used by str(Date)
DEFAULT_PATTERN: str = "yyyy-MM-dd"


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "DAYS_IN_MONTH",
    "DEFAULT_PATTERN",
]
