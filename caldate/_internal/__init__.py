"""Internal utilities for Caldate.

This module contains private implementation details:
    - Constants and tables
    - Calendar arithmetic
    - Ordered field validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
