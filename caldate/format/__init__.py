"""Date formatting.

Functions:
    format_date: Format a Date using a letter-run pattern.

Examples:
    >>> from caldate import Date
    >>> from caldate.format import format_date

    >>> format_date(Date(7, 5, 2020), "MMMM d, yyyy")
    'May 7, 2020'
"""

from __future__ import annotations

from caldate.format.pattern import format_date

__all__: list[str] = ["format_date"]
