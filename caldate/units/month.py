"""Month enumeration with fixed English names.

This module provides the Month enum used by pattern formatting for the
MMM and MMMM tokens.
"""

from __future__ import annotations

from enum import Enum


class Month(Enum):
    """Calendar month, valued 1-12.

    Names are a fixed English table; no locale lookup is performed.

    Examples:
        >>> Month(5).full_name
        'May'
        >>> Month.SEPTEMBER.short_name
        'Sep'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def full_name(self) -> str:
        """Return the full month name, e.g. 'January'."""
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Return the three-letter month name, e.g. 'Jan'."""
        return self.full_name[:3]


__all__ = ["Month"]
