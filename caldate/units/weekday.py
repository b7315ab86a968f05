"""Weekday enumeration with fixed English names."""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """Day of the week, Monday=0 through Sunday=6.

    Matches the numbering of Python's datetime.date.weekday().

    Examples:
        >>> Weekday(3).full_name
        'Thursday'
        >>> Weekday.SUNDAY.short_name
        'Sun'
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.full_name[:3]


__all__ = ["Weekday"]
