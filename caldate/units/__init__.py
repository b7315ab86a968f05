"""Calendar unit enumerations for Caldate."""

from __future__ import annotations

from caldate.units.month import Month
from caldate.units.weekday import Weekday

__all__: list[str] = ["Month", "Weekday"]
