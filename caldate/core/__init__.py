"""Core value types for Caldate."""

from __future__ import annotations

from caldate.core.date import Date

__all__: list[str] = ["Date"]
