"""Pattern-style date formatting.

This module formats dates from letter-run patterns such as "yyyy-MM-dd".
A run of the same ASCII letter forms one token; the letter picks the
field and the run length picks the width or text style.

Supported Letters:
    y    - Year. "yy" is the last two digits; other lengths zero-pad.
    M    - Month. "M"/"MM" are numeric, "MMM" is "Jan", "MMMM" is "January".
    d    - Day of month, zero-padded to the run length.
    D    - Day of year, zero-padded to the run length.
    E    - Weekday. Up to "EEE" is "Mon", "EEEE" is "Monday".
    G    - Era, "AD" or "BC", at any run length.
    L    - Stand-alone month, same widths as M.
    u    - Weekday number, Monday=1 through Sunday=7.
    F    - Day-of-week-in-month: 1 for days 1-7, 2 for days 8-14, ...

Week-of-year and week-of-month letters (w, W) depend on locale week
rules and are rejected, as are time-of-day letters.

Literals:
    Text between single quotes is copied verbatim, and '' is a single
    quote. Characters that are not ASCII letters pass through unchanged.

Functions:
    format_date: Format a Date using a pattern string.

Examples:
    >>> from caldate import Date
    >>> from caldate.format import format_date

    >>> format_date(Date(7, 5, 2020), "dd/MM/yyyy")
    '07/05/2020'

    >>> format_date(Date(7, 5, 2020), "EEEE, MMMM d, yyyy")
    'Thursday, May 7, 2020'

    >>> format_date(Date(7, 5, 2020), "'Day' D 'of' yyyy")
    'Day 128 of 2020'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, NamedTuple

from caldate._internal.calendar import (
    days_before_month,
    ordinal_to_weekday,
    ordinal_to_ymd,
    resolve_ordinal,
)
from caldate._internal.constants import DAYS_PER_WEEK
from caldate.errors import PatternError
from caldate.units.month import Month
from caldate.units.weekday import Weekday

if TYPE_CHECKING:
    from caldate.core.date import Date

logger = logging.getLogger(__name__)

_QUOTE = "'"


class _Fields(NamedTuple):
    """Calendar fields of the resolved date being formatted."""

    year: int
    month: int
    day: int
    day_of_year: int
    weekday: Weekday


def _pad(value: int, width: int) -> str:
    return f"{value:0{width}d}"


def _format_year(fields: _Fields, count: int) -> str:
    if count == 2:
        return _pad(fields.year % 100, 2)
    return _pad(fields.year, count)


def _format_month(fields: _Fields, count: int) -> str:
    if count >= 4:
        return Month(fields.month).full_name
    if count == 3:
        return Month(fields.month).short_name
    return _pad(fields.month, count)


def _format_day(fields: _Fields, count: int) -> str:
    return _pad(fields.day, count)


def _format_day_of_year(fields: _Fields, count: int) -> str:
    return _pad(fields.day_of_year, count)


def _format_weekday(fields: _Fields, count: int) -> str:
    if count >= 4:
        return fields.weekday.full_name
    return fields.weekday.short_name


def _format_era(fields: _Fields, count: int) -> str:
    return "AD" if fields.year > 0 else "BC"


def _format_weekday_number(fields: _Fields, count: int) -> str:
    return _pad(fields.weekday.value + 1, count)


def _format_weekday_in_month(fields: _Fields, count: int) -> str:
    return _pad((fields.day - 1) // DAYS_PER_WEEK + 1, count)


_TOKEN_FORMATTERS: dict[str, Callable[[_Fields, int], str]] = {
    "y": _format_year,
    "M": _format_month,
    "d": _format_day,
    "D": _format_day_of_year,
    "E": _format_weekday,
    "G": _format_era,
    "L": _format_month,
    "u": _format_weekday_number,
    "F": _format_weekday_in_month,
}


def format_date(value: Date, pattern: str) -> str:
    """Format a date using a letter-run pattern.

    Out-of-range fields are rolled over onto the calendar before
    formatting, so Date(31, 2, 2021) renders as March 3, 2021.

    Args:
        value: The Date to format.
        pattern: Pattern string, e.g. "yyyy-MM-dd" or "MMMM d, yyyy".

    Returns:
        Formatted string.

    Raises:
        PatternError: If the pattern contains an unsupported letter or an
            unterminated quote, or is not a string.

    Examples:
        >>> format_date(Date(7, 5, 2020), "yyyy-MM-dd")
        '2020-05-07'

        >>> format_date(Date(7, 5, 2020), "MMMM d, yyyy")
        'May 7, 2020'

        >>> format_date(Date(7, 5, 2020), "yyyy-QQ")
        Traceback (most recent call last):
        ...
        caldate.errors.PatternError: Illegal pattern character 'Q' in 'yyyy-QQ'
    """
    if not isinstance(pattern, str):
        raise PatternError(
            f"pattern must be a str, got {type(pattern).__name__}"
        )

    fields = _resolve_fields(value)

    result = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == _QUOTE:
            literal, i = _read_quoted(pattern, i)
            result.append(literal)
        elif char.isascii() and char.isalpha():
            end = i
            while end < len(pattern) and pattern[end] == char:
                end += 1
            formatter = _TOKEN_FORMATTERS.get(char)
            if formatter is None:
                logger.debug("Rejected pattern %r at letter %r", pattern, char)
                raise PatternError(
                    f"Illegal pattern character {char!r} in {pattern!r}"
                )
            result.append(formatter(fields, end - i))
            i = end
        else:
            result.append(char)
            i += 1

    return "".join(result)


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal beginning at pattern[start].

    Args:
        pattern: The full pattern.
        start: Index of the opening quote.

    Returns:
        Tuple of (literal text, index just past the closing quote).

    Raises:
        PatternError: If the closing quote is missing.
    """
    # '' outside a quoted run is an escaped quote
    if pattern.startswith(_QUOTE * 2, start):
        return (_QUOTE, start + 2)

    chars = []
    i = start + 1
    while i < len(pattern):
        if pattern[i] == _QUOTE:
            if pattern.startswith(_QUOTE * 2, i):
                chars.append(_QUOTE)
                i += 2
                continue
            return ("".join(chars), i + 1)
        chars.append(pattern[i])
        i += 1

    logger.debug("Rejected pattern %r: unterminated quote", pattern)
    raise PatternError(f"Unterminated quote in {pattern!r}")


def _resolve_fields(value: Date) -> _Fields:
    ordinal = resolve_ordinal(value.year, value.month, value.day)
    year, month, day = ordinal_to_ymd(ordinal)
    return _Fields(
        year=year,
        month=month,
        day=day,
        day_of_year=days_before_month(year, month) + day,
        weekday=Weekday(ordinal_to_weekday(ordinal)),
    )


__all__ = ["format_date"]
