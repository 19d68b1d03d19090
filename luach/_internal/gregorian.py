"""Gregorian calendar utilities for Luach.

This module converts between proleptic Gregorian (year, month, day)
triples and absolute dates, the single day count every conversion in
the library pivots through.

Absolute date 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from luach._internal.constants import DAYS_IN_GREGORIAN_MONTH


def is_gregorian_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_gregorian_leap_year(2000)  # Divisible by 400
        True
        >>> is_gregorian_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_gregorian_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_gregorian_month(month: int, year: int) -> int:
    """Return the number of days in a Gregorian month.

    Args:
        month: The month (1-12).
        year: The year (needed for February in leap years).

    Returns:
        28, 29, 30 or 31.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return DAYS_IN_GREGORIAN_MONTH[month]


def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to an absolute date.

    The caller is responsible for passing a valid date; the arithmetic
    itself cannot fail for year >= 1.

    Args:
        year: The year (>= 1).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The absolute date (0001-01-01 is 1).

    Examples:
        >>> gregorian_to_absolute(1, 1, 1)
        1
        >>> gregorian_to_absolute(2011, 1, 31)
        734168
    """
    abs_date = day
    for m in range(month - 1, 0, -1):
        abs_date += last_day_of_gregorian_month(m, year)

    y = year - 1
    # Julian leap days, minus century years, plus years divisible by 400
    return abs_date + 365 * y + y // 4 - y // 100 + y // 400


def absolute_to_gregorian(abs_date: int) -> tuple[int, int, int]:
    """Convert an absolute date to a Gregorian (year, month, day).

    The year is approximated from below as abs_date // 366 and then
    searched forward year by year; the month is searched forward from
    January. Both searches are bounded since the approximation is never
    more than a few dozen years short.

    Args:
        abs_date: The absolute date (>= 1).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> absolute_to_gregorian(1)
        (1, 1, 1)
        >>> absolute_to_gregorian(734168)
        (2011, 1, 31)
    """
    year = abs_date // 366
    while abs_date >= gregorian_to_absolute(year + 1, 1, 1):
        year += 1

    month = 1
    while abs_date > gregorian_to_absolute(
        year, month, last_day_of_gregorian_month(month, year)
    ):
        month += 1

    day = abs_date - gregorian_to_absolute(year, month, 1) + 1
    return (year, month, day)


__all__ = [
    "is_gregorian_leap_year",
    "last_day_of_gregorian_month",
    "gregorian_to_absolute",
    "absolute_to_gregorian",
]
