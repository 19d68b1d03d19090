"""Conversion between external date values and Gregorian triples.

This module turns the date values a caller may hold into a validated
Gregorian (year, month, day) triple, and back:

Functions:
    parse_iso_date: Parse a YYYY-MM-DD string.
    gregorian_from_value: Accept a datetime.date, datetime.datetime or ISO string.
    to_python_date: Build a datetime.date from a Gregorian triple.

Only the calendar day is kept. Time of day and tzinfo on a
datetime.datetime are discarded, so the caller decides which local day
a moment belongs to.

Examples:
    >>> import datetime
    >>> gregorian_from_value(datetime.date(2011, 1, 31))
    (2011, 1, 31)

    >>> parse_iso_date("2010-09-09")
    (2010, 9, 9)
"""

from __future__ import annotations

import datetime
import re

from luach._internal.gregorian import last_day_of_gregorian_month
from luach._internal.validation import validate_gregorian_date
from luach.errors import ParseError, ValidationError

# ASCII digits only; a leading "-" is matched so BCE input is rejected by value
_ISO_DATE_PATTERN = re.compile(r"^(-?[0-9]{4,})-([0-9]{2})-([0-9]{2})$")


def parse_iso_date(s: str) -> tuple[int, int, int]:
    """Parse an ISO 8601 calendar date (YYYY-MM-DD).

    Args:
        s: The date string.

    Returns:
        Tuple of (year, month, day).

    Raises:
        ParseError: If the string is not in YYYY-MM-DD form.
        ValidationError: If the month or day is out of range.
        EpochError: If the year is 0 or negative ("0000-..." or "-0044-...").

    Examples:
        >>> parse_iso_date("2011-01-31")
        (2011, 1, 31)

        >>> parse_iso_date("2024/01/15")
        Traceback (most recent call last):
        ...
        ParseError: Invalid ISO 8601 date format: '2024/01/15'. Expected YYYY-MM-DD
    """
    match = _ISO_DATE_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(
            f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD"
        )

    year = int(match.group(1))
    month = int(match.group(2))
    day = int(match.group(3))

    validate_gregorian_date(year, month, day)
    max_day = last_day_of_gregorian_month(month, year)
    if day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )
    return (year, month, day)


def gregorian_from_value(value: datetime.date | str) -> tuple[int, int, int]:
    """Return the Gregorian triple of an external date value.

    Args:
        value: A datetime.date, a datetime.datetime or an ISO date string.

    Returns:
        Tuple of (year, month, day).

    Raises:
        TypeError: If value is of another type.
        ParseError: If a string cannot be parsed.
        EpochError: If the year is before 1.
    """
    if isinstance(value, str):
        return parse_iso_date(value)
    if isinstance(value, datetime.date):
        validate_gregorian_date(value.year, value.month, value.day)
        return (value.year, value.month, value.day)
    raise TypeError(
        f"expected datetime.date, datetime.datetime or str, got {type(value).__name__}"
    )


def to_python_date(year: int, month: int, day: int) -> datetime.date:
    """Return a datetime.date for a Gregorian triple.

    Examples:
        >>> to_python_date(2010, 9, 9)
        datetime.date(2010, 9, 9)
    """
    return datetime.date(year, month, day)


__all__ = [
    "parse_iso_date",
    "gregorian_from_value",
    "to_python_date",
]
