"""Date conversion utilities.

This module provides functions for converting external date values to and
from the Gregorian triples JewishDate is built from:
    - datetime.date / datetime.datetime input and datetime.date output
    - ISO 8601 calendar date strings (YYYY-MM-DD)

Examples:
    >>> from luach.convert import parse_iso_date, to_python_date
    >>> to_python_date(*parse_iso_date("2011-01-31"))
    datetime.date(2011, 1, 31)
"""

from __future__ import annotations

from luach.convert.pydate import (
    gregorian_from_value,
    parse_iso_date,
    to_python_date,
)

__all__ = [
    "gregorian_from_value",
    "parse_iso_date",
    "to_python_date",
]
