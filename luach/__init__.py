"""Luach: Hebrew calendar conversion and arithmetic.

Luach converts between the proleptic Gregorian calendar and the Hebrew
lunisolar calendar, and computes the quantities holiday and zmanim code
builds on: leap years, month and year lengths, the molad and the
dechiyos that fix the weekday of Rosh Hashanah.

Core Types:
    JewishDate: A day in both calendars, with navigation
    Molad: The calculated lunar conjunction of a Hebrew month

Units:
    HebrewMonth: Nissan-based month numbers (NISSAN=1 .. ADAR_II=13)
    YearKviah: Cheshvan/Kislev year classification
    DateUnit: Navigation units (DAY, MONTH, YEAR)

Exceptions:
    LuachError: Base exception
    ValidationError: Invalid input values
    EpochError: Date before 0001-01-01 / 18 Teves 3761
    ParseError: Failed to parse a date string
    NavigationError: Unsupported forward() unit or amount

Example:
    >>> from luach import JewishDate, DateUnit
    >>> d = JewishDate.from_gregorian(2011, 1, 31)
    >>> d.hebrew
    (5771, 11, 26)
    >>> d.forward(DateUnit.MONTH).hebrew
    (5771, 12, 26)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from luach.core.jewish_date import JewishDate
from luach.core.molad import Molad

# Units
from luach.units.dateunit import DateUnit
from luach.units.kviah import YearKviah
from luach.units.month import HebrewMonth

# Exceptions
from luach.errors import (
    EpochError,
    LuachError,
    NavigationError,
    ParseError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "JewishDate",
    "Molad",
    # Units
    "DateUnit",
    "HebrewMonth",
    "YearKviah",
    # Exceptions
    "LuachError",
    "ValidationError",
    "EpochError",
    "ParseError",
    "NavigationError",
]
