"""Calendar units and enumerations.

This module provides:
    - HebrewMonth: Nissan-based Hebrew month numbers
    - YearKviah: Cheshvan/Kislev year-length classification
    - DateUnit: Navigation units (DAY, MONTH, YEAR)
"""

from __future__ import annotations

from luach.units.dateunit import DateUnit
from luach.units.kviah import YearKviah
from luach.units.month import HebrewMonth

__all__: list[str] = [
    "DateUnit",
    "HebrewMonth",
    "YearKviah",
]
