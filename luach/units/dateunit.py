"""DateUnit enumeration for calendar navigation.

This module provides the DateUnit enum accepted by JewishDate.forward().
"""

from __future__ import annotations

from enum import Enum


class DateUnit(Enum):
    """Units a JewishDate can be moved forward by.

    MONTH and YEAR are Hebrew calendar units; DAY moves both calendars.

    Examples:
        >>> DateUnit("month")
        <DateUnit.MONTH: 'month'>
    """

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


__all__ = ["DateUnit"]
