"""YearKviah enumeration for Hebrew year-length classification.

This module provides the YearKviah enum, classifying a Hebrew year by
the combined lengths of Cheshvan and Kislev.
"""

from __future__ import annotations

from enum import Enum


class YearKviah(Enum):
    """Cheshvan/Kislev classification of a Hebrew year.

    The values match the traditional constants (chaserim = 0,
    kesidran = 1, shelaimim = 2).

    Examples:
        >>> YearKviah.DEFICIENT.cheshvan_days, YearKviah.DEFICIENT.kislev_days
        (29, 29)

        >>> YearKviah.COMPLETE.year_length(leap=True)
        385
    """

    DEFICIENT = 0  # Chaserim: Cheshvan 29, Kislev 29
    REGULAR = 1  # Kesidran: Cheshvan 29, Kislev 30
    COMPLETE = 2  # Shelaimim: Cheshvan 30, Kislev 30

    @property
    def cheshvan_days(self) -> int:
        """Return the length of Cheshvan in a year of this kviah."""
        return 30 if self == YearKviah.COMPLETE else 29

    @property
    def kislev_days(self) -> int:
        """Return the length of Kislev in a year of this kviah."""
        return 29 if self == YearKviah.DEFICIENT else 30

    def year_length(self, leap: bool) -> int:
        """Return the number of days in a year of this kviah.

        Args:
            leap: True for a 13-month year.

        Returns:
            353-355 for a regular year, 383-385 for a leap year.
        """
        return (383 if leap else 353) + self.value


__all__ = ["YearKviah"]
