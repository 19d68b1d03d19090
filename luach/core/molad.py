"""Molad value type.

This module provides the Molad class, the calculated moment of a lunar
conjunction expressed as chalakim since the start of the Sunday before
Molad Tohu (BeHaRaD).
"""

from __future__ import annotations

from luach._internal.constants import (
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_HOUR,
    CHALAKIM_PER_MINUTE,
)
from luach._internal.hebrew import chalakim_since_molad_tohu, molad_to_absolute
from luach._internal.validation import validate_jewish_date
from luach.errors import ValidationError


class Molad:
    """The molad of a Hebrew month.

    A Molad is a count of chalakim (1/1080 of an hour). Its day is the
    Hebrew day it falls on, which begins at 18:00 of the preceding civil
    day, so hours are counted from that evening.

    Attributes:
        day: Days since the Sunday before Molad Tohu.
        parts: Chalakim since the start of that day (0-25919).
        hours: Hours into the day (0-23).
        minutes: Minutes into the hour (0-59).
        chalakim: Chalakim into the minute (0-17).

    Examples:
        >>> m = Molad.for_month(5771, 7)  # Tishrei 5771
        >>> m.hours, m.minutes, m.chalakim
        (1, 36, 1)
    """

    __slots__ = ("_total",)

    def __init__(self, total_chalakim: int) -> None:
        """Create a Molad from chalakim since the Sunday before Molad Tohu.

        Args:
            total_chalakim: The molad in chalakim (>= 0).

        Raises:
            ValidationError: If total_chalakim is negative.
        """
        if total_chalakim < 0:
            raise ValidationError(
                f"molad chalakim must be 0 or greater, got {total_chalakim}"
            )
        self._total = total_chalakim

    @classmethod
    def for_month(cls, year: int, month: int) -> Molad:
        """Return the molad of a Hebrew month.

        Args:
            year: The Hebrew year.
            month: The Nissan-based month number.

        Returns:
            The Molad of the month.

        Raises:
            ValidationError: If the month is not valid for the year.
        """
        validate_jewish_date(year, month, 1)
        return cls(chalakim_since_molad_tohu(year, month))

    @property
    def total_chalakim(self) -> int:
        """Return the chalakim since the Sunday before Molad Tohu."""
        return self._total

    @property
    def day(self) -> int:
        """Return the day count since the Sunday before Molad Tohu."""
        return self._total // CHALAKIM_PER_DAY

    @property
    def parts(self) -> int:
        """Return the chalakim since the start of the molad's day."""
        return self._total % CHALAKIM_PER_DAY

    @property
    def hours(self) -> int:
        """Return the hours since the start of the molad day (0-23)."""
        return self.parts // CHALAKIM_PER_HOUR

    @property
    def minutes(self) -> int:
        """Return the minutes into the hour (0-59)."""
        return self.parts % CHALAKIM_PER_HOUR // CHALAKIM_PER_MINUTE

    @property
    def chalakim(self) -> int:
        """Return the chalakim into the minute (0-17)."""
        return self.parts % CHALAKIM_PER_MINUTE

    @property
    def day_of_week(self) -> int:
        """Return the Hebrew weekday of the molad (1=Sunday, 7=Shabbos).

        Examples:
            >>> Molad.for_month(5771, 7).day_of_week  # Thursday, from Wednesday 18:00
            5
        """
        return self.day % 7 + 1

    @property
    def absolute_date(self) -> int:
        """Return the absolute date of the civil day the molad's day begins on."""
        return molad_to_absolute(self._total)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Molad):
            return NotImplemented
        return self._total == other._total

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Molad):
            return NotImplemented
        return self._total < other._total

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Molad):
            return NotImplemented
        return self._total <= other._total

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Molad):
            return NotImplemented
        return self._total > other._total

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Molad):
            return NotImplemented
        return self._total >= other._total

    def __hash__(self) -> int:
        return hash(self._total)

    def __repr__(self) -> str:
        return f"Molad({self._total})"


__all__ = ["Molad"]
