"""JewishDate class representing a day in both calendars.

This module provides the JewishDate class, an immutable value holding
the same calendar day as a Hebrew date, a proleptic Gregorian date and
an absolute day count, plus the day of week and an optional molad time.
"""

from __future__ import annotations

import datetime
import logging

from luach._internal.constants import (
    ADAR,
    ADAR_II,
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_HOUR,
    CHALAKIM_PER_MINUTE,
    DAYS_PER_WEEK,
    ELUL,
    NISSAN,
    TISHREI,
)
from luach._internal.gregorian import (
    absolute_to_gregorian,
    gregorian_to_absolute,
    is_gregorian_leap_year,
    last_day_of_gregorian_month,
)
from luach._internal.hebrew import (
    absolute_to_hebrew,
    chalakim_since_molad_tohu,
    days_in_month,
    days_in_year,
    days_since_start_of_year,
    hebrew_to_absolute,
    is_cheshvan_long,
    is_kislev_short,
    is_leap_year,
    kviah,
    last_month_of_year,
    molad_to_absolute,
)
from luach._internal.validation import (
    validate_gregorian_date,
    validate_gregorian_day,
    validate_gregorian_month,
    validate_gregorian_year,
    validate_jewish_date,
    validate_molad_time,
)
from luach.convert.pydate import gregorian_from_value, to_python_date
from luach.core.molad import Molad
from luach.errors import EpochError, NavigationError
from luach.units.dateunit import DateUnit
from luach.units.kviah import YearKviah
from luach.units.month import HebrewMonth

logger = logging.getLogger(__name__)

_MoladTime = tuple[int, int, int]
_NO_MOLAD_TIME: _MoladTime = (0, 0, 0)


class JewishDate:
    """A calendar day in the Hebrew and proleptic Gregorian calendars.

    JewishDate holds a consistent absolute date, Gregorian (year, month,
    day) and Hebrew (year, month, day). Every transformation returns a
    new instance; an existing JewishDate never changes, so it can be
    shared freely and needs no clone.

    Hebrew months are numbered from Nissan (1) to Adar (12), with Adar II
    (13) in a leap year. Gregorian months are 1-12. The day of week runs
    from 1 (Sunday) to 7 (Shabbos).

    The molad time fields (hours, minutes, chalakim) are zero unless the
    date was built from a molad or from a Hebrew date with a time.

    Equality, ordering and hashing use the absolute date only.

    Examples:
        >>> d = JewishDate.from_gregorian(2011, 1, 31)
        >>> d.jewish_year, d.jewish_month, d.jewish_day
        (5771, <HebrewMonth.SHEVAT: 11>, 26)

        >>> JewishDate(5771, 7, 1).to_date()
        datetime.date(2010, 9, 9)

        >>> d.forward().gregorian
        (2011, 2, 1)
    """

    __slots__ = (
        "_abs",
        "_g_year",
        "_g_month",
        "_g_day",
        "_j_year",
        "_j_month",
        "_j_day",
        "_molad_time",
    )

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        chalakim: int = 0,
    ) -> None:
        """Create a JewishDate from a Hebrew date and optional molad time.

        Args:
            year: The Hebrew year.
            month: The month, 1 (Nissan) to 12 (Adar), or 13 (Adar II)
                in a leap year.
            day: The day of month (1-30). 30 in a 29-day month is
                clamped to 29.
            hours: Molad hours (0-23).
            minutes: Molad minutes (0-59).
            chalakim: Molad chalakim (0-17).

        Raises:
            ValidationError: If any component is out of range.
            EpochError: If the date is earlier than 18 Teves 3761.

        Examples:
            >>> JewishDate(5771, 1, 1).gregorian
            (2011, 4, 5)

            >>> JewishDate(5773, 8, 30).jewish_day  # Cheshvan 5773 has 29 days
            29
        """
        validate_jewish_date(year, month, day)
        validate_molad_time(hours, minutes, chalakim)

        day = min(day, days_in_month(month, year))
        abs_date = hebrew_to_absolute(year, month, day)

        self._abs = abs_date
        self._g_year, self._g_month, self._g_day = absolute_to_gregorian(abs_date)
        self._j_year, self._j_month, self._j_day = year, month, day
        self._molad_time = (hours, minutes, chalakim)

    @classmethod
    def _build(
        cls,
        abs_date: int,
        gregorian: tuple[int, int, int],
        hebrew: tuple[int, int, int],
        molad_time: _MoladTime = _NO_MOLAD_TIME,
    ) -> JewishDate:
        """Assemble an instance from already consistent components."""
        obj = cls.__new__(cls)
        obj._abs = abs_date
        obj._g_year, obj._g_month, obj._g_day = gregorian
        obj._j_year, obj._j_month, obj._j_day = hebrew
        obj._molad_time = molad_time
        return obj

    @classmethod
    def from_absolute(cls, abs_date: int) -> JewishDate:
        """Create a JewishDate from an absolute date.

        Args:
            abs_date: Days since the epoch, where 1 is 0001-01-01.

        Returns:
            The corresponding JewishDate.

        Raises:
            EpochError: If abs_date is before 1.

        Examples:
            >>> JewishDate.from_absolute(1).hebrew
            (3761, 10, 18)
        """
        if abs_date < 1:
            raise EpochError(f"absolute date must be 1 or later, got {abs_date}")
        return cls._build(
            abs_date, absolute_to_gregorian(abs_date), absolute_to_hebrew(abs_date)
        )

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> JewishDate:
        """Create a JewishDate from a Gregorian date.

        A day past the end of the month (for example 31 in April) is
        clamped to the last day of that month.

        Args:
            year: The Gregorian year (>= 1).
            month: The month (1-12).
            day: The day of month (1-31).

        Returns:
            The corresponding JewishDate.

        Raises:
            ValidationError: If month or day is out of range.
            EpochError: If year is before 1.

        Examples:
            >>> JewishDate.from_gregorian(2010, 9, 9).hebrew
            (5771, 7, 1)
        """
        validate_gregorian_date(year, month, day)
        return cls._from_valid_gregorian(year, month, day, _NO_MOLAD_TIME)

    @classmethod
    def _from_valid_gregorian(
        cls, year: int, month: int, day: int, molad_time: _MoladTime
    ) -> JewishDate:
        day = min(day, last_day_of_gregorian_month(month, year))
        abs_date = gregorian_to_absolute(year, month, day)
        return cls._build(
            abs_date, (year, month, day), absolute_to_hebrew(abs_date), molad_time
        )

    @classmethod
    def from_molad(cls, chalakim: int) -> JewishDate:
        """Create a JewishDate for the day a molad falls on.

        The molad time is taken from the chalakim within that day,
        counted from 18:00 of the preceding civil evening.

        Args:
            chalakim: Chalakim since the Sunday before Molad Tohu.

        Returns:
            A JewishDate with molad hours, minutes and chalakim set.

        Raises:
            EpochError: If the molad is before 0001-01-01.

        Examples:
            >>> d = JewishDate.from_molad(54625157569)  # Molad Tishrei 5771
            >>> d.gregorian, d.molad_hours, d.molad_minutes, d.molad_chalakim
            ((2010, 9, 8), 1, 36, 1)
        """
        base = cls.from_absolute(molad_to_absolute(chalakim))
        parts = chalakim % CHALAKIM_PER_DAY
        hours, parts = divmod(parts, CHALAKIM_PER_HOUR)
        minutes, parts = divmod(parts, CHALAKIM_PER_MINUTE)
        return base._with_molad_time((hours, minutes, parts))

    @classmethod
    def from_date(cls, value: datetime.date | str) -> JewishDate:
        """Create a JewishDate from an external date value.

        Args:
            value: A datetime.date, a datetime.datetime (its time of day
                is ignored) or an ISO "YYYY-MM-DD" string.

        Returns:
            The corresponding JewishDate.

        Raises:
            TypeError: If value is of an unsupported type.
            ParseError: If a string is not a valid ISO date.
            EpochError: If the year is before 1.

        Examples:
            >>> JewishDate.from_date("2011-01-31").hebrew
            (5771, 11, 26)
        """
        return cls._from_valid_gregorian(*gregorian_from_value(value), _NO_MOLAD_TIME)

    @classmethod
    def today(cls) -> JewishDate:
        """Return today's date in the local timezone.

        Examples:
            >>> JewishDate.today().jewish_year >= 5784
            True
        """
        return cls.from_date(datetime.date.today())

    @property
    def absolute_date(self) -> int:
        """Return the absolute date (0001-01-01 is 1)."""
        return self._abs

    @property
    def day_of_week(self) -> int:
        """Return the day of the week, 1 (Sunday) to 7 (Shabbos).

        Examples:
            >>> JewishDate(5771, 7, 1).day_of_week  # Thursday
            5
        """
        return self._abs % DAYS_PER_WEEK + 1

    @property
    def gregorian_year(self) -> int:
        """Return the Gregorian year."""
        return self._g_year

    @property
    def gregorian_month(self) -> int:
        """Return the Gregorian month (1-12)."""
        return self._g_month

    @property
    def gregorian_day(self) -> int:
        """Return the Gregorian day of month (1-31)."""
        return self._g_day

    @property
    def gregorian(self) -> tuple[int, int, int]:
        """Return the Gregorian (year, month, day)."""
        return (self._g_year, self._g_month, self._g_day)

    @property
    def jewish_year(self) -> int:
        """Return the Hebrew year."""
        return self._j_year

    @property
    def jewish_month(self) -> HebrewMonth:
        """Return the Hebrew month, Nissan-based."""
        return HebrewMonth(self._j_month)

    @property
    def jewish_day(self) -> int:
        """Return the Hebrew day of month (1-30)."""
        return self._j_day

    @property
    def hebrew(self) -> tuple[int, int, int]:
        """Return the Hebrew (year, month, day) with a plain int month."""
        return (self._j_year, self._j_month, self._j_day)

    @property
    def molad_hours(self) -> int:
        """Return the molad hours (0-23), or 0 when no molad time is set."""
        return self._molad_time[0]

    @property
    def molad_minutes(self) -> int:
        """Return the molad minutes (0-59)."""
        return self._molad_time[1]

    @property
    def molad_chalakim(self) -> int:
        """Return the molad chalakim (0-17)."""
        return self._molad_time[2]

    @property
    def is_jewish_leap_year(self) -> bool:
        """Return True if the Hebrew year has Adar II."""
        return is_leap_year(self._j_year)

    @property
    def days_in_jewish_year(self) -> int:
        """Return the length of the Hebrew year (353-355 or 383-385)."""
        return days_in_year(self._j_year)

    @property
    def days_in_jewish_month(self) -> int:
        """Return the length of the Hebrew month (29 or 30)."""
        return days_in_month(self._j_month, self._j_year)

    @property
    def is_cheshvan_long(self) -> bool:
        """Return True if Cheshvan has 30 days this Hebrew year."""
        return is_cheshvan_long(self._j_year)

    @property
    def is_kislev_short(self) -> bool:
        """Return True if Kislev has 29 days this Hebrew year."""
        return is_kislev_short(self._j_year)

    @property
    def kviah(self) -> YearKviah:
        """Return the Cheshvan/Kislev classification of the Hebrew year.

        Examples:
            >>> JewishDate(5773, 7, 1).kviah
            <YearKviah.DEFICIENT: 0>
        """
        return kviah(self._j_year)

    @property
    def days_since_start_of_jewish_year(self) -> int:
        """Return the day count from Rosh Hashanah (1 Tishrei is 1)."""
        return days_since_start_of_year(self._j_year, self._j_month, self._j_day)

    @property
    def chalakim_since_molad_tohu(self) -> int:
        """Return the molad of this Hebrew month in chalakim."""
        return chalakim_since_molad_tohu(self._j_year, self._j_month)

    @property
    def is_gregorian_leap_year(self) -> bool:
        """Return True if the Gregorian year has February 29."""
        return is_gregorian_leap_year(self._g_year)

    @property
    def last_day_of_gregorian_month(self) -> int:
        """Return the length of the Gregorian month (28-31)."""
        return last_day_of_gregorian_month(self._g_month, self._g_year)

    def to_date(self) -> datetime.date:
        """Return the Gregorian day as a datetime.date."""
        return to_python_date(self._g_year, self._g_month, self._g_day)

    def molad_info(self) -> Molad:
        """Return the molad of this Hebrew month as a Molad value."""
        return Molad(self.chalakim_since_molad_tohu)

    def molad(self) -> JewishDate:
        """Return the civil day and time of this Hebrew month's molad.

        Molad time is counted from 18:00 of the previous evening; this
        method re-expresses it on a midnight rollover. A molad 6 or more
        hours into the Hebrew day falls on the next civil day.

        Returns:
            A JewishDate on the civil day of the molad with the molad
            hours (0-23, from midnight), minutes and chalakim set.

        Raises:
            EpochError: If the molad falls before 0001-01-01, as it does
                for Teves 3761.

        Examples:
            >>> m = JewishDate(5771, 13, 1).molad()  # Adar II 5771
            >>> m.gregorian, m.molad_hours, m.molad_minutes, m.molad_chalakim
            ((2011, 3, 5), 0, 0, 7)
        """
        total = self.chalakim_since_molad_tohu
        hours, parts = divmod(total % CHALAKIM_PER_DAY, CHALAKIM_PER_HOUR)
        minutes, chalakim = divmod(parts, CHALAKIM_PER_MINUTE)
        # Six hours after 18:00 is the next civil midnight
        civil_abs = molad_to_absolute(total) + (1 if hours >= 6 else 0)
        if civil_abs < 1:
            month = HebrewMonth(self._j_month).name.title()
            logger.debug("rejected pre-epoch molad of %s %d", month, self._j_year)
            raise EpochError(
                f"molad of {month} {self._j_year} falls before 0001-01-01"
            )
        return self.from_absolute(civil_abs)._with_molad_time(
            ((hours + 18) % 24, minutes, chalakim)
        )

    def _with_molad_time(self, molad_time: _MoladTime) -> JewishDate:
        return self._build(self._abs, self.gregorian, self.hebrew, molad_time)

    def with_gregorian(self, year: int, month: int, day: int) -> JewishDate:
        """Return the JewishDate for a Gregorian date, keeping the molad time.

        Args:
            year: The Gregorian year (>= 1).
            month: The month (1-12).
            day: The day (1-31), clamped to the month's last day.

        Raises:
            ValidationError: If month or day is out of range.
            EpochError: If year is before 1.
        """
        validate_gregorian_date(year, month, day)
        return self._from_valid_gregorian(year, month, day, self._molad_time)

    def with_gregorian_year(self, year: int) -> JewishDate:
        validate_gregorian_year(year)
        return self._from_valid_gregorian(year, self._g_month, self._g_day, self._molad_time)

    def with_gregorian_month(self, month: int) -> JewishDate:
        """Return this date moved to another Gregorian month of the same year.

        Examples:
            >>> JewishDate.from_gregorian(2011, 1, 31).with_gregorian_month(2).gregorian
            (2011, 2, 28)
        """
        validate_gregorian_month(month)
        return self._from_valid_gregorian(self._g_year, month, self._g_day, self._molad_time)

    def with_gregorian_day(self, day: int) -> JewishDate:
        validate_gregorian_day(day)
        return self._from_valid_gregorian(self._g_year, self._g_month, day, self._molad_time)

    def with_date(self, value: datetime.date | str) -> JewishDate:
        """Return the JewishDate for an external date value, keeping the molad time."""
        return self._from_valid_gregorian(*gregorian_from_value(value), self._molad_time)

    def with_hebrew(
        self,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        chalakim: int = 0,
    ) -> JewishDate:
        """Return the JewishDate for a Hebrew date and molad time.

        Takes the same arguments as the constructor; the molad time is
        replaced, not kept.
        """
        return type(self)(year, month, day, hours, minutes, chalakim)

    def with_jewish_year(self, year: int) -> JewishDate:
        """Return this Hebrew month and day in another year.

        Raises:
            ValidationError: If the month is Adar II and the year is not
                a leap year.
        """
        return self.with_hebrew(year, self._j_month, self._j_day)

    def with_jewish_month(self, month: int) -> JewishDate:
        return self.with_hebrew(self._j_year, month, self._j_day)

    def with_jewish_day(self, day: int) -> JewishDate:
        return self.with_hebrew(self._j_year, self._j_month, day)

    def forward(self, unit: DateUnit | str = DateUnit.DAY, amount: int = 1) -> JewishDate:
        """Return the date moved forward by a number of days, months or years.

        DAY steps both calendars together. MONTH steps Hebrew months
        (Elul rolls into Tishrei of the next year, the last Adar into
        Nissan) and clamps the day of month once, in the target month.
        YEAR moves to the same Hebrew month and day in a later year; an
        Adar II date lands in Adar when the target year is not a leap year.

        Args:
            unit: DateUnit.DAY, DateUnit.MONTH or DateUnit.YEAR (or their
                string values).
            amount: How many units to move (>= 1). Use back() to move
                backwards.

        Returns:
            A new JewishDate.

        Raises:
            NavigationError: If unit is not supported or amount < 1.

        Examples:
            >>> JewishDate(5773, 11, 30).forward(DateUnit.MONTH).hebrew
            (5773, 12, 29)
            >>> JewishDate(5773, 11, 30).forward(DateUnit.MONTH, 2).hebrew
            (5773, 1, 30)
        """
        try:
            unit = DateUnit(unit)
        except ValueError:
            logger.debug("rejected navigation unit %r", unit)
            raise NavigationError(
                f"unsupported unit {unit!r}; use DateUnit.DAY, DateUnit.MONTH or DateUnit.YEAR"
            ) from None
        if amount < 1:
            logger.debug("rejected navigation amount %r", amount)
            raise NavigationError(
                f"amount must be 1 or greater, got {amount}; use back() to move backwards"
            )

        if unit is DateUnit.DAY:
            return self._forward_days(amount)
        if unit is DateUnit.MONTH:
            return self._forward_months(amount)
        return self._forward_years(amount)

    def _forward_days(self, amount: int) -> JewishDate:
        g_year, g_month, g_day = self.gregorian
        j_year, j_month, j_day = self.hebrew

        for _ in range(amount):
            if g_day == last_day_of_gregorian_month(g_month, g_year):
                g_day = 1
                if g_month == 12:
                    g_year += 1
                    g_month = 1
                else:
                    g_month += 1
            else:
                g_day += 1

            if j_day == days_in_month(j_month, j_year):
                j_day = 1
                if j_month == ELUL:
                    j_year += 1
                    j_month = TISHREI
                elif j_month == last_month_of_year(j_year):
                    j_month = NISSAN
                else:
                    j_month += 1
            else:
                j_day += 1

        return self._build(
            self._abs + amount,
            (g_year, g_month, g_day),
            (j_year, j_month, j_day),
            self._molad_time,
        )

    def _forward_months(self, amount: int) -> JewishDate:
        year, month = self._j_year, self._j_month
        for _ in range(amount):
            if month == ELUL:
                year += 1
                month = TISHREI
            elif month == last_month_of_year(year):
                month = NISSAN
            else:
                month += 1
        return self.with_hebrew(year, month, self._j_day)

    def _forward_years(self, amount: int) -> JewishDate:
        year = self._j_year + amount
        month = self._j_month
        if month == ADAR_II and not is_leap_year(year):
            month = ADAR
        return self.with_hebrew(year, month, self._j_day)

    def back(self) -> JewishDate:
        """Return the previous day.

        1 Nissan rolls back to the last day of the year's last Adar and
        1 Tishrei rolls back to 29 Elul of the previous year.

        Raises:
            EpochError: If this is 0001-01-01 (18 Teves 3761).

        Examples:
            >>> JewishDate(5771, 7, 1).back().hebrew
            (5770, 6, 29)
            >>> JewishDate(5771, 1, 1).back().hebrew
            (5771, 13, 29)
        """
        if self._abs <= 1:
            raise EpochError("cannot move back from 0001-01-01 (18 Teves 3761)")

        g_year, g_month, g_day = self.gregorian
        if g_day == 1:
            if g_month == 1:
                g_month = 12
                g_year -= 1
            else:
                g_month -= 1
            g_day = last_day_of_gregorian_month(g_month, g_year)
        else:
            g_day -= 1

        j_year, j_month, j_day = self.hebrew
        if j_day == 1:
            if j_month == NISSAN:
                j_month = last_month_of_year(j_year)
            elif j_month == TISHREI:
                j_year -= 1
                j_month = ELUL
            else:
                j_month -= 1
            j_day = days_in_month(j_month, j_year)
        else:
            j_day -= 1

        return self._build(
            self._abs - 1,
            (g_year, g_month, g_day),
            (j_year, j_month, j_day),
            self._molad_time,
        )

    def __copy__(self) -> JewishDate:
        return self

    def __deepcopy__(self, memo: dict) -> JewishDate:
        return self

    def __eq__(self, other: object) -> bool:
        """Check equality with another JewishDate.

        Examples:
            >>> JewishDate(5771, 7, 1) == JewishDate.from_gregorian(2010, 9, 9)
            True
        """
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs == other._abs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs < other._abs

    def __le__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs <= other._abs

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs > other._abs

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, JewishDate):
            return NotImplemented
        return self._abs >= other._abs

    def __hash__(self) -> int:
        return hash(self._abs)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'JewishDate(5771, 11, 26)', with the molad time
            appended when it is set.
        """
        fields = [self._j_year, self._j_month, self._j_day]
        if self._molad_time != _NO_MOLAD_TIME:
            fields.extend(self._molad_time)
        return f"JewishDate({', '.join(str(f) for f in fields)})"

    def __str__(self) -> str:
        """Return the Hebrew date as YYYY-MM-DD with Nissan-based months."""
        return f"{self._j_year:04d}-{self._j_month:02d}-{self._j_day:02d}"


__all__ = ["JewishDate"]
