"""Hebrew calendar arithmetic for Luach.

This module provides the molad arithmetic, the four dechiyos (Rosh
Hashanah postponements) and the month/year length rules, plus the
conversions between Hebrew (year, month, day) triples and absolute dates.

Months are numbered from Nissan = 1 through Adar = 12 (Adar II = 13 in a
leap year), while the year itself starts at Tishrei = 7.

The molad day count starts at the Sunday preceding Molad Tohu (BeHaRaD),
so a molad day % 7 of 0 is a Sunday.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from luach._internal.constants import (
    ADAR,
    ADAR_II,
    BETUTAKFOT_PARTS,
    CHALAKIM_MOLAD_TOHU,
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_MONTH,
    CHESHVAN,
    COMPLETE_YEAR_LENGTHS,
    DEFICIENT_YEAR_LENGTHS,
    ELUL,
    GATRAD_PARTS,
    IYAR,
    JEWISH_EPOCH,
    KISLEV,
    LEAP_YEARS_PER_CYCLE,
    LO_ADU_DAYS,
    MOLAD_ZAKEN_PARTS,
    MONTHS_PER_CYCLE,
    NISSAN,
    REGULAR_YEAR_LENGTHS,
    TAMMUZ,
    TEVES,
    TISHREI,
    YEARS_PER_CYCLE,
)
from luach._internal.decorators import memoize
from luach.units.kviah import YearKviah

logger = logging.getLogger(__name__)


def is_leap_year(year: int) -> bool:
    """Check if a Hebrew year is a leap year (has Adar II).

    Years 3, 6, 8, 11, 14, 17 and 19 of the 19-year cycle are leap years.

    Args:
        year: The Hebrew year.

    Returns:
        True if the year has 13 months.

    Examples:
        >>> is_leap_year(5771)
        True
        >>> is_leap_year(5772)
        False
    """
    return (LEAP_YEARS_PER_CYCLE * year + 1) % YEARS_PER_CYCLE < LEAP_YEARS_PER_CYCLE


def last_month_of_year(year: int) -> int:
    """Return ADAR_II for a leap year and ADAR otherwise."""
    return ADAR_II if is_leap_year(year) else ADAR


def month_of_year(year: int, month: int) -> int:
    """Return the position of a month counted from Tishrei.

    Tishrei is 1, Nissan is 7 in a regular year and 8 in a leap year.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month number.

    Returns:
        The Tishrei-based month position (1-12 or 1-13).
    """
    leap = is_leap_year(year)
    return (month + (6 if leap else 5)) % (13 if leap else 12) + 1


def months_elapsed(year: int, month: int) -> int:
    """Return the lunar months elapsed from Molad Tohu to a month's molad.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month number.

    Returns:
        Whole months since the start of year 1.
    """
    y = year - 1
    cycles, year_in_cycle = divmod(y, YEARS_PER_CYCLE)
    return (
        MONTHS_PER_CYCLE * cycles
        + 12 * year_in_cycle
        # Leap months so far in this cycle
        + (LEAP_YEARS_PER_CYCLE * year_in_cycle + 1) // YEARS_PER_CYCLE
        + (month_of_year(year, month) - 1)
    )


def chalakim_since_molad_tohu(year: int, month: int) -> int:
    """Return the chalakim from the Sunday before Molad Tohu to a molad.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month number.

    Returns:
        The molad of the month in chalakim.

    Examples:
        >>> chalakim_since_molad_tohu(1, 7)  # Molad Tohu itself
        31524
    """
    return CHALAKIM_MOLAD_TOHU + CHALAKIM_PER_MONTH * months_elapsed(year, month)


def _add_dechiyos(year: int, molad_day: int, molad_parts: int) -> int:
    """Apply the four dechiyos to the day of the Tishrei molad.

    Args:
        year: The Hebrew year whose Rosh Hashanah is being fixed.
        molad_day: Days since the Sunday before Molad Tohu.
        molad_parts: Chalakim since the start of molad_day.

    Returns:
        The day of Rosh Hashanah in the same day count.
    """
    rosh_hashana_day = molad_day

    # At most one of the first three applies
    if molad_parts >= MOLAD_ZAKEN_PARTS:
        logger.debug("year %d: molad zaken (parts=%d)", year, molad_parts)
        rosh_hashana_day += 1
    elif molad_day % 7 == 2 and molad_parts >= GATRAD_PARTS and not is_leap_year(year):
        logger.debug("year %d: GaTRaD (parts=%d)", year, molad_parts)
        rosh_hashana_day += 1
    elif (
        molad_day % 7 == 1
        and molad_parts >= BETUTAKFOT_PARTS
        and is_leap_year(year - 1)
    ):
        logger.debug("year %d: BeTuTaKFoT (parts=%d)", year, molad_parts)
        rosh_hashana_day += 1

    if rosh_hashana_day % 7 in LO_ADU_DAYS:
        logger.debug("year %d: lo ADU rosh (day %% 7=%d)", year, rosh_hashana_day % 7)
        rosh_hashana_day += 1

    return rosh_hashana_day


@memoize
def rosh_hashana_elapsed_days(year: int) -> int:
    """Return the day of 1 Tishrei counted from the Sunday before Molad Tohu.

    The molad of Tishrei is split into a day and its chalakim, then
    postponed by the dechiyos of Molad Zaken, GaTRaD, BeTuTaKFoT and
    Lo ADU Rosh.

    Args:
        year: The Hebrew year.

    Returns:
        Elapsed days to Rosh Hashanah of the year.

    Examples:
        >>> rosh_hashana_elapsed_days(5771) % 7  # Thursday
        4
    """
    molad_day, molad_parts = divmod(
        chalakim_since_molad_tohu(year, TISHREI), CHALAKIM_PER_DAY
    )
    return _add_dechiyos(year, molad_day, molad_parts)


def days_in_year(year: int) -> int:
    """Return the number of days in a Hebrew year.

    Args:
        year: The Hebrew year.

    Returns:
        One of 353, 354, 355 (regular) or 383, 384, 385 (leap).

    Examples:
        >>> days_in_year(5771)
        385
        >>> days_in_year(5773)
        353
    """
    return rosh_hashana_elapsed_days(year + 1) - rosh_hashana_elapsed_days(year)


def is_cheshvan_long(year: int) -> bool:
    """Return True if Cheshvan has 30 days in the year (a complete year)."""
    return days_in_year(year) % 10 == 5


def is_kislev_short(year: int) -> bool:
    """Return True if Kislev has 29 days in the year (a deficient year)."""
    return days_in_year(year) % 10 == 3


def kviah(year: int) -> YearKviah:
    """Classify a Hebrew year by the lengths of Cheshvan and Kislev.

    Args:
        year: The Hebrew year.

    Returns:
        YearKviah.DEFICIENT, YearKviah.REGULAR or YearKviah.COMPLETE.

    Raises:
        ValueError: If the computed year length is not one of the six
            valid lengths.

    Examples:
        >>> kviah(5773)
        <YearKviah.DEFICIENT: 0>
    """
    length = days_in_year(year)
    if length in DEFICIENT_YEAR_LENGTHS:
        return YearKviah.DEFICIENT
    if length in REGULAR_YEAR_LENGTHS:
        return YearKviah.REGULAR
    if length in COMPLETE_YEAR_LENGTHS:
        return YearKviah.COMPLETE
    raise ValueError(f"invalid length {length} for Hebrew year {year}")


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a Hebrew month.

    Args:
        month: The Nissan-based month number.
        year: The Hebrew year.

    Returns:
        29 or 30.

    Examples:
        >>> days_in_month(CHESHVAN, 5773)
        29
        >>> days_in_month(ADAR, 5771)  # Adar I in a leap year
        30
    """
    if month in (IYAR, TAMMUZ, ELUL, TEVES, ADAR_II):
        return 29
    if month == CHESHVAN and not is_cheshvan_long(year):
        return 29
    if month == KISLEV and is_kislev_short(year):
        return 29
    if month == ADAR and not is_leap_year(year):
        return 29
    return 30


def days_since_start_of_year(year: int, month: int, day: int) -> int:
    """Return the day count of a date from Rosh Hashanah.

    1 Tishrei is day 1. Months before Tishrei (Nissan through Elul) are
    counted after the last Adar of the year.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month number.
        day: The day of the month.

    Returns:
        Days elapsed, inclusive of the date itself.
    """
    elapsed = day
    if month < TISHREI:
        for m in range(TISHREI, last_month_of_year(year) + 1):
            elapsed += days_in_month(m, year)
        for m in range(NISSAN, month):
            elapsed += days_in_month(m, year)
    else:
        for m in range(TISHREI, month):
            elapsed += days_in_month(m, year)
    return elapsed


def hebrew_to_absolute(year: int, month: int, day: int) -> int:
    """Convert a Hebrew date to an absolute date.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month number.
        day: The day of the month.

    Returns:
        The absolute date.

    Examples:
        >>> hebrew_to_absolute(3761, TEVES, 18)
        1
    """
    return (
        days_since_start_of_year(year, month, day)
        + rosh_hashana_elapsed_days(year)
        + JEWISH_EPOCH
    )


def absolute_to_hebrew(abs_date: int) -> tuple[int, int, int]:
    """Convert an absolute date to a Hebrew (year, month, day).

    The year is approximated from below and searched forward; the month
    search starts at Tishrei or Nissan depending on which half of the
    year the date falls in.

    Args:
        abs_date: The absolute date.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> absolute_to_hebrew(1)
        (3761, 10, 18)
    """
    year = (abs_date - JEWISH_EPOCH) // 366
    while abs_date >= hebrew_to_absolute(year + 1, TISHREI, 1):
        year += 1

    month = TISHREI if abs_date < hebrew_to_absolute(year, NISSAN, 1) else NISSAN
    while abs_date > hebrew_to_absolute(year, month, days_in_month(month, year)):
        month += 1

    day = abs_date - hebrew_to_absolute(year, month, 1) + 1
    return (year, month, day)


def molad_to_absolute(chalakim: int) -> int:
    """Return the absolute date of the day a molad falls on.

    Args:
        chalakim: Chalakim since the Sunday before Molad Tohu.

    Returns:
        The absolute date.
    """
    return chalakim // CHALAKIM_PER_DAY + JEWISH_EPOCH


__all__ = [
    "is_leap_year",
    "last_month_of_year",
    "month_of_year",
    "months_elapsed",
    "chalakim_since_molad_tohu",
    "rosh_hashana_elapsed_days",
    "days_in_year",
    "is_cheshvan_long",
    "is_kislev_short",
    "kviah",
    "days_in_month",
    "days_since_start_of_year",
    "hebrew_to_absolute",
    "absolute_to_hebrew",
    "molad_to_absolute",
]
