"""Internal constants for Luach.

These constants define the epoch, the chalakim arithmetic and the month
numbering used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Hebrew month numbers, Nissan-based as in the Torah
NISSAN: int = 1
IYAR: int = 2
SIVAN: int = 3
TAMMUZ: int = 4
AV: int = 5
ELUL: int = 6
TISHREI: int = 7
CHESHVAN: int = 8
KISLEV: int = 9
TEVES: int = 10
SHEVAT: int = 11
ADAR: int = 12
ADAR_II: int = 13

# Absolute date of the day before 1 Tishrei, year 1
JEWISH_EPOCH: int = -1373429

# Chalakim (parts): 1080 per hour, 18 per minute
CHALAKIM_PER_MINUTE: int = 18
CHALAKIM_PER_HOUR: int = 1080
CHALAKIM_PER_DAY: int = 24 * CHALAKIM_PER_HOUR  # 25_920
CHALAKIM_PER_MONTH: int = (29 * 24 + 12) * CHALAKIM_PER_HOUR + 793  # 765_433

# Molad Tohu (BeHaRaD) counted from the start of the preceding Sunday
CHALAKIM_MOLAD_TOHU: int = 31524

# Dechiya thresholds, in chalakim since the start of the molad day
MOLAD_ZAKEN_PARTS: int = 18 * CHALAKIM_PER_HOUR  # 19_440, noon
GATRAD_PARTS: int = 9 * CHALAKIM_PER_HOUR + 204  # 9_924
BETUTAKFOT_PARTS: int = 15 * CHALAKIM_PER_HOUR + 589  # 16_789

# Lo ADU Rosh: Sunday, Wednesday, Friday (molad day numbering, Sunday=0)
LO_ADU_DAYS: frozenset[int] = frozenset({0, 3, 5})

# The 19-year Metonic cycle
YEARS_PER_CYCLE: int = 19
MONTHS_PER_CYCLE: int = 235
LEAP_YEARS_PER_CYCLE: int = 7

# Valid year lengths
DEFICIENT_YEAR_LENGTHS: frozenset[int] = frozenset({353, 383})
REGULAR_YEAR_LENGTHS: frozenset[int] = frozenset({354, 384})
COMPLETE_YEAR_LENGTHS: frozenset[int] = frozenset({355, 385})

# 18 Teves 3761 = 0001-01-01, the earliest supported date
EPOCH_YEAR: int = 3761
EPOCH_MONTH: int = TEVES
EPOCH_DAY: int = 18

MIN_GREGORIAN_YEAR: int = 1

# Days in each Gregorian month (non-leap year)
DAYS_IN_GREGORIAN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Day of week numbering for JewishDate, 1=Sunday .. 7=Shabbos
DAYS_PER_WEEK: int = 7


__all__ = [
    "NISSAN",
    "IYAR",
    "SIVAN",
    "TAMMUZ",
    "AV",
    "ELUL",
    "TISHREI",
    "CHESHVAN",
    "KISLEV",
    "TEVES",
    "SHEVAT",
    "ADAR",
    "ADAR_II",
    "JEWISH_EPOCH",
    "CHALAKIM_PER_MINUTE",
    "CHALAKIM_PER_HOUR",
    "CHALAKIM_PER_DAY",
    "CHALAKIM_PER_MONTH",
    "CHALAKIM_MOLAD_TOHU",
    "MOLAD_ZAKEN_PARTS",
    "GATRAD_PARTS",
    "BETUTAKFOT_PARTS",
    "LO_ADU_DAYS",
    "YEARS_PER_CYCLE",
    "MONTHS_PER_CYCLE",
    "LEAP_YEARS_PER_CYCLE",
    "DEFICIENT_YEAR_LENGTHS",
    "REGULAR_YEAR_LENGTHS",
    "COMPLETE_YEAR_LENGTHS",
    "EPOCH_YEAR",
    "EPOCH_MONTH",
    "EPOCH_DAY",
    "MIN_GREGORIAN_YEAR",
    "DAYS_IN_GREGORIAN_MONTH",
    "DAYS_PER_WEEK",
]
