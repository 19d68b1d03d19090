"""Tests for Hebrew calendar arithmetic."""

from __future__ import annotations

import logging

import pytest

from luach._internal.constants import (
    ADAR,
    ADAR_II,
    AV,
    CHESHVAN,
    ELUL,
    IYAR,
    KISLEV,
    NISSAN,
    SHEVAT,
    SIVAN,
    TAMMUZ,
    TEVES,
    TISHREI,
)
from luach._internal.gregorian import gregorian_to_absolute
from luach._internal.hebrew import (
    _add_dechiyos,
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
    month_of_year,
    months_elapsed,
    rosh_hashana_elapsed_days,
)
from luach.units.kviah import YearKviah

# A molad day count far from zero whose weekday is Sunday (day % 7 == 0)
BASE_SUNDAY = 7 * 300_000


class TestLeapYear:
    """Tests for is_leap_year() and last_month_of_year()."""

    def test_known_years(self) -> None:
        """Test 5771 is a leap year and 5772 is not."""
        assert is_leap_year(5771)
        assert not is_leap_year(5772)
        assert is_leap_year(5784)
        assert not is_leap_year(5785)

    def test_cycle_positions(self) -> None:
        """Test the leap years fall on positions 3, 6, 8, 11, 14, 17, 19."""
        leap_positions = [y for y in range(1, 20) if is_leap_year(y)]
        assert leap_positions == [3, 6, 8, 11, 14, 17, 19]

    def test_seven_per_cycle(self) -> None:
        """Test every window of 19 consecutive years has 7 leap years."""
        for start in range(1, 6000, 37):
            assert sum(is_leap_year(y) for y in range(start, start + 19)) == 7

    def test_last_month(self) -> None:
        """Test the last month is Adar II in a leap year and Adar otherwise."""
        assert last_month_of_year(5771) == ADAR_II
        assert last_month_of_year(5772) == ADAR


class TestMonthOfYear:
    """Tests for month_of_year() and months_elapsed()."""

    def test_tishrei_is_first(self) -> None:
        """Test Tishrei is the first month of both year types."""
        assert month_of_year(5771, TISHREI) == 1
        assert month_of_year(5772, TISHREI) == 1

    def test_nissan_position(self) -> None:
        """Test Nissan is 7th in a regular year and 8th in a leap year."""
        assert month_of_year(5772, NISSAN) == 7
        assert month_of_year(5771, NISSAN) == 8

    def test_adar_positions(self) -> None:
        """Test the Adar months sit just before Nissan."""
        assert month_of_year(5772, ADAR) == 6
        assert month_of_year(5771, ADAR) == 6
        assert month_of_year(5771, ADAR_II) == 7
        assert month_of_year(5771, ELUL) == 13

    def test_months_elapsed_year_1(self) -> None:
        """Test no months have elapsed at Tishrei of year 1."""
        assert months_elapsed(1, TISHREI) == 0

    def test_months_elapsed_grows_by_year_length(self) -> None:
        """Test consecutive Tishrei moladot are 12 or 13 months apart."""
        for year in range(5700, 5800):
            step = months_elapsed(year + 1, TISHREI) - months_elapsed(year, TISHREI)
            assert step == (13 if is_leap_year(year) else 12)


class TestMolad:
    """Tests for chalakim_since_molad_tohu() and molad_to_absolute()."""

    def test_molad_tohu(self) -> None:
        """Test the molad of Tishrei year 1 is BeHaRaD."""
        assert chalakim_since_molad_tohu(1, TISHREI) == 31524

    def test_molad_tishrei_5771(self) -> None:
        """Test the molad of Tishrei 5771 in chalakim."""
        assert chalakim_since_molad_tohu(5771, TISHREI) == 54_625_157_569

    def test_month_spacing(self) -> None:
        """Test consecutive moladot are 765433 chalakim apart."""
        tishrei = chalakim_since_molad_tohu(5771, TISHREI)
        assert chalakim_since_molad_tohu(5771, CHESHVAN) - tishrei == 765433

    def test_molad_to_absolute(self) -> None:
        """Test the molad of Tishrei 5771 begins on the evening of 2010-09-08."""
        chalakim = chalakim_since_molad_tohu(5771, TISHREI)
        assert molad_to_absolute(chalakim) == gregorian_to_absolute(2010, 9, 8)


class TestDechiyos:
    """Tests for the four Rosh Hashanah postponements."""

    def test_no_postponement(self) -> None:
        """Test a Monday morning molad stays in place."""
        assert _add_dechiyos(5772, BASE_SUNDAY + 1, 0) == BASE_SUNDAY + 1

    def test_molad_zaken(self) -> None:
        """Test a molad at noon or later is postponed a day."""
        # Monday noon -> Tuesday
        assert _add_dechiyos(5772, BASE_SUNDAY + 1, 19440) == BASE_SUNDAY + 2
        # 5772 is not leap, so BeTuTaKFoT cannot move a Monday molad in 5773
        assert not is_leap_year(5772)
        assert _add_dechiyos(5773, BASE_SUNDAY + 1, 19439) == BASE_SUNDAY + 1
        # Thursday is never moved by GaTRaD or BeTuTaKFoT
        assert _add_dechiyos(5772, BASE_SUNDAY + 4, 19439) == BASE_SUNDAY + 4

    def test_molad_zaken_then_lo_adu(self) -> None:
        """Test molad zaken onto Friday is postponed again to Shabbos."""
        assert _add_dechiyos(5772, BASE_SUNDAY + 4, 19440) == BASE_SUNDAY + 6

    def test_gatrad_non_leap_year(self) -> None:
        """Test GaTRaD moves a late Tuesday molad, then Lo ADU to Thursday."""
        assert not is_leap_year(5772)
        assert _add_dechiyos(5772, BASE_SUNDAY + 2, 9924) == BASE_SUNDAY + 4
        assert _add_dechiyos(5772, BASE_SUNDAY + 2, 9923) == BASE_SUNDAY + 2

    def test_gatrad_not_in_leap_year(self) -> None:
        """Test GaTRaD does not apply in a leap year."""
        assert is_leap_year(5771)
        assert _add_dechiyos(5771, BASE_SUNDAY + 2, 9924) == BASE_SUNDAY + 2

    def test_betutakfot_after_leap_year(self) -> None:
        """Test BeTuTaKFoT moves a late Monday molad after a leap year."""
        assert is_leap_year(5771)
        assert _add_dechiyos(5772, BASE_SUNDAY + 1, 16789) == BASE_SUNDAY + 2
        assert _add_dechiyos(5772, BASE_SUNDAY + 1, 16788) == BASE_SUNDAY + 1

    def test_betutakfot_not_after_regular_year(self) -> None:
        """Test BeTuTaKFoT needs the previous year to be a leap year."""
        assert not is_leap_year(5772)
        assert _add_dechiyos(5773, BASE_SUNDAY + 1, 16789) == BASE_SUNDAY + 1

    def test_first_three_do_not_stack(self) -> None:
        """Test molad zaken and GaTRaD together postpone only one day."""
        # Tuesday noon in a regular year: one day to Wednesday, Lo ADU to Thursday
        assert _add_dechiyos(5772, BASE_SUNDAY + 2, 19440) == BASE_SUNDAY + 4

    def test_lo_adu_rosh(self) -> None:
        """Test Sunday, Wednesday and Friday are postponed a day."""
        assert _add_dechiyos(5772, BASE_SUNDAY, 0) == BASE_SUNDAY + 1
        assert _add_dechiyos(5772, BASE_SUNDAY + 3, 0) == BASE_SUNDAY + 4
        assert _add_dechiyos(5772, BASE_SUNDAY + 5, 0) == BASE_SUNDAY + 6
        assert _add_dechiyos(5772, BASE_SUNDAY + 6, 0) == BASE_SUNDAY + 6

    def test_dechiyos_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test applied dechiyos are reported at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="luach._internal.hebrew"):
            _add_dechiyos(5772, BASE_SUNDAY + 4, 19440)
        messages = [r.getMessage() for r in caplog.records]
        assert any("molad zaken" in m for m in messages)
        assert any("lo ADU rosh" in m for m in messages)


class TestRoshHashana:
    """Tests for rosh_hashana_elapsed_days()."""

    def test_known_rosh_hashana_dates(self) -> None:
        """Test Rosh Hashanah of several years against the civil calendar."""
        for year, gregorian in [
            (5771, (2010, 9, 9)),
            (5772, (2011, 9, 29)),
            (5773, (2012, 9, 17)),
            (5774, (2013, 9, 5)),
            (5784, (2023, 9, 16)),
            (5785, (2024, 10, 3)),
        ]:
            assert hebrew_to_absolute(year, TISHREI, 1) == gregorian_to_absolute(*gregorian)

    def test_never_on_sunday_wednesday_friday(self) -> None:
        """Test Rosh Hashanah never falls on Sunday, Wednesday or Friday."""
        for year in range(1, 10001):
            assert rosh_hashana_elapsed_days(year) % 7 not in (0, 3, 5)

    def test_memoized(self) -> None:
        """Test results are cached per year."""
        rosh_hashana_elapsed_days(5771)
        assert ((5771,), ()) in rosh_hashana_elapsed_days._cache


class TestYearLength:
    """Tests for days_in_year() and kviah()."""

    def test_year_length_closure(self) -> None:
        """Test every year length is one of the six valid values."""
        for year in range(1, 10001):
            length = days_in_year(year)
            if is_leap_year(year):
                assert length in (383, 384, 385)
            else:
                assert length in (353, 354, 355)

    def test_deficient_years(self) -> None:
        """Test years with Cheshvan and Kislev both 29 days."""
        for year in [5773, 5777, 5781, 5784, 5790, 5793]:
            assert not is_cheshvan_long(year)
            assert is_kislev_short(year)
            assert kviah(year) is YearKviah.DEFICIENT

    def test_regular_years(self) -> None:
        """Test years with Cheshvan 29 and Kislev 30 days."""
        for year in [5769, 5772, 5778, 5782, 5786, 5789, 5792]:
            assert not is_cheshvan_long(year)
            assert not is_kislev_short(year)
            assert kviah(year) is YearKviah.REGULAR

    def test_complete_years(self) -> None:
        """Test years with Cheshvan and Kislev both 30 days."""
        for year in [5770, 5771, 5774, 5776, 5779, 5780, 5783, 5785, 5787, 5788]:
            assert is_cheshvan_long(year)
            assert not is_kislev_short(year)
            assert kviah(year) is YearKviah.COMPLETE

    def test_leap_kviah_years(self) -> None:
        """Test leap years appear in each kviah."""
        assert is_leap_year(5784) and kviah(5784) is YearKviah.DEFICIENT
        assert is_leap_year(5782) and kviah(5782) is YearKviah.REGULAR
        assert is_leap_year(5771) and kviah(5771) is YearKviah.COMPLETE

    def test_known_lengths(self) -> None:
        """Test the lengths of 5771 and 5773."""
        assert days_in_year(5771) == 385
        assert days_in_year(5773) == 353

    def test_year_length_matches_kviah(self) -> None:
        """Test days_in_year agrees with the kviah and leap status."""
        for year in range(5600, 6000):
            assert days_in_year(year) == kviah(year).year_length(is_leap_year(year))


class TestDaysInMonth:
    """Tests for days_in_month()."""

    def test_fixed_month_lengths(self) -> None:
        """Test months whose length never changes."""
        for year in [5771, 5772, 5773]:
            for month in [NISSAN, SIVAN, AV, TISHREI, SHEVAT]:
                assert days_in_month(month, year) == 30
            for month in [IYAR, TAMMUZ, ELUL, TEVES]:
                assert days_in_month(month, year) == 29

    def test_deficient_year_5773(self) -> None:
        """Test Cheshvan and Kislev 5773 both have 29 days."""
        assert days_in_month(CHESHVAN, 5773) == 29
        assert days_in_month(KISLEV, 5773) == 29

    def test_complete_year_5771(self) -> None:
        """Test Cheshvan and Kislev 5771 both have 30 days."""
        assert days_in_month(CHESHVAN, 5771) == 30
        assert days_in_month(KISLEV, 5771) == 30

    def test_adar(self) -> None:
        """Test Adar lengths in leap and regular years."""
        assert days_in_month(ADAR, 5772) == 29
        assert days_in_month(ADAR, 5771) == 30
        assert days_in_month(ADAR_II, 5771) == 29

    def test_months_sum_to_year_length(self) -> None:
        """Test the month lengths add up to the year length."""
        for year in range(5700, 5800):
            total = sum(
                days_in_month(m, year) for m in range(NISSAN, last_month_of_year(year) + 1)
            )
            assert total == days_in_year(year)


class TestHebrewConversion:
    """Tests for hebrew_to_absolute() and absolute_to_hebrew()."""

    def test_epoch(self) -> None:
        """Test 18 Teves 3761 is absolute date 1."""
        assert hebrew_to_absolute(3761, TEVES, 18) == 1
        assert absolute_to_hebrew(1) == (3761, TEVES, 18)

    def test_known_dates(self) -> None:
        """Test conversions of known days."""
        assert absolute_to_hebrew(gregorian_to_absolute(2011, 1, 31)) == (5771, SHEVAT, 26)
        assert absolute_to_hebrew(gregorian_to_absolute(2011, 4, 5)) == (5771, NISSAN, 1)
        assert absolute_to_hebrew(gregorian_to_absolute(2011, 4, 19)) == (5771, NISSAN, 15)

    def test_days_since_start_of_year(self) -> None:
        """Test day counts from Rosh Hashanah."""
        assert days_since_start_of_year(5771, TISHREI, 1) == 1
        assert days_since_start_of_year(5771, CHESHVAN, 1) == 31
        assert days_since_start_of_year(5771, ELUL, 29) == 385
        assert days_since_start_of_year(5773, ELUL, 29) == 353

    def test_roundtrip_every_day(self) -> None:
        """Test every day of 5770-5775 converts back to itself."""
        start = hebrew_to_absolute(5770, TISHREI, 1)
        end = hebrew_to_absolute(5776, TISHREI, 1)
        for abs_date in range(start, end):
            assert hebrew_to_absolute(*absolute_to_hebrew(abs_date)) == abs_date

    def test_year_rolls_after_elul(self) -> None:
        """Test the day after 29 Elul is 1 Tishrei of the next year."""
        abs_date = hebrew_to_absolute(5770, ELUL, 29)
        assert absolute_to_hebrew(abs_date + 1) == (5771, TISHREI, 1)

    def test_adar_ii_rolls_to_nissan(self) -> None:
        """Test the day after 29 Adar II is 1 Nissan."""
        abs_date = hebrew_to_absolute(5771, ADAR_II, 29)
        assert absolute_to_hebrew(abs_date + 1) == (5771, NISSAN, 1)
