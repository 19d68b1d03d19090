"""Validation utilities for Luach.

This module provides validation decorators and utilities for
rejecting out-of-range calendar values at the API boundary, before any
date object is built.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Callable, TypeVar, ParamSpec

from luach._internal.constants import (
    EPOCH_DAY,
    EPOCH_MONTH,
    EPOCH_YEAR,
    MIN_GREGORIAN_YEAR,
    NISSAN,
    TISHREI,
)
from luach.errors import EpochError, ValidationError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hours=(0, 23), minutes=(0, 59))
        ... def molad_time(hours: int, minutes: int) -> None:
        ...     pass

        >>> molad_time(24, 0)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: hours must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        param_names = list(inspect.signature(func).parameters.keys())

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = all_args.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    logger.debug("rejected %s=%r in %s", param_name, value, func.__name__)
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_gregorian_year(year: int) -> None:
    """Validate that a Gregorian year is 1 or later.

    Args:
        year: The year to validate.

    Raises:
        EpochError: If year is 0 or negative (1 BCE or earlier).
    """
    if year < MIN_GREGORIAN_YEAR:
        logger.debug("rejected Gregorian year %r", year)
        raise EpochError(
            f"year must be {MIN_GREGORIAN_YEAR} or later, got {year}"
        )


@validate_range(month=(1, 12))
def validate_gregorian_month(month: int) -> None:
    """Validate that a Gregorian month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """


@validate_range(day=(1, 31))
def validate_gregorian_day(day: int) -> None:
    """Validate that a Gregorian day of month is within 1-31.

    Days past the end of a shorter month are clamped by the caller,
    not rejected.

    Raises:
        ValidationError: If day is outside 1-31.
    """


def validate_gregorian_date(year: int, month: int, day: int) -> None:
    """Validate the components of a Gregorian date.

    Args:
        year: The year (>= 1).
        month: The month (1-12).
        day: The day (1-31).

    Raises:
        ValidationError: If month or day is out of range.
        EpochError: If year is before 1.
    """
    validate_gregorian_month(month)
    validate_gregorian_day(day)
    validate_gregorian_year(year)


@validate_range(hours=(0, 23), minutes=(0, 59), chalakim=(0, 17))
def validate_molad_time(hours: int, minutes: int, chalakim: int) -> None:
    """Validate a molad time of day.

    Chalakim beyond 17 must be expressed as minutes (18 chalakim each),
    so 793 chalakim is 44 minutes and 1 chelek.

    Raises:
        ValidationError: If any component is out of range.
    """


def validate_jewish_date(year: int, month: int, day: int) -> None:
    """Validate the components of a Hebrew date.

    Args:
        year: The Hebrew year.
        month: The Nissan-based month (1-12, or 1-13 in a leap year).
        day: The day of month (1-30). 30 in a 29-day month is accepted
            and clamped by the caller.

    Raises:
        ValidationError: If month or day is out of range.
        EpochError: If the date is earlier than 18 Teves 3761.
    """
    from luach._internal.hebrew import last_month_of_year

    last_month = last_month_of_year(year)
    if month < NISSAN or month > last_month:
        logger.debug("rejected Hebrew month %r for year %r", month, year)
        raise ValidationError(
            f"month must be between {NISSAN} and {last_month} for {year}, got {month}"
        )
    if day < 1 or day > 30:
        logger.debug("rejected Hebrew day %r", day)
        raise ValidationError(f"day must be between 1 and 30, got {day}")

    if year < EPOCH_YEAR or (
        year == EPOCH_YEAR
        and (
            # Tishrei through Kislev precede Teves in year order
            TISHREI <= month < EPOCH_MONTH
            or (month == EPOCH_MONTH and day < EPOCH_DAY)
        )
    ):
        logger.debug("rejected pre-epoch Hebrew date %r-%r-%r", year, month, day)
        raise EpochError(
            f"Hebrew date {year}-{month:02d}-{day:02d} is earlier than "
            f"{EPOCH_DAY} Teves {EPOCH_YEAR} (0001-01-01)"
        )


__all__ = [
    "validate_range",
    "validate_gregorian_year",
    "validate_gregorian_month",
    "validate_gregorian_day",
    "validate_gregorian_date",
    "validate_molad_time",
    "validate_jewish_date",
]
