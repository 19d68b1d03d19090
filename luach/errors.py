"""Luach exception hierarchy.

All Luach-specific exceptions inherit from LuachError.
"""

from __future__ import annotations


class LuachError(Exception):
    """Base exception for all Luach errors."""

    pass


class ValidationError(LuachError):
    """Invalid input values.

    Raised when a calendar value is out of range.

    Examples:
        - Gregorian month outside 1-12
        - Hebrew month 13 in a non-leap year
        - Molad chalakim outside 0-17
    """

    pass


class EpochError(ValidationError):
    """Date before the start of the supported range.

    Raised for Hebrew dates earlier than 18 Teves 3761 and for
    Gregorian years before 1 (1 BCE and earlier).
    """

    pass


class ParseError(LuachError):
    """Failed to parse a string representation of a date.

    Examples:
        - "2024/01/15" instead of "2024-01-15"
        - Missing day component
    """

    pass


class NavigationError(LuachError):
    """Unsupported navigation request.

    Raised by JewishDate.forward() for an unknown unit or an amount
    smaller than 1.
    """

    pass


__all__ = [
    "LuachError",
    "ValidationError",
    "EpochError",
    "ParseError",
    "NavigationError",
]
