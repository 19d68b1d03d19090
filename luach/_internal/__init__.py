"""Internal utilities for Luach.

This module contains private implementation details:
    - Calendar constants (epoch, chalakim, month numbers)
    - Validation decorators and boundary checks
    - Gregorian and Hebrew calendar arithmetic
    - The @memoize decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from luach._internal.decorators import memoize
from luach._internal.validation import (
    validate_gregorian_date,
    validate_jewish_date,
    validate_molad_time,
    validate_range,
)

__all__: list[str] = [
    "memoize",
    "validate_gregorian_date",
    "validate_jewish_date",
    "validate_molad_time",
    "validate_range",
]
