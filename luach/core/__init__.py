"""Core calendar types.

This module provides the fundamental calendar types:
    - JewishDate: A day in the Hebrew and proleptic Gregorian calendars
    - Molad: The calculated lunar conjunction of a Hebrew month
"""

from __future__ import annotations

from luach.core.jewish_date import JewishDate
from luach.core.molad import Molad

__all__: list[str] = [
    "JewishDate",
    "Molad",
]
