"""HebrewMonth enumeration.

Months are numbered from Nissan, as in the Torah. In a leap year Adar
(12) is Adar I and the added month is Adar II (13).
"""

from __future__ import annotations

from enum import IntEnum

from luach._internal import constants


class HebrewMonth(IntEnum):
    """Hebrew month numbers, Nissan = 1 through Adar II = 13.

    HebrewMonth values compare and hash as plain ints, so they can be
    passed anywhere a month number is accepted.

    Examples:
        >>> HebrewMonth.TISHREI
        <HebrewMonth.TISHREI: 7>

        >>> HebrewMonth(11).name
        'SHEVAT'
    """

    NISSAN = constants.NISSAN
    IYAR = constants.IYAR
    SIVAN = constants.SIVAN
    TAMMUZ = constants.TAMMUZ
    AV = constants.AV
    ELUL = constants.ELUL
    TISHREI = constants.TISHREI
    CHESHVAN = constants.CHESHVAN
    KISLEV = constants.KISLEV
    TEVES = constants.TEVES
    SHEVAT = constants.SHEVAT
    ADAR = constants.ADAR
    ADAR_II = constants.ADAR_II

    @property
    def has_fixed_length(self) -> bool:
        """Return False for Cheshvan, Kislev and Adar.

        Their lengths depend on the year kviah (Cheshvan, Kislev) or on
        whether the year is a leap year (Adar).
        """
        return self not in (HebrewMonth.CHESHVAN, HebrewMonth.KISLEV, HebrewMonth.ADAR)


__all__ = ["HebrewMonth"]
