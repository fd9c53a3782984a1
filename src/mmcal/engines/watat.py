"""
mmcal.engines.watat
-------------------
Intercalary month (watat) test for a single Myanmar year.
"""

from __future__ import annotations

from ..core.time import round_half_up
from ..core.types import WatatResult
from .constants import LUNAR_MONTH, MYANMAR_EPOCH, SOLAR_YEAR
from .era import era_constants

SY = SOLAR_YEAR
LM = LUNAR_MONTH
MO = MYANMAR_EPOCH


def check_watat(my: int) -> WatatResult:
    """
    Decide whether Myanmar year my has an intercalary month and find the
    full moon day of its 2nd Waso.

    The full moon day is a Julian day number in Myanmar time and is only
    meaningful for watat years; for common years it is the day the full
    moon would have had.
    """
    c = era_constants(my)
    # threshold to adjust excess days
    ta = (SY / 12 - LM) * (12 - c.nm)
    # excess days of the year over whole lunations
    ed = (SY * (my + 3739)) % LM
    if ed < ta:
        ed += LM
    fm = round_half_up(SY * my + MO - ed + 4.5 * LM + c.wo)

    if c.ei >= 2:
        # 2nd era and later: watat when the excess days reach the threshold
        tw = LM - (SY / 12 - LM) * c.nm
        watat = 1 if ed >= tw else 0
    else:
        # 1st era: 19-year metonic cycle, remainders 2,5,7,10,13,15,18
        watat = ((my * 7 + 2) % 19) // 12

    watat ^= c.ew
    return WatatResult(year=my, full_moon_day=fm, is_watat=bool(watat))
