"""
mmcal.engines.year
------------------
Year type, year length and the first day of Tagu for a Myanmar year.

The calendar only corrects its drift in watat years, so the start of any
year is located from the 2nd Waso full moon of the nearest watat year
before it.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..core.types import WatatResult, YearInfo, YearType
from .constants import COMMON_YEAR_DAYS, TAGU1_OFFSET
from .watat import check_watat

logger = logging.getLogger(__name__)

# Watat years are never more than 3 years apart in any era.
MAX_WATAT_GAP = 3


def previous_watat(my: int) -> Tuple[int, WatatResult]:
    """
    Walk back from my - 1 to the nearest watat year, at most MAX_WATAT_GAP years.

    Returns (yd, result) where my - yd is the year found. If no watat year
    is found in range the last year examined is returned.
    """
    yd = 0
    while True:
        yd += 1
        prev = check_watat(my - yd)
        if prev.is_watat or yd >= MAX_WATAT_GAP:
            break
    if not prev.is_watat:
        logger.warning("No watat year within %d years before ME %d", MAX_WATAT_GAP, my)
    return yd, prev


def year_length(year_type: int) -> int:
    """354, 384 or 385 days for common, little watat and big watat years."""
    return COMMON_YEAR_DAYS + (1 - 1 // (year_type + 1)) * 30 + year_type // 2


def year_info(my: int) -> YearInfo:
    """Year type, first day of Tagu and full moon of Waso for Myanmar year my."""
    this = check_watat(my)
    yd, prev = previous_watat(my)

    calc_error = False
    if this.is_watat:
        nd = (this.full_moon_day - prev.full_moon_day) % COMMON_YEAR_DAYS
        year_type = YearType(min(nd // 31 + 1, 2))
        fm = this.full_moon_day
        if nd not in (30, 31):
            calc_error = True
            logger.warning("Inconsistent watat gap of %d days in ME %d", nd, my)
    else:
        year_type = YearType.COMMON
        fm = prev.full_moon_day + COMMON_YEAR_DAYS * yd

    tagu1 = prev.full_moon_day + COMMON_YEAR_DAYS * yd - TAGU1_OFFSET
    return YearInfo(year=my, year_type=year_type, tagu1=tagu1, full_moon_day=fm, calc_error=calc_error)
