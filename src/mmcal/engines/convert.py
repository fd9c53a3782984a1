"""
mmcal.engines.convert
---------------------
Julian Day Number <-> Myanmar date.

Months are numbered Tagu=1 .. Tabaung=12 with First Waso=0 in watat years;
the days of Tagu and Kason that fall after the new year (at the end of the
Myanmar year) are Late Tagu=13 and Late Kason=14.
"""

from __future__ import annotations

import logging
import math

from ..core.time import round_half_up
from ..core.types import BurmeseDate
from .constants import MONTH_INTERCEPT, MONTH_SLOPE, MYANMAR_EPOCH, SOLAR_YEAR
from .moon import month_length
from .year import year_info, year_length

logger = logging.getLogger(__name__)


def year_of_jdn(jdn: float) -> int:
    """Myanmar year containing the (rounded) Julian day."""
    return math.floor((round_half_up(jdn) - 0.5 - MYANMAR_EPOCH) / SOLAR_YEAR)


def julian_to_burmese(jdn: float) -> BurmeseDate:
    jdn = round_half_up(jdn)
    my = year_of_jdn(jdn)
    yo = year_info(my)
    logger.debug("JDN %d -> ME %d (type %d, tagu1 %d)", jdn, my, yo.year_type, yo.tagu1)

    dd = jdn - yo.tagu1 + 1              # day count from 1st waxing of Tagu
    b = yo.year_type // 2                # 1 for big watat
    c = 1 // (yo.year_type + 1)          # 1 for common year
    myl = year_length(yo.year_type)
    mmt = (dd - 1) // myl                # month type: 1 for late Tagu/Kason
    dd -= mmt * myl

    # threshold: 1 from day 89, where the extra month/day of a watat year begins
    a = (dd + 423) // 512
    mm = math.floor((dd - b * a + c * a * 30 + MONTH_INTERCEPT) / MONTH_SLOPE)
    e = (mm + 12) // 16
    f = (mm + 11) // 16
    md = dd - math.floor(MONTH_SLOPE * mm - MONTH_INTERCEPT) - b * e + c * f * 30
    mm += f * 3 - e * 4 + 12 * mmt

    return BurmeseDate(
        year=my,
        month=mm,
        day=md,
        year_type=yo.year_type,
        month_length=month_length(mm, yo.year_type),
    )


def burmese_to_julian(my: int, mm: int, md: int) -> int:
    yo = year_info(my)
    mmt = mm // 13
    mm = mm % 13 + mmt                   # to 1-12 with month type
    b = yo.year_type // 2
    c = 1 - (yo.year_type + 1) // 2      # 1 for common year
    # First Waso -> 4, later months shifted by one
    mm += 4 - ((mm + 15) // 16) * 4 + (mm + 12) // 16
    dd = (
        md
        + math.floor(MONTH_SLOPE * mm - MONTH_INTERCEPT)
        - c * ((mm + 11) // 16) * 30
        + b * ((mm + 12) // 16)
    )
    dd += mmt * year_length(yo.year_type)
    return dd + yo.tagu1 - 1


def sasana_year(my: int, mm: int, md: int) -> int:
    """Buddhist era year; it turns on the full moon of Kason."""
    offset = 1181 if mm == 1 or (mm == 2 and md < 16) else 1182
    return my + offset


def year_name_index(my: int) -> int:
    """Index into the 12-year cycle of year names (Hpusha=0 .. Mrigasiras=11)."""
    return my % 12
