"""
mmcal.core.time
---------------
Julian Day <-> Gregorian / Julian / British calendar conversion.

The British calendar (the default) follows the Julian calendar before
GREGORIAN_START and the Gregorian calendar from then on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

# 1752-09-14, first day of the Gregorian calendar in Britain
GREGORIAN_START = 2361222

# JD of the Unix epoch, 1970-01-01 00:00:00 UTC
JD_UNIX_EPOCH = 2440587.5


class CalendarType(IntEnum):
    BRITISH = 0
    GREGORIAN = 1
    JULIAN = 2


@dataclass(frozen=True)
class GregorianDateTime:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def date(self) -> date:
        return date(self.year, self.month, self.day)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves upward (JDN convention)."""
    return math.floor(x + 0.5)


def time_to_day_fraction(hour: float, minute: float = 0, second: float = 0) -> float:
    """Day fraction relative to noon."""
    return (hour - 12) / 24 + minute / 1440 + second / 86400


def gregorian_to_julian(
    y: int,
    m: int,
    d: int,
    h: float = 12,
    n: float = 0,
    s: float = 0,
    ct: int = CalendarType.BRITISH,
    sg: int = GREGORIAN_START,
) -> float:
    """Convert a civil date and time to a Julian date."""
    a = (14 - m) // 12
    y = y + 4800 - a
    m = m + 12 * a - 3
    jd = d + (153 * m + 2) // 5 + 365 * y + y // 4
    if ct == CalendarType.GREGORIAN:
        jd = jd - y // 100 + y // 400 - 32045
    elif ct == CalendarType.JULIAN:
        jd = jd - 32083
    else:
        jd = jd - y // 100 + y // 400 - 32045
        if jd < sg:
            jd = d + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
            # dates inside the 1752 gap collapse onto the switch day
            if jd > sg:
                jd = sg
    return jd + time_to_day_fraction(h, n, s)


def julian_to_gregorian(
    jd: float,
    ct: int = CalendarType.BRITISH,
    sg: int = GREGORIAN_START,
) -> GregorianDateTime:
    """Convert a Julian date to a civil date and time."""
    j = math.floor(jd + 0.5)
    jf = jd + 0.5 - j
    if ct == CalendarType.JULIAN or (ct == CalendarType.BRITISH and jd < sg):
        b = j + 1524
        c = math.floor((b - 122.1) / 365.25)
        f = math.floor(365.25 * c)
        e = math.floor((b - f) / 30.6001)
        m = e - 13 if e > 13 else e - 1
        d = b - f - math.floor(30.6001 * e)
        y = c - 4715 if m < 3 else c - 4716
    else:
        j -= 1721119
        y = (4 * j - 1) // 146097
        j = 4 * j - 1 - 146097 * y
        d = j // 4
        j = (4 * d + 3) // 1461
        d = 4 * d + 3 - 1461 * j
        d = (d + 4) // 4
        m = (5 * d - 3) // 153
        d = 5 * d - 3 - 153 * m
        d = (d + 5) // 5
        y = 100 * y + j
        if m < 10:
            m += 3
        else:
            m -= 9
            y += 1
    jf *= 24
    h = math.floor(jf)
    jf = (jf - h) * 60
    n = math.floor(jf)
    s = (jf - n) * 60
    return GregorianDateTime(y, m, d, h, n, s)


def is_leap_year(y: int, ct: int = CalendarType.GREGORIAN, sg: int = GREGORIAN_START) -> bool:
    if ct == CalendarType.BRITISH:
        ct = CalendarType.JULIAN if y < julian_to_gregorian(sg).year else CalendarType.GREGORIAN
    if ct == CalendarType.JULIAN:
        return y % 4 == 0
    if y % 4 != 0:
        return False
    if y % 100 != 0:
        return True
    return y % 400 == 0


def month_length(y: int, m: int, ct: int = CalendarType.BRITISH, sg: int = GREGORIAN_START) -> int:
    """Number of days in a civil month (19 for September 1752 in the British calendar)."""
    y2, m2 = (y + 1, 1) if m == 12 else (y, m + 1)
    j1 = gregorian_to_julian(y, m, 1, ct=ct, sg=sg)
    j2 = gregorian_to_julian(y2, m2, 1, ct=ct, sg=sg)
    return round_half_up(j2 - j1)


def weekday(jd: float) -> int:
    """Weekday of a Julian date: 0=Saturday, 1=Sunday, ..., 6=Friday."""
    return (round_half_up(jd) + 2) % 7


def date_to_jdn(d: date, ct: int = CalendarType.BRITISH, sg: int = GREGORIAN_START) -> int:
    return round_half_up(gregorian_to_julian(d.year, d.month, d.day, ct=ct, sg=sg))


def jdn_to_date(jdn: int, ct: int = CalendarType.BRITISH, sg: int = GREGORIAN_START) -> date:
    return julian_to_gregorian(jdn, ct=ct, sg=sg).date()


def unix_to_julian(ts: float) -> float:
    """Seconds since 1970-01-01 00:00:00 UTC to Julian date."""
    return JD_UNIX_EPOCH + ts / 86400.0


def julian_to_unix(jd: float) -> float:
    return (jd - JD_UNIX_EPOCH) * 86400.0
