"""
mmcal.attributes.holidays
-------------------------
Public holidays and other observances of Myanmar for a Julian day.

Rules are evaluated group by group (Thingyan, Gregorian calendar, Myanmar
calendar, substitute days) and every group appends its own match, so one
day may carry several names, including repeated ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.time import (
    GREGORIAN_START,
    CalendarType,
    gregorian_to_julian,
    julian_to_gregorian,
    round_half_up,
)
from ..core.types import BurmeseDate, MoonPhase
from ..engines.constants import MYANMAR_EPOCH, SOLAR_YEAR, THINGYAN_START, THIRD_ERA_START
from ..engines.convert import julian_to_burmese
from ..engines.era import exact_search

# Akya falls this many days before Atat
AKYA_OFFSET = 2.169918982
AKYA_OFFSET_BEFORE_THIRD_ERA = 2.1675


@dataclass(frozen=True)
class GregorianHoliday:
    name: str
    month: int
    day: int
    since: Optional[int] = None
    until: Optional[int] = None

    def matches(self, y: int, m: int, d: int) -> bool:
        if self.since is not None and y < self.since:
            return False
        if self.until is not None and y > self.until:
            return False
        return m == self.month and d == self.day


@dataclass(frozen=True)
class MyanmarHoliday:
    name: str
    month: int
    phase: Optional[MoonPhase] = None
    days: Tuple[int, ...] = ()
    since: Optional[int] = None
    # (first year, name) of observances held on the same day
    also: Tuple[Tuple[int, str], ...] = ()

    def matches(self, bd: BurmeseDate) -> bool:
        if self.since is not None and bd.year < self.since:
            return False
        if bd.month != self.month:
            return False
        if self.phase is not None:
            return bd.moon_phase == self.phase
        return bd.day in self.days

    def names(self, bd: BurmeseDate) -> List[str]:
        return [self.name] + [name for since, name in self.also if bd.year >= since]


PUBLIC_GREGORIAN_HOLIDAYS: Tuple[GregorianHoliday, ...] = (
    GregorianHoliday("New Year's Day", 1, 1, since=2018, until=2021),
    GregorianHoliday("Independence Day", 1, 4, since=1948),
    GregorianHoliday("Union Day", 2, 12, since=1947),
    GregorianHoliday("Peasants' Day", 3, 2, since=1958),
    GregorianHoliday("Resistance Day", 3, 27, since=1945),
    GregorianHoliday("Labour Day", 5, 1, since=1923),
    GregorianHoliday("Martyrs' Day", 7, 19, since=1947),
    GregorianHoliday("Christmas Day", 12, 25, since=1752),
    GregorianHoliday("Holiday", 12, 30, since=2017, until=2017),
    GregorianHoliday("Holiday", 12, 31, since=2017, until=2021),
)

PUBLIC_MYANMAR_HOLIDAYS: Tuple[MyanmarHoliday, ...] = (
    MyanmarHoliday("Buddha Day", 2, MoonPhase.FULL_MOON),   # Vesak
    MyanmarHoliday("Start of Buddhist Lent", 4, MoonPhase.FULL_MOON),
    MyanmarHoliday("End of Buddhist Lent", 7, MoonPhase.FULL_MOON),
    MyanmarHoliday("Holiday", 7, days=(14, 16), since=1379),
    MyanmarHoliday("Tazaungdaing", 8, MoonPhase.FULL_MOON),
    MyanmarHoliday("Holiday", 8, days=(14,), since=1379),
    MyanmarHoliday("National Day", 8, days=(25,), since=1282),
    MyanmarHoliday("Karen New Year's Day", 10, days=(1,)),
    MyanmarHoliday("Tabaung Pwe", 12, MoonPhase.FULL_MOON),
)

# Substitute holidays announced for 2019 - 2021 (JDN, ascending)
SUBSTITUTE_HOLIDAYS: Tuple[int, ...] = (
    # 2019
    2458768, 2458772, 2458785, 2458800,
    # 2020
    2458855, 2458918, 2458950, 2459051, 2459062,
    2459152, 2459156, 2459167, 2459181, 2459184,
    # 2021
    2459300, 2459303, 2459323, 2459324,
    2459335, 2459548, 2459573,
)
SUBSTITUTE_YEARS = (2019, 2021)

OTHER_GREGORIAN_HOLIDAYS: Tuple[GregorianHoliday, ...] = (
    GregorianHoliday("New Year's Day", 1, 1, until=2017),
    GregorianHoliday("G. Aung San BD", 2, 13, since=1915),
    GregorianHoliday("Valentines Day", 2, 14, since=1969),
    GregorianHoliday("Earth Day", 4, 22, since=1970),
    GregorianHoliday("April Fools' Day", 4, 1, since=1392),
    GregorianHoliday("Red Cross Day", 5, 8, since=1948),
    GregorianHoliday("World Teachers' Day", 10, 5, since=1994),
    GregorianHoliday("United Nations Day", 10, 24, since=1947),
    GregorianHoliday("Halloween", 10, 31, since=1753),
)

OTHER_MYANMAR_HOLIDAYS: Tuple[MyanmarHoliday, ...] = (
    # the ancient founding of Hanthawady
    MyanmarHoliday("'Mon' National Day", 11, days=(16,), since=1309),
    MyanmarHoliday("Shan New Year's Day", 9, days=(1,), also=((1306, "Authors' Day"),)),
    MyanmarHoliday("Mahathamaya Day", 3, MoonPhase.FULL_MOON),
    MyanmarHoliday("Garudhamma Day", 6, MoonPhase.FULL_MOON),
    MyanmarHoliday("Mothers' Day", 10, MoonPhase.FULL_MOON, since=1356),
    MyanmarHoliday("Fathers' Day", 12, MoonPhase.FULL_MOON, since=1370),
    MyanmarHoliday("Metta Day", 5, MoonPhase.FULL_MOON),
    MyanmarHoliday("Taungpyone Pwe", 5, days=(10,)),
    MyanmarHoliday("Yadanagu Pwe", 5, days=(23,)),
)

# Easter and Good Friday are listed from this Gregorian year
EASTER_SINCE = 1876


@dataclass(frozen=True)
class Thingyan:
    year: int     # Myanmar year that begins the day after atat
    akya: int     # JDN of the akya day
    atat: int     # JDN of the atat day

    @property
    def new_year_day(self) -> int:
        return self.atat + 1


def thingyan(my: int, era_year: Optional[int] = None) -> Thingyan:
    """
    Thingyan of the new year my.

    era_year selects the akya constant and defaults to my; the public
    holiday rules pass the Myanmar year of the day being checked, which is
    one less than my for days in Late Tagu/Kason.
    """
    if era_year is None:
        era_year = my
    ja = SOLAR_YEAR * my + MYANMAR_EPOCH   # atat time
    jk = ja - (AKYA_OFFSET if era_year >= THIRD_ERA_START else AKYA_OFFSET_BEFORE_THIRD_ERA)
    return Thingyan(year=my, akya=round_half_up(jk), atat=round_half_up(ja))


def _first(rules, *args) -> Optional[object]:
    for rule in rules:
        if rule.matches(*args):
            return rule
    return None


def thingyan_holidays(jdn: int, bd: BurmeseDate) -> List[str]:
    ny = bd.year + bd.month_type
    tg = thingyan(ny, era_year=bd.year)
    akn, atn = tg.akya, tg.atat
    hs: List[str] = []
    if jdn == tg.new_year_day:
        hs.append("Myanmar New Year's Day")
    if ny < THINGYAN_START:
        return hs
    if jdn == atn:
        hs.append("Thingyan Atat")
    elif akn < jdn < atn:
        hs.append("Thingyan Akyat")
    elif jdn == akn:
        hs.append("Thingyan Akya")
    elif jdn == akn - 1:
        hs.append("Thingyan Akyo")
    elif 1369 <= ny < 1379 and (jdn == akn - 2 or atn + 2 <= jdn <= akn + 7):
        hs.append("Holiday")
    elif 1384 <= ny <= 1385 and akn - 5 <= jdn <= akn - 2:
        hs.append("Holiday")
    elif ny >= 1386 and atn + 2 <= jdn <= akn + 7:
        hs.append("Holiday")
    return hs


def public_holidays(
    jdn: float,
    ct: int = CalendarType.BRITISH,
    sg: int = GREGORIAN_START,
) -> List[str]:
    jdn = round_half_up(jdn)
    bd = julian_to_burmese(jdn)
    g = julian_to_gregorian(jdn, ct=ct, sg=sg)

    hs = thingyan_holidays(jdn, bd)

    gh = _first(PUBLIC_GREGORIAN_HOLIDAYS, g.year, g.month, g.day)
    if gh is not None:
        hs.append(gh.name)

    mh = _first(PUBLIC_MYANMAR_HOLIDAYS, bd)
    if mh is not None:
        hs.extend(mh.names(bd))

    lo, hi = SUBSTITUTE_YEARS
    if lo <= g.year <= hi and exact_search(jdn, SUBSTITUTE_HOLIDAYS) >= 0:
        hs.append("Holiday")

    return hs


def easter(y: int) -> int:
    """JDN of Easter Sunday of Gregorian year y (anonymous Gregorian computus)."""
    a = y % 19
    b = y // 100
    c = y % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    q = h + l - 7 * m + 114
    p = q % 31 + 1
    n = q // 31
    return round_half_up(gregorian_to_julian(y, n, p, ct=CalendarType.GREGORIAN))


def other_holidays(
    jdn: float,
    ct: int = CalendarType.BRITISH,
    sg: int = GREGORIAN_START,
) -> List[str]:
    """Observances that are not public holidays."""
    jdn = round_half_up(jdn)
    bd = julian_to_burmese(jdn)
    g = julian_to_gregorian(jdn, ct=ct, sg=sg)
    hs: List[str] = []

    gh = _first(OTHER_GREGORIAN_HOLIDAYS, g.year, g.month, g.day)
    if gh is not None:
        hs.append(gh.name)

    if g.year >= EASTER_SINCE:
        doe = easter(g.year)
        if jdn == doe:
            hs.append("Easter")
        elif jdn == doe - 2:
            hs.append("Good Friday")

    mh = _first(OTHER_MYANMAR_HOLIDAYS, bd)
    if mh is not None:
        hs.extend(mh.names(bd))

    return hs
