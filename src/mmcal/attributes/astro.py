"""
mmcal.attributes.astro
----------------------
Myanmar astrological days.

Every rule is an independent lookup on the month, the day of the month (or
its fortnight day) and the weekday [0=Saturday .. 6=Friday]. The tables
are traditional and are kept literally; First Waso counts as Waso wherever
a rule says so.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from ..core.types import AstroInfo, Direction, Mahabote, Nakhat
from ..engines.moon import fortnight_day, month_length


def _month_1_12(mm: int) -> int:
    """Late Tagu/Kason -> Tagu/Kason, First Waso -> Waso."""
    mmt = mm // 13
    mm = mm % 13 + mmt
    if mm <= 0:
        mm = 4
    return mm


def sabbath(md: int, mm: int, year_type: int) -> int:
    """1 for sabbath (uposatha), 2 for sabbath eve, 0 otherwise."""
    mml = month_length(mm, year_type)
    s = 0
    if md in (8, 15, 23) or md == mml:
        s = 1
    if md in (7, 14, 22) or md == mml - 1:
        s = 2
    return s


def yatyaza(mm: int, wd: int) -> bool:
    m1 = mm % 4
    wd1 = m1 // 2 + 4
    wd2 = (1 - m1 // 2 + m1 % 2) * (1 + 2 * (m1 % 2))
    return wd in (wd1, wd2)


def pyathada(mm: int, wd: int) -> int:
    """1 for pyathada, 2 for afternoon pyathada, 0 otherwise."""
    m1 = mm % 4
    wda = (1, 3, 3, 0, 2, 1, 2)
    p = 0
    if m1 == 0 and wd == 4:
        p = 2
    if m1 == wda[wd]:
        p = 1
    return p


def nagahle(mm: int) -> Direction:
    """Direction of the dragon head."""
    if mm <= 0:
        mm = 4
    return Direction((mm % 12) // 3)


def mahabote(my: int, wd: int) -> Mahabote:
    return Mahabote((my - wd) % 7)


def nakhat(my: int) -> Nakhat:
    return Nakhat(my % 3)


def thamanyo(mm: int, wd: int) -> bool:
    mm = _month_1_12(mm)
    m1 = mm - 1 - mm // 9
    wd1 = (m1 * 2 - m1 // 8) % 7
    wd2 = (wd + 7 - wd1) % 7
    return wd2 <= 1


def amyeittasote(md: int, wd: int) -> bool:
    wda = (5, 8, 3, 7, 2, 4, 1)
    return fortnight_day(md) == wda[wd]


def warameittugyi(md: int, wd: int) -> bool:
    wda = (7, 1, 4, 8, 9, 6, 3)
    return fortnight_day(md) == wda[wd]


def warameittunge(md: int, wd: int) -> bool:
    wn = (wd + 6) % 7
    return 12 - fortnight_day(md) == wn


def yatpote(md: int, wd: int) -> bool:
    wda = (8, 1, 4, 6, 9, 8, 7)
    return fortnight_day(md) == wda[wd]


def thamaphyu(md: int, wd: int) -> bool:
    mf = fortnight_day(md)
    wda = (1, 2, 6, 6, 5, 6, 7)
    wdb = (0, 1, 0, 0, 0, 3, 3)
    return mf == wda[wd] or mf == wdb[wd] or (mf == 4 and wd == 5)


def nagapor(md: int, wd: int) -> bool:
    wda = (26, 21, 2, 10, 18, 2, 21)
    wdb = (17, 19, 1, 0, 9, 0, 0)
    if md == wda[wd] or md == wdb[wd]:
        return True
    return (md == 2 and wd == 1) or (md in (12, 4, 18) and wd == 2)


def yatyotema(mm: int, md: int) -> bool:
    mm = _month_1_12(mm)
    m1 = mm if mm % 2 else (mm + 9) % 12
    m1 = (m1 + 4) % 12 + 1
    return fortnight_day(md) == m1


def mahayatkyan(mm: int, md: int) -> bool:
    if mm <= 0:
        mm = 4
    m1 = ((mm % 12) // 2 + 4) % 6 + 1
    return fortnight_day(md) == m1


def shanyat(mm: int, md: int) -> bool:
    mm = _month_1_12(mm)
    sya = (8, 8, 2, 2, 9, 3, 3, 5, 1, 4, 7, 4)
    return fortnight_day(md) == sya[mm - 1]


AstroRule = Callable[[int, int, int], bool]

# (name, rule(mm, md, wd)) in reporting order
ASTRO_DAY_RULES: Tuple[Tuple[str, AstroRule], ...] = (
    ("Thamanyo", lambda mm, md, wd: thamanyo(mm, wd)),
    ("Amyeittasote", lambda mm, md, wd: amyeittasote(md, wd)),
    ("Warameittugyi", lambda mm, md, wd: warameittugyi(md, wd)),
    ("Warameittunge", lambda mm, md, wd: warameittunge(md, wd)),
    ("Yatpote", lambda mm, md, wd: yatpote(md, wd)),
    ("Thamaphyu", lambda mm, md, wd: thamaphyu(md, wd)),
    ("Nagapor", lambda mm, md, wd: nagapor(md, wd)),
    ("Yatyotema", lambda mm, md, wd: yatyotema(mm, md)),
    ("Mahayatkyan", lambda mm, md, wd: mahayatkyan(mm, md)),
    ("Shanyat", lambda mm, md, wd: shanyat(mm, md)),
)


def astrological_days(mm: int, md: int, wd: int) -> List[str]:
    return [name for name, rule in ASTRO_DAY_RULES if rule(mm, md, wd)]


def astro_info(my: int, mm: int, md: int, year_type: int, wd: int) -> AstroInfo:
    return AstroInfo(
        days=tuple(astrological_days(mm, md, wd)),
        sabbath=sabbath(md, mm, year_type),
        yatyaza=yatyaza(mm, wd),
        pyathada=pyathada(mm, wd),
        nagahle=nagahle(mm),
        mahabote=mahabote(my, wd),
        nakhat=nakhat(my),
    )
