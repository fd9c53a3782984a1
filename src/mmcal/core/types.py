from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from .time import GregorianDateTime

class YearType(IntEnum):
    COMMON = 0
    LITTLE_WATAT = 1
    BIG_WATAT = 2

class Month(IntEnum):
    FIRST_WASO = 0
    TAGU = 1
    KASON = 2
    NAYON = 3
    WASO = 4
    WAGAUNG = 5
    TAWTHALIN = 6
    THADINGYUT = 7
    TAZAUNGMON = 8
    NADAW = 9
    PYATHO = 10
    TABODWE = 11
    TABAUNG = 12
    LATE_TAGU = 13
    LATE_KASON = 14

class MoonPhase(IntEnum):
    WAXING = 0
    FULL_MOON = 1
    WANING = 2
    NEW_MOON = 3

class Direction(IntEnum):
    """Direction of the dragon head (nagahle)."""
    WEST = 0
    NORTH = 1
    EAST = 2
    SOUTH = 3

class Mahabote(IntEnum):
    BINGA = 0
    ATUN = 1
    YAZA = 2
    ADIPATI = 3
    MARANA = 4
    THIKE = 5
    PUTI = 6

class Nakhat(IntEnum):
    OGRE = 0
    ELF = 1
    HUMAN = 2

@dataclass(frozen=True)
class EraConstants:
    ei: float   # era id: 1.1, 1.2, 1.3, 2 or 3
    wo: float   # full moon offset of 2nd Waso
    nm: int     # number of months used to find excess days
    ew: int     # 1 if the watat decision of this year is flipped

@dataclass(frozen=True)
class WatatResult:
    year: int
    full_moon_day: int   # full moon day of 2nd Waso, only meaningful if is_watat
    is_watat: bool

@dataclass(frozen=True)
class YearInfo:
    year: int
    year_type: YearType
    tagu1: int            # JDN of 1st waxing of Tagu
    full_moon_day: int    # full moon day of (2nd) Waso
    calc_error: bool = False

    @property
    def length(self) -> int:
        return 354 + 30 * (self.year_type != YearType.COMMON) + (self.year_type == YearType.BIG_WATAT)

@dataclass(frozen=True)
class BurmeseDate:
    year: int
    month: int
    day: int
    year_type: YearType
    month_length: int

    @property
    def month_type(self) -> int:
        """1 for Late Tagu / Late Kason, 0 otherwise."""
        return self.month // 13

    @property
    def moon_phase(self) -> MoonPhase:
        from ..engines.moon import moon_phase
        return moon_phase(self.day, self.month, self.year_type)

    @property
    def fortnight_day(self) -> int:
        from ..engines.moon import fortnight_day
        return fortnight_day(self.day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

@dataclass(frozen=True)
class AstroInfo:
    days: Tuple[str, ...]
    sabbath: int          # 1=sabbath, 2=sabbath eve, 0=neither
    yatyaza: bool
    pyathada: int         # 1=pyathada, 2=afternoon pyathada, 0=neither
    nagahle: Direction
    mahabote: Mahabote
    nakhat: Nakhat

@dataclass(frozen=True)
class DayInfo:
    jdn: int
    civil: GregorianDateTime
    calendar: str
    burmese: BurmeseDate
    weekday: int          # 0=Saturday .. 6=Friday
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
