"""
mmcal.engines.calendar
----------------------
The Orchestrator. Binds the Myanmar calendar engine to one configuration of
the civil (Gregorian/Julian) calendar.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Union

from ..core.config import CalendarConfig
from ..core.time import GregorianDateTime, date_to_jdn, julian_to_gregorian, round_half_up, weekday
from ..core.types import AstroInfo, BurmeseDate, DayInfo
from .convert import burmese_to_julian, julian_to_burmese
from .year import year_info

DayLike = Union[date, int, float]


class MyanmarCalendar:
    """
    Translates civil dates and Julian days to Myanmar dates and back.
    The civil side follows self.config; the Myanmar side does not depend on it.
    """
    def __init__(self, config: CalendarConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    def info(self) -> Dict[str, Any]:
        return self.config.info()

    # ---------------------------------------------------------
    # Civil side
    # ---------------------------------------------------------

    def jdn_of(self, d: DayLike) -> int:
        """Julian day number of a civil date, or a Julian date rounded."""
        if isinstance(d, date):
            return date_to_jdn(d, ct=self.config.calendar_type, sg=self.config.sg)
        return round_half_up(d)

    def civil(self, jdn: float) -> GregorianDateTime:
        return julian_to_gregorian(jdn, ct=self.config.calendar_type, sg=self.config.sg)

    # ---------------------------------------------------------
    # Myanmar side
    # ---------------------------------------------------------

    def from_jdn(self, jdn: float) -> BurmeseDate:
        return julian_to_burmese(jdn)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return burmese_to_julian(year, month, day)

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        return self.civil(self.to_jdn(year, month, day)).date()

    def day_info(self, d: DayLike, *, debug: bool = False) -> DayInfo:
        jdn = self.jdn_of(d)
        bd = self.from_jdn(jdn)
        dbg = None
        if debug:
            yo = year_info(bd.year)
            dbg = {
                "tagu1": yo.tagu1,
                "full_moon_day": yo.full_moon_day,
                "year_length": yo.length,
                "calc_error": yo.calc_error,
                "config": self.info(),
            }
        return DayInfo(
            jdn=jdn,
            civil=self.civil(jdn),
            calendar=self.name,
            burmese=bd,
            weekday=weekday(jdn),
            debug=dbg,
        )

    def astro(self, d: DayLike) -> AstroInfo:
        from ..attributes.astro import astro_info
        jdn = self.jdn_of(d)
        bd = self.from_jdn(jdn)
        return astro_info(bd.year, bd.month, bd.day, bd.year_type, weekday(jdn))

    def holidays(self, d: DayLike) -> List[str]:
        from ..attributes.holidays import public_holidays
        return public_holidays(self.jdn_of(d), ct=self.config.calendar_type, sg=self.config.sg)

    def other_holidays(self, d: DayLike) -> List[str]:
        from ..attributes.holidays import other_holidays
        return other_holidays(self.jdn_of(d), ct=self.config.calendar_type, sg=self.config.sg)

    def explain(self, d: DayLike) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
