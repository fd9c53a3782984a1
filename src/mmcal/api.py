from __future__ import annotations

import math
from dataclasses import replace
from datetime import date
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes.astro import astrological_days as _astrological_days
from .attributes.astro import astro_info as _astro_info
from .attributes.registry import compute_attributes, list_attributes
from .core.config import CalendarConfig
from .core.engine import CalendarEngine, CalendarRegistry
from .core.errors import InvalidDateError
from .core.time import weekday
from .core.types import AstroInfo, BurmeseDate, DayInfo, Month, MoonPhase, YearInfo, YearType
from .engines import moon as _moon
from .engines import year as _year
from .engines.calendar import MyanmarCalendar

_registry: Optional[CalendarRegistry] = None

DEFAULT_CALENDAR = "british"

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

# ============================================================
# Boundary validation
# ============================================================

def _check_jdn(jdn: Any) -> float:
    if isinstance(jdn, bool) or not isinstance(jdn, Real):
        raise InvalidDateError(f"Julian day must be a real number, got {jdn!r}")
    if not math.isfinite(jdn):
        raise InvalidDateError(f"Julian day must be finite, got {jdn!r}")
    return float(jdn)

def _check_year_type(year_type: Any) -> YearType:
    try:
        return YearType(year_type)
    except ValueError:
        raise InvalidDateError(f"year_type must be 0, 1 or 2, got {year_type!r}") from None

def _check_day(day: Any, lo: int = 1, hi: int = 30) -> int:
    if isinstance(day, bool) or not isinstance(day, int):
        raise InvalidDateError(f"day must be an integer, got {day!r}")
    if not lo <= day <= hi:
        raise InvalidDateError(f"day must be in {lo}..{hi}, got {day}")
    return day

def _check_month(month: Any) -> int:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidDateError(f"month must be an integer, got {month!r}")
    if not 0 <= month <= 14:
        raise InvalidDateError(f"month must be in 0..14, got {month}")
    return month

def _day_like(d: Union[date, float]) -> Union[date, float]:
    return d if isinstance(d, date) else _check_jdn(d)

# ============================================================
# Calendars
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def make_calendar(config: CalendarConfig) -> MyanmarCalendar:
    return MyanmarCalendar(config)

def register_calendar(name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def julian_day_to_burmese_date(jdn: float) -> BurmeseDate:
    return _reg().get(DEFAULT_CALENDAR).from_jdn(_check_jdn(jdn))

def burmese_date_to_julian_day(year: int, month: int, day: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDateError(f"year must be an integer, got {year!r}")
    month = _check_month(month)
    year_type = _year.year_info(year).year_type
    if month == Month.FIRST_WASO and year_type == YearType.COMMON:
        raise InvalidDateError(f"ME {year} is a common year and has no First Waso")
    _check_day(day, 1, _moon.month_length(month, year_type))
    return _reg().get(DEFAULT_CALENDAR).to_jdn(year, month, day)

def year_info(year: int) -> YearInfo:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDateError(f"year must be an integer, got {year!r}")
    return _year.year_info(year)

def to_gregorian(year: int, month: int, day: int, *, calendar: str = DEFAULT_CALENDAR) -> date:
    jdn = burmese_date_to_julian_day(year, month, day)
    return _reg().get(calendar).civil(jdn).date()

# ============================================================
# Moon
# ============================================================

def moon_phase(day: int, month: int, year_type: int) -> MoonPhase:
    month = _check_month(month)
    year_type = _check_year_type(year_type)
    _check_day(day, 1, _moon.month_length(month, year_type))
    return _moon.moon_phase(day, month, year_type)

def fortnight_day(day: int) -> int:
    return _moon.fortnight_day(_check_day(day))

def day_of_month(fortnight: int, phase: int, month: int, year_type: int) -> int:
    month = _check_month(month)
    year_type = _check_year_type(year_type)
    try:
        phase = MoonPhase(phase)
    except ValueError:
        raise InvalidDateError(f"phase must be 0..3, got {phase!r}") from None
    return _moon.day_of_month(_check_day(fortnight, 1, 15), phase, month, year_type)

# ============================================================
# Per-day lookups
# ============================================================

def astrological_days(jdn: float) -> List[str]:
    jdn = _check_jdn(jdn)
    bd = julian_day_to_burmese_date(jdn)
    return _astrological_days(bd.month, bd.day, weekday(jdn))

def astro_info(jdn: float) -> AstroInfo:
    jdn = _check_jdn(jdn)
    bd = julian_day_to_burmese_date(jdn)
    return _astro_info(bd.year, bd.month, bd.day, bd.year_type, weekday(jdn))

def holidays(d: Union[date, float], *, calendar: str = DEFAULT_CALENDAR) -> List[str]:
    return _reg().get(calendar).holidays(_day_like(d))

def other_holidays(d: Union[date, float], *, calendar: str = DEFAULT_CALENDAR) -> List[str]:
    return _reg().get(calendar).other_holidays(_day_like(d))

def day_info(
    d: Union[date, float],
    *,
    calendar: str = DEFAULT_CALENDAR,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(calendar).day_info(_day_like(d), debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: Union[date, float], *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).explain(_day_like(d))
