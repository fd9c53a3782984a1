from __future__ import annotations
from typing import Any, Dict

from ..engines.convert import sasana_year as _sasana_year, year_name_index
from .astro import astro_info
from .registry import register_attribute

YEAR_NAMES = (
    "Hpusha", "Magha", "Phalguni", "Chitra", "Visakha", "Jyeshtha",
    "Ashadha", "Sravana", "Bhadrapaha", "Asvini", "Krittika", "Mrigasiras",
)

def _calendar(info):
    # holidays depend on the civil date, so use the calendar that produced info
    from ..api import _reg
    return _reg().get(info.calendar)

def weekday(info) -> Dict[str, Any]:
    # 0=Sat..6=Fri
    return {"weekday": info.weekday}

def astro(info) -> Dict[str, Any]:
    b = info.burmese
    return {"astro": astro_info(b.year, b.month, b.day, b.year_type, info.weekday)}

def holidays(info) -> Dict[str, Any]:
    return {"holidays": _calendar(info).holidays(info.jdn)}

def other_holidays(info) -> Dict[str, Any]:
    return {"other_holidays": _calendar(info).other_holidays(info.jdn)}

def sasana_year(info) -> Dict[str, Any]:
    b = info.burmese
    return {"sasana_year": _sasana_year(b.year, b.month, b.day)}

def year_name(info) -> Dict[str, Any]:
    return {"year_name": YEAR_NAMES[year_name_index(info.burmese.year)]}

register_attribute("weekday", weekday)
register_attribute("astro", astro)
register_attribute("holidays", holidays)
register_attribute("other_holidays", other_holidays)
register_attribute("sasana_year", sasana_year)
register_attribute("year_name", year_name)
