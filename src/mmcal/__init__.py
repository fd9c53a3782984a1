"""mmcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    julian_day_to_burmese_date,
    burmese_date_to_julian_day,
    moon_phase,
    fortnight_day,
    day_of_month,
    astrological_days,
    astro_info,
    holidays,
    other_holidays,
    day_info,
    explain,
    year_info,
    to_gregorian,
    list_calendars,
    calendar_info,
    list_attributes,
    make_calendar,
    register_calendar,
)
from .core.config import CalendarConfig
from .core.errors import InvalidDateError, MmcalError, UnknownCalendarError
from .core.time import CalendarType, gregorian_to_julian, julian_to_gregorian, weekday
from .core.types import BurmeseDate, MoonPhase, YearType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "julian_day_to_burmese_date",
    "burmese_date_to_julian_day",
    "moon_phase",
    "fortnight_day",
    "day_of_month",
    "astrological_days",
    "astro_info",
    "holidays",
    "other_holidays",
    "day_info",
    "explain",
    "year_info",
    "to_gregorian",
    "list_calendars",
    "calendar_info",
    "list_attributes",
    "make_calendar",
    "register_calendar",
    "CalendarConfig",
    "CalendarType",
    "gregorian_to_julian",
    "julian_to_gregorian",
    "weekday",
    "BurmeseDate",
    "MoonPhase",
    "YearType",
    "MmcalError",
    "InvalidDateError",
    "UnknownCalendarError",
]
