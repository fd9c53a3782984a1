from __future__ import annotations
from mmcal.core.config import STANDARD_CONFIGS
from mmcal.core.engine import CalendarRegistry
from mmcal.engines.calendar import MyanmarCalendar

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, config in STANDARD_CONFIGS.items():
        calendars[name] = MyanmarCalendar(config)
    return CalendarRegistry(calendars)
