from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict

from .time import GREGORIAN_START, CalendarType

@dataclass(frozen=True)
class CalendarConfig:
    """
    Settings of the civil-calendar side of a conversion.

    Only the Gregorian/Julian converter reads these; the Burmese engine
    works on Julian days alone.
    """
    name: str = "british"
    calendar_type: CalendarType = CalendarType.BRITISH
    sg: int = GREGORIAN_START   # start of the Gregorian calendar (JDN)

    def __post_init__(self) -> None:
        if self.calendar_type not in tuple(CalendarType):
            raise ValueError(f"calendar_type must be one of {[int(c) for c in CalendarType]}")
        object.__setattr__(self, "calendar_type", CalendarType(self.calendar_type))

    def tweak(self, **kwargs: Any) -> "CalendarConfig":
        return replace(self, **kwargs)

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "calendar_type": self.calendar_type.name.lower(), "sg": self.sg}


STANDARD_CONFIGS: Dict[str, CalendarConfig] = {
    "british": CalendarConfig("british", CalendarType.BRITISH),
    "gregorian": CalendarConfig("gregorian", CalendarType.GREGORIAN),
    "julian": CalendarConfig("julian", CalendarType.JULIAN),
}
