from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterator, List, Protocol

from .errors import UnknownCalendarError
from .time import GregorianDateTime
from .types import BurmeseDate, DayInfo

class CalendarEngine(Protocol):
    """What the public API needs from a named calendar."""
    def info(self) -> Dict[str, Any]: ...
    def civil(self, jdn: float) -> GregorianDateTime: ...
    def from_jdn(self, jdn: float) -> BurmeseDate: ...
    def to_jdn(self, year: int, month: int, day: int) -> int: ...
    def to_gregorian(self, year: int, month: int, day: int) -> date: ...
    def day_info(self, d: Any, *, debug: bool = False) -> DayInfo: ...
    def holidays(self, d: Any) -> List[str]: ...
    def other_holidays(self, d: Any) -> List[str]: ...
    def explain(self, d: Any) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    """Named calendars; the civil settings differ, the Myanmar engine is shared."""
    calendars: Dict[str, CalendarEngine] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.calendars

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def get(self, name: str) -> CalendarEngine:
        try:
            return self.calendars[name]
        except KeyError:
            raise UnknownCalendarError(
                f"Unknown calendar '{name}'. Available: {', '.join(self.list())}"
            ) from None

    def list(self) -> List[str]:
        return sorted(self.calendars)

    def register(self, name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
        if name in self.calendars and not overwrite:
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self.calendars[name] = calendar
