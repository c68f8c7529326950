from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .errors import UnknownCalendarError
from .types import TimeComponents

class TimeAuthority(Protocol):
    """Converts between absolute world time (integer seconds) and calendar components.

    Implementations must agree with `days_in_month`/`days_in_year` for the
    calendar they serve and round-trip any value they produced themselves.
    """
    def components_to_time(self, components: TimeComponents) -> int: ...
    def time_to_components(self, seconds: int) -> TimeComponents: ...

class Calendar(Protocol):
    def info(self) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Calendar]

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
