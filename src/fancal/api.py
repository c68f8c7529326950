from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .attributes.registry import compute_attributes
from .core.engine import CalendarRegistry, TimeAuthority
from .core.types import DayInfo, MoonPhaseInfo, TimeComponents
from .engines.calendar import CalendarEngine, Moment
from .engines.config import CalendarConfig, load_calendar
from .format import time_since as _time_since

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(calendar: str) -> CalendarEngine:
    return _reg().get(calendar)

def make_engine(
    source: Union[CalendarConfig, str, Path, Mapping[str, Any]],
    *,
    authority: Optional[TimeAuthority] = None,
    strict: bool = False,
) -> CalendarEngine:
    """Build an engine from a config object, a JSON file path or a parsed dict."""
    config = source if isinstance(source, CalendarConfig) else load_calendar(source, strict=strict)
    return CalendarEngine(config, authority)

def register_calendar(name: str, engine: Union[CalendarEngine, CalendarConfig], *, overwrite: bool = False) -> None:
    if isinstance(engine, CalendarConfig):
        engine = CalendarEngine(engine, name=name)
    _reg().register(name, engine, overwrite=overwrite)

def date(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    calendar: str = "gregorian",
) -> TimeComponents:
    """Components for a display year and 1-indexed month/day."""
    return _reg().get(calendar).date(year, month, day, hour, minute, second)

def day_info(
    t: Moment,
    *,
    calendar: str = "gregorian",
    attributes: Sequence[str] = (),
) -> DayInfo:
    eng = _reg().get(calendar)
    info = eng.day_info(t)
    if attributes:
        attrs = compute_attributes(eng, info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(t: Moment, *, calendar: str = "gregorian") -> Dict[str, Any]:
    return _reg().get(calendar).explain(t)

def format_date(t: Moment, template: str = "long", *, calendar: str = "gregorian") -> str:
    return _reg().get(calendar).format(t, template)

def is_leap_year(year: int, *, calendar: str = "gregorian") -> bool:
    return _reg().get(calendar).is_leap_year(year)

def days_in_month(month: int, year: int, *, calendar: str = "gregorian") -> int:
    """Length of 1-indexed `month` in display `year`."""
    return _reg().get(calendar).days_in_month(month - 1, year)

def days_in_year(year: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_in_year(year)

def moon_phase(t: Moment, moon_index: int = 0, *, calendar: str = "gregorian") -> Optional[MoonPhaseInfo]:
    return _reg().get(calendar).moon_phase(t, moon_index)

def time_since(target: Moment, current: Moment, *, calendar: str = "gregorian") -> str:
    eng = _reg().get(calendar)
    return _time_since(eng.config, eng.components(target), eng.components(current))
