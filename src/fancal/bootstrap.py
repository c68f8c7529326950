from __future__ import annotations
from fancal.core.engine import CalendarRegistry
from fancal.engines.calendar import CalendarEngine
from fancal.engines.specs import ALL_SPECS

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, config in ALL_SPECS.items():
        calendars[name] = CalendarEngine(config, name=name)
    return CalendarRegistry(calendars)
