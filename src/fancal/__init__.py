"""fancal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_engine,
    register_calendar,
    date,
    day_info,
    explain,
    format_date,
    is_leap_year,
    days_in_month,
    days_in_year,
    moon_phase,
    time_since,
)
from .core.errors import ConfigError, FancalError, UnknownCalendarError
from .core.types import DayInfo, TimeComponents
from .engines.calendar import CalendarEngine
from .engines.config import CalendarConfig, load_calendar, validate_config

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_engine",
    "register_calendar",
    "date",
    "day_info",
    "explain",
    "format_date",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "moon_phase",
    "time_since",
    "CalendarConfig",
    "CalendarEngine",
    "ConfigError",
    "DayInfo",
    "FancalError",
    "TimeComponents",
    "UnknownCalendarError",
    "load_calendar",
    "validate_config",
]
