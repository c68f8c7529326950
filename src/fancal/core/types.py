from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple

@dataclass(frozen=True)
class TimeComponents:
    """A calendar position as produced by the time authority.

    `year` is the internal (zero-based) year; add `years.year_zero` for the
    display year. `month` and `day_of_month` are 0-indexed.
    """
    year: int
    month: int = 0
    day_of_month: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    day: Optional[int] = None          # 0-indexed day of year, when known
    day_of_week: Optional[int] = None

@dataclass(frozen=True)
class MoonPhaseInfo:
    name: str
    sub_phase_name: str
    icon: str
    position: float
    day_in_cycle: int
    phase_index: int
    day_within_phase: int
    phase_duration: int

@dataclass(frozen=True)
class EraInfo:
    name: str
    abbreviation: str
    format: Literal["prefix", "suffix"]
    template: Optional[str]
    year_in_era: int

@dataclass(frozen=True)
class WeekInfo:
    week_number: int  # 1-indexed
    week_name: str
    week_abbr: str
    type: Literal["month-based", "year-based"]

@dataclass(frozen=True)
class CycleValue:
    cycle_name: str
    entry_name: str
    index: int

@dataclass(frozen=True)
class CycleValues:
    text: str
    values: Tuple[CycleValue, ...] = ()

@dataclass(frozen=True)
class DaylightInfo:
    sunrise: float
    sunset: float
    solar_midday: float
    solar_midnight: float
    daylight_hours: float

@dataclass(frozen=True)
class DayInfo:
    """Everything the resolvers know about one moment, bundled for display code."""
    calendar: str
    components: TimeComponents
    display_year: int
    is_leap_year: bool
    weekday: str
    festival: Optional[str]
    season: Optional[str]
    era: Optional[EraInfo]
    moons: Tuple[MoonPhaseInfo, ...]
    canonical_hour: Optional[str]
    week: Optional[WeekInfo]
    cycles: CycleValues
    daylight: DaylightInfo
    attributes: Optional[Dict[str, Any]] = None
