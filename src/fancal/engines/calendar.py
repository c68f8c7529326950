"""
fancal.engines.calendar
-----------------------
The orchestrator. Binds a CalendarConfig to a TimeAuthority and exposes every
resolver as a method taking either an integer world time or TimeComponents.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional, Union

from ..core.engine import TimeAuthority
from ..core.time import SimpleTimeAuthority
from ..core.types import (
    CycleValues,
    DayInfo,
    DaylightInfo,
    EraInfo,
    MoonPhaseInfo,
    TimeComponents,
    WeekInfo,
)
from .. import format as fmt
from . import canonical_hours, cycles, daylight, eras, festivals, moon, seasons, weeks
from .accounting import day_of_year, days_in_month, days_in_year, epoch_day
from .config import CalendarConfig, CanonicalHour, Festival, Season
from .leap import is_leap_year, leap_year_description

Moment = Union[int, TimeComponents]


class CalendarEngine:
    """
    Composition root: one calendar definition plus the clock that turns
    world time into calendar components.
    """
    def __init__(
        self,
        config: CalendarConfig,
        authority: Optional[TimeAuthority] = None,
        *,
        name: Optional[str] = None,
    ):
        self.config = config
        self.authority = authority if authority is not None else SimpleTimeAuthority(config)
        self.name = name or config.name

    # ---------------------------------------------------------
    # Time conversion (delegated to the authority)
    # ---------------------------------------------------------

    def components(self, t: Moment) -> TimeComponents:
        if isinstance(t, TimeComponents):
            return t
        return self.authority.time_to_components(int(t))

    def to_time(self, t: Moment) -> int:
        if isinstance(t, TimeComponents):
            return self.authority.components_to_time(t)
        return int(t)

    def add_days(self, t: Moment, days: int) -> TimeComponents:
        spd = self.config.days.seconds_per_day
        return self.authority.time_to_components(self.to_time(t) + days * spd)

    def date(self, display_year: int, month: int = 1, day: int = 1,
             hour: int = 0, minute: int = 0, second: int = 0) -> TimeComponents:
        """Components for a human date (display year, 1-indexed month and day)."""
        year = display_year - self.config.years.year_zero
        c = TimeComponents(year=year, month=month - 1, day_of_month=day - 1,
                           hour=hour, minute=minute, second=second)
        return self.authority.time_to_components(self.authority.components_to_time(c))

    def display_year(self, t: Moment) -> int:
        return self.components(t).year + self.config.years.year_zero

    # ---------------------------------------------------------
    # Accounting
    # ---------------------------------------------------------

    def is_leap_year(self, display_year: int) -> bool:
        return is_leap_year(self.config, display_year)

    def days_in_month(self, month: int, display_year: int) -> int:
        return days_in_month(self.config, month, display_year)

    def days_in_year(self, display_year: int) -> int:
        return days_in_year(self.config, display_year)

    def day_of_year(self, t: Moment) -> int:
        return day_of_year(self.config, self.components(t))

    def epoch_day(self, t: Moment) -> int:
        return epoch_day(self.config, self.components(t))

    # ---------------------------------------------------------
    # Resolvers
    # ---------------------------------------------------------

    def weekday(self, t: Moment) -> str:
        return weeks.weekday_name(self.config, self.components(t))

    def festival(self, t: Moment) -> Optional[Festival]:
        return festivals.find_festival_day(self.config, self.components(t))

    def moon_phase(self, t: Moment, moon_index: int = 0) -> Optional[MoonPhaseInfo]:
        return moon.moon_phase(self.config, moon_index, self.components(t))

    def moon_phases(self, t: Moment) -> List[MoonPhaseInfo]:
        return moon.all_moon_phases(self.config, self.components(t))

    def next_full_moon(self, t: Moment, moon_index: int = 0, max_days: int = moon.DEFAULT_SEARCH_DAYS):
        return moon.next_full_moon(self, moon_index, self.components(t), max_days=max_days)

    def season(self, t: Moment) -> Optional[Season]:
        return seasons.current_season(self.config, self.components(t))

    def era(self, t: Moment) -> Optional[EraInfo]:
        return eras.current_era(self.config, self.display_year(t))

    def canonical_hour(self, t: Moment) -> Optional[CanonicalHour]:
        return canonical_hours.canonical_hour(self.config, self.components(t))

    def week(self, t: Moment) -> Optional[WeekInfo]:
        return weeks.current_week(self.config, self.components(t))

    def cycles(self, t: Moment) -> CycleValues:
        return cycles.cycle_values(self.config, self.components(t))

    def daylight(self, t: Moment) -> DaylightInfo:
        return daylight.daylight(self.config, self.components(t))

    def format(self, t: Moment, template: str = "long") -> str:
        return fmt.format_date(self.config, self.components(t), template)

    # ---------------------------------------------------------
    # High-level API methods (used by api.py / CLI)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        c = self.config
        return {
            "name": self.name,
            "months": len(c.months),
            "weekdays": len(c.weekdays),
            "moons": [m.name for m in c.moons],
            "leap_rule": leap_year_description(c),
            "year_zero": c.years.year_zero,
            "authority": type(self.authority).__name__,
            **({"metadata": dict(c.metadata)} if c.metadata else {}),
        }

    def day_info(self, t: Moment) -> DayInfo:
        comps = self.components(t)
        c = self.config
        display_year = comps.year + c.years.year_zero
        fest = festivals.find_festival_day(c, comps)
        season = seasons.current_season(c, comps)
        hour = canonical_hours.canonical_hour(c, comps)
        return DayInfo(
            calendar=self.name,
            components=comps,
            display_year=display_year,
            is_leap_year=is_leap_year(c, display_year),
            weekday=weeks.weekday_name(c, comps),
            festival=fest.name if fest else None,
            season=season.name if season else None,
            era=eras.current_era(c, display_year),
            moons=tuple(moon.all_moon_phases(c, comps)),
            canonical_hour=hour.name if hour else None,
            week=weeks.current_week(c, comps),
            cycles=cycles.cycle_values(c, comps),
            daylight=daylight.daylight(c, comps),
        )

    def explain(self, t: Moment) -> Dict[str, Any]:
        out = asdict(self.day_info(t))
        out["epoch_day"] = self.epoch_day(t)
        out["day_of_year"] = self.day_of_year(t)
        out["world_time"] = self.to_time(t)
        return out
