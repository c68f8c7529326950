from __future__ import annotations
from dataclasses import replace

from ..engines.accounting import days_before_year, days_in_month, days_in_year, epoch_day
from ..engines.config import CalendarConfig
from ..engines.weeks import weekday_index
from .engine import TimeAuthority
from .types import TimeComponents

__all__ = ["TimeAuthority", "SimpleTimeAuthority", "hours_of_day", "seconds_per_day"]

def seconds_per_day(config: CalendarConfig) -> int:
    return config.days.seconds_per_day

def hours_of_day(config: CalendarConfig, components: TimeComponents) -> float:
    """Decimal hours since the start of the day."""
    d = config.days
    minutes = components.minute + components.second / d.seconds_per_minute
    return components.hour + minutes / d.minutes_per_hour


class SimpleTimeAuthority:
    """
    Reference world-time authority: integer seconds counted from internal
    year 0, month 0, day 0, using the leap-aware month lengths of the calendar.

    Hosts with their own clock should pass their own TimeAuthority instead.
    """

    def __init__(self, config: CalendarConfig):
        if not config.months:
            raise ValueError(f"Calendar '{config.name}' has no months")
        self.config = config

    def components_to_time(self, components: TimeComponents) -> int:
        d = self.config.days
        return (
            epoch_day(self.config, components) * d.seconds_per_day
            + components.hour * d.seconds_per_hour
            + components.minute * d.seconds_per_minute
            + components.second
        )

    def _locate_year(self, days: int) -> int:
        c = self.config
        avg = max(1, days_in_year(c, c.years.year_zero))
        y = days // avg
        while days_before_year(c, y) > days:
            y -= 1
        while days_before_year(c, y + 1) <= days:
            y += 1
        return y

    def time_to_components(self, seconds: int) -> TimeComponents:
        c = self.config
        d = c.days
        days, rem = divmod(int(seconds), d.seconds_per_day)
        hour, rem = divmod(rem, d.seconds_per_hour)
        minute, second = divmod(rem, d.seconds_per_minute)

        year = self._locate_year(days)
        doy = days - days_before_year(c, year)
        display_year = year + c.years.year_zero

        day_left = doy
        month = 0
        for i in range(len(c.months)):
            n = days_in_month(c, i, display_year)
            if day_left < n:
                month = i
                break
            day_left -= n

        comps = TimeComponents(
            year=year, month=month, day_of_month=day_left,
            hour=hour, minute=minute, second=second, day=doy,
        )
        return replace(comps, day_of_week=weekday_index(c, comps))
