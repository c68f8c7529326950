"""
Weekdays and named weeks.
"""

from __future__ import annotations

from typing import Optional

from ..core.types import TimeComponents, WeekInfo
from .accounting import day_of_year, epoch_day
from .config import CalendarConfig
from .festivals import count_non_weekday_festivals_before, count_non_weekday_festivals_before_year


def weekday_index(config: CalendarConfig, components: TimeComponents) -> int:
    """
    0-indexed weekday. Festivals that do not count for the weekday are skipped;
    a month with starting_weekday set restarts the cycle on its first day.
    """
    wl = config.week_length
    m = config.months[components.month] if 0 <= components.month < len(config.months) else None

    if m is not None and m.starting_weekday is not None:
        before_month = count_non_weekday_festivals_before(
            config, TimeComponents(year=components.year, month=components.month, day_of_month=0)
        )
        in_month = count_non_weekday_festivals_before(config, components) - before_month
        return (m.starting_weekday + components.day_of_month - in_month) % wl

    skipped = count_non_weekday_festivals_before_year(config, components.year)
    skipped += count_non_weekday_festivals_before(config, components)
    return (epoch_day(config, components) - skipped + config.years.first_weekday) % wl


def weekday_name(config: CalendarConfig, components: TimeComponents) -> str:
    if not config.weekdays:
        return ""
    return config.weekdays[weekday_index(config, components)].name


def current_week(config: CalendarConfig, components: TimeComponents) -> Optional[WeekInfo]:
    weeks = config.weeks
    if not weeks.enabled or not weeks.names:
        return None

    wl = config.week_length
    if weeks.type == "month-based":
        n = components.day_of_month // wl
    else:
        n = day_of_year(config, components) // wl

    named = weeks.names[n % len(weeks.names)]
    return WeekInfo(
        week_number=n + 1,
        week_name=named.name,
        week_abbr=named.abbreviation or named.name[:3],
        type=weeks.type,
    )
