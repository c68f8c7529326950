"""
fancal.engines.daylight
-----------------------
Dynamic day length.

Day length eases between shortest_day at the winter solstice and longest_day at
the summer solstice along a half cosine, so the curve is flat at both solstices
and steepest at the equinoxes. Sunrise and sunset sit symmetrically around the
middle of the day (hours_per_day / 2). Hours are decimal, in the calendar's own
hours.

With daylight disabled, the sun rises at 25% and sets at 75% of the day.
"""

from __future__ import annotations

import math

from ..core.time import hours_of_day
from ..core.types import DaylightInfo, TimeComponents
from .accounting import day_of_year
from .config import CalendarConfig


def solstice_progress(config: CalendarConfig, doy: int) -> float:
    """0 at the winter solstice, 1 at the summer solstice, back to 0 a year later."""
    dl = config.daylight
    n = config.days.days_per_year
    since_winter = (doy - dl.winter_solstice + n) % n
    between = (dl.summer_solstice - dl.winter_solstice + n) % n
    if between <= 0:
        return 0.0
    if since_winter <= between:
        return since_winter / between
    return 1.0 - (since_winter - between) / (n - between)


def daylight_hours(config: CalendarConfig, components: TimeComponents) -> float:
    hpd = config.days.hours_per_day
    dl = config.daylight
    if not dl.enabled:
        return hpd * 0.5
    p = solstice_progress(config, day_of_year(config, components))
    eased = (1.0 - math.cos(p * math.pi)) / 2.0
    return dl.shortest_day + (dl.longest_day - dl.shortest_day) * eased


def sunrise(config: CalendarConfig, components: TimeComponents) -> float:
    return config.days.hours_per_day / 2 - daylight_hours(config, components) / 2


def sunset(config: CalendarConfig, components: TimeComponents) -> float:
    return config.days.hours_per_day / 2 + daylight_hours(config, components) / 2


def solar_midday(config: CalendarConfig, components: TimeComponents) -> float:
    return (sunrise(config, components) + sunset(config, components)) / 2


def solar_midnight(config: CalendarConfig, components: TimeComponents) -> float:
    hpd = config.days.hours_per_day
    return sunset(config, components) + (hpd - daylight_hours(config, components)) / 2


def progress_day(config: CalendarConfig, components: TimeComponents) -> float:
    """0 at sunrise, 1 at sunset; below 0 before sunrise and above 1 after sunset."""
    length = daylight_hours(config, components)
    if length <= 0:
        return 0.0
    return (hours_of_day(config, components) - sunrise(config, components)) / length


def progress_night(config: CalendarConfig, components: TimeComponents) -> float:
    """
    0 at sunset, 1 at the next sunrise. Hours before sunrise are carried
    forward by a full day so the night reads as one span across midnight.
    """
    hpd = config.days.hours_per_day
    night = hpd - daylight_hours(config, components)
    if night <= 0:
        return 0.0
    h = hours_of_day(config, components)
    if h < sunrise(config, components):
        h += hpd
    return (h - sunset(config, components)) / night


def daylight(config: CalendarConfig, components: TimeComponents) -> DaylightInfo:
    hours = daylight_hours(config, components)
    hpd = config.days.hours_per_day
    rise = hpd / 2 - hours / 2
    set_ = hpd / 2 + hours / 2
    return DaylightInfo(
        sunrise=rise,
        sunset=set_,
        solar_midday=(rise + set_) / 2,
        solar_midnight=set_ + (hpd - hours) / 2,
        daylight_hours=hours,
    )


def darkness_level(config: CalendarConfig, components: TimeComponents) -> float:
    """0 at mid-day, 1 at midnight, following a cosine over the clock day."""
    p = hours_of_day(config, components) / config.days.hours_per_day
    v = (math.cos(p * 2 * math.pi) + 1) / 2
    return min(1.0, max(0.0, v))
