"""
Season lookup.

A season is either a month range (1-indexed, with optional partial-month day
bounds) or a 0-indexed day-of-year range. Both kinds may wrap the year end.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.types import TimeComponents
from .accounting import day_of_year, days_in_month, days_in_year
from .config import CalendarConfig, Season

logger = logging.getLogger(__name__)


def _in_month_range(config: CalendarConfig, s: Season, c: TimeComponents) -> bool:
    month = c.month + 1
    day = c.day_of_month + 1
    ms, me = s.month_start, s.month_end
    ds = s.day_start if s.day_start is not None else 1
    de = s.day_end if s.day_end is not None else days_in_month(config, me - 1, c.year + config.years.year_zero)

    if ms == me:
        return month == ms and ds <= day <= de
    if ms < me:
        if month == ms:
            return day >= ds
        if month == me:
            return day <= de
        return ms < month < me
    # wraps the year end
    if month == ms:
        return day >= ds
    if month == me:
        return day <= de
    return month > ms or month < me


def _in_day_range(s: Season, doy: int) -> bool:
    if s.day_start is None or s.day_end is None:
        return False
    if s.day_start <= s.day_end:
        return s.day_start <= doy <= s.day_end
    return doy >= s.day_start or doy <= s.day_end


def season_index(config: CalendarConfig, components: TimeComponents) -> Optional[int]:
    if not config.seasons:
        return None
    doy = day_of_year(config, components)
    for i, s in enumerate(config.seasons):
        if s.is_month_based:
            if _in_month_range(config, s, components):
                return i
        elif _in_day_range(s, doy):
            return i
    logger.debug("no season covers day %d of '%s'; using the first", doy, config.name)
    return 0


def current_season(config: CalendarConfig, components: TimeComponents) -> Optional[Season]:
    i = season_index(config, components)
    return None if i is None else config.seasons[i]


def _season_bounds(config: CalendarConfig, s: Season, display_year: int):
    """(start, end) as 0-indexed days of year."""
    if s.is_month_based:
        def month_offset(m: int) -> int:
            return sum(days_in_month(config, i, display_year) for i in range(m))

        ds = s.day_start if s.day_start is not None else 1
        de = s.day_end if s.day_end is not None else days_in_month(config, s.month_end - 1, display_year)
        return month_offset(s.month_start - 1) + ds - 1, month_offset(s.month_end - 1) + de - 1
    return s.day_start or 0, s.day_end or 0


def season_progress(config: CalendarConfig, components: TimeComponents) -> float:
    """How far (0..1) the date is into its season."""
    s = current_season(config, components)
    if s is None:
        return 0.0
    display_year = components.year + config.years.year_zero
    start, end = _season_bounds(config, s, display_year)
    doy = day_of_year(config, components)

    if start <= end:
        length = end - start + 1
        into = doy - start
    else:
        year_len = days_in_year(config, display_year)
        length = (year_len - start) + end + 1
        into = doy - start if doy >= start else (year_len - start) + doy
    if length <= 0:
        return 0.0
    return min(1.0, max(0.0, into / length))
