"""
Festival (intercalary) days.

Festivals are pinned to a 1-indexed (month, day). Those with
counts_for_weekday=False sit outside the weekday cycle, so weekday arithmetic
has to subtract how many of them have already gone by.
"""

from __future__ import annotations

from typing import Optional

from ..core.types import TimeComponents
from .config import CalendarConfig, Festival
from .leap import is_leap_year


def _display_year(config: CalendarConfig, c: TimeComponents) -> int:
    return c.year + config.years.year_zero


def find_festival_day(config: CalendarConfig, components: TimeComponents) -> Optional[Festival]:
    month, day = components.month + 1, components.day_of_month + 1
    leap = None
    for f in config.festivals:
        if f.month != month or f.day != day:
            continue
        if f.leap_year_only:
            if leap is None:
                leap = is_leap_year(config, _display_year(config, components))
            if not leap:
                continue
        return f
    return None


def is_festival_day(config: CalendarConfig, components: TimeComponents) -> bool:
    return find_festival_day(config, components) is not None


def count_non_weekday_festivals_before(config: CalendarConfig, components: TimeComponents) -> int:
    """Non-counting festivals earlier in the same year, strictly before this date."""
    here = (components.month + 1, components.day_of_month + 1)
    leap = is_leap_year(config, _display_year(config, components))
    n = 0
    for f in config.festivals:
        if f.counts_for_weekday:
            continue
        if f.leap_year_only and not leap:
            continue
        if (f.month, f.day) < here:
            n += 1
    return n


def count_non_weekday_festivals_before_year(config: CalendarConfig, year: int) -> int:
    """
    Non-counting festivals in internal years [0, year). Years before 0 give a
    negative total, so that the count stays additive across the epoch.
    """
    regular = sum(1 for f in config.festivals if not f.counts_for_weekday and not f.leap_year_only)
    leap_only = sum(1 for f in config.festivals if not f.counts_for_weekday and f.leap_year_only)
    if not regular and not leap_only:
        return 0

    yz = config.years.year_zero
    lo, hi, sign = (0, year, 1) if year >= 0 else (year, 0, -1)
    total = regular * (hi - lo)
    if leap_only:
        leap_years = sum(1 for y in range(lo, hi) if is_leap_year(config, y + yz))
        total += leap_only * leap_years
    return sign * total
