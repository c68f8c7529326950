"""
Day accounting: month/year lengths and absolute day counts.

days_in_month/days_in_year take the *display* year (the one leap rules are
written against). day_of_year/epoch_day take TimeComponents, whose year is
internal. Every other module counts days through these functions only.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.types import TimeComponents
from .config import CalendarConfig
from .leap import is_leap_year


def days_in_month(config: CalendarConfig, month: int, display_year: int) -> int:
    """Length of 0-indexed `month`; 0 when out of range."""
    if not 0 <= month < len(config.months):
        return 0
    m = config.months[month]
    if m.leap_days is not None and is_leap_year(config, display_year):
        return m.leap_days
    return m.days


def days_in_year(config: CalendarConfig, display_year: int) -> int:
    return sum(days_in_month(config, i, display_year) for i in range(len(config.months)))


def _internal_days(config: CalendarConfig, year: int) -> int:
    return days_in_year(config, year + config.years.year_zero)


def day_of_year(config: CalendarConfig, components: TimeComponents) -> int:
    """0-indexed, leap-aware day of year."""
    display_year = components.year + config.years.year_zero
    before = sum(days_in_month(config, i, display_year) for i in range(components.month))
    return before + components.day_of_month


_BLOCK = 256


@lru_cache(maxsize=4096)
def _block_days(config: CalendarConfig, block: int) -> int:
    start = block * _BLOCK
    return sum(_internal_days(config, y) for y in range(start, start + _BLOCK))


def days_before_year(config: CalendarConfig, year: int) -> int:
    """Days in internal years [0, year); negative for years before 0."""
    if year >= 0:
        full = year // _BLOCK
        total = sum(_block_days(config, b) for b in range(full))
        return total + sum(_internal_days(config, y) for y in range(full * _BLOCK, year))
    return -sum(_internal_days(config, y) for y in range(year, 0))


def epoch_day(config: CalendarConfig, components: TimeComponents) -> int:
    """
    Days elapsed since internal year 0, month 0, day 0 (negative before it).
    This is the leap-aware absolute day count used for weekday and cycle math.
    """
    return days_before_year(config, components.year) + day_of_year(config, components)
