"""
Repeating named cycles (zodiacs, year-animals, market days, ...).

Each cycle indexes its entries by an epoch value picked by `based_on`:

  year      display year
  eraYear   year within the current era (display year when there is no era)
  month     0-indexed month
  monthDay  0-indexed day of month
  day       absolute epoch day
  yearDay   0-indexed day of year
"""

from __future__ import annotations

from typing import List

from ..core.types import CycleValue, CycleValues, TimeComponents
from .accounting import day_of_year, epoch_day
from .config import CalendarConfig, Cycle
from .eras import current_era


def epoch_value(config: CalendarConfig, cycle: Cycle, components: TimeComponents) -> int:
    display_year = components.year + config.years.year_zero
    basis = cycle.based_on
    if basis == "eraYear":
        era = current_era(config, display_year)
        return era.year_in_era if era is not None else display_year
    if basis == "month":
        return components.month
    if basis == "monthDay":
        return components.day_of_month
    if basis == "day":
        return epoch_day(config, components)
    if basis == "yearDay":
        return day_of_year(config, components)
    return display_year


def cycle_entry_index(config: CalendarConfig, cycle: Cycle, components: TimeComponents) -> int:
    if not cycle.entries:
        return 0
    n = len(cycle.entries)
    cycle_num = epoch_value(config, cycle, components) // cycle.length
    return (cycle_num + cycle.offset // cycle.length) % n


def cycle_values(config: CalendarConfig, components: TimeComponents) -> CycleValues:
    values: List[CycleValue] = []
    for cycle in config.cycles:
        idx = cycle_entry_index(config, cycle, components)
        name = cycle.entries[idx].name if cycle.entries else ""
        values.append(CycleValue(cycle_name=cycle.name, entry_name=name, index=idx))

    text = config.cycle_format
    for i, v in enumerate(values, start=1):
        text = text.replace(f"{{{{{i}}}}}", v.entry_name)
    text = text.replace("\\n", "\n")
    return CycleValues(text=text, values=tuple(values))


def cycle_number(config: CalendarConfig, components: TimeComponents, cycle_index: int = 0) -> int:
    """1-indexed count of the cycle repetition the date falls in (never below 1)."""
    if not 0 <= cycle_index < len(config.cycles):
        return 1
    cycle = config.cycles[cycle_index]
    v = epoch_value(config, cycle, components)
    return max(1, (v + cycle.offset) // cycle.length + 1)
