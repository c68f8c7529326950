from __future__ import annotations

from ..core.types import TimeComponents
from ..engines.accounting import epoch_day
from ..engines.config import CalendarConfig

def time_since(config: CalendarConfig, target: TimeComponents, current: TimeComponents) -> str:
    """Relative phrase for target as seen from current: 'Today', 'in 3 days', '2 weeks ago'."""
    diff = epoch_day(config, target) - epoch_day(config, current)
    if diff == 0:
        return "Today"
    if diff == 1:
        return "Tomorrow"
    if diff == -1:
        return "Yesterday"

    n = abs(diff)
    per_year = config.days.days_per_year
    per_month = max(1, per_year // max(1, len(config.months)))
    years = n // per_year
    months = (n % per_year) // per_month
    weeks = n // config.week_length

    if years >= 1:
        count, unit = years, "year"
    elif months >= 1:
        count, unit = months, "month"
    elif weeks >= 1:
        count, unit = weeks, "week"
    else:
        count, unit = n, "day"
    if count != 1:
        unit += "s"
    return f"in {count} {unit}" if diff > 0 else f"{count} {unit} ago"
