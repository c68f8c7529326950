from __future__ import annotations

from typing import Optional

from ..core.types import TimeComponents
from .config import CalendarConfig, CanonicalHour


def _contains(h: CanonicalHour, hour: int) -> bool:
    if h.start_hour <= h.end_hour:
        return h.start_hour <= hour < h.end_hour
    return hour >= h.start_hour or hour < h.end_hour


def canonical_hour(config: CalendarConfig, components: TimeComponents) -> Optional[CanonicalHour]:
    """
    Named hour covering components.hour. Ranges are half-open; if nothing
    matches, an hour sitting exactly on some end_hour still belongs to it.
    """
    hour = components.hour
    for h in config.canonical_hours:
        if _contains(h, hour):
            return h
    for h in config.canonical_hours:
        if hour == h.end_hour:
            return h
    return None
