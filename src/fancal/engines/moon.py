"""
fancal.engines.moon
-------------------
Moon phases.

A moon's position is its fractional progress through one cycle since its
reference date (the last recorded new moon). The cycle's days are then dealt
out to the configured phases:

  * 8 phases (the usual new/crescent/quarter/gibbous/full set): new and full
    moon (indices 0 and 4) each get floor(L/8) days and the six intermediate
    phases share what is left, earliest first;
  * any other count: an even split, earliest phases taking the remainder.

Day counts for moons use the *raw* month lengths (no leap days), counted from
internal year 0. Across a leap day this runs one day apart from the rest of the
calendar; existing calendars are tuned against that count, so it is kept.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..core.types import MoonPhaseInfo, TimeComponents
from .config import CalendarConfig, Moon, MoonPhase

if TYPE_CHECKING:
    from .calendar import CalendarEngine

logger = logging.getLogger(__name__)

STANDARD_PHASE_COUNT = 8
DEFAULT_SEARCH_DAYS = 400


def build_phase_distribution(cycle_length: float, phase_count: int) -> Tuple[int, ...]:
    """Whole days per phase; sums to floor(cycle_length)."""
    if phase_count <= 0:
        return ()
    total = int(math.floor(cycle_length)) if math.isfinite(cycle_length) and cycle_length > 0 else 0

    if phase_count == STANDARD_PHASE_COUNT:
        primary = total // 8
        extra, rem = divmod(total - 2 * primary, 6)
        out = []
        k = 0
        for i in range(8):
            if i in (0, 4):
                out.append(primary)
            else:
                out.append(extra + (1 if k < rem else 0))
                k += 1
        return tuple(out)

    base, rem = divmod(total, phase_count)
    return tuple(base + (1 if i < rem else 0) for i in range(phase_count))


def _raw_day_count(config: CalendarConfig, year: int, month: int, day: int) -> int:
    raw = [m.days for m in config.months]
    return year * sum(raw) + sum(raw[:month]) + day


def _sub_phase_name(phase: MoonPhase, day_within: int, duration: int) -> str:
    if duration <= 1:
        return phase.name
    third = duration / 3
    if day_within < third:
        return phase.rising or f"Rising {phase.name}"
    if day_within >= duration - third:
        return phase.fading or f"Fading {phase.name}"
    return phase.name


def _resting(phase: MoonPhase) -> MoonPhaseInfo:
    return MoonPhaseInfo(
        name=phase.name,
        sub_phase_name=phase.name,
        icon=phase.icon,
        position=0.0,
        day_in_cycle=0,
        phase_index=0,
        day_within_phase=0,
        phase_duration=0,
    )


def moon_position(config: CalendarConfig, moon: Moon, components: TimeComponents) -> Optional[float]:
    """Fraction 0..1 of the cycle elapsed, or None when the cycle is unusable."""
    days = _days_into_cycle(config, moon, components)
    return None if days is None else days / moon.cycle_length


def _days_into_cycle(config: CalendarConfig, moon: Moon, components: TimeComponents) -> Optional[float]:
    length = moon.cycle_length
    if not (math.isfinite(length) and length > 0 and math.isfinite(moon.cycle_day_adjust)):
        return None
    ref = moon.reference_date
    since = (
        _raw_day_count(config, components.year, components.month, components.day_of_month)
        - _raw_day_count(config, ref.year, ref.month, ref.day)
    )
    into = (since % length + moon.cycle_day_adjust) % length
    if into >= length:
        into = 0.0
    return into


def moon_phase(config: CalendarConfig, moon_index: int, components: TimeComponents) -> Optional[MoonPhaseInfo]:
    if not 0 <= moon_index < len(config.moons):
        return None
    moon = config.moons[moon_index]
    if not moon.phases:
        return None

    into = _days_into_cycle(config, moon, components)
    if into is None:
        logger.debug("moon '%s' has an unusable cycle length %r", moon.name, moon.cycle_length)
        return _resting(moon.phases[0])

    dist = build_phase_distribution(moon.cycle_length, len(moon.phases))
    day = int(math.floor(into))

    idx, start = len(dist) - 1, 0
    acc = 0
    for i, n in enumerate(dist):
        if day < acc + n:
            idx, start = i, acc
            break
        acc += n
    else:
        # fractional tail of the cycle belongs to the last phase
        start = acc - dist[-1]

    phase = moon.phases[idx]
    duration = dist[idx]
    within = day - start
    return MoonPhaseInfo(
        name=phase.name,
        sub_phase_name=_sub_phase_name(phase, within, duration),
        icon=phase.icon,
        position=into / moon.cycle_length,
        day_in_cycle=day,
        phase_index=idx,
        day_within_phase=within,
        phase_duration=duration,
    )


def all_moon_phases(config: CalendarConfig, components: TimeComponents) -> List[MoonPhaseInfo]:
    out = []
    for i in range(len(config.moons)):
        info = moon_phase(config, i, components)
        if info is not None:
            out.append(info)
    return out


def is_moon_full(config: CalendarConfig, moon_index: int, components: TimeComponents) -> bool:
    """True when the moon sits in the phase half a cycle from new (index N // 2)."""
    info = moon_phase(config, moon_index, components)
    if info is None or info.phase_duration == 0:
        return False
    return info.phase_index == len(config.moons[moon_index].phases) // 2


# ---------------------------------------------------------------------
# Searches. These step one day at a time through the engine's authority.
# ---------------------------------------------------------------------

def _all_full(engine: "CalendarEngine", moon_indices: Sequence[int], c: TimeComponents) -> bool:
    return all(is_moon_full(engine.config, i, c) for i in moon_indices)


def next_convergence(
    engine: "CalendarEngine",
    moon_indices: Sequence[int],
    components: TimeComponents,
    max_days: int = DEFAULT_SEARCH_DAYS,
) -> Optional[TimeComponents]:
    """First day, starting with `components` itself, on which every listed moon is full."""
    if not moon_indices:
        return None
    c = components
    for _ in range(max_days + 1):
        if _all_full(engine, moon_indices, c):
            return c
        c = engine.add_days(c, 1)
    return None


def next_full_moon(
    engine: "CalendarEngine",
    moon_index: int,
    components: TimeComponents,
    max_days: int = DEFAULT_SEARCH_DAYS,
) -> Optional[TimeComponents]:
    if not 0 <= moon_index < len(engine.config.moons):
        return None
    return next_convergence(engine, [moon_index], components, max_days=max_days)


def convergences_in_range(
    engine: "CalendarEngine",
    moon_indices: Sequence[int],
    start: TimeComponents,
    end: TimeComponents,
) -> List[TimeComponents]:
    """First day of every run of all-full days between start and end, inclusive."""
    if not moon_indices:
        return []
    out: List[TimeComponents] = []
    last = engine.to_time(end)
    c = start
    in_run = False
    while engine.to_time(c) <= last:
        full = _all_full(engine, moon_indices, c)
        if full and not in_run:
            out.append(c)
        in_run = full
        c = engine.add_days(c, 1)
    return out
