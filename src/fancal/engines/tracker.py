"""
fancal.engines.tracker
----------------------
Day-threshold crossings (midnight, sunrise, midday, sunset).

A TimeTracker remembers the last world time it saw. Each tick() reports the
thresholds passed since then, oldest first. The tracker does no scheduling of
its own; the host calls tick() whenever its clock moves.

    tracker = TimeTracker.create(engine, world_time)
    for th in tracker.tick(new_world_time):
        ...
    tracker.dispose()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from ..core.types import TimeComponents
from .calendar import CalendarEngine
from .daylight import sunrise, sunset

logger = logging.getLogger(__name__)

THRESHOLDS = ("midnight", "sunrise", "midday", "sunset")


@dataclass(frozen=True)
class Threshold:
    name: str
    time: int
    components: TimeComponents


class TimeTracker:
    def __init__(self, engine: CalendarEngine, world_time: int, *, max_days: int = 366):
        self.engine = engine
        self.max_days = max_days
        self._last: Optional[int] = int(world_time)

    @classmethod
    def create(cls, engine: CalendarEngine, world_time: int, *, max_days: int = 366) -> "TimeTracker":
        return cls(engine, world_time, max_days=max_days)

    @property
    def disposed(self) -> bool:
        return self._last is None

    @property
    def last_time(self) -> Optional[int]:
        return self._last

    def dispose(self) -> None:
        self._last = None

    def _day_start(self, t: int) -> int:
        c = self.engine.components(t)
        return self.engine.to_time(replace(c, hour=0, minute=0, second=0))

    def _thresholds_for_day(self, day_start: int) -> List[Threshold]:
        eng = self.engine
        cfg = eng.config
        sph = cfg.days.seconds_per_hour
        comps = eng.components(day_start)
        hours = {
            "midnight": 0.0,
            "sunrise": sunrise(cfg, comps),
            "midday": cfg.days.hours_per_day / 2,
            "sunset": sunset(cfg, comps),
        }
        out = []
        for name in THRESHOLDS:
            t = day_start + int(round(hours[name] * sph))
            out.append(Threshold(name=name, time=t, components=eng.components(t)))
        return out

    def tick(self, world_time: int) -> List[Threshold]:
        if self._last is None:
            raise RuntimeError("TimeTracker used after dispose()")
        prev, cur = self._last, int(world_time)
        self._last = cur
        if cur <= prev:
            return []

        spd = self.engine.config.days.seconds_per_day
        first = self._day_start(prev)
        last = self._day_start(cur)
        n_days = (last - first) // spd + 1

        starts = [first + i * spd for i in range(n_days)]
        if n_days > self.max_days:
            logger.debug("tick spans %d days; only the last %d are checked", n_days, self.max_days)
            starts = starts[-self.max_days:]

        crossed: List[Threshold] = []
        for ds in starts:
            for th in self._thresholds_for_day(ds):
                if prev < th.time <= cur:
                    crossed.append(th)
        crossed.sort(key=lambda th: th.time)
        return crossed
