from __future__ import annotations
from typing import Any, Dict

from ..engines.cycles import cycle_number
from ..engines.daylight import darkness_level, progress_day, progress_night
from ..engines.moon import is_moon_full
from ..engines.seasons import season_progress
from ..format import approximate_date, approximate_time, to_roman_numeral
from .registry import register_attribute

def darkness(engine, info) -> Dict[str, Any]:
    return {"darkness": round(darkness_level(engine.config, info.components), 4)}

def sun_progress(engine, info) -> Dict[str, Any]:
    c = info.components
    return {
        "progress_day": progress_day(engine.config, c),
        "progress_night": progress_night(engine.config, c),
    }

def approximate(engine, info) -> Dict[str, Any]:
    c = info.components
    return {
        "approx_time": approximate_time(engine.config, c),
        "approx_date": approximate_date(engine.config, c),
        "season_progress": round(season_progress(engine.config, c), 4),
    }

def full_moons(engine, info) -> Dict[str, Any]:
    cfg = engine.config
    return {"full_moons": [m.name for i, m in enumerate(cfg.moons) if is_moon_full(cfg, i, info.components)]}

def cycle_count(engine, info) -> Dict[str, Any]:
    # Only the first cycle carries a running count.
    if not engine.config.cycles:
        return {}
    n = cycle_number(engine.config, info.components)
    return {"cycle_number": n, "cycle_roman": to_roman_numeral(n)}

register_attribute("darkness", darkness)
register_attribute("sun_progress", sun_progress)
register_attribute("approximate", approximate)
register_attribute("full_moons", full_moons)
register_attribute("cycle_number", cycle_count)
