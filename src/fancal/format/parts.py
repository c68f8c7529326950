"""
fancal.format.parts
-------------------
Token-based date rendering.

`date_formatting_parts` computes every standard token value once per call;
`format_custom` substitutes them into a template. Standard tokens follow the
CLDR/UTS #35 letters (YYYY, MMMM, EEEE, GGGG, QQQQ, ...) plus a few older
lower-case weekday tokens that are still accepted. Anything in square brackets
is looked up in a second, calendar-specific context (moon, canonical hour,
cycles, ...); an unknown bracket token renders as its inner text, which is
also how literal words are escaped:

    format_custom(cfg, c, "[Day] D [of] MMMM")  ->  "Day 5 of Flamerule"
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Optional

from ..core.time import hours_of_day
from ..core.types import TimeComponents
from ..engines.accounting import day_of_year
from ..engines.canonical_hours import canonical_hour
from ..engines.config import CalendarConfig
from ..engines.cycles import cycle_number, cycle_values
from ..engines.daylight import sunrise, sunset
from ..engines.eras import current_era
from ..engines.moon import moon_phase
from ..engines.seasons import current_season, season_index, season_progress
from ..engines.weeks import current_week, weekday_index
from .numerals import ordinal, to_roman_numeral

TOKEN_REGEX = re.compile(
    r"\[([^\]]+)\]"
    r"|YYYY|YY|Y|MMMM|MMM|MM|Mo|M|EEEEE|EEEE|EEE|EE|E|dddd|ddd|dd|Do|DDD|DD|D|d|e"
    r"|GGGG|GGG|GG|G|QQQQ|QQQ|QQ|Q|zzzz|z|ww|w|W|HH|H|hh|h|mm|m|ss|s|A|a"
)

# standard token -> key in the parts dict
_TOKEN_PARTS = {
    "YYYY": "yyyy", "YY": "yy", "Y": "y",
    "MMMM": "MMMM", "MMM": "MMM", "MM": "MM", "Mo": "Mo", "M": "M",
    "EEEEE": "EEEEE", "EEEE": "EEEE", "EEE": "EEE", "EE": "EE", "E": "E", "e": "e",
    "dddd": "dddd", "ddd": "ddd", "dd": "dd", "d": "d",
    "Do": "Do", "DDD": "DDD", "DD": "DD", "D": "D",
    "GGGG": "GGGG", "GGG": "GGG", "GG": "GG", "G": "G",
    "QQQQ": "QQQQ", "QQQ": "QQQ", "QQ": "QQ", "Q": "Q",
    "zzzz": "zzzz", "z": "z",
    "ww": "ww", "w": "w", "W": "W",
    "HH": "HH", "H": "H", "hh": "hh", "h": "h",
    "mm": "mm", "m": "m", "ss": "ss", "s": "s",
    "A": "A", "a": "a",
}


def _pad(v: int, width: int) -> str:
    return str(v).zfill(width)


def _hour12(config: CalendarConfig, hour: int):
    half = max(1, config.days.hours_per_day // 2)
    h = hour % half
    return (h or half), (config.am_pm.am if hour < half else config.am_pm.pm)


def date_formatting_parts(
    config: CalendarConfig,
    components: TimeComponents,
    *,
    climate_zone: Optional[str] = None,
) -> Dict[str, Any]:
    c = components
    display_year = c.year + config.years.year_zero
    doy = day_of_year(config, c)
    wl = config.week_length

    m = config.months[c.month] if 0 <= c.month < len(config.months) else None
    month_name = m.name if m else f"Month {c.month + 1}"
    month_abbr = (m.abbreviation if m and m.abbreviation else month_name[:3])
    month_no = m.ordinal if m and m.ordinal > 0 else c.month + 1

    wd = weekday_index(config, c) if config.weekdays else 0
    wd_rec = config.weekdays[wd] if config.weekdays else None
    wd_name = wd_rec.name if wd_rec else ""
    wd_abbr = (wd_rec.abbreviation or wd_name[:3]) if wd_rec else ""

    hour12, ampm = _hour12(config, c.hour)

    era = current_era(config, display_year)
    era_name = era.name if era else ""
    era_abbr = (era.abbreviation or era.name[:2]) if era else ""

    s_idx = season_index(config, c)
    season = config.seasons[s_idx] if s_idx is not None else None
    season_name = season.name if season else ""
    season_abbr = (season.abbreviation or season.name[:3]) if season else ""

    week_of_year = math.ceil((doy + 1) / wl)
    week_of_month = math.ceil((c.day_of_month + 1) / wl)
    zone = climate_zone or ""

    return {
        # year
        "y": display_year,
        "yy": str(display_year)[-2:],
        "yyyy": _pad(display_year, 4),
        # month
        "M": month_no,
        "MM": _pad(month_no, 2),
        "MMM": month_abbr,
        "MMMM": month_name,
        "Mo": ordinal(month_no),
        # day
        "D": c.day_of_month + 1,
        "DD": _pad(c.day_of_month + 1, 2),
        "Do": ordinal(c.day_of_month + 1),
        "DDD": _pad(doy + 1, 3),
        # weekday
        "E": wd_abbr,
        "EE": wd_abbr,
        "EEE": wd_abbr,
        "EEEE": wd_name,
        "EEEEE": wd_name[:1],
        "e": wd,
        "d": wd,
        "dd": wd_abbr[:2],
        "ddd": wd_abbr,
        "dddd": wd_name,
        # week
        "w": week_of_year,
        "ww": _pad(week_of_year, 2),
        "W": week_of_month,
        # time
        "H": c.hour,
        "HH": _pad(c.hour, 2),
        "h": hour12,
        "hh": _pad(hour12, 2),
        "m": c.minute,
        "mm": _pad(c.minute, 2),
        "s": c.second,
        "ss": _pad(c.second, 2),
        "A": ampm,
        "a": ampm.lower(),
        # era
        "G": era_abbr,
        "GG": era_abbr,
        "GGG": era_abbr,
        "GGGG": era_name,
        "era": era_name,
        "eraAbbr": era_abbr,
        "eraYear": era.year_in_era if era else "",
        # season / quarter
        "Q": s_idx + 1 if s_idx is not None else "",
        "QQ": _pad(s_idx + 1, 2) if s_idx is not None else "",
        "QQQ": season_abbr,
        "QQQQ": season_name,
        "season": season_name,
        "seasonAbbr": season_abbr,
        # climate zone
        "z": zone[:3],
        "zzzz": zone,
        "dayOfYear": doy,
    }


# ---------------------------------------------------------------------
# Approximate phrases
# ---------------------------------------------------------------------

def approximate_time(config: CalendarConfig, components: TimeComponents) -> str:
    """Sunrise, Dawn, Morning, Noon, Afternoon, Evening, Dusk, Sunset, Midnight or Night."""
    hpd = config.days.hours_per_day
    rise = sunrise(config, components)
    set_ = sunset(config, components)
    day_len = set_ - rise
    night_len = hpd - day_len
    h = hours_of_day(config, components)

    day_p = (h - rise) / day_len if day_len > 0 else -1.0
    if night_len <= 0:
        night_p = -1.0
    elif h >= set_:
        night_p = (h - set_) / night_len
    elif h < rise:
        night_p = (h + hpd - set_) / night_len
    else:
        night_p = -1.0

    if night_p > 0.96 and day_p < 0.04:
        return "Sunrise"
    if day_p > 0.96 and night_p < 0.04:
        return "Sunset"
    if 0.45 < day_p < 0.55:
        return "Noon"
    if 0.45 < night_p < 0.55:
        return "Midnight"
    if night_p > 0.84 and day_p < 0:
        return "Dawn"
    if day_p > 1 and night_p < 0.16:
        return "Dusk"
    if 0 < day_p < 0.5:
        return "Morning"
    if 0.5 <= day_p <= 0.85:
        return "Afternoon"
    if day_p > 0.85 and night_p < 0:
        return "Evening"
    return "Night"


def approximate_date(config: CalendarConfig, components: TimeComponents) -> str:
    """'Early Spring', 'Mid-Summer', 'Late Winter'; the month name without seasons."""
    season = current_season(config, components)
    if season is None:
        m = components.month
        return config.months[m].name if 0 <= m < len(config.months) else ""
    p = season_progress(config, components)
    if p <= 0.33:
        return f"Early {season.name}"
    if p >= 0.66:
        return f"Late {season.name}"
    return f"Mid-{season.name}"


# ---------------------------------------------------------------------
# Bracket tokens
# ---------------------------------------------------------------------

def custom_context(config: CalendarConfig, components: TimeComponents, parts: Dict[str, Any]) -> Dict[str, Any]:
    c = components
    moon = moon_phase(config, 0, c)
    ch = canonical_hour(config, c)
    week = current_week(config, c)
    cyc = cycle_values(config, c)

    cycle_no: Any = cycle_number(config, c) if config.cycles else ""
    first_entry = cyc.values[0].entry_name if cyc.values else ""

    ctx: Dict[str, Any] = {
        "moon": moon.name if moon else "",
        "moonIcon": moon.icon if moon else "",
        "era": parts["era"],
        "eraAbbr": parts["eraAbbr"],
        "yearInEra": parts["eraYear"],
        "season": parts["season"],
        "seasonAbbr": parts["seasonAbbr"],
        "ch": ch.name if ch else "",
        "chAbbr": (ch.abbreviation or ch.name[:3]) if ch else "",
        "cycle": cycle_no,
        "cycleName": first_entry or cycle_no,
        "cycleRoman": to_roman_numeral(cycle_no) if cycle_no else "",
        "cycleYear": cycle_no,
        "namedWeek": week.week_name if week else "",
        "namedWeekAbbr": week.week_abbr if week else "",
        "approxTime": approximate_time(config, c),
        "approxDate": approximate_date(config, c),
    }
    for i, v in enumerate(cyc.values, start=1):
        ctx[str(i)] = v.entry_name
    return ctx


def format_custom(
    config: CalendarConfig,
    components: TimeComponents,
    template: str,
    *,
    climate_zone: Optional[str] = None,
) -> str:
    parts = date_formatting_parts(config, components, climate_zone=climate_zone)
    ctx: Optional[Dict[str, Any]] = None

    def sub(m: re.Match) -> str:
        nonlocal ctx
        inner = m.group(1)
        if inner is not None:
            if ctx is None:
                ctx = custom_context(config, components, parts)
            v = ctx.get(inner)
            return inner if v is None else str(v)
        v = parts.get(_TOKEN_PARTS.get(m.group(0), ""))
        return m.group(0) if v is None else str(v)

    return TOKEN_REGEX.sub(sub, template)
