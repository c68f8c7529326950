"""
fancal.engines.config
---------------------
The calendar definition schema.

A CalendarConfig is pure data: a tree of frozen dataclasses built from the
JSON-shaped dictionaries the calendar editor authors (camelCase keys). It is
treated as an immutable snapshot by every resolver, and because it is frozen it
is also hashable, which lets pure helpers memoise on it.

Structural invariants that make a record meaningless raise ValueError from
__post_init__; softer problems (odd moon phase tables, festivals outside their
month) are reported by validate_config() instead, so that display code can
keep running on a slightly broken calendar.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

LeapRule = Literal["none", "simple", "gregorian", "pattern"]
CycleBasis = Literal["year", "eraYear", "month", "monthDay", "day", "yearDay"]
WeekType = Literal["month-based", "year-based"]

LEAP_RULES: Tuple[str, ...] = ("none", "simple", "gregorian", "pattern")
CYCLE_BASES: Tuple[str, ...] = ("year", "eraYear", "month", "monthDay", "day", "yearDay")
WEEK_TYPES: Tuple[str, ...] = ("month-based", "year-based")
ERA_FORMATS: Tuple[str, ...] = ("prefix", "suffix")


# ============================================================
# Records
# ============================================================

@dataclass(frozen=True)
class Month:
    name: str
    days: int
    abbreviation: str = ""
    ordinal: int = 0               # 0 means "use position + 1"
    leap_days: Optional[int] = None
    starting_weekday: Optional[int] = None

    def __post_init__(self) -> None:
        if self.days < 1:
            raise ValueError(f"Month '{self.name}': days must be >= 1")
        if self.leap_days is not None and self.leap_days < 1:
            raise ValueError(f"Month '{self.name}': leap_days must be >= 1")

@dataclass(frozen=True)
class Weekday:
    name: str
    abbreviation: str = ""

@dataclass(frozen=True)
class LegacyLeapYear:
    interval: int
    start: int = 0

@dataclass(frozen=True)
class Years:
    year_zero: int = 0
    first_weekday: int = 0
    leap_year: Optional[LegacyLeapYear] = None

@dataclass(frozen=True)
class LeapYearConfig:
    # Unknown rules are kept as-is and evaluate as "none".
    rule: str = "none"
    interval: Optional[int] = None
    start: int = 0
    pattern: Optional[str] = None

@dataclass(frozen=True)
class Festival:
    name: str
    month: int   # 1-indexed
    day: int     # 1-indexed
    leap_year_only: bool = False
    counts_for_weekday: bool = True

    def __post_init__(self) -> None:
        if self.month < 1 or self.day < 1:
            raise ValueError(f"Festival '{self.name}': month and day are 1-indexed")

@dataclass(frozen=True)
class MoonPhase:
    name: str
    start: float = 0.0
    end: float = 1.0
    rising: str = ""
    fading: str = ""
    icon: str = ""

@dataclass(frozen=True)
class ReferenceDate:
    year: int = 0
    month: int = 0   # 0-indexed
    day: int = 0     # 0-indexed

@dataclass(frozen=True)
class Moon:
    name: str
    cycle_length: float
    phases: Tuple[MoonPhase, ...] = ()
    cycle_day_adjust: float = 0.0
    reference_date: ReferenceDate = ReferenceDate()

@dataclass(frozen=True)
class Season:
    name: str
    abbreviation: str = ""
    month_start: Optional[int] = None   # 1-indexed
    month_end: Optional[int] = None
    day_start: Optional[int] = None     # day-of-month (1-idx) with months, else day-of-year (0-idx)
    day_end: Optional[int] = None

    @property
    def is_month_based(self) -> bool:
        return self.month_start is not None and self.month_end is not None

@dataclass(frozen=True)
class Era:
    name: str
    abbreviation: str = ""
    start_year: int = 0
    end_year: Optional[int] = None
    format: str = "suffix"
    template: Optional[str] = None

    def __post_init__(self) -> None:
        if self.format not in ERA_FORMATS:
            raise ValueError(f"Era '{self.name}': format must be 'prefix' or 'suffix'")

@dataclass(frozen=True)
class CycleEntry:
    name: str

@dataclass(frozen=True)
class Cycle:
    name: str
    length: int = 1
    entries: Tuple[CycleEntry, ...] = ()
    offset: int = 0
    based_on: str = "year"

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Cycle '{self.name}': length must be >= 1")
        if self.based_on not in CYCLE_BASES:
            raise ValueError(f"Cycle '{self.name}': based_on must be one of {CYCLE_BASES}")

@dataclass(frozen=True)
class CanonicalHour:
    name: str
    start_hour: int
    end_hour: int
    abbreviation: str = ""

@dataclass(frozen=True)
class NamedWeek:
    name: str
    abbreviation: str = ""

@dataclass(frozen=True)
class Weeks:
    enabled: bool = False
    type: str = "year-based"
    names: Tuple[NamedWeek, ...] = ()

    def __post_init__(self) -> None:
        if self.type not in WEEK_TYPES:
            raise ValueError(f"weeks.type must be one of {WEEK_TYPES}")

@dataclass(frozen=True)
class Daylight:
    enabled: bool = False
    shortest_day: float = 12.0
    longest_day: float = 12.0
    winter_solstice: int = 0
    summer_solstice: int = 0

@dataclass(frozen=True)
class DayUnits:
    hours_per_day: int = 24
    minutes_per_hour: int = 60
    seconds_per_minute: int = 60
    days_per_year: int = 365

    def __post_init__(self) -> None:
        for k in ("hours_per_day", "minutes_per_hour", "seconds_per_minute", "days_per_year"):
            if getattr(self, k) <= 0:
                raise ValueError(f"days.{k} must be positive")

    @property
    def seconds_per_hour(self) -> int:
        return self.minutes_per_hour * self.seconds_per_minute

    @property
    def seconds_per_day(self) -> int:
        return self.hours_per_day * self.seconds_per_hour

@dataclass(frozen=True)
class AmPm:
    am: str = "AM"
    pm: str = "PM"


@dataclass(frozen=True)
class CalendarConfig:
    """Root calendar definition. Never mutated by the resolvers."""
    name: str = ""
    months: Tuple[Month, ...] = ()
    weekdays: Tuple[Weekday, ...] = ()
    years: Years = Years()
    leap_year_config: Optional[LeapYearConfig] = None
    festivals: Tuple[Festival, ...] = ()
    moons: Tuple[Moon, ...] = ()
    seasons: Tuple[Season, ...] = ()
    eras: Tuple[Era, ...] = ()
    cycles: Tuple[Cycle, ...] = ()
    cycle_format: str = ""
    canonical_hours: Tuple[CanonicalHour, ...] = ()
    weeks: Weeks = Weeks()
    daylight: Daylight = Daylight()
    days: DayUnits = DayUnits()
    am_pm: AmPm = AmPm()
    # Mappings are left out of the hash; equality still compares them.
    date_formats: Dict[str, str] = field(default_factory=dict, hash=False)
    metadata: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def week_length(self) -> int:
        return len(self.weekdays) or 7

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalendarConfig":
        try:
            return _parse_calendar(data)
        except ConfigError:
            raise
        except (ValueError, TypeError, KeyError) as e:
            name = data.get("name", "") if isinstance(data, Mapping) else ""
            raise ConfigError(f"Invalid calendar '{name}': {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return _dump_calendar(self)


# ============================================================
# Parsing (camelCase JSON -> dataclasses)
# ============================================================

def _values(obj: Any) -> List[Any]:
    """Accept both a bare list and the editor's {"values": [...]} wrapper."""
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj.get("values") or [])
    return list(obj)

def _opt_int(v: Any) -> Optional[int]:
    return None if v is None else int(v)

def _parse_month(i: int, m: Mapping[str, Any]) -> Month:
    return Month(
        name=str(m["name"]),
        days=int(m["days"]),
        abbreviation=str(m.get("abbreviation") or ""),
        ordinal=int(m.get("ordinal") or i + 1),
        leap_days=_opt_int(m.get("leapDays")),
        starting_weekday=_opt_int(m.get("startingWeekday")),
    )

def _parse_years(y: Mapping[str, Any]) -> Years:
    leap = y.get("leapYear")
    legacy = None
    if leap:
        interval = leap.get("leapInterval", leap.get("interval"))
        if interval:
            legacy = LegacyLeapYear(interval=int(interval), start=int(leap.get("leapStart", leap.get("start")) or 0))
    return Years(
        year_zero=int(y.get("yearZero") or 0),
        first_weekday=int(y.get("firstWeekday") or 0),
        leap_year=legacy,
    )

def _parse_leap_config(c: Optional[Mapping[str, Any]]) -> Optional[LeapYearConfig]:
    if not c:
        return None
    rule = str(c.get("rule") or "none")
    if rule == "custom":
        rule = "pattern"
    interval = c.get("interval", c.get("leapInterval"))
    try:
        interval = _opt_int(interval)
    except (TypeError, ValueError):
        interval = None
    pattern = c.get("pattern")
    return LeapYearConfig(
        rule=rule,
        interval=interval,
        start=int(c.get("start") or 0),
        pattern=None if pattern is None else str(pattern),
    )

def _parse_moon(m: Mapping[str, Any]) -> Moon:
    ref = m.get("referenceDate") or {}
    return Moon(
        name=str(m["name"]),
        cycle_length=float(m["cycleLength"]),
        cycle_day_adjust=float(m.get("cycleDayAdjust") or 0.0),
        phases=tuple(
            MoonPhase(
                name=str(p["name"]),
                start=float(p.get("start", 0.0)),
                end=float(p.get("end", 1.0)),
                rising=str(p.get("rising") or ""),
                fading=str(p.get("fading") or ""),
                icon=str(p.get("icon") or ""),
            )
            for p in m.get("phases") or []
        ),
        reference_date=ReferenceDate(
            year=int(ref.get("year") or 0),
            month=int(ref.get("month") or 0),
            day=int(ref.get("day") or 0),
        ),
    )

def _parse_calendar(d: Mapping[str, Any]) -> CalendarConfig:
    day_block = d.get("days") or {}
    weekdays_raw = d.get("weekdays")
    if weekdays_raw is None:
        weekdays_raw = day_block.get("values")
    units = DayUnits(
        hours_per_day=int(day_block.get("hoursPerDay", 24)),
        minutes_per_hour=int(day_block.get("minutesPerHour", 60)),
        seconds_per_minute=int(day_block.get("secondsPerMinute", 60)),
        days_per_year=int(day_block.get("daysPerYear", 365)),
    )
    weeks = d.get("weeks") or {}
    daylight = d.get("daylight") or {}
    am_pm = d.get("amPmNotation") or {}

    return CalendarConfig(
        name=str(d.get("name") or ""),
        months=tuple(_parse_month(i, m) for i, m in enumerate(_values(d.get("months")))),
        weekdays=tuple(
            Weekday(name=str(w["name"]), abbreviation=str(w.get("abbreviation") or ""))
            for w in _values(weekdays_raw)
        ),
        years=_parse_years(d.get("years") or {}),
        leap_year_config=_parse_leap_config(d.get("leapYearConfig")),
        festivals=tuple(
            Festival(
                name=str(f["name"]),
                month=int(f["month"]),
                day=int(f["day"]),
                leap_year_only=bool(f.get("leapYearOnly", False)),
                counts_for_weekday=bool(f.get("countsForWeekday", True)),
            )
            for f in _values(d.get("festivals"))
        ),
        moons=tuple(_parse_moon(m) for m in _values(d.get("moons"))),
        seasons=tuple(
            Season(
                name=str(s["name"]),
                abbreviation=str(s.get("abbreviation") or ""),
                month_start=_opt_int(s.get("monthStart")),
                month_end=_opt_int(s.get("monthEnd")),
                day_start=_opt_int(s.get("dayStart")),
                day_end=_opt_int(s.get("dayEnd")),
            )
            for s in _values(d.get("seasons"))
        ),
        eras=tuple(
            Era(
                name=str(e["name"]),
                abbreviation=str(e.get("abbreviation") or ""),
                start_year=int(e.get("startYear") or 0),
                end_year=_opt_int(e.get("endYear")),
                format=str(e.get("format") or "suffix"),
                template=e.get("template") or None,
            )
            for e in _values(d.get("eras"))
        ),
        cycles=tuple(
            Cycle(
                name=str(c["name"]),
                length=int(c.get("length", 1)),
                offset=int(c.get("offset") or 0),
                based_on=str(c.get("basedOn") or "year"),
                entries=tuple(CycleEntry(name=str(x["name"])) for x in c.get("entries") or []),
            )
            for c in _values(d.get("cycles"))
        ),
        cycle_format=str(d.get("cycleFormat") or ""),
        canonical_hours=tuple(
            CanonicalHour(
                name=str(h["name"]),
                abbreviation=str(h.get("abbreviation") or ""),
                start_hour=int(h["startHour"]),
                end_hour=int(h["endHour"]),
            )
            for h in _values(d.get("canonicalHours"))
        ),
        weeks=Weeks(
            enabled=bool(weeks.get("enabled", False)),
            type=str(weeks.get("type") or "year-based"),
            names=tuple(
                NamedWeek(name=str(n["name"]), abbreviation=str(n.get("abbreviation") or ""))
                for n in weeks.get("names") or []
            ),
        ),
        daylight=Daylight(
            enabled=bool(daylight.get("enabled", False)),
            shortest_day=float(daylight.get("shortestDay", 12)),
            longest_day=float(daylight.get("longestDay", 12)),
            winter_solstice=int(daylight.get("winterSolstice", 0)),
            summer_solstice=int(daylight.get("summerSolstice", 0)),
        ),
        days=units,
        am_pm=AmPm(am=str(am_pm.get("am") or "AM"), pm=str(am_pm.get("pm") or "PM")),
        date_formats={str(k): str(v) for k, v in (d.get("dateFormats") or {}).items()},
        metadata={str(k): str(v) for k, v in (d.get("metadata") or {}).items() if v is not None},
    )


# ============================================================
# Dumping (dataclasses -> camelCase JSON)
# ============================================================

def _dump_calendar(c: CalendarConfig) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "name": c.name,
        "months": [
            {
                "name": m.name,
                "abbreviation": m.abbreviation,
                "ordinal": m.ordinal,
                "days": m.days,
                **({"leapDays": m.leap_days} if m.leap_days is not None else {}),
                **({"startingWeekday": m.starting_weekday} if m.starting_weekday is not None else {}),
            }
            for m in c.months
        ],
        "weekdays": [{"name": w.name, "abbreviation": w.abbreviation} for w in c.weekdays],
        "years": {
            "yearZero": c.years.year_zero,
            "firstWeekday": c.years.first_weekday,
            "leapYear": (
                {"interval": c.years.leap_year.interval, "start": c.years.leap_year.start}
                if c.years.leap_year else None
            ),
        },
        "leapYearConfig": (
            {
                "rule": c.leap_year_config.rule,
                "interval": c.leap_year_config.interval,
                "start": c.leap_year_config.start,
                "pattern": c.leap_year_config.pattern,
            }
            if c.leap_year_config else None
        ),
        "festivals": [
            {
                "name": f.name, "month": f.month, "day": f.day,
                "leapYearOnly": f.leap_year_only, "countsForWeekday": f.counts_for_weekday,
            }
            for f in c.festivals
        ],
        "moons": [
            {
                "name": m.name,
                "cycleLength": m.cycle_length,
                "cycleDayAdjust": m.cycle_day_adjust,
                "phases": [
                    {"name": p.name, "rising": p.rising, "fading": p.fading, "icon": p.icon, "start": p.start, "end": p.end}
                    for p in m.phases
                ],
                "referenceDate": {"year": m.reference_date.year, "month": m.reference_date.month, "day": m.reference_date.day},
            }
            for m in c.moons
        ],
        "seasons": [
            {
                k: v for k, v in (
                    ("name", s.name), ("abbreviation", s.abbreviation),
                    ("monthStart", s.month_start), ("monthEnd", s.month_end),
                    ("dayStart", s.day_start), ("dayEnd", s.day_end),
                ) if v is not None
            }
            for s in c.seasons
        ],
        "eras": [
            {
                "name": e.name, "abbreviation": e.abbreviation, "startYear": e.start_year,
                "endYear": e.end_year, "format": e.format, "template": e.template,
            }
            for e in c.eras
        ],
        "cycles": [
            {
                "name": cy.name, "length": cy.length, "offset": cy.offset, "basedOn": cy.based_on,
                "entries": [{"name": x.name} for x in cy.entries],
            }
            for cy in c.cycles
        ],
        "cycleFormat": c.cycle_format,
        "canonicalHours": [
            {"name": h.name, "abbreviation": h.abbreviation, "startHour": h.start_hour, "endHour": h.end_hour}
            for h in c.canonical_hours
        ],
        "weeks": {
            "enabled": c.weeks.enabled,
            "type": c.weeks.type,
            "names": [{"name": n.name, "abbreviation": n.abbreviation} for n in c.weeks.names],
        },
        "daylight": {
            "enabled": c.daylight.enabled,
            "shortestDay": c.daylight.shortest_day,
            "longestDay": c.daylight.longest_day,
            "winterSolstice": c.daylight.winter_solstice,
            "summerSolstice": c.daylight.summer_solstice,
        },
        "days": {
            "hoursPerDay": c.days.hours_per_day,
            "minutesPerHour": c.days.minutes_per_hour,
            "secondsPerMinute": c.days.seconds_per_minute,
            "daysPerYear": c.days.days_per_year,
        },
        "amPmNotation": {"am": c.am_pm.am, "pm": c.am_pm.pm},
        "dateFormats": dict(c.date_formats),
        "metadata": dict(c.metadata),
    }
    return out


# ============================================================
# Validation & loading
# ============================================================

def validate_config(config: CalendarConfig) -> List[str]:
    """
    Report problems that the resolvers tolerate but a calendar author
    probably did not intend. Never raises.
    """
    problems: List[str] = []
    n_months = len(config.months)

    if not config.months:
        problems.append("calendar has no months")

    for m in config.moons:
        if not math.isfinite(m.cycle_length) or m.cycle_length <= 0:
            problems.append(f"moon '{m.name}': cycle length must be a positive number")
        if not m.phases:
            problems.append(f"moon '{m.name}': no phases")
        prev_end = 0.0
        for p in m.phases:
            if not (0.0 <= p.start <= 1.0 and 0.0 <= p.end <= 1.0):
                problems.append(f"moon '{m.name}': phase '{p.name}' outside [0, 1]")
            elif p.start < prev_end - 1e-9 or p.end < p.start:
                problems.append(f"moon '{m.name}': phase '{p.name}' overlaps or is out of order")
            prev_end = max(prev_end, p.end)

    for f in config.festivals:
        if f.month > n_months:
            problems.append(f"festival '{f.name}': month {f.month} does not exist")
            continue
        month = config.months[f.month - 1]
        longest = max(month.days, month.leap_days or 0)
        if f.day > longest:
            problems.append(f"festival '{f.name}': day {f.day} is past the end of {month.name}")

    for s in config.seasons:
        if s.is_month_based:
            if not (1 <= s.month_start <= n_months and 1 <= s.month_end <= n_months):
                problems.append(f"season '{s.name}': month range {s.month_start}-{s.month_end} out of range")
        elif s.day_start is None or s.day_end is None:
            problems.append(f"season '{s.name}': needs monthStart/monthEnd or dayStart/dayEnd")

    for c in config.cycles:
        if not c.entries:
            problems.append(f"cycle '{c.name}': no entries")

    if config.weeks.enabled and not config.weeks.names:
        problems.append("weeks are enabled but no week names are configured")

    return problems

def load_calendar(src: Union[str, Path, Mapping[str, Any]], *, strict: bool = False) -> CalendarConfig:
    """Load a calendar from a JSON file path or an already-parsed dict."""
    if isinstance(src, Mapping):
        data = src
    else:
        path = Path(src)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: not valid JSON ({e})") from e

    config = CalendarConfig.from_dict(data)
    problems = validate_config(config)
    if problems and strict:
        raise ConfigError(f"Calendar '{config.name}': " + "; ".join(problems))
    for p in problems:
        logger.warning("calendar '%s': %s", config.name, p)
    return config
