from __future__ import annotations

from typing import Dict, Tuple

from .config import (
    CalendarConfig,
    CanonicalHour,
    Cycle,
    CycleEntry,
    Daylight,
    DayUnits,
    Era,
    Festival,
    LeapYearConfig,
    Month,
    Moon,
    MoonPhase,
    NamedWeek,
    ReferenceDate,
    Season,
    Weekday,
    Weeks,
    Years,
)


# ============================================================
# SHARED TABLES
# ============================================================

STANDARD_PHASE_NAMES = (
    "New Moon", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
    "Full Moon", "Waning Gibbous", "Last Quarter", "Waning Crescent",
)

# Each phase covers exactly 1/8 of the cycle.
STANDARD_PHASES: Tuple[MoonPhase, ...] = tuple(
    MoonPhase(name=n, start=i / 8, end=(i + 1) / 8)
    for i, n in enumerate(STANDARD_PHASE_NAMES)
)

SEVEN_DAY_WEEK = tuple(Weekday(n, n[:3]) for n in (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
))

def _months(*rows) -> Tuple[Month, ...]:
    out = []
    for i, row in enumerate(rows):
        name, abbr, days, *rest = row
        leap_days = rest[0] if rest else None
        out.append(Month(name=name, abbreviation=abbr, ordinal=i + 1, days=days, leap_days=leap_days))
    return tuple(out)

def _quarter_seasons(*starts: int) -> Tuple[Season, ...]:
    names = ("Spring", "Summer", "Autumn", "Winter")
    return tuple(
        Season(name=n, abbreviation=n[:3], day_start=s, day_end=starts[(i + 1) % 4] - 1)
        for i, (n, s) in enumerate(zip(names, starts))
    )

def _moon(name: str, cycle: float, year: int = 0, month: int = 0, day: int = 0) -> Moon:
    return Moon(
        name=name, cycle_length=cycle, phases=STANDARD_PHASES,
        reference_date=ReferenceDate(year=year, month=month, day=day),
    )


# ============================================================
# GREGORIAN (real world)
# ============================================================

GREGORIAN = CalendarConfig(
    name="gregorian",
    months=_months(
        ("January", "Jan", 31), ("February", "Feb", 28, 29), ("March", "Mar", 31),
        ("April", "Apr", 30), ("May", "May", 31), ("June", "Jun", 30),
        ("July", "Jul", 31), ("August", "Aug", 31), ("September", "Sep", 30),
        ("October", "Oct", 31), ("November", "Nov", 30), ("December", "Dec", 31),
    ),
    weekdays=SEVEN_DAY_WEEK,
    # 1 January of year 0 (proleptic) is a Saturday.
    years=Years(year_zero=0, first_weekday=6),
    leap_year_config=LeapYearConfig(rule="gregorian"),
    moons=(_moon("Luna", 29.530588, year=2025, month=0, day=28),),
    seasons=_quarter_seasons(79, 172, 266, 355),
    eras=(Era(name="Common Era", abbreviation="CE", start_year=1),),
    daylight=Daylight(enabled=True, shortest_day=8, longest_day=16, winter_solstice=355, summer_solstice=172),
    days=DayUnits(days_per_year=365),
    metadata={"description": "Proleptic Gregorian calendar", "system": "Earth"},
)


# ============================================================
# HARPTOS (Forgotten Realms)
# ============================================================
# Festival days are stored as extra days at the end of their month and
# stand outside the tenday, so every month starts on First-day.

HARPTOS = CalendarConfig(
    name="harptos",
    months=_months(
        ("Hammer", "Ham", 31), ("Alturiak", "Alt", 30), ("Ches", "Che", 30),
        ("Tarsakh", "Tar", 31), ("Mirtul", "Mir", 30), ("Kythorn", "Kyt", 30),
        ("Flamerule", "Fla", 31, 32), ("Eleasis", "Ela", 30), ("Eleint", "Ele", 31),
        ("Marpenoth", "Mar", 30), ("Uktar", "Ukt", 31), ("Nightal", "Nig", 30),
    ),
    weekdays=tuple(Weekday(n, n[:3]) for n in (
        "First-day", "Second-day", "Third-day", "Fourth-day", "Fifth-day",
        "Sixth-day", "Seventh-day", "Eighth-day", "Ninth-day", "Tenth-day",
    )),
    years=Years(year_zero=0, first_weekday=0),
    leap_year_config=LeapYearConfig(rule="simple", interval=4, start=0),
    festivals=(
        Festival("Midwinter", 1, 31, counts_for_weekday=False),
        Festival("Greengrass", 4, 31, counts_for_weekday=False),
        Festival("Midsummer", 7, 31, counts_for_weekday=False),
        Festival("Shieldmeet", 7, 32, leap_year_only=True, counts_for_weekday=False),
        Festival("Highharvestide", 9, 31, counts_for_weekday=False),
        Festival("Feast of the Moon", 11, 31, counts_for_weekday=False),
    ),
    moons=(_moon("Selune", 30, day=15),),
    seasons=_quarter_seasons(60, 152, 244, 335),
    eras=(Era(name="Dale Reckoning", abbreviation="DR", start_year=1),),
    daylight=Daylight(enabled=True, shortest_day=8, longest_day=16, winter_solstice=355, summer_solstice=172),
    days=DayUnits(days_per_year=365),
    date_formats={"reckoning": "Do of MMMM, YYYY [eraAbbr]"},
    metadata={"system": "Forgotten Realms"},
)


# ============================================================
# GREYHAWK (Oerth)
# ============================================================
# The four festival weeks are modelled as seven-day months.

GREYHAWK = CalendarConfig(
    name="greyhawk",
    months=_months(
        ("Needfest", "Nee", 7), ("Fireseek", "Fir", 28), ("Readying", "Rea", 28), ("Coldeven", "Col", 28),
        ("Growfest", "Gro", 7), ("Planting", "Pla", 28), ("Flocktime", "Flo", 28), ("Wealsun", "Wea", 28),
        ("Richfest", "Ric", 7), ("Reaping", "Rep", 28), ("Goodmonth", "Goo", 28), ("Harvester", "Har", 28),
        ("Brewfest", "Bre", 7), ("Patchwall", "Pat", 28), ("Ready'reat", "Rer", 28), ("Sunsebb", "Sun", 28),
    ),
    weekdays=tuple(Weekday(n, n[:3]) for n in (
        "Starday", "Sunday", "Moonday", "Godsday", "Waterday", "Earthday", "Freeday",
    )),
    moons=(
        _moon("Luna", 28, day=4),
        _moon("Celene", 91, month=2, day=12),
    ),
    seasons=_quarter_seasons(56, 148, 239, 330),
    eras=(Era(name="Common Year", abbreviation="CY", start_year=1),),
    daylight=Daylight(enabled=True, shortest_day=8, longest_day=16, winter_solstice=354, summer_solstice=172),
    days=DayUnits(days_per_year=364),
    metadata={"system": "Greyhawk"},
)


# ============================================================
# KHORVAIRE (Eberron)
# ============================================================

_KHORVAIRE_MONTHS = (
    "Zarantyr", "Olarune", "Therendor", "Eyre", "Dravago", "Nymm",
    "Lharvion", "Barrakas", "Rhaan", "Sypheros", "Aryth", "Vult",
)

KHORVAIRE = CalendarConfig(
    name="khorvaire",
    months=_months(*((n, n[:3], 28) for n in _KHORVAIRE_MONTHS)),
    weekdays=tuple(Weekday(n, n) for n in ("Sul", "Mol", "Zol", "Wir", "Zor", "Far", "Sar")),
    # Each month names one of the twelve moons; their cycles grow by a week each.
    moons=tuple(_moon(n, 28 + 7 * i) for i, n in enumerate(_KHORVAIRE_MONTHS)),
    seasons=_quarter_seasons(56, 140, 224, 308),
    eras=(Era(name="Year of the Kingdom", abbreviation="YK", start_year=1),),
    daylight=Daylight(enabled=True, shortest_day=8, longest_day=16, winter_solstice=326, summer_solstice=158),
    days=DayUnits(days_per_year=336),
    metadata={"system": "Eberron"},
)


# ============================================================
# ALDENMARK (house calendar; exercises every feature)
# ============================================================

ALDENMARK = CalendarConfig(
    name="aldenmark",
    months=_months(
        ("Deepwinter", "Dpw", 30), ("Thaw", "Thw", 30), ("Sowing", "Sow", 31), ("Greening", "Grn", 30),
        ("Highsun", "Hsn", 31, 32), ("Reaping", "Rea", 30), ("Fading", "Fad", 31), ("Frost", "Fro", 30),
    ),
    weekdays=tuple(Weekday(n, n[:3]) for n in (
        "Moonday", "Tideday", "Windsday", "Hearthday", "Stoneday", "Restday",
    )),
    years=Years(year_zero=0, first_weekday=0),
    leap_year_config=LeapYearConfig(rule="pattern", pattern="200,!50,5", start=0),
    festivals=(
        Festival("Lanternfall", 5, 32, leap_year_only=True, counts_for_weekday=False),
        Festival("Turning", 1, 1),
    ),
    moons=(
        _moon("Vael", 24),
        Moon(
            name="Orrun",
            cycle_length=36,
            phases=(
                MoonPhase("Dark", 0.0, 0.25, rising="Deepening Dark", fading="Thinning Dark"),
                MoonPhase("Waxing", 0.25, 0.5),
                MoonPhase("Bright", 0.5, 0.75, rising="Kindling", fading="Guttering"),
                MoonPhase("Waning", 0.75, 1.0),
            ),
            cycle_day_adjust=3,
        ),
    ),
    seasons=(
        Season("Winter", "Win", month_start=8, month_end=1),
        Season("Spring", "Spr", month_start=2, month_end=4),
        Season("Summer", "Sum", month_start=5, month_end=6),
        Season("Autumn", "Aut", month_start=7, month_end=7),
    ),
    eras=(
        Era("Age of Ash", "AA", start_year=1, end_year=999),
        Era("Age of Lanterns", "AL", start_year=1000, format="prefix",
            template="{{yearInEra}} {{abbreviation}} ({{year}})"),
    ),
    cycles=(
        Cycle("Beast", length=1, based_on="year", entries=tuple(CycleEntry(n) for n in (
            "Heron", "Boar", "Otter", "Stag", "Hare", "Wolf",
        ))),
        Cycle("Market", length=1, based_on="day", entries=tuple(CycleEntry(n) for n in (
            "Fish", "Grain", "Cloth",
        ))),
    ),
    cycle_format="Year of the {{1}}\\nMarket: {{2}}",
    canonical_hours=(
        CanonicalHour("Vigil", 22, 2, "Vig"),
        CanonicalHour("Matins", 2, 6, "Mat"),
        CanonicalHour("Prime", 6, 9, "Pri"),
        CanonicalHour("Terce", 9, 12, "Ter"),
        CanonicalHour("Sext", 12, 15, "Sex"),
        CanonicalHour("Nones", 15, 18, "Non"),
        CanonicalHour("Vespers", 18, 22, "Ves"),
    ),
    weeks=Weeks(enabled=True, type="month-based", names=tuple(NamedWeek(n) for n in (
        "Firstweek", "Secondweek", "Thirdweek", "Fourthweek", "Fifthweek", "Lastweek",
    ))),
    daylight=Daylight(enabled=True, shortest_day=7, longest_day=15, winter_solstice=0, summer_solstice=121),
    days=DayUnits(days_per_year=243),
    date_formats={
        "chronicle": "EEEE, Do [of] MMMM, YYYY",
        "scribe": "{{d}} {{b}} {{yyyy}}",
    },
)


ALL_SPECS: Dict[str, CalendarConfig] = {
    "gregorian": GREGORIAN,
    "harptos": HARPTOS,
    "greyhawk": GREYHAWK,
    "khorvaire": KHORVAIRE,
    "aldenmark": ALDENMARK,
}
