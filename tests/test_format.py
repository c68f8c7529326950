# tests/test_format.py

import pytest

from fancal.core.types import TimeComponents
from fancal.engines.specs import ALDENMARK, GREGORIAN, HARPTOS
from fancal.format import (
    approximate_time,
    date_formatting_parts,
    format_custom,
    format_date,
    is_legacy_format,
    migrate_deprecated_tokens,
    migrate_legacy_format,
    ordinal,
    resolve_template,
    time_since,
    to_roman_numeral,
)

IDES = TimeComponents(year=2024, month=2, day_of_month=14)  # 15 March 2024, a Friday


@pytest.mark.parametrize("n,text", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
    (13, "13th"), (21, "21st"), (101, "101st"), (111, "111th"), (112, "112th"),
])
def test_ordinal(n, text):
    assert ordinal(n) == text


@pytest.mark.parametrize("n,text", [(1, "I"), (4, "IV"), (1999, "MCMXCIX"), (3999, "MMMCMXCIX"), (0, "0"), (4000, "4000")])
def test_roman(n, text):
    assert to_roman_numeral(n) == text


@pytest.mark.parametrize("name,text", [
    ("short", "15 Mar"),
    ("long", "15 March, 2024"),
    ("full", "Friday, 15 March 2024"),
    ("ordinal", "15th of March, Common Era"),
    ("fantasy", "15th of March, 2024 Common Era"),
    ("time", "00:00"),
    ("time12", "12:00 AM"),
    ("datetime", "15 March 2024, 00:00"),
    ("off", ""),
])
def test_presets(name, text):
    assert format_date(GREGORIAN, IDES, name) == text


@pytest.mark.parametrize("template,text", [
    ("YYYY-MM-DD", "2024-03-15"),
    ("DDD", "075"),
    ("YY Y Mo", "24 2024 3rd"),
    ("EEEE EEE EEEEE e", "Friday Fri F 5"),
    ("w ww W", "11 11 3"),
    ("Q QQQQ", "4 Winter"),
    ("GGGG G", "Common Era CE"),
    ("[literalText]", "literalText"),
    ("[Day] D [of] MMMM", "Day 15 of March"),
])
def test_custom_tokens(template, text):
    assert format_custom(GREGORIAN, IDES, template) == text


@pytest.mark.parametrize("hour,minute,template,text", [
    (13, 5, "HH:mm", "13:05"),
    (13, 5, "h:mm A", "1:05 PM"),
    (0, 0, "hh a", "12 am"),
    (12, 30, "h:mm A", "12:30 PM"),
])
def test_time_tokens(hour, minute, template, text):
    c = TimeComponents(year=2024, month=2, day_of_month=14, hour=hour, minute=minute)
    assert format_custom(GREGORIAN, c, template) == text


def test_climate_zone_tokens():
    parts = date_formatting_parts(GREGORIAN, IDES, climate_zone="Temperate")
    assert (parts["z"], parts["zzzz"]) == ("Tem", "Temperate")


def test_bracket_context():
    c = TimeComponents(year=12, month=2, day_of_month=3, hour=23)
    assert format_custom(ALDENMARK, c, "[ch] [chAbbr]") == "Vigil Vig"
    assert format_custom(ALDENMARK, c, "[namedWeek]") == "Firstweek"
    assert format_custom(ALDENMARK, c, "[cycleRoman] [1]") == "XIII Heron"
    assert format_custom(ALDENMARK, c, "[eraAbbr] [yearInEra]") == "AA 12"
    assert format_custom(ALDENMARK, c, "[nothing here]") == "nothing here"


def test_calendar_date_formats():
    harptos_day = TimeComponents(year=1492, month=6, day_of_month=4)
    assert format_date(HARPTOS, harptos_day, "reckoning") == "5th of Flamerule, 1492 DR"
    assert format_date(ALDENMARK, TimeComponents(year=12, month=2, day_of_month=3), "scribe") == "4 Sow 0012"
    assert format_date(ALDENMARK, TimeComponents(year=12, month=2, day_of_month=3), "chronicle").endswith(
        "4th of Sowing, 0012"
    )


def test_resolve_template():
    assert resolve_template(GREGORIAN, "long") == "D MMMM, YYYY"
    assert resolve_template(GREGORIAN, "D/M") == "D/M"
    assert resolve_template(GREGORIAN, "{{B}}") == "MMMM"
    assert resolve_template(ALDENMARK, "scribe") == "D MMM YYYY"


def test_legacy_migration():
    assert is_legacy_format("{{d}}")
    assert not is_legacy_format("D MMMM")
    assert migrate_legacy_format("{{d}} {{B}}, {{Y}}") == "D MMMM, YYYY"
    assert migrate_legacy_format("{{1}} and {{c2}}") == "[1] and [cycle]"
    assert migrate_legacy_format("{{0}} of {{B}}") == "Do of MMMM"
    assert migrate_legacy_format("{{WN}} ({{ch}})") == "[namedWeek] ([ch])"


def test_deprecated_tokens():
    out, changes = migrate_deprecated_tokens("dddd, D MMMM [era]")
    assert out == "EEEE, D MMMM GGGG"
    assert changes == [("[era]", "GGGG"), ("dddd", "EEEE")]
    assert migrate_deprecated_tokens("today") == ("today", [])
    assert migrate_deprecated_tokens("[eraAbbr] d")[0] == "G e"


@pytest.mark.parametrize("hour,minute,text", [
    (12, 0, "Noon"),
    (0, 0, "Midnight"),
    (10, 0, "Morning"),
    (14, 0, "Afternoon"),
    (15, 0, "Evening"),
    (3, 0, "Night"),
    (7, 0, "Dawn"),
    (7, 50, "Sunrise"),
    (16, 10, "Sunset"),
    (17, 0, "Dusk"),
    (20, 0, "Night"),
])
def test_approximate_time_on_winter_solstice(hour, minute, text):
    # sunrise 8:00, sunset 16:00
    c = TimeComponents(year=2023, month=11, day_of_month=21, hour=hour, minute=minute)
    assert approximate_time(GREGORIAN, c) == text


@pytest.mark.parametrize("days,text", [
    (0, "Today"), (1, "Tomorrow"), (-1, "Yesterday"), (3, "in 3 days"),
    (10, "in 1 week"), (-14, "2 weeks ago"), (45, "in 1 month"), (400, "in 1 year"), (-800, "2 years ago"),
])
def test_time_since(gregorian, days, text):
    now = gregorian.date(2024, 3, 15)
    assert time_since(GREGORIAN, gregorian.add_days(now, days), now) == text


def test_formatting_is_deterministic():
    a = format_custom(ALDENMARK, TimeComponents(year=40, month=5, day_of_month=9, hour=14), "[approxDate] [moon] EEEE")
    b = format_custom(ALDENMARK, TimeComponents(year=40, month=5, day_of_month=9, hour=14), "[approxDate] [moon] EEEE")
    assert a == b
