# tests/test_daylight.py

import math
from dataclasses import replace

import pytest

from fancal.core.types import TimeComponents
from fancal.engines.config import Daylight, DayUnits
from fancal.engines.daylight import (
    darkness_level,
    daylight,
    daylight_hours,
    progress_day,
    progress_night,
    solar_midday,
    solar_midnight,
    solstice_progress,
    sunrise,
    sunset,
)
from fancal.engines.specs import ALDENMARK, GREGORIAN

WINTER = TimeComponents(year=2023, month=11, day_of_month=21)  # day 355
SUMMER = TimeComponents(year=2023, month=5, day_of_month=21)   # day 172


def test_winter_solstice():
    assert daylight_hours(GREGORIAN, WINTER) == pytest.approx(8)
    assert sunrise(GREGORIAN, WINTER) == pytest.approx(8)
    assert sunset(GREGORIAN, WINTER) == pytest.approx(16)
    assert solar_midnight(GREGORIAN, WINTER) == pytest.approx(24)


def test_summer_solstice():
    assert daylight_hours(GREGORIAN, SUMMER) == pytest.approx(16)
    assert sunrise(GREGORIAN, SUMMER) == pytest.approx(4)
    assert sunset(GREGORIAN, SUMMER) == pytest.approx(20)


@pytest.mark.parametrize("month,day", [(0, 0), (2, 20), (5, 21), (8, 10), (11, 30)])
def test_sun_is_symmetric_about_midday(month, day):
    c = TimeComponents(year=2023, month=month, day_of_month=day)
    assert sunrise(GREGORIAN, c) + sunset(GREGORIAN, c) == pytest.approx(24)
    assert solar_midday(GREGORIAN, c) == pytest.approx(12)
    assert 8 <= daylight_hours(GREGORIAN, c) <= 16


def test_solstice_progress_is_monotone_between_solstices():
    values = [solstice_progress(GREGORIAN, (355 + k) % 365) for k in range(0, 183)]
    assert values[0] == 0.0
    assert values[-1] == pytest.approx(1.0)
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_aldenmark_uses_its_own_year():
    assert daylight_hours(ALDENMARK, TimeComponents(year=2, month=0, day_of_month=0)) == pytest.approx(7)
    # day 121 is the summer solstice: 30 + 30 + 31 + 30 = 121
    assert daylight_hours(ALDENMARK, TimeComponents(year=2, month=4, day_of_month=0)) == pytest.approx(15)


@pytest.mark.parametrize("hours_per_day,rise,set_", [(24, 6, 18), (20, 5, 15)])
def test_disabled_daylight_is_quarter_day(hours_per_day, rise, set_):
    cfg = replace(GREGORIAN, daylight=Daylight(enabled=False), days=DayUnits(hours_per_day=hours_per_day))
    c = TimeComponents(year=2023, month=3, day_of_month=3)
    assert sunrise(cfg, c) == pytest.approx(rise)
    assert sunset(cfg, c) == pytest.approx(set_)


@pytest.mark.parametrize("hour,expected", [(8, 0.0), (12, 0.5), (16, 1.0), (6, -0.25)])
def test_progress_day(hour, expected):
    assert progress_day(GREGORIAN, replace(WINTER, hour=hour)) == pytest.approx(expected)


@pytest.mark.parametrize("hour,expected", [(16, 0.0), (20, 0.25), (0, 0.5), (4, 0.75)])
def test_progress_night(hour, expected):
    assert progress_night(GREGORIAN, replace(WINTER, hour=hour)) == pytest.approx(expected)


@pytest.mark.parametrize("hour,expected", [(0, 1.0), (12, 0.0), (6, 0.5), (18, 0.5)])
def test_darkness_level(hour, expected):
    assert darkness_level(GREGORIAN, replace(WINTER, hour=hour)) == pytest.approx(expected, abs=1e-12)


def test_daylight_bundle_matches_functions():
    info = daylight(GREGORIAN, SUMMER)
    assert info.sunrise == pytest.approx(sunrise(GREGORIAN, SUMMER))
    assert info.sunset == pytest.approx(sunset(GREGORIAN, SUMMER))
    assert info.solar_midday == pytest.approx(solar_midday(GREGORIAN, SUMMER))
    assert info.solar_midnight == pytest.approx(solar_midnight(GREGORIAN, SUMMER))
    assert not math.isnan(info.daylight_hours)
