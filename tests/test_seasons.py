# tests/test_seasons.py

from dataclasses import replace

import pytest

from fancal.core.types import TimeComponents
from fancal.engines.config import Season
from fancal.engines.seasons import current_season, season_index, season_progress
from fancal.engines.specs import ALDENMARK, GREGORIAN
from fancal.format import approximate_date


def on_day(config, doy, year=1):
    """Components for a one-month calendar, where day of month == day of year."""
    return TimeComponents(year=year, month=0, day_of_month=doy)


@pytest.fixture
def long_month(tiny_config):
    from fancal.engines.config import Month
    return replace(tiny_config, months=(Month("Long", 400),))


@pytest.mark.parametrize("doy,inside", [(355, True), (360, True), (0, True), (79, True), (80, False), (200, False)])
def test_day_range_wraps_year_end(long_month, doy, inside):
    cfg = replace(long_month, seasons=(Season("Dark", day_start=355, day_end=79), Season("Light", day_start=80, day_end=354)))
    assert (current_season(cfg, on_day(cfg, doy)).name == "Dark") is inside


@pytest.mark.parametrize("month,name", [(8, "Winter"), (1, "Winter"), (2, "Spring"), (4, "Spring"), (5, "Summer"), (7, "Autumn")])
def test_month_ranges_with_wrap(month, name):
    c = TimeComponents(year=3, month=month - 1, day_of_month=10)
    assert current_season(ALDENMARK, c).name == name


@pytest.mark.parametrize("month,day,inside", [(2, 15, True), (2, 14, False), (3, 10, True), (3, 11, False), (2, 30, True)])
def test_partial_month_bounds(tiny_config, month, day, inside):
    from fancal.engines.config import Month
    cfg = replace(
        tiny_config,
        months=(Month("A", 30), Month("B", 30), Month("C", 30)),
        seasons=(Season("Other", day_start=0, day_end=0), Season("Edge", month_start=2, month_end=3, day_start=15, day_end=10)),
    )
    c = TimeComponents(year=0, month=month - 1, day_of_month=day - 1)
    assert (season_index(cfg, c) == 1) is inside


def test_single_month_season(tiny_config):
    cfg = replace(tiny_config, seasons=(Season("Week", month_start=1, month_end=1, day_start=5, day_end=8),))
    assert season_index(cfg, TimeComponents(year=0, month=0, day_of_month=4)) == 0
    # no season covers day 9: falls back to the first one
    assert season_index(cfg, TimeComponents(year=0, month=0, day_of_month=8)) == 0


def test_uncovered_day_falls_back_to_first_season(long_month):
    cfg = replace(long_month, seasons=(Season("A", day_start=10, day_end=20), Season("B", day_start=30, day_end=40)))
    assert current_season(cfg, on_day(cfg, 25)).name == "A"


def test_no_seasons(tiny_config):
    c = TimeComponents(year=0)
    assert current_season(tiny_config, c) is None
    assert season_index(tiny_config, c) is None
    assert season_progress(tiny_config, c) == 0.0


def test_first_matching_season_wins(long_month):
    cfg = replace(long_month, seasons=(Season("A", day_start=0, day_end=50), Season("B", day_start=40, day_end=60)))
    assert current_season(cfg, on_day(cfg, 45)).name == "A"


def test_season_progress_across_year_end():
    # Winter runs from day 355 to day 78 of a 365-day year: 89 days.
    jan1 = TimeComponents(year=2023, month=0, day_of_month=0)
    assert season_progress(GREGORIAN, jan1) == pytest.approx(10 / 89)
    spring_start = TimeComponents(year=2023, month=2, day_of_month=20)  # day 79
    assert season_progress(GREGORIAN, spring_start) == 0.0


@pytest.mark.parametrize("month,day,text", [
    (0, 0, "Early Winter"),
    (2, 19, "Late Winter"),
    (4, 5, "Mid-Spring"),
])
def test_approximate_date(month, day, text):
    assert approximate_date(GREGORIAN, TimeComponents(year=2023, month=month, day_of_month=day)) == text


def test_approximate_date_without_seasons(tiny_config):
    assert approximate_date(tiny_config, TimeComponents(year=0, month=1)) == "Frost"
