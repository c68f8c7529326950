# tests/test_eras.py

from dataclasses import replace

import pytest

from fancal.engines.config import Era
from fancal.engines.eras import current_era, format_era_template, format_year_with_era
from fancal.engines.specs import ALDENMARK, HARPTOS


@pytest.mark.parametrize("year,abbr,in_era", [(1, "AA", 1), (500, "AA", 500), (999, "AA", 999), (1000, "AL", 1), (1005, "AL", 6)])
def test_current_era(year, abbr, in_era):
    era = current_era(ALDENMARK, year)
    assert era.abbreviation == abbr
    assert era.year_in_era == in_era


@pytest.mark.parametrize("year", [0, -5])
def test_fallback_uses_first_era_and_raw_year(year):
    era = current_era(ALDENMARK, year)
    assert era.name == "Age of Ash"
    assert era.year_in_era == year


def test_latest_start_wins_when_eras_overlap():
    cfg = replace(ALDENMARK, eras=(Era("Old", "O", start_year=1), Era("New", "N", start_year=100)))
    assert current_era(cfg, 150).name == "New"
    assert current_era(cfg, 99).name == "Old"


def test_no_eras():
    assert current_era(replace(ALDENMARK, eras=()), 10) is None
    assert format_year_with_era(replace(ALDENMARK, eras=()), 10) == "10"


def test_format_year_with_era():
    assert format_year_with_era(ALDENMARK, 1005) == "6 AL (1005)"
    assert format_year_with_era(ALDENMARK, 5) == "5 AA"
    assert format_year_with_era(HARPTOS, 1492) == "1492 DR"
    prefixed = replace(HARPTOS, eras=(Era("Dale Reckoning", "DR", start_year=1, format="prefix"),))
    assert format_year_with_era(prefixed, 1492) == "DR 1492"
    bare = replace(HARPTOS, eras=(Era("Nameless", start_year=1),))
    assert format_year_with_era(bare, 1492) == "1492"


def test_template_keeps_unknown_placeholders():
    assert format_era_template("{{year}} {{unknown}} {{short}}", {"year": 12, "short": "AA"}) == "12 {{unknown}} AA"


def test_era_format_is_checked():
    with pytest.raises(ValueError):
        Era("Bad", format="middle")
