# tests/test_cycles.py

from dataclasses import replace

import pytest

from fancal.core.types import TimeComponents
from fancal.engines.config import Cycle, CycleEntry
from fancal.engines.cycles import cycle_entry_index, cycle_number, cycle_values
from fancal.engines.specs import ALDENMARK


def entries(*names):
    return tuple(CycleEntry(n) for n in names)


def test_aldenmark_cycles_text():
    cv = cycle_values(ALDENMARK, TimeComponents(year=0))
    assert cv.text == "Year of the Heron\nMarket: Fish"
    assert [(v.cycle_name, v.entry_name, v.index) for v in cv.values] == [("Beast", "Heron", 0), ("Market", "Fish", 0)]


def test_day_cycle_advances_daily():
    names = [cycle_values(ALDENMARK, TimeComponents(year=0, day_of_month=d)).values[1].entry_name for d in range(4)]
    assert names == ["Fish", "Grain", "Cloth", "Fish"]


@pytest.mark.parametrize("year,beast", [(1000, "Hare"), (6, "Heron"), (-1, "Wolf")])
def test_year_cycle(year, beast):
    assert cycle_values(ALDENMARK, TimeComponents(year=year)).values[0].entry_name == beast


def test_length_and_offset():
    c = Cycle("Dozen", length=12, entries=entries("A", "B", "C", "D", "E"))
    cfg = replace(ALDENMARK, cycles=(c,))
    assert cycle_entry_index(cfg, c, TimeComponents(year=24)) == 2
    shifted = replace(c, offset=12)
    assert cycle_entry_index(cfg, shifted, TimeComponents(year=24)) == 3


def test_era_year_basis():
    c = Cycle("Reign", based_on="eraYear", entries=entries("I", "II", "III", "IV"))
    cfg = replace(ALDENMARK, cycles=(c,), cycle_format="{{1}}")
    # 1005 is year 6 of the Age of Lanterns
    assert cycle_values(cfg, TimeComponents(year=1005)).text == "III"


@pytest.mark.parametrize("basis,expected", [("month", "D"), ("monthDay", "C"), ("yearDay", "B")])
def test_calendar_position_bases(basis, expected):
    c = Cycle("X", based_on=basis, entries=entries("A", "B", "C", "D"))
    cfg = replace(ALDENMARK, cycles=(c,))
    # month 3, day 6; day of year 30 + 30 + 31 + 6 = 97
    comps = TimeComponents(year=7, month=3, day_of_month=6)
    assert cycle_values(cfg, comps).values[0].entry_name == expected


def test_cycle_without_entries():
    c = Cycle("Empty")
    cfg = replace(ALDENMARK, cycles=(c,), cycle_format="[{{1}}]")
    cv = cycle_values(cfg, TimeComponents(year=3))
    assert cv.values[0].entry_name == ""
    assert cv.text == "[]"


def test_cycle_number():
    c = Cycle("Sixty", length=60, entries=entries("A"))
    cfg = replace(ALDENMARK, cycles=(c,))
    assert cycle_number(cfg, TimeComponents(year=125)) == 3
    assert cycle_number(cfg, TimeComponents(year=-10)) == 1
    assert cycle_number(replace(ALDENMARK, cycles=()), TimeComponents(year=125)) == 1


@pytest.mark.parametrize("kwargs", [{"length": 0}, {"based_on": "week"}])
def test_invalid_cycles_rejected(kwargs):
    with pytest.raises(ValueError):
        Cycle("Bad", **kwargs)
