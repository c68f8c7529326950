# tests/test_accounting.py

import pytest

from fancal.core.types import TimeComponents
from fancal.engines.accounting import (
    day_of_year,
    days_before_year,
    days_in_month,
    days_in_year,
    epoch_day,
)
from fancal.engines.specs import ALDENMARK, ALL_SPECS, GREGORIAN, HARPTOS


def test_days_in_month_uses_leap_days():
    assert days_in_month(GREGORIAN, 1, 2024) == 29
    assert days_in_month(GREGORIAN, 1, 2023) == 28
    assert days_in_month(HARPTOS, 6, 1492) == 32
    assert days_in_month(HARPTOS, 6, 1491) == 31


@pytest.mark.parametrize("month", [-1, 12, 99])
def test_days_in_month_out_of_range_is_zero(month):
    assert days_in_month(GREGORIAN, month, 2024) == 0


@pytest.mark.parametrize("name", sorted(ALL_SPECS))
@pytest.mark.parametrize("year", [-3, 0, 5, 1491, 1492, 2000, 2023])
def test_year_is_sum_of_months(name, year):
    c = ALL_SPECS[name]
    assert days_in_year(c, year) == sum(days_in_month(c, i, year) for i in range(len(c.months)))


def test_year_lengths():
    assert days_in_year(GREGORIAN, 2024) == 366
    assert days_in_year(GREGORIAN, 1900) == 365
    assert days_in_year(ALDENMARK, 6) == 243
    assert days_in_year(ALDENMARK, 5) == 244


def test_day_of_year_is_leap_aware():
    assert day_of_year(GREGORIAN, TimeComponents(year=2024, month=2, day_of_month=0)) == 60
    assert day_of_year(GREGORIAN, TimeComponents(year=2023, month=2, day_of_month=0)) == 59


def test_epoch_day_origin_and_known_dates():
    assert epoch_day(GREGORIAN, TimeComponents(year=0)) == 0
    # year 0 is a leap year
    assert epoch_day(GREGORIAN, TimeComponents(year=1)) == 366
    assert epoch_day(GREGORIAN, TimeComponents(year=-1)) == -365
    assert epoch_day(GREGORIAN, TimeComponents(year=2024)) == 739251


def test_days_before_year_crosses_cache_blocks():
    total = sum(days_in_year(GREGORIAN, y) for y in range(600))
    assert days_before_year(GREGORIAN, 600) == total
    assert days_before_year(GREGORIAN, -10) == -sum(days_in_year(GREGORIAN, y) for y in range(-10, 0))


def test_epoch_day_is_contiguous_across_year_end():
    last = TimeComponents(year=2023, month=11, day_of_month=30)
    first = TimeComponents(year=2024, month=0, day_of_month=0)
    assert epoch_day(GREGORIAN, first) - epoch_day(GREGORIAN, last) == 1
