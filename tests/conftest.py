# tests/conftest.py

import pytest

import fancal
from fancal.engines.config import CalendarConfig, Month, Weekday


@pytest.fixture
def gregorian():
    return fancal.get_calendar("gregorian")


@pytest.fixture
def harptos():
    return fancal.get_calendar("harptos")


@pytest.fixture
def aldenmark():
    return fancal.get_calendar("aldenmark")


@pytest.fixture
def tiny_config():
    """Two ten-day months, a seven-day week, nothing else."""
    return CalendarConfig(
        name="tiny",
        months=(Month("Ember", 10, "Emb"), Month("Frost", 10, "Fro")),
        weekdays=tuple(Weekday(f"Day{i}") for i in range(7)),
    )


@pytest.fixture
def tiny_dict():
    return {
        "name": "Tiny",
        "months": [{"name": "Ember", "days": 10}, {"name": "Frost", "days": 10}],
        "weekdays": [{"name": "Oneday"}, {"name": "Twoday"}, {"name": "Threeday"}],
        "years": {"yearZero": 100},
        "festivals": [{"name": "Bonfire", "month": 1, "day": 5}],
    }
