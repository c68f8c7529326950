# tests/test_tracker.py

import logging

import pytest

from fancal.engines.tracker import TimeTracker

DAY = 86400
HOUR = 3600


@pytest.fixture
def solstice(gregorian):
    """Midnight at the start of 22 December 2023: sunrise 8:00, sunset 16:00."""
    return gregorian.to_time(gregorian.date(2023, 12, 22))


def test_tick_within_one_day(gregorian, solstice):
    tracker = TimeTracker.create(gregorian, solstice)
    crossed = tracker.tick(solstice + 13 * HOUR)
    assert [th.name for th in crossed] == ["sunrise", "midday"]
    assert crossed[0].time == solstice + 8 * HOUR
    assert crossed[0].components.hour == 8
    assert tracker.last_time == solstice + 13 * HOUR


def test_tick_across_days_is_ordered(gregorian, solstice):
    tracker = TimeTracker(gregorian, solstice + 13 * HOUR)
    crossed = tracker.tick(solstice + 2 * DAY + 13 * HOUR)
    assert [th.name for th in crossed] == [
        "sunset", "midnight", "sunrise", "midday", "sunset", "midnight", "sunrise", "midday",
    ]
    times = [th.time for th in crossed]
    assert times == sorted(times)


def test_backwards_or_still_reports_nothing(gregorian, solstice):
    tracker = TimeTracker.create(gregorian, solstice + 10 * HOUR)
    assert tracker.tick(solstice + 10 * HOUR) == []
    assert tracker.tick(solstice) == []
    # the backwards jump still moves the tracker
    assert [th.name for th in tracker.tick(solstice + 9 * HOUR)] == ["sunrise"]


def test_long_jump_checks_only_recent_days(gregorian, solstice, caplog):
    tracker = TimeTracker(gregorian, solstice, max_days=2)
    with caplog.at_level(logging.DEBUG, logger="fancal.engines.tracker"):
        crossed = tracker.tick(solstice + 10 * DAY + 1)
    assert [th.name for th in crossed] == ["midnight", "sunrise", "midday", "sunset", "midnight"]
    assert "tick spans 11 days" in caplog.text


def test_dispose(gregorian, solstice):
    tracker = TimeTracker.create(gregorian, solstice)
    assert not tracker.disposed
    tracker.dispose()
    assert tracker.disposed
    with pytest.raises(RuntimeError):
        tracker.tick(solstice + DAY)
