"""
fancal.engines.leap
-------------------
Leap-year rules.

Rules are evaluated on the *display* year (internal year + years.year_zero).
Supported rules:

  none       never leap
  simple     every `interval` years counted from `start`
  gregorian  "400,!100,4" counted from 0
  pattern    comma-separated intervals, first match wins

Pattern tokens:
  N    years divisible by N (after subtracting `start`) are leap
  !N   years divisible by N are *not* leap
  +N   as N, but ignore `start`

A pattern that fails to parse makes the whole rule "none"; leap
evaluation never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from .config import CalendarConfig, LeapYearConfig

logger = logging.getLogger(__name__)

GREGORIAN_PATTERN = "400,!100,4"


@dataclass(frozen=True)
class LeapInterval:
    interval: int
    subtracts: bool = False
    ignore_offset: bool = False


@lru_cache(maxsize=256)
def parse_pattern(pattern: str) -> Optional[Tuple[LeapInterval, ...]]:
    """
    Parse a leap pattern string. Empty segments are skipped.
    Returns None if any segment is not a positive integer (with an optional
    '!' or '+' prefix), or if nothing is left.
    """
    out = []
    for raw in str(pattern).split(","):
        tok = raw.strip()
        if not tok:
            continue
        subtracts = ignore_offset = False
        digits = tok
        while digits[:1] in ("!", "+"):
            if digits[0] == "!":
                subtracts = True
            else:
                ignore_offset = True
            digits = digits[1:]
        if not digits.isdecimal():
            logger.debug("leap pattern %r: bad segment %r", pattern, raw)
            return None
        n = int(digits)
        if n <= 0:
            logger.debug("leap pattern %r: non-positive interval %r", pattern, raw)
            return None
        out.append(LeapInterval(interval=n, subtracts=subtracts, ignore_offset=ignore_offset))
    return tuple(out) or None


def effective_rule(config: CalendarConfig) -> LeapYearConfig:
    """
    The leap rule in force: the structured config when it names a rule other
    than "none", otherwise the legacy years.leap_year interval, otherwise none.
    """
    c = config.leap_year_config
    if c is not None and c.rule != "none":
        return c
    legacy = config.years.leap_year
    if legacy is not None and legacy.interval > 0:
        return LeapYearConfig(rule="simple", interval=legacy.interval, start=legacy.start)
    return LeapYearConfig(rule="none")


def _pattern_is_leap(intervals: Tuple[LeapInterval, ...], year: int, start: int) -> bool:
    for iv in intervals:
        y = year if iv.ignore_offset else year - start
        if y % iv.interval == 0:
            return not iv.subtracts
    return False


def is_leap_year(config: CalendarConfig, display_year: int) -> bool:
    rule = effective_rule(config)

    if rule.rule == "simple":
        if not rule.interval or rule.interval <= 0:
            return False
        return (display_year - rule.start) % rule.interval == 0

    if rule.rule == "gregorian":
        return _pattern_is_leap(parse_pattern(GREGORIAN_PATTERN), display_year, 0)

    if rule.rule == "pattern":
        intervals = parse_pattern(rule.pattern or "")
        if intervals is None:
            return False
        return _pattern_is_leap(intervals, display_year, rule.start)

    return False


def is_leap_internal(config: CalendarConfig, year: int) -> bool:
    """Leap test for an internal (zero-based) year."""
    return is_leap_year(config, year + config.years.year_zero)


def _nth(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def leap_year_description(config: CalendarConfig) -> str:
    """Human-readable summary of the leap rule, e.g. for a calendar editor."""
    rule = effective_rule(config)
    if rule.rule == "simple" and rule.interval:
        if rule.interval == 1:
            return "Every year is a leap year"
        offset = f" (starting {rule.start})" if rule.start else ""
        return f"Every {_nth(rule.interval)} year{offset}"
    if rule.rule == "gregorian":
        return "Every 4th year, except every 100th, unless every 400th"
    if rule.rule == "pattern":
        intervals = parse_pattern(rule.pattern or "")
        if intervals is None:
            return "No leap years"
        # First match wins, so read from the broadest interval outward.
        parts = []
        prev = None
        for iv in reversed(intervals):
            if prev is None:
                head = "Never every" if iv.subtracts else "Every"
                parts.append(f"{head} {_nth(iv.interval)} year")
            elif iv.subtracts:
                parts.append(f"except every {_nth(iv.interval)}")
            elif prev.subtracts:
                parts.append(f"unless every {_nth(iv.interval)}")
            else:
                parts.append(f"or every {_nth(iv.interval)}")
            prev = iv
        return ", ".join(parts)
    return "No leap years"
