"""
Era lookup and era-qualified year strings.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..core.types import EraInfo
from .config import CalendarConfig, Era

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def _info(e: Era, year_in_era: int) -> EraInfo:
    return EraInfo(
        name=e.name,
        abbreviation=e.abbreviation,
        format=e.format,  # type: ignore[arg-type]
        template=e.template,
        year_in_era=year_in_era,
    )


def current_era(config: CalendarConfig, display_year: int) -> Optional[EraInfo]:
    """
    The latest-starting era that contains display_year.

    When no era contains the year, the first declared era is returned with
    year_in_era equal to the display year itself (not offset by start_year).
    Existing calendars depend on that fallback.
    """
    if not config.eras:
        return None
    for e in sorted(config.eras, key=lambda e: e.start_year, reverse=True):
        if display_year >= e.start_year and (e.end_year is None or display_year <= e.end_year):
            return _info(e, display_year - e.start_year + 1)
    logger.debug("year %d is outside every era of '%s'", display_year, config.name)
    return _info(config.eras[0], display_year)


def format_era_template(template: str, values: dict) -> str:
    """Substitute {{key}} placeholders; unknown keys are left as written."""
    def sub(m: re.Match) -> str:
        v = values.get(m.group(1))
        return m.group(0) if v is None else str(v)
    return _PLACEHOLDER.sub(sub, template)


def format_year_with_era(config: CalendarConfig, display_year: int) -> str:
    era = current_era(config, display_year)
    if era is None:
        return str(display_year)

    if era.template:
        return format_era_template(era.template, {
            "year": display_year,
            "abbreviation": era.abbreviation,
            "short": era.abbreviation,
            "era": era.name,
            "name": era.name,
            "yearInEra": era.year_in_era,
        })

    if not era.abbreviation:
        return str(display_year)
    if era.format == "prefix":
        return f"{era.abbreviation} {display_year}"
    return f"{display_year} {era.abbreviation}"
