from __future__ import annotations

import logging
from typing import Callable, Dict

from ..core.types import TimeComponents
from ..engines.config import CalendarConfig
from .legacy import is_legacy_format, migrate_legacy_format
from .parts import approximate_date, approximate_time, date_formatting_parts, format_custom

logger = logging.getLogger(__name__)

Formatter = Callable[[CalendarConfig, TimeComponents], str]

DEFAULT_FORMAT_PRESETS: Dict[str, str] = {
    "short": "D MMM",
    "long": "D MMMM, YYYY",
    "full": "EEEE, D MMMM YYYY",
    "ordinal": "Do of MMMM, GGGG",
    "fantasy": "Do of MMMM, YYYY GGGG",
    "time": "HH:mm",
    "time12": "h:mm A",
    "approxTime": "[approxTime]",
    "approxDate": "[approxDate]",
    "datetime": "D MMMM YYYY, HH:mm",
    "datetime12": "D MMMM YYYY, h:mm A",
}

def format_short(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['D']} {p['MMM']}"

def format_long(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['D']} {p['MMMM']}, {p['y']}"

def format_full(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['dddd']}, {p['D']} {p['MMMM']} {p['y']}"

def format_ordinal(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    out = f"{p['Do']} of {p['MMMM']}"
    if p["era"]:
        out += f", {p['era']}"
    return out

def format_fantasy(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    out = f"{p['Do']} of {p['MMMM']}, {p['y']}"
    if p["era"]:
        out += f" {p['era']}"
    return out

def format_time(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['HH']}:{p['mm']}"

def format_time12(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['h']}:{p['mm']} {p['A']}"

def format_datetime(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['D']} {p['MMMM']} {p['y']}, {p['HH']}:{p['mm']}"

def format_datetime12(config: CalendarConfig, c: TimeComponents) -> str:
    p = date_formatting_parts(config, c)
    return f"{p['D']} {p['MMMM']} {p['y']}, {p['h']}:{p['mm']} {p['A']}"

PRESET_FORMATTERS: Dict[str, Formatter] = {
    "off": lambda config, c: "",
    "short": format_short,
    "long": format_long,
    "full": format_full,
    "ordinal": format_ordinal,
    "fantasy": format_fantasy,
    "time": format_time,
    "time12": format_time12,
    "approxTime": approximate_time,
    "approxDate": approximate_date,
    "datetime": format_datetime,
    "datetime12": format_datetime12,
}

def resolve_template(config: CalendarConfig, name: str) -> str:
    """
    Turn a preset name or a `date_formats` key into a token template.
    Legacy `{{var}}` templates stored on the calendar are upgraded on the way.
    Anything else is assumed to already be a template.
    """
    if name in config.date_formats:
        tpl = config.date_formats[name]
        return migrate_legacy_format(tpl) if is_legacy_format(tpl) else tpl
    if name in DEFAULT_FORMAT_PRESETS:
        return DEFAULT_FORMAT_PRESETS[name]
    if is_legacy_format(name):
        return migrate_legacy_format(name)
    return name

def format_date(config: CalendarConfig, components: TimeComponents, name: str = "long") -> str:
    """Render by preset name, then a calendar-defined format, then as a raw template."""
    if name in PRESET_FORMATTERS:
        return PRESET_FORMATTERS[name](config, components)
    template = resolve_template(config, name)
    if template != name:
        logger.debug("format %r resolved to template %r", name, template)
    return format_custom(config, components, template)
