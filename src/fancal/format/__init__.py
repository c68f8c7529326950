"""Date rendering: token templates, presets and template migration."""

from .legacy import (
    DEPRECATED_TOKENS,
    LEGACY_MIGRATIONS,
    is_legacy_format,
    migrate_deprecated_tokens,
    migrate_legacy_format,
)
from .numerals import ordinal, to_roman_numeral
from .parts import (
    TOKEN_REGEX,
    approximate_date,
    approximate_time,
    custom_context,
    date_formatting_parts,
    format_custom,
)
from .presets import DEFAULT_FORMAT_PRESETS, PRESET_FORMATTERS, format_date, resolve_template
from .relative import time_since

__all__ = [
    "DEFAULT_FORMAT_PRESETS",
    "DEPRECATED_TOKENS",
    "LEGACY_MIGRATIONS",
    "PRESET_FORMATTERS",
    "TOKEN_REGEX",
    "approximate_date",
    "approximate_time",
    "custom_context",
    "date_formatting_parts",
    "format_custom",
    "format_date",
    "is_legacy_format",
    "migrate_deprecated_tokens",
    "migrate_legacy_format",
    "ordinal",
    "resolve_template",
    "time_since",
    "to_roman_numeral",
]
