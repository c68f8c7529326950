"""
Upgrading stored date templates.

Two older syntaxes are still found in saved calendars:

  * `{{var}}` placeholders (`{{d}} {{B}}, {{Y}}`), converted by
    migrate_legacy_format;
  * the first generation of tokens (`dddd`, `[era]`, `[season]`, ...),
    rewritten to their CLDR letters by migrate_deprecated_tokens.
"""

from __future__ import annotations

import re
from typing import List, Tuple

_LEGACY_RE = re.compile(r"\{\{[^}]+\}\}")
_LEGACY_CYCLE_RE = re.compile(r"\{\{c\d+\}\}")
_LEGACY_NUMBERED_RE = re.compile(r"\{\{(\d+)\}\}")

LEGACY_MIGRATIONS = {
    "{{y}}": "YY",
    "{{yyyy}}": "YYYY",
    "{{Y}}": "YYYY",
    "{{B}}": "MMMM",
    "{{b}}": "MMM",
    "{{m}}": "M",
    "{{mm}}": "MM",
    "{{d}}": "D",
    "{{dd}}": "DD",
    "{{0}}": "Do",
    "{{j}}": "DDD",
    "{{w}}": "d",
    "{{A}}": "dddd",
    "{{a}}": "ddd",
    "{{H}}": "HH",
    "{{h}}": "h",
    "{{hh}}": "hh",
    "{{M}}": "mm",
    "{{S}}": "ss",
    "{{p}}": "a",
    "{{P}}": "A",
    "{{W}}": "W",
    "{{WW}}": "WW",
    "{{WN}}": "[namedWeek]",
    "{{Wn}}": "[namedWeekAbbr]",
    "{{ch}}": "[ch]",
    "{{chAbbr}}": "[chAbbr]",
    "{{E}}": "[era]",
    "{{e}}": "[yearInEra]",
    "{{season}}": "[season]",
    "{{moon}}": "[moon]",
    # era template placeholders
    "{{era}}": "[era]",
    "{{eraYear}}": "[yearInEra]",
    "{{yearInEra}}": "[yearInEra]",
    "{{year}}": "YYYY",
    "{{abbreviation}}": "[eraAbbr]",
    "{{short}}": "[eraAbbr]",
}

DEPRECATED_TOKENS = {
    "dddd": "EEEE",
    "ddd": "EEE",
    "dd": "EE",
    "d": "e",
    "[era]": "GGGG",
    "[eraAbbr]": "G",
    "[season]": "QQQQ",
    "[seasonAbbr]": "QQQ",
}


def is_legacy_format(template: str) -> bool:
    return bool(_LEGACY_RE.search(template or ""))


def migrate_legacy_format(template: str) -> str:
    out = _LEGACY_CYCLE_RE.sub("[cycle]", template)
    # {{1}}, {{2}} ... are per-cycle entries; {{0}} is handled by the table
    out = _LEGACY_NUMBERED_RE.sub(lambda m: m.group(0) if m.group(1) == "0" else f"[{m.group(1)}]", out)
    for old, new in LEGACY_MIGRATIONS.items():
        out = out.replace(old, new)
    return out


def migrate_deprecated_tokens(template: str) -> Tuple[str, List[Tuple[str, str]]]:
    """Rewrite deprecated tokens; returns the new template and the (old, new) pairs applied."""
    out = template
    changes: List[Tuple[str, str]] = []
    for old in sorted(DEPRECATED_TOKENS, key=len, reverse=True):
        new = DEPRECATED_TOKENS[old]
        if old.startswith("["):
            if old in out:
                out = out.replace(old, new)
                changes.append((old, new))
            continue
        pattern = re.compile(rf"(?<![a-zA-Z\[]){re.escape(old)}(?![a-zA-Z])")
        out, n = pattern.subn(new, out)
        if n:
            changes.append((old, new))
    return out, changes
