"""Diagnostics package.

Table and grid printers for eyeballing a calendar definition. numpy (and
matplotlib, for plots) are optional: install "fancal[diagnostics]".
"""

__all__ = ["pretty_month", "leap_table", "moon_table", "daylight_table"]
