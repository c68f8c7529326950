class FancalError(Exception):
    """Base error."""

class ConfigError(FancalError, ValueError):
    """Raised when calendar configuration data cannot be turned into a CalendarConfig."""

class UnknownCalendarError(FancalError, KeyError):
    """Raised when a named calendar is not in the registry."""
