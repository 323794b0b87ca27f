"""
Domain-specific exception hierarchy for the between application.

The interval algebra itself never raises; these cover configuration and
calendar source failures around it.
"""


class BetweenError(Exception):
    """Base class for all application-level errors."""


class CalendarSourceError(BetweenError):
    """Raised when calendar data cannot be loaded or parsed."""


class ConfigError(BetweenError, ValueError):
    """Raised when the configuration cannot be turned into a usable setup."""
