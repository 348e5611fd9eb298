"""Exception types raised at the edges of the analytics engine."""


class AnalyticsError(Exception):
    """Base class for analytics errors."""


class ConfigError(AnalyticsError):
    """Raised when an analytics configuration file cannot be used."""


class InputDataError(AnalyticsError):
    """Raised when an input document cannot be parsed into game models."""
