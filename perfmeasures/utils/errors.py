"""Custom exceptions for perfmeasures.

This module defines application-specific errors so callers can tell a
rejected benchmark configuration apart from a failure raised by the code
being measured. Failures of the measured computation are never wrapped.
"""


class PerfMeasuresError(Exception):
    """Base exception for all perfmeasures errors."""

    pass


class InvalidConfiguration(PerfMeasuresError, ValueError):
    """Raised when repetition or warm-up counts are out of range (e.g. repetitions <= 1)."""

    pass


class ConfigError(PerfMeasuresError):
    """Raised when a configuration file is unreadable or has an unsupported format."""

    pass


class TargetResolutionError(PerfMeasuresError):
    """Raised when a 'module:callable' target cannot be imported or is not callable."""

    pass
