"""Exception classes for spoor.

Logging calls never raise; these are reserved for configuration mistakes.
"""

class SpoorError(Exception):
    """Base exception class for spoor."""
    pass

class ConfigError(SpoorError):
    """Raised when the logging configuration receives an invalid value."""
    pass
