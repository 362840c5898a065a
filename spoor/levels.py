from enum import IntEnum
from typing import Union

from .exceptions import ConfigError


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name


_ALIASES = {"WARN": LogLevel.WARNING}


def level_name(level: int) -> str:
    """Name of a level, or "UNKNOWN" for integers outside the defined range."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def parse_level(value: Union[LogLevel, int, str]) -> int:
    """
    Convert a level given as member, integer or name into an integer level.

    Names are case-insensitive. Integers are accepted as-is, even outside
    the defined range.

    Raises:
        ConfigError: If a name does not match any level.
    """
    if isinstance(value, bool):
        raise ConfigError(f"Invalid log level: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in _ALIASES:
            return _ALIASES[key]
        if key in LogLevel.__members__:
            return LogLevel[key]
    raise ConfigError(f"Invalid log level: {value!r}")
