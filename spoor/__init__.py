"""Leveled logging with named loggers and pluggable handlers."""
from .version import __version__
from .levels import LogLevel, level_name, parse_level
from .records import LogRecord
from .formats import Formatter, LogFormat
from .config import Config
from .handlers import LogHandler, StreamHandler, ColorStreamHandler, FileHandler
from .service import ServiceHandler, ServiceLogger
from .logger import Logger, terminate_process
from .registry import Registry
from .context import LoggingContext, default_context, get_logger, basic_config, get_config
from .exceptions import SpoorError, ConfigError

DEBUG = LogLevel.DEBUG
INFO = LogLevel.INFO
WARNING = LogLevel.WARNING
ERROR = LogLevel.ERROR
CRITICAL = LogLevel.CRITICAL
FATAL = LogLevel.FATAL

__all__ = [
    "__version__",
    "LogLevel",
    "level_name",
    "parse_level",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "FATAL",
    "LogRecord",
    "Formatter",
    "LogFormat",
    "Config",
    "LogHandler",
    "StreamHandler",
    "ColorStreamHandler",
    "FileHandler",
    "ServiceHandler",
    "ServiceLogger",
    "Logger",
    "terminate_process",
    "Registry",
    "LoggingContext",
    "default_context",
    "get_logger",
    "basic_config",
    "get_config",
    "SpoorError",
    "ConfigError",
]
