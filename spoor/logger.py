import os
import sys
import traceback
from typing import Any, Callable, List, Optional, Tuple

from .formats import Formatter
from .handlers import LogHandler
from .levels import LogLevel
from .records import LogRecord

Terminator = Callable[[int], Any]


def terminate_process(status: int) -> None:
    """Flush the standard streams and end the process at once, from any thread."""
    for stream in (sys.stdout, sys.stderr):
        try:
            if stream is not None:
                stream.flush()
        except (OSError, ValueError):
            pass
    os._exit(status)


class Logger:
    """
    Named source of log records.

    ``log`` builds one record per call and hands it to every attached
    handler whose level is at or below the record's level, in the order
    the handlers were added. The logger's own ``level`` is stored but not
    used for dispatch.

    A FATAL record is delivered first, then ``terminate(1)`` is called.
    The default terminate ends the process immediately; it cannot be
    caught and works from worker threads.
    """

    def __init__(self, name: str, level: int = LogLevel.DEBUG, terminate: Optional[Terminator] = None):
        self.name = name
        self.level = level
        self._handlers: List[LogHandler] = []
        self._terminate = terminate or terminate_process

    @property
    def handlers(self) -> Tuple[LogHandler, ...]:
        return tuple(self._handlers)

    def get_name(self) -> str:
        return self.name

    def get_level(self) -> int:
        return self.level

    def set_level(self, level: int) -> None:
        self.level = level

    def add_handler(self, handler: LogHandler) -> None:
        self._handlers.append(handler)

    def remove_handler(self, handler: LogHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def log(self, level: int, msg: str, *args: Any) -> None:
        record = LogRecord(level, self.name, msg, *args)
        for handler in self._handlers:
            if level >= handler.get_level():
                handler.handle(record)
        if level == LogLevel.FATAL:
            self._terminate(1)

    def debug(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    warning = warn

    def error(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)

    def fatal(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.FATAL, msg, *args)

    def exception(self, msg: str, *args: Any) -> None:
        """Log at ERROR with the traceback of the exception being handled."""
        exc = sys.exc_info()
        if exc[0] is None:
            self.error(msg, *args)
            return
        # Render first so the traceback text is not run through printf formatting.
        msg = Formatter().format_message(LogRecord(LogLevel.ERROR, self.name, msg, *args))
        self.error(f"{msg}\n" + "".join(traceback.format_exception(*exc)).rstrip("\n"))

    def __repr__(self) -> str:
        return f"<Logger {self.name!r} handlers={len(self._handlers)}>"
