import io
import sys
from typing import IO, Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from .config import Config, default_config
from .formats import Formatter
from .levels import LogLevel
from .records import LogRecord

LEVEL_STYLES = {
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bright_white on red",
    LogLevel.FATAL: "bold bright_white on red",
}

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


class LogHandler:
    """
    Base sink: owns a level and a formatter, writes lines to a stream.

    Level filtering is done by the Logger before ``handle`` is called.
    Calling ``handle`` or ``emit`` directly bypasses the handler's level.
    """

    def __init__(self, config: Optional[Config] = None):
        config = config or default_config()
        self.level = config.level
        self.formatter = Formatter(config.format, config.datefmt)
        self.stream: Optional[IO[str]] = None

    def get_level(self) -> int:
        return self.level

    def set_level(self, level: int) -> None:
        self.level = level

    def get_formatter(self) -> Formatter:
        return self.formatter

    def set_formatter(self, formatter: Formatter) -> None:
        self.formatter = formatter

    def handle(self, record: LogRecord) -> None:
        self.emit(record)

    def emit(self, record: LogRecord) -> None:
        if self.stream is None:
            return
        try:
            self.write(self.format(record), record)
        except Exception:
            # Best effort: a broken sink never reaches the caller.
            pass

    def write(self, line: str, record: LogRecord) -> None:
        data = line + "\n"
        if isinstance(self.stream, (io.RawIOBase, io.BufferedIOBase)):
            self.stream.write(data.encode("utf-8"))
        else:
            self.stream.write(data)
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def format(self, record: LogRecord) -> str:
        return self.formatter.format(record)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} level={self.level!r}>"


class StreamHandler(LogHandler):
    def __init__(self, stream: Optional[IO[str]] = None, config: Optional[Config] = None):
        config = config or default_config()
        super().__init__(config)
        if stream is None:
            stream = config.stream if config.stream is not None else sys.stderr
        self.stream = stream


class ColorStreamHandler(StreamHandler):
    """StreamHandler that colours each line by level using rich."""

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        config: Optional[Config] = None,
        force_terminal: Optional[bool] = None,
    ):
        super().__init__(stream, config)
        self.console = Console(
            file=self.stream,
            force_terminal=force_terminal,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def write(self, line: str, record: LogRecord) -> None:
        # Style.render keeps the line as-is (tabs included) and only wraps it in escape codes.
        color_system = _COLOR_SYSTEMS.get(self.console.color_system or "")
        style = Style.parse(LEVEL_STYLES.get(record.level, "none"))
        line = style.render(line, color_system=color_system, legacy_windows=self.console.legacy_windows)
        super().write(line, record)


class FileHandler(StreamHandler):
    """
    Appends formatted lines to a file.

    The file is always opened for appending and created when missing;
    ``mode`` is kept for introspection only. If the file cannot be opened
    the handler stays usable and silently drops every record.
    """

    def __init__(
        self,
        filename: Optional[str] = None,
        mode: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        config = config or default_config()
        LogHandler.__init__(self, config)
        self.filename = filename if filename is not None else config.filename
        self.mode = mode if mode is not None else config.filemode
        self.open_error: Optional[OSError] = None
        self.stream = self._open()

    def _open(self) -> Optional[IO[str]]:
        if not self.filename:
            return None
        try:
            return open(self.filename, "a", encoding="utf-8")
        except OSError as exc:
            self.open_error = exc
            return None

    def close(self) -> None:
        if self.stream is not None:
            self.stream.close()
            self.stream = None

    def __repr__(self) -> str:
        return f"<FileHandler {self.filename!r} level={self.level!r}>"
