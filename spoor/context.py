"""
Process-wide logging state: one config, one logger registry and the
terminate hook used by FATAL.

Applications normally use the module-level functions, which work on the
default context. Tests and embedders can build their own LoggingContext
to get an isolated registry and config.
"""

from typing import IO, Any, Mapping, Optional

from .config import Config, default_config
from .handlers import ColorStreamHandler, FileHandler, LogHandler, StreamHandler
from .logger import Logger, Terminator, terminate_process
from .registry import Registry
from .service import ServiceHandler, ServiceLogger


class LoggingContext:
    def __init__(self, config: Optional[Config] = None, terminate: Optional[Terminator] = None):
        self.config = config if config is not None else Config()
        self.terminate = terminate or terminate_process
        self.registry = Registry(self._new_logger)

    def _new_logger(self, name: str) -> Logger:
        return Logger(name, terminate=self.terminate)

    def get_logger(self, name: Optional[str] = None) -> Logger:
        """Return the logger for ``name`` (default "root"), creating it on first use."""
        return self.registry.get_logger(name)

    def basic_config(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Update the defaults used by handlers constructed from now on.

        Args:
            options: Mapping with any of filename, filemode, format, datefmt,
                level and stream (keys are case-insensitive, others ignored).
            **kwargs: Same keys, as keyword arguments.

        Raises:
            ConfigError: If level or stream is invalid.
        """
        self.config.update(options, **kwargs)

    def stream_handler(self, stream: Optional[IO[str]] = None) -> StreamHandler:
        return StreamHandler(stream, config=self.config)

    def color_stream_handler(self, stream: Optional[IO[str]] = None, force_terminal: Optional[bool] = None) -> ColorStreamHandler:
        return ColorStreamHandler(stream, config=self.config, force_terminal=force_terminal)

    def file_handler(self, filename: Optional[str] = None, mode: Optional[str] = None) -> FileHandler:
        return FileHandler(filename, mode, config=self.config)

    def service_handler(self, service: ServiceLogger) -> ServiceHandler:
        return ServiceHandler(service, config=self.config)

    def default_handler(self) -> LogHandler:
        """A FileHandler when a filename is configured, a StreamHandler otherwise."""
        if self.config.filename:
            return self.file_handler()
        return self.stream_handler()


default_context = LoggingContext(default_config())


def get_logger(name: Optional[str] = None) -> Logger:
    return default_context.get_logger(name)


def basic_config(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
    default_context.basic_config(options, **kwargs)


def get_config() -> Config:
    return default_context.config
