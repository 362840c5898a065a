"""
Handler that forwards records to a host service's logger.

The service side only needs ``warning``, ``error`` and ``info`` methods
taking a string, so a system-service logger or a plain
``logging.Logger`` from the standard library can be plugged in.
"""

from typing import Optional, Protocol

from .config import Config
from .handlers import LogHandler
from .levels import LogLevel
from .records import LogRecord


class ServiceLogger(Protocol):
    def warning(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...


class ServiceHandler(LogHandler):
    """
    Routes formatted records to a ServiceLogger by severity.

    WARNING goes to ``warning`` and ERROR to ``error``. Every other level,
    CRITICAL and FATAL included, goes to ``info``: the service only knows
    three severities.
    """

    def __init__(self, service: ServiceLogger, config: Optional[Config] = None):
        super().__init__(config)
        self.service = service

    def emit(self, record: LogRecord) -> None:
        try:
            msg = self.format(record)
            if record.level == LogLevel.WARNING:
                self.service.warning(msg)
            elif record.level == LogLevel.ERROR:
                self.service.error(msg)
            else:
                self.service.info(msg)
        except Exception:
            # Delivery failures belong to the service.
            pass
