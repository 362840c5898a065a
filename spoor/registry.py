import threading
from typing import Callable, Dict, List, Optional

from .logger import Logger

ROOT_LOGGER_NAME = "root"


class Registry:
    """Map of logger names to Logger instances, one instance per name."""

    def __init__(self, factory: Callable[[str], Logger] = Logger):
        self._factory = factory
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def get_logger(self, name: Optional[str] = None) -> Logger:
        if name is None:
            name = ROOT_LOGGER_NAME
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._factory(name)
                self._loggers[name] = logger
            return logger

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._loggers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)
