from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True, init=False)
class LogRecord:
    """
    One log event, as handed from a Logger to its handlers.

    The message template and its arguments are stored unrendered; each
    handler renders them with its own formatter when it emits.
    """

    level: int
    name: str
    msg: str
    args: Tuple[Any, ...]

    def __init__(self, level: int, name: str, msg: str, *args: Any):
        object.__setattr__(self, "level", level)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "msg", msg)
        object.__setattr__(self, "args", tuple(args))

    def get_level(self) -> int:
        return self.level
