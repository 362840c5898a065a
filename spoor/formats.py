import re
from datetime import datetime

from .levels import level_name
from .records import LogRecord

DEFAULT_FORMAT = "{levelname}: {asctime} - {message}"

SIMPLE_FORMAT = "{levelname}: {message}"

DETAILED_FORMAT = "{asctime} | {levelname} | {name} | {message}"

DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

class LogFormat:
    DEFAULT = DEFAULT_FORMAT
    SIMPLE = SIMPLE_FORMAT
    DETAILED = DETAILED_FORMAT

_PLACEHOLDER = re.compile(r"\{(levelname|message|asctime|name)\}")


class Formatter:
    """
    Renders a LogRecord into a single line of text.

    The line template may contain ``{levelname}``, ``{message}``,
    ``{asctime}`` and ``{name}``. Substitution is a single pass over the
    template: only the first occurrence of each placeholder is replaced,
    and text coming from the record is never scanned for placeholders.
    """

    def __init__(self, fmt: str = "", datefmt: str = ""):
        self.fmt = fmt
        self.datefmt = datefmt

    def format_message(self, record: LogRecord) -> str:
        if not record.args:
            return record.msg
        try:
            return record.msg % record.args
        except (TypeError, ValueError, KeyError) as exc:
            return f"{record.msg} %!(BADFORMAT {exc}; args={record.args!r})"

    def format_time(self, record: LogRecord) -> str:
        return datetime.now().strftime(self.datefmt)

    def format(self, record: LogRecord) -> str:
        values = {
            "levelname": level_name(record.level),
            "message": self.format_message(record),
            "asctime": self.format_time(record),
            "name": record.name,
        }
        seen = set()

        def substitute(match: "re.Match[str]") -> str:
            key = match.group(1)
            if key in seen:
                return match.group(0)
            seen.add(key)
            return values[key]

        return _PLACEHOLDER.sub(substitute, self.fmt)

    def __repr__(self) -> str:
        return f"Formatter(fmt={self.fmt!r}, datefmt={self.datefmt!r})"
