"""
Process-wide defaults for newly constructed handlers.

Handlers read the configuration once, when they are built. Changing it
afterwards only affects handlers created later.
"""

import os
from dataclasses import dataclass, replace
from typing import IO, Any, Mapping, Optional

from .exceptions import ConfigError
from .formats import DEFAULT_DATEFMT, DEFAULT_FORMAT
from .levels import LogLevel, parse_level

# Environment variables read by Config.from_env
ENV_PREFIX = "SPOOR_"


@dataclass
class Config:
    """
    Defaults used when constructing handlers.

    Attributes:
        filename: File opened by a FileHandler built without a filename.
        filemode: Mode recorded on such a FileHandler.
        format: Line template for new formatters.
        datefmt: strftime template for ``{asctime}``.
        level: Level given to new handlers.
        stream: Stream used by a StreamHandler built without one.
    """

    filename: Optional[str] = None
    filemode: str = "a"
    format: str = DEFAULT_FORMAT
    datefmt: str = DEFAULT_DATEFMT
    level: int = LogLevel.INFO
    stream: Optional[IO[str]] = None

    def update(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Overwrite fields from a mapping of options.

        Keys are matched case-insensitively against filename, filemode,
        format, datefmt, level and stream. Other keys are ignored.

        Raises:
            ConfigError: If level cannot be parsed or stream is not writable.
        """
        merged = dict(options or {})
        merged.update(kwargs)
        for key, value in merged.items():
            key = str(key).lower()
            if key == "filename":
                self.filename = value
            elif key == "filemode":
                self.filemode = value
            elif key == "format":
                self.format = value
            elif key == "datefmt":
                self.datefmt = value
            elif key == "level":
                self.level = parse_level(value)
            elif key == "stream":
                if value is not None and not callable(getattr(value, "write", None)):
                    raise ConfigError(f"stream must have a write() method, got {type(value).__name__}")
                self.stream = value

    def copy(self) -> "Config":
        return replace(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from SPOOR_LEVEL, SPOOR_FORMAT, SPOOR_DATEFMT, SPOOR_FILENAME and SPOOR_FILEMODE."""
        environ = os.environ if environ is None else environ
        config = cls()
        options = {}
        for key in ("level", "format", "datefmt", "filename", "filemode"):
            value = environ.get(ENV_PREFIX + key.upper())
            if value:
                options[key] = value
        config.update(options)
        return config


_default_config = Config()


def default_config() -> Config:
    """Return the process default configuration."""
    return _default_config
