"""Handler factories and the default handler of a LoggingContext."""

from __future__ import annotations

import io
import sys
from pathlib import Path

from spoor import ColorStreamHandler, FileHandler, LoggingContext, LogLevel, ServiceHandler, StreamHandler


class NullService:
    def warning(self, msg: str) -> None:
        pass

    def error(self, msg: str) -> None:
        pass

    def info(self, msg: str) -> None:
        pass


def test_factories_use_context_config(context: LoggingContext, tmp_path: Path) -> None:
    context.basic_config(format="{message}!", level=LogLevel.WARNING)

    handlers = [
        context.stream_handler(io.StringIO()),
        context.color_stream_handler(io.StringIO()),
        context.file_handler(str(tmp_path / "f.log")),
        context.service_handler(NullService()),
    ]

    assert [type(h) for h in handlers] == [StreamHandler, ColorStreamHandler, FileHandler, ServiceHandler]
    for handler in handlers:
        assert handler.get_level() == LogLevel.WARNING
        assert handler.get_formatter().fmt == "{message}!"
    handlers[2].close()


def test_default_handler_is_stream_without_filename(context: LoggingContext) -> None:
    handler = context.default_handler()

    assert type(handler) is StreamHandler
    assert handler.stream is sys.stderr


def test_default_handler_uses_configured_stream(context: LoggingContext) -> None:
    sink = io.StringIO()
    context.basic_config(stream=sink)

    assert context.default_handler().stream is sink


def test_default_handler_prefers_filename_over_stream(context: LoggingContext, tmp_path: Path) -> None:
    path = tmp_path / "app.log"
    context.basic_config(filename=str(path), stream=io.StringIO(), format="{name}: {message}")
    logger = context.get_logger("worker")

    handler = context.default_handler()
    logger.add_handler(handler)
    logger.info("started")
    handler.close()

    assert isinstance(handler, FileHandler)
    assert path.read_text(encoding="utf-8") == "worker: started\n"
