"""
Shared fixtures for the spoor test suite.

Provides an isolated LoggingContext whose FATAL hook records exit codes
instead of ending the test run, and restores the process default config
for tests that go through the module-level API.
"""

from __future__ import annotations

import io
from dataclasses import fields
from typing import List

import pytest

import spoor
from spoor import Config, LoggingContext


class ExitRecorder:
    """Terminate hook that remembers the requested exit codes."""

    def __init__(self) -> None:
        self.codes: List[int] = []

    def __call__(self, code: int) -> None:
        self.codes.append(code)


@pytest.fixture
def exit_recorder() -> ExitRecorder:
    return ExitRecorder()


@pytest.fixture
def context(exit_recorder: ExitRecorder) -> LoggingContext:
    """A fresh context with default config and a recording terminate hook."""

    return LoggingContext(Config(), terminate=exit_recorder)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def restore_default_config():
    """Snapshot the process default config and put it back after the test."""

    config = spoor.get_config()
    saved = {f.name: getattr(config, f.name) for f in fields(config)}
    yield config
    for name, value in saved.items():
        setattr(config, name, value)
