"""Ordering, naming and parsing of log levels."""

from __future__ import annotations

import pytest

from spoor import ConfigError, LogLevel, level_name, parse_level


def test_levels_are_totally_ordered() -> None:
    ordered = [
        LogLevel.DEBUG,
        LogLevel.INFO,
        LogLevel.WARNING,
        LogLevel.ERROR,
        LogLevel.CRITICAL,
        LogLevel.FATAL,
    ]
    assert ordered == sorted(ordered)
    assert [int(level) for level in ordered] == list(range(6))


def test_level_renders_its_name() -> None:
    assert str(LogLevel.WARNING) == "WARNING"
    assert level_name(LogLevel.FATAL) == "FATAL"
    assert level_name(3) == "ERROR"


@pytest.mark.parametrize("value", [-1, 6, 99])
def test_out_of_range_level_renders_unknown(value: int) -> None:
    assert level_name(value) == "UNKNOWN"


def test_arbitrary_integers_still_compare() -> None:
    assert 42 > LogLevel.FATAL
    assert -3 < LogLevel.DEBUG


def test_parse_level_accepts_names_members_and_ints() -> None:
    assert parse_level("error") == LogLevel.ERROR
    assert parse_level(" Warn ") == LogLevel.WARNING
    assert parse_level(LogLevel.CRITICAL) == LogLevel.CRITICAL
    assert parse_level(17) == 17


@pytest.mark.parametrize("value", ["verbose", "", None, True, 2.5])
def test_parse_level_rejects_garbage(value: object) -> None:
    with pytest.raises(ConfigError):
        parse_level(value)  # type: ignore[arg-type]
