# topmark:header:start
#
#   project      : Debuggable
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging: TRACE level, environment resolution, and logger class."""

from __future__ import annotations

import logging

import pytest

from debuggable.config.logging import (
    TRACE_LEVEL,
    DebuggableLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from debuggable.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("20", 20),
        ("verbose", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Names (case-insensitive) and numbers are accepted; unknown names are unset."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No environment variable means no level."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Project loggers support `.trace()` below DEBUG."""
    logger = get_logger("debuggable.tests.trace")
    assert isinstance(logger, DebuggableLogger)

    with caplog.at_level(TRACE_LEVEL, logger="debuggable.tests.trace"):
        logger.trace("tracing %s", "works")

    assert "tracing works" in caplog.text
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_does_not_change_global_logger_class() -> None:
    """Other libraries keep getting the standard logger class."""
    get_logger("debuggable.tests.other")
    assert logging.getLoggerClass() is not DebuggableLogger


@pytest.mark.parametrize("value", ["0", "NOTSET"])
def test_setup_logging_honors_notset_from_environment(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    """Level 0 from the environment is kept rather than replaced by CRITICAL."""
    root = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    try:
        setup_logging()
        assert root.level == logging.NOTSET
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


def test_setup_logging_defaults_to_critical() -> None:
    """Without a level or environment variable, only critical messages pass."""
    root = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    try:
        setup_logging()
        assert root.level == logging.CRITICAL
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
