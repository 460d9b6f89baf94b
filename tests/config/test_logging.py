# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for TextAlchemy logging helpers."""

from __future__ import annotations

import logging

import pytest

from textalchemy.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    TextAlchemyLogger,
    get_logger,
    resolve_env_log_level,
)
from textalchemy.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    "value, level",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("15", 15),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, level: int | None
) -> None:
    """The environment level accepts names and numbers."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == level


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no level."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers have a trace method below DEBUG."""
    logger = get_logger("textalchemy.tests.trace")
    assert isinstance(logger, TextAlchemyLogger)
    with caplog.at_level(TRACE_LEVEL, logger="textalchemy.tests.trace"):
        logger.trace("deep %s", "detail")
    assert "deep detail" in caplog.text
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    """Colored records still contain the formatted message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %d", (3,), None)
    assert "[WARNING] careful 3" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)
