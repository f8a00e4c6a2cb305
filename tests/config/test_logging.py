# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TRACE logging and environment-driven log levels."""

from __future__ import annotations

import logging
import sys

import pytest

from typesniff.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from typesniff.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_unset_env_gives_no_level() -> None:
    assert resolve_env_log_level() is None


def test_trace_level_is_named_and_below_debug() -> None:
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_module_loggers_offer_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("typesniff.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="typesniff.tests.trace"):
        logger.trace("pattern %s tried", "@0 b'%PDF'")
    assert any(
        r.levelno == TRACE_LEVEL and r.getMessage() == "pattern @0 b'%PDF' tried"
        for r in caplog.records
    )


def test_setup_logging_installs_one_stderr_handler() -> None:
    try:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        handler = handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, ChalkFormatter)
    finally:
        setup_logging(TRACE_LEVEL)


def test_formatter_keeps_message_text() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)
