"""Tests for diagnostic logging."""

from __future__ import annotations

import logging
from io import StringIO

from rich.logging import RichHandler

from notorious.log import get_logger


class TestGetLogger:
    def test_quiet_logger_discards(self) -> None:
        stream = StringIO()
        logger = get_logger(stream, verbose=False)
        logger.debug("hidden")
        logger.error("also hidden")
        assert stream.getvalue() == ""

    def test_verbose_logger_writes_debug(self) -> None:
        stream = StringIO()
        logger = get_logger(stream, verbose=True)
        logger.debug("match: line 4: hello")
        out = stream.getvalue()
        assert "DEBUG" in out
        assert "match: line 4: hello" in out

    def test_verbose_logger_uses_rich(self) -> None:
        logger = get_logger(StringIO(), verbose=True)
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_loggers_are_independent(self) -> None:
        first, second = StringIO(), StringIO()
        get_logger(first, verbose=True).debug("one")
        get_logger(second, verbose=True).debug("two")
        assert "one" in first.getvalue()
        assert "two" not in first.getvalue()
        assert "two" in second.getvalue()

    def test_does_not_propagate(self) -> None:
        logger = get_logger(StringIO(), verbose=True)
        assert logger.propagate is False
        assert logger not in logging.Logger.manager.loggerDict.values()

    def test_long_message_not_wrapped(self) -> None:
        stream = StringIO()
        line = "y" * 150 + " needle"
        get_logger(stream, verbose=True).debug("match: line 0: %s", line)
        out = stream.getvalue()
        assert "match: line 0: " + line in out
        assert out.count("\n") == 1
