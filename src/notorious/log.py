"""Diagnostic logging for notorious runs."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, TextIO

from rich.console import Console, ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.text import Text

if TYPE_CHECKING:
    from rich.traceback import Traceback

LOGGER_NAME = "notorious"


class LineHandler(RichHandler):
    """RichHandler that writes each record as a single unwrapped line.

    The default layout is a table sized to the console width, which folds long
    input lines across several rows of output.
    """

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        time_text = Text(datetime.fromtimestamp(record.created).strftime("[%X]"), style="log.time")
        parts: list[Text | str] = [time_text, " ", self.get_level_text(record), " "]
        if isinstance(message_renderable, Text):
            parts.append(message_renderable)
        else:
            parts.append(record.getMessage())
        line = Text.assemble(*parts, no_wrap=True)
        if traceback is None:
            return line
        return Group(line, traceback)


def get_logger(stream: TextIO, verbose: bool = False) -> logging.Logger:
    """Make a logger that writes debug output to stream if verbose, and discards otherwise.

    The logger is not registered with the logging module, so concurrent runs
    each get their own handler and never see each other's configuration.
    """
    logger = logging.Logger(LOGGER_NAME)
    logger.propagate = False
    if not verbose:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    console = Console(file=stream, soft_wrap=True)
    handler = LineHandler(console=console, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
