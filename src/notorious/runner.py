"""Run a filter over an input stream."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from notorious.log import get_logger
from notorious.reader import read_lines, write_records
from notorious.selector import emit, select

if TYPE_CHECKING:
    from notorious.models import Options


def run(options: Options, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Filter stdin into stdout according to options, logging diagnostics to stderr.

    Returns the number of lines written. I/O failures propagate as OSError;
    output written before the failure is not rolled back.
    """
    logger = get_logger(stderr, verbose=options.verbose)
    lines = read_lines(stdin)
    logger.debug("read %d lines", len(lines))

    mask = select(
        lines,
        options.matches,
        options.context.before,
        options.context.after,
        logger=logger,
    )
    records = emit(lines, mask, with_line_numbers=options.line_numbers)
    return write_records(records, stdout)
