"""Reading input lines and writing selected records."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterable

    from notorious.models import OutputRecord


def prepare_stdio(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    """Reconfigure the standard streams so input lines round-trip unchanged.

    Newlines are not translated, so a carriage return stays part of its line,
    and undecodable bytes pass through as surrogate escapes instead of failing
    the run. Streams that are not text wrappers are left alone.
    """
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(errors="surrogateescape", newline="")
    if isinstance(stdout, io.TextIOWrapper):
        stdout.reconfigure(errors="surrogateescape", newline="")
    if isinstance(stderr, io.TextIOWrapper):
        stderr.reconfigure(errors="backslashreplace")


def split_lines(text: str) -> list[str]:
    """Split text on newlines. A single trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(stream: TextIO) -> list[str]:
    """Read all lines from stream.

    The whole input is held in memory, so this is not suited to inputs larger
    than available RAM.
    """
    return split_lines(stream.read())


def write_records(records: Iterable[OutputRecord], stream: TextIO) -> int:
    """Write records one per line and flush. Returns the number of records written."""
    count = 0
    for record in records:
        stream.write(record.render())
        stream.write("\n")
        count += 1
    stream.flush()
    return count
