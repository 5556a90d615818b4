"""Context-window selection: which lines to print around each match."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notorious.models import OutputRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

_default_logger = logging.getLogger(__name__)
_default_logger.addHandler(logging.NullHandler())


def select(
    lines: Sequence[str],
    matches: Callable[[str], bool],
    before: int = 0,
    after: int = 0,
    *,
    mask: list[bool] | None = None,
    logger: logging.Logger | None = None,
) -> list[bool]:
    """Mark every matching line and the context window around it.

    The predicate is called exactly once per line, in order. Each match at
    index i marks [max(0, i - before), min(len(lines) - 1, i + after)].
    Marking only ever sets lines to True, so overlapping windows merge and
    passing an existing mask back in is idempotent.
    """
    log = logger or _default_logger
    n = len(lines)
    selected = [False] * n if mask is None else mask
    for i, line in enumerate(lines):
        if not matches(line):
            continue
        log.debug("match: line %d: %s", i, line)
        start = max(0, i - before)
        end = min(n, i + after + 1)
        selected[start:end] = [True] * (end - start)
    return selected


def emit(lines: Sequence[str], mask: Sequence[bool], with_line_numbers: bool = False) -> list[OutputRecord]:
    """Project the selected lines into output records, in original order.

    Indices are the original zero-based positions; gaps are never renumbered.
    """
    return [
        OutputRecord(text=line, index=i if with_line_numbers else None)
        for i, (line, selected) in enumerate(zip(lines, mask, strict=True))
        if selected
    ]
