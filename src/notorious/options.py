"""Validation of command-line options into an Options model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notorious.errors import ConfigurationError
from notorious.matchers import build_matcher, resolve_mode
from notorious.models import ContextWindow, Options

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence


def resolve_context(before: int = 0, after: int = 0, context: int = 0) -> ContextWindow:
    """Combine -B, -A and -C into a context window.

    -C sets both sides and may not be combined with a nonzero -A or -B.
    """
    if context < 0:
        msg = f"flag -C must be nonnegative, but got {context}"
        raise ConfigurationError(msg)
    if before < 0:
        msg = f"flag -B must be nonnegative, but got {before}"
        raise ConfigurationError(msg)
    if after < 0:
        msg = f"flag -A must be nonnegative, but got {after}"
        raise ConfigurationError(msg)
    if context and before:
        msg = "flags -B and -C are mutually exclusive"
        raise ConfigurationError(msg)
    if context and after:
        msg = "flags -A and -C are mutually exclusive"
        raise ConfigurationError(msg)
    if context:
        return ContextWindow(before=context, after=context)
    return ContextWindow(before=before, after=after)


def _single_pattern(args: Sequence[str]) -> str:
    if not args or not args[0]:
        msg = "expected an argument PATTERN"
        raise ConfigurationError(msg)
    if len(args) > 1:
        msg = (
            f"notorious does not support more than one positional argument, but got {len(args)}. "
            "Quote the pattern if it contains spaces"
        )
        raise ConfigurationError(msg)
    return args[0]


def build_options(  # noqa: PLR0913
    args: Sequence[str],
    *,
    before: int = 0,
    after: int = 0,
    context: int = 0,
    ignore_case: bool = False,
    line_numbers: bool = False,
    literal: bool = False,
    posix: bool = False,
    verbose: bool = False,
    logger: logging.Logger | None = None,
) -> Options:
    """Validate raw flag values and positional arguments into Options.

    Raises ConfigurationError (or its PatternError subclass) on invalid input.
    """
    pattern = _single_pattern(args)
    window = resolve_context(before=before, after=after, context=context)
    mode = resolve_mode(literal=literal, posix=posix, ignore_case=ignore_case)
    if logger is not None:
        logger.debug("context: before=%d after=%d", window.before, window.after)
        logger.debug("mode: %s", mode)

    return Options(
        matches=build_matcher(pattern, mode),
        context=window,
        line_numbers=line_numbers,
        verbose=verbose,
        pattern=pattern,
        mode=mode,
    )
