"""Exceptions raised while configuring notorious."""

from __future__ import annotations


class NotoriousError(Exception):
    """Base class for notorious errors."""


class ConfigurationError(NotoriousError):
    """Invalid or conflicting command-line options."""


class PatternError(ConfigurationError):
    """A pattern that does not compile in the selected matching mode."""

    def __init__(self, pattern: str, mode: str, reason: str) -> None:
        self.pattern = pattern
        self.mode = mode
        self.reason = reason
        super().__init__(f"could not compile {mode} pattern from {pattern!r}: {reason}")
