"""Pydantic models for notorious."""

from __future__ import annotations

from collections.abc import Callable  # noqa: TC003 - Pydantic needs this at runtime for model field resolution
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class MatchMode(StrEnum):
    """How the pattern is matched against each line."""

    LITERAL = "literal"
    LITERAL_IGNORE_CASE = "literal-ignore-case"
    REGEX = "regex"
    REGEX_IGNORE_CASE = "regex-ignore-case"
    POSIX = "posix"
    POSIX_IGNORE_CASE = "posix-ignore-case"

    @property
    def ignore_case(self) -> bool:
        """Whether this mode folds case."""
        return self.value.endswith("-ignore-case")


class ContextWindow(BaseModel):
    """Lines of context to print before and after each match."""

    model_config = ConfigDict(frozen=True)

    before: NonNegativeInt = 0
    after: NonNegativeInt = 0


class OutputRecord(BaseModel):
    """A selected line, optionally tagged with its original zero-based index."""

    model_config = ConfigDict(frozen=True)

    text: str
    index: int | None = None

    def render(self) -> str:
        if self.index is None:
            return self.text
        return f"{self.index}\t{self.text}"


class Options(BaseModel):
    """Parsed and validated options for a single run.

    Build one with ``notorious.options.build_options`` rather than by hand,
    unless a test needs a custom ``matches`` callable.
    """

    model_config = ConfigDict(frozen=True)

    matches: Callable[[str], bool]
    context: ContextWindow = ContextWindow()
    line_numbers: bool = False
    verbose: bool = False
    pattern: str = ""
    mode: MatchMode = MatchMode.REGEX
