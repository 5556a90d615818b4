"""Tests for option validation."""

from __future__ import annotations

import logging

import pytest

from notorious.errors import ConfigurationError, PatternError
from notorious.matchers import FoldedLiteralMatcher, LiteralMatcher, RegexMatcher
from notorious.models import ContextWindow, MatchMode
from notorious.options import build_options, resolve_context


class TestResolveContext:
    def test_defaults(self) -> None:
        assert resolve_context() == ContextWindow(before=0, after=0)

    def test_before_and_after(self) -> None:
        assert resolve_context(before=2, after=5) == ContextWindow(before=2, after=5)

    def test_context_sets_both(self) -> None:
        assert resolve_context(context=3) == ContextWindow(before=3, after=3)

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"context": -1}, "flag -C must be nonnegative, but got -1"),
            ({"before": -2}, "flag -B must be nonnegative, but got -2"),
            ({"after": -3}, "flag -A must be nonnegative, but got -3"),
        ],
    )
    def test_negative_rejected(self, kwargs: dict[str, int], message: str) -> None:
        with pytest.raises(ConfigurationError, match=message):
            resolve_context(**kwargs)

    def test_context_and_before_conflict(self) -> None:
        with pytest.raises(ConfigurationError, match="flags -B and -C are mutually exclusive"):
            resolve_context(before=1, context=2)

    def test_context_and_after_conflict(self) -> None:
        with pytest.raises(ConfigurationError, match="flags -A and -C are mutually exclusive"):
            resolve_context(after=1, context=2)

    def test_zero_context_with_before_is_fine(self) -> None:
        assert resolve_context(before=4, context=0) == ContextWindow(before=4, after=0)


class TestBuildOptions:
    def test_default_regex(self) -> None:
        options = build_options(["fo+"])
        assert options.mode == MatchMode.REGEX
        assert options.pattern == "fo+"
        assert isinstance(options.matches, RegexMatcher)
        assert options.matches("xfooo")
        assert options.context == ContextWindow()
        assert options.line_numbers is False
        assert options.verbose is False

    def test_flags_carried(self) -> None:
        options = build_options(["x"], before=1, after=2, line_numbers=True, verbose=True)
        assert options.context == ContextWindow(before=1, after=2)
        assert options.line_numbers is True
        assert options.verbose is True

    def test_literal(self) -> None:
        options = build_options(["a.b"], literal=True)
        assert isinstance(options.matches, LiteralMatcher)
        assert options.mode == MatchMode.LITERAL

    def test_literal_ignore_case(self) -> None:
        options = build_options(["ABC"], literal=True, ignore_case=True)
        assert isinstance(options.matches, FoldedLiteralMatcher)
        assert options.matches("abc")

    def test_missing_pattern(self) -> None:
        with pytest.raises(ConfigurationError, match="expected an argument PATTERN"):
            build_options([])

    def test_empty_pattern(self) -> None:
        with pytest.raises(ConfigurationError, match="expected an argument PATTERN"):
            build_options([""])

    def test_too_many_patterns(self) -> None:
        with pytest.raises(ConfigurationError, match="more than one positional argument"):
            build_options(["foo", "bar"])

    def test_too_many_patterns_message(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            build_options(["foo", "bar", "baz"])
        assert "but got 3" in str(excinfo.value)
        assert "before the positional arguments" not in str(excinfo.value)

    def test_bad_pattern(self) -> None:
        with pytest.raises(PatternError):
            build_options(["(unclosed"])

    def test_bad_posix_pattern(self) -> None:
        with pytest.raises(PatternError, match="posix"):
            build_options([r"\w+"], posix=True)

    def test_options_are_frozen(self) -> None:
        options = build_options(["foo"])
        with pytest.raises(ValueError, match="frozen"):
            options.line_numbers = True  # type: ignore[misc]

    def test_copy_with_update(self) -> None:
        options = build_options(["foo"])
        numbered = options.model_copy(update={"line_numbers": True})
        assert numbered.line_numbers is True
        assert options.line_numbers is False

    def test_logs_context_and_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("notorious.test.options")
        with caplog.at_level(logging.DEBUG, logger="notorious.test.options"):
            build_options(["foo"], context=2, posix=True, ignore_case=True, logger=logger)
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["context: before=2 after=2", "mode: posix-ignore-case"]
