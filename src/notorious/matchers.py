"""Line matchers: literal, case-folded literal and regular expressions."""

from __future__ import annotations

import re
from typing import Protocol

from notorious.errors import PatternError
from notorious.models import MatchMode

# Outside a bracket expression these are the ERE metacharacters; everything
# else is escaped before it reaches the re module.
_ERE_SPECIALS = frozenset(".[]()*+?{}|^$\\")
_REPEAT_BOUND_RE = re.compile(r"\{\d+(,\d*)?\}")

_PERL_ESCAPES = frozenset("dDwWsSbBAZz")
_CONTROL_ESCAPES = frozenset("afnrtv")

_POSIX_CLASSES: dict[str, str] = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": r" \t\n\r\f\v",
    "blank": r" \t",
    "punct": r"!-/:-@\[-`{-~",
    "xdigit": "0-9A-Fa-f",
    "cntrl": r"\x00-\x1f\x7f",
    "print": r"\x20-\x7e",
    "graph": r"\x21-\x7e",
    "word": "a-zA-Z0-9_",
}

# Characters that carry meaning inside a Python character class (or trigger
# set-operation warnings) and must be escaped when they are literal in POSIX.
_CLASS_ESCAPES = frozenset("\\[]^&~|")


class Matcher(Protocol):
    """Anything that can decide whether a line matches."""

    def __call__(self, line: str) -> bool: ...


class LiteralMatcher:
    """Matches lines equal to the pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def __call__(self, line: str) -> bool:
        return line == self.pattern

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.pattern!r})"


class FoldedLiteralMatcher:
    """Matches lines equal to the pattern, ignoring case."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._lowered = pattern.lower()

    def __call__(self, line: str) -> bool:
        return line.lower() == self._lowered

    def __repr__(self) -> str:
        return f"FoldedLiteralMatcher({self.pattern!r})"


class RegexMatcher:
    """Matches lines containing a match of a compiled regular expression."""

    def __init__(self, compiled: re.Pattern[str]) -> None:
        self.compiled = compiled

    def __call__(self, line: str) -> bool:
        return self.compiled.search(line) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.compiled.pattern!r})"


def resolve_mode(*, literal: bool = False, posix: bool = False, ignore_case: bool = False) -> MatchMode:
    """Pick the matching mode for a combination of flags. Literal wins over posix."""
    if literal:
        return MatchMode.LITERAL_IGNORE_CASE if ignore_case else MatchMode.LITERAL
    if posix:
        return MatchMode.POSIX_IGNORE_CASE if ignore_case else MatchMode.POSIX
    return MatchMode.REGEX_IGNORE_CASE if ignore_case else MatchMode.REGEX


def _translate_escape(pattern: str, i: int) -> str:
    """Translate the escape sequence starting at pattern[i] (a backslash)."""
    if i + 1 >= len(pattern):
        raise PatternError(pattern, MatchMode.POSIX, "trailing backslash at end of expression")
    char = pattern[i + 1]
    if char in _PERL_ESCAPES:
        raise PatternError(pattern, MatchMode.POSIX, f"escape sequence \\{char} is not POSIX")
    if char in _CONTROL_ESCAPES:
        return "\\" + char
    if char.isalnum():
        raise PatternError(pattern, MatchMode.POSIX, f"invalid escape sequence \\{char}")
    return re.escape(char)


def _translate_bracket(pattern: str, start: int) -> tuple[str, int]:
    """Translate the bracket expression opening at pattern[start].

    Returns the Python character class and the index just past the closing ``]``.
    """
    i = start + 1
    parts = ["["]
    if i < len(pattern) and pattern[i] == "^":
        parts.append("^")
        i += 1
    # A "]" right after "[" or "[^" is a literal member of the set.
    if i < len(pattern) and pattern[i] == "]":
        parts.append("\\]")
        i += 1

    while i < len(pattern):
        char = pattern[i]
        if char == "]":
            parts.append("]")
            return "".join(parts), i + 1
        if pattern.startswith("[:", i):
            end = pattern.find(":]", i + 2)
            if end == -1:
                raise PatternError(pattern, MatchMode.POSIX, "missing closing :] in character class")
            name = pattern[i + 2 : end]
            if name not in _POSIX_CLASSES:
                raise PatternError(pattern, MatchMode.POSIX, f"invalid character class [:{name}:]")
            parts.append(_POSIX_CLASSES[name])
            i = end + 2
        elif char == "\\":
            parts.append(_translate_escape(pattern, i))
            i += 2
        else:
            parts.append("\\" + char if char in _CLASS_ESCAPES else char)
            i += 1

    raise PatternError(pattern, MatchMode.POSIX, "missing closing ] in bracket expression")


def translate_posix(pattern: str) -> str:
    """Translate a POSIX extended regular expression into ``re`` syntax.

    Perl-only syntax such as ``(?i)``, ``\\d`` or lazy quantifiers is rejected
    with a PatternError. Named classes like ``[[:digit:]]`` are expanded.
    """
    out: list[str] = []
    after_repeat = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        repeat = False
        if char == "\\":
            out.append(_translate_escape(pattern, i))
            i += 2
        elif char == "[":
            translated, i = _translate_bracket(pattern, i)
            out.append(translated)
        elif char == "(":
            if pattern.startswith("(?", i):
                raise PatternError(pattern, MatchMode.POSIX, "(?...) groups are not POSIX")
            out.append(char)
            i += 1
        elif char in "*+?":
            repeat = True
            out.append(char)
            i += 1
        elif char == "{" and (bound := _REPEAT_BOUND_RE.match(pattern, i)):
            repeat = True
            out.append(bound.group())
            i = bound.end()
        elif char in _ERE_SPECIALS and char not in "{}":
            out.append(char)
            i += 1
        else:
            out.append(re.escape(char))
            i += 1

        if repeat and after_repeat:
            raise PatternError(pattern, MatchMode.POSIX, "invalid nested repetition operator")
        after_repeat = repeat

    return "".join(out)


def build_matcher(pattern: str, mode: MatchMode) -> Matcher:
    """Build the matcher for pattern in the given mode.

    Raises PatternError if the pattern does not compile.
    """
    if mode == MatchMode.LITERAL:
        return LiteralMatcher(pattern)
    if mode == MatchMode.LITERAL_IGNORE_CASE:
        return FoldedLiteralMatcher(pattern)

    source = pattern
    if mode in (MatchMode.POSIX, MatchMode.POSIX_IGNORE_CASE):
        source = translate_posix(pattern)
    flags = re.IGNORECASE if mode.ignore_case else 0
    try:
        compiled = re.compile(source, flags)
    except re.error as e:
        raise PatternError(pattern, mode, str(e)) from e
    return RegexMatcher(compiled)
