"""
Compilation of criterion patterns into reusable matchers.
"""

from __future__ import annotations

import re

from .errors import ErrorCode, PatternError


class CompiledMatcher:
    """
    Compiled form of a pattern performing full-string matches.

    ``match_count`` counts every call to ``matches`` so callers can observe
    how often matching actually happens.
    """

    def __init__(self, pattern: str | None, regex: re.Pattern[str] | None):
        self.pattern = pattern
        self._regex = regex
        self.match_count = 0

    @classmethod
    def nothing(cls) -> CompiledMatcher:
        """A matcher that rejects every input."""
        return cls(None, None)

    def matches(self, text: str) -> bool:
        """Return True if the entire text satisfies the pattern."""
        self.match_count += 1
        if self._regex is None:
            return False
        return self._regex.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"CompiledMatcher(pattern={self.pattern!r})"


def compile_pattern(pattern: str | None, *, allow_empty: bool = False) -> CompiledMatcher:
    """
    Compile a pattern string into a matcher.

    Args:
        pattern: Regular expression that valid text must fully match
        allow_empty: Accept a missing or empty pattern and return a matcher
            that rejects everything

    Returns:
        CompiledMatcher for the pattern

    Raises:
        PatternError: If the pattern is empty (and not allowed) or malformed
    """
    if not pattern:
        if allow_empty:
            return CompiledMatcher.nothing()
        raise PatternError(pattern, "pattern is empty", code=ErrorCode.EMPTY_PATTERN)

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, e.msg, e.pos) from e

    return CompiledMatcher(pattern, regex)
