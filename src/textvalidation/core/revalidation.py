"""
Revalidation state machine.

Tracks whether the last match result is still trustworthy for the current
text so repeated validity reads do not re-run the matcher.
"""

from __future__ import annotations

from enum import Enum

from .pattern_compiler import CompiledMatcher


class RevalidationPhase(Enum):
    """Whether a cached result may be reused."""

    DIRTY = "dirty"
    CLEAN = "clean"


class RevalidationState:
    """
    Dirty/Clean cache of a single boolean match result.

    Starts dirty so the first evaluation always matches. Text or criterion
    changes move it back to dirty; an evaluation while dirty matches and
    leaves it clean with the new result.
    """

    def __init__(self) -> None:
        self._phase = RevalidationPhase.DIRTY
        self._last_result = False

    @property
    def phase(self) -> RevalidationPhase:
        return self._phase

    @property
    def is_dirty(self) -> bool:
        return self._phase is RevalidationPhase.DIRTY

    @property
    def last_result(self) -> bool:
        """Most recent match outcome; only meaningful while clean."""
        return self._last_result

    def mark_dirty(self) -> None:
        """Invalidate the cached result. Calling it repeatedly is harmless."""
        self._phase = RevalidationPhase.DIRTY

    def evaluate(self, text: str, matcher: CompiledMatcher) -> bool:
        """
        Return the validity of ``text``.

        Runs the matcher only while dirty; a clean state returns the cached
        result without looking at ``text``.
        """
        if self._phase is RevalidationPhase.DIRTY:
            self._last_result = matcher.matches(text)
            self._phase = RevalidationPhase.CLEAN
        return self._last_result

    def __repr__(self) -> str:
        if self.is_dirty:
            return "RevalidationState(DIRTY)"
        return f"RevalidationState(CLEAN({self._last_result}))"
