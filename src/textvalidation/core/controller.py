"""
Validation controller for a single editable text field.

This module ties the criteria catalog, pattern compiler, revalidation state
and sanitization hook together behind the operations a host widget calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import FieldConfig
from .criteria import DEFAULT_CRITERION, Criterion, ValidationKind
from .error_handler import get_error_handler
from .errors import PatternError
from .pattern_compiler import CompiledMatcher, compile_pattern
from .revalidation import RevalidationState
from .sanitizer import Sanitizer, run_sanitizer

IndicatorCallback = Callable[[], None]


class ValidationController:
    """
    Validation engine for one text field.

    The host reports text changes with ``notify_text_changed`` and reads
    validity with ``check_validity`` or ``show_validity``. Results are cached
    until the text or the criterion changes. A field always has an active
    criterion; it starts as non-empty and a malformed custom pattern falls
    back to non-empty instead of raising.
    """

    def __init__(self, criterion: Criterion | None = None):
        self._logger = logging.getLogger(__name__)
        self._error_handler = get_error_handler()
        self._criterion = DEFAULT_CRITERION
        self._matcher = compile_pattern(DEFAULT_CRITERION.pattern)
        self._state = RevalidationState()
        self._sanitizer: Sanitizer | None = None
        self._indicator: IndicatorCallback | None = None

        if criterion is not None:
            self.set_criterion(criterion)

    @classmethod
    def from_config(cls, config: FieldConfig | None) -> ValidationController:
        """Create a controller from a configuration record."""
        config = config or FieldConfig()
        return cls(config.resolve_criterion())

    @property
    def criterion(self) -> Criterion:
        return self._criterion

    @property
    def matcher(self) -> CompiledMatcher:
        return self._matcher

    @property
    def state(self) -> RevalidationState:
        return self._state

    @property
    def sanitizer(self) -> Sanitizer | None:
        return self._sanitizer

    def set_criterion(self, criterion: Criterion) -> None:
        """
        Replace the active criterion and recompile its matcher.

        A pattern that fails to compile is reported to the error handler and
        the field falls back to the non-empty criterion.
        """
        try:
            matcher = compile_pattern(criterion.pattern)
        except PatternError as e:
            self._logger.warning(f"Falling back to non-empty validation: {e.technical_message}")
            self._error_handler.handle(e, {"criterion": criterion.describe()})
            criterion = DEFAULT_CRITERION
            matcher = compile_pattern(DEFAULT_CRITERION.pattern)

        self._criterion = criterion
        self._matcher = matcher
        self._state.mark_dirty()
        self._logger.debug(f"Criterion set to {criterion.describe()}")

    def set_kind(self, kind: ValidationKind | None) -> None:
        """Use a predefined criterion; ``None`` selects non-empty."""
        self.set_criterion(Criterion.of_kind(kind if kind is not None else ValidationKind.NON_EMPTY))

    def set_custom_pattern(self, pattern: str | None) -> None:
        """Use a custom regular expression as the criterion; ``None`` is treated as empty."""
        self.set_criterion(Criterion.custom(pattern if pattern is not None else ""))

    def notify_text_changed(self) -> None:
        """Record that the observed text changed since the last read."""
        self._state.mark_dirty()

    def check_validity(self, text: str) -> bool:
        """
        Check whether the text is valid without any visible feedback.

        Args:
            text: The field's current text

        Returns:
            True if the text satisfies the active criterion
        """
        return self._state.evaluate(text, self._matcher)

    def show_validity(self, text: str) -> bool:
        """
        Check whether the text is valid and signal the host on failure.

        Args:
            text: The field's current text

        Returns:
            True if valid; False after the indicator callback was invoked
        """
        if self.check_validity(text):
            return True

        if self._indicator is not None:
            self._indicator()
        return False

    def notify_sanitization_trigger(self, text: str) -> str:
        """
        Offer the bound sanitizer a chance to fix invalid text.

        The sanitizer runs at most once and its output is returned without
        being validated again. The host writes the result back and then
        reports the change through ``notify_text_changed``.

        Args:
            text: The field's current text

        Returns:
            The replacement text, or ``text`` unchanged
        """
        if self.check_validity(text) or self._sanitizer is None:
            return text

        self._logger.debug(f"Sanitizing invalid text under {self._criterion.describe()}")
        return run_sanitizer(self._sanitizer, text)

    def bind_sanitizer(self, sanitizer: Sanitizer | None) -> None:
        """Replace the sanitizer binding; ``None`` removes it."""
        self._sanitizer = sanitizer

    def bind_indicator(self, indicator: IndicatorCallback | None) -> None:
        """Replace the indicator callback used by ``show_validity``."""
        self._indicator = indicator

    def __repr__(self) -> str:
        return f"ValidationController({self._criterion.describe()}, {self._state!r})"
