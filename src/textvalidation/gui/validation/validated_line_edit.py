"""
QLineEdit host adapters for the validation engine.

The widgets here only translate Qt events into controller calls: text edits
mark the controller dirty, focus loss and an unmodified Down key offer the
sanitizer a chance to fix the text, and a failed ``show_validity`` focuses
the field and plays its indicator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from PySide6.QtCore import QStringListModel, Qt, Signal
from PySide6.QtGui import QFocusEvent, QKeyEvent
from PySide6.QtWidgets import QCompleter, QLineEdit, QWidget

from textvalidation.core.config import FieldConfig
from textvalidation.core.controller import ValidationController
from textvalidation.core.criteria import ValidationKind
from textvalidation.core.host import bind_host, check_host, show_host
from textvalidation.core.sanitizer import Sanitizer
from textvalidation.gui.widgets.indicators import InvalidInputIndicator, create_indicator


class ValidatedLineEdit(QLineEdit):
    """
    A QLineEdit that validates its text and indicates invalid input.

    Set the criterion with ``set_validation`` (predefined kind) or
    ``set_validation_criteria`` (regular expression), or pass a FieldConfig.
    To sanitize invalid input, bind a callable with ``set_on_fix_text``.
    """

    # Signals
    invalidInputIndicated = Signal()
    textSanitized = Signal(str, str)  # original, replacement

    def __init__(
        self,
        parent: QWidget | None = None,
        config: FieldConfig | None = None,
        controller: ValidationController | None = None,
    ):
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        config = config or FieldConfig()

        self._controller = controller or ValidationController.from_config(config)
        self._indicator: InvalidInputIndicator | None = create_indicator(config.indicator, self)
        bind_host(self._controller, self)

        self.textChanged.connect(self._on_text_changed)

    @property
    def controller(self) -> ValidationController:
        return self._controller

    @property
    def invalid_input_indicator(self) -> InvalidInputIndicator | None:
        return self._indicator

    def set_validation(self, kind: ValidationKind | None) -> None:
        """Use a predefined validation; ``None`` means non-empty."""
        self._controller.set_kind(kind)

    def set_validation_criteria(self, pattern: str | None) -> None:
        """Use a regular expression the whole text must match."""
        self._controller.set_custom_pattern(pattern)

    def set_on_fix_text(self, sanitizer: Sanitizer | None) -> None:
        """Bind the callable that fixes invalid text when the field is left."""
        self._controller.bind_sanitizer(sanitizer)

    def set_invalid_input_indicator(self, indicator: InvalidInputIndicator | str | None) -> None:
        """Replace the indicator, by instance or by name (``"shake"``, ``"highlight"``, ``"none"``)."""
        if self._indicator is not None:
            self._indicator.reset()
        if isinstance(indicator, str):
            indicator = create_indicator(indicator, self)
        self._indicator = indicator

    def check_validity(self) -> bool:
        """Check the text without showing anything to the user."""
        return check_host(self._controller, self)

    def show_validity(self) -> bool:
        """Check the text and indicate to the user when it is invalid."""
        return show_host(self._controller, self)

    def indicate_invalid_input(self) -> None:
        """Focus the field and play its indicator."""
        self.setFocus(Qt.FocusReason.OtherFocusReason)
        if self._indicator is not None:
            self._indicator.play()
        self.invalidInputIndicated.emit()

    def sanitize(self) -> bool:
        """
        Run one sanitization attempt on the current text.

        Returns:
            True if the text was replaced
        """
        original = self.text()
        replacement = self._controller.notify_sanitization_trigger(original)
        if replacement == original:
            return False

        # textChanged marks the controller dirty again
        self.setText(replacement)
        self.textSanitized.emit(original, replacement)
        return True

    def focusOutEvent(self, event: QFocusEvent) -> None:
        super().focusOutEvent(event)
        self.sanitize()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Down and event.modifiers() == Qt.KeyboardModifier.NoModifier:
            self.sanitize()
        super().keyPressEvent(event)

    def _on_text_changed(self, _text: str) -> None:
        self._controller.notify_text_changed()
        if self._indicator is not None:
            self._indicator.reset()


class ValidatedCompleterLineEdit(ValidatedLineEdit):
    """
    A ValidatedLineEdit that suggests completions while the user types.

    Suggestions are shown in a popup; choosing one replaces the text, which
    is then validated like any other edit.
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        config: FieldConfig | None = None,
        controller: ValidationController | None = None,
        suggestions: Iterable[str] = (),
    ):
        super().__init__(parent, config, controller)
        self._model = QStringListModel(list(suggestions), self)
        completer = QCompleter(self._model, self)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        completer.setCompletionMode(QCompleter.CompletionMode.PopupCompletion)
        self.setCompleter(completer)

    def set_suggestions(self, suggestions: Iterable[str]) -> None:
        self._model.setStringList(list(suggestions))

    def suggestions(self) -> list[str]:
        return self._model.stringList()
