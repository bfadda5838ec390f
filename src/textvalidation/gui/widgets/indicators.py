"""
Invalid-input indicators for validated fields.

An indicator is what the user sees when ``show_validity`` fails: by default
a short horizontal shake of the field, or a highlighted error style.
"""

from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QAbstractAnimation, QEasingCurve, QObject, QPoint, QPropertyAnimation
from PySide6.QtWidgets import QWidget

from textvalidation.gui.utils.styling import clear_field_error, set_field_error


class InvalidInputIndicator(Protocol):
    """Protocol for objects that can signal invalid input on a widget."""

    def play(self) -> None: ...
    def reset(self) -> None: ...


class ShakeIndicator(QObject):
    """
    Shakes a widget horizontally.

    The widget moves ``distance`` pixels to either side of its position for
    ``cycles`` oscillations over ``duration_ms`` and returns to where it was.
    """

    def __init__(
        self,
        widget: QWidget,
        distance: int = 10,
        cycles: int = 7,
        duration_ms: int = 1000,
    ):
        super().__init__(widget)
        self._widget = widget
        self._distance = distance
        self._cycles = max(1, cycles)
        self._origin: QPoint | None = None

        self.animation = QPropertyAnimation(widget, b"pos", self)
        self.animation.setDuration(duration_ms)
        self.animation.setEasingCurve(QEasingCurve.Type.Linear)
        self.animation.finished.connect(self._restore_origin)

    def is_playing(self) -> bool:
        return self.animation.state() == QAbstractAnimation.State.Running

    def play(self) -> None:
        """Start the shake, restarting it if it is already running."""
        if self.is_playing():
            self.animation.stop()
            self._restore_origin()

        origin = self._widget.pos()
        self._origin = QPoint(origin)

        steps = self._cycles * 2
        self.animation.setStartValue(origin)
        for step in range(1, steps):
            offset = self._distance if step % 2 else -self._distance
            self.animation.setKeyValueAt(step / steps, origin + QPoint(offset, 0))
        self.animation.setEndValue(origin)
        self.animation.start()

    def reset(self) -> None:
        """Stop any running shake and put the widget back."""
        self.animation.stop()
        self._restore_origin()

    def _restore_origin(self) -> None:
        if self._origin is not None:
            self._widget.move(self._origin)
            self._origin = None


class HighlightIndicator:
    """Marks a widget with the error style until reset."""

    def __init__(self, widget: QWidget, message: str = "Invalid input"):
        self._widget = widget
        self.message = message
        self.active = False

    def play(self) -> None:
        set_field_error(self._widget, self.message)
        self.active = True

    def reset(self) -> None:
        if self.active:
            clear_field_error(self._widget)
            self.active = False


def create_indicator(name: str, widget: QWidget) -> InvalidInputIndicator | None:
    """
    Build the indicator configured by name.

    Args:
        name: One of ``"shake"``, ``"highlight"`` or ``"none"``
        widget: Widget the indicator acts on

    Returns:
        Indicator instance, or None for ``"none"``
    """
    if name == "shake":
        return ShakeIndicator(widget)
    if name == "highlight":
        return HighlightIndicator(widget)
    if name == "none":
        return None
    raise ValueError(f"Unknown invalid input indicator: '{name}'")
