"""
Shared styling utilities for validated text fields.

This module contains the color palette and stylesheet helpers used to mark
fields as invalid, with accessibility-compliant colors.
"""

from PySide6.QtWidgets import QWidget


class AccessiblePalette:
    """
    Centralized color palette with WCAG AA accessibility compliance.

    All color combinations meet minimum contrast ratio of 4.5:1 for normal text
    and 3:1 for large text (18pt+ or 14pt+ bold).
    """

    BORDER_DEFAULT = "#dee2e6"  # Light border
    BORDER_FOCUS = "#0d6efd"  # Blue focus indicator
    BORDER_ERROR = "#dc3545"  # Error state border
    BORDER_SUCCESS = "#198754"  # Success state border

    BACKGROUND_DEFAULT = "#ffffff"  # Pure white background
    BACKGROUND_ERROR = "#f8d7da"  # Light red background

    TEXT_PRIMARY = "#212529"  # Primary text color
    TEXT_ERROR = "#721c24"  # Dark red for high contrast

    BUTTON_PRIMARY_BG = "#0d6efd"
    BUTTON_PRIMARY_TEXT = "#ffffff"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_field_error_style() -> str:
        """Stylesheet keyed on the ``hasError`` dynamic property."""
        return f"""
            QLineEdit[hasError="true"] {{
                border: 2px solid {AccessiblePalette.BORDER_ERROR};
                background-color: {AccessiblePalette.BACKGROUND_ERROR};
                color: {AccessiblePalette.TEXT_ERROR};
            }}

            QLineEdit:focus {{
                border: 2px solid {AccessiblePalette.BORDER_FOCUS};
            }}
        """

    @staticmethod
    def get_button_style() -> str:
        return f"""
            QPushButton {{
                background-color: {AccessiblePalette.BUTTON_PRIMARY_BG};
                color: {AccessiblePalette.BUTTON_PRIMARY_TEXT};
                border-radius: 4px;
                padding: 8px 16px;
                font-weight: bold;
            }}
        """


def set_field_error(widget: QWidget, message: str) -> None:
    """Mark a field as having an error and show the message as tooltip."""
    if "_original_tooltip" not in widget.__dict__:
        widget.__dict__["_original_tooltip"] = widget.toolTip()
    widget.setProperty("hasError", True)
    widget.setToolTip(f"Error: {message}")
    widget.style().polish(widget)


def clear_field_error(widget: QWidget) -> None:
    """Clear error state from a field and restore its tooltip."""
    widget.setProperty("hasError", False)
    widget.setToolTip(widget.__dict__.pop("_original_tooltip", ""))
    widget.style().polish(widget)
