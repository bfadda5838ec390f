"""
GUI-specific utilities for validated text fields.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    clear_field_error,
    set_field_error,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "clear_field_error",
    "set_field_error",
]
