"""
Reusable widgets for validated text fields.
"""

from .indicators import HighlightIndicator, InvalidInputIndicator, ShakeIndicator, create_indicator

__all__ = [
    "HighlightIndicator",
    "InvalidInputIndicator",
    "ShakeIndicator",
    "create_indicator",
]
