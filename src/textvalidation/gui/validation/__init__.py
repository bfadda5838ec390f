"""
Validated input widgets.

This package provides QLineEdit-based host adapters that delegate all
validation decisions to a ValidationController.
"""

from .validated_line_edit import ValidatedCompleterLineEdit, ValidatedLineEdit

__all__ = [
    "ValidatedCompleterLineEdit",
    "ValidatedLineEdit",
]
