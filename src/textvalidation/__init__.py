"""
Validated text fields.

A validation engine for single editable text fields, with PySide6 host
adapters that play an indicator on invalid input and sanitize it on demand.
"""

__version__ = "0.3.0"
