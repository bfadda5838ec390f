"""PySide6 host adapters for the validation engine."""
