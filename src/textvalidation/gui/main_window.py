"""
Demo window for validated text fields.

Shows one field per common criterion and a button that validates them all,
playing the indicator on every invalid field.
"""

import logging

from PySide6.QtWidgets import QFormLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from textvalidation.core.config import FieldConfig
from textvalidation.core.criteria import ValidationKind
from textvalidation.gui.utils.styling import StyleSheets
from textvalidation.gui.validation import ValidatedCompleterLineEdit, ValidatedLineEdit

logger = logging.getLogger(__name__)


def strip_non_digits(text: str) -> str:
    """Sanitizer for numeric fields."""
    return "".join(c for c in text if c.isascii() and c.isdigit())


class MainWindow(QMainWindow):
    """Main demo window."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Validated Text Fields")

        self.name_edit = ValidatedLineEdit(config=FieldConfig())
        self.name_edit.setPlaceholderText("Required")

        self.email_edit = ValidatedCompleterLineEdit(
            config=FieldConfig(kind=ValidationKind.EMAIL, indicator="highlight"),
            suggestions=["someone@example.com", "support@example.org"],
        )
        self.email_edit.setPlaceholderText("name@example.com")

        self.color_edit = ValidatedLineEdit(config=FieldConfig(kind=ValidationKind.HEX_COLOR))
        self.color_edit.setPlaceholderText("#RRGGBB")

        self.amount_edit = ValidatedLineEdit(config=FieldConfig(kind=ValidationKind.NUMERIC))
        self.amount_edit.setPlaceholderText("Digits only, fixed when you leave the field")
        self.amount_edit.set_on_fix_text(strip_non_digits)

        self.fields = [self.name_edit, self.email_edit, self.color_edit, self.amount_edit]

        self.validate_button = QPushButton("Validate")
        self.validate_button.setStyleSheet(StyleSheets.get_button_style())
        self.validate_button.clicked.connect(self.on_validate_clicked)

        self.result_label = QLabel()

        form = QFormLayout()
        form.addRow("Name", self.name_edit)
        form.addRow("E-mail", self.email_edit)
        form.addRow("Color", self.color_edit)
        form.addRow("Amount", self.amount_edit)

        layout = QVBoxLayout()
        layout.addLayout(form)
        layout.addWidget(self.validate_button)
        layout.addWidget(self.result_label)

        central = QWidget()
        central.setLayout(layout)
        central.setStyleSheet(StyleSheets.get_field_error_style())
        self.setCentralWidget(central)

    def on_validate_clicked(self) -> bool:
        """Validate every field and report how many are invalid."""
        # Every field must get its indicator, so no short-circuit
        results = [field.show_validity() for field in self.fields]
        invalid = results.count(False)

        if invalid:
            self.result_label.setText(f"{invalid} field(s) need attention")
        else:
            self.result_label.setText("All fields are valid")
        logger.info(f"Validated {len(results)} fields, {invalid} invalid")
        return invalid == 0
