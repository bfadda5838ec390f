"""
Tests for the demo main window.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402

from textvalidation.core.criteria import ValidationKind  # noqa: E402
from textvalidation.gui.main_window import MainWindow, strip_non_digits  # noqa: E402
from textvalidation.gui.validation import ValidatedCompleterLineEdit  # noqa: E402


@pytest.fixture
def window(qtbot):
    win = MainWindow()
    qtbot.addWidget(win)
    return win


class TestMainWindow:
    """Test the demo window wiring."""

    def test_fields_configured(self, window):
        assert window.windowTitle() == "Validated Text Fields"
        assert window.name_edit.controller.criterion.kind is ValidationKind.NON_EMPTY
        assert window.email_edit.controller.criterion.kind is ValidationKind.EMAIL
        assert isinstance(window.email_edit, ValidatedCompleterLineEdit)
        assert window.color_edit.controller.criterion.kind is ValidationKind.HEX_COLOR
        assert window.amount_edit.controller.sanitizer is strip_non_digits

    def test_validate_all_empty(self, window):
        assert window.on_validate_clicked() is False
        assert window.result_label.text() == "4 field(s) need attention"

    def test_validate_all_valid(self, window):
        window.name_edit.setText("Ada")
        window.email_edit.setText("ada@example.com")
        window.color_edit.setText("#abc")
        window.amount_edit.setText("42")

        assert window.on_validate_clicked() is True
        assert window.result_label.text() == "All fields are valid"

    def test_validate_button_click(self, qtbot, window):
        window.name_edit.setText("Ada")

        with qtbot.waitSignal(window.email_edit.invalidInputIndicated, timeout=1000):
            window.validate_button.click()

        assert window.result_label.text() == "3 field(s) need attention"

    def test_amount_sanitized(self, window):
        window.amount_edit.setText("1,024")

        window.amount_edit.sanitize()

        assert window.amount_edit.text() == "1024"


def test_strip_non_digits():
    assert strip_non_digits("a1b2٣") == "12"
