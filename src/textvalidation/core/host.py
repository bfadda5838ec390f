"""
Host-side contract for validated fields.

Any widget toolkit integrates with the engine through a thin adapter that
can report its current text and render an invalid-input indicator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .controller import ValidationController


@runtime_checkable
class ValidationHost(Protocol):
    """Protocol for widgets that host a validation controller."""

    def text(self) -> str: ...
    def indicate_invalid_input(self) -> None: ...


def bind_host(controller: ValidationController, host: ValidationHost) -> None:
    """Route the controller's indicator signal to the host."""
    controller.bind_indicator(host.indicate_invalid_input)


def check_host(controller: ValidationController, host: ValidationHost) -> bool:
    """Check the host's current text without any visible feedback."""
    return controller.check_validity(host.text())


def show_host(controller: ValidationController, host: ValidationHost) -> bool:
    """Check the host's current text and indicate failure on the host."""
    return controller.show_validity(host.text())
