"""
Sanitization hook for invalid input.

A sanitizer is a host-supplied callable that receives text which failed
validation and returns the text that should replace it. It is invoked at
most once per trigger; its output is not validated again within that
trigger.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .error_handler import get_error_handler
from .errors import SanitizerError

logger = logging.getLogger(__name__)

Sanitizer = Callable[[str], str]


def run_sanitizer(sanitizer: Sanitizer, text: str) -> str:
    """
    Invoke a sanitizer once and return its replacement text.

    A ``None`` return keeps the original text. Non-string returns are
    converted with ``str()``. If the sanitizer raises, the failure is
    reported to the error handler and the original text is kept.
    """
    try:
        replacement = sanitizer(text)
    except Exception as e:
        error = SanitizerError(
            user_message="Could not fix the entered text",
            technical_message=f"{type(e).__name__}: {e}",
            context={"text": text},
        )
        error.__cause__ = e
        get_error_handler().handle(error)
        return text

    if replacement is None:
        logger.debug("Sanitizer returned None, keeping original text")
        return text
    if not isinstance(replacement, str):
        replacement = str(replacement)

    logger.debug(f"Sanitizer replaced {text!r} with {replacement!r}")
    return replacement
