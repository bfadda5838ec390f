"""
Error taxonomy for the text validation engine.

Invalid input is never an error here: it is an ordinary ``False`` result.
The exceptions below describe the few conditions that are exceptional,
a malformed custom pattern, a malformed configuration record and a failing
host sanitizer, and give them the structured metadata the error handler logs.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    VALIDATION = "validation"
    CONFIG = "config"
    SANITIZER = "sanitizer"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for the conditions the engine reports."""

    # Criterion errors
    INVALID_PATTERN = "INVALID_PATTERN"
    EMPTY_PATTERN = "EMPTY_PATTERN"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    UNKNOWN_KIND = "UNKNOWN_KIND"

    # Host callback errors
    SANITIZER_FAILED = "SANITIZER_FAILED"

    # Anything the engine did not anticipate
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    Root of all custom errors raised or reported by the engine.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message='{self.user_message}')"


class ValidationError(BaseAppError):
    """A validation criterion could not be put into effect."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


class PatternError(ValidationError):
    """
    A custom criterion could not be compiled into a matcher.

    The controller recovers from this locally by falling back to the
    non-empty criterion; it is only ever logged, never raised to the host.
    """

    def __init__(
        self,
        pattern: str | None,
        reason: str,
        position: int | None = None,
        code: ErrorCode = ErrorCode.INVALID_PATTERN,
    ):
        context: dict[str, Any] = {"pattern": pattern}
        if position is not None:
            context["position"] = position

        super().__init__(
            code=code,
            user_message=f"Invalid validation pattern: {reason}",
            technical_message=f"Could not compile {pattern!r}: {reason}",
            severity=ErrorSeverity.LOW,
            context=context,
        )

    @property
    def pattern(self) -> str | None:
        """The pattern string that failed to compile."""
        return self.context.get("pattern")

    @property
    def position(self) -> int | None:
        """Offset into the pattern where compilation failed, if known."""
        return self.context.get("position")


class ConfigError(BaseAppError):
    """A field configuration record is malformed."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=ErrorSeverity.MEDIUM,
            context=context or {},
        )


class SanitizerError(BaseAppError):
    """A host-supplied sanitizer raised while fixing invalid text."""

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SANITIZER,
            code=ErrorCode.SANITIZER_FAILED,
            user_message=user_message,
            technical_message=technical_message,
            severity=ErrorSeverity.MEDIUM,
            context=context or {},
        )


class AppSystemError(BaseAppError):
    """An exception the engine has no dedicated error for."""

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=ErrorCode.UNKNOWN,
            user_message=user_message,
            technical_message=technical_message,
            severity=ErrorSeverity.HIGH,
            context=context or {},
        )


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map an exception to an application error.

    Args:
        exc: The exception to map
        context: Optional context information merged into the error

    Returns:
        The error itself for application errors, a PatternError for
        ``re.error``, otherwise an AppSystemError
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        exc.context.update(context)
        return exc

    # re.error carries the offending pattern and offset
    if isinstance(exc, re.error):
        pattern = exc.pattern if isinstance(exc.pattern, str) else None
        error: BaseAppError = PatternError(pattern, exc.msg, exc.pos)
        error.context.update(context)
        return error

    logger.warning(f"Unexpected exception type: {type(exc).__name__}: {exc}")
    return AppSystemError(
        user_message="An unexpected error occurred",
        technical_message=f"{type(exc).__name__}: {exc}",
        context=context,
    )
