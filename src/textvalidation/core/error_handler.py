"""
Centralized error handling and logging infrastructure.

The validation engine never raises to its host. Conditions it absorbs,
malformed patterns and failing sanitizers, are passed to the singleton
ErrorHandler, which logs them at a level derived from their severity and
announces them through a Qt signal so the host can observe them.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from pathlib import Path
from typing import Any, ClassVar

from PySide6.QtCore import QObject, QStandardPaths, Signal

from .config import APP_NAME, APP_ORGANIZATION
from .errors import BaseAppError, ErrorSeverity, map_exception

# A pattern fallback is routine; a failing sanitizer or a crash is not
SEVERITY_LOG_LEVELS: dict[ErrorSeverity, int] = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

MAX_CONTEXT_VALUE_LENGTH = 200


class ErrorHandler(QObject):
    """
    Singleton sink for errors the validation engine recovers from.

    Emits ``errorOccurred`` with the normalized error after logging it.
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the error handler (called only once due to singleton)."""
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Normalize an exception into a BaseAppError with bounded context.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError ready to be logged
        """
        app_error = map_exception(exception, context)
        app_error.context = self._bound_context(app_error.context)

        cause = exception.__cause__ or exception
        if cause.__traceback__ is not None:
            app_error.context["traceback"] = "".join(traceback.format_exception(cause))

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture an exception, log it by severity and emit ``errorOccurred``.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            The normalized BaseAppError
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)
        level = SEVERITY_LOG_LEVELS[app_error.severity]
        cause = exception.__cause__ or exception

        if self._logger:
            self._logger.log(
                level,
                f"[{app_error.code.value}] {app_error.technical_message or app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                },
                exc_info=cause if level >= logging.WARNING and cause.__traceback__ is not None else None,
            )

        self.errorOccurred.emit(app_error)

        return app_error

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)

            if not app_data_location:
                app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
                app_data_path = Path(app_data_location) / APP_ORGANIZATION / APP_NAME
            else:
                app_data_path = Path(app_data_location)

            logs_dir = app_data_path / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger("textvalidation.errors")
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            # Avoid duplicate handlers
            if not ErrorHandler._logger.handlers:
                file_handler = logging.handlers.RotatingFileHandler(
                    logs_dir / "validation.log",
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )
                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                if __debug__:
                    console_handler = logging.StreamHandler()
                    console_handler.setFormatter(formatter)
                    console_handler.setLevel(logging.ERROR)
                    ErrorHandler._logger.addHandler(console_handler)

        except Exception as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def _bound_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """Truncate context values; field text and patterns can be arbitrarily long."""
        bounded: dict[str, Any] = {}
        for key, value in context.items():
            if value is None or isinstance(value, int | bool | list):
                bounded[key] = value
                continue
            text = value if isinstance(value, str) else repr(value)
            if len(text) > MAX_CONTEXT_VALUE_LENGTH:
                text = text[:MAX_CONTEXT_VALUE_LENGTH] + "..."
            bounded[key] = text
        return bounded

    def install_hooks(self) -> None:
        """Route unhandled exceptions through ``handle``."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return

            try:
                self.handle(exc_value, {"source": "sys.excepthook"})
            except Exception:
                self._original_excepthook(exc_type, exc_value, exc_traceback)

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Get the global ErrorHandler instance."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling for the application.

    This should be called once during application startup.
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: int = logging.INFO) -> None:
    """
    Initialize logging for the rest of the application.

    Should be called early in application startup, before any field is built.
    """
    get_error_handler()

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
