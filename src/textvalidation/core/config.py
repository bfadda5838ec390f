"""
Configuration for validated text fields.

This module provides the attribute-style configuration record a field is
constructed from, its JSON schema, and the application identifiers used by
Qt for settings and log locations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import jsonschema
from PySide6.QtCore import QCoreApplication

from .criteria import DEFAULT_CRITERION, Criterion, ValidationKind, kind_from_name, kind_from_value
from .errors import ConfigError, ErrorCode

logger = logging.getLogger(__name__)

# Application identifiers for QSettings / QStandardPaths
APP_ORGANIZATION = "TextValidation"
APP_NAME = "ValidatedTextField"

INDICATOR_CHOICES = ("shake", "highlight", "none")

DEFAULT_FIELD_CONFIG: dict[str, Any] = {
    "kind": None,
    "custom_pattern": None,
    "indicator": "shake",
}

# JSON Schema for field configuration records (draft-07)
FIELD_CONFIG_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Validated text field configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "kind": {
            "description": "Predefined validation kind, by name or attribute value",
            "oneOf": [
                {"type": "null"},
                {"type": "string", "minLength": 1},
                {"type": "integer", "minimum": 0},
            ],
        },
        "custom_pattern": {
            "description": "Regular expression overriding kind when present",
            "type": ["string", "null"],
        },
        "indicator": {"type": "string", "enum": list(INDICATOR_CHOICES)},
    },
}


@dataclass(frozen=True)
class FieldConfig:
    """
    Construction-time configuration for one validated field.

    When both ``kind`` and ``custom_pattern`` are given the custom pattern
    wins. When neither is given the field validates as non-empty.
    """

    kind: ValidationKind | None = None
    custom_pattern: str | None = None
    indicator: str = "shake"

    def resolve_criterion(self) -> Criterion:
        """Apply the precedence rule and return the active criterion."""
        if self.custom_pattern is not None:
            if self.kind is not None:
                logger.debug(
                    f"Both kind {self.kind.name} and custom pattern {self.custom_pattern!r} configured, "
                    "using the custom pattern"
                )
            return Criterion.custom(self.custom_pattern)
        if self.kind is not None:
            return Criterion.of_kind(self.kind)
        return DEFAULT_CRITERION

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FieldConfig:
        """
        Build a FieldConfig from a plain dictionary.

        Args:
            data: Mapping with optional ``kind``, ``custom_pattern`` and
                ``indicator`` keys

        Returns:
            Validated FieldConfig

        Raises:
            ConfigError: If the mapping violates the schema or names an
                unknown kind
        """
        try:
            jsonschema.validate(data, FIELD_CONFIG_JSON_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Invalid field configuration: {e.message}",
                technical_message=str(e),
                context={"path": list(e.absolute_path)},
            ) from e

        merged = {**DEFAULT_FIELD_CONFIG, **data}
        raw_kind = merged["kind"]
        kind: ValidationKind | None = None
        if raw_kind is not None:
            try:
                # jsonschema accepts integral floats such as 1.0 as integers
                kind = kind_from_name(raw_kind) if isinstance(raw_kind, str) else kind_from_value(int(raw_kind))
            except ValueError as e:
                raise ConfigError(
                    code=ErrorCode.UNKNOWN_KIND,
                    user_message=str(e),
                    context={"kind": raw_kind},
                ) from e

        return cls(kind=kind, custom_pattern=merged["custom_pattern"], indicator=merged["indicator"])

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name.lower() if self.kind is not None else None,
            "custom_pattern": self.custom_pattern,
            "indicator": self.indicator,
        }


def setup_qsettings() -> None:
    """
    Configure Qt application identifiers.

    This should be called early in application startup so that settings and
    log locations resolve under the correct organization and application.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
