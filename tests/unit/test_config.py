"""
Tests for field configuration records.
"""

from unittest.mock import patch

import pytest

from textvalidation.core.config import (
    APP_NAME,
    APP_ORGANIZATION,
    DEFAULT_FIELD_CONFIG,
    FieldConfig,
    setup_qsettings,
)
from textvalidation.core.criteria import Criterion, ValidationKind
from textvalidation.core.errors import ConfigError, ErrorCode


class TestResolveCriterion:
    """Test precedence between kind and custom pattern."""

    def test_neither_defaults_to_non_empty(self):
        assert FieldConfig().resolve_criterion() == Criterion.of_kind(ValidationKind.NON_EMPTY)

    def test_kind_only(self):
        config = FieldConfig(kind=ValidationKind.URL)
        assert config.resolve_criterion() == Criterion.of_kind(ValidationKind.URL)

    def test_custom_only(self):
        config = FieldConfig(custom_pattern="[a-f]+")
        assert config.resolve_criterion() == Criterion.custom("[a-f]+")

    def test_custom_overrides_kind(self):
        config = FieldConfig(kind=ValidationKind.EMAIL, custom_pattern="^[0-9]+$")
        assert config.resolve_criterion() == Criterion.custom("^[0-9]+$")


class TestFromDict:
    """Test building configs from plain dictionaries."""

    def test_empty_dict_uses_defaults(self):
        config = FieldConfig.from_dict({})

        assert config.kind is None
        assert config.custom_pattern is None
        assert config.indicator == DEFAULT_FIELD_CONFIG["indicator"]

    def test_kind_by_name(self):
        config = FieldConfig.from_dict({"kind": "email", "indicator": "highlight"})

        assert config.kind is ValidationKind.EMAIL
        assert config.indicator == "highlight"

    def test_kind_by_attribute_value(self):
        config = FieldConfig.from_dict({"kind": 2})
        assert config.kind is ValidationKind.HEX_COLOR

    def test_both_present(self):
        config = FieldConfig.from_dict({"kind": "email", "custom_pattern": "^[0-9]+$"})
        assert config.resolve_criterion().is_custom

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldConfig.from_dict({"criteria": ".+"})
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_unknown_indicator_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldConfig.from_dict({"indicator": "blink"})
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_wrong_pattern_type_rejected(self):
        with pytest.raises(ConfigError):
            FieldConfig.from_dict({"custom_pattern": 5})

    def test_unknown_kind_name(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldConfig.from_dict({"kind": "phone"})

        assert exc_info.value.code == ErrorCode.UNKNOWN_KIND
        assert exc_info.value.context["kind"] == "phone"

    def test_unknown_kind_value(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldConfig.from_dict({"kind": 42})
        assert exc_info.value.code == ErrorCode.UNKNOWN_KIND

    def test_kind_as_integral_float(self):
        config = FieldConfig.from_dict({"kind": 1.0})
        assert config.kind is ValidationKind.URL

    def test_unknown_kind_as_float(self):
        with pytest.raises(ConfigError) as exc_info:
            FieldConfig.from_dict({"kind": 9.0})
        assert exc_info.value.code == ErrorCode.UNKNOWN_KIND

    def test_to_dict_round_trip(self):
        config = FieldConfig(kind=ValidationKind.NUMERIC, indicator="none")
        assert FieldConfig.from_dict(config.to_dict()) == config


def test_setup_qsettings():
    """Test that Qt application identifiers are set."""
    with patch("textvalidation.core.config.QCoreApplication") as mock_app:
        setup_qsettings()

    mock_app.setOrganizationName.assert_called_once_with(APP_ORGANIZATION)
    mock_app.setApplicationName.assert_called_once_with(APP_NAME)
