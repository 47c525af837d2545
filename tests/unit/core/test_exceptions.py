"""
Unit tests for exception hierarchy.

Tests the catalog exception classes and their structured details.
"""

import pytest
from currency_catalog.core.exceptions import (
    CatalogException,
    ErrorSeverity,
    ConfigError,
    YAMLSizeError,
    ConfigValidationError,
    DataSourceError,
    RecordValidationError,
    NotFoundError,
    ParameterError,
    ParameterTypeError,
    ParameterValueError,
)


class TestErrorSeverity:
    """Test error severity enum."""

    def test_severity_values(self):
        """Test that all severity levels exist."""
        assert ErrorSeverity.FATAL.value == "fatal"
        assert ErrorSeverity.RECOVERABLE.value == "recoverable"
        assert ErrorSeverity.WARNING.value == "warning"


class TestCatalogException:
    """Test base exception class."""

    def test_basic_exception(self):
        """Test basic exception creation."""
        exc = CatalogException("Test error")

        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.severity == ErrorSeverity.RECOVERABLE
        assert exc.details == {}
        assert exc.original_exception is None

    def test_exception_wrapping(self):
        """Test wrapping another exception."""
        original = ValueError("bad json")
        exc = CatalogException("Wrapped", severity=ErrorSeverity.FATAL, original_exception=original)

        assert exc.original_exception is original
        assert exc.severity == ErrorSeverity.FATAL

    def test_to_dict(self):
        """Test serialization to dictionary."""
        exc = CatalogException(
            "Test error",
            details={'file': 'currencies.json'},
            original_exception=ValueError("inner")
        )

        result = exc.to_dict()
        assert result == {
            'type': 'CatalogException',
            'message': 'Test error',
            'severity': 'recoverable',
            'details': {'file': 'currencies.json'},
            'original_error': 'inner',
        }

    def test_to_dict_without_original(self):
        """Test original_error is None when nothing was wrapped."""
        assert CatalogException("x").to_dict()['original_error'] is None


class TestConfigErrors:
    """Test configuration error classes."""

    def test_config_error_is_fatal(self):
        """Test ConfigError severity and field."""
        exc = ConfigError("Bad config", field="logging.level")

        assert exc.severity == ErrorSeverity.FATAL
        assert exc.field == "logging.level"
        assert exc.details == {'field': 'logging.level'}

    def test_config_error_without_field(self):
        """Test details stay empty without a field."""
        assert ConfigError("Bad config").details == {}

    def test_yaml_size_error(self):
        """Test YAMLSizeError records sizes."""
        exc = YAMLSizeError("Too large", file_size=2000, max_size=1000)

        assert isinstance(exc, ConfigError)
        assert exc.details['file_size'] == 2000
        assert exc.details['max_size'] == 1000

    def test_config_validation_error(self):
        """Test ConfigValidationError records expected/actual."""
        exc = ConfigValidationError(
            "Invalid symbol position",
            field="formatting.symbol_position",
            expected="before, after",
            actual="middle"
        )

        assert isinstance(exc, ConfigError)
        assert exc.details == {
            'field': 'formatting.symbol_position',
            'expected': 'before, after',
            'actual': 'middle',
        }


class TestDataSourceErrors:
    """Test data source error classes."""

    def test_data_source_error(self):
        """Test DataSourceError is fatal and keeps the path."""
        exc = DataSourceError("Missing", file_path="/tmp/currencies.json")

        assert exc.severity == ErrorSeverity.FATAL
        assert exc.file_path == "/tmp/currencies.json"
        assert exc.details['file_path'] == "/tmp/currencies.json"

    def test_record_validation_error(self):
        """Test RecordValidationError identifies the record and field."""
        exc = RecordValidationError(
            "Bad digits", file_path="currencies.json", record_key="USD", field="decimal_digits"
        )

        assert isinstance(exc, DataSourceError)
        assert exc.record_key == "USD"
        assert exc.field == "decimal_digits"
        assert exc.details['record_key'] == "USD"
        assert exc.details['field'] == "decimal_digits"


class TestNotFoundError:
    """Test lookup error class."""

    def test_message_carries_code(self):
        """Test the message names the code exactly as given."""
        exc = NotFoundError("INVALID")

        assert exc.message == "Unknown currency code: INVALID"
        assert exc.code == "INVALID"
        assert exc.kind == "currency"
        assert exc.severity == ErrorSeverity.RECOVERABLE

    def test_country_kind(self):
        """Test the kind appears in the message."""
        assert str(NotFoundError("zz", kind="country")) == "Unknown country code: zz"

    def test_is_lookup_error(self):
        """Test callers can catch it as a LookupError."""
        with pytest.raises(LookupError):
            raise NotFoundError("XXX")


class TestParameterErrors:
    """Test parameter error classes."""

    def test_parameter_error_details(self):
        """Test the parameter name and value repr are recorded."""
        exc = ParameterError("Bad amount", parameter="amount", value="12")

        assert exc.parameter == "amount"
        assert exc.value == "12"
        assert exc.details == {'parameter': 'amount', 'value': "'12'"}

    def test_type_error_compatible(self):
        """Test ParameterTypeError is a TypeError."""
        exc = ParameterTypeError("wrong type", parameter="code", value=1)
        assert isinstance(exc, TypeError)
        assert isinstance(exc, ParameterError)

    def test_value_error_compatible(self):
        """Test ParameterValueError is a ValueError."""
        exc = ParameterValueError("nan", parameter="amount", value=float("nan"))
        assert isinstance(exc, ValueError)
        assert isinstance(exc, CatalogException)
