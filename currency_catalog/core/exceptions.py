"""
Currency Catalog Exception Hierarchy.

This module defines the exception hierarchy for the currency catalog,
separating fatal initialization failures from ordinary lookup misses and
programmer errors.

Exception Severity Levels:
    - FATAL: The catalog cannot be constructed, stop immediately
    - RECOVERABLE: A single call failed, the catalog remains usable
    - WARNING: Non-critical issue, log and continue
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorSeverity(Enum):
    """
    Classify error severity for handling decisions.

    Attributes:
        FATAL: Initialization error, no catalog can be built
        RECOVERABLE: Call-level error, the catalog is still usable
        WARNING: Non-critical issue, log and continue
    """
    FATAL = "fatal"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class CatalogException(Exception):
    """
    Base exception for all currency catalog errors.

    Provides:
    - Severity classification for handling decisions
    - Structured details dictionary for logging/reporting
    - Original exception preservation for debugging
    - Serialization support for JSON/dict output

    Attributes:
        message (str): Human-readable error message
        severity (ErrorSeverity): Error severity level
        details (Dict[str, Any]): Additional context (file path, code, etc.)
        original_exception (Optional[Exception]): Original exception if wrapping

    Example:
        >>> try:
        ...     data = json.load(f)
        ... except ValueError as e:
        ...     raise CatalogException(
        ...         "Currency data is not valid JSON",
        ...         severity=ErrorSeverity.FATAL,
        ...         details={'file': 'currencies.json'},
        ...         original_exception=e
        ...     )
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.RECOVERABLE,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error description
            severity: Error severity level (default: RECOVERABLE)
            details: Additional context dictionary
            original_exception: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for logging/reporting.

        Returns:
            Dictionary containing exception details suitable for JSON serialization
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'severity': self.severity.value,
            'details': self.details,
            'original_error': str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Configuration Errors (Fatal)
# ============================================================================

class ConfigError(CatalogException):
    """
    Configuration file errors (fatal).

    Raised when:
    - Configuration file not found
    - Invalid YAML syntax
    - Invalid configuration structure

    Attributes:
        field (Optional[str]): Specific config field that caused error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'field': field} if field else {}
        )
        self.field = field


class YAMLSizeError(ConfigError):
    """
    YAML file too large.

    Raised when a configuration file exceeds the maximum allowed size.
    """

    def __init__(self, message: str, file_size: Optional[int] = None, max_size: Optional[int] = None):
        super().__init__(message)
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


class ConfigValidationError(ConfigError):
    """
    Configuration is valid YAML but does not match the expected schema.

    Example:
        >>> raise ConfigValidationError(
        ...     "Invalid symbol position: 'middle'",
        ...     field="formatting.symbol_position",
        ...     expected="before, after",
        ...     actual="middle"
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None
    ):
        super().__init__(message, field)
        self.details.update({
            'expected': expected,
            'actual': actual
        })


# ============================================================================
# Data Source Errors (Fatal)
# ============================================================================

class DataSourceError(CatalogException):
    """
    Reference data could not be loaded (fatal).

    Raised when:
    - Data file not found or unreadable
    - File is not valid JSON/YAML
    - Top-level structure is not a mapping
    - Duplicate keys collapse onto the same code

    No partially populated catalog is ever returned after this error.

    Attributes:
        file_path (Optional[str]): Path to the data file that failed
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'file_path': file_path},
            original_exception=original_exception
        )
        self.file_path = file_path


class RecordValidationError(DataSourceError):
    """
    A single data record failed schema validation.

    Example:
        >>> raise RecordValidationError(
        ...     "Field 'decimal_digits' must be a non-negative integer",
        ...     file_path="currencies.json",
        ...     record_key="USD",
        ...     field="decimal_digits"
        ... )
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        record_key: Optional[str] = None,
        field: Optional[str] = None
    ):
        super().__init__(message, file_path)
        self.details.update({
            'record_key': record_key,
            'field': field
        })
        self.record_key = record_key
        self.field = field


# ============================================================================
# Lookup Errors (Recoverable)
# ============================================================================

class NotFoundError(CatalogException, LookupError):
    """
    Requested code is not present in the catalog.

    Only raised by the fail-fast lookups (``get_required``); the ordinary
    lookups return None instead.

    Attributes:
        code (str): Code exactly as the caller passed it
        kind (str): What was being looked up ('currency' or 'country')
    """

    def __init__(self, code: str, kind: str = "currency"):
        super().__init__(
            f"Unknown {kind} code: {code}",
            severity=ErrorSeverity.RECOVERABLE,
            details={'code': code, 'kind': kind}
        )
        self.code = code
        self.kind = kind


# ============================================================================
# Parameter Errors (Programmer errors)
# ============================================================================

class ParameterError(CatalogException):
    """
    Invalid argument passed to a public catalog or formatter function.

    Attributes:
        parameter (str): Name of the offending parameter
        value (Any): Value that was rejected
    """

    def __init__(self, message: str, parameter: str, value: Any):
        super().__init__(
            message,
            severity=ErrorSeverity.RECOVERABLE,
            details={'parameter': parameter, 'value': repr(value)}
        )
        self.parameter = parameter
        self.value = value


class ParameterTypeError(ParameterError, TypeError):
    """Argument has the wrong type (e.g. a string amount or an integer code)."""


class ParameterValueError(ParameterError, ValueError):
    """Argument has the right type but an unusable value (e.g. NaN amount)."""
