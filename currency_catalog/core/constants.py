"""
Currency Catalog Constants.

This module defines the data file names, code patterns, formatting rules and
safety limits used throughout the currency catalog. Centralizing these values
keeps the loader, formatter and configuration layer in agreement.
"""

from decimal import ROUND_HALF_UP

# ============================================================================
# Bundled Data Files
# ============================================================================

# ISO 4217 currency records, one JSON object keyed by currency code
CURRENCIES_FILE: str = "currencies.json"

# Mapping of ISO 3166-1 alpha-2 country code -> ISO 4217 currency code
COUNTRY_CURRENCIES_FILE: str = "country_currencies.yaml"

# Maximum size of a bundled or configured data file (5MB)
# The full currency dataset is well under 100KB
MAX_DATA_FILE_SIZE: int = 5 * 1024 * 1024


# ============================================================================
# Code Patterns
# ============================================================================

# ISO 4217 alphabetic code: exactly three uppercase letters
CURRENCY_CODE_PATTERN: str = r"^[A-Z]{3}$"

# ISO 3166-1 alpha-2 code: exactly two uppercase letters
COUNTRY_CODE_PATTERN: str = r"^[A-Z]{2}$"

# Fields every currency record must carry (besides 'code')
CURRENCY_STRING_FIELDS: tuple = ("name", "name_plural", "symbol", "symbol_native")


# ============================================================================
# Amount Formatting
# ============================================================================

# Separator placed between groups of integer digits
GROUP_SEPARATOR: str = ","

# Separator placed between the integer and fractional parts
DECIMAL_SEPARATOR: str = "."

# Number of integer digits per group
GROUP_SIZE: int = 3

# Largest amount magnitude accepted for formatting (integer digits)
MAX_AMOUNT_DIGITS: int = 1000

# Largest fractional precision accepted for formatting
MAX_DECIMAL_DIGITS: int = 100

# Ties are rounded away from zero: 2.675 -> 2.68, -0.5 -> -1
ROUNDING_MODE: str = ROUND_HALF_UP

# Symbol placement relative to the number
VALID_SYMBOL_POSITIONS: list = ["before", "after"]
DEFAULT_SYMBOL_POSITION: str = "before"

# Use the international symbol unless asked otherwise
DEFAULT_NATIVE_SYMBOL: bool = False


# ============================================================================
# Configuration Security Limits
# ============================================================================

# Maximum YAML configuration file size (1MB)
MAX_YAML_FILE_SIZE: int = 1 * 1024 * 1024

# Maximum YAML nesting depth
# Prevents stack overflow from deeply nested YAML structures
MAX_YAML_NESTING_DEPTH: int = 20

# Maximum number of keys/items in a YAML document
MAX_YAML_KEY_COUNT: int = 10_000

# Maximum length of any string value in a YAML document (64KB)
MAX_STRING_LENGTH: int = 64 * 1024


# ============================================================================
# Logging Constants
# ============================================================================

# Root logger name for the package
LOGGER_NAME: str = "currency_catalog"

# Default log level (library stays quiet unless asked)
DEFAULT_LOG_LEVEL: str = "WARNING"

# Levels accepted by the CLI and configuration
VALID_LOG_LEVELS: list = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Default log message format
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log date format
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
