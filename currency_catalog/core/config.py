"""Configuration parsing and validation."""

import yaml
import os
from typing import Dict, Any, List, Optional
from pathlib import Path
from currency_catalog.core.exceptions import (
    ConfigError,
    YAMLSizeError,
    ConfigValidationError
)
from currency_catalog.core.constants import (
    MAX_YAML_FILE_SIZE,
    MAX_YAML_NESTING_DEPTH,
    MAX_YAML_KEY_COUNT,
    MAX_STRING_LENGTH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NATIVE_SYMBOL,
    DEFAULT_SYMBOL_POSITION,
    VALID_LOG_LEVELS,
    VALID_SYMBOL_POSITIONS
)
from currency_catalog.core.models import FormatOptions, SymbolPosition


# Structure-limit violations are reported as validation errors
YAMLStructureError = ConfigValidationError


class CatalogConfig:
    """Configuration for building a currency catalog."""

    # Security limits for YAML files - imported from constants module
    MAX_YAML_FILE_SIZE = MAX_YAML_FILE_SIZE
    MAX_YAML_NESTING_DEPTH = MAX_YAML_NESTING_DEPTH
    MAX_YAML_KEYS = MAX_YAML_KEY_COUNT

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None, base_dir: Optional[Path] = None):
        """
        Initialize from configuration dictionary.

        Args:
            config_dict: Configuration dictionary (None or {} for all defaults)
            base_dir: Directory relative data paths resolve against (default: cwd)
        """
        self.raw_config = config_dict or {}
        self._base_dir = Path(base_dir) if base_dir else Path.cwd()
        self._parse_config()

    @classmethod
    def from_yaml(cls, config_path: str) -> "CatalogConfig":
        """
        Load configuration from YAML file with security validations.

        Security protections:
        - File size limit: 1 MB
        - Nesting depth limit: 20 levels
        - Total keys limit: 10,000 keys

        Args:
            config_path: Path to YAML configuration file

        Returns:
            CatalogConfig instance

        Raises:
            ConfigError: If file not found or invalid
            YAMLSizeError: If file exceeds size limit
            YAMLStructureError: If YAML structure is too complex
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        file_size = os.path.getsize(config_file)
        if file_size > cls.MAX_YAML_FILE_SIZE:
            raise YAMLSizeError(
                f"Configuration file too large: {file_size:,} bytes. "
                f"Maximum allowed: {cls.MAX_YAML_FILE_SIZE:,} bytes",
                file_size=file_size,
                max_size=cls.MAX_YAML_FILE_SIZE
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                # Use safe_load to prevent code execution
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Invalid file encoding (expected UTF-8): {str(e)}")

        if config_dict is not None:
            cls._validate_yaml_structure(config_dict)

        return cls(config_dict, base_dir=config_file.resolve().parent)

    @classmethod
    def _validate_yaml_structure(cls, obj: Any, current_depth: int = 0, total_keys: List[int] = None) -> None:
        """
        Validate YAML structure against resource limits.

        Checks for:
        - Excessive nesting depth (prevents stack overflow)
        - Too many keys/items (prevents memory exhaustion)
        - Oversized strings

        Args:
            obj: Object to validate (dict, list, or primitive)
            current_depth: Current nesting depth
            total_keys: Mutable list with single element tracking total key count

        Raises:
            YAMLStructureError: If structure is too complex
        """
        if total_keys is None:
            total_keys = [0]

        if current_depth > cls.MAX_YAML_NESTING_DEPTH:
            raise YAMLStructureError(
                f"YAML nesting depth exceeds maximum of {cls.MAX_YAML_NESTING_DEPTH} levels."
            )

        if isinstance(obj, dict):
            total_keys[0] += len(obj)
            if total_keys[0] > cls.MAX_YAML_KEYS:
                raise YAMLStructureError(
                    f"YAML structure contains more than {cls.MAX_YAML_KEYS:,} keys/items."
                )

            for key, value in obj.items():
                if isinstance(key, str) and len(key) > 1000:
                    raise YAMLStructureError(
                        f"YAML key exceeds maximum length of 1000 characters: '{key[:50]}...'"
                    )
                cls._validate_yaml_structure(value, current_depth + 1, total_keys)

        elif isinstance(obj, list):
            total_keys[0] += len(obj)
            if total_keys[0] > cls.MAX_YAML_KEYS:
                raise YAMLStructureError(
                    f"YAML structure contains more than {cls.MAX_YAML_KEYS:,} keys/items."
                )

            for item in obj:
                cls._validate_yaml_structure(item, current_depth + 1, total_keys)

        elif isinstance(obj, str):
            if len(obj) > MAX_STRING_LENGTH:
                raise YAMLStructureError(
                    f"YAML contains string exceeding maximum length ({MAX_STRING_LENGTH:,} bytes): '{obj[:50]}...'"
                )

    def _parse_config(self) -> None:
        """Parse and validate configuration."""
        if not isinstance(self.raw_config, dict):
            raise ConfigValidationError(
                "Configuration root must be a mapping",
                expected="mapping",
                actual=type(self.raw_config).__name__
            )

        catalog_config = self._section("catalog")
        formatting_config = self._section("formatting")
        logging_config = self._section("logging")

        # Data sources (None means the bundled files)
        self.currencies_path: Optional[Path] = self._resolve_path(
            catalog_config.get("currencies_file"), "catalog.currencies_file"
        )
        self.country_currencies_path: Optional[Path] = self._resolve_path(
            catalog_config.get("country_currencies_file"), "catalog.country_currencies_file"
        )
        self.strict: bool = self._bool(catalog_config.get("strict", True), "catalog.strict")

        # Formatting defaults
        native = self._bool(formatting_config.get("native", DEFAULT_NATIVE_SYMBOL), "formatting.native")
        position = formatting_config.get("symbol_position", DEFAULT_SYMBOL_POSITION)
        if not isinstance(position, str) or position.lower() not in VALID_SYMBOL_POSITIONS:
            raise ConfigValidationError(
                f"Invalid symbol position: {position!r}",
                field="formatting.symbol_position",
                expected=", ".join(VALID_SYMBOL_POSITIONS),
                actual=str(position)
            )
        self.format_options = FormatOptions(
            native=native,
            symbol_position=SymbolPosition.parse(position)
        )

        # Logging
        level = logging_config.get("level", DEFAULT_LOG_LEVEL)
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level: {level!r}",
                field="logging.level",
                expected=", ".join(VALID_LOG_LEVELS),
                actual=str(level)
            )
        self.log_level: str = level.upper()
        self.log_file: Optional[str] = logging_config.get("file")
        if self.log_file is not None and (not isinstance(self.log_file, str) or not self.log_file.strip()):
            raise ConfigValidationError(
                "'logging.file' must be a file path",
                field="logging.file",
                expected="string path",
                actual=repr(self.log_file)
            )

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.raw_config.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"Configuration section '{name}' must be a mapping",
                field=name,
                expected="mapping",
                actual=type(section).__name__
            )
        return section

    def _resolve_path(self, value: Any, field: str) -> Optional[Path]:
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError(
                f"'{field}' must be a file path",
                field=field,
                expected="string path",
                actual=repr(value)
            )
        path = Path(value).expanduser()
        return path if path.is_absolute() else self._base_dir / path

    @staticmethod
    def _bool(value: Any, field: str) -> bool:
        if not isinstance(value, bool):
            raise ConfigValidationError(
                f"'{field}' must be true or false",
                field=field,
                expected="boolean",
                actual=repr(value)
            )
        return value

    def __repr__(self) -> str:
        return (
            f"CatalogConfig(currencies={self.currencies_path}, "
            f"country_currencies={self.country_currencies_path}, strict={self.strict})"
        )
