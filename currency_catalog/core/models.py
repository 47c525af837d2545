"""
Catalog Data Models

Defines the immutable record types held by the currency and country
catalogs, and the options controlling amount formatting.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Union

from currency_catalog.core.exceptions import ParameterValueError


class SymbolPosition(Enum):
    """
    Placement of the currency symbol relative to the formatted number.

    BEFORE: "$1,234.56"
    AFTER: "1,234.56€"
    """
    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def parse(cls, value: Union["SymbolPosition", str]) -> "SymbolPosition":
        """
        Coerce an enum member or a case-insensitive name to a SymbolPosition.

        Raises:
            ParameterValueError: If value is not a recognized position
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ParameterValueError(
            f"Invalid symbol position {value!r}; expected one of: "
            f"{', '.join(p.value for p in cls)}",
            parameter="symbol_position",
            value=value
        )


@dataclass(frozen=True)
class CurrencyRecord:
    """
    One ISO 4217 currency.

    Attributes:
        code: Three-letter uppercase code, unique within the catalog
        name: Singular display name, e.g. "US Dollar"
        name_plural: Plural display name, e.g. "US dollars"
        symbol: International symbol, e.g. "$"
        symbol_native: Symbol as used in the issuing territory
        decimal_digits: Fractional digits conventionally displayed (0, 2 or 3)
    """
    code: str
    name: Optional[str] = None
    name_plural: Optional[str] = None
    symbol: Optional[str] = None
    symbol_native: Optional[str] = None
    decimal_digits: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class CountryRecord:
    """
    One ISO 3166-1 country with the currency it uses.

    Attributes:
        alpha2: Two-letter uppercase country code
        alpha3: Three-letter uppercase country code
        name: Short English name
        official_name: Official English name, where one is registered
        currency_code: Uppercase ISO 4217 code, None if the country has none
    """
    alpha2: str
    alpha3: str
    name: str
    official_name: Optional[str] = None
    currency_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class FormatOptions:
    """Default options applied by CurrencyCatalog.format."""
    native: bool = False
    symbol_position: SymbolPosition = SymbolPosition.BEFORE
