"""
Currency Catalog - ISO 4217 currency reference data.

Read-only lookup, enumeration, country cross-reference and amount formatting
over a bundled currency dataset. Build the catalog once and share it:

    from currency_catalog import load_catalog

    catalog = load_catalog()
    catalog.format(1234.56, "USD")    # '$1,234.56'
"""

__version__ = "0.1.0"

from currency_catalog.core.catalog import CurrencyCatalog, load_catalog
from currency_catalog.core.config import CatalogConfig
from currency_catalog.core.countries import CountryCatalog
from currency_catalog.core.exceptions import (
    CatalogException,
    ConfigError,
    DataSourceError,
    NotFoundError,
    ParameterError,
    ParameterTypeError,
    ParameterValueError,
    RecordValidationError,
)
from currency_catalog.core.formatter import AmountFormatter, format_amount, format_number
from currency_catalog.core.models import CountryRecord, CurrencyRecord, FormatOptions, SymbolPosition
from currency_catalog.reference_data.loader import ReferenceDataLoader

__all__ = [
    "CurrencyCatalog",
    "load_catalog",
    "CatalogConfig",
    "CountryCatalog",
    "CatalogException",
    "ConfigError",
    "DataSourceError",
    "NotFoundError",
    "ParameterError",
    "ParameterTypeError",
    "ParameterValueError",
    "RecordValidationError",
    "AmountFormatter",
    "format_amount",
    "format_number",
    "CountryRecord",
    "CurrencyRecord",
    "FormatOptions",
    "SymbolPosition",
    "ReferenceDataLoader",
]
