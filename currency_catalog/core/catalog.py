"""
Currency catalog.

CurrencyCatalog is an immutable, case-insensitive index of ISO 4217
currency records. It is constructed once, normally through load_catalog(),
and shared by reference afterwards; nothing mutates it, so concurrent
readers need no locking.

Construction order:
    1. CatalogConfig (optional) names the data sources
    2. ReferenceDataLoader reads and validates currencies and countries
    3. CurrencyCatalog indexes the records

Lookups come in two flavours: ``get`` and the field projections return None
for unknown codes, ``get_required`` raises NotFoundError.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from currency_catalog.core.countries import CountryCatalog, normalize_code
from currency_catalog.core.exceptions import DataSourceError, NotFoundError
from currency_catalog.core.formatter import Amount, AmountFormatter, to_decimal
from currency_catalog.core.models import CountryRecord, CurrencyRecord, FormatOptions
from currency_catalog.reference_data.loader import ReferenceDataLoader

logger = logging.getLogger(__name__)


class CurrencyCatalog:
    """
    Read-only currency lookup, enumeration, cross-reference and formatting.

    Example::

        catalog = load_catalog()
        catalog.get("usd").name               # 'US Dollar'
        catalog.format(1234.56, "EUR")        # '€1,234.56'
        catalog.for_country("JP").code        # 'JPY'
    """

    def __init__(
        self,
        currencies: Mapping[str, CurrencyRecord],
        countries: CountryCatalog,
        format_options: Optional[FormatOptions] = None,
        source_info: Optional[Dict[str, Any]] = None,
    ):
        """
        Index currency records.

        Args:
            currencies: Mapping of code -> CurrencyRecord
            countries: Country collaborator used for cross-references
            format_options: Defaults for format() (international symbol, before)
            source_info: Provenance information reported by get_data_source_info()

        Raises:
            DataSourceError: If two keys collapse onto the same uppercase code
        """
        index = {}
        for key, record in currencies.items():
            code = key.upper()
            if code in index:
                raise DataSourceError(f"Duplicate currency code in currency data: {code}")
            index[code] = record

        self._currencies = MappingProxyType(index)
        self._codes = tuple(sorted(index))
        self._countries = countries
        options = format_options or FormatOptions()
        self._formatter = AmountFormatter(native=options.native, symbol_position=options.symbol_position)
        self._source_info = dict(source_info or {})

        logger.info(f"Currency catalog ready: {len(index)} currencies, {countries.count()} countries")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, code: str) -> Optional[CurrencyRecord]:
        """Return the record for a case-insensitive code, or None if unknown."""
        return self._currencies.get(normalize_code(code))

    def get_required(self, code: str) -> CurrencyRecord:
        """
        Return the record for a code, failing fast on unknown codes.

        Raises:
            NotFoundError: If the code is not in the catalog (carries the code as given)
        """
        currency = self.get(code)
        if currency is None:
            raise NotFoundError(code, kind="currency")
        return currency

    def name(self, code: str) -> Optional[str]:
        currency = self.get(code)
        return currency.name if currency else None

    def symbol(self, code: str) -> Optional[str]:
        currency = self.get(code)
        return currency.symbol if currency else None

    def symbol_native(self, code: str) -> Optional[str]:
        """Symbol used in the currency's home territory, e.g. '￥' for JPY."""
        currency = self.get(code)
        return currency.symbol_native if currency else None

    def decimal_digits(self, code: str) -> Optional[int]:
        """Fractional digits used when displaying amounts (0 for JPY, 3 for KWD)."""
        currency = self.get(code)
        return currency.decimal_digits if currency else None

    def is_valid(self, code: str) -> bool:
        return self.get(code) is not None

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def all(self) -> List[CurrencyRecord]:
        """All records sorted by code."""
        return [self._currencies[code] for code in self._codes]

    def all_codes(self) -> List[str]:
        """All codes sorted ascending."""
        return list(self._codes)

    def count(self) -> int:
        return len(self._currencies)

    # ------------------------------------------------------------------
    # Cross-reference
    # ------------------------------------------------------------------

    @property
    def countries(self) -> CountryCatalog:
        return self._countries

    def for_country(self, country_code: str) -> Optional[CurrencyRecord]:
        """
        Currency used by a country (ISO 3166-1 alpha-2, case-insensitive).

        Returns None when the country is unknown or has no currency.
        """
        country = self._countries.get(country_code)
        if country is None or country.currency_code is None:
            return None
        return self.get(country.currency_code)

    def countries_for_currency(self, code: str) -> List[CountryRecord]:
        """Countries using a currency, sorted by name. Empty when no country uses the code."""
        return self._countries.with_currency(code)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, amount: Amount, code: str, native: Optional[bool] = None,
               symbol_position=None) -> Optional[str]:
        """
        Format an amount with a currency's symbol and precision.

        Args:
            amount: int, float or Decimal
            code: Currency code (case-insensitive)
            native: Use symbol_native (default from catalog options: False)
            symbol_position: "before"/"after" or SymbolPosition (default: before)

        Returns:
            Formatted string, or None if the code is unknown

        Raises:
            ParameterTypeError: If amount is not numeric or code is not a string
            ParameterValueError: If amount is NaN/infinite or the position is unknown

        Example:
            >>> catalog.format(1234.56, "EUR", symbol_position="after")
            '1,234.56€'
        """
        # Bad amounts are rejected before the lookup, even for unknown codes
        to_decimal(amount)
        currency = self.get(code)
        if currency is None:
            return None
        return self._formatter.format(amount, currency, native=native, symbol_position=symbol_position)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_data_source_info(self) -> Dict[str, Any]:
        """
        Get provenance information about the loaded data.

        Returns:
            Dict with source information for audit purposes
        """
        info = dict(self._source_info)
        info['record_counts'] = {
            'currencies': self.count(),
            'countries': self._countries.count(),
        }
        return info

    def __iter__(self) -> Iterator[CurrencyRecord]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._currencies)

    def __contains__(self, code) -> bool:
        return isinstance(code, str) and code.upper() in self._currencies

    def __repr__(self) -> str:
        return f"CurrencyCatalog(count={len(self._currencies)})"


def load_catalog(config=None) -> CurrencyCatalog:
    """
    Build a fully initialized CurrencyCatalog.

    Reads every data source before returning; any failure propagates and no
    catalog is produced.

    Args:
        config: Optional CatalogConfig; bundled data and defaults when omitted

    Raises:
        DataSourceError: If a data source is missing or malformed
    """
    if config is None:
        loader = ReferenceDataLoader()
        format_options = FormatOptions()
    else:
        loader = ReferenceDataLoader(
            currencies_path=config.currencies_path,
            country_currencies_path=config.country_currencies_path,
            strict=config.strict,
        )
        format_options = config.format_options

    currencies = loader.load_currencies()
    countries = loader.load_countries()
    return CurrencyCatalog(
        currencies,
        countries,
        format_options=format_options,
        source_info=loader.get_data_source_info(),
    )
