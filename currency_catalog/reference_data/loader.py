"""
Reference data loader.

Loads the currency and country reference data the catalog is built from:
- ISO 4217 currencies: bundled currencies.json (names, symbols, precision)
- ISO 3166-1 countries: pycountry, joined with the bundled
  country_currencies.yaml mapping of alpha-2 code -> currency code

Every currency entry is schema-validated into a CurrencyRecord. A missing
or malformed data file is fatal; an invalid entry is fatal in strict mode
and skipped with a warning otherwise.
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pycountry  # Required dependency - bundled ISO data, works offline
import yaml

from currency_catalog.core.constants import (
    COUNTRY_CODE_PATTERN,
    COUNTRY_CURRENCIES_FILE,
    CURRENCIES_FILE,
    CURRENCY_CODE_PATTERN,
    CURRENCY_STRING_FIELDS,
    MAX_DATA_FILE_SIZE,
)
from currency_catalog.core.countries import CountryCatalog
from currency_catalog.core.exceptions import DataSourceError, RecordValidationError
from currency_catalog.core.models import CountryRecord, CurrencyRecord

logger = logging.getLogger(__name__)

_CURRENCY_CODE_RE = re.compile(CURRENCY_CODE_PATTERN)
_COUNTRY_CODE_RE = re.compile(COUNTRY_CODE_PATTERN)


def _reject_duplicate_keys(pairs):
    """json object_pairs_hook that refuses repeated keys instead of keeping the last."""
    result = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"Duplicate key {key!r}")
        result[key] = value
    return result


class ReferenceDataLoader:
    """
    Reads and validates the catalog's data sources.

    Args:
        currencies_path: Currency JSON file (default: bundled currencies.json)
        country_currencies_path: Country mapping YAML (default: bundled file)
        strict: Raise on invalid records instead of skipping them
    """

    _data_dir = Path(__file__).parent

    def __init__(
        self,
        currencies_path: Optional[Union[str, Path]] = None,
        country_currencies_path: Optional[Union[str, Path]] = None,
        strict: bool = True,
    ):
        self.currencies_path = Path(currencies_path) if currencies_path else self._data_dir / CURRENCIES_FILE
        self.country_currencies_path = (
            Path(country_currencies_path) if country_currencies_path
            else self._data_dir / COUNTRY_CURRENCIES_FILE
        )
        self.strict = strict

    # ------------------------------------------------------------------
    # Currencies
    # ------------------------------------------------------------------

    def load_currencies(self) -> Dict[str, CurrencyRecord]:
        """
        Load and validate the currency data source.

        Returns:
            Dict mapping uppercase code -> CurrencyRecord

        Raises:
            DataSourceError: If the file is missing, unreadable or not a JSON object
            RecordValidationError: If an entry is invalid (strict mode only)
        """
        path = self.currencies_path
        text = self._read_text(path)
        try:
            raw = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
        except ValueError as e:
            raise DataSourceError(
                f"Failed to parse currency data {path}: {e}",
                file_path=str(path),
                original_exception=e
            )

        if not isinstance(raw, dict):
            raise DataSourceError(
                f"Currency data must be a JSON object keyed by code, got {type(raw).__name__}",
                file_path=str(path)
            )

        currencies = {}
        for key, entry in raw.items():
            try:
                record = self._build_currency(key, entry)
            except RecordValidationError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping invalid currency entry {key!r}: {e.message}")
                continue

            if pycountry.currencies.get(alpha_3=record.code) is None:
                logger.debug(f"Currency {record.code} is not in the pycountry ISO 4217 registry")
            currencies[record.code] = record

        logger.info(f"Loaded {len(currencies)} currencies from {path}")
        return currencies

    def _build_currency(self, key: Any, entry: Any) -> CurrencyRecord:
        """Validate one raw currency entry and convert it to a CurrencyRecord."""
        path = str(self.currencies_path)

        if not isinstance(key, str) or not _CURRENCY_CODE_RE.match(key):
            raise RecordValidationError(
                f"Invalid currency key {key!r}: expected three uppercase letters",
                file_path=path, record_key=str(key)
            )
        if not isinstance(entry, dict):
            raise RecordValidationError(
                f"Currency entry {key} must be an object, got {type(entry).__name__}",
                file_path=path, record_key=key
            )

        code = entry.get("code")
        if code != key:
            raise RecordValidationError(
                f"Currency entry {key} has code {code!r}; code must match its key",
                file_path=path, record_key=key, field="code"
            )

        for field_name in CURRENCY_STRING_FIELDS:
            value = entry.get(field_name)
            if not isinstance(value, str) or not value.strip():
                raise RecordValidationError(
                    f"Currency {key}: field '{field_name}' must be a non-empty string",
                    file_path=path, record_key=key, field=field_name
                )

        digits = entry.get("decimal_digits")
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise RecordValidationError(
                f"Currency {key}: field 'decimal_digits' must be a non-negative integer, got {digits!r}",
                file_path=path, record_key=key, field="decimal_digits"
            )

        return CurrencyRecord(
            code=code,
            name=entry["name"],
            name_plural=entry["name_plural"],
            symbol=entry["symbol"],
            symbol_native=entry["symbol_native"],
            decimal_digits=digits,
        )

    # ------------------------------------------------------------------
    # Countries
    # ------------------------------------------------------------------

    def load_country_currencies(self) -> Dict[str, Optional[str]]:
        """
        Load the alpha-2 -> currency code mapping.

        Raises:
            DataSourceError: If the file is missing, not valid YAML or not a mapping
            RecordValidationError: If a key or value is malformed (strict mode only)
        """
        path = self.country_currencies_path
        text = self._read_text(path)
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DataSourceError(
                f"Failed to parse country currency mapping {path}: {e}",
                file_path=str(path),
                original_exception=e
            )

        if not isinstance(raw, dict):
            raise DataSourceError(
                f"Country currency mapping must be a YAML mapping, got {type(raw).__name__}",
                file_path=str(path)
            )

        mapping = {}
        for alpha2, currency_code in raw.items():
            valid_key = isinstance(alpha2, str) and _COUNTRY_CODE_RE.match(alpha2)
            valid_value = currency_code is None or (
                isinstance(currency_code, str) and _CURRENCY_CODE_RE.match(currency_code)
            )
            if not (valid_key and valid_value):
                if self.strict:
                    raise RecordValidationError(
                        f"Invalid country mapping {alpha2!r}: {currency_code!r}",
                        file_path=str(path), record_key=str(alpha2)
                    )
                logger.warning(f"Skipping invalid country mapping {alpha2!r}: {currency_code!r}")
                continue
            mapping[alpha2] = currency_code

        return mapping

    def load_countries(self) -> CountryCatalog:
        """
        Build the country catalog from pycountry and the currency mapping.

        Countries missing from the mapping get currency_code=None. Mapped codes
        pycountry does not know are logged and skipped.
        """
        mapping = self.load_country_currencies()

        records = []
        for country in pycountry.countries:
            records.append(CountryRecord(
                alpha2=country.alpha_2,
                alpha3=country.alpha_3,
                name=country.name,
                official_name=getattr(country, "official_name", None),
                currency_code=mapping.get(country.alpha_2),
            ))

        known = {record.alpha2 for record in records}
        for alpha2 in sorted(set(mapping) - known):
            logger.warning(f"Country code {alpha2} in {self.country_currencies_path.name} is not in ISO 3166-1; skipped")

        unmapped = [record.alpha2 for record in records if record.currency_code is None]
        if unmapped:
            logger.debug(f"{len(unmapped)} countries have no currency: {', '.join(sorted(unmapped))}")

        logger.info(f"Loaded {len(records)} countries from pycountry")
        return CountryCatalog(records)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_text(path: Path) -> str:
        """Read a UTF-8 data file, enforcing the size limit."""
        if not path.is_file():
            raise DataSourceError(f"Reference data file not found: {path}", file_path=str(path))

        file_size = os.path.getsize(path)
        if file_size > MAX_DATA_FILE_SIZE:
            raise DataSourceError(
                f"Reference data file too large: {file_size:,} bytes. "
                f"Maximum allowed: {MAX_DATA_FILE_SIZE:,} bytes",
                file_path=str(path)
            )

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(
                f"Failed to read reference data file {path}: {e}",
                file_path=str(path),
                original_exception=e
            )

    def get_data_source_info(self) -> Dict[str, Any]:
        """
        Get provenance information about data sources.

        Returns:
            Dict with source information for audit purposes
        """
        return {
            'sources': {
                'currencies': {
                    'standard': 'ISO 4217',
                    'source': 'bundled JSON',
                    'path': str(self.currencies_path),
                },
                'countries': {
                    'standard': 'ISO 3166-1',
                    'source': 'pycountry',
                    'pycountry_record_count': len(pycountry.countries),
                },
                'country_currencies': {
                    'source': 'bundled YAML',
                    'path': str(self.country_currencies_path),
                },
            },
            'strict': self.strict,
        }
