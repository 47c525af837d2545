"""
Shared fixtures for the currency catalog test suite.

- catalog: the real catalog built from the bundled data (built once per session)
- sample_*: a small in-memory catalog that does not depend on pycountry
- write_currencies / write_mapping: write data files into tmp_path
"""

import json

import pytest
import yaml

from currency_catalog import load_catalog
from currency_catalog.core.catalog import CurrencyCatalog
from currency_catalog.core.countries import CountryCatalog
from currency_catalog.core.models import CountryRecord, CurrencyRecord


USD = CurrencyRecord("USD", "US Dollar", "US dollars", "$", "$", 2)
EUR = CurrencyRecord("EUR", "Euro", "euros", "€", "€", 2)
JPY = CurrencyRecord("JPY", "Japanese Yen", "Japanese yen", "¥", "￥", 0)
KWD = CurrencyRecord("KWD", "Kuwaiti Dinar", "Kuwaiti dinars", "KD", "د.ك.‏", 3)
RUB = CurrencyRecord("RUB", "Russian Ruble", "Russian rubles", "RUB", "₽", 2)


@pytest.fixture(scope="session")
def catalog():
    """Catalog built from the bundled data sources."""
    return load_catalog()


@pytest.fixture
def sample_currencies():
    return {record.code: record for record in (USD, EUR, JPY, KWD, RUB)}


@pytest.fixture
def sample_countries():
    return CountryCatalog([
        CountryRecord("US", "USA", "United States", "United States of America", "USD"),
        CountryRecord("DE", "DEU", "Germany", "Federal Republic of Germany", "EUR"),
        CountryRecord("FR", "FRA", "France", "French Republic", "EUR"),
        CountryRecord("AT", "AUT", "Austria", "Republic of Austria", "EUR"),
        CountryRecord("JP", "JPN", "Japan", None, "JPY"),
        CountryRecord("EC", "ECU", "Ecuador", "Republic of Ecuador", "USD"),
        CountryRecord("AQ", "ATA", "Antarctica", None, None),
        CountryRecord("ZW", "ZWE", "Zimbabwe", "Republic of Zimbabwe", "ZWL"),
    ])


@pytest.fixture
def sample_catalog(sample_currencies, sample_countries):
    return CurrencyCatalog(sample_currencies, sample_countries)


@pytest.fixture
def write_currencies(tmp_path):
    """Write a currency JSON file and return its path."""
    def _write(data, name="currencies.json"):
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_mapping(tmp_path):
    """Write a country -> currency YAML mapping and return its path."""
    def _write(data, name="country_currencies.yaml"):
        path = tmp_path / name
        text = data if isinstance(data, str) else yaml.safe_dump(data)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def currency_entry():
    """Build a valid raw currency entry for data files."""
    def _entry(code, /, **overrides):
        entry = {
            "code": code,
            "name": f"{code} name",
            "name_plural": f"{code} names",
            "symbol": code,
            "symbol_native": code,
            "decimal_digits": 2,
        }
        entry.update(overrides)
        return entry
    return _entry
