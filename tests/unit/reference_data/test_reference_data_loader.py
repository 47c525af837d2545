"""
Tests for ReferenceDataLoader.

Validates that reference data loading works correctly for:
- ISO 4217 currencies from the bundled JSON file
- The alpha-2 -> currency mapping from the bundled YAML file
- ISO 3166-1 countries via pycountry
- Strict and lenient handling of invalid records
"""

import json
import logging

import pycountry
import pytest

from currency_catalog.core.exceptions import DataSourceError, RecordValidationError
from currency_catalog.reference_data import ReferenceDataLoader


class TestBundledData:
    """Tests against the shipped data files."""

    def test_load_currencies(self):
        """The bundled file yields every currency keyed by code."""
        currencies = ReferenceDataLoader().load_currencies()
        assert len(currencies) == 155
        assert all(code == record.code for code, record in currencies.items())

    def test_major_codes_present(self):
        """Major currency codes should be present."""
        currencies = ReferenceDataLoader().load_currencies()
        for code in ['USD', 'EUR', 'GBP', 'JPY', 'CNY', 'CHF']:
            assert code in currencies, f"Major currency {code} should be present"

    def test_load_country_currencies(self):
        """Quoted keys keep 'NO' a country code rather than a boolean."""
        mapping = ReferenceDataLoader().load_country_currencies()
        assert mapping['NO'] == 'NOK'
        assert mapping['US'] == 'USD'
        assert mapping['AQ'] is None
        assert all(isinstance(key, str) for key in mapping)

    def test_load_countries(self):
        """Every pycountry country is present, joined with its currency."""
        countries = ReferenceDataLoader().load_countries()
        assert countries.count() == len(pycountry.countries)
        japan = countries.get('JP')
        assert japan.alpha3 == 'JPN'
        assert japan.name == 'Japan'
        assert japan.currency_code == 'JPY'

    def test_data_source_info(self):
        info = ReferenceDataLoader(strict=False).get_data_source_info()
        assert info['strict'] is False
        assert info['sources']['currencies']['standard'] == 'ISO 4217'
        assert info['sources']['currencies']['path'].endswith('currencies.json')
        assert info['sources']['countries']['pycountry_record_count'] == len(pycountry.countries)


class TestCurrencyFile:
    """Tests for reading custom currency files."""

    def test_custom_file(self, write_currencies, currency_entry):
        path = write_currencies({
            'USD': currency_entry('USD', symbol='$', decimal_digits=2),
            'JPY': currency_entry('JPY', symbol='¥', decimal_digits=0),
        })
        currencies = ReferenceDataLoader(currencies_path=path).load_currencies()

        assert sorted(currencies) == ['JPY', 'USD']
        assert currencies['JPY'].symbol == '¥'
        assert currencies['JPY'].decimal_digits == 0

    def test_empty_object(self, write_currencies):
        assert ReferenceDataLoader(currencies_path=write_currencies({})).load_currencies() == {}

    def test_missing_file(self, tmp_path):
        loader = ReferenceDataLoader(currencies_path=tmp_path / 'missing.json')
        with pytest.raises(DataSourceError, match="not found") as exc_info:
            loader.load_currencies()
        assert exc_info.value.file_path.endswith('missing.json')

    def test_invalid_json(self, write_currencies):
        path = write_currencies('{"USD": ')
        with pytest.raises(DataSourceError, match="Failed to parse currency data") as exc_info:
            ReferenceDataLoader(currencies_path=path).load_currencies()
        assert exc_info.value.original_exception is not None

    def test_duplicate_keys(self, write_currencies, currency_entry):
        entry = json.dumps(currency_entry('USD'))
        path = write_currencies(f'{{"USD": {entry}, "USD": {entry}}}')
        with pytest.raises(DataSourceError, match="Duplicate key"):
            ReferenceDataLoader(currencies_path=path).load_currencies()

    def test_root_must_be_object(self, write_currencies, currency_entry):
        path = write_currencies([currency_entry('USD')])
        with pytest.raises(DataSourceError, match="must be a JSON object"):
            ReferenceDataLoader(currencies_path=path).load_currencies()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / 'currencies.json'
        path.write_bytes(b'{"USD": "\xff"}')
        with pytest.raises(DataSourceError, match="Failed to read"):
            ReferenceDataLoader(currencies_path=path).load_currencies()

    def test_size_limit(self, write_currencies, currency_entry, monkeypatch):
        monkeypatch.setattr('currency_catalog.reference_data.loader.MAX_DATA_FILE_SIZE', 16)
        path = write_currencies({'USD': currency_entry('USD')})
        with pytest.raises(DataSourceError, match="too large"):
            ReferenceDataLoader(currencies_path=path).load_currencies()


class TestCurrencyValidation:
    """Tests for per-entry schema validation."""

    @pytest.mark.parametrize("key,overrides,field", [
        ('USD', {'code': 'EUR'}, 'code'),
        ('USD', {'name': ''}, 'name'),
        ('USD', {'name_plural': None}, 'name_plural'),
        ('USD', {'symbol': 5}, 'symbol'),
        ('USD', {'symbol_native': '  '}, 'symbol_native'),
        ('USD', {'decimal_digits': -1}, 'decimal_digits'),
        ('USD', {'decimal_digits': '2'}, 'decimal_digits'),
        ('USD', {'decimal_digits': True}, 'decimal_digits'),
        ('USD', {'decimal_digits': 2.0}, 'decimal_digits'),
    ])
    def test_strict_rejects_invalid_field(self, write_currencies, currency_entry, key, overrides, field):
        path = write_currencies({key: currency_entry(key, **overrides)})
        with pytest.raises(RecordValidationError) as exc_info:
            ReferenceDataLoader(currencies_path=path).load_currencies()
        assert exc_info.value.record_key == key
        assert exc_info.value.field == field

    def test_missing_field(self, write_currencies, currency_entry):
        entry = currency_entry('USD')
        del entry['symbol']
        path = write_currencies({'USD': entry})
        with pytest.raises(RecordValidationError) as exc_info:
            ReferenceDataLoader(currencies_path=path).load_currencies()
        assert exc_info.value.field == 'symbol'

    @pytest.mark.parametrize("key", ['usd', 'US', 'USDX', '123'])
    def test_strict_rejects_invalid_key(self, write_currencies, currency_entry, key):
        path = write_currencies({key: currency_entry(key)})
        with pytest.raises(RecordValidationError, match="Invalid currency key"):
            ReferenceDataLoader(currencies_path=path).load_currencies()

    def test_entry_must_be_object(self, write_currencies):
        path = write_currencies({'USD': 'US Dollar'})
        with pytest.raises(RecordValidationError, match="must be an object"):
            ReferenceDataLoader(currencies_path=path).load_currencies()

    def test_lenient_skips_invalid_entries(self, write_currencies, currency_entry, caplog):
        path = write_currencies({
            'EUR': currency_entry('EUR'),
            'USD': currency_entry('USD', decimal_digits=-2),
        })
        with caplog.at_level(logging.WARNING, logger='currency_catalog'):
            currencies = ReferenceDataLoader(currencies_path=path, strict=False).load_currencies()

        assert list(currencies) == ['EUR']
        assert "Skipping invalid currency entry 'USD'" in caplog.text

    def test_lenient_still_fails_on_broken_file(self, write_currencies):
        path = write_currencies('not json')
        with pytest.raises(DataSourceError):
            ReferenceDataLoader(currencies_path=path, strict=False).load_currencies()


class TestCountryMapping:
    """Tests for the country -> currency mapping file."""

    def test_custom_mapping(self, write_mapping):
        path = write_mapping('"US": USD\n"NO": NOK\n"AQ": null\n')
        mapping = ReferenceDataLoader(country_currencies_path=path).load_country_currencies()
        assert mapping == {'US': 'USD', 'NO': 'NOK', 'AQ': None}

    def test_invalid_yaml(self, write_mapping):
        path = write_mapping('"US": [USD\n')
        with pytest.raises(DataSourceError, match="Failed to parse country currency mapping"):
            ReferenceDataLoader(country_currencies_path=path).load_country_currencies()

    def test_root_must_be_mapping(self, write_mapping):
        path = write_mapping('- US\n- USD\n')
        with pytest.raises(DataSourceError, match="must be a YAML mapping"):
            ReferenceDataLoader(country_currencies_path=path).load_country_currencies()

    @pytest.mark.parametrize("text", [
        '"USA": USD\n',
        '"us": USD\n',
        '"US": usd\n',
        '"US": 840\n',
        'NO: NOK\n',
    ])
    def test_strict_rejects_invalid_entry(self, write_mapping, text):
        path = write_mapping(text)
        with pytest.raises(RecordValidationError, match="Invalid country mapping"):
            ReferenceDataLoader(country_currencies_path=path).load_country_currencies()

    def test_lenient_skips_invalid_entry(self, write_mapping, caplog):
        path = write_mapping('"US": USD\n"DE": euro\n')
        with caplog.at_level(logging.WARNING, logger='currency_catalog'):
            mapping = ReferenceDataLoader(country_currencies_path=path, strict=False).load_country_currencies()

        assert mapping == {'US': 'USD'}
        assert "Skipping invalid country mapping 'DE': 'euro'" in caplog.text


class TestCountryLoading:
    """Tests for joining pycountry with the mapping."""

    def test_unmapped_countries_have_no_currency(self, write_mapping):
        path = write_mapping({'US': 'USD'})
        countries = ReferenceDataLoader(country_currencies_path=path).load_countries()

        assert countries.get('US').currency_code == 'USD'
        assert countries.get('FR').currency_code is None
        assert [c.alpha2 for c in countries.with_currency('USD')] == ['US']

    def test_unknown_country_code_is_skipped(self, write_mapping, caplog):
        path = write_mapping({'US': 'USD', 'XX': 'USD'})
        with caplog.at_level(logging.WARNING, logger='currency_catalog'):
            countries = ReferenceDataLoader(country_currencies_path=path).load_countries()

        assert 'XX' not in countries
        assert "Country code XX" in caplog.text
        assert "not in ISO 3166-1" in caplog.text

    def test_official_name(self):
        countries = ReferenceDataLoader().load_countries()
        assert countries.get('DE').official_name == 'Federal Republic of Germany'
