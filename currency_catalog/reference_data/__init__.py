"""
Reference data for the currency catalog.

- ISO 4217: Currencies (bundled currencies.json)
- ISO 3166-1: Countries (via pycountry) with their currencies
  (bundled country_currencies.yaml)

Data is read once by ReferenceDataLoader when a catalog is built.
"""

from currency_catalog.reference_data.loader import ReferenceDataLoader

__all__ = ['ReferenceDataLoader']
