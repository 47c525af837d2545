"""
Read-only catalog of ISO 3166-1 countries and the currencies they use.

The currency catalog cross-references this collaborator for
``for_country`` and ``countries_for_currency``. It is normally built by
ReferenceDataLoader from pycountry plus the bundled currency mapping, but
accepts any iterable of CountryRecord.
"""

from types import MappingProxyType
from typing import Iterable, List, Optional

from currency_catalog.core.exceptions import DataSourceError, NotFoundError, ParameterTypeError
from currency_catalog.core.models import CountryRecord


def normalize_code(code, parameter: str = "code") -> str:
    """Uppercase a lookup code, rejecting non-string input."""
    if not isinstance(code, str):
        raise ParameterTypeError(
            f"{parameter} must be a string, got {type(code).__name__}",
            parameter=parameter,
            value=code
        )
    return code.upper()


class CountryCatalog:
    """Immutable alpha-2 -> CountryRecord mapping."""

    def __init__(self, records: Iterable[CountryRecord]):
        countries = {}
        for record in records:
            key = record.alpha2.upper()
            if key in countries:
                raise DataSourceError(f"Duplicate country code in country data: {key}")
            countries[key] = record

        self._countries = MappingProxyType(countries)
        self._sorted = tuple(sorted(countries.values(), key=lambda c: c.name))

    def get(self, alpha2: str) -> Optional[CountryRecord]:
        """Return the country for a case-insensitive alpha-2 code, or None."""
        return self._countries.get(normalize_code(alpha2, "country_code"))

    def get_required(self, alpha2: str) -> CountryRecord:
        """Return the country for an alpha-2 code or raise NotFoundError."""
        country = self.get(alpha2)
        if country is None:
            raise NotFoundError(alpha2, kind="country")
        return country

    def all(self) -> List[CountryRecord]:
        """All countries sorted by name."""
        return list(self._sorted)

    def count(self) -> int:
        return len(self._countries)

    def with_currency(self, currency_code: str) -> List[CountryRecord]:
        """
        Countries whose currency_code equals the given code, sorted by name.

        The input is uppercased; stored codes are already uppercase and are
        compared exactly.
        """
        code = normalize_code(currency_code, "currency_code")
        return [country for country in self._sorted if country.currency_code == code]

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, alpha2) -> bool:
        return isinstance(alpha2, str) and alpha2.upper() in self._countries

    def __repr__(self) -> str:
        return f"CountryCatalog(count={len(self._countries)})"
