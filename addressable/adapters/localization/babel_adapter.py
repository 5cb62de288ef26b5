"""Babel country names adapter — implements CountryNamePort."""

from __future__ import annotations

from babel import Locale

from addressable.application.ports.country_names_port import CountryNamePort
from addressable.config import settings

# Alpha-2 codes CLDR uses for groupings and placeholders rather than countries
NON_COUNTRY_CODES = frozenset({"EU", "EZ", "QO", "UN", "XA", "XB", "ZZ"})


class BabelCountryNames(CountryNamePort):
    """Territory names from CLDR data for the configured locale."""

    def __init__(self, locale: str | None = None):
        self._locale = Locale.parse(locale or settings.locale)

    def country_name(self, code: str | None) -> str | None:
        if not code:
            return code
        return self._locale.territories.get(code.upper(), code)

    def all_countries(self) -> list[tuple[str, str]]:
        countries = [
            (code, name)
            for code, name in self._locale.territories.items()
            if len(code) == 2 and code.isalpha() and code not in NON_COUNTRY_CODES
        ]
        return sorted(countries, key=lambda item: item[1])
