"""Address attributes — which widgets represent an address, and queries over it.

The field set is driven by an AddressFieldConfig captured at construction:

- State / Country fixed to one value → no field, the value is written by
  ``populate_defaults``
- State / Country enumerated → dropdown with exactly those choices, in order
- otherwise → free text for State, a full country picker for Country

Callers may append or modify the built fields through ``on_build_fields``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from addressable.domain.entities.address_record import ADDRESS_FIELDS, AddressRecord
from addressable.domain.value_objects.allowed_values import AllowedValues
from addressable.domain.value_objects.enums import ChangeLevel, FieldKind
from addressable.domain.value_objects.field_config import AddressFieldConfig
from addressable.domain.value_objects.field_descriptor import FieldDescriptor

if TYPE_CHECKING:
    from addressable.application.ports.country_names_port import CountryNamePort

FieldsHook = Callable[[list[FieldDescriptor]], list[FieldDescriptor]]

STATIC_MAP_URL = "https://maps.googleapis.com/maps/api/staticmap"

LABELS: dict[str, str] = {
    "AddressHeader": "Address",
    "Address": "Address",
    "City": "City",
    "State": "State",
    "Postcode": "Postcode",
    "Country": "Country",
}


class AddressAttributes:
    """Address field configuration and derived queries for one host record."""

    def __init__(
        self,
        record: AddressRecord,
        config: AddressFieldConfig | None = None,
        *,
        country_names: CountryNamePort | None = None,
        on_build_fields: FieldsHook | None = None,
        static_map_url: str = STATIC_MAP_URL,
    ):
        self.record = record
        # Frozen config: later overrides replace our copy, never the caller's.
        self._config = config or AddressFieldConfig()
        self._country_names = country_names
        self._on_build_fields = on_build_fields
        self._static_map_url = static_map_url

    # ─── Configuration ───────────────────────────────────────────────

    @property
    def config(self) -> AddressFieldConfig:
        return self._config

    @property
    def allowed_states(self) -> AllowedValues:
        return self._config.allowed_states

    @property
    def allowed_countries(self) -> AllowedValues:
        return self._config.allowed_countries

    @property
    def postcode_pattern(self) -> str | None:
        return self._config.postcode_pattern

    def set_allowed_states(self, states: object) -> None:
        """None → free text, "XX" → fixed, ["A", "B"] → dropdown."""
        self._config = self._config.with_allowed_states(states)

    def set_allowed_countries(self, countries: object) -> None:
        """None → country picker, "NZ" → fixed, ["NZ", "AU"] → dropdown."""
        self._config = self._config.with_allowed_countries(countries)

    def set_postcode_pattern(self, pattern: str | None) -> None:
        """Replace the postcode regex; None disables postcode validation."""
        self._config = self._config.with_postcode_pattern(pattern)

    # ─── Fields ──────────────────────────────────────────────────────

    def build_address_fields(self, include_header: bool = True) -> list[FieldDescriptor]:
        fields = [
            FieldDescriptor("Address", FieldKind.TEXT, LABELS["Address"]),
            FieldDescriptor("City", FieldKind.TEXT, LABELS["City"]),
        ]
        if include_header:
            fields.insert(0, FieldDescriptor("AddressHeader", FieldKind.HEADER, LABELS["AddressHeader"]))

        states = self.allowed_states
        if states.is_enumerated:
            fields.append(
                FieldDescriptor(
                    "State",
                    FieldKind.DROPDOWN,
                    LABELS["State"],
                    choices=tuple((s, s) for s in states.values),
                )
            )
        elif not states.is_fixed:
            fields.append(FieldDescriptor("State", FieldKind.TEXT, LABELS["State"]))

        fields.append(
            FieldDescriptor(
                "Postcode",
                FieldKind.REGEX_TEXT,
                LABELS["Postcode"],
                pattern=self.postcode_pattern,
            )
        )

        countries = self.allowed_countries
        if countries.is_enumerated:
            fields.append(
                FieldDescriptor(
                    "Country",
                    FieldKind.DROPDOWN,
                    LABELS["Country"],
                    choices=tuple((c, self._country_label(c)) for c in countries.values),
                )
            )
        elif not countries.is_fixed:
            all_countries = self._country_names.all_countries() if self._country_names else []
            fields.append(
                FieldDescriptor(
                    "Country",
                    FieldKind.COUNTRY_DROPDOWN,
                    LABELS["Country"],
                    choices=tuple(all_countries),
                )
            )

        if self._on_build_fields is not None:
            fields = self._on_build_fields(fields)
        return fields

    def populate_defaults(self) -> None:
        if self.allowed_states.is_fixed:
            self.record.state = self.allowed_states.fixed_value
        if self.allowed_countries.is_fixed:
            self.record.country_code = self.allowed_countries.fixed_value

    def validate_postcode(self, value: str | None) -> bool:
        """True if no pattern is configured or ``value`` matches it."""
        if not self.postcode_pattern:
            return True
        return re.search(self.postcode_pattern, value or "") is not None

    # ─── Queries ─────────────────────────────────────────────────────

    def has_address(self) -> bool:
        return self.record.is_complete()

    def is_address_changed(self, level: int = ChangeLevel.STRICT) -> bool:
        changed = self.record.changed_fields(level)
        return any(name in changed for name in ADDRESS_FIELDS)

    def get_country_name(self) -> str | None:
        if self._country_names is None:
            return self.record.country_code
        return self._country_names.country_name(self.record.country_code)

    def get_full_address(self) -> str:
        r = self.record
        return "%s, %s, %s %s, %s" % (
            r.street_address or "",
            r.city or "",
            r.state or "",
            r.postcode or "",
            self.get_country_name() or "",
        )

    def address_map_url(self, width: int, height: int) -> str:
        """Static map image URL centred on the full address."""
        query = urlencode(
            {"size": f"{width}x{height}", "markers": self.get_full_address()},
            quote_via=quote,
        )
        return f"{self._static_map_url}?{query}"

    def _country_label(self, code: str) -> str:
        if self._country_names is None:
            return code
        return self._country_names.country_name(code) or code
