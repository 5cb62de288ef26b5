"""AddressFieldConfig — per-instance configuration for address fields."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from addressable.domain.value_objects.allowed_values import AllowedValues

if TYPE_CHECKING:
    from addressable.config import Settings

DEFAULT_POSTCODE_PATTERN = r"^[0-9]+$"


@dataclass(frozen=True)
class AddressFieldConfig:
    allowed_states: AllowedValues = field(default_factory=AllowedValues.free_text)
    allowed_countries: AllowedValues = field(default_factory=AllowedValues.free_text)
    postcode_pattern: str | None = DEFAULT_POSTCODE_PATTERN

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed_countries", _country_choices(self.allowed_countries))

    def with_allowed_states(self, value: object) -> AddressFieldConfig:
        return replace(self, allowed_states=AllowedValues.coerce(value))

    def with_allowed_countries(self, value: object) -> AddressFieldConfig:
        return replace(self, allowed_countries=AllowedValues.coerce(value))

    def with_postcode_pattern(self, pattern: str | None) -> AddressFieldConfig:
        return replace(self, postcode_pattern=pattern)

    @classmethod
    def from_settings(cls, settings: Settings) -> AddressFieldConfig:
        """Build the process-wide defaults from application settings."""
        return cls(
            allowed_states=AllowedValues.coerce(_parse_allowed(settings.addressable_allowed_states)),
            allowed_countries=AllowedValues.coerce(
                _parse_allowed(settings.addressable_allowed_countries)
            ),
            postcode_pattern=settings.addressable_postcode_pattern or DEFAULT_POSTCODE_PATTERN,
        )


def _country_choices(allowed: AllowedValues) -> AllowedValues:
    """Upper-case country codes; drop anything that is not a 2-letter code.

    A fixed value that is not a code falls back to free text.
    """
    codes = [v.strip().upper() for v in allowed.values]
    codes = [c for c in codes if len(c) == 2 and c.isalpha()]
    if allowed.is_fixed:
        return AllowedValues.fixed(codes[0]) if codes else AllowedValues.free_text()
    if allowed.is_enumerated:
        return AllowedValues.enumerated(codes)
    return allowed


def _parse_allowed(raw: str | None) -> object:
    """Decode a JSON allowed-values setting; a bare word is a fixed value."""
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw.strip()
