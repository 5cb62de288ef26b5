"""AddressRecord entity — the five-field postal address embedded in a host entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from addressable.domain.value_objects.enums import ChangeLevel

# Attribute name → persisted column name
ADDRESS_COLUMNS: dict[str, str] = {
    "street_address": "Address",
    "city": "City",
    "state": "State",
    "postcode": "Postcode",
    "country_code": "Country",
}

ADDRESS_FIELDS: tuple[str, ...] = tuple(ADDRESS_COLUMNS)


@dataclass
class AddressRecord:
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    postcode: str | None = None
    country_code: str | None = None
    _changes: dict[str, ChangeLevel] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.clear_changes()

    def __setattr__(self, name: str, value) -> None:
        if name == "country_code" and value:
            value = value.strip().upper()
            if len(value) != 2 or not value.isalpha():
                raise ValueError(f"Country must be a 2-letter code, got {value!r}")

        if name in ADDRESS_FIELDS and "_changes" in self.__dict__:
            old = self.__dict__.get(name)
            level = _change_level(old, value)
            if level > self._changes.get(name, ChangeLevel.NONE):
                self._changes[name] = level

        super().__setattr__(name, value)

    def changed_fields(self, level: int = ChangeLevel.STRICT) -> dict[str, ChangeLevel]:
        """Fields whose recorded change is at or above ``level``."""
        return {name: lvl for name, lvl in self._changes.items() if lvl >= level}

    def clear_changes(self) -> None:
        self._changes = {}

    def is_complete(self) -> bool:
        return all(getattr(self, name) for name in ADDRESS_FIELDS)


def _change_level(old, new) -> ChangeLevel:
    if old == new and type(old) is type(new):
        return ChangeLevel.NONE
    if (old or None) == (new or None):
        return ChangeLevel.STRICT
    return ChangeLevel.VALUE
