"""Coordinates value object and the NotFound geocoding outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


class NotFound:
    """The provider had no match for a valid query.

    Returned as a value, never raised. Use the ``NOT_FOUND`` singleton.
    """

    _instance: NotFound | None = None

    def __new__(cls) -> NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

GeocodeResult = Union[Coordinates, NotFound]


@dataclass(frozen=True)
class GeocodeQuery:
    address_text: str
    region_hint: str | None = None

    def __post_init__(self) -> None:
        if self.region_hint is None:
            return
        region = self.region_hint.strip().upper()
        if len(region) != 2 or not region.isalpha():
            raise ValueError(f"Region hint must be a 2-letter code, got {self.region_hint!r}")
        object.__setattr__(self, "region_hint", region)
