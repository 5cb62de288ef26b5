"""Port interface for localized country names."""

from abc import ABC, abstractmethod


class CountryNamePort(ABC):
    @abstractmethod
    def country_name(self, code: str | None) -> str | None:
        """Return the display name for a 2-letter country code."""
        ...

    @abstractmethod
    def all_countries(self) -> list[tuple[str, str]]:
        """Return (code, name) pairs for every country, sorted by name."""
        ...
