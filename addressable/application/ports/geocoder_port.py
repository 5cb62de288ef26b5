"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from addressable.domain.value_objects.coordinates import GeocodeResult


class GeocoderPort(ABC):
    @abstractmethod
    def resolve(self, address_text: str, region_hint: str | None = None) -> GeocodeResult:
        """Convert an address string to lat/lon coordinates.

        Returns NOT_FOUND if the provider has no match. Raises NetworkError or
        MalformedResponseError when the query itself fails.
        """
        ...
