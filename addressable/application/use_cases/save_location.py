"""SaveLocationUseCase — write a location, geocoding its address when it changed."""

from __future__ import annotations

import asyncio
import logging

from addressable.application.ports.country_names_port import CountryNamePort
from addressable.application.ports.geocoder_port import GeocoderPort
from addressable.application.ports.location_repo import LocationRepository
from addressable.domain.entities.location import Location
from addressable.domain.policies.address_attributes import STATIC_MAP_URL, AddressAttributes
from addressable.domain.value_objects.coordinates import NOT_FOUND
from addressable.domain.value_objects.enums import GeoStatus
from addressable.domain.value_objects.field_config import AddressFieldConfig
from addressable.exceptions import GeocodingError

logger = logging.getLogger(__name__)


class SaveLocationUseCase:
    """Orchestrates the write lifecycle of a location."""

    def __init__(
        self,
        geocoder: GeocoderPort,
        location_repo: LocationRepository,
        config: AddressFieldConfig | None = None,
        country_names: CountryNamePort | None = None,
        static_map_url: str = STATIC_MAP_URL,
    ):
        self._geocoder = geocoder
        self._locations = location_repo
        self._config = config or AddressFieldConfig()
        self._country_names = country_names
        self._static_map_url = static_map_url

    def attributes_for(self, location: Location) -> AddressAttributes:
        return AddressAttributes(
            location.address,
            self._config,
            country_names=self._country_names,
            static_map_url=self._static_map_url,
        )

    async def execute(self, location: Location) -> Location:
        """Persist ``location``.

        Pipeline:
        1. Fill fixed state/country on new locations
        2. Geocode if the address is complete and changed (or never resolved)
        3. Save or update, then forget tracked changes
        """
        attributes = self.attributes_for(location)
        if location.is_new():
            attributes.populate_defaults()

        if attributes.has_address() and (
            attributes.is_address_changed() or not location.has_coordinates()
        ):
            await self._geocode(location, attributes)

        if location.is_new():
            saved = await self._locations.save(location)
        else:
            saved = await self._locations.update(location)

        location.address.clear_changes()
        return saved

    async def _geocode(self, location: Location, attributes: AddressAttributes) -> None:
        full_address = attributes.get_full_address()
        try:
            result = await asyncio.to_thread(
                self._geocoder.resolve, full_address, location.address.country_code
            )
        except GeocodingError:
            logger.exception("Geocoding failed for location '%s'", location.name)
            location.geo_status = GeoStatus.FAILED
            return

        if result is NOT_FOUND:
            location.coordinates = None
            location.geo_status = GeoStatus.NOT_FOUND
        else:
            location.coordinates = result
            location.geo_status = GeoStatus.RESOLVED
