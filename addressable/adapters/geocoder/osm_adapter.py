"""OpenStreetMap geocoder adapter — implements GeocoderPort.

One GET per call, XML response:

    <searchresults ...>
      <place ... lat="-41.29256" lon="174.77896" .../>
    </searchresults>

The first ``place`` wins; no ``place`` means NOT_FOUND.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import httpx

from addressable.application.ports.geocoder_port import GeocoderPort
from addressable.config import settings
from addressable.domain.value_objects.coordinates import (
    NOT_FOUND,
    Coordinates,
    GeocodeQuery,
    GeocodeResult,
)
from addressable.exceptions import MalformedResponseError, NetworkError

logger = logging.getLogger(__name__)


class OSMGeocoder(GeocoderPort):
    """Nominatim-style XML search, single shot, no caching."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        client: httpx.Client | None = None,
    ):
        self._base_url = base_url or settings.geocoding_base_url
        # Not part of the OSM query; exposed for provider integrations.
        self.api_key = api_key if api_key is not None else settings.geocoding_api_key
        self._timeout = timeout if timeout is not None else settings.geocoding_timeout
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._client = client

    def resolve(self, address_text: str, region_hint: str | None = None) -> GeocodeResult:
        query = GeocodeQuery(address_text, region_hint)
        body = self._fetch(query)
        result = self._parse(body)

        if result is NOT_FOUND:
            logger.info("OSM returned no place for '%s' (region=%s)", address_text, query.region_hint)
        else:
            logger.info(
                "OSM resolved '%s' → (%f, %f)",
                address_text, result.latitude, result.longitude,
            )
        return result

    def _fetch(self, query: GeocodeQuery) -> bytes:
        params: dict[str, str | int] = {"format": "xml", "q": query.address_text}
        if query.region_hint:
            params["country"] = query.region_hint
        params["limit"] = 1

        try:
            if self._client is not None:
                response = self._request(self._client, params)
            else:
                with httpx.Client() as client:
                    response = self._request(client, params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"Geocoding request for '{query.address_text}' failed: {e}") from e
        return response.content

    def _request(self, client: httpx.Client, params: dict) -> httpx.Response:
        return client.get(
            self._base_url,
            params=params,
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
        )

    @staticmethod
    def _parse(body: bytes) -> GeocodeResult:
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            raise MalformedResponseError(f"Geocoding response is not XML: {e}") from e

        place = root if root.tag == "place" else root.find(".//place")
        if place is None:
            return NOT_FOUND

        try:
            lat = float(place.attrib["lat"])
            lon = float(place.attrib["lon"])
        except (KeyError, ValueError) as e:
            raise MalformedResponseError(f"Place has no usable lat/lon: {place.attrib!r}") from e
        return Coordinates(latitude=lat, longitude=lon)


def address_to_point(address: str, region: str | None = None) -> GeocodeResult:
    """Resolve an address with the default-configured geocoder."""
    return OSMGeocoder().resolve(address, region)
