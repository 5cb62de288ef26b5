"""Pytest configuration and shared fixtures."""

import pytest

from addressable.application.ports.country_names_port import CountryNamePort
from addressable.domain.entities.address_record import AddressRecord

PLACE_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<searchresults timestamp="Mon, 19 Oct 26 10:00:00 +0000" querystring="101-103 Courtenay Place" exclude_place_ids="1" more_url="">
<place place_id="1" osm_type="way" osm_id="2" place_rank="30" address_rank="30"
 boundingbox="-41.2926,-41.2925,174.7789,174.7790" lat="-41.29256" lon="174.77896"
 display_name="101-103 Courtenay Place, Te Aro, Wellington 6011, New Zealand" class="building" type="yes" importance="0.2"/>
</searchresults>
"""

EMPTY_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<searchresults timestamp="Mon, 19 Oct 26 10:00:00 +0000" querystring="nowhere at all" more_url="">
</searchresults>
"""


class FakeCountryNames(CountryNamePort):
    """In-memory stand-in for the CLDR country names adapter."""

    NAMES = {"US": "United States", "NZ": "New Zealand", "AU": "Australia"}

    def country_name(self, code):
        if not code:
            return code
        return self.NAMES.get(code, code)

    def all_countries(self):
        return sorted(self.NAMES.items(), key=lambda item: item[1])


@pytest.fixture
def place_xml() -> bytes:
    return PLACE_XML


@pytest.fixture
def empty_xml() -> bytes:
    return EMPTY_XML


@pytest.fixture
def country_names() -> FakeCountryNames:
    return FakeCountryNames()


@pytest.fixture
def springfield() -> AddressRecord:
    return AddressRecord(
        street_address="1 Main St",
        city="Springfield",
        state="IL",
        postcode="62704",
        country_code="US",
    )
