"""Tests for the LocationModel <-> Location mappers (no database)."""

from addressable.adapters.persistence.models import LocationModel
from addressable.adapters.persistence.repositories import _apply_to_model, _location_to_domain
from addressable.domain.entities.address_record import AddressRecord
from addressable.domain.entities.location import Location
from addressable.domain.value_objects.coordinates import Coordinates
from addressable.domain.value_objects.enums import GeoStatus


def test_model_to_domain():
    model = LocationModel(
        id=3, name="Courtenay Place", address="101-103 Courtenay Place",
        city="Wellington", state="Wellington", postcode="6011", country="NZ",
        lat=-41.29256, lng=174.77896, geo_status="resolved",
    )
    location = _location_to_domain(model)
    assert location.id == 3
    assert location.address.street_address == "101-103 Courtenay Place"
    assert location.address.country_code == "NZ"
    assert location.coordinates == Coordinates(latitude=-41.29256, longitude=174.77896)
    assert location.geo_status == GeoStatus.RESOLVED
    assert location.address.changed_fields() == {}


def test_model_without_coordinates():
    model = LocationModel(id=1, name="Empty", lat=None, lng=None, geo_status="pending")
    assert _location_to_domain(model).coordinates is None


def test_domain_to_model():
    location = Location(
        id=None,
        name="Sheboygan",
        address=AddressRecord(
            street_address="1526 South 12th Street", city="Sheboygan",
            state="WI", postcode="53081", country_code="US",
        ),
        coordinates=Coordinates(latitude=43.7377, longitude=-87.72003),
        geo_status=GeoStatus.RESOLVED,
    )
    model = LocationModel()
    _apply_to_model(location, model)
    assert model.address == "1526 South 12th Street"
    assert model.state == "WI"
    assert model.country == "US"
    assert (model.lat, model.lng) == (43.7377, -87.72003)
    assert model.geo_status == "resolved"
