"""Tests for the exception hierarchy."""

from addressable.exceptions import (
    AddressableError,
    GeocodingError,
    LocationNotFoundError,
    MalformedResponseError,
    NetworkError,
)


def test_geocoding_errors_share_a_base():
    assert isinstance(NetworkError("x"), GeocodingError)
    assert isinstance(MalformedResponseError("x"), GeocodingError)
    assert isinstance(GeocodingError("x"), AddressableError)


def test_network_and_malformed_are_distinct():
    assert not issubclass(NetworkError, MalformedResponseError)
    assert not issubclass(MalformedResponseError, NetworkError)


def test_location_not_found_is_not_a_geocoding_error():
    err = LocationNotFoundError("Location 7 not found")
    assert isinstance(err, AddressableError)
    assert not isinstance(err, GeocodingError)
    assert str(err) == "Location 7 not found"
