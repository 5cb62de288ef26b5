"""Exception hierarchy for addressable."""


class AddressableError(Exception):
    """Base exception for all addressable errors."""


class GeocodingError(AddressableError):
    """Raised when a geocoding query could not be completed."""


class NetworkError(GeocodingError):
    """Raised on transport failure or a non-success HTTP status."""


class MalformedResponseError(GeocodingError):
    """Raised when the provider body is not XML or a place lacks usable lat/lon."""


class LocationNotFoundError(AddressableError):
    """Raised when a referenced location does not exist."""
