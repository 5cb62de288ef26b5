"""Location entity — a named place carrying a postal address and coordinates."""

from dataclasses import dataclass, field

from addressable.domain.entities.address_record import AddressRecord
from addressable.domain.value_objects.coordinates import Coordinates
from addressable.domain.value_objects.enums import GeoStatus


@dataclass
class Location:
    id: int | None
    name: str
    address: AddressRecord = field(default_factory=AddressRecord)
    coordinates: Coordinates | None = None
    geo_status: GeoStatus = GeoStatus.PENDING

    def is_new(self) -> bool:
        return self.id is None

    def has_coordinates(self) -> bool:
        return self.coordinates is not None
