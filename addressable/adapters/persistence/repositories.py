"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from addressable.adapters.persistence.models import LocationModel
from addressable.application.ports.location_repo import LocationRepository
from addressable.domain.entities.address_record import AddressRecord
from addressable.domain.entities.location import Location
from addressable.domain.value_objects.coordinates import Coordinates
from addressable.domain.value_objects.enums import GeoStatus
from addressable.exceptions import LocationNotFoundError

# ─── Mappers ─────────────────────────────────────────────────────────


def _location_to_domain(m: LocationModel) -> Location:
    coordinates = None
    if m.lat is not None and m.lng is not None:
        coordinates = Coordinates(latitude=m.lat, longitude=m.lng)
    return Location(
        id=m.id,
        name=m.name,
        address=AddressRecord(
            street_address=m.address,
            city=m.city,
            state=m.state,
            postcode=m.postcode,
            country_code=m.country,
        ),
        coordinates=coordinates,
        geo_status=GeoStatus(m.geo_status),
    )


def _apply_to_model(location: Location, m: LocationModel) -> None:
    a = location.address
    m.name = location.name
    m.address = a.street_address
    m.city = a.city
    m.state = a.state
    m.postcode = a.postcode
    m.country = a.country_code
    m.lat = location.coordinates.latitude if location.coordinates else None
    m.lng = location.coordinates.longitude if location.coordinates else None
    m.geo_status = location.geo_status.value


# ─── Repositories ────────────────────────────────────────────────────


class SqlLocationRepository(LocationRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, location: Location) -> Location:
        model = LocationModel()
        _apply_to_model(location, model)
        self._session.add(model)
        await self._session.flush()
        location.id = model.id
        return location

    async def get_by_id(self, location_id: int) -> Location | None:
        model = await self._session.get(LocationModel, location_id)
        return _location_to_domain(model) if model else None

    async def get_all(self) -> list[Location]:
        result = await self._session.execute(select(LocationModel).order_by(LocationModel.id))
        return [_location_to_domain(m) for m in result.scalars().all()]

    async def update(self, location: Location) -> Location:
        model = await self._session.get(LocationModel, location.id)
        if model is None:
            raise LocationNotFoundError(f"Location {location.id} not found")
        _apply_to_model(location, model)
        await self._session.flush()
        return location
