"""Location endpoints — CRUD with geocoding on write."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from addressable.adapters.persistence.repositories import SqlLocationRepository
from addressable.application.use_cases.save_location import SaveLocationUseCase
from addressable.domain.entities.address_record import AddressRecord
from addressable.domain.entities.location import Location
from addressable.exceptions import LocationNotFoundError
from addressable.infrastructure.api.dependencies import get_location_repo, get_save_location_uc

router = APIRouter(prefix="/locations", tags=["locations"])

MAP_WIDTH = 400
MAP_HEIGHT = 300


class LocationIn(BaseModel):
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    postcode: str | None = None
    country: str | None = None


@router.get("")
async def list_locations(
    repo: SqlLocationRepository = Depends(get_location_repo),
    uc: SaveLocationUseCase = Depends(get_save_location_uc),
):
    """List all locations with their full address and coordinates."""
    locations = await repo.get_all()
    return {
        "total": len(locations),
        "locations": [_serialize_location(loc, uc) for loc in locations],
    }


@router.get("/{location_id}")
async def get_location(
    location_id: int,
    repo: SqlLocationRepository = Depends(get_location_repo),
    uc: SaveLocationUseCase = Depends(get_save_location_uc),
):
    location = await repo.get_by_id(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return _serialize_location(location, uc)


@router.post("", status_code=201)
async def create_location(
    body: LocationIn,
    uc: SaveLocationUseCase = Depends(get_save_location_uc),
):
    """Create a location; the address is geocoded when complete."""
    location = Location(id=None, name=body.name)
    _apply_body(location, body, uc)
    saved = await uc.execute(location)
    return _serialize_location(saved, uc)


@router.put("/{location_id}")
async def update_location(
    location_id: int,
    body: LocationIn,
    repo: SqlLocationRepository = Depends(get_location_repo),
    uc: SaveLocationUseCase = Depends(get_save_location_uc),
):
    """Update a location; the address is re-geocoded only if it changed."""
    location = await repo.get_by_id(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")

    location.name = body.name
    _apply_body(location, body, uc)
    try:
        saved = await uc.execute(location)
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _serialize_location(saved, uc)


def _apply_body(location: Location, body: LocationIn, uc: SaveLocationUseCase) -> None:
    """Copy request fields onto the record, enforcing the configured field rules."""
    record: AddressRecord = location.address
    attributes = uc.attributes_for(location)
    try:
        record.street_address = body.address
        record.city = body.city
        if not attributes.allowed_states.is_fixed:
            record.state = body.state
        record.postcode = body.postcode
        if not attributes.allowed_countries.is_fixed:
            record.country_code = body.country
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    attributes.populate_defaults()

    if body.postcode and not attributes.validate_postcode(body.postcode):
        raise HTTPException(status_code=422, detail=f"Invalid postcode: {body.postcode}")

    for label, allowed, value in (
        ("state", attributes.allowed_states, record.state),
        ("country", attributes.allowed_countries, record.country_code),
    ):
        if allowed.is_enumerated and value and value not in allowed.values:
            raise HTTPException(status_code=422, detail=f"Invalid {label}: {value}")


def _serialize_location(location: Location, uc: SaveLocationUseCase) -> dict:
    """Convert a Location to an API response dict."""
    attributes = uc.attributes_for(location)
    a = location.address
    return {
        "id": location.id,
        "name": location.name,
        "address": a.street_address,
        "city": a.city,
        "state": a.state,
        "postcode": a.postcode,
        "country": a.country_code,
        "full_address": attributes.get_full_address() if attributes.has_address() else None,
        "has_address": attributes.has_address(),
        "map_url": (
            attributes.address_map_url(MAP_WIDTH, MAP_HEIGHT) if attributes.has_address() else None
        ),
        "latitude": location.coordinates.latitude if location.coordinates else None,
        "longitude": location.coordinates.longitude if location.coordinates else None,
        "geo_status": location.geo_status.value,
    }
