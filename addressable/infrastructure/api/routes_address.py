"""Address endpoints — field descriptors and one-off geocoding."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from addressable.application.ports.country_names_port import CountryNamePort
from addressable.application.ports.geocoder_port import GeocoderPort
from addressable.domain.entities.address_record import AddressRecord
from addressable.domain.policies.address_attributes import AddressAttributes
from addressable.domain.value_objects.coordinates import NOT_FOUND
from addressable.domain.value_objects.field_config import AddressFieldConfig
from addressable.exceptions import GeocodingError
from addressable.infrastructure.api.dependencies import (
    get_country_names,
    get_field_config,
    get_geocoder,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["address"])


class GeocodeRequest(BaseModel):
    address: str = Field(min_length=1)
    region: str | None = Field(default=None, min_length=2, max_length=2)


@router.get("/address/fields")
async def address_fields(
    include_header: bool = True,
    config: AddressFieldConfig = Depends(get_field_config),
    country_names: CountryNamePort = Depends(get_country_names),
):
    """Describe the widgets that edit an address under the configured defaults."""
    attributes = AddressAttributes(AddressRecord(), config, country_names=country_names)
    fields = attributes.build_address_fields(include_header=include_header)
    return {"fields": [f.to_dict() for f in fields]}


# Plain def: the resolver blocks, so FastAPI runs it in the threadpool.
@router.post("/geocode")
def geocode(body: GeocodeRequest, geocoder: GeocoderPort = Depends(get_geocoder)):
    """Resolve a free-text address to coordinates."""
    try:
        result = geocoder.resolve(body.address, body.region)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except GeocodingError as e:
        logger.warning("Geocoding failed for '%s': %s", body.address, e)
        raise HTTPException(status_code=502, detail=str(e))

    if result is NOT_FOUND:
        return {"status": "not_found", "latitude": None, "longitude": None}
    return {"status": "ok", "latitude": result.latitude, "longitude": result.longitude}
