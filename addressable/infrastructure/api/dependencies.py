"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from addressable.adapters.geocoder.osm_adapter import OSMGeocoder
from addressable.adapters.localization.babel_adapter import BabelCountryNames
from addressable.adapters.persistence.database import get_session
from addressable.adapters.persistence.repositories import SqlLocationRepository
from addressable.application.ports.country_names_port import CountryNamePort
from addressable.application.ports.geocoder_port import GeocoderPort
from addressable.application.use_cases.save_location import SaveLocationUseCase
from addressable.config import settings
from addressable.domain.value_objects.field_config import AddressFieldConfig

# Process-wide defaults, captured by every AddressAttributes built from them
_field_config = AddressFieldConfig.from_settings(settings)

# Singleton adapters (stateless)
_geocoder_adapter = OSMGeocoder()
_country_names = BabelCountryNames()


def get_field_config() -> AddressFieldConfig:
    return _field_config


def get_geocoder() -> GeocoderPort:
    return _geocoder_adapter


def get_country_names() -> CountryNamePort:
    return _country_names


def get_location_repo(session: AsyncSession = Depends(get_session)) -> SqlLocationRepository:
    return SqlLocationRepository(session)


def get_save_location_uc(
    session: AsyncSession = Depends(get_session),
    geocoder: GeocoderPort = Depends(get_geocoder),
    config: AddressFieldConfig = Depends(get_field_config),
    country_names: CountryNamePort = Depends(get_country_names),
) -> SaveLocationUseCase:
    return SaveLocationUseCase(
        geocoder=geocoder,
        location_repo=SqlLocationRepository(session),
        config=config,
        country_names=country_names,
        static_map_url=settings.static_map_url,
    )
