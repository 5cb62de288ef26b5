"""Tests for the location and health endpoints with dependency overrides (no network, no DB)."""

import pytest
from fastapi.testclient import TestClient

from addressable.adapters.persistence.database import get_session
from addressable.application.ports.geocoder_port import GeocoderPort
from addressable.application.ports.location_repo import LocationRepository
from addressable.application.use_cases.save_location import SaveLocationUseCase
from addressable.domain.value_objects.allowed_values import AllowedValues
from addressable.domain.value_objects.coordinates import Coordinates
from addressable.domain.value_objects.field_config import AddressFieldConfig
from addressable.infrastructure.api.dependencies import get_location_repo, get_save_location_uc
from addressable.main import create_app

SPRINGFIELD = Coordinates(latitude=39.78172, longitude=-89.65015)
MAP_URL = "https://maps.test/static"


class StubGeocoder(GeocoderPort):
    def __init__(self, result=SPRINGFIELD):
        self._result = result
        self.calls = []

    def resolve(self, address_text, region_hint=None):
        self.calls.append(address_text)
        return self._result


class InMemoryLocationRepo(LocationRepository):
    def __init__(self):
        self.locations = {}

    async def save(self, location):
        location.id = len(self.locations) + 1
        self.locations[location.id] = location
        return location

    async def get_by_id(self, location_id):
        return self.locations.get(location_id)

    async def get_all(self):
        return list(self.locations.values())

    async def update(self, location):
        self.locations[location.id] = location
        return location


class FakeSession:
    def __init__(self, error=None):
        self._error = error

    async def scalar(self, statement):
        if self._error:
            raise self._error
        return 1


@pytest.fixture
def geocoder():
    return StubGeocoder()


@pytest.fixture
def app():
    app = create_app()
    yield app
    app.dependency_overrides.clear()


def _client(app, geocoder, country_names, config=None) -> TestClient:
    repo = InMemoryLocationRepo()
    uc = SaveLocationUseCase(
        geocoder=geocoder,
        location_repo=repo,
        config=config or AddressFieldConfig(),
        country_names=country_names,
        static_map_url=MAP_URL,
    )
    app.dependency_overrides[get_save_location_uc] = lambda: uc
    app.dependency_overrides[get_location_repo] = lambda: repo
    return TestClient(app)


def _body(**overrides):
    body = {
        "name": "Springfield office",
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "postcode": "62704",
        "country": "US",
    }
    body.update(overrides)
    return body


# ─── Create ─────────────────────────────────────────────────────────


def test_create_geocodes_and_returns_map_url(app, geocoder, country_names):
    response = _client(app, geocoder, country_names).post("/api/locations", json=_body())

    assert response.status_code == 201
    data = response.json()
    assert data["geo_status"] == "resolved"
    assert data["latitude"] == pytest.approx(39.78172)
    assert data["full_address"] == "1 Main St, Springfield, IL 62704, United States"
    assert data["map_url"].startswith(f"{MAP_URL}?size=400x300&markers=")
    assert "1%20Main%20St" in data["map_url"]


def test_create_incomplete_address_has_no_map_url(app, geocoder, country_names):
    response = _client(app, geocoder, country_names).post(
        "/api/locations", json=_body(postcode=None)
    )

    assert response.status_code == 201
    data = response.json()
    assert data["has_address"] is False
    assert data["map_url"] is None
    assert geocoder.calls == []


def test_create_rejects_state_outside_enumerated_set(app, geocoder, country_names):
    config = AddressFieldConfig().with_allowed_states(["IL", "WI"])
    response = _client(app, geocoder, country_names, config).post(
        "/api/locations", json=_body(state="ZZ")
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid state: ZZ"
    assert geocoder.calls == []


def test_create_rejects_country_outside_enumerated_set(app, geocoder, country_names):
    config = AddressFieldConfig().with_allowed_countries(["US", "AU"])
    response = _client(app, geocoder, country_names, config).post(
        "/api/locations", json=_body(country="NZ")
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid country: NZ"


def test_create_accepts_state_in_enumerated_set(app, geocoder, country_names):
    config = AddressFieldConfig().with_allowed_states(["IL", "WI"])
    response = _client(app, geocoder, country_names, config).post(
        "/api/locations", json=_body(state="WI")
    )
    assert response.status_code == 201
    assert response.json()["state"] == "WI"


def test_create_ignores_body_country_when_fixed(app, geocoder, country_names):
    config = AddressFieldConfig(allowed_countries=AllowedValues.fixed("US"))
    response = _client(app, geocoder, country_names, config).post(
        "/api/locations", json=_body(country="NZ")
    )
    assert response.status_code == 201
    assert response.json()["country"] == "US"


def test_create_rejects_bad_postcode(app, geocoder, country_names):
    response = _client(app, geocoder, country_names).post(
        "/api/locations", json=_body(postcode="SW1A 1AA")
    )
    assert response.status_code == 422


# ─── Read / update ──────────────────────────────────────────────────


def test_get_and_update_location(app, geocoder, country_names):
    client = _client(app, geocoder, country_names)
    created = client.post("/api/locations", json=_body()).json()

    fetched = client.get(f"/api/locations/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["map_url"] == created["map_url"]

    updated = client.put(f"/api/locations/{created['id']}", json=_body(name="HQ"))
    assert updated.status_code == 200
    assert updated.json()["name"] == "HQ"
    assert len(geocoder.calls) == 1


def test_get_missing_location_is_404(app, geocoder, country_names):
    response = _client(app, geocoder, country_names).get("/api/locations/99")
    assert response.status_code == 404


# ─── Health ─────────────────────────────────────────────────────────


def test_health_reports_database_and_geocoding_host(app):
    app.dependency_overrides[get_session] = lambda: FakeSession()
    data = TestClient(app).get("/api/health").json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert data["geocoding_host"]
    assert data["geocoding_timeout"] > 0


def test_health_degraded_when_database_unreachable(app):
    app.dependency_overrides[get_session] = lambda: FakeSession(OSError("refused"))
    data = TestClient(app).get("/api/health").json()
    assert data["status"] == "degraded"
    assert data["database"] == "error: refused"
