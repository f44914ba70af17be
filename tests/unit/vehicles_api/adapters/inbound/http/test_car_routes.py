"""Unit tests for the vehicles HTTP routes."""

from decimal import Decimal
from typing import Optional
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from vehicles_api.adapters.inbound.http import routes
from vehicles_api.adapters.inbound.http.routes import router
from vehicles_api.adapters.outbound.car.car_repository import InMemoryCarRepository
from vehicles_api.adapters.outbound.manufacturer.manufacturer_repository import (
    InMemoryManufacturerRepository,
)
from vehicles_api.adapters.outbound.maps.http_maps_client import HttpMapsClient
from vehicles_api.adapters.outbound.maps.noop_maps_client import NoOpMapsClient
from vehicles_api.adapters.outbound.pricing.http_price_client import HttpPriceClient
from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.application.use_cases.car_service import CarService
from vehicles_api.domain.exceptions import CollaboratorUnavailableError, PersistenceError
from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.domain.value_objects.manufacturer import DEFAULT_MANUFACTURERS

IMPALA = {
    "condition": "USED",
    "details": {
        "manufacturer": {"code": 101, "name": "Chevrolet"},
        "model": "Impala",
        "production_year": 2018,
        "model_year": 2018,
        "mileage": 32280,
        "external_color": "white",
        "body": "sedan",
        "engine": "3.6L V6",
        "fuel_type": "Gasoline",
        "number_of_doors": 4,
    },
    "location": {"lat": 40.730610, "lon": -73.935242},
}

A5 = {
    "condition": "USED",
    "details": {
        "manufacturer": {"code": 100},
        "model": "A5",
        "production_year": 2017,
        "model_year": 2016,
        "mileage": 45734,
        "external_color": "black",
        "body": "coupe",
        "engine": "3.0 TFSI quattro",
        "fuel_type": "Gasoline",
        "number_of_doors": 2,
    },
    "location": {"lat": 25.782340, "lon": -80.369541},
}


class FixedPriceClient(PriceClient):
    """Price client quoting the same price for every car."""

    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        return CarPrice(currency="USD", amount=Decimal("15689.40"))


class DownPriceClient(PriceClient):
    """Price client whose service is unreachable."""

    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        raise CollaboratorUnavailableError("pricing", "connection refused")


def make_service(price_client: PriceClient) -> CarService:
    return CarService(
        InMemoryCarRepository(),
        InMemoryManufacturerRepository(DEFAULT_MANUFACTURERS),
        price_client,
        NoOpMapsClient(),
        collaborator_timeout_seconds=0.2,
    )


@pytest.fixture
def car_service(monkeypatch):
    """Replace the wired car service with one backed by in-memory stores."""
    service = make_service(FixedPriceClient())
    monkeypatch.setattr(routes, "_car_service", service)
    return service


@pytest.fixture
def app(car_service):
    """Create FastAPI app with router."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.mark.asyncio
async def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_create_car(client):
    """Test that posting a car returns 201 with the assigned id."""
    response = client.post("/cars", json=IMPALA)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"] is not None
    assert data["condition"] == "USED"
    assert data["details"]["model"] == "Impala"
    assert data["details"]["manufacturer"] == {"code": 101, "name": "Chevrolet"}
    assert data["location"]["lat"] == 40.730610
    assert data["location"]["lon"] == -73.935242
    assert data["_links"]["self"]["href"] == f"/cars/{data['id']}"
    assert data["_links"]["cars"]["href"] == "/cars"


@pytest.mark.asyncio
async def test_create_car_resolves_manufacturer_name(client):
    """Test that the stored manufacturer name is returned when the client omits it."""
    response = client.post("/cars", json=A5)

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["details"]["manufacturer"] == {"code": 100, "name": "Audi"}


@pytest.mark.asyncio
async def test_create_car_with_id_is_rejected(client):
    """Test that a payload carrying an id is rejected with 400."""
    response = client.post("/cars", json={**IMPALA, "id": 5})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get("/cars").json()["_embedded"]["carList"] == []


@pytest.mark.asyncio
async def test_create_car_with_unknown_manufacturer_is_rejected(client):
    """Test that an unknown manufacturer code is rejected with 400."""
    payload = {**IMPALA, "details": {**IMPALA["details"], "manufacturer": {"code": 999}}}

    response = client.post("/cars", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.asyncio
async def test_create_car_with_invalid_coordinates_is_rejected(client):
    """Test that an out-of-range latitude fails request validation."""
    payload = {**IMPALA, "location": {"lat": 120.0, "lon": 0.0}}

    response = client.post("/cars", json=payload)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.asyncio
async def test_get_car(client):
    """Test that a created car can be read back with its price."""
    car_id = client.post("/cars", json=IMPALA).json()["id"]

    response = client.get(f"/cars/{car_id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == car_id
    assert data["details"]["model"] == "Impala"
    assert data["price"]["currency"] == "USD"
    assert Decimal(str(data["price"]["amount"])) == Decimal("15689.40")
    # NoOp maps client resolves nothing
    assert data["location"]["address"] is None


@pytest.mark.asyncio
async def test_get_car_when_pricing_is_down(monkeypatch, app):
    """Test that a read still succeeds with a null price when pricing is down."""
    monkeypatch.setattr(routes, "_car_service", make_service(DownPriceClient()))
    client = TestClient(app)
    car_id = client.post("/cars", json=IMPALA).json()["id"]

    response = client.get(f"/cars/{car_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["price"] is None
    assert response.json()["details"]["model"] == "Impala"


@pytest.mark.asyncio
async def test_get_unknown_car_returns_404(client):
    """Test that reading an unknown id returns 404."""
    response = client.get("/cars/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_list_cars(client):
    """Test that list embeds every car under carList."""
    client.post("/cars", json=IMPALA)
    client.post("/cars", json=A5)

    response = client.get("/cars")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    cars = data["_embedded"]["carList"]
    assert [car["details"]["model"] for car in cars] == ["Impala", "A5"]
    assert all(car["price"] is not None for car in cars)
    assert data["_links"]["self"]["href"] == "/cars"


@pytest.mark.asyncio
async def test_update_car(client):
    """Test that PUT replaces the values but keeps id and created_at."""
    created = client.post("/cars", json=IMPALA).json()
    payload = {
        **IMPALA,
        "condition": "NEW",
        "location": {"lat": 34.020728, "lon": -118.692599},
    }

    response = client.put(f"/cars/{created['id']}", json=payload)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == created["id"]
    assert data["created_at"] == created["created_at"]
    assert data["condition"] == "NEW"
    assert data["location"]["lat"] == 34.020728
    assert data["location"]["lon"] == -118.692599


@pytest.mark.asyncio
async def test_update_unknown_car_returns_404(client):
    """Test that updating an unknown id returns 404."""
    response = client.put("/cars/999", json=IMPALA)

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_car(client):
    """Test that delete returns 204, then 404 for the same id."""
    car_id = client.post("/cars", json=IMPALA).json()["id"]

    first = client.delete(f"/cars/{car_id}")
    second = client.delete(f"/cars/{car_id}")

    assert first.status_code == status.HTTP_204_NO_CONTENT
    assert second.status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/cars/{car_id}").status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_store_failure_returns_500(client, car_service):
    """Test that a persistence failure surfaces as 500."""
    with patch.object(
        car_service, "list", new=AsyncMock(side_effect=PersistenceError("db down"))
    ):
        response = client.get("/cars")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["detail"] == "Car store unavailable"


@pytest.mark.parametrize(
    "price_body,maps_body",
    [
        ({"currency": 5, "amount": "10.00"}, {"address": 123, "city": "NYC"}),
        ({"currency": "USD", "amount": "Infinity"}, {"address": "1 Main St", "zip": 2351}),
        ([1, 2, 3], "not an object"),
    ],
)
@pytest.mark.asyncio
async def test_get_car_with_malformed_collaborator_bodies(monkeypatch, app, price_body, maps_body):
    """Test that wrongly typed collaborator responses only null the decorations."""
    service = CarService(
        InMemoryCarRepository(),
        InMemoryManufacturerRepository(DEFAULT_MANUFACTURERS),
        HttpPriceClient(
            "http://pricing.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=price_body)),
        ),
        HttpMapsClient(
            "http://maps.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=maps_body)),
        ),
    )
    monkeypatch.setattr(routes, "_car_service", service)
    client = TestClient(app)
    car_id = client.post("/cars", json=IMPALA).json()["id"]

    response = client.get(f"/cars/{car_id}")
    listed = client.get("/cars")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["price"] is None
    assert data["location"]["address"] is None
    assert data["location"]["city"] is None
    assert data["details"]["model"] == "Impala"
    assert listed.status_code == status.HTTP_200_OK
    assert listed.json()["_embedded"]["carList"][0]["price"] is None
