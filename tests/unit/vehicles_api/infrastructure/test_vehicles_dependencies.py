"""Unit tests for vehicles dependency wiring."""

from unittest.mock import Mock, patch

import pytest

from vehicles_api.adapters.outbound.cache.cached_collaborators import (
    CachedMapsClient,
    CachedPriceClient,
)
from vehicles_api.adapters.outbound.car import InMemoryCarRepository
from vehicles_api.adapters.outbound.discovery.eureka_service_discovery import (
    EurekaServiceDiscovery,
)
from vehicles_api.adapters.outbound.discovery.static_service_discovery import (
    StaticServiceDiscovery,
)
from vehicles_api.adapters.outbound.manufacturer import InMemoryManufacturerRepository
from vehicles_api.adapters.outbound.maps.http_maps_client import HttpMapsClient
from vehicles_api.adapters.outbound.maps.noop_maps_client import NoOpMapsClient
from vehicles_api.adapters.outbound.pricing.http_price_client import HttpPriceClient
from vehicles_api.adapters.outbound.pricing.noop_price_client import NoOpPriceClient
from vehicles_api.application.ports.service_discovery import ServiceDiscovery
from vehicles_api.application.use_cases.car_service import CarService
from vehicles_api.infrastructure.config.settings import settings
from vehicles_api.infrastructure.wiring.dependencies import (
    create_car_repository,
    create_car_service,
    create_manufacturer_repository,
    create_maps_client,
    create_price_client,
    create_service_discovery,
)


def test_default_car_repository_is_in_memory():
    """Test that the in-memory store is the default."""
    with patch.object(settings, "car_repository", "in_memory"):
        assert isinstance(create_car_repository(), InMemoryCarRepository)


def test_postgres_car_repository_requires_database_url():
    """Test that postgres mode without DATABASE_URL fails fast."""
    with patch.object(settings, "car_repository", "postgres"), patch.object(
        settings, "database_url", ""
    ):
        with pytest.raises(ValueError):
            create_car_repository()


def test_service_discovery_selection():
    """Test that the discovery adapter follows SERVICE_DISCOVERY."""
    with patch.object(settings, "service_discovery", "static"):
        assert isinstance(create_service_discovery(), StaticServiceDiscovery)
    with patch.object(settings, "service_discovery", "eureka"):
        assert isinstance(create_service_discovery(), EurekaServiceDiscovery)


def test_price_client_falls_back_to_noop_when_unresolved():
    """Test that an unresolvable pricing service does not block startup."""
    discovery = Mock(spec=ServiceDiscovery)
    discovery.resolve.return_value = None

    assert isinstance(create_price_client(discovery), NoOpPriceClient)


def test_price_client_uses_resolved_endpoint():
    """Test that the HTTP client points at the resolved pricing instance."""
    discovery = StaticServiceDiscovery({settings.pricing_service_name: "http://pricing:8082/"})

    with patch.object(settings, "collaborator_cache_enabled", False):
        client = create_price_client(discovery)

    assert isinstance(client, HttpPriceClient)
    assert client.base_url == "http://pricing:8082"


def test_price_client_is_cached_when_enabled():
    """Test that the Redis cache wraps the client when enabled."""
    discovery = StaticServiceDiscovery({settings.pricing_service_name: "http://pricing:8082"})

    with patch.object(settings, "collaborator_cache_enabled", True), patch.object(
        settings, "redis_url", "redis://localhost:6379/0"
    ):
        assert isinstance(create_price_client(discovery), CachedPriceClient)


def test_maps_client_selection():
    """Test that an empty endpoint disables the maps lookup."""
    with patch.object(settings, "maps_endpoint", ""):
        assert isinstance(create_maps_client(), NoOpMapsClient)
    with patch.object(settings, "maps_endpoint", "http://maps:9191"), patch.object(
        settings, "collaborator_cache_enabled", False
    ):
        assert isinstance(create_maps_client(), HttpMapsClient)
    with patch.object(settings, "maps_endpoint", "http://maps:9191"), patch.object(
        settings, "collaborator_cache_enabled", True
    ), patch.object(settings, "redis_url", "redis://localhost:6379/0"):
        assert isinstance(create_maps_client(), CachedMapsClient)


def test_create_car_service_with_defaults():
    """Test that the service can be wired from in-memory settings."""
    with patch.object(settings, "car_repository", "in_memory"), patch.object(
        settings, "service_discovery", "static"
    ):
        service = create_car_service()

    assert isinstance(service, CarService)


@pytest.mark.asyncio
async def test_in_memory_manufacturers_are_seeded():
    """Test that the default manufacturer lookup knows the seeded codes."""
    with patch.object(settings, "car_repository", "in_memory"):
        repository = create_manufacturer_repository()

    assert isinstance(repository, InMemoryManufacturerRepository)
    assert (await repository.get(104)).name == "Dodge"
