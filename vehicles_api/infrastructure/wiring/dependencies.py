"""Dependency injection factory functions."""

from vehicles_api.adapters.outbound.cache.cached_collaborators import (
    CachedMapsClient,
    CachedPriceClient,
)
from vehicles_api.adapters.outbound.cache.redis_lookup_cache import RedisLookupCache
from vehicles_api.adapters.outbound.car import InMemoryCarRepository, PostgresCarRepository
from vehicles_api.adapters.outbound.discovery.eureka_service_discovery import (
    EurekaServiceDiscovery,
)
from vehicles_api.adapters.outbound.discovery.static_service_discovery import (
    StaticServiceDiscovery,
)
from vehicles_api.adapters.outbound.manufacturer import (
    InMemoryManufacturerRepository,
    PostgresManufacturerRepository,
)
from vehicles_api.adapters.outbound.maps.http_maps_client import HttpMapsClient
from vehicles_api.adapters.outbound.maps.noop_maps_client import NoOpMapsClient
from vehicles_api.adapters.outbound.pricing.http_price_client import HttpPriceClient
from vehicles_api.adapters.outbound.pricing.noop_price_client import NoOpPriceClient
from vehicles_api.application.ports.car_repository import CarRepository
from vehicles_api.application.ports.manufacturer_repository import ManufacturerRepository
from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.application.ports.service_discovery import ServiceDiscovery
from vehicles_api.application.use_cases.car_service import CarService
from vehicles_api.domain.value_objects.manufacturer import DEFAULT_MANUFACTURERS
from vehicles_api.infrastructure.config.settings import settings
from vehicles_api.infrastructure.db import create_schema
from vehicles_api.infrastructure.logging.logger import log_car_operation, logger


def create_car_repository() -> CarRepository:
    """
    Factory function to create car repository.

    Returns:
        CarRepository instance
    """
    if settings.car_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CAR_REPOSITORY=postgres")
        return PostgresCarRepository()
    else:
        return InMemoryCarRepository()


def create_manufacturer_repository() -> ManufacturerRepository:
    """
    Factory function to create the manufacturer lookup.

    The Postgres table is seeded here, once, when the process starts.

    Returns:
        ManufacturerRepository instance
    """
    if settings.car_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CAR_REPOSITORY=postgres")
        create_schema()
        repository = PostgresManufacturerRepository()
        repository.seed(DEFAULT_MANUFACTURERS)
        return repository
    else:
        return InMemoryManufacturerRepository(DEFAULT_MANUFACTURERS)


def create_service_discovery() -> ServiceDiscovery:
    """
    Factory function to create service discovery.

    Returns:
        ServiceDiscovery instance (Eureka or static)
    """
    if settings.service_discovery == "eureka":
        return EurekaServiceDiscovery(settings.eureka_url)
    return StaticServiceDiscovery({settings.pricing_service_name: settings.pricing_service_url})


def _create_lookup_cache() -> RedisLookupCache:
    return RedisLookupCache(settings.redis_url, settings.collaborator_cache_ttl_seconds)


def create_price_client(discovery: ServiceDiscovery) -> PriceClient:
    """
    Factory function to create the pricing collaborator client.

    Args:
        discovery: Service discovery used to locate the pricing service

    Returns:
        PriceClient instance (HTTP, optionally cached, or NoOp when unresolved)
    """
    endpoint = discovery.resolve(settings.pricing_service_name)
    if not endpoint:
        # Prices will be reported as unknown, startup goes on
        logger.warning(
            f"No instance found for {settings.pricing_service_name}, prices will be unavailable"
        )
        return NoOpPriceClient()

    client: PriceClient = HttpPriceClient(endpoint, settings.collaborator_timeout_seconds)
    if settings.collaborator_cache_enabled and settings.redis_url:
        client = CachedPriceClient(client, _create_lookup_cache())
    return client


def create_maps_client() -> MapsClient:
    """
    Factory function to create the maps collaborator client.

    Returns:
        MapsClient instance (HTTP, optionally cached, or NoOp when not configured)
    """
    if not settings.maps_endpoint:
        return NoOpMapsClient()

    client: MapsClient = HttpMapsClient(
        settings.maps_endpoint, settings.collaborator_timeout_seconds
    )
    if settings.collaborator_cache_enabled and settings.redis_url:
        client = CachedMapsClient(client, _create_lookup_cache())
    return client


def create_car_service() -> CarService:
    """
    Factory function to create CarService with dependencies.

    Returns:
        CarService instance
    """
    return CarService(
        create_car_repository(),
        create_manufacturer_repository(),
        create_price_client(create_service_discovery()),
        create_maps_client(),
        collaborator_timeout_seconds=settings.collaborator_timeout_seconds,
        logger=log_car_operation,
    )
