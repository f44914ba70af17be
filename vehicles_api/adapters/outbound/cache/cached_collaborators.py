"""Cache-aside decorators for the pricing and maps collaborators."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.domain.value_objects.address import Address
from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.infrastructure.logging.logger import log_collaborator_call, logger

from .redis_lookup_cache import RedisLookupCache


def _cached_text(cached: dict[str, Any], key: str, optional: bool = False) -> Optional[str]:
    value = cached.get(key) if optional else cached[key]
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise TypeError(f"cached {key} must be a string")
    return value


class CachedPriceClient(PriceClient):
    """Price client with a Redis cache in front of it. Only hits are cached."""

    def __init__(self, client: PriceClient, cache: RedisLookupCache) -> None:
        """
        Initialize cached price client.

        Args:
            client: Price client to delegate to on cache miss
            cache: Lookup cache
        """
        self._client = client
        self._cache = cache

    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        """Get a price, consulting the cache first."""
        key = f"price:{vehicle_id}"
        cached = await self._cache.get(key)
        if cached is not None:
            try:
                amount = Decimal(_cached_text(cached, "amount"))
                if not amount.is_finite():
                    raise ValueError(f"cached amount must be finite, got {amount}")
                price = CarPrice(currency=_cached_text(cached, "currency"), amount=amount)
            except (KeyError, TypeError, AttributeError, ValueError, InvalidOperation) as e:
                # Undecodable entry, fetch again and overwrite it
                logger.warning(f"Ignoring corrupt cache entry {key}: {str(e)}")
            else:
                log_collaborator_call("pricing", "cache_hit", vehicle_id=vehicle_id)
                return price

        price = await self._client.get_price(vehicle_id)
        if price is not None:
            await self._cache.set(key, {"currency": price.currency, "amount": str(price.amount)})
        return price


class CachedMapsClient(MapsClient):
    """Maps client with a Redis cache in front of it. Only hits are cached."""

    def __init__(self, client: MapsClient, cache: RedisLookupCache) -> None:
        """
        Initialize cached maps client.

        Args:
            client: Maps client to delegate to on cache miss
            cache: Lookup cache
        """
        self._client = client
        self._cache = cache

    async def get_address(self, lat: float, lon: float) -> Optional[Address]:
        """Resolve an address, consulting the cache first."""
        key = f"address:{lat:.6f}:{lon:.6f}"
        cached = await self._cache.get(key)
        if cached is not None:
            try:
                address = Address(
                    address=_cached_text(cached, "address", optional=True),
                    city=_cached_text(cached, "city", optional=True),
                    state=_cached_text(cached, "state", optional=True),
                    zip=_cached_text(cached, "zip", optional=True),
                )
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Ignoring corrupt cache entry {key}: {str(e)}")
            else:
                log_collaborator_call("maps", "cache_hit", lat=lat, lon=lon)
                return address

        address = await self._client.get_address(lat, lon)
        if address is not None:
            await self._cache.set(
                key,
                {
                    "address": address.address,
                    "city": address.city,
                    "state": address.state,
                    "zip": address.zip,
                },
            )
        return address
