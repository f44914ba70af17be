"""Unit tests for the Redis lookup cache and cached collaborator clients."""

import json
from decimal import Decimal
from unittest.mock import AsyncMock, Mock, patch

import pytest

from vehicles_api.adapters.outbound.cache.cached_collaborators import (
    CachedMapsClient,
    CachedPriceClient,
)
from vehicles_api.adapters.outbound.cache.redis_lookup_cache import RedisLookupCache
from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.domain.value_objects.address import Address
from vehicles_api.domain.value_objects.car_price import CarPrice

FROM_URL = "vehicles_api.adapters.outbound.cache.redis_lookup_cache.aioredis.from_url"


@pytest.fixture
def mock_redis_client():
    """Create a mock Redis client."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def lookup_cache():
    """Create a lookup cache with test config."""
    return RedisLookupCache("redis://localhost:6379/0", ttl_seconds=30)


@pytest.fixture
def mock_cache():
    """Create a mock lookup cache."""
    cache = Mock(spec=RedisLookupCache)
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock()
    return cache


@pytest.mark.asyncio
async def test_lookup_cache_get_returns_none_on_miss(lookup_cache, mock_redis_client):
    """Test that a missing key is a miss."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        assert await lookup_cache.get("price:1") is None

    mock_redis_client.get.assert_called_once_with("vehicles:lookup:price:1")


@pytest.mark.asyncio
async def test_lookup_cache_set_and_get(lookup_cache, mock_redis_client):
    """Test that values are written with the TTL and decoded on read."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        await lookup_cache.set("price:1", {"currency": "USD", "amount": "10.00"})
        key, ttl, payload = mock_redis_client.setex.call_args[0]
        mock_redis_client.get.return_value = payload

        cached = await lookup_cache.get("price:1")

    assert key == "vehicles:lookup:price:1"
    assert ttl == 30
    assert json.loads(payload) == {"currency": "USD", "amount": "10.00"}
    assert cached == {"currency": "USD", "amount": "10.00"}


@pytest.mark.asyncio
async def test_lookup_cache_errors_are_misses(lookup_cache, mock_redis_client):
    """Test that Redis failures are absorbed."""
    mock_redis_client.get.side_effect = ConnectionError("redis down")
    mock_redis_client.setex.side_effect = ConnectionError("redis down")
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        assert await lookup_cache.get("price:1") is None
        await lookup_cache.set("price:1", {"amount": "1"})


@pytest.mark.asyncio
async def test_lookup_cache_close(lookup_cache, mock_redis_client):
    """Test that close releases the client."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client
        await lookup_cache.get("price:1")

        await lookup_cache.close()

    mock_redis_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_cached_price_client_miss_delegates_and_stores(mock_cache):
    """Test that a miss asks the pricing client and caches the price."""
    inner = Mock(spec=PriceClient)
    inner.get_price = AsyncMock(return_value=CarPrice(currency="USD", amount=Decimal("10.50")))
    client = CachedPriceClient(inner, mock_cache)

    price = await client.get_price(1)

    assert price == CarPrice(currency="USD", amount=Decimal("10.50"))
    inner.get_price.assert_called_once_with(1)
    mock_cache.set.assert_called_once_with("price:1", {"currency": "USD", "amount": "10.50"})


@pytest.mark.asyncio
async def test_cached_price_client_hit_skips_delegate(mock_cache):
    """Test that a hit does not call the pricing client."""
    mock_cache.get.return_value = {"currency": "USD", "amount": "10.50"}
    inner = Mock(spec=PriceClient)
    inner.get_price = AsyncMock()
    client = CachedPriceClient(inner, mock_cache)

    price = await client.get_price(1)

    assert price.amount == Decimal("10.50")
    inner.get_price.assert_not_called()


@pytest.mark.asyncio
async def test_cached_price_client_does_not_cache_missing_price(mock_cache):
    """Test that an unknown price is not cached."""
    inner = Mock(spec=PriceClient)
    inner.get_price = AsyncMock(return_value=None)
    client = CachedPriceClient(inner, mock_cache)

    assert await client.get_price(1) is None
    mock_cache.set.assert_not_called()


@pytest.mark.asyncio
async def test_cached_maps_client_round_trips_address(mock_cache):
    """Test that a resolved address is cached and served from cache."""
    address = Address(address="1 Main St", city="Springfield", state="IL", zip="62701")
    inner = Mock(spec=MapsClient)
    inner.get_address = AsyncMock(return_value=address)
    client = CachedMapsClient(inner, mock_cache)

    assert await client.get_address(39.78, -89.65) == address
    key, value = mock_cache.set.call_args[0]
    assert key == "address:39.780000:-89.650000"

    mock_cache.get.return_value = value
    assert await client.get_address(39.78, -89.65) == address
    inner.get_address.assert_called_once()


@pytest.mark.parametrize(
    "entry",
    [
        {"currency": "USD", "amount": "not-a-number"},
        {"currency": "USD", "amount": 10},
        {"currency": "USD", "amount": "Infinity"},
        {"currency": "USD"},
        ["USD", "10.00"],
    ],
)
@pytest.mark.asyncio
async def test_cached_price_client_treats_corrupt_entry_as_miss(mock_cache, entry):
    """Test that an undecodable cached price is refetched and overwritten."""
    mock_cache.get.return_value = entry
    inner = Mock(spec=PriceClient)
    inner.get_price = AsyncMock(return_value=CarPrice(currency="USD", amount=Decimal("10.50")))
    client = CachedPriceClient(inner, mock_cache)

    price = await client.get_price(1)

    assert price == CarPrice(currency="USD", amount=Decimal("10.50"))
    inner.get_price.assert_called_once_with(1)
    mock_cache.set.assert_called_once_with("price:1", {"currency": "USD", "amount": "10.50"})


@pytest.mark.parametrize("entry", [{"address": 123}, "777 Brockton Avenue"])
@pytest.mark.asyncio
async def test_cached_maps_client_treats_corrupt_entry_as_miss(mock_cache, entry):
    """Test that an undecodable cached address is refetched."""
    mock_cache.get.return_value = entry
    address = Address(address="1 Main St", city="Springfield", state="IL", zip="62701")
    inner = Mock(spec=MapsClient)
    inner.get_address = AsyncMock(return_value=address)
    client = CachedMapsClient(inner, mock_cache)

    assert await client.get_address(39.78, -89.65) == address
    inner.get_address.assert_called_once()
