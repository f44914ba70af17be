"""Redis cache adapter for collaborator lookups."""

import json
from typing import Any, Optional

from redis import asyncio as aioredis

from vehicles_api.infrastructure.logging.logger import logger


class RedisLookupCache:
    """Short-lived Redis cache for collaborator responses."""

    KEY_PREFIX = "vehicles:lookup:"

    def __init__(self, redis_url: str, ttl_seconds: int) -> None:
        """
        Initialize Redis lookup cache.

        Args:
            redis_url: Redis connection URL
            ttl_seconds: Time-to-live in seconds for cached entries
        """
        self._redis_url = redis_url
        self._ttl_seconds = ttl_seconds
        self._client: Optional[aioredis.Redis] = None

    async def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = await aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, key: str) -> str:
        return f"{self.KEY_PREFIX}{key}"

    async def get(self, key: str) -> Optional[dict[str, Any]]:
        """
        Get a cached entry.

        Args:
            key: Cache key (without prefix)

        Returns:
            Cached dictionary, or None on miss or cache failure
        """
        try:
            client = await self._get_client()
            cached_data = await client.get(self._make_key(key))
            if cached_data is None:
                return None
            return json.loads(cached_data)
        except Exception as e:
            # Treat any cache failure as a miss
            logger.warning(f"Error reading lookup cache for {key}: {str(e)}")
            return None

    async def set(self, key: str, value: dict[str, Any]) -> None:
        """
        Store an entry with the configured TTL.

        Args:
            key: Cache key (without prefix)
            value: JSON-serializable dictionary
        """
        try:
            client = await self._get_client()
            await client.setex(
                self._make_key(key), self._ttl_seconds, json.dumps(value, sort_keys=True)
            )
        except Exception as e:
            logger.warning(f"Error writing lookup cache for {key}: {str(e)}")

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.close()
            self._client = None
