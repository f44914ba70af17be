"""In-memory price repository adapter."""

from collections.abc import Iterable
from dataclasses import replace
from typing import Optional

from pricing_service.application.ports.price_repository import PriceRepository
from pricing_service.domain.entities.price import Price


class InMemoryPriceRepository(PriceRepository):
    """In-memory implementation of price repository."""

    def __init__(self, prices: Iterable[Price] = ()) -> None:
        """
        Initialize in-memory repository.

        Args:
            prices: Initial prices (each must carry an id)
        """
        self._storage: dict[int, Price] = {price.id: replace(price) for price in prices}
        # Highest id ever stored; deleted ids are not handed out again
        self._last_id = max(self._storage, default=0)

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    async def get(self, entity_id: int) -> Optional[Price]:
        """Get a price by identifier."""
        price = self._storage.get(entity_id)
        return replace(price) if price is not None else None

    async def list(self) -> list[Price]:
        """List all prices ordered by identifier."""
        return [replace(self._storage[price_id]) for price_id in sorted(self._storage)]

    async def save(self, entity: Price) -> Price:
        """Insert or overwrite a price."""
        stored = replace(entity, id=entity.id if entity.id is not None else self._next_id())
        self._last_id = max(self._last_id, stored.id)
        self._storage[stored.id] = stored
        return replace(stored)

    async def delete(self, entity_id: int) -> bool:
        """Delete a price."""
        return self._storage.pop(entity_id, None) is not None
