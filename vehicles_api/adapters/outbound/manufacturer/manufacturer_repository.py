"""In-memory manufacturer repository adapter."""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional

from vehicles_api.application.ports.manufacturer_repository import ManufacturerRepository
from vehicles_api.domain.value_objects.manufacturer import Manufacturer


class InMemoryManufacturerRepository(ManufacturerRepository):
    """Read-only manufacturer lookup built once from a seed."""

    def __init__(self, manufacturers: Iterable[Manufacturer]) -> None:
        """
        Initialize repository from the seed.

        Args:
            manufacturers: Manufacturers to expose
        """
        self._by_code = MappingProxyType({m.code: m for m in manufacturers})

    async def get(self, code: int) -> Optional[Manufacturer]:
        """Get a manufacturer by code."""
        return self._by_code.get(code)

    async def list(self) -> list[Manufacturer]:
        """List all manufacturers ordered by code."""
        return [self._by_code[code] for code in sorted(self._by_code)]
