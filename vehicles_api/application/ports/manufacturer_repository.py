"""Manufacturer repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from vehicles_api.domain.value_objects.manufacturer import Manufacturer


class ManufacturerRepository(ABC):
    """Port interface for the read-only manufacturer lookup."""

    @abstractmethod
    async def get(self, code: int) -> Optional[Manufacturer]:
        """
        Get a manufacturer by code.

        Args:
            code: Manufacturer code

        Returns:
            Manufacturer, or None if the code is unknown
        """
        pass

    @abstractmethod
    async def list(self) -> list[Manufacturer]:
        """
        List all manufacturers ordered by code.

        Returns:
            List of manufacturers
        """
        pass
