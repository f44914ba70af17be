"""Maps client port."""

from abc import ABC, abstractmethod
from typing import Optional

from vehicles_api.domain.value_objects.address import Address


class MapsClient(ABC):
    """Port interface for the maps (reverse geocoding) collaborator."""

    @abstractmethod
    async def get_address(self, lat: float, lon: float) -> Optional[Address]:
        """
        Resolve coordinates to an address.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Address, or None if the coordinates cannot be resolved

        Raises:
            CollaboratorUnavailableError: If the maps service cannot answer
        """
        pass
