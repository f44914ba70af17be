"""Price client port."""

from abc import ABC, abstractmethod
from typing import Optional

from vehicles_api.domain.value_objects.car_price import CarPrice


class PriceClient(ABC):
    """Port interface for the pricing collaborator."""

    @abstractmethod
    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        """
        Get the current price for a vehicle.

        Args:
            vehicle_id: Car identifier

        Returns:
            Price, or None if the pricing service has no price for it

        Raises:
            CollaboratorUnavailableError: If the pricing service cannot answer
        """
        pass
