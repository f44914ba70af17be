"""No-op price client adapter for when the pricing service cannot be resolved."""

from typing import Optional

from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.domain.value_objects.car_price import CarPrice


class NoOpPriceClient(PriceClient):
    """No-op adapter that never knows a price."""

    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        """
        Always return None (price unknown).

        Args:
            vehicle_id: Car identifier (ignored)

        Returns:
            Always None
        """
        return None
