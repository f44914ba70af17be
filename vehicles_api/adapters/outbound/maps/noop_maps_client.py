"""No-op maps client adapter for when no maps endpoint is configured."""

from typing import Optional

from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.domain.value_objects.address import Address


class NoOpMapsClient(MapsClient):
    """No-op adapter that never resolves an address."""

    async def get_address(self, lat: float, lon: float) -> Optional[Address]:
        """Always return None (address unknown)."""
        return None
