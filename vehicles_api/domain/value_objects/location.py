"""Location value object."""

from dataclasses import dataclass, replace
from typing import Optional

from vehicles_api.domain.value_objects.address import Address


@dataclass(frozen=True)
class Location:
    """
    Geographic position of a car.

    Only ``lat`` and ``lon`` are persisted. The address fields are filled in on
    read from the maps collaborator and are dropped before anything is saved.
    """

    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")

    def with_address(self, address: Address) -> "Location":
        """Return a copy decorated with the resolved address."""
        return replace(
            self,
            address=address.address,
            city=address.city,
            state=address.state,
            zip=address.zip,
        )

    def without_address(self) -> "Location":
        """Return a copy holding only the persisted coordinates."""
        return Location(lat=self.lat, lon=self.lon)
