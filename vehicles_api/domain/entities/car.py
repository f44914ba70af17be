"""Car aggregate root."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.domain.value_objects.condition import Condition
from vehicles_api.domain.value_objects.details import Details
from vehicles_api.domain.value_objects.location import Location


@dataclass
class Car:
    """Car entity with its embedded details and location."""

    details: Details
    location: Location
    condition: Condition
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    modified_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    price: Optional[CarPrice] = None  # Decoration only, never persisted

    def touch(self) -> None:
        """Update the modified_at timestamp."""
        self.modified_at = datetime.now(timezone.utc)

    def apply_changes(self, other: "Car") -> None:
        """
        Overwrite the mutable parts of this car with those of another.

        Identifier and creation timestamp are left untouched.

        Args:
            other: Car carrying the new details, condition and location
        """
        self.details = other.details
        self.condition = other.condition
        self.location = other.location.without_address()
        self.touch()

    def for_storage(self) -> "Car":
        """Return a copy stripped of read-time decorations."""
        return replace(self, location=self.location.without_address(), price=None)
