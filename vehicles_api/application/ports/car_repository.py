"""Car repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from vehicles_api.domain.entities.car import Car


class CarRepository(ABC):
    """Port interface for car repository."""

    @abstractmethod
    async def get(self, car_id: int) -> Optional[Car]:
        """
        Get a car by identifier.

        Args:
            car_id: Car identifier

        Returns:
            Car entity, or None if not found
        """
        pass

    @abstractmethod
    async def list(self) -> list[Car]:
        """
        List all cars ordered by identifier.

        Returns:
            List of all stored cars
        """
        pass

    @abstractmethod
    async def save(self, car: Car) -> Car:
        """
        Save a car.

        Inserts when ``car.id`` is None (the store assigns the identifier),
        otherwise overwrites the stored car with the same identifier.

        Args:
            car: Car entity to save

        Returns:
            The stored car, carrying its identifier

        Raises:
            PersistenceError: If the store fails
        """
        pass

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Returns:
            True if a car was removed, False if none existed
        """
        pass
