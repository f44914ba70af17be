"""In-memory car repository adapter."""

from dataclasses import replace
from itertools import count
from typing import Optional

from vehicles_api.application.ports.car_repository import CarRepository
from vehicles_api.domain.entities.car import Car


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[int, Car] = {}
        self._ids = count(1)

    async def get(self, car_id: int) -> Optional[Car]:
        """
        Get a car by identifier.

        Args:
            car_id: Car identifier

        Returns:
            Copy of the stored car, or None if not found
        """
        car = self._storage.get(car_id)
        return replace(car) if car is not None else None

    async def list(self) -> list[Car]:
        """
        List all cars ordered by identifier.

        Returns:
            Copies of all stored cars
        """
        return [replace(self._storage[car_id]) for car_id in sorted(self._storage)]

    async def save(self, car: Car) -> Car:
        """
        Save a car, assigning an identifier on first save.

        Args:
            car: Car entity to save

        Returns:
            Copy of the stored car
        """
        stored = replace(car, id=car.id if car.id is not None else next(self._ids))
        self._storage[stored.id] = stored
        return replace(stored)

    async def delete(self, car_id: int) -> bool:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Returns:
            True if a car was removed
        """
        return self._storage.pop(car_id, None) is not None
