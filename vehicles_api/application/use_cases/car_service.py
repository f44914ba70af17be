"""Car aggregate service use case."""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from vehicles_api.application.ports.car_repository import CarRepository
from vehicles_api.application.ports.manufacturer_repository import ManufacturerRepository
from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.domain.entities.car import Car
from vehicles_api.domain.exceptions import (
    CarIdentifierAssignedError,
    CarNotFoundError,
    CollaboratorUnavailableError,
    UnknownManufacturerError,
)
from vehicles_api.domain.value_objects.address import Address
from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.domain.value_objects.location import Location


class CarService:
    """
    Use case for managing Car aggregates.

    Reads are decorated with a live price and a resolved address. Both lookups
    run concurrently, each under its own timeout, and a failing collaborator
    only leaves its field empty.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        manufacturer_repository: ManufacturerRepository,
        price_client: PriceClient,
        maps_client: MapsClient,
        collaborator_timeout_seconds: float = 0.5,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize car service.

        Args:
            car_repository: Repository for car persistence
            manufacturer_repository: Read-only manufacturer lookup
            price_client: Pricing collaborator
            maps_client: Maps collaborator
            collaborator_timeout_seconds: Timeout applied to each collaborator call
            logger: Optional logger function (operation, car_id=None, **kwargs)
        """
        self._car_repository = car_repository
        self._manufacturer_repository = manufacturer_repository
        self._price_client = price_client
        self._maps_client = maps_client
        self._timeout = collaborator_timeout_seconds
        self._logger = logger

    def _log(self, operation: str, car_id: Optional[int] = None, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger(operation, car_id, **kwargs)

    async def create(self, car: Car) -> Car:
        """
        Create a new car.

        Args:
            car: Car without identifier

        Returns:
            Stored car with its assigned identifier

        Raises:
            CarIdentifierAssignedError: If the car already carries an identifier
            UnknownManufacturerError: If the manufacturer code does not exist
        """
        if car.id is not None:
            raise CarIdentifierAssignedError(car.id)

        car = await self._with_stored_manufacturer(car)
        now = datetime.now(timezone.utc)
        car.created_at = now
        car.modified_at = now

        saved = await self._car_repository.save(car.for_storage())
        self._log("create", saved.id, model=saved.details.model)
        return saved

    async def find_by_id(self, car_id: int) -> Car:
        """
        Get a car decorated with its price and address.

        Args:
            car_id: Car identifier

        Returns:
            Decorated car

        Raises:
            CarNotFoundError: If no car exists for the identifier
        """
        car = await self._car_repository.get(car_id)
        if car is None:
            raise CarNotFoundError(car_id)

        self._log("find", car_id)
        return await self._decorate(car)

    async def list(self) -> list[Car]:
        """
        List all cars, each decorated like find_by_id.

        Returns:
            Decorated cars ordered by identifier
        """
        cars = await self._car_repository.list()
        self._log("list", count=len(cars))
        return list(await asyncio.gather(*(self._decorate(car) for car in cars)))

    async def update(self, car_id: int, car: Car) -> Car:
        """
        Update the details, condition and location of an existing car.

        Args:
            car_id: Identifier of the car to update
            car: Car carrying the new values (its own id is ignored)

        Returns:
            Updated car, keeping its identifier and creation timestamp

        Raises:
            CarNotFoundError: If no car exists for the identifier
            UnknownManufacturerError: If the manufacturer code does not exist
        """
        existing = await self._car_repository.get(car_id)
        if existing is None:
            raise CarNotFoundError(car_id)

        car = await self._with_stored_manufacturer(car)
        existing.apply_changes(car)

        saved = await self._car_repository.save(existing.for_storage())
        self._log("update", car_id)
        return saved

    async def delete(self, car_id: int) -> None:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Raises:
            CarNotFoundError: If no car exists for the identifier
        """
        removed = await self._car_repository.delete(car_id)
        if not removed:
            raise CarNotFoundError(car_id)
        self._log("delete", car_id)

    async def _with_stored_manufacturer(self, car: Car) -> Car:
        """Replace the car's manufacturer with the stored one, validating its code."""
        code = car.details.manufacturer.code
        manufacturer = await self._manufacturer_repository.get(code)
        if manufacturer is None:
            raise UnknownManufacturerError(code)
        return replace(car, details=replace(car.details, manufacturer=manufacturer))

    async def _decorate(self, car: Car) -> Car:
        """Return a copy of the car carrying price and address, where available."""
        price, address = await asyncio.gather(
            self._fetch_price(car.id),
            self._fetch_address(car.location),
        )
        location = car.location.with_address(address) if address is not None else car.location
        return replace(car, price=price, location=location)

    async def _fetch_price(self, car_id: int) -> Optional[CarPrice]:
        try:
            return await asyncio.wait_for(self._price_client.get_price(car_id), self._timeout)
        except asyncio.TimeoutError:
            self._log("decorate", car_id, price_unavailable="timeout")
        except CollaboratorUnavailableError as e:
            self._log("decorate", car_id, price_unavailable=e.reason)
        return None

    async def _fetch_address(self, location: Location) -> Optional[Address]:
        try:
            return await asyncio.wait_for(
                self._maps_client.get_address(location.lat, location.lon), self._timeout
            )
        except asyncio.TimeoutError:
            self._log("decorate", address_unavailable="timeout")
        except CollaboratorUnavailableError as e:
            self._log("decorate", address_unavailable=e.reason)
        return None
