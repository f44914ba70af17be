"""Car repository adapters."""

from vehicles_api.adapters.outbound.car.car_repository import InMemoryCarRepository
from vehicles_api.adapters.outbound.car.postgres_car_repository import PostgresCarRepository

__all__ = [
    "InMemoryCarRepository",
    "PostgresCarRepository",
]
