"""Manufacturer repository adapters."""

from vehicles_api.adapters.outbound.manufacturer.manufacturer_repository import (
    InMemoryManufacturerRepository,
)
from vehicles_api.adapters.outbound.manufacturer.postgres_manufacturer_repository import (
    PostgresManufacturerRepository,
)

__all__ = [
    "InMemoryManufacturerRepository",
    "PostgresManufacturerRepository",
]
