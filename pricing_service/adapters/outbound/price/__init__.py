"""Price repository adapters."""

from pricing_service.adapters.outbound.price.postgres_price_repository import (
    PostgresPriceRepository,
)
from pricing_service.adapters.outbound.price.price_repository import InMemoryPriceRepository

__all__ = [
    "InMemoryPriceRepository",
    "PostgresPriceRepository",
]
