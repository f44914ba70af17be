"""Dependency injection factory functions."""

from pricing_service.adapters.outbound.price import (
    InMemoryPriceRepository,
    PostgresPriceRepository,
)
from pricing_service.application.ports.price_repository import PriceRepository
from pricing_service.domain.entities.price import SEED_PRICES
from pricing_service.infrastructure.config.settings import settings
from pricing_service.infrastructure.db import create_schema
from pricing_service.infrastructure.logging.logger import log_event


def create_price_repository() -> PriceRepository:
    """
    Factory function to create price repository, seeded when enabled.

    Returns:
        PriceRepository instance
    """
    seed = SEED_PRICES if settings.seed_prices else ()

    if settings.price_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when PRICE_REPOSITORY=postgres")
        create_schema()
        repository = PostgresPriceRepository()
        repository.seed(seed)
    else:
        repository = InMemoryPriceRepository(seed)

    log_event(component="seed", backend=settings.price_repository, seeded_prices=len(seed))
    return repository
