"""Price repository port."""

from pricing_service.application.ports.repository import Repository
from pricing_service.domain.entities.price import Price


class PriceRepository(Repository[Price]):
    """Port interface for price repository."""
