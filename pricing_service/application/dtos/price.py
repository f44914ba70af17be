"""Price DTOs."""

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from pricing_service.application.dtos.base import DTO
from pricing_service.domain.entities.price import Price


class PriceRequest(DTO):
    """Price create/update request DTO."""

    id: Optional[int] = None
    currency: str = Field(default="USD", min_length=3, max_length=3)
    # Matches the Numeric(12, 2) column
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"id": 1, "currency": "USD", "amount": "15689.40"}},
    )

    def to_domain(self, price_id: Optional[int] = None) -> Price:
        """
        Convert the request into a Price entity.

        Args:
            price_id: Identifier taken from the URL, overriding the body's id

        Returns:
            Price entity
        """
        return Price(
            id=price_id if price_id is not None else self.id,
            currency=self.currency.upper(),
            amount=self.amount,
        )


class PriceResponse(DTO):
    """Price response DTO."""

    id: int
    currency: str
    amount: Decimal

    @classmethod
    def from_domain(cls, price: Price) -> "PriceResponse":
        """Build a response DTO from a Price entity."""
        return cls(id=price.id, currency=price.currency, amount=price.amount)
