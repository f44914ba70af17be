"""Car price value object."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CarPrice:
    """Price quoted by the pricing service for a car."""

    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        """Validate price amount."""
        if self.amount <= 0:
            raise ValueError("Price amount must be positive")

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"
