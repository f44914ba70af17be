"""Price entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Price:
    """Price of a vehicle, keyed by the vehicle identifier."""

    amount: Decimal
    currency: str = "USD"
    id: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate price amount."""
        if self.amount <= 0:
            raise ValueError("Price amount must be positive")


# Prices loaded at startup for vehicle ids 1..20
SEED_PRICES: tuple[Price, ...] = tuple(
    Price(id=vehicle_id, amount=Decimal(amount))
    for vehicle_id, amount in enumerate(
        (
            "15689.40", "22130.00", "9875.25", "31250.99", "18400.00",
            "27560.10", "12995.00", "44100.75", "8650.30", "19999.99",
            "23410.60", "35875.00", "14230.45", "28900.00", "10450.80",
            "52300.00", "17325.15", "21780.90", "39640.00", "11210.55",
        ),
        start=1,
    )
)
