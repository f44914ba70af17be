"""Manufacturer value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Manufacturer:
    """Car manufacturer identified by a numeric code."""

    code: int
    name: str

    def __post_init__(self) -> None:
        """Validate manufacturer fields."""
        if not self.name:
            raise ValueError("Manufacturer name cannot be empty")


# Seeded once at startup, read-only afterwards
DEFAULT_MANUFACTURERS: tuple[Manufacturer, ...] = (
    Manufacturer(100, "Audi"),
    Manufacturer(101, "Chevrolet"),
    Manufacturer(102, "Ford"),
    Manufacturer(103, "BMW"),
    Manufacturer(104, "Dodge"),
)
