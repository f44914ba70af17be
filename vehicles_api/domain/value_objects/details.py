"""Car details value object."""

from dataclasses import dataclass

from vehicles_api.domain.value_objects.manufacturer import Manufacturer


@dataclass(frozen=True)
class Details:
    """Descriptive attributes of a car."""

    manufacturer: Manufacturer
    model: str
    production_year: int
    model_year: int
    mileage: int
    external_color: str
    body: str
    engine: str
    fuel_type: str
    number_of_doors: int

    def __post_init__(self) -> None:
        """Validate details fields."""
        if not self.model:
            raise ValueError("Model cannot be empty")
        if self.mileage < 0:
            raise ValueError("Mileage cannot be negative")
        if self.number_of_doors <= 0:
            raise ValueError("Number of doors must be positive")
