"""HTTP adapter schemas for hypermedia responses."""

from pydantic import BaseModel, Field

from vehicles_api.application.dtos.car import CarResponse
from vehicles_api.domain.entities.car import Car

Links = dict[str, dict[str, str]]


def car_links(car_id: int) -> Links:
    """Build the hypermedia links of a single car."""
    return {
        "self": {"href": f"/cars/{car_id}"},
        "cars": {"href": "/cars"},
    }


class CarResource(CarResponse):
    """Car response with hypermedia links."""

    links: Links = Field(serialization_alias="_links")

    @classmethod
    def from_car(cls, car: Car) -> "CarResource":
        """Build a linked resource from a Car entity."""
        response = CarResponse.from_domain(car)
        return cls(**response.model_dump(), links=car_links(car.id))


class CarCollection(BaseModel):
    """Collection of cars, embedded under ``carList``."""

    embedded: dict[str, list[CarResource]] = Field(serialization_alias="_embedded")
    links: Links = Field(serialization_alias="_links")

    @classmethod
    def from_cars(cls, cars: list[Car]) -> "CarCollection":
        """Build a linked collection from Car entities."""
        return cls(
            embedded={"carList": [CarResource.from_car(car) for car in cars]},
            links={"self": {"href": "/cars"}},
        )
