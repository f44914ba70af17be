"""Car DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from vehicles_api.application.dtos.base import DTO
from vehicles_api.domain.entities.car import Car
from vehicles_api.domain.value_objects.condition import Condition
from vehicles_api.domain.value_objects.details import Details
from vehicles_api.domain.value_objects.location import Location
from vehicles_api.domain.value_objects.manufacturer import Manufacturer


class ManufacturerDTO(DTO):
    """Manufacturer DTO. The name is informational and resolved from the store."""

    code: int
    name: Optional[str] = None


class DetailsDTO(DTO):
    """Car details DTO."""

    manufacturer: ManufacturerDTO
    model: str = Field(min_length=1)
    production_year: int
    model_year: int
    mileage: int = Field(ge=0)
    external_color: str
    body: str
    engine: str
    fuel_type: str
    number_of_doors: int = Field(gt=0)


class LocationDTO(DTO):
    """Location DTO. Address fields are only populated on read."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class PriceDTO(DTO):
    """Price decoration DTO."""

    currency: str
    amount: Decimal


class CarRequest(DTO):
    """Car create/update request DTO."""

    id: Optional[int] = None
    condition: Condition
    details: DetailsDTO
    location: LocationDTO

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "condition": "USED",
                "details": {
                    "manufacturer": {"code": 101, "name": "Chevrolet"},
                    "model": "Impala",
                    "production_year": 2018,
                    "model_year": 2018,
                    "mileage": 32280,
                    "external_color": "white",
                    "body": "sedan",
                    "engine": "3.6L V6",
                    "fuel_type": "Gasoline",
                    "number_of_doors": 4,
                },
                "location": {"lat": 40.730610, "lon": -73.935242},
            }
        },
    )

    def to_domain(self) -> Car:
        """
        Convert the request into a Car entity.

        The manufacturer name is carried as given and is replaced by the
        stored name when the service validates the code. Address fields sent
        by the client are ignored.

        Returns:
            Car entity (not yet persisted)

        Raises:
            ValueError: If a value object invariant is violated
        """
        details = self.details
        return Car(
            id=self.id,
            condition=self.condition,
            details=Details(
                manufacturer=Manufacturer(
                    code=details.manufacturer.code,
                    name=details.manufacturer.name or str(details.manufacturer.code),
                ),
                model=details.model,
                production_year=details.production_year,
                model_year=details.model_year,
                mileage=details.mileage,
                external_color=details.external_color,
                body=details.body,
                engine=details.engine,
                fuel_type=details.fuel_type,
                number_of_doors=details.number_of_doors,
            ),
            location=Location(lat=self.location.lat, lon=self.location.lon),
        )


class CarResponse(DTO):
    """Car response DTO."""

    id: int
    created_at: datetime
    modified_at: datetime
    condition: Condition
    details: DetailsDTO
    location: LocationDTO
    price: Optional[PriceDTO] = None

    @classmethod
    def from_domain(cls, car: Car) -> "CarResponse":
        """
        Build a response DTO from a Car entity.

        Args:
            car: Persisted (and possibly decorated) car

        Returns:
            CarResponse DTO
        """
        details = car.details
        location = car.location
        return cls(
            id=car.id,
            created_at=car.created_at,
            modified_at=car.modified_at,
            condition=car.condition,
            details=DetailsDTO(
                manufacturer=ManufacturerDTO(
                    code=details.manufacturer.code,
                    name=details.manufacturer.name,
                ),
                model=details.model,
                production_year=details.production_year,
                model_year=details.model_year,
                mileage=details.mileage,
                external_color=details.external_color,
                body=details.body,
                engine=details.engine,
                fuel_type=details.fuel_type,
                number_of_doors=details.number_of_doors,
            ),
            location=LocationDTO(
                lat=location.lat,
                lon=location.lon,
                address=location.address,
                city=location.city,
                state=location.state,
                zip=location.zip,
            ),
            price=(
                PriceDTO(currency=car.price.currency, amount=car.price.amount)
                if car.price is not None
                else None
            ),
        )
