"""Unit tests for the car aggregate and its value objects."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from vehicles_api.domain.entities.car import Car
from vehicles_api.domain.value_objects.address import Address
from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.domain.value_objects.condition import Condition
from vehicles_api.domain.value_objects.details import Details
from vehicles_api.domain.value_objects.location import Location
from vehicles_api.domain.value_objects.manufacturer import DEFAULT_MANUFACTURERS, Manufacturer


def make_details(**overrides) -> Details:
    values = dict(
        manufacturer=Manufacturer(100, "Audi"),
        model="A5",
        production_year=2017,
        model_year=2016,
        mileage=45734,
        external_color="black",
        body="coupe",
        engine="3.0 TFSI quattro",
        fuel_type="Gasoline",
        number_of_doors=2,
    )
    values.update(overrides)
    return Details(**values)


def test_default_manufacturers():
    """Test that the seeded manufacturer codes are present."""
    by_code = {m.code: m.name for m in DEFAULT_MANUFACTURERS}

    assert by_code == {100: "Audi", 101: "Chevrolet", 102: "Ford", 103: "BMW", 104: "Dodge"}


def test_manufacturer_requires_name():
    """Test that a manufacturer must be named."""
    with pytest.raises(ValueError):
        Manufacturer(100, "")


@pytest.mark.parametrize(
    "overrides",
    [{"model": ""}, {"mileage": -1}, {"number_of_doors": 0}],
)
def test_details_validation(overrides):
    """Test that invalid details are rejected."""
    with pytest.raises(ValueError):
        make_details(**overrides)


@pytest.mark.parametrize("lat,lon", [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_location_rejects_out_of_range_coordinates(lat, lon):
    """Test that coordinates must be on the globe."""
    with pytest.raises(ValueError):
        Location(lat=lat, lon=lon)


def test_location_address_decoration():
    """Test that an address can be attached and stripped again."""
    location = Location(lat=25.782340, lon=-80.369541)
    address = Address(address="8500 NW 25th St", city="Doral", state="FL", zip="33122")

    decorated = location.with_address(address)

    assert decorated.city == "Doral"
    assert decorated.lat == location.lat
    assert decorated.without_address() == location


def test_car_price_must_be_positive():
    """Test that a zero price is rejected."""
    with pytest.raises(ValueError):
        CarPrice(currency="USD", amount=Decimal("0"))


def test_car_price_str():
    """Test the display form of a price."""
    assert str(CarPrice(currency="USD", amount=Decimal("15689.4"))) == "USD 15689.40"


def test_apply_changes_keeps_identity():
    """Test that applying changes keeps id and created_at and bumps modified_at."""
    created = datetime.now(timezone.utc) - timedelta(days=1)
    car = Car(
        id=7,
        details=make_details(),
        location=Location(lat=25.782340, lon=-80.369541),
        condition=Condition.USED,
        created_at=created,
        modified_at=created,
    )
    other = Car(
        id=99,
        details=make_details(model="A4"),
        location=Location(lat=34.020728, lon=-118.692599, city="Malibu"),
        condition=Condition.NEW,
    )

    car.apply_changes(other)

    assert car.id == 7
    assert car.created_at == created
    assert car.modified_at > created
    assert car.details.model == "A4"
    assert car.condition == Condition.NEW
    assert car.location == Location(lat=34.020728, lon=-118.692599)


def test_for_storage_strips_decorations():
    """Test that the stored copy carries neither price nor address."""
    car = Car(
        details=make_details(),
        location=Location(lat=1.0, lon=2.0, address="somewhere"),
        condition=Condition.NEW,
        price=CarPrice(currency="USD", amount=Decimal("1.00")),
    )

    stored = car.for_storage()

    assert stored.price is None
    assert stored.location.address is None
    assert car.price is not None
