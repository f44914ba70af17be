"""HTTP routes."""

from fastapi import APIRouter, HTTPException, Response, status

from vehicles_api.adapters.inbound.http.schemas import CarCollection, CarResource
from vehicles_api.application.dtos.car import CarRequest
from vehicles_api.domain.entities.car import Car
from vehicles_api.domain.exceptions import (
    CarNotFoundError,
    CarValidationError,
    PersistenceError,
    VehiclesError,
)
from vehicles_api.infrastructure.logging.logger import log_event, logger
from vehicles_api.infrastructure.wiring.dependencies import create_car_service

router = APIRouter()

# Create use case instance (wired with dependencies)
_car_service = create_car_service()


def _http_error(err: VehiclesError) -> HTTPException:
    """
    Map a domain error to an HTTP error.

    Args:
        err: Domain error raised by the car service

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(err, CarNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))
    if isinstance(err, CarValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))
    if isinstance(err, PersistenceError):
        logger.error(f"Persistence failure: {err}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Car store unavailable",
    )


def _to_domain(request: CarRequest) -> Car:
    """Convert a request to a Car, mapping invariant violations to 400."""
    try:
        return request.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/cars", status_code=status.HTTP_200_OK, response_model=CarCollection)
async def list_cars() -> CarCollection:
    """
    List all cars, each decorated with price and address.

    Returns:
        Collection of cars embedded under ``carList``
    """
    try:
        cars = await _car_service.list()
    except VehiclesError as err:
        raise _http_error(err) from err

    log_event(component="http", route="list_cars", results_count=len(cars))
    return CarCollection.from_cars(cars)


@router.get("/cars/{car_id}", status_code=status.HTTP_200_OK, response_model=CarResource)
async def get_car(car_id: int) -> CarResource:
    """
    Get a single car, decorated with price and address.

    Args:
        car_id: Car identifier

    Returns:
        Car resource

    Raises:
        HTTPException: 404 if the car does not exist
    """
    try:
        car = await _car_service.find_by_id(car_id)
    except VehiclesError as err:
        raise _http_error(err) from err

    return CarResource.from_car(car)


@router.post("/cars", status_code=status.HTTP_201_CREATED, response_model=CarResource)
async def create_car(request: CarRequest) -> CarResource:
    """
    Create a new car.

    Args:
        request: Car payload without identifier

    Returns:
        Created car resource carrying its assigned identifier

    Raises:
        HTTPException: 400 if the payload carries an id or an unknown manufacturer
    """
    try:
        car = await _car_service.create(_to_domain(request))
    except VehiclesError as err:
        raise _http_error(err) from err

    log_event(component="http", route="create_car", car_id=car.id)
    return CarResource.from_car(car)


@router.put("/cars/{car_id}", status_code=status.HTTP_200_OK, response_model=CarResource)
async def update_car(car_id: int, request: CarRequest) -> CarResource:
    """
    Update the details, condition and location of a car.

    Args:
        car_id: Car identifier
        request: New car values

    Returns:
        Updated car resource

    Raises:
        HTTPException: 404 if the car does not exist, 400 on unknown manufacturer
    """
    try:
        car = await _car_service.update(car_id, _to_domain(request))
    except VehiclesError as err:
        raise _http_error(err) from err

    log_event(component="http", route="update_car", car_id=car_id)
    return CarResource.from_car(car)


@router.delete("/cars/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: int) -> Response:
    """
    Delete a car.

    Args:
        car_id: Car identifier

    Raises:
        HTTPException: 404 if the car does not exist
    """
    try:
        await _car_service.delete(car_id)
    except VehiclesError as err:
        raise _http_error(err) from err

    log_event(component="http", route="delete_car", car_id=car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
