"""HTTP routes."""

from fastapi import APIRouter, HTTPException, Response, status

from pricing_service.adapters.inbound.http.schemas import PriceCollection, PriceResource
from pricing_service.application.dtos.price import PriceRequest
from pricing_service.domain.exceptions import PersistenceError
from pricing_service.infrastructure.logging.logger import log_event, logger
from pricing_service.infrastructure.wiring.dependencies import create_price_repository

router = APIRouter()

_price_repository = create_price_repository()


def _store_unavailable(err: PersistenceError) -> HTTPException:
    logger.error(f"Persistence failure: {err}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Price store unavailable",
    )


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/price", status_code=status.HTTP_200_OK, response_model=PriceCollection)
async def list_prices() -> PriceCollection:
    """List all prices."""
    try:
        prices = await _price_repository.list()
    except PersistenceError as err:
        raise _store_unavailable(err) from err
    return PriceCollection.from_prices(prices)


@router.get("/price/{price_id}", status_code=status.HTTP_200_OK, response_model=PriceResource)
async def get_price(price_id: int) -> PriceResource:
    """
    Get the price of a vehicle.

    Args:
        price_id: Price (vehicle) identifier

    Returns:
        Price resource

    Raises:
        HTTPException: 404 if no price exists
    """
    try:
        price = await _price_repository.get(price_id)
    except PersistenceError as err:
        raise _store_unavailable(err) from err

    if price is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Price {price_id} not found",
        )
    return PriceResource.from_price(price)


@router.post("/price", status_code=status.HTTP_201_CREATED, response_model=PriceResource)
async def create_price(request: PriceRequest) -> PriceResource:
    """
    Create a price. Without an id the store assigns one.

    Args:
        request: Price payload

    Returns:
        Created price resource
    """
    try:
        price = await _price_repository.save(request.to_domain())
    except PersistenceError as err:
        raise _store_unavailable(err) from err

    log_event(component="http", route="create_price", price_id=price.id)
    return PriceResource.from_price(price)


@router.put("/price/{price_id}", response_model=PriceResource)
async def replace_price(price_id: int, request: PriceRequest, response: Response) -> PriceResource:
    """
    Replace the price stored under an identifier, creating it if absent.

    Args:
        price_id: Price (vehicle) identifier
        request: Price payload (its id is ignored)
        response: Outgoing response, used to set 201 on creation

    Returns:
        Stored price resource
    """
    try:
        existed = await _price_repository.get(price_id) is not None
        price = await _price_repository.save(request.to_domain(price_id))
    except PersistenceError as err:
        raise _store_unavailable(err) from err

    response.status_code = status.HTTP_200_OK if existed else status.HTTP_201_CREATED
    log_event(component="http", route="replace_price", price_id=price_id, created=not existed)
    return PriceResource.from_price(price)


@router.delete("/price/{price_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_price(price_id: int) -> Response:
    """
    Delete a price.

    Args:
        price_id: Price (vehicle) identifier

    Raises:
        HTTPException: 404 if no price exists
    """
    try:
        removed = await _price_repository.delete(price_id)
    except PersistenceError as err:
        raise _store_unavailable(err) from err

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Price {price_id} not found",
        )
    log_event(component="http", route="delete_price", price_id=price_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
