"""HTTP pricing service client adapter."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from vehicles_api.application.ports.price_client import PriceClient
from vehicles_api.domain.exceptions import CollaboratorUnavailableError
from vehicles_api.domain.value_objects.car_price import CarPrice
from vehicles_api.infrastructure.logging.logger import log_collaborator_call


def _parse_price(data: dict[str, Any]) -> CarPrice:
    """
    Build a CarPrice from a pricing service body.

    Raises:
        TypeError: If currency is not a string or amount is not a number or string
        KeyError: If amount is missing
        InvalidOperation: If amount is not a decimal
        ValueError: If amount is not positive and finite
    """
    currency = data.get("currency") or "USD"
    amount = data["amount"]
    if not isinstance(currency, str):
        raise TypeError(f"currency must be a string, got {type(currency).__name__}")
    if isinstance(amount, bool) or not isinstance(amount, (str, int, float)):
        raise TypeError(f"amount must be a number, got {type(amount).__name__}")
    value = Decimal(str(amount))
    if not value.is_finite():
        raise ValueError(f"amount must be finite, got {value}")
    return CarPrice(currency=currency, amount=value)


class HttpPriceClient(PriceClient):
    """Pricing service client using httpx."""

    COLLABORATOR = "pricing"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 0.5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize pricing client.

        Args:
            base_url: Base URL of the pricing service
            timeout_seconds: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        """Base URL of the pricing service."""
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def get_price(self, vehicle_id: int) -> Optional[CarPrice]:
        """
        Get the current price for a vehicle.

        Args:
            vehicle_id: Car identifier

        Returns:
            Price, or None if the pricing service has no record for it

        Raises:
            CollaboratorUnavailableError: On timeout, transport error,
                unexpected status or malformed body
        """
        try:
            response = await self._get_client().get(f"/price/{vehicle_id}")
        except httpx.TimeoutException as e:
            log_collaborator_call(self.COLLABORATOR, "timeout", vehicle_id=vehicle_id)
            raise CollaboratorUnavailableError(self.COLLABORATOR, "timeout") from e
        except httpx.RequestError as e:
            log_collaborator_call(self.COLLABORATOR, "error", vehicle_id=vehicle_id, error=str(e))
            raise CollaboratorUnavailableError(self.COLLABORATOR, str(e)) from e

        if response.status_code == 404:
            log_collaborator_call(self.COLLABORATOR, "not_found", vehicle_id=vehicle_id)
            return None
        if response.status_code != 200:
            log_collaborator_call(
                self.COLLABORATOR, "error", vehicle_id=vehicle_id, status=response.status_code
            )
            raise CollaboratorUnavailableError(
                self.COLLABORATOR, f"unexpected status {response.status_code}"
            )

        try:
            price = _parse_price(response.json())
        except (ValueError, KeyError, TypeError, AttributeError, InvalidOperation) as e:
            log_collaborator_call(self.COLLABORATOR, "error", vehicle_id=vehicle_id, error=str(e))
            raise CollaboratorUnavailableError(self.COLLABORATOR, "malformed response") from e

        log_collaborator_call(self.COLLABORATOR, "ok", vehicle_id=vehicle_id)
        return price

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
