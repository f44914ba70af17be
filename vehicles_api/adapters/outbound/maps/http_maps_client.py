"""HTTP maps service client adapter."""

from typing import Any, Optional

import httpx

from vehicles_api.application.ports.maps_client import MapsClient
from vehicles_api.domain.exceptions import CollaboratorUnavailableError
from vehicles_api.domain.value_objects.address import Address
from vehicles_api.infrastructure.logging.logger import log_collaborator_call


def _text_field(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


class HttpMapsClient(MapsClient):
    """Maps service client using httpx."""

    COLLABORATOR = "maps"

    def __init__(
        self,
        endpoint: str,
        timeout_seconds: float = 0.5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize maps client.

        Args:
            endpoint: Base URL of the maps service
            timeout_seconds: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._endpoint,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def get_address(self, lat: float, lon: float) -> Optional[Address]:
        """
        Resolve coordinates through ``GET /maps?lat=..&lon=..``.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Address, or None if the maps service has no address for the point

        Raises:
            CollaboratorUnavailableError: On timeout, transport error,
                unexpected status or malformed body
        """
        try:
            response = await self._get_client().get("/maps", params={"lat": lat, "lon": lon})
        except httpx.TimeoutException as e:
            log_collaborator_call(self.COLLABORATOR, "timeout", lat=lat, lon=lon)
            raise CollaboratorUnavailableError(self.COLLABORATOR, "timeout") from e
        except httpx.RequestError as e:
            log_collaborator_call(self.COLLABORATOR, "error", lat=lat, lon=lon, error=str(e))
            raise CollaboratorUnavailableError(self.COLLABORATOR, str(e)) from e

        if response.status_code == 404:
            log_collaborator_call(self.COLLABORATOR, "not_found", lat=lat, lon=lon)
            return None
        if response.status_code != 200:
            log_collaborator_call(
                self.COLLABORATOR, "error", lat=lat, lon=lon, status=response.status_code
            )
            raise CollaboratorUnavailableError(
                self.COLLABORATOR, f"unexpected status {response.status_code}"
            )

        try:
            data = response.json()
            address = Address(
                address=_text_field(data, "address"),
                city=_text_field(data, "city"),
                state=_text_field(data, "state"),
                zip=_text_field(data, "zip"),
            )
        except (ValueError, TypeError, AttributeError) as e:
            log_collaborator_call(self.COLLABORATOR, "error", lat=lat, lon=lon, error=str(e))
            raise CollaboratorUnavailableError(self.COLLABORATOR, "malformed response") from e

        log_collaborator_call(self.COLLABORATOR, "ok", lat=lat, lon=lon)
        return address

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
