"""Eureka service discovery adapter."""

from typing import Any, Optional

import httpx

from vehicles_api.application.ports.service_discovery import ServiceDiscovery
from vehicles_api.infrastructure.logging.logger import log_collaborator_call


class EurekaServiceDiscovery(ServiceDiscovery):
    """Resolves service names through the Eureka REST API."""

    def __init__(
        self,
        eureka_url: str,
        timeout_seconds: float = 2.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize Eureka discovery.

        Args:
            eureka_url: Eureka base URL (e.g., http://localhost:8761/eureka)
            timeout_seconds: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._eureka_url = eureka_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    def _fetch_instances(self, service_name: str) -> list[dict[str, Any]]:
        """
        Fetch registered instances of an application.

        Args:
            service_name: Logical service name

        Returns:
            List of instance dictionaries; malformed entries are dropped
        """
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            response = client.get(
                f"{self._eureka_url}/apps/{service_name.upper()}",
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            instances = response.json()["application"]["instance"]

        # Eureka returns a bare object when only one instance is registered
        if isinstance(instances, dict):
            instances = [instances]
        if not isinstance(instances, list):
            raise TypeError(f"unexpected instance payload {type(instances).__name__}")
        return [instance for instance in instances if isinstance(instance, dict)]

    def resolve(self, service_name: str) -> Optional[str]:
        """
        Return the home page URL of the first UP instance.

        Args:
            service_name: Logical service name

        Returns:
            Base URL, or None if Eureka is unreachable or no instance is UP
        """
        try:
            instances = self._fetch_instances(service_name)
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            log_collaborator_call(
                "discovery", "error", service_name=service_name, error=str(e)
            )
            return None

        for instance in instances:
            home_page_url = instance.get("homePageUrl")
            if not home_page_url or not isinstance(home_page_url, str):
                continue
            if instance.get("status", "UP") == "UP":
                log_collaborator_call("discovery", "ok", service_name=service_name)
                return home_page_url.rstrip("/")

        log_collaborator_call("discovery", "not_found", service_name=service_name)
        return None
