"""Static service discovery adapter."""

from collections.abc import Mapping
from typing import Optional

from vehicles_api.application.ports.service_discovery import ServiceDiscovery


class StaticServiceDiscovery(ServiceDiscovery):
    """Resolves service names from a fixed, configured mapping."""

    def __init__(self, endpoints: Mapping[str, str]) -> None:
        """
        Initialize static discovery.

        Args:
            endpoints: Mapping of logical service name to base URL
        """
        self._endpoints = {name: url for name, url in endpoints.items() if url}

    def resolve(self, service_name: str) -> Optional[str]:
        """Return the configured URL for the service, if any."""
        return self._endpoints.get(service_name)
