"""Service discovery port."""

from abc import ABC, abstractmethod
from typing import Optional


class ServiceDiscovery(ABC):
    """Port interface for resolving logical service names to endpoints."""

    @abstractmethod
    def resolve(self, service_name: str) -> Optional[str]:
        """
        Resolve a logical service name to a base URL.

        Args:
            service_name: Logical service name (e.g., 'pricing-service')

        Returns:
            Base URL of one instance, or None if no instance is known
        """
        pass
