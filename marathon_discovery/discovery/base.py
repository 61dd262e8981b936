"""
Discovery abstractions for marathon-discovery.

Defines the service instance model and the read-only discovery client
interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Service Instance
# =============================================================================


@dataclass
class ServiceInstance:
    """
    A reachable endpoint of a service.

    Attributes:
        service_id: Logical service id (e.g., "shop.orders").
        host: Hostname or IP address.
        port: Service port, 0 when none is allocated.
        secure: Whether the endpoint speaks TLS.
        metadata: Labels of the owning application.

    Example:
        instance = ServiceInstance(
            service_id="orders",
            host="10.0.0.5",
            port=8080,
            metadata={"zone": "us-east"},
        )
        instance.url  # "http://10.0.0.5:8080"
    """

    service_id: str
    host: str
    port: int = 0
    secure: bool = False
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def address(self) -> str:
        """Get full address as host:port."""
        return f"{self.host}:{self.port}"

    @property
    def url(self) -> str:
        """Get the base URL for the instance."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize instance to dictionary."""
        return {
            "service_id": self.service_id,
            "host": self.host,
            "port": self.port,
            "secure": self.secure,
            "uri": self.url,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceInstance:
        """Deserialize instance from dictionary."""
        return cls(
            service_id=data["service_id"],
            host=data["host"],
            port=data.get("port", 0),
            secure=data.get("secure", False),
            metadata=dict(data.get("metadata", {})),
        )


# =============================================================================
# Abstract Discovery Client
# =============================================================================


class DiscoveryClient(ABC):
    """
    Read-only view of the services known to some backend.

    Implementations never raise from ``resolve`` or ``list_services``:
    failures are logged and reported as empty results.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable name of the implementation."""
        pass

    @abstractmethod
    async def resolve(self, service_id: str) -> list[ServiceInstance]:
        """
        Get the healthy instances of a service.

        Args:
            service_id: Logical service id.

        Returns:
            Instances in discovery order, possibly empty.
        """
        pass

    @abstractmethod
    async def list_services(self) -> list[str]:
        """
        Get the ids of all known services.

        Returns:
            Service ids, possibly empty.
        """
        pass

    async def health_check(self) -> bool:
        """
        Check backend connectivity.

        Returns:
            True if the backend is accessible.
        """
        return True
