"""
marathon-discovery Service Discovery Package.

Resolves logical service ids to healthy Marathon task endpoints.

Example:
    from marathon_discovery.discovery import MarathonDiscoveryClient

    discovery = MarathonDiscoveryClient.from_settings()

    instances = await discovery.resolve("shop.orders")
    for instance in instances:
        print(f"Found: {instance.host}:{instance.port}")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

__all__ = [
    # Core types
    "DiscoveryClient",
    "ServiceInstance",
    # Id conversion
    "ServiceIdConverter",
    "to_marathon_id",
    "to_service_id",
    # Marathon
    "MarathonDiscoveryClient",
]


def __getattr__(name: str) -> object:
    """Lazy import discovery components."""
    if name in ("DiscoveryClient", "ServiceInstance"):
        from .base import DiscoveryClient, ServiceInstance

        return locals()[name]

    if name in ("ServiceIdConverter", "to_marathon_id", "to_service_id"):
        from .converter import ServiceIdConverter, to_marathon_id, to_service_id

        return locals()[name]

    if name == "MarathonDiscoveryClient":
        from .marathon import MarathonDiscoveryClient

        return MarathonDiscoveryClient

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if TYPE_CHECKING:
    from .base import DiscoveryClient, ServiceInstance
    from .converter import ServiceIdConverter, to_marathon_id, to_service_id
    from .marathon import MarathonDiscoveryClient
