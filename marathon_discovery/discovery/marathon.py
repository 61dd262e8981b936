"""
Marathon-backed discovery client.

Resolves a service id to the healthy task endpoints of the Marathon
applications that match it, first by exact id and then by partial id.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from ..exceptions import ApplicationNotFoundError, ConfigurationError
from ..logging import get_logger
from ..marathon.models import Application
from .base import DiscoveryClient, ServiceInstance
from .converter import to_marathon_id, to_service_id

if TYPE_CHECKING:
    from ..config import MarathonSettings
    from ..marathon.client import MarathonClient

logger = get_logger("discovery.marathon")

DESCRIPTION = "Marathon Discovery Client"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class MarathonDiscoveryClient(DiscoveryClient):
    """
    Discovery over Marathon applications.

    Lookup runs in two stages:
    1. The application whose id is exactly ``to_marathon_id(service_id)``.
    2. If that yields no instances, every application whose id contains it,
       each re-fetched by exact id to obtain its tasks.

    Tasks failing any health check are dropped. Application labels become
    instance metadata. Errors from Marathon are logged and degrade the
    result; they are never raised to the caller.

    Example:
        async with MarathonDiscoveryClient.from_settings() as discovery:
            for instance in await discovery.resolve("shop.orders"):
                print(instance.url, instance.metadata)
    """

    def __init__(self, client: MarathonClient, max_concurrent_fetches: int | None = None):
        """
        Initialize the discovery client.

        Args:
            client: Marathon API client, shared read-only across calls.
            max_concurrent_fetches: Cap on simultaneous partial-match
                re-fetches per resolve call. None sends them all at once.
        """
        if max_concurrent_fetches is not None and max_concurrent_fetches < 1:
            raise ValueError("max_concurrent_fetches must be at least 1")
        self._client = client
        self._max_concurrent_fetches = max_concurrent_fetches

    @classmethod
    def from_settings(cls, settings: MarathonSettings | None = None) -> MarathonDiscoveryClient:
        """
        Build a discovery client with an HTTP Marathon client.

        Raises:
            ConfigurationError: If discovery is disabled in settings.
        """
        from ..config import MarathonSettings
        from ..marathon.client import HttpMarathonClient

        settings = settings or MarathonSettings()
        if not settings.discovery_enabled:
            raise ConfigurationError("Marathon discovery is disabled (MARATHON_DISCOVERY_ENABLED)")
        return cls(
            HttpMarathonClient.from_settings(settings),
            max_concurrent_fetches=settings.max_concurrent_fetches,
        )

    @property
    def client(self) -> MarathonClient:
        return self._client

    async def close(self) -> None:
        """Close the Marathon client, if it can be closed."""
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> MarathonDiscoveryClient:
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None,
                        exc_tb: object) -> None:
        await self.close()

    @property
    def description(self) -> str:
        return DESCRIPTION

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    async def resolve(self, service_id: str) -> list[ServiceInstance]:
        """
        Get the healthy instances of a service.

        Args:
            service_id: Logical service id (e.g., "shop.orders").

        Returns:
            Instances of the exact match, or of all partial matches in the
            order Marathon listed them. Empty if nothing matches or Marathon
            is unreachable. An empty service_id returns [] without querying
            Marathon, since an empty partial id would match every application.
        """
        if not service_id:
            return []

        try:
            marathon_id = to_marathon_id(service_id)

            instances: list[ServiceInstance] = []
            app = await self._fetch_application(marathon_id)
            if app is not None:
                instances = self.extract_instances(app)

            if not instances:
                instances = await self._resolve_partial(service_id, marathon_id)

            logger.debug(
                "Discovered %s for service id [%s]",
                _plural(len(instances), "service instance"),
                service_id,
            )
            return instances

        except Exception as e:
            logger.error("Failed to resolve %s: %s", service_id, e, exc_info=True)
            return []

    async def list_services(self) -> list[str]:
        """Get the service ids of every Marathon application."""
        try:
            apps = await self._client.list_applications()
            return [to_service_id(app.id) for app in apps]
        except Exception as e:
            logger.error("Failed to list Marathon applications: %s", e, exc_info=True)
            return []

    async def health_check(self) -> bool:
        """Check Marathon connectivity."""
        try:
            return await self._client.ping()
        except Exception as e:
            logger.warning("Marathon health check failed: %s", e)
            return False

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def extract_instances(self, app: Application) -> list[ServiceInstance]:
        """
        Build service instances from the healthy tasks of an application.

        Args:
            app: Application including its tasks.

        Returns:
            One instance per healthy task, in task order.
        """
        logger.debug("Discovered service [%s]", app.id)

        if not app.tasks:
            return []

        return [
            ServiceInstance(
                service_id=to_service_id(task.app_id),
                host=task.host,
                port=task.ports[0] if task.ports else 0,
                secure=False,
                metadata=dict(app.labels) if app.labels else {},
            )
            for task in app.tasks
            if task.is_healthy()
        ]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _resolve_partial(self, service_id: str, marathon_id: str) -> list[ServiceInstance]:
        """Collect instances of every application whose id contains marathon_id."""
        try:
            matches = await self._client.list_applications({"id": marathon_id})
        except Exception as e:
            logger.error("Failed to search applications for %s: %s", marathon_id, e, exc_info=True)
            return []

        logger.debug(
            "Discovered %s with ids that contain [%s]",
            _plural(len(matches), "service"),
            service_id,
        )

        # Uncapped fetches beyond the httpx pool size (100) queue for a
        # connection and may hit the pool timeout.
        fetch = self._fetch_application
        if self._max_concurrent_fetches is not None:
            semaphore = asyncio.Semaphore(self._max_concurrent_fetches)

            async def fetch(app_id: str) -> Application | None:
                async with semaphore:
                    return await self._fetch_application(app_id)

        # gather keeps listing order regardless of completion order
        apps = await asyncio.gather(*(fetch(m.id) for m in matches))

        instances: list[ServiceInstance] = []
        for app in apps:
            if app is not None:
                instances.extend(self.extract_instances(app))
        return instances

    async def _fetch_application(self, marathon_id: str) -> Application | None:
        """Fetch one application; None if it is missing or the call fails."""
        try:
            return await self._client.get_application(marathon_id)
        except ApplicationNotFoundError:
            logger.debug("No application with id [%s]", marathon_id)
            return None
        except Exception as e:
            logger.error("Failed to fetch application %s: %s", marathon_id, e, exc_info=True)
            return None
