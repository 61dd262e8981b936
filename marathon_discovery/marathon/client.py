"""
Marathon REST API client.

Defines the MarathonClient protocol consumed by discovery and an httpx-based
implementation talking to the Marathon v2 API.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from ..exceptions import ApplicationNotFoundError, MarathonError
from ..logging import get_logger
from .models import Application

if TYPE_CHECKING:
    from ..config import MarathonSettings

logger = get_logger("marathon.client")


@runtime_checkable
class MarathonClient(Protocol):
    """Protocol for the Marathon operations discovery relies on.

    Implementations must be safe for concurrent use.
    """

    async def get_application(self, app_id: str) -> Application:
        """Fetch one application, including its tasks.

        Raises:
            ApplicationNotFoundError: If no such application exists.
            MarathonError: If the call fails.
        """
        ...

    async def list_applications(
        self, query: Mapping[str, str] | None = None
    ) -> list[Application]:
        """List applications. An ``id`` key filters by partial id.

        Raises:
            MarathonError: If the call fails.
        """
        ...

    async def ping(self) -> bool:
        """Return True if Marathon answers."""
        ...


class HttpMarathonClient:
    """
    MarathonClient over the Marathon v2 REST API.

    Example:
        async with HttpMarathonClient("http://marathon.mesos:8080") as client:
            app = await client.get_application("/shop/orders")
            for task in app.tasks:
                print(task.host, task.ports)
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        auth: tuple[str, str] | None = None,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the Marathon client.

        Args:
            base_url: Marathon URL (e.g., "http://marathon.mesos:8080").
            token: DC/OS ACS token sent as ``Authorization: token=...``.
            auth: Username/password for HTTP basic auth.
            timeout_seconds: Request timeout.
            http_client: Pre-built client; base_url, auth and timeout are
                then the caller's responsibility.
        """
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None

        if http_client is None:
            headers = {"Accept": "application/json"}
            if token:
                headers["Authorization"] = f"token={token}"

            http_client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                auth=auth,
                timeout=httpx.Timeout(timeout_seconds),
            )
        self._client = http_client

    @classmethod
    def from_settings(cls, settings: MarathonSettings) -> HttpMarathonClient:
        """Build a client from MarathonSettings."""
        return cls(
            settings.get_url(),
            token=settings.token,
            auth=settings.basic_auth,
            timeout_seconds=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.info("Closed Marathon client for %s", self._base_url)

    async def __aenter__(self) -> HttpMarathonClient:
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None,
                        exc_tb: object) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # API
    # -------------------------------------------------------------------------

    async def get_application(self, app_id: str) -> Application:
        path = "/v2/apps/" + quote(app_id.lstrip("/"), safe="/")
        response = await self._request(path)

        if response.status_code == 404:
            raise ApplicationNotFoundError(app_id)

        data = self._decode(response, "app")
        return self._parse(response, [data])[0]

    async def list_applications(
        self, query: Mapping[str, str] | None = None
    ) -> list[Application]:
        response = await self._request("/v2/apps", params=dict(query or {}))
        return self._parse(response, self._decode(response, "apps"))

    async def ping(self) -> bool:
        try:
            response = await self._client.get("/ping")
        except httpx.HTTPError as e:
            logger.warning("Marathon ping failed: %s", e)
            return False
        return response.status_code == 200

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _request(
        self, path: str, params: dict[str, str] | None = None
    ) -> httpx.Response:
        try:
            return await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise MarathonError(f"GET {path} failed", original_error=e) from e

    @staticmethod
    def _decode(response: httpx.Response, key: str) -> Any:
        if response.is_error:
            raise MarathonError(
                f"{response.request.method} {response.request.url.path} "
                f"returned {response.reason_phrase}",
                status_code=response.status_code,
            )
        try:
            return response.json()[key]
        except (ValueError, KeyError, TypeError) as e:
            raise MarathonError(
                f"Malformed Marathon response: missing {key!r}",
                status_code=response.status_code,
                original_error=e,
            ) from e

    @staticmethod
    def _parse(response: httpx.Response, payloads: Any) -> list[Application]:
        try:
            return [Application.from_dict(p) for p in payloads]
        except (KeyError, TypeError, ValueError) as e:
            raise MarathonError(
                "Malformed Marathon application payload",
                status_code=response.status_code,
                original_error=e,
            ) from e
