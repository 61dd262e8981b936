"""
Tests for the Marathon models and the httpx-based Marathon client.
"""

import httpx
import pytest

from marathon_discovery.config import MarathonSettings
from marathon_discovery.exceptions import ApplicationNotFoundError, MarathonError
from marathon_discovery.marathon.client import HttpMarathonClient, MarathonClient
from marathon_discovery.marathon.models import Application, Task

ORDERS_APP = {
    "id": "/shop/orders",
    "labels": {"env": "prod"},
    "instances": 2,
    "tasks": [
        {
            "id": "shop_orders.1",
            "appId": "/shop/orders",
            "host": "10.0.0.5",
            "ports": [31000, 31001],
            "healthCheckResults": [
                {"alive": True, "consecutiveFailures": 0, "firstSuccess": "2024-01-01T00:00:00Z"}
            ],
        },
        {
            "id": "shop_orders.2",
            "appId": "/shop/orders",
            "host": "10.0.0.6",
            "ports": [],
        },
    ],
}


def make_client(handler) -> HttpMarathonClient:
    """Client whose requests are answered by handler."""
    http_client = httpx.AsyncClient(
        base_url="http://marathon.test",
        transport=httpx.MockTransport(handler),
    )
    return HttpMarathonClient("http://marathon.test", http_client=http_client)


# =============================================================================
# Model Tests
# =============================================================================


class TestModels:
    """Tests for parsing Marathon payloads."""

    def test_application_from_dict(self) -> None:
        """Applications parse id, labels and tasks."""
        app = Application.from_dict(ORDERS_APP)

        assert app.id == "/shop/orders"
        assert app.labels == {"env": "prod"}
        assert [t.host for t in app.tasks] == ["10.0.0.5", "10.0.0.6"]
        assert app.tasks[0].ports == [31000, 31001]
        assert app.tasks[0].health_check_results[0].alive is True
        assert app.tasks[1].health_check_results is None

    def test_missing_collections(self) -> None:
        """Absent or null labels and tasks parse as empty."""
        app = Application.from_dict({"id": "/a", "labels": None})

        assert app.labels == {}
        assert app.tasks == []

    def test_task_health(self) -> None:
        """A task is healthy only if no health check reports dead."""
        healthy = Task.from_dict(
            {"appId": "/a", "host": "h", "healthCheckResults": [{"alive": True}, {"alive": True}]}
        )
        unhealthy = Task.from_dict(
            {"appId": "/a", "host": "h", "healthCheckResults": [{"alive": True}, {"alive": False}]}
        )
        unchecked = Task.from_dict({"appId": "/a", "host": "h"})

        assert healthy.is_healthy()
        assert not unhealthy.is_healthy()
        assert unchecked.is_healthy()


# =============================================================================
# Client Tests
# =============================================================================


class TestHttpMarathonClient:
    """Tests for HttpMarathonClient."""

    def test_satisfies_protocol(self) -> None:
        """HttpMarathonClient is a MarathonClient."""
        client = HttpMarathonClient("http://marathon.test")

        assert isinstance(client, MarathonClient)
        assert client.base_url == "http://marathon.test"

    @pytest.mark.asyncio
    async def test_get_application(self) -> None:
        """get_application fetches /v2/apps/<id>."""
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={"app": ORDERS_APP})

        async with make_client(handler) as client:
            app = await client.get_application("/shop/orders")

        assert seen == ["/v2/apps/shop/orders"]
        assert app.id == "/shop/orders"
        assert len(app.tasks) == 2

    @pytest.mark.asyncio
    async def test_get_application_not_found(self) -> None:
        """A 404 raises ApplicationNotFoundError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "App '/orders' does not exist"})

        async with make_client(handler) as client:
            with pytest.raises(ApplicationNotFoundError) as exc_info:
                await client.get_application("/orders")

        assert exc_info.value.app_id == "/orders"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error(self) -> None:
        """Non-2xx responses raise MarathonError with the status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with make_client(handler) as client:
            with pytest.raises(MarathonError) as exc_info:
                await client.get_application("/orders")

        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, ApplicationNotFoundError)

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        """Network errors are wrapped in MarathonError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(MarathonError) as exc_info:
                await client.list_applications()

        assert isinstance(exc_info.value.original_error, httpx.ConnectTimeout)

    @pytest.mark.asyncio
    async def test_malformed_body(self) -> None:
        """Bodies that are not Marathon JSON raise MarathonError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy error</html>")

        async with make_client(handler) as client:
            with pytest.raises(MarathonError, match="Malformed"):
                await client.get_application("/orders")

    @pytest.mark.asyncio
    async def test_malformed_application(self) -> None:
        """Application payloads without an id raise MarathonError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"apps": [{"labels": {}}]})

        async with make_client(handler) as client:
            with pytest.raises(MarathonError, match="Malformed"):
                await client.list_applications()

    @pytest.mark.asyncio
    async def test_list_applications_with_partial_id(self) -> None:
        """Query keys are sent as URL parameters."""
        seen: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(
                200, json={"apps": [{"id": "/orders-v1"}, {"id": "/orders-v2"}]}
            )

        async with make_client(handler) as client:
            apps = await client.list_applications({"id": "/orders"})

        assert [a.id for a in apps] == ["/orders-v1", "/orders-v2"]
        assert seen[0].path == "/v2/apps"
        assert seen[0].params["id"] == "/orders"

    @pytest.mark.asyncio
    async def test_ping(self) -> None:
        """ping is True on a 200 from /ping."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/ping"
            return httpx.Response(200, text="pong")

        async with make_client(handler) as client:
            assert await client.ping() is True

    @pytest.mark.asyncio
    async def test_ping_unreachable(self) -> None:
        """ping is False when Marathon cannot be reached."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            assert await client.ping() is False

    @pytest.mark.asyncio
    async def test_token_header(self) -> None:
        """A DC/OS token is sent in the Authorization header."""
        client = HttpMarathonClient("http://marathon.test/", token="secret")

        assert client.base_url == "http://marathon.test"
        assert client._client.headers["Authorization"] == "token=secret"
        await client.close()

    @pytest.mark.asyncio
    async def test_from_settings(self) -> None:
        """Clients can be built from MarathonSettings."""
        settings = MarathonSettings(host="marathon.mesos", port=8443, scheme="https", timeout=3.0)

        client = HttpMarathonClient.from_settings(settings)

        assert client.base_url == "https://marathon.mesos:8443"
        assert client._client.timeout.read == 3.0
        await client.close()
