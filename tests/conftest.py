"""Shared fixtures for discovery tests."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from marathon_discovery.exceptions import ApplicationNotFoundError, MarathonError
from marathon_discovery.marathon.models import Application, HealthCheckResult, Task


class FakeMarathonClient:
    """In-memory MarathonClient recording every call."""

    def __init__(self, apps: list[Application] | None = None):
        self.apps = {app.id: app for app in apps or []}
        self.failing_ids: set[str] = set()
        self.fail_listing = False
        self.get_calls: list[str] = []
        self.list_calls: list[dict[str, str]] = []
        self.alive = True
        self.closed = False

    async def get_application(self, app_id: str) -> Application:
        self.get_calls.append(app_id)
        if app_id in self.failing_ids:
            raise MarathonError(f"GET /v2/apps{app_id} failed", status_code=502)
        if app_id not in self.apps:
            raise ApplicationNotFoundError(app_id)
        return self.apps[app_id]

    async def list_applications(
        self, query: Mapping[str, str] | None = None
    ) -> list[Application]:
        self.list_calls.append(dict(query or {}))
        if self.fail_listing:
            raise MarathonError("GET /v2/apps failed", status_code=503)
        partial = (query or {}).get("id", "")
        # The listing endpoint omits tasks
        return [Application(id=app.id) for app in self.apps.values() if partial in app.id]

    async def ping(self) -> bool:
        return self.alive

    async def close(self) -> None:
        self.closed = True


def _make_task(
    app_id: str,
    host: str = "10.0.0.5",
    ports: list[int] | None = None,
    alive: list[bool] | None = None,
) -> Task:
    """Build a task; alive=None means the app has no health checks."""
    return Task(
        id=f"{app_id.strip('/').replace('/', '_')}.{host}",
        app_id=app_id,
        host=host,
        ports=[8080] if ports is None else ports,
        health_check_results=(
            None if alive is None else [HealthCheckResult(alive=a) for a in alive]
        ),
    )


@pytest.fixture
def make_task():
    """Factory for Marathon tasks."""
    return _make_task


@pytest.fixture
def make_marathon():
    """Factory for fake Marathon clients."""
    return FakeMarathonClient
