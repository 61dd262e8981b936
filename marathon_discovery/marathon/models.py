"""
Marathon application and task models.

Only the attributes consumed by discovery are parsed; everything else in the
Marathon payload is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class HealthCheckResult:
    """Outcome of one configured health check for a task."""

    alive: bool
    first_success: str | None = None
    last_failure: str | None = None
    consecutive_failures: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HealthCheckResult:
        """Parse a Marathon ``healthCheckResults`` entry."""
        return cls(
            alive=bool(data.get("alive", False)),
            first_success=data.get("firstSuccess"),
            last_failure=data.get("lastFailure"),
            consecutive_failures=data.get("consecutiveFailures") or 0,
        )


@dataclass
class Task:
    """
    One running instance of a Marathon application.

    Attributes:
        id: Marathon task id.
        app_id: Id of the owning application.
        host: Agent host the task runs on.
        ports: Host ports allocated to the task, in order.
        health_check_results: Results per health check, or None when the
            application has no health checks.
    """

    app_id: str
    host: str
    id: str = ""
    ports: list[int] = field(default_factory=list)
    health_check_results: list[HealthCheckResult] | None = None

    def is_healthy(self) -> bool:
        """A task is healthy unless one of its health checks reports dead."""
        if not self.health_check_results:
            return True
        return all(result.alive for result in self.health_check_results)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Parse a Marathon task payload."""
        results = data.get("healthCheckResults")
        return cls(
            id=data.get("id", ""),
            app_id=data.get("appId", ""),
            host=data.get("host", ""),
            ports=list(data.get("ports") or []),
            health_check_results=(
                [HealthCheckResult.from_dict(r) for r in results]
                if results is not None
                else None
            ),
        )


@dataclass
class Application:
    """
    A Marathon application.

    Attributes:
        id: Absolute application id (e.g., "/shop/orders").
        labels: Application labels, copied into instance metadata.
        tasks: Running tasks. The listing endpoint usually omits them.
    """

    id: str
    labels: dict[str, str] = field(default_factory=dict)
    tasks: list[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Application:
        """Parse a Marathon ``/v2/apps`` application payload."""
        return cls(
            id=data["id"],
            labels=dict(data.get("labels") or {}),
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
        )
