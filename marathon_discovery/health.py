"""
Health indicator for the Marathon connection.

Reports whether the configured Marathon endpoint answers, for readiness
checks and the optional HTTP surface.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .discovery.base import DiscoveryClient
from .logging import get_logger

health_logger = get_logger("health")


class HealthStatus(Enum):
    """Health check status values."""

    UP = "up"
    DOWN = "down"


@dataclass
class HealthReport:
    """Result of a Marathon health check."""

    status: HealthStatus
    details: dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def is_up(self) -> bool:
        return self.status == HealthStatus.UP

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "details": self.details,
        }


class MarathonHealthIndicator:
    """
    Health indicator backed by a discovery client.

    Example:
        indicator = MarathonHealthIndicator(discovery)
        report = await indicator.check()
        if not report.is_up:
            print("Marathon unreachable")
    """

    def __init__(self, discovery: DiscoveryClient):
        self._discovery = discovery

    async def check(self) -> HealthReport:
        """Check connectivity. Never raises."""
        start = time.time()
        details: dict[str, Any] = {"client": self._discovery.description}

        try:
            reachable = await self._discovery.health_check()
        except Exception as e:
            health_logger.warning("Health check raised: %s", e)
            details["error"] = str(e)
            reachable = False

        return HealthReport(
            status=HealthStatus.UP if reachable else HealthStatus.DOWN,
            details=details,
            duration_ms=(time.time() - start) * 1000,
        )
