"""Marathon REST API models and client."""

from .client import HttpMarathonClient, MarathonClient
from .models import Application, HealthCheckResult, Task

__all__ = [
    "Application",
    "HealthCheckResult",
    "HttpMarathonClient",
    "MarathonClient",
    "Task",
]
