"""
marathon-discovery - Service discovery over Marathon applications

Resolves logical service ids to the healthy task endpoints of Marathon
applications, carrying application labels as instance metadata.

Subpackages:
    marathon_discovery.marathon - Marathon REST API client and models
    marathon_discovery.discovery - Service id resolution
    marathon_discovery.fastapi - FastAPI integration (optional)
"""

from .config import MarathonSettings
from .discovery.base import DiscoveryClient, ServiceInstance
from .discovery.converter import ServiceIdConverter, to_marathon_id, to_service_id
from .discovery.marathon import MarathonDiscoveryClient
from .exceptions import (
    ApplicationNotFoundError,
    ConfigurationError,
    MarathonDiscoveryError,
    MarathonError,
)
from .health import HealthReport, HealthStatus, MarathonHealthIndicator
from .logging import configure_logging, get_logger
from .marathon.client import HttpMarathonClient, MarathonClient
from .marathon.models import Application, HealthCheckResult, Task

__all__ = [
    # Discovery
    "DiscoveryClient",
    "MarathonDiscoveryClient",
    "ServiceInstance",
    "ServiceIdConverter",
    "to_marathon_id",
    "to_service_id",
    # Marathon
    "MarathonClient",
    "HttpMarathonClient",
    "Application",
    "Task",
    "HealthCheckResult",
    # Configuration
    "MarathonSettings",
    # Exceptions
    "MarathonDiscoveryError",
    "ConfigurationError",
    "MarathonError",
    "ApplicationNotFoundError",
    # Logging
    "configure_logging",
    "get_logger",
    # Health
    "HealthReport",
    "HealthStatus",
    "MarathonHealthIndicator",
]

__version__ = "0.1.0"
