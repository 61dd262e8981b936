"""
FastAPI integration for marathon-discovery.

Example:
    from fastapi import FastAPI
    from marathon_discovery.discovery import MarathonDiscoveryClient
    from marathon_discovery.fastapi import create_discovery_router

    discovery = MarathonDiscoveryClient.from_settings()

    app = FastAPI()
    app.include_router(create_discovery_router(discovery, prefix="/discovery"))
"""

from marathon_discovery._imports import require_optional_dependency

# Check for FastAPI dependency at import time
require_optional_dependency("fastapi", "marathon_discovery.fastapi", "fastapi")

from .router import create_discovery_router  # noqa: E402

__all__ = ["create_discovery_router"]
