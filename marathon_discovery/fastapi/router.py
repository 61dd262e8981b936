"""
FastAPI router exposing a discovery client over HTTP.

Endpoints are read-only and mirror the DiscoveryClient operations.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..discovery.base import DiscoveryClient
from ..health import MarathonHealthIndicator


def create_discovery_router(discovery: DiscoveryClient, prefix: str = "") -> APIRouter:
    """
    Build a router over a discovery client.

    Args:
        discovery: Client used to answer every request.
        prefix: Path prefix for all routes (e.g., "/discovery").

    Returns:
        Router with /services, /services/{service_id}/instances and /health.

    Example:
        from fastapi import FastAPI

        app = FastAPI()
        app.include_router(create_discovery_router(discovery, prefix="/discovery"))
    """
    router = APIRouter(prefix=prefix, tags=["discovery"])
    indicator = MarathonHealthIndicator(discovery)

    @router.get("/services")
    async def list_services() -> dict[str, Any]:
        return {"services": await discovery.list_services()}

    @router.get("/services/{service_id}/instances")
    async def get_instances(service_id: str) -> dict[str, Any]:
        instances = await discovery.resolve(service_id)
        return {
            "service_id": service_id,
            "instances": [instance.to_dict() for instance in instances],
        }

    @router.get("/health")
    async def health() -> JSONResponse:
        report = await indicator.check()
        return JSONResponse(
            content=report.to_dict(),
            status_code=200 if report.is_up else 503,
        )

    return router
