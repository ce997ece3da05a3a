"""
Health check endpoints

Provides Kubernetes-style health check endpoints:
- GET /health/live - Liveness probe (always 200 if running)
- GET /health/ready - Readiness probe (200 if a plan catalog is wired onto the app, 503 if not)

create_app() refuses to start without a catalog, so the 503 branch only
fires for apps assembled without create_app().
"""

import logging
from typing import Any

from fastapi import APIRouter, Request, Response

from autoscaler_broker import __version__

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live")
async def liveness_probe() -> dict[str, str]:
    """
    Liveness probe (Kubernetes-style)

    Always returns 200 if the application is running.
    """
    return {"status": "alive"}


@router.get("/ready")
async def readiness_probe(request: Request, response: Response) -> dict[str, Any]:
    """
    Readiness probe (Kubernetes-style)

    Returns:
        200: Plan catalog is loaded and requests can be validated
        503: No plan catalog is attached to app.state (wiring error)
    """
    catalog = getattr(request.app.state, "plan_catalog", None)

    if catalog is None:
        logger.warning("Readiness check failed: no plan catalog loaded")
        response.status_code = 503
        return {"ready": False, "version": __version__}

    return {
        "ready": True,
        "version": __version__,
        "services": len(catalog.services),
        "plans": catalog.plan_count,
    }
