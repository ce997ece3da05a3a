"""
Catalog API Router

Exposes the services and plans the broker offers.
"""

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(prefix="/v2", tags=["Catalog"])


@router.get("/catalog")
async def get_catalog(request: Request) -> dict[str, Any]:
    """Return the plan catalog in catalog JSON shape"""
    return request.app.state.plan_catalog.to_dict()
