"""
FastAPI application factory

Wires the plan catalog, validator and API server client onto app.state
so request handlers receive them through dependencies.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from autoscaler_broker import __version__
from autoscaler_broker.api.middleware.plan_validation import ValidationStep
from autoscaler_broker.api.routers import bindings, health
from autoscaler_broker.api.routers import catalog as catalog_router
from autoscaler_broker.core.apiserver import ApiServerClient
from autoscaler_broker.core.config import Settings, get_settings
from autoscaler_broker.core.exceptions import PolicyLimitExceededError, PolicyPersistenceError
from autoscaler_broker.core.logging import configure_logging
from autoscaler_broker.plans.catalog import PlanCatalog, load_plan_catalog
from autoscaler_broker.plans.validator import PolicyValidator

logger = logging.getLogger(__name__)


async def policy_limit_exceeded_handler(request: Request, exc: PolicyLimitExceededError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "PolicyLimitExceeded",
            "description": exc.message,
            "violations": [v.model_dump() for v in exc.violations],
        },
    )


async def policy_persistence_handler(request: Request, exc: PolicyPersistenceError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "PolicyPersistenceFailed", "description": exc.message},
    )


def create_app(
    catalog: PlanCatalog | None = None,
    settings: Settings | None = None,
    apiserver: ApiServerClient | None = None,
) -> FastAPI:
    """
    Build the broker application

    Args:
        catalog: Plan catalog to validate against; loaded from settings if None
        settings: Broker settings; read from the environment if None
        apiserver: API server client; built from settings if None
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if catalog is None:
        catalog = load_plan_catalog(settings)
    if apiserver is None:
        apiserver = ApiServerClient(settings.apiserver_uri, timeout=settings.apiserver_timeout)

    app = FastAPI(title="Autoscaler Service Broker", version=__version__)
    app.state.settings = settings
    app.state.plan_catalog = catalog
    app.state.validation_step = ValidationStep(PolicyValidator(catalog))
    app.state.apiserver = apiserver

    app.add_exception_handler(PolicyLimitExceededError, policy_limit_exceeded_handler)
    app.add_exception_handler(PolicyPersistenceError, policy_persistence_handler)

    app.include_router(health.router)
    app.include_router(catalog_router.router)
    app.include_router(bindings.router)

    logger.info(f"Autoscaler broker {__version__} ready ({catalog.plan_count} plans)")
    return app


app = create_app()
