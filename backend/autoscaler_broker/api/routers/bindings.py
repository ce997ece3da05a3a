"""
Service Binding API Router

Binding an application attaches its autoscaling policy. The policy is
checked against the plan limits before it is forwarded to the API server.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from autoscaler_broker.api.middleware.plan_validation import (
    PlanValidationRequest,
    ValidationStep,
    enforce_plan_limits,
    get_validation_step,
)
from autoscaler_broker.api.routers.models import BindingRequest, PolicyLimitErrorResponse
from autoscaler_broker.core.apiserver import ApiServerClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v2", tags=["Service Bindings"])


def get_apiserver_client(request: Request) -> ApiServerClient:
    """FastAPI dependency returning the API server client attached to the app"""
    return request.app.state.apiserver


@router.put(
    "/service_instances/{instance_id}/service_bindings/{binding_id}",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": PolicyLimitErrorResponse}},
)
async def create_service_binding(
    instance_id: str,
    binding_id: str,
    request: BindingRequest,
    step: ValidationStep = Depends(get_validation_step),
    apiserver: ApiServerClient = Depends(get_apiserver_client),
):
    """
    Create a service binding

    Rejects the binding with 400 if the policy exceeds the plan limits.
    """
    enforce_plan_limits(
        step,
        PlanValidationRequest(
            policy=request.parameters,
            service_id=request.service_id,
            plan_id=request.plan_id,
            app_id=request.app_guid,
        ),
    )

    if request.parameters:
        await apiserver.put_policy(request.app_guid, request.parameters)
    else:
        logger.info(f"Binding {binding_id} created without a policy for app {request.app_guid}")

    logger.info(f"Bound app {request.app_guid} to service instance {instance_id} ({binding_id})")
    return {}
