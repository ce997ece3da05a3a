"""
Shared Pydantic models for API routers

Centralized model definitions to avoid duplication across routers.
"""

from typing import Any

from pydantic import BaseModel, Field

from autoscaler_broker.plans.validator import ViolationRecord


class BindingRequest(BaseModel):
    """Request to bind an application to a service instance"""

    app_guid: str = Field(..., min_length=1, description="GUID of the application being bound")
    service_id: str = Field(..., min_length=1, description="Catalog service ID")
    plan_id: str = Field(..., min_length=1, description="Catalog plan ID")
    parameters: dict[str, Any] | None = Field(default=None, description="Autoscaling policy document")


class ErrorResponse(BaseModel):
    """Error body returned by the broker"""

    error: str
    description: str


class PolicyLimitErrorResponse(ErrorResponse):
    """Error body for a policy that exceeds its plan limits"""

    violations: list[ViolationRecord] = []
