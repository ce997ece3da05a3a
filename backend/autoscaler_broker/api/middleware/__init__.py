"""
API Middleware Package

Request-pipeline steps that run ahead of the route handlers.
"""

from autoscaler_broker.api.middleware.plan_validation import (
    PlanValidationRequest,
    ValidationOutcome,
    ValidationStep,
    enforce_plan_limits,
    get_validation_step,
)

__all__ = [
    "PlanValidationRequest",
    "ValidationOutcome",
    "ValidationStep",
    "enforce_plan_limits",
    "get_validation_step",
]
