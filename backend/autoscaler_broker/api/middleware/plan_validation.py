"""
Plan Validation Step

Runs plan limit validation for an inbound request and decides whether
processing continues or fails with the collected violations.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request

from autoscaler_broker.core.exceptions import ConfigurationError, PolicyLimitExceededError
from autoscaler_broker.plans.types import PolicyDocument
from autoscaler_broker.plans.validator import PolicyValidator, ViolationRecord

logger = logging.getLogger(__name__)


@dataclass
class PlanValidationRequest:
    """The fields of a request that plan validation needs"""
    policy: PolicyDocument | None
    service_id: str
    plan_id: str
    app_id: str | None = None

    def log_context(self) -> dict[str, Any]:
        return {"app_id": self.app_id, "service_id": self.service_id, "plan_id": self.plan_id}


@dataclass
class ValidationOutcome:
    """Result of a validation step: continue, or fail with violations"""
    passed: bool
    violations: list[ViolationRecord] = field(default_factory=list)

    @classmethod
    def proceed(cls) -> "ValidationOutcome":
        return cls(passed=True)

    @classmethod
    def fail(cls, violations: list[ViolationRecord]) -> "ValidationOutcome":
        return cls(passed=False, violations=list(violations))


class ValidationStep:
    """Adapter between the request pipeline and PolicyValidator"""

    def __init__(self, validator: PolicyValidator):
        self.validator = validator

    def handle(self, request: PlanValidationRequest) -> ValidationOutcome:
        """
        Validate a request against its plan

        Returns:
            ValidationOutcome.proceed() when within limits,
            ValidationOutcome.fail(violations) otherwise
        """
        violations = self.validator.validate(request.policy, request.service_id, request.plan_id)
        context = request.log_context()

        if violations:
            logger.error(
                "Input policy exceeds the limits of the service plan: %s, violations=%s",
                context,
                [v.model_dump() for v in violations],
            )
            return ValidationOutcome.fail(violations)

        logger.info("Input policy is valid as per plan: %s", context)
        return ValidationOutcome.proceed()

    def dispatch(
        self,
        request: PlanValidationRequest,
        proceed: Callable[[list[ViolationRecord] | None], Any] | None,
    ) -> Any:
        """
        Continuation-style entry point for pipeline hooks

        Calls proceed(None) on success and proceed(violations) on failure.
        A missing continuation is logged as a configuration error and the
        request is not validated.
        """
        if proceed is None:
            error = ConfigurationError("No continuation supplied to plan validation", field="proceed")
            logger.error("%s: %s", error.message, request.log_context())
            return None

        outcome = self.handle(request)
        return proceed(None if outcome.passed else outcome.violations)


def get_validation_step(request: Request) -> ValidationStep:
    """FastAPI dependency returning the ValidationStep attached to the app"""
    return request.app.state.validation_step


def enforce_plan_limits(
    step: ValidationStep,
    validation_request: PlanValidationRequest,
) -> None:
    """
    Run the validation step, raising on failure

    Raises:
        PolicyLimitExceededError: If any plan limit is exceeded; the app's
            exception handler renders it as an error response
    """
    outcome = step.handle(validation_request)
    if not outcome.passed:
        raise PolicyLimitExceededError(outcome.violations)


__all__ = [
    "PlanValidationRequest",
    "ValidationOutcome",
    "ValidationStep",
    "enforce_plan_limits",
    "get_validation_step",
]
