"""
Policy validation against plan limits

Counts the recurring schedules, specific-date schedules and scaling rules
of a policy document and compares each count with the limit configured
for the service plan.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from autoscaler_broker.core.validation_limits import PlanLimitKeys
from autoscaler_broker.plans.catalog import PlanCatalog
from autoscaler_broker.plans.types import PolicyDocument

logger = logging.getLogger(__name__)

RECURRING_SCHEDULE_MESSAGE = "policy exceeded recurring_schedule as per plan of service"
SPECIFIC_DATE_MESSAGE = "policy exceeded specific_date as per plan of service"
SCALING_RULES_MESSAGE = "policy exceeded scaling rules as per plan of service"


class ViolationRecord(BaseModel):
    """One breached plan limit"""

    model_config = ConfigDict(frozen=True)

    property: str
    message: str
    plan_id: str
    service_id: str


def _as_list(value: Any) -> list | None:
    """Return value if it is a JSON array, otherwise None (treated as absent)"""
    return value if isinstance(value, list) else None


class PolicyValidator:
    """Checks a policy document against the limits of a service plan"""

    def __init__(self, catalog: PlanCatalog):
        self.catalog = catalog

    def _exceeds(self, items: list | None, service_id: str, plan_id: str, limit_key: str) -> bool:
        if items is None:
            return False
        limit = self.catalog.lookup_limit(service_id, plan_id, limit_key)
        if limit is None:
            return False
        return len(items) > limit

    def validate(
        self, policy: PolicyDocument | None, service_id: str, plan_id: str
    ) -> list[ViolationRecord]:
        """
        Validate a policy against its plan

        All three checks always run, so several violations can be reported
        by a single call. Order is fixed: recurring_schedule, specific_date,
        scaling_rules.

        Args:
            policy: Policy document (may be None)
            service_id: Catalog service ID
            plan_id: Catalog plan ID

        Returns:
            List of violations; empty when the policy is within limits
        """
        policy = policy if isinstance(policy, dict) else {}
        schedules = policy.get("schedules")
        if not isinstance(schedules, dict):
            schedules = {}

        checks = (
            (
                "schedules.recurring_schedule",
                _as_list(schedules.get("recurring_schedule")),
                PlanLimitKeys.RECURRING_SCHEDULE_COUNT,
                RECURRING_SCHEDULE_MESSAGE,
            ),
            (
                "schedules.specific_date",
                _as_list(schedules.get("specific_date")),
                PlanLimitKeys.SPECIFIC_DATE_COUNT,
                SPECIFIC_DATE_MESSAGE,
            ),
            (
                "scaling_rules",
                _as_list(policy.get("scaling_rules")),
                PlanLimitKeys.SCALING_RULES_COUNT,
                SCALING_RULES_MESSAGE,
            ),
        )

        violations: list[ViolationRecord] = []
        for prop, items, limit_key, message in checks:
            if self._exceeds(items, service_id, plan_id, limit_key):
                violations.append(
                    ViolationRecord(
                        property=prop,
                        message=message,
                        plan_id=plan_id,
                        service_id=service_id,
                    )
                )

        if violations:
            logger.debug(f"{len(violations)} plan limit violation(s) for plan {plan_id}")
        return violations
