"""
Type definitions for the plan catalog and policy documents

Provides TypedDict definitions for better type hints and IDE support.
"""

from typing import Any, TypedDict


class PlanEntry(TypedDict, total=False):
    """A plan as it appears in catalog JSON"""

    id: str
    name: str
    description: str
    recurring_schedule_count: int
    specific_date_count: int
    scaling_rules_count: int


class ServiceEntry(TypedDict, total=False):
    """A service as it appears in catalog JSON"""

    id: str
    name: str
    description: str
    plans: list[PlanEntry]


class CatalogDocument(TypedDict):
    """Top-level catalog JSON"""

    services: list[ServiceEntry]


class PolicySchedules(TypedDict, total=False):
    """The schedules section of a policy document"""

    timezone: str
    recurring_schedule: list[dict[str, Any]] | None
    specific_date: list[dict[str, Any]] | None


class PolicyDocument(TypedDict, total=False):
    """Autoscaling policy as submitted by a client"""

    instance_min_count: int
    instance_max_count: int
    scaling_rules: list[dict[str, Any]] | None
    schedules: PolicySchedules | None
