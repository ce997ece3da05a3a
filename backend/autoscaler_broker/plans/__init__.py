"""
Plan module for the autoscaler broker

This module provides functionality to:
- Load the static catalog of services and plans
- Look up per-plan policy limits
- Validate policy documents against those limits
"""

from autoscaler_broker.plans.catalog import (
    CatalogService,
    PlanCatalog,
    ServicePlan,
    load_plan_catalog,
)
from autoscaler_broker.plans.validator import PolicyValidator, ViolationRecord

__all__ = [
    # Catalog
    "CatalogService",
    "PlanCatalog",
    "ServicePlan",
    "load_plan_catalog",
    # Validation
    "PolicyValidator",
    "ViolationRecord",
]
