"""
Pytest configuration and shared fixtures.

Global fixtures (available to all test modules):
  - catalog_path   : path to the bundled catalog.json
  - plan_catalog   : PlanCatalog loaded from the bundled catalog
  - fake_policy    : policy that exceeds every free-plan limit (2/2/2)
  - free_plan / standard_plan : (service_id, plan_id) pairs from the bundled catalog
"""

import copy
import json
import sys
from pathlib import Path

import pytest

# Add the backend directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from autoscaler_broker.core.config import reset_settings  # noqa: E402
from autoscaler_broker.plans.catalog import PlanCatalog  # noqa: E402

SERVICE_ID = "autoscaler-guid"
FREE_PLAN_ID = "autoscaler-free-plan-id"
STANDARD_PLAN_ID = "autoscaler-standard-plan-id"

_FAKE_POLICY = json.loads(
    (Path(__file__).parent / "fixtures" / "fake_policy.json").read_text(encoding="utf-8")
)


@pytest.fixture
def catalog_path():
    """Return the path to the bundled catalog.json file."""
    return Path(__file__).parent.parent / "autoscaler_broker" / "plans" / "data" / "catalog.json"


@pytest.fixture
def plan_catalog(catalog_path):
    """Return the bundled plan catalog."""
    return PlanCatalog.from_file(catalog_path)


@pytest.fixture
def fake_policy():
    """Return a fresh copy of the fake policy (tests may mutate it)."""
    return copy.deepcopy(_FAKE_POLICY)


@pytest.fixture
def free_plan():
    return SERVICE_ID, FREE_PLAN_ID


@pytest.fixture
def standard_plan():
    return SERVICE_ID, STANDARD_PLAN_ID


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep the settings singleton from leaking between tests."""
    reset_settings()
    yield
    reset_settings()
