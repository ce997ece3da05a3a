"""
Plan Catalog for the autoscaler broker

Loads the static catalog of services and their plans, and answers plan
limit lookups. The catalog is built once at startup and never mutated.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from autoscaler_broker.core.config import Settings
from autoscaler_broker.core.exceptions import CatalogError, CatalogNotFoundError
from autoscaler_broker.plans.types import CatalogDocument

logger = logging.getLogger(__name__)

IDENTITY_KEYS = ("id", "name", "description")


def _get_data_path(filename: str) -> Path:
    """Get path to a bundled plans data file"""
    return Path(__file__).parent / "data" / filename


@dataclass(frozen=True)
class ServicePlan:
    """A plan and its numeric policy limits"""

    id: str
    name: str = ""
    description: str = ""
    limits: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def get_limit(self, limit_key: str) -> int | None:
        """Return the limit under limit_key, or None unless it is a well-formed integer"""
        value = self.limits.get(limit_key)
        # bool is a subclass of int but is never a usable limit
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description:
            data["description"] = self.description
        data.update(self.limits)
        return data


@dataclass(frozen=True)
class CatalogService:
    """A catalog service offering one or more plans"""

    id: str
    name: str = ""
    description: str = ""
    plans: tuple[ServicePlan, ...] = ()

    def get_plan(self, plan_id: str) -> ServicePlan | None:
        for plan in self.plans:
            if plan.id == plan_id:
                return plan
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description:
            data["description"] = self.description
        data["plans"] = [plan.to_dict() for plan in self.plans]
        return data


def _require_id(entry: Any, kind: str) -> str:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog {kind} entry must be an object", {"entry": entry})
    entry_id = entry.get("id")
    if not isinstance(entry_id, str) or not entry_id:
        raise CatalogError(f"Catalog {kind} entry is missing an id", {"entry": entry})
    return entry_id


def _build_plan(entry: Any) -> ServicePlan:
    plan_id = _require_id(entry, "plan")
    limits = {k: v for k, v in entry.items() if k not in IDENTITY_KEYS}
    return ServicePlan(
        id=plan_id,
        name=entry.get("name", ""),
        description=entry.get("description", ""),
        limits=MappingProxyType(limits),
    )


def _build_service(entry: Any) -> CatalogService:
    service_id = _require_id(entry, "service")
    plans = entry.get("plans") or []
    if not isinstance(plans, list):
        raise CatalogError(f"Plans of service '{service_id}' must be a list", {"service_id": service_id})
    return CatalogService(
        id=service_id,
        name=entry.get("name", ""),
        description=entry.get("description", ""),
        plans=tuple(_build_plan(p) for p in plans),
    )


@dataclass(frozen=True)
class PlanCatalog:
    """
    Read-only registry of services and plans

    Lookups are linear scans; the catalog is small and identifiers are
    assumed unique.
    """

    services: tuple[CatalogService, ...] = ()

    @classmethod
    def from_dict(cls, data: CatalogDocument | Any) -> "PlanCatalog":
        """
        Build a catalog from parsed catalog JSON

        Raises:
            CatalogError: If the payload does not have the catalog shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("services"), list):
            raise CatalogError("Catalog must be an object with a 'services' list")
        return cls(services=tuple(_build_service(s) for s in data["services"]))

    @classmethod
    def from_file(cls, path: Path) -> "PlanCatalog":
        """
        Load a catalog from a JSON file

        Raises:
            CatalogNotFoundError: If the file does not exist
            CatalogError: If the file is not valid catalog JSON
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Catalog file not found: {path}")
            raise CatalogNotFoundError(str(path))
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing catalog file: {e}")
            raise CatalogError(f"Invalid catalog JSON in {path}: {e}", {"path": str(path)}) from e

        catalog = cls.from_dict(data)
        logger.info(
            "Loaded plan catalog from %s (%d services, %d plans)",
            path,
            len(catalog.services),
            catalog.plan_count,
        )
        return catalog

    @property
    def plan_count(self) -> int:
        return sum(len(s.plans) for s in self.services)

    def get_service(self, service_id: str) -> CatalogService | None:
        """
        Get a service by ID

        Args:
            service_id: Service ID (e.g., "autoscaler-guid")

        Returns:
            CatalogService or None if not found
        """
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def get_plan(self, service_id: str, plan_id: str) -> ServicePlan | None:
        """Get a plan of a service, or None if either is unknown"""
        service = self.get_service(service_id)
        if service is None:
            return None
        return service.get_plan(plan_id)

    def lookup_limit(self, service_id: str, plan_id: str, limit_key: str) -> int | None:
        """
        Look up a plan limit

        Never raises. Unknown services, unknown plans, missing keys and
        non-integer values all yield None, meaning no limit is configured.

        Args:
            service_id: Service ID
            plan_id: Plan ID
            limit_key: Limit key name (see PlanLimitKeys)

        Returns:
            The configured integer limit, or None
        """
        plan = self.get_plan(service_id, plan_id)
        if plan is None:
            return None
        return plan.get_limit(limit_key)

    def to_dict(self) -> dict[str, Any]:
        """Render the catalog back into catalog JSON shape"""
        return {"services": [s.to_dict() for s in self.services]}


def load_plan_catalog(settings: Settings | None = None) -> PlanCatalog:
    """Load the catalog named by settings, falling back to the bundled catalog"""
    if settings is not None and settings.catalog_path is not None:
        return PlanCatalog.from_file(settings.catalog_path)
    return PlanCatalog.from_file(_get_data_path("catalog.json"))
