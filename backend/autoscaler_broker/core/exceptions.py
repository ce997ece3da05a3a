"""
Custom exceptions for the autoscaler broker

Provides a hierarchy of exceptions for better error handling and
consistent error responses across the broker.
"""

from typing import Any


class BrokerError(Exception):
    """Base exception for all broker errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CatalogError(BrokerError):
    """Errors related to the plan catalog"""

    pass


class CatalogNotFoundError(CatalogError):
    """Raised when the catalog file is not found"""

    def __init__(self, path: str):
        super().__init__(
            f"Catalog file not found: {path}",
            {"path": path},
        )


class ConfigurationError(BrokerError):
    """Raised when the broker is wired up incorrectly"""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)


class PolicyLimitExceededError(BrokerError):
    """Raised when a policy exceeds one or more limits of its plan"""

    def __init__(self, violations: list[Any]):
        self.violations = list(violations)
        super().__init__(
            "Policy exceeds the limits of the service plan",
            {"violations": [v.model_dump() for v in self.violations]},
        )


class PolicyPersistenceError(BrokerError):
    """Raised when the API server refuses or fails to store a policy"""

    def __init__(self, app_id: str, status_code: int | None = None, reason: str | None = None):
        self.app_id = app_id
        self.status_code = status_code
        message = f"Failed to store policy for app '{app_id}'"
        if status_code is not None:
            message += f" (status {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message, {"app_id": app_id, "status_code": status_code})
