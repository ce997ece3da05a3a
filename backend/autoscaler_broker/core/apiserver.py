"""
API server client

Forwards validated policies to the autoscaler API server, which owns
policy persistence.
"""

import logging
from typing import Any

import httpx

from autoscaler_broker.core.exceptions import PolicyPersistenceError

logger = logging.getLogger(__name__)


class ApiServerClient:
    """
    Thin async client for the policy endpoints of the API server

    A custom transport can be supplied (e.g. httpx.MockTransport in tests).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def put_policy(self, app_id: str, policy: dict[str, Any]) -> int:
        """
        Store a policy for an application

        Args:
            app_id: Application GUID the policy is attached to
            policy: Validated policy document

        Returns:
            HTTP status code of the API server response

        Raises:
            PolicyPersistenceError: On a non-2xx reply or a transport failure
        """
        try:
            async with self._client() as client:
                response = await client.put(f"/v1/policies/{app_id}", json=policy)
        except httpx.HTTPError as e:
            logger.error("API server unreachable while storing policy for %s: %s", app_id, e)
            raise PolicyPersistenceError(app_id, reason=str(e)) from e

        if not response.is_success:
            logger.error(
                "API server rejected policy for %s with status %s", app_id, response.status_code
            )
            raise PolicyPersistenceError(app_id, status_code=response.status_code)

        logger.info(f"Policy stored for app {app_id} (status {response.status_code})")
        return response.status_code
