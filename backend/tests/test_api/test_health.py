"""
Tests for health check API endpoints
"""

import asyncio
from unittest.mock import MagicMock

from fastapi import Response
from fastapi.testclient import TestClient

from autoscaler_broker.api.app import create_app
from autoscaler_broker.core.config import Settings


class TestLiveness:
    """Test liveness endpoint"""

    def test_liveness_always_alive(self):
        from autoscaler_broker.api.routers.health import liveness_probe

        assert asyncio.run(liveness_probe()) == {"status": "alive"}


class TestReadiness:
    """Test readiness endpoint"""

    def test_ready_with_catalog(self, plan_catalog):
        client = TestClient(create_app(catalog=plan_catalog, settings=Settings()))

        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["ready"] is True
        assert body["services"] == 1
        assert body["plans"] == 2

    def test_not_ready_without_catalog(self):
        from autoscaler_broker.api.routers.health import readiness_probe

        request = MagicMock()
        request.app.state = MagicMock(spec=[])
        response = Response()

        result = asyncio.run(readiness_probe(request, response))

        assert response.status_code == 503
        assert result["ready"] is False
