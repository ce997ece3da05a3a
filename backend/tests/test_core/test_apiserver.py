"""
Tests for autoscaler_broker/core/apiserver.py

API server traffic is served by httpx.MockTransport.
"""

import json

import httpx
import pytest

from autoscaler_broker.core.apiserver import ApiServerClient
from autoscaler_broker.core.exceptions import PolicyPersistenceError


def _client(handler) -> ApiServerClient:
    return ApiServerClient("http://apiserver.test", transport=httpx.MockTransport(handler))


class TestPutPolicy:
    """Tests for ApiServerClient.put_policy()."""

    @pytest.mark.asyncio
    async def test_sends_policy_to_app_path(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"success": True, "error": None, "result": "created"})

        status = await _client(handler).put_policy("app-123", {"instance_min_count": 1})

        assert status == 201
        assert seen == {
            "method": "PUT",
            "path": "/v1/policies/app-123",
            "body": {"instance_min_count": 1},
        }

    @pytest.mark.asyncio
    async def test_update_status_is_success(self):
        status = await _client(lambda request: httpx.Response(200)).put_policy("app-123", {})
        assert status == 200

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        with pytest.raises(PolicyPersistenceError) as exc_info:
            await _client(lambda request: httpx.Response(500)).put_policy("app-123", {})

        assert exc_info.value.status_code == 500
        assert exc_info.value.app_id == "app-123"

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(PolicyPersistenceError) as exc_info:
            await _client(handler).put_policy("app-123", {})

        assert exc_info.value.status_code is None
        assert "connection refused" in exc_info.value.message

    def test_base_url_trailing_slash_stripped(self):
        assert ApiServerClient("http://apiserver.test/").base_url == "http://apiserver.test"
