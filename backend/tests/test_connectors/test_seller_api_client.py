"""
Unit tests for SellerApiClient

Requests go through httpx.MockTransport; handlers record what the client sent.

Author: Amzify Team
Date: 2025-11-12
"""
import asyncio
import json

import httpx
import pytest

from seller_panel.connectors.seller_api_client import SellerApiClient, SellerApiError, TokenStore

BASE_URL = "http://api.test/api"


class Recorder:
    """MockTransport handler that replies from a route table and keeps every request"""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes[(request.method, request.url.path)]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(routes, tokens=None):
    recorder = Recorder(routes)
    client = SellerApiClient(base_url=BASE_URL, tokens=tokens, transport=httpx.MockTransport(recorder))
    return client, recorder


def _run(coro_fn):
    """Run coro_fn(client) and close the client afterwards"""
    async def scenario(client):
        async with client:
            return await coro_fn(client)
    return scenario


class TestAuth:

    def test_login_stores_tokens_and_sends_bearer(self):
        client, recorder = _client({
            ("POST", "/api/auth/login"): (200, {"accessToken": "acc-1", "refreshToken": "ref-1", "user": {}}),
            ("GET", "/api/seller/dashboard"): (200, {"stats": {}}),
        })

        async def scenario(c):
            await c.login("seller@amzify.com", "secret123")
            return await c.get_dashboard()

        result = asyncio.run(_run(scenario)(client))

        assert result == {"stats": {}}
        assert json.loads(recorder.requests[0].content) == {"email": "seller@amzify.com", "password": "secret123"}
        assert "Authorization" not in recorder.requests[0].headers
        assert recorder.last.headers["Authorization"] == "Bearer acc-1"
        assert client.tokens.refresh_token == "ref-1"

    def test_registration_without_tokens_keeps_store_empty(self):
        client, _ = _client({
            ("POST", "/api/auth/register/seller"): (201, {"message": "Application submitted", "status": "pending"}),
        })

        asyncio.run(_run(lambda c: c.register({"email": "new@shop.com"}))(client))

        assert client.tokens.access_token is None

    def test_refresh_without_token(self):
        client, recorder = _client({})

        with pytest.raises(SellerApiError) as exc_info:
            asyncio.run(_run(lambda c: c.refresh_token())(client))

        assert exc_info.value.status_code == 401
        assert recorder.requests == []

    def test_refresh_replaces_token_pair(self):
        tokens = TokenStore("old-access", "old-refresh")
        client, recorder = _client(
            {("POST", "/api/auth/refresh"): (200, {"accessToken": "new-access", "refreshToken": "new-refresh"})},
            tokens=tokens,
        )

        asyncio.run(_run(lambda c: c.refresh_token())(client))

        assert json.loads(recorder.last.content) == {"refreshToken": "old-refresh"}
        assert (tokens.access_token, tokens.refresh_token) == ("new-access", "new-refresh")

    def test_logout_clears_tokens_even_when_request_fails(self):
        tokens = TokenStore("acc", "ref")
        client, _ = _client({("POST", "/api/auth/logout"): (500, {"detail": "boom"})}, tokens=tokens)

        with pytest.raises(SellerApiError):
            asyncio.run(_run(lambda c: c.logout())(client))

        assert tokens.access_token is None
        assert tokens.refresh_token is None


class TestErrors:

    @pytest.mark.parametrize("status,body,message", [
        (404, {"detail": "Product not found"}, "Product not found"),
        (400, {"error": "Invalid status", "detail": "ignored"}, "Invalid status"),
        (500, {"something": "else"}, "API request failed"),
        (502, "Bad Gateway", "Bad Gateway"),
    ])
    def test_error_message_from_body(self, status, body, message):
        client, _ = _client({("GET", "/api/orders/order-1"): (status, body)})

        with pytest.raises(SellerApiError) as exc_info:
            asyncio.run(_run(lambda c: c.get_order_details("order-1"))(client))

        assert exc_info.value.status_code == status
        assert exc_info.value.message == message


class TestSellerEndpoints:

    def test_none_params_are_dropped(self):
        client, recorder = _client({("GET", "/api/orders/seller/my-orders"): (200, {"orders": []})})

        asyncio.run(_run(lambda c: c.get_my_orders(status="processing", limit=20))(client))

        assert dict(recorder.last.url.params) == {"status": "processing", "limit": "20"}

    def test_stats_without_range_sends_no_query(self):
        client, recorder = _client({("GET", "/api/analytics/seller/stats"): (200, {})})

        asyncio.run(_run(lambda c: c.get_seller_stats())(client))

        assert recorder.last.url.query == b""

    def test_export_payouts_returns_csv_text(self):
        csv_text = "id,amount,status\npayout-1,1500.0,completed\n"
        client, _ = _client({("GET", "/api/seller/payouts/export"): (200, csv_text)})

        result = asyncio.run(_run(lambda c: c.export_payouts())(client))

        assert result == csv_text

    def test_connect_social_media_payload(self):
        client, recorder = _client({("POST", "/api/seller/social/connect"): (200, {"platform": "instagram"})})

        asyncio.run(_run(lambda c: c.connect_social_media("instagram", {"username": "rao"}))(client))

        assert json.loads(recorder.last.content) == {"platform": "instagram", "credentials": {"username": "rao"}}

    def test_upload_product_images_is_multipart(self):
        client, recorder = _client({("POST", "/api/products/prod-1/images"): (200, {"images": ["a.png"]})})
        files = [("a.png", b"\x89PNG", "image/png")]

        asyncio.run(_run(lambda c: c.upload_product_images("prod-1", files))(client))

        assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="images"' in recorder.last.content
