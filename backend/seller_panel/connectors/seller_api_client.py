"""
Seller API Client
Async client for every endpoint the seller dashboard uses

Author: Amzify Team
Date: 2025-11-11
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from seller_panel.core.config import settings

logger = logging.getLogger(__name__)

# (filename, content, content_type)
UploadFile = Tuple[str, bytes, str]

DEFAULT_TIMEOUT = 30.0


class SellerApiError(Exception):
    """Non-2xx response; message comes from the body's `error` or `detail`"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TokenStore:
    """In-memory holder for the access/refresh token pair"""

    def __init__(self, access_token: Optional[str] = None, refresh_token: Optional[str] = None):
        self.access_token = access_token
        self.refresh_token = refresh_token

    def save(self, access_token: str, refresh_token: Optional[str]) -> None:
        self.access_token = access_token
        self.refresh_token = refresh_token

    def clear(self) -> None:
        self.access_token = None
        self.refresh_token = None


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or "API request failed"

    if isinstance(data, dict):
        message = data.get("error") or data.get("detail")
        if message:
            return message if isinstance(message, str) else str(message)
    return "API request failed"


class SellerApiClient:
    """
    Connector for the Seller Panel REST API

    Handles:
    - Bearer authentication from the token store
    - Token persistence on login, registration and refresh
    - Seller endpoints: analytics, products, orders, profile, revenue,
      marketing, customers, logistics, support, payouts, social media

    Args:
        base_url: API root, defaults to settings.API_URL
        tokens: Token store shared between clients
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        tokens: Optional[TokenStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.tokens = tokens or TokenStore()
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.tokens.access_token:
            headers["Authorization"] = f"Bearer {self.tokens.access_token}"
        return headers

    async def _send(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[List[Tuple[str, UploadFile]]] = None
    ) -> httpx.Response:
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = await self._client.request(
            method, endpoint, json=json, params=params or None, files=files, headers=self._headers()
        )

        if response.is_error:
            message = _error_message(response)
            logger.error(f"{method} {endpoint} failed: {response.status_code} - {message}")
            raise SellerApiError(response.status_code, message)

        return response

    async def request(self, method: str, endpoint: str, **kwargs) -> Any:
        response = await self._send(method, endpoint, **kwargs)
        return response.json()

    def _store_tokens(self, data: Dict[str, Any]) -> None:
        if data.get("accessToken"):
            self.tokens.save(data["accessToken"], data.get("refreshToken"))

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        data = await self.request("POST", "/auth/login", json={"email": email, "password": password})
        self._store_tokens(data)
        return data

    async def register(self, registration: Dict[str, Any]) -> Dict[str, Any]:
        data = await self.request("POST", "/auth/register/seller", json=registration)
        self._store_tokens(data)
        return data

    async def get_current_user(self) -> Dict[str, Any]:
        return await self.request("GET", "/auth/me")

    async def logout(self) -> None:
        try:
            await self.request("POST", "/auth/logout")
        finally:
            self.tokens.clear()

    async def refresh_token(self) -> Dict[str, Any]:
        if not self.tokens.refresh_token:
            raise SellerApiError(401, "No refresh token available")

        data = await self.request("POST", "/auth/refresh", json={"refreshToken": self.tokens.refresh_token})
        self.tokens.save(data["accessToken"], data["refreshToken"])
        return data

    # ------------------------------------------------------------------
    # Dashboard and analytics
    # ------------------------------------------------------------------

    async def get_dashboard(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/dashboard")

    async def get_dashboard_trends(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/dashboard/trends")

    async def get_seller_stats(self, time_range: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("GET", "/analytics/seller/stats", params={"timeRange": time_range})

    async def get_seller_analytics(self, time_range: str = "30d") -> Dict[str, Any]:
        return await self.request("GET", "/analytics/seller", params={"range": time_range})

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def get_my_products(
        self,
        status: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None
    ) -> Dict[str, Any]:
        return await self.request(
            "GET", "/products/seller/my-products", params={"status": status, "page": page, "limit": limit}
        )

    async def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/products", json=product)

    async def update_product(self, product_id: str, product: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", f"/products/{product_id}", json=product)

    async def delete_product(self, product_id: str) -> Dict[str, Any]:
        return await self.request("DELETE", f"/products/{product_id}")

    async def upload_product_images(self, product_id: str, files: List[UploadFile]) -> Dict[str, Any]:
        return await self.request(
            "POST", f"/products/{product_id}/images", files=[("images", f) for f in files]
        )

    async def generate_sku(self, name: str, category: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("POST", "/products/generate-sku", json={"name": name, "category": category})

    async def get_categories(self) -> Dict[str, Any]:
        return await self.request("GET", "/categories")

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def get_my_orders(
        self,
        status: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None
    ) -> Dict[str, Any]:
        return await self.request(
            "GET", "/orders/seller/my-orders", params={"status": status, "page": page, "limit": limit}
        )

    async def get_order_details(self, order_id: str) -> Dict[str, Any]:
        return await self.request("GET", f"/orders/{order_id}")

    async def update_order_status(self, order_id: str, status: str) -> Dict[str, Any]:
        return await self.request("PUT", f"/orders/{order_id}/status", json={"status": status})

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    async def get_seller_profile(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/profile")

    async def update_seller_profile(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", "/seller/profile", json=profile)

    async def upload_profile_image(self, image: UploadFile) -> Dict[str, Any]:
        return await self.request("POST", "/seller/profile/image", files=[("image", image)])

    # ------------------------------------------------------------------
    # Revenue and payouts
    # ------------------------------------------------------------------

    async def get_revenue_data(self, period: str = "month") -> Dict[str, Any]:
        return await self.request("GET", "/seller/revenue", params={"period": period})

    async def get_payout_history(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/payouts")

    async def request_payout(self, amount: float) -> Dict[str, Any]:
        return await self.request("POST", "/seller/payouts/request", json={"amount": amount})

    async def get_financial_summary(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/financial/summary")

    async def export_payouts(self) -> str:
        """Payout history CSV text"""
        response = await self._send("GET", "/seller/payouts/export")
        return response.text

    # ------------------------------------------------------------------
    # Marketing
    # ------------------------------------------------------------------

    async def get_marketing_campaigns(self) -> Dict[str, Any]:
        return await self.request("GET", "/marketing/campaigns")

    async def create_marketing_campaign(self, campaign: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/marketing/campaigns", json=campaign)

    async def update_marketing_campaign(self, campaign_id: str, campaign: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", f"/marketing/campaigns/{campaign_id}", json=campaign)

    async def delete_marketing_campaign(self, campaign_id: str) -> Dict[str, Any]:
        return await self.request("DELETE", f"/marketing/campaigns/{campaign_id}")

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    async def get_my_customers(self) -> Dict[str, Any]:
        return await self.request("GET", "/customers/seller")

    async def get_customer_insights(self) -> Dict[str, Any]:
        return await self.request("GET", "/customers/insights")

    # ------------------------------------------------------------------
    # Logistics
    # ------------------------------------------------------------------

    async def get_my_shipments(self) -> Dict[str, Any]:
        return await self.request("GET", "/logistics/shipments")

    async def create_shipment(self, shipment: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/logistics/shipments", json=shipment)

    async def update_shipment_status(self, shipment_id: str, status: str) -> Dict[str, Any]:
        return await self.request("PUT", f"/logistics/shipments/{shipment_id}/status", json={"status": status})

    # ------------------------------------------------------------------
    # Support
    # ------------------------------------------------------------------

    async def get_support_tickets(self) -> Dict[str, Any]:
        return await self.request("GET", "/support/tickets")

    async def create_support_ticket(self, ticket: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/support/tickets", json=ticket)

    async def update_support_ticket(self, ticket_id: str, message: str) -> Dict[str, Any]:
        return await self.request("POST", f"/support/tickets/{ticket_id}/messages", json={"message": message})

    # ------------------------------------------------------------------
    # Social media
    # ------------------------------------------------------------------

    async def connect_social_media(self, platform: str, credentials: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request(
            "POST", "/seller/social/connect", json={"platform": platform, "credentials": credentials}
        )

    async def disconnect_social_media(self, platform: str) -> Dict[str, Any]:
        return await self.request("DELETE", f"/seller/social/disconnect/{platform}")

    async def get_social_media_stats(self) -> Dict[str, Any]:
        return await self.request("GET", "/seller/social/stats")

    async def post_to_social_media(self, platforms: List[str], content: str) -> Dict[str, Any]:
        return await self.request(
            "POST", "/seller/social/post", json={"platforms": platforms, "content": content}
        )
