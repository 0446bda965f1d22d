"""
Tests for /api/logistics endpoints

The logistics service is swapped through app.dependency_overrides.

Author: Amzify Team
Date: 2025-11-12
"""
from unittest.mock import MagicMock

from seller_panel.api import logistics
from seller_panel.main import app


class TestLogisticsRoutes:

    def test_foreign_order_shipment_is_404(self, client, seller_headers):
        service = MagicMock()
        service.create_shipment.side_effect = LookupError("Order not found or access denied")
        app.dependency_overrides[logistics.get_logistics_service] = lambda: service

        response = client.post("/api/logistics/shipments", json={"order_id": "order-9"}, headers=seller_headers)

        assert response.status_code == 404

    def test_admin_generates_tracking_for_any_order(self, client, admin_headers):
        service = MagicMock()
        service.assign_tracking_number.return_value = "TRK1731400000000"
        app.dependency_overrides[logistics.get_logistics_service] = lambda: service

        response = client.post("/api/logistics/generate-tracking/order-1", headers=admin_headers)

        assert response.json() == {"success": True, "trackingNumber": "TRK1731400000000", "carrier": "Standard"}
        assert service.assign_tracking_number.call_args.kwargs["seller_id"] is None
