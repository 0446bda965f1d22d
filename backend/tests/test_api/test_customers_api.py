"""
Tests for /api/customers endpoints

The customer analytics service is swapped through app.dependency_overrides.

Author: Amzify Team
Date: 2025-11-12
"""
from unittest.mock import MagicMock

from seller_panel.api import customers
from seller_panel.main import app


def _override(provider):
    service = MagicMock()
    app.dependency_overrides[provider] = lambda: service
    return service


class TestCustomers:

    def test_list_passes_filters(self, client, seller_headers):
        service = _override(customers.get_customer_service)
        service.list_customers.return_value = {"customers": [], "total": 0}

        response = client.get(
            "/api/customers/list?segment=VIP&search=asha&startDate=2025-11-01T00:00:00", headers=seller_headers
        )

        assert response.status_code == 200
        kwargs = service.list_customers.call_args.kwargs
        assert kwargs["segment"] == "VIP"
        assert kwargs["search"] == "asha"
        assert kwargs["start_date"].day == 1

    def test_unknown_customer_is_404(self, client, seller_headers):
        service = _override(customers.get_customer_service)
        service.get_profile.return_value = None

        assert client.get("/api/customers/customer-9", headers=seller_headers).status_code == 404
        service.get_profile.assert_called_once_with("seller-1", "customer-9")

    def test_activity_of_unrelated_customer_is_404(self, client, seller_headers):
        # Arrange
        service = _override(customers.get_customer_service)
        service.get_activity.return_value = None

        # Act
        response = client.get("/api/customers/customer-9/activity", headers=seller_headers)

        # Assert
        assert response.status_code == 404
        assert response.json()["detail"] == "Customer not found"
        service.get_activity.assert_called_once_with("seller-1", "customer-9")

    def test_activity_for_own_customer(self, client, seller_headers):
        service = _override(customers.get_customer_service)
        service.get_activity.return_value = []

        response = client.get("/api/customers/customer-9/activity", headers=seller_headers)

        assert response.status_code == 200
        assert response.json() == {"activities": []}

    def test_repeat_customers_export(self, client, seller_headers):
        service = _override(customers.get_customer_service)
        service.export_repeat_customers.return_value = "Name,Email\n"

        response = client.get("/api/customers/export/repeat-customers", headers=seller_headers)

        assert "repeat_customers_" in response.headers["content-disposition"]
