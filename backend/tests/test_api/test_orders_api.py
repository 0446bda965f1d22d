"""
Tests for /api/orders endpoints

Author: Amzify Team
Date: 2025-11-12
"""
from unittest.mock import patch

import pytest


@pytest.fixture
def order_repo():
    with patch('seller_panel.api.orders.OrderRepository') as mock_repo_class:
        yield mock_repo_class.return_value


class TestSellerOrders:

    def test_my_orders_paginates(self, client, order_repo, seller_headers, sample_order):
        order_repo.find_by_seller.return_value = ([sample_order], 11)

        response = client.get("/api/orders/seller/my-orders?page=2&limit=10", headers=seller_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["pagination"]["pages"] == 2
        assert data["orders"][0]["my_total"] == 2499.0
        assert order_repo.find_by_seller.call_args.kwargs["offset"] == 10

    def test_order_of_other_seller_is_404(self, client, order_repo, seller_headers):
        order_repo.find_by_id_for_seller.return_value = None

        response = client.get("/api/orders/order-9", headers=seller_headers)

        assert response.status_code == 404
        order_repo.find_by_id_for_seller.assert_called_once_with("order-9", "seller-1")


class TestOrderStatus:

    def test_seller_updates_own_order(self, client, order_repo, seller_headers):
        order_repo.seller_owns_items.return_value = True
        order_repo.update_status.return_value = {"id": "order-1", "order_number": "ORD-1", "status": "shipped"}

        response = client.put("/api/orders/order-1/status", json={"status": "shipped"}, headers=seller_headers)

        assert response.status_code == 200
        assert response.json()["order"]["status"] == "shipped"
        order_repo.update_status.assert_called_once_with("order-1", "shipped")

    def test_seller_cannot_touch_foreign_order(self, client, order_repo, seller_headers):
        order_repo.seller_owns_items.return_value = False

        response = client.patch("/api/orders/order-9/status", json={"status": "shipped"}, headers=seller_headers)

        assert response.status_code == 404
        order_repo.update_status.assert_not_called()

    def test_admin_skips_ownership_check(self, client, order_repo, admin_headers):
        order_repo.update_status.return_value = {"id": "order-1", "order_number": "ORD-1", "status": "delivered"}

        response = client.patch("/api/orders/order-1/status", json={"status": "delivered"}, headers=admin_headers)

        assert response.status_code == 200
        order_repo.seller_owns_items.assert_not_called()

    def test_unknown_status_is_422(self, client, order_repo, seller_headers):
        response = client.put("/api/orders/order-1/status", json={"status": "lost"}, headers=seller_headers)

        assert response.status_code == 422

    def test_customer_cannot_update_status(self, client, order_repo, customer_headers):
        response = client.put("/api/orders/order-1/status", json={"status": "shipped"}, headers=customer_headers)

        assert response.status_code == 403
