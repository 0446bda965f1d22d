"""
Pytest fixtures and configuration for Seller Panel backend tests

Nothing here needs a database: repositories are exercised against
MagicMock connections and the API against patched repositories.

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from seller_panel.core.auth import create_access_token
from seller_panel.core.rate_limit import rate_limiter
from seller_panel.domain.order import Order, OrderItem
from seller_panel.domain.product import Product

SELLER_ID = "seller-1"
ADMIN_ID = "admin-1"


@pytest.fixture
def fake_db():
    """
    Provides a (connection, cursor) pair of MagicMocks

    Wire it in with `mock_get_conn.return_value = conn`.
    """
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    return conn, cursor


@pytest.fixture
def client():
    """
    TestClient over the full app

    Rate limiter state and dependency overrides are reset around each test.
    """
    from seller_panel.main import app

    rate_limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    rate_limiter.reset()


def _headers(user_id: str, role: str) -> dict:
    token = create_access_token({"id": user_id, "email": f"{user_id}@example.com", "role": role, "name": "Test"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seller_headers():
    return _headers(SELLER_ID, "seller")


@pytest.fixture
def admin_headers():
    return _headers(ADMIN_ID, "admin")


@pytest.fixture
def customer_headers():
    return _headers("customer-1", "customer")


@pytest.fixture
def sample_product():
    return Product(
        id="prod-1",
        seller_id=SELLER_ID,
        category_id="cat-1",
        category_name="Electronics",
        name="Wireless Headphones",
        slug="wireless-headphones-1731400000000",
        price=Decimal("2499.00"),
        compare_price=Decimal("2999.00"),
        cost_price=Decimal("1500.00"),
        stock_quantity=25,
        sku="ELE-WIR-7K2Q9D",
        images=["https://cdn.example.com/p1.jpg"],
        status="active",
        created_at=datetime(2025, 11, 1, 10, 0),
    )


@pytest.fixture
def sample_order():
    return Order(
        id="order-1",
        order_number="ORD-1731400000000",
        status="processing",
        total_amount=Decimal("3500.00"),
        customer_id="customer-1",
        customer_name="Asha Rao",
        customer_email="asha@example.com",
        created_at=datetime(2025, 11, 10, 9, 30),
        updated_at=datetime(2025, 11, 10, 9, 30),
        items=[
            OrderItem(
                order_id="order-1",
                product_id="prod-1",
                seller_id=SELLER_ID,
                product_name="Wireless Headphones",
                quantity=1,
                unit_price=Decimal("2499.00"),
                total_price=Decimal("2499.00"),
            )
        ],
    )
