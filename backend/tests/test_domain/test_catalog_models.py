"""
Unit tests for Product and Order computed fields

Author: Amzify Team
Date: 2025-11-12
"""
from decimal import Decimal

from seller_panel.domain.product import ProductUpdate


class TestProduct:

    def test_to_dict_converts_decimals(self, sample_product):
        data = sample_product.to_dict()

        assert data["price"] == 2499.0
        assert data["discount_percentage"] == 16.7
        assert data["margin"] == 999.0
        assert data["is_out_of_stock"] is False

    def test_no_discount_without_higher_compare_price(self, sample_product):
        product = sample_product.model_copy(update={"compare_price": Decimal("2000")})

        assert product.discount_percentage is None

    def test_out_of_stock(self, sample_product):
        assert sample_product.model_copy(update={"stock_quantity": 0}).is_out_of_stock

    def test_update_changes_skip_missing_fields(self):
        assert ProductUpdate(price=Decimal("10")).changes() == {"price": Decimal("10")}


class TestOrder:

    def test_seller_total_only_counts_seller_items(self, sample_order):
        data = sample_order.to_dict()

        assert data["total_amount"] == 3500.0
        assert data["my_total"] == 2499.0
        assert data["my_items_count"] == 1
