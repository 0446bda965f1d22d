"""
Unit tests for SellerDashboardService

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from seller_panel.services.seller_dashboard_service import SellerDashboardService, normalize_trend


@pytest.fixture
def order_repo():
    repo = MagicMock()
    repo.sales_summary.return_value = {'revenue': Decimal('0'), 'orders': 0}
    return repo


@pytest.fixture
def product_repo():
    repo = MagicMock()
    repo.count_by_seller.return_value = 12
    return repo


@pytest.fixture
def service(order_repo, product_repo):
    return SellerDashboardService(order_repo=order_repo, product_repo=product_repo)


def _item(order_id, product, created):
    return {
        'order_id': order_id, 'product_name': product, 'quantity': 1, 'unit_price': Decimal('100'),
        'order_number': f'ORD-{order_id}', 'total_amount': Decimal('300'), 'status': 'pending',
        'created_at': created, 'customer_name': 'Asha Rao', 'customer_email': 'asha@example.com',
    }


class TestNormalizeTrend:

    def test_scales_to_peak(self):
        points = [{'month': 'Sep', 'revenue': 50}, {'month': 'Oct', 'revenue': 200}, {'month': 'Nov', 'revenue': 0}]

        assert normalize_trend(points, 'revenue') == [
            {'label': 'Sep', 'value': 25},
            {'label': 'Oct', 'value': 100},
            {'label': 'Nov', 'value': 0},
        ]

    def test_all_zero_series(self):
        points = [{'month': 'Oct', 'orders': 0}, {'month': 'Nov', 'orders': 0}]

        assert [p['value'] for p in normalize_trend(points, 'orders')] == [0, 0]


class TestSellerDashboardService:

    def test_get_stats(self, service, order_repo):
        order_repo.sales_summary.return_value = {'revenue': Decimal('4599.50'), 'orders': 7}

        assert service.get_stats('seller-1') == {
            'totalRevenue': 4599.5,
            'totalOrders': 7,
            'totalProducts': 12,
            'avgRating': 4.5,
        }

    def test_recent_orders_grouped_from_items(self, service, order_repo):
        """Test items of the same order are grouped and the order list is capped"""
        order_repo.find_recent_items.return_value = [
            _item('o3', 'Mouse', datetime(2025, 11, 12)),
            _item('o3', 'Keyboard', datetime(2025, 11, 12)),
            _item('o2', 'Cable', datetime(2025, 11, 11)),
            _item('o1', 'Charger', datetime(2025, 11, 10)),
        ]

        orders = service.get_recent_orders('seller-1', limit=2)

        assert [o['id'] for o in orders] == ['o3', 'o2']
        assert [i['product_name'] for i in orders[0]['items']] == ['Mouse', 'Keyboard']
        order_repo.find_recent_items.assert_called_once_with('seller-1', 10)

    def test_analytics_conversion_rate_is_capped(self, service, order_repo):
        order_repo.sales_summary.side_effect = [
            {'revenue': Decimal('90000'), 'orders': 140},
            {'revenue': Decimal('500'), 'orders': 2},
        ]

        analytics = service.get_analytics('seller-1', now=datetime(2025, 11, 12, 18, 0))

        assert analytics == {
            'monthlyRevenue': 90000.0,
            'ordersToday': 2,
            'monthlyOrders': 140,
            'conversionRate': '100.0',
        }

    def test_trends_cover_six_months_oldest_first(self, service, order_repo, product_repo):
        trends = service.get_trends('seller-1', now=datetime(2025, 2, 10))

        months = [point['month'] for point in trends['revenue']]
        assert months == ['Sep', 'Oct', 'Nov', 'Dec', 'Jan', 'Feb']
        assert trends['orders'] == trends['revenue']

        first_call = order_repo.sales_summary.call_args_list[0]
        assert first_call.kwargs['start'] == datetime(2024, 9, 1)
        assert first_call.kwargs['end'] == datetime(2024, 10, 1)

    def test_range_stats_falls_back_to_thirty_days(self, service, order_repo):
        order_repo.sales_summary.return_value = {'revenue': Decimal('1000'), 'orders': 4}
        order_repo.top_products_between.return_value = [
            {'product_id': 'p1', 'product_name': 'Mouse', 'units_sold': 6, 'revenue': Decimal('600')},
        ]
        order_repo.daily_revenue.return_value = [
            {'day': date(2025, 11, 11), 'revenue': Decimal('1000'), 'orders': 4},
        ]

        stats = service.get_range_stats('seller-1', 'forever', now=datetime(2025, 11, 12))

        assert stats['timeRange'] == '30d'
        assert stats['stats']['avg_order_value'] == 250.0
        assert stats['topProducts'] == [{'name': 'Mouse', 'total_sold': 6, 'revenue': 600.0}]
        assert stats['trend'] == [{'date': '2025-11-11', 'revenue': 1000.0, 'orders': 4}]
        assert order_repo.sales_summary.call_args.kwargs['start'] == datetime(2025, 10, 13)

    def test_range_stats_default_now_is_utc(self, service, order_repo):
        order_repo.sales_summary.return_value = {'revenue': None, 'orders': 0}
        order_repo.top_products_between.return_value = []
        order_repo.daily_revenue.return_value = []

        service.get_range_stats('seller-1', '7d')

        assert order_repo.sales_summary.call_args.kwargs['start'].tzinfo is timezone.utc

    def test_range_stats_one_year(self, service, order_repo):
        order_repo.top_products_between.return_value = []
        order_repo.daily_revenue.return_value = []

        stats = service.get_range_stats('seller-1', '1y', now=datetime(2025, 11, 12))

        assert stats['timeRange'] == '1y'
        assert stats['stats']['avg_order_value'] == 0
        assert order_repo.sales_summary.call_args.kwargs['start'] == datetime(2024, 11, 12)

    def test_get_dashboard_bundles_sections(self, service, order_repo, product_repo):
        order_repo.find_recent_items.return_value = []
        product_repo.find_top_selling.return_value = [
            {'id': 'p1', 'name': 'Mouse', 'price': Decimal('100'), 'images': None,
             'total_sold': 3, 'total_revenue': Decimal('300'), 'status': 'active'},
        ]

        dashboard = service.get_dashboard('seller-1')

        assert set(dashboard) == {'stats', 'recentOrders', 'topProducts', 'analytics', 'timestamp'}
        assert dashboard['topProducts'][0]['images'] == []
        assert dashboard['topProducts'][0]['totalSold'] == 3
