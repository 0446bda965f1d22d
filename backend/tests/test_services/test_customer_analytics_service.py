"""
Unit tests for customer classification, purchase insights and exports

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from seller_panel.services.customer_analytics_service import (
    CustomerAnalyticsService,
    customer_segment,
    customer_type,
    export_filename,
    purchase_insights,
    rows_to_csv,
)

NOW = datetime(2025, 11, 12, 12, 0, tzinfo=timezone.utc)


def _days_ago(days):
    return NOW - timedelta(days=days)


def _stats_row(customer_id, orders, spent, last_days_ago):
    return {
        'id': customer_id,
        'email': f'{customer_id}@example.com',
        'first_name': 'Asha',
        'last_name': None,
        'phone': None,
        'total_orders': orders,
        'total_spent': Decimal(spent),
        'last_order_date': _days_ago(last_days_ago),
    }


class TestClassification:

    @pytest.mark.parametrize("orders,expected", [(0, "new"), (1, "new"), (2, "returning"), (3, "loyal"), (9, "loyal")])
    def test_customer_type(self, orders, expected):
        assert customer_type(orders) == expected

    def test_segments_in_priority_order(self):
        assert customer_segment(3, 100, _days_ago(200), NOW) == 'loyal'
        assert customer_segment(1, 6000, _days_ago(200), NOW) == 'high_value'
        assert customer_segment(2, 900, _days_ago(61), NOW) == 'at_risk'
        assert customer_segment(1, 900, _days_ago(10), NOW) == 'new'
        assert customer_segment(2, 900, _days_ago(10), NOW) == 'regular'

    def test_exactly_five_thousand_is_not_high_value(self):
        assert customer_segment(1, 5000, _days_ago(45), NOW) == 'regular'

    def test_naive_dates_are_treated_as_utc(self):
        naive = (NOW - timedelta(days=70)).replace(tzinfo=None)
        assert customer_segment(1, 10, naive, NOW) == 'at_risk'


class TestPurchaseInsights:

    def test_no_history(self):
        insights = purchase_insights([], NOW)

        assert insights.next_purchase_prediction == 'No purchase history available'
        assert insights.suggested_discount is None
        assert insights.churn_risk == 'low'

    def test_regular_buyer_due_soon(self):
        dates = [_days_ago(25), _days_ago(15), _days_ago(5)]

        insights = purchase_insights(dates, NOW)

        assert insights.order_frequency == '10 days'
        assert insights.days_since_last_order == 5
        assert insights.next_purchase_prediction == 'Within next 7 days'
        assert insights.churn_risk == 'low'

    def test_lapsed_buyer_gets_reengagement_discount(self):
        dates = [_days_ago(60), _days_ago(50)]

        insights = purchase_insights(dates, NOW)

        assert insights.suggested_discount == '15% to re-engage'
        assert insights.churn_risk == 'high'

    def test_single_order_uses_default_gap(self):
        insights = purchase_insights([_days_ago(12)], NOW)

        assert insights.order_frequency == '30 days'
        assert insights.next_purchase_prediction == 'Within next 18 days'

    def test_frequent_buyer_gets_loyalty_reward(self):
        dates = [_days_ago(d) for d in (40, 30, 20, 10, 1)]

        insights = purchase_insights(dates, NOW)

        assert insights.suggested_discount == '10% loyalty reward'


class TestCsvExports:

    def test_rows_to_csv_keeps_column_order(self):
        csv_text = rows_to_csv([{'b': 2, 'a': 1, 'ignored': 3}], ['a', 'b'])

        assert csv_text.splitlines() == ['a,b', '1,2']

    def test_export_filename(self):
        assert export_filename('customers', datetime(2025, 11, 12).date()) == 'customers_2025-11-12.csv'


class TestCustomerAnalyticsService:

    @pytest.fixture
    def customer_repo(self):
        return MagicMock()

    @pytest.fixture
    def service(self, customer_repo):
        return CustomerAnalyticsService(customer_repo=customer_repo, order_repo=MagicMock(), ticket_repo=MagicMock())

    def test_overview(self, service, customer_repo):
        customer_repo.find_customer_stats.return_value = [
            _stats_row('c1', 3, '3000', 5),
            _stats_row('c2', 1, '1000', 40),
        ]
        customer_repo.count_customers.return_value = 1

        overview = service.get_overview('seller-1', now=NOW)

        assert overview == {
            'totalCustomers': 2,
            'newCustomersThisMonth': 1,
            'returningCustomers': 1,
            'repeatPurchaseRate': 50.0,
            'averageOrderValue': 1000.0,
            'customerLifetimeValue': 2000.0,
        }
        assert customer_repo.count_customers.call_args.kwargs['joined_since'] == datetime(2025, 11, 1, tzinfo=timezone.utc)

    def test_overview_without_customers(self, service, customer_repo):
        customer_repo.find_customer_stats.return_value = []
        customer_repo.count_customers.return_value = 0

        overview = service.get_overview('seller-1', now=NOW)

        assert overview['repeatPurchaseRate'] == 0
        assert overview['averageOrderValue'] == 0

    def test_list_customers_filters_segment_on_page(self, service, customer_repo):
        customer_repo.find_customer_stats.return_value = [
            _stats_row('c1', 4, '500', 5),
            _stats_row('c2', 1, '200', 5),
        ]
        customer_repo.count_customers.return_value = 120

        result = service.list_customers('seller-1', segment='loyal', page=2, limit=50)

        assert [c['id'] for c in result['customers']] == ['c1']
        assert result['customers'][0]['name'] == 'Asha'
        assert result['customers'][0]['phone'] == 'N/A'
        assert result['total'] == 120
        assert result['totalPages'] == 3
        assert customer_repo.find_customer_stats.call_args.kwargs['offset'] == 50

    def test_export_customers_header(self, service, customer_repo):
        customer_repo.find_customer_stats.return_value = []

        header = service.export_customers('seller-1').splitlines()[0]

        assert header == 'email,first_name,last_name,phone,total_orders,total_spent,last_order_date'

    def test_profile_of_someone_elses_customer_is_none(self, service, customer_repo):
        # Arrange
        service.order_repo.find_by_customer_for_seller.return_value = []

        # Act
        profile = service.get_profile('seller-1', 'customer-9')

        # Assert
        assert profile is None
        customer_repo.find_customer.assert_not_called()
        service.ticket_repo.find_by_user.assert_not_called()

    def test_profile_looks_up_customer_for_seller(self, service, customer_repo):
        order = MagicMock(seller_total=Decimal('300'))
        order.to_dict.return_value = {'id': 'order-1'}
        service.order_repo.find_by_customer_for_seller.return_value = [order]
        service.ticket_repo.find_by_user.return_value = []
        customer_repo.find_customer.return_value = {
            'id': 'customer-9', 'email': 'asha@example.com', 'first_name': 'Asha',
            'last_name': 'Rao', 'phone': None, 'created_at': NOW,
        }

        profile = service.get_profile('seller-1', 'customer-9')

        customer_repo.find_customer.assert_called_once_with('customer-9', 'seller-1')
        assert profile['stats']['totalOrders'] == 1
        assert profile['stats']['totalSpent'] == 300.0

    def test_activity_of_someone_elses_customer_is_none(self, service, customer_repo):
        customer_repo.is_customer_of.return_value = False

        assert service.get_activity('seller-1', 'customer-9') is None
        customer_repo.find_activity.assert_not_called()

    def test_activity_for_own_customer(self, service, customer_repo):
        customer_repo.is_customer_of.return_value = True
        customer_repo.find_activity.return_value = [{'id': 'a1'}]

        assert service.get_activity('seller-1', 'customer-9') == [{'id': 'a1'}]
        customer_repo.find_activity.assert_called_once_with('customer-9', 'seller-1')
