"""
Unit tests for LogisticsService

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from seller_panel.domain.logistics import Shipment, ShipmentCreate
from seller_panel.services.logistics_service import LogisticsService, estimate_delivery_date


@pytest.fixture
def order_repo():
    return MagicMock()


@pytest.fixture
def shipment_repo():
    return MagicMock()


@pytest.fixture
def service(order_repo, shipment_repo):
    product_repo = MagicMock()
    product_repo.count_by_seller.return_value = 8
    return LogisticsService(order_repo=order_repo, product_repo=product_repo, shipment_repo=shipment_repo)


class TestLogisticsService:

    @pytest.mark.parametrize("status,expected", [
        ("delivered", "2025-11-10"),
        ("shipped", "2025-11-12"),
        ("processing", "2025-11-15"),
        ("pending", "2025-11-15"),
    ])
    def test_estimate_delivery_date(self, status, expected):
        assert estimate_delivery_date(datetime(2025, 11, 10, 22, 0), status) == expected

    def test_overview_counts_active_and_pending(self, service, order_repo):
        order_repo.count_by_status.side_effect = [5, 2]

        overview = service.get_overview('seller-1')

        assert overview['totalProducts'] == 8
        assert overview['activeOrders'] == 5
        assert overview['pendingShipments'] == 2
        assert order_repo.count_by_status.call_args_list[0][0] == ('seller-1', ['processing', 'shipped'])

    def test_shipment_tracking(self, service, order_repo, sample_order):
        order_repo.find_by_seller.return_value = ([sample_order], 1)

        shipments = service.get_shipment_tracking('seller-1')

        assert shipments[0]['trackingNumber'] == 'TRK000order-1'
        assert shipments[0]['estimatedDelivery'] == '2025-11-15'
        assert shipments[0]['items'] == 1

    def test_returns_from_cancelled_orders(self, service, order_repo, sample_order):
        cancelled = sample_order.model_copy(update={'status': 'cancelled'})
        order_repo.find_by_seller.return_value = ([cancelled] * 4, 4)

        returns = service.get_returns('seller-1')

        assert returns['totalReturns'] == 4
        assert returns['totalReturnValue'] == pytest.approx(4 * 2499.0)
        assert returns['pendingReturns'] == 1
        assert returns['processedReturns'] == 2
        assert returns['returns'][0]['items'] == 'Wireless Headphones'
        assert order_repo.find_by_seller.call_args.kwargs['order_by'] == 'o.updated_at DESC'

    def test_transport_carrier_split(self, service, order_repo):
        order_repo.count_by_status.side_effect = [10, 3, 4]

        analytics = service.get_transport_analytics('seller-1', now=datetime(2025, 11, 12))

        assert analytics['deliveredOrders'] == 10
        assert analytics['inTransit'] == 3
        assert analytics['firstMile'] == 4
        assert [c['orders'] for c in analytics['carriers']] == [4, 3, 2]

    def test_transport_window_defaults_to_utc(self, service, order_repo):
        order_repo.count_by_status.side_effect = [0, 0, 0]

        service.get_transport_analytics('seller-1')

        assert order_repo.count_by_status.call_args_list[0].kwargs['updated_since'].tzinfo is timezone.utc

    def test_create_shipment_requires_seller_items(self, service, order_repo, shipment_repo):
        order_repo.seller_owns_items.return_value = False

        with pytest.raises(LookupError):
            service.create_shipment('seller-1', ShipmentCreate(order_id='order-9'))

        shipment_repo.create.assert_not_called()

    def test_create_shipment_generates_tracking_number(self, service, order_repo, shipment_repo):
        order_repo.seller_owns_items.return_value = True
        shipment_repo.create.return_value = Shipment(
            id='ship-1', order_id='order-1', carrier='FedEx', tracking_number='TRK1', estimated_delivery=date(2025, 11, 20)
        )

        service.create_shipment('seller-1', ShipmentCreate(order_id='order-1', carrier='FedEx'))

        _, order_id, carrier, tracking_number, estimated = shipment_repo.create.call_args[0]
        assert (order_id, carrier) == ('order-1', 'FedEx')
        assert tracking_number.startswith('TRK')
        assert estimated is not None

    def test_update_shipment_status_syncs_order_status(self, service, shipment_repo):
        shipment_repo.update_status.return_value = Shipment(id='ship-1', order_id='order-1', tracking_number='TRK1')

        service.update_shipment_status('seller-1', 'ship-1', 'in_transit')

        assert shipment_repo.update_status.call_args.kwargs['order_status'] == 'shipped'

    def test_update_unknown_shipment(self, service, shipment_repo):
        shipment_repo.update_status.return_value = None

        with pytest.raises(LookupError):
            service.update_shipment_status('seller-1', 'ship-x', 'delivered')

    def test_assign_tracking_number_for_admin_skips_ownership(self, service, order_repo):
        order_repo.set_tracking.return_value = True

        tracking = service.assign_tracking_number('order-1', None)

        assert tracking.startswith('TRK')
        order_repo.seller_owns_items.assert_not_called()
        assert order_repo.set_tracking.call_args[0][2] == 'Standard'

    def test_assign_tracking_number_missing_order(self, service, order_repo):
        order_repo.seller_owns_items.return_value = True
        order_repo.set_tracking.return_value = False

        with pytest.raises(LookupError):
            service.assign_tracking_number('order-1', 'FedEx', seller_id='seller-1')
