"""
Logistics Service

Warehouse overview, shipment tracking, returns and carrier analytics for a
seller, plus shipment creation and tracking numbers.

Several figures have no data source yet and are reported as fixed values:
warehouse capacity, average processing time, on-time rate, average delivery
time and the carrier split.

Author: Amzify Team
Date: 2025-11-07
"""
import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from seller_panel.domain.logistics import Shipment, ShipmentCreate
from seller_panel.repositories.order_repository import OrderRepository
from seller_panel.repositories.product_repository import ProductRepository
from seller_panel.repositories.shipment_repository import ShipmentRepository
from seller_panel.services.identifiers import generate_tracking_number, order_tracking_number

logger = logging.getLogger(__name__)

WAREHOUSE_CAPACITY_PCT = 85
AVG_PROCESSING_TIME = "2.3 hours"
ON_TIME_DELIVERY_PCT = 94.5
AVG_DELIVERY_TIME = "3.2 days"

CARRIER_SHARES = [
    ("DHL Express", 45),
    ("FedEx", 30),
    ("Blue Dart", 25),
]

# Days added to the order date to estimate delivery
DELIVERY_OFFSET_DAYS = {"delivered": 0, "shipped": 2, "processing": 5}
DEFAULT_DELIVERY_OFFSET_DAYS = 5

PENDING_RETURNS_SHARE = 0.3
PROCESSED_RETURNS_SHARE = 0.7

# Shipment status -> order status it implies
ORDER_STATUS_FOR_SHIPMENT = {
    "shipped": "shipped",
    "in_transit": "shipped",
    "delivered": "delivered",
    "cancelled": "cancelled",
}


def estimate_delivery_date(created_at: datetime, status: str) -> str:
    """ISO date of the expected delivery for an order in the given status"""
    days = DELIVERY_OFFSET_DAYS.get(status, DEFAULT_DELIVERY_OFFSET_DAYS)
    return (created_at + timedelta(days=days)).date().isoformat()


class LogisticsService:

    def __init__(
        self,
        order_repo: Optional[OrderRepository] = None,
        product_repo: Optional[ProductRepository] = None,
        shipment_repo: Optional[ShipmentRepository] = None
    ):
        self.order_repo = order_repo or OrderRepository()
        self.product_repo = product_repo or ProductRepository()
        self.shipment_repo = shipment_repo or ShipmentRepository()

    def get_overview(self, seller_id: str) -> Dict[str, Any]:
        return {
            "totalProducts": self.product_repo.count_by_seller(seller_id),
            "activeOrders": self.order_repo.count_by_status(seller_id, ["processing", "shipped"]),
            "pendingShipments": self.order_repo.count_by_status(seller_id, ["processing"]),
            "warehouseCapacity": WAREHOUSE_CAPACITY_PCT,
            "avgProcessingTime": AVG_PROCESSING_TIME,
        }

    def get_shipment_tracking(self, seller_id: str, limit: int = 20) -> List[Dict[str, Any]]:
        orders, _ = self.order_repo.find_by_seller(
            seller_id, statuses=["processing", "shipped", "delivered"], limit=limit
        )

        return [
            {
                "id": order.id,
                "orderNumber": order.order_number,
                "customer": order.customer_name,
                "status": order.status,
                "shippingAddress": order.shipping_address,
                "items": order.seller_items_count,
                "estimatedDelivery": estimate_delivery_date(order.created_at, order.status),
                "trackingNumber": order_tracking_number(order.id),
                "createdAt": order.created_at,
            }
            for order in orders
        ]

    def get_returns(self, seller_id: str, limit: int = 10) -> Dict[str, Any]:
        """Cancelled orders reported as returns, most recently updated first"""
        orders, _ = self.order_repo.find_by_seller(
            seller_id, status="cancelled", limit=limit, order_by="o.updated_at DESC"
        )

        total_returns = len(orders)
        total_value = sum(float(order.seller_total) for order in orders)

        return {
            "totalReturns": total_returns,
            "totalReturnValue": total_value,
            "pendingReturns": math.floor(total_returns * PENDING_RETURNS_SHARE),
            "processedReturns": math.floor(total_returns * PROCESSED_RETURNS_SHARE),
            "returns": [
                {
                    "id": order.id,
                    "orderNumber": order.order_number,
                    "customer": order.customer_name,
                    "reason": "Customer Request",
                    "status": "Processing",
                    "value": float(order.total_amount),
                    "date": order.updated_at,
                    "items": ", ".join(item.product_name for item in order.items),
                }
                for order in orders
            ],
        }

    def get_transport_analytics(self, seller_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        delivered = self.order_repo.count_by_status(
            seller_id, ["delivered"], updated_since=now - timedelta(days=30)
        )
        shipped = self.order_repo.count_by_status(seller_id, ["shipped"])
        processing = self.order_repo.count_by_status(seller_id, ["processing"])

        return {
            "deliveredOrders": delivered,
            "inTransit": shipped,
            "firstMile": processing,
            "lastMile": shipped,
            "onTimeDelivery": ON_TIME_DELIVERY_PCT,
            "avgDeliveryTime": AVG_DELIVERY_TIME,
            "carriers": [
                {"name": name, "percentage": share, "orders": math.floor(delivered * share / 100)}
                for name, share in CARRIER_SHARES
            ],
        }

    # ------------------------------------------------------------------
    # Shipments
    # ------------------------------------------------------------------

    def list_shipments(self, seller_id: str, status: Optional[str] = None) -> List[Shipment]:
        return self.shipment_repo.find_by_seller(seller_id, status)

    def create_shipment(self, seller_id: str, data: ShipmentCreate) -> Shipment:
        """
        Raises:
            LookupError: the order has none of the seller's items
        """
        if not self.order_repo.seller_owns_items(data.order_id, seller_id):
            raise LookupError("Order not found or access denied")

        tracking_number = data.tracking_number or generate_tracking_number()
        estimated: Optional[date] = data.estimated_delivery or (
            datetime.now(timezone.utc).date() + timedelta(days=DEFAULT_DELIVERY_OFFSET_DAYS)
        )

        shipment = self.shipment_repo.create(
            seller_id, data.order_id, data.carrier, tracking_number, estimated
        )
        logger.info(f"Shipment {shipment.id} created for order {data.order_id} ({tracking_number})")
        return shipment

    def update_shipment_status(
        self,
        seller_id: str,
        shipment_id: str,
        status: str,
        description: Optional[str] = None,
        location: Optional[str] = None
    ) -> Shipment:
        """
        Raises:
            LookupError: unknown shipment or not the seller's
        """
        shipment = self.shipment_repo.update_status(
            shipment_id,
            seller_id,
            status,
            description=description,
            location=location,
            order_status=ORDER_STATUS_FOR_SHIPMENT.get(status),
        )
        if shipment is None:
            raise LookupError("Shipment not found or access denied")
        return shipment

    def assign_tracking_number(self, order_id: str, carrier: Optional[str], seller_id: Optional[str] = None) -> str:
        """
        Generate a tracking number and attach it to the order

        Args:
            seller_id: When given, the order must contain the seller's items (admins pass None)

        Raises:
            LookupError: order missing or not the seller's
        """
        if seller_id and not self.order_repo.seller_owns_items(order_id, seller_id):
            raise LookupError("Order not found or access denied")

        tracking_number = generate_tracking_number()
        if not self.order_repo.set_tracking(order_id, tracking_number, carrier or "Standard"):
            raise LookupError("Order not found")

        logger.info(f"Tracking number {tracking_number} assigned to order {order_id}")
        return tracking_number
