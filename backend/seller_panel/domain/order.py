"""
Order Domain Models

Orders as seen by a seller: only the line items the seller fulfils are
attached, so `seller_total` can differ from the customer's `total_amount`.

Author: Amzify Team
Date: 2025-11-02
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


ORDER_STATUSES = ["pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]

# Statuses a seller (or admin) may move an order into
UpdatableStatus = Literal["confirmed", "processing", "shipped", "delivered", "cancelled"]


class OrderItem(BaseModel):
    """Line item of an order, snapshotting name and price at order time"""

    id: Optional[str] = None
    order_id: str
    product_id: Optional[str] = None
    seller_id: Optional[str] = None
    product_name: str
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)
    total_price: Decimal = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        data = self.model_dump()
        for field in ['unit_price', 'total_price']:
            if data.get(field) is not None:
                data[field] = float(data[field])
        return data


class Order(BaseModel):
    """
    Order domain model

    Fields:
        id / order_number: Identifiers
        status: pending | confirmed | processing | shipped | delivered | cancelled
        total_amount: Whole order total paid by the customer
        customer_*: Buyer contact (from JOIN on users)
        tracking_number / carrier: Set once a shipment exists
        items: The seller's own line items
    """

    id: str
    order_number: str
    status: str = "pending"
    total_amount: Decimal = Decimal("0")
    payment_method: Optional[str] = None
    shipping_address: Optional[Any] = None
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None

    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    items: List[OrderItem] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

    @property
    def seller_total(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    @property
    def seller_items_count(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        data = self.model_dump(exclude={'items'})
        data['total_amount'] = float(self.total_amount)
        data['items'] = [item.to_dict() for item in self.items]
        data['my_total'] = float(self.seller_total)
        data['my_items_count'] = self.seller_items_count
        return data


class OrderStatusUpdate(BaseModel):
    status: UpdatableStatus
