"""
Order tables: orders, line items, tracking history and shipments
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, DECIMAL, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from seller_panel.core.database import Base


class Order(Base):
    """
    Customer order. Items may belong to several sellers.
    """
    __tablename__ = "orders"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    order_number = Column(String(50), nullable=False, unique=True, index=True)
    customer_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)

    status = Column(String(20), default="pending", index=True)
    total_amount = Column(DECIMAL(12, 2), nullable=False)
    payment_method = Column(String(50))
    shipping_address = Column(JSONB)

    tracking_number = Column(String(100), index=True)
    carrier = Column(String(100))

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
    tracking = relationship("OrderTracking", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    """
    Line item; name and price are snapshotted at order time
    """
    __tablename__ = "order_items"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    order_id = Column(UUID(as_uuid=False), ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    product_id = Column(UUID(as_uuid=False), ForeignKey("products.id"), index=True)
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)

    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(DECIMAL(12, 2), nullable=False)
    total_price = Column(DECIMAL(12, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    order = relationship("Order", back_populates="items")


class OrderTracking(Base):
    __tablename__ = "order_tracking"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    order_id = Column(UUID(as_uuid=False), ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    status = Column(String(30), nullable=False)
    description = Column(Text)
    location = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    order = relationship("Order", back_populates="tracking")


class Shipment(Base):
    __tablename__ = "shipments"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    order_id = Column(UUID(as_uuid=False), ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    carrier = Column(String(100), default="Standard")
    tracking_number = Column(String(100), nullable=False, unique=True)
    status = Column(String(30), default="processing", index=True)
    estimated_delivery = Column(Date)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
