"""
Catalog tables: categories and products
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, DECIMAL, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from seller_panel.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, index=True)
    description = Column(Text)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    products = relationship("Product", back_populates="category")


class Product(Base):
    """
    Seller listing. New listings start as pending_approval.
    """
    __tablename__ = "products"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    category_id = Column(UUID(as_uuid=False), ForeignKey("categories.id"), index=True)

    name = Column(String(255), nullable=False)
    slug = Column(String(300), unique=True)
    description = Column(Text)
    short_description = Column(String(500))

    # Pricing
    price = Column(DECIMAL(12, 2), nullable=False)
    compare_price = Column(DECIMAL(12, 2))
    cost_price = Column(DECIMAL(12, 2))

    # Inventory
    stock_quantity = Column(Integer, default=0)
    sku = Column(String(100), unique=True, index=True)
    barcode = Column(String(32))
    weight = Column(DECIMAL(8, 3))
    images = Column(JSONB, default=list)

    status = Column(String(30), default="pending_approval", index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("Category", back_populates="products")
