"""
Product and Category Domain Models

Represents catalog entities owned by a seller.

Author: Amzify Team
Date: 2025-11-02
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


PRODUCT_STATUSES = ["pending_approval", "active", "inactive"]


class Category(BaseModel):
    """Catalog category (public, read-only for sellers)"""

    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
    products_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class Product(BaseModel):
    """
    Product domain model - a listing in a seller's storefront

    Fields:
        id: Product ID (UUID)
        seller_id: Owning seller (users.id)
        category_id / category_name: Catalog category
        name, slug: Display name and URL slug
        description, short_description: Listing copy
        price: Selling price
        compare_price: Strike-through "MRP" price (optional)
        cost_price: Purchase cost, used for margin (optional)
        stock_quantity: Units available
        sku, barcode: Identifiers (optional, SKU unique per platform)
        weight: Shipping weight in kg (optional)
        images: Image URLs
        status: pending_approval | active | inactive
    """

    id: str = Field(..., description="Product ID")
    seller_id: str = Field(..., description="Owning seller ID")
    category_id: Optional[str] = Field(None, description="Category ID")
    category_name: Optional[str] = Field(None, description="Category name (from JOIN)")

    name: str = Field(..., description="Product name")
    slug: Optional[str] = Field(None, description="URL slug")
    description: Optional[str] = Field(None, description="Full description")
    short_description: Optional[str] = Field(None, description="One-line description")

    price: Decimal = Field(..., description="Selling price", ge=0)
    compare_price: Optional[Decimal] = Field(None, description="Compare-at price", ge=0)
    cost_price: Optional[Decimal] = Field(None, description="Cost price", ge=0)

    stock_quantity: int = Field(0, description="Units in stock", ge=0)
    sku: Optional[str] = Field(None, description="Stock Keeping Unit")
    barcode: Optional[str] = Field(None, description="EAN-13 barcode")
    weight: Optional[Decimal] = Field(None, description="Weight (kg)", ge=0)
    images: List[str] = Field(default_factory=list, description="Image URLs")

    status: str = Field("pending_approval", description="Moderation status")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock_quantity <= 0

    @property
    def discount_percentage(self) -> Optional[float]:
        """Discount vs compare_price, rounded to one decimal"""
        if not self.compare_price or self.compare_price <= self.price:
            return None
        return round(float((self.compare_price - self.price) / self.compare_price * 100), 1)

    @property
    def margin(self) -> Optional[float]:
        if self.cost_price is None:
            return None
        return float(self.price - self.cost_price)

    def to_dict(self) -> dict:
        """Convert to dictionary with computed fields and Decimal -> float"""
        data = self.model_dump()

        data['is_out_of_stock'] = self.is_out_of_stock
        data['discount_percentage'] = self.discount_percentage
        data['margin'] = self.margin

        for field in ['price', 'compare_price', 'cost_price', 'weight']:
            if data.get(field) is not None:
                data[field] = float(data[field])

        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product (status starts as pending_approval)"""
    name: str = Field(..., min_length=1, max_length=255)
    category_id: str
    description: Optional[str] = Field(None, max_length=5000)
    short_description: Optional[str] = Field(None, max_length=500)
    price: Decimal = Field(..., ge=0)
    compare_price: Optional[Decimal] = Field(None, ge=0)
    cost_price: Optional[Decimal] = Field(None, ge=0)
    stock_quantity: int = Field(0, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    barcode: Optional[str] = Field(None, max_length=32)
    weight: Optional[Decimal] = Field(None, ge=0)
    images: List[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product; omitted fields are untouched"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category_id: Optional[str] = None
    description: Optional[str] = Field(None, max_length=5000)
    short_description: Optional[str] = Field(None, max_length=500)
    price: Optional[Decimal] = Field(None, ge=0)
    compare_price: Optional[Decimal] = Field(None, ge=0)
    cost_price: Optional[Decimal] = Field(None, ge=0)
    stock_quantity: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    barcode: Optional[str] = Field(None, max_length=32)
    weight: Optional[Decimal] = Field(None, ge=0)
    images: Optional[List[str]] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
