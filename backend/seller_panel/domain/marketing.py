"""
Marketing Campaign Domain Models

Author: Amzify Team
Date: 2025-11-05
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


DiscountType = Literal["PERCENTAGE", "FIXED"]
CAMPAIGN_STATUSES = ["draft", "active", "paused", "ended"]


class Campaign(BaseModel):
    """Discount campaign over a subset of the seller's products"""

    id: str
    seller_id: str
    name: str
    description: Optional[str] = None
    discount_type: DiscountType = "PERCENTAGE"
    value: Decimal = Field(..., ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: str = "draft"
    target_products: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        data = self.model_dump()
        data['value'] = float(self.value)
        return data


def _check_discount(discount_type, value, start_date, end_date):
    if discount_type == "PERCENTAGE" and value is not None and value > 100:
        raise ValueError("Percentage discount cannot exceed 100")
    if start_date and end_date and end_date < start_date:
        raise ValueError("End date must be on or after start date")


class CampaignCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    discount_type: DiscountType = "PERCENTAGE"
    value: Decimal = Field(..., ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: str = "draft"
    target_products: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_discount(self):
        _check_discount(self.discount_type, self.value, self.start_date, self.end_date)
        return self


class CampaignUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    value: Optional[Decimal] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    target_products: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_discount(self):
        _check_discount(self.discount_type, self.value, self.start_date, self.end_date)
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
