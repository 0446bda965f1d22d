"""
Customer Domain Models

A customer as seen from one seller: order count, spend and recency are
computed over that seller's order items only.

Author: Amzify Team
Date: 2025-11-04
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


CUSTOMER_SEGMENTS = ["loyal", "high_value", "at_risk", "new", "regular"]

CustomerType = Literal["new", "returning", "loyal"]
ChurnRisk = Literal["low", "medium", "high"]


class Customer(BaseModel):
    """Customer row in the seller's customer list"""

    id: str
    name: str = "N/A"
    email: str
    phone: str = "N/A"
    total_orders: int = Field(0, ge=0)
    total_spent: float = Field(0.0, ge=0)
    last_order_date: Optional[datetime] = None
    customer_type: CustomerType = "new"
    customer_segment: str = "regular"

    model_config = ConfigDict(from_attributes=True)


class PurchaseInsights(BaseModel):
    """Rule-based purchase prediction for one customer"""

    model_config = ConfigDict(populate_by_name=True)

    next_purchase_prediction: str = Field(..., alias="nextPurchasePrediction")
    suggested_discount: Optional[str] = Field(None, alias="suggestedDiscount")
    churn_risk: ChurnRisk = Field("low", alias="churnRisk")
    order_frequency: Optional[str] = Field(None, alias="orderFrequency")
    days_since_last_order: Optional[int] = Field(None, alias="daysSinceLastOrder")
