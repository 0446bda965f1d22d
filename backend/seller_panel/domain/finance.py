"""
Revenue and Payout Domain Models

Author: Amzify Team
Date: 2025-11-05
"""
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


PAYOUT_STATUSES = ["pending", "completed", "failed"]

RevenuePeriod = Literal["week", "month", "year"]


class Payout(BaseModel):
    """Transfer of earnings from the platform to a seller's bank account"""

    id: str
    seller_id: str
    amount: Decimal = Field(..., ge=0)
    status: str = "pending"
    method: str = "bank_transfer"
    reference: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        data = self.model_dump()
        data['amount'] = float(self.amount)
        return data


class PayoutRequest(BaseModel):
    amount: Decimal
    method: str = "bank_transfer"
