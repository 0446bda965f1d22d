"""
Shipment Domain Models

Author: Amzify Team
Date: 2025-11-06
"""
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


ShipmentStatus = Literal["processing", "shipped", "in_transit", "delivered", "returned", "cancelled"]

CARRIERS = ["DHL Express", "FedEx", "Blue Dart"]


class Shipment(BaseModel):
    id: str
    order_id: str
    order_number: Optional[str] = None
    carrier: str = "Standard"
    tracking_number: str
    status: str = "processing"
    estimated_delivery: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ShipmentCreate(BaseModel):
    order_id: str
    carrier: str = Field("Standard", min_length=1)
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[date] = None


class ShipmentStatusUpdate(BaseModel):
    status: ShipmentStatus
    description: Optional[str] = None
    location: Optional[str] = None


class TrackingRequest(BaseModel):
    carrier: Optional[str] = None
