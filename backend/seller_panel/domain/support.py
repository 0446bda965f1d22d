"""
Support Ticket Domain Models

Author: Amzify Team
Date: 2025-11-06
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


TicketPriority = Literal["low", "medium", "high", "urgent"]


class TicketMessage(BaseModel):
    id: Optional[str] = None
    ticket_id: str
    sender_id: str
    message: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SupportTicket(BaseModel):
    id: str
    user_id: str
    subject: str
    message: str
    status: str = "open"
    priority: str = "medium"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    messages: List[TicketMessage] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TicketCreate(BaseModel):
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    priority: TicketPriority = "medium"


class TicketReply(BaseModel):
    message: str = Field(..., min_length=1)
