"""
Seller engagement tables: payouts, campaigns, social media, support
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, Text, DECIMAL, Float, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from seller_panel.core.database import Base


class Payout(Base):
    __tablename__ = "payouts"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    amount = Column(DECIMAL(12, 2), nullable=False)
    status = Column(String(20), default="pending", index=True)
    method = Column(String(50), default="bank_transfer")
    reference = Column(String(100))
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    discount_type = Column(String(20), default="PERCENTAGE")
    value = Column(DECIMAL(12, 2), nullable=False)
    start_date = Column(Date)
    end_date = Column(Date)
    status = Column(String(20), default="draft")
    target_products = Column(JSONB, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class SocialAccount(Base):
    __tablename__ = "social_accounts"
    __table_args__ = (UniqueConstraint("seller_id", "platform"),)

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    platform = Column(String(30), nullable=False)
    username = Column(String(255), nullable=False)
    access_token = Column(Text)
    followers = Column(Integer, default=0)
    engagement = Column(Float, default=0.0)
    connected = Column(Boolean, default=True)
    connected_at = Column(DateTime(timezone=True), server_default=func.now())


class SocialPost(Base):
    __tablename__ = "social_posts"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    seller_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    content = Column(Text, nullable=False)
    platforms = Column(JSONB, nullable=False)
    scheduled_at = Column(DateTime(timezone=True))
    status = Column(String(20), default="published")
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class SupportTicket(Base):
    __tablename__ = "support_tickets"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    user_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), index=True, nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default="open", index=True)
    priority = Column(String(20), default="medium")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class TicketMessage(Base):
    __tablename__ = "ticket_messages"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    ticket_id = Column(UUID(as_uuid=False), ForeignKey("support_tickets.id", ondelete="CASCADE"), index=True, nullable=False)
    sender_id = Column(UUID(as_uuid=False), ForeignKey("users.id"), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class CustomerActivity(Base):
    __tablename__ = "customer_activity"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    customer_id = Column(UUID(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    activity_type = Column(String(50), nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
