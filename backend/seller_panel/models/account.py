"""
User, seller and session tables
"""
from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from seller_panel.core.database import Base


class User(Base):
    """
    Every account on the marketplace (customers, sellers and admins)
    """
    __tablename__ = "users"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="customer", index=True)

    first_name = Column(String(100))
    last_name = Column(String(100))
    phone = Column(String(20))

    is_active = Column(Boolean, default=True)
    is_verified = Column(Boolean, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    seller_profile = relationship("SellerProfile", back_populates="user", uselist=False)


class SellerProfile(Base):
    """
    Business and payout details of an approved seller
    """
    __tablename__ = "seller_profiles"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    user_id = Column(UUID(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    # Business
    company_name = Column(String(255))
    business_type = Column(String(100))
    description = Column(Text)
    business_address = Column(Text)
    city = Column(String(100))
    state = Column(String(100))
    postal_code = Column(String(10))
    gst_number = Column(String(15))
    pan_number = Column(String(10))

    # Bank
    bank_name = Column(String(255))
    account_holder_name = Column(String(255))
    account_number = Column(String(30))
    ifsc_code = Column(String(11))

    profile_image = Column(Text)
    is_approved = Column(Boolean, default=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="seller_profile")


class SellerApplication(Base):
    """
    Seller sign-up waiting for admin review. The full form is kept in `payload`.
    """
    __tablename__ = "seller_applications"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    user_id = Column(UUID(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), index=True)
    email = Column(String(255), nullable=False, index=True)
    company_name = Column(String(255), nullable=False)
    business_type = Column(String(100))
    payload = Column(JSONB, nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    reviewed_at = Column(DateTime(timezone=True))


class RefreshToken(Base):
    __tablename__ = "refresh_tokens"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    user_id = Column(UUID(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    token = Column(Text, nullable=False, unique=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
