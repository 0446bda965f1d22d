"""
Seller Domain Models

Seller accounts, registration applications and storefront profiles.
Registration carries the same format checks the dashboard runs before
submitting, so a request that skips the form is rejected identically.

Author: Amzify Team
Date: 2025-11-02
"""
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


INDIAN_MOBILE_RE = re.compile(r"^[6-9]\d{9}$")
GST_RE = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")
PAN_RE = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
PINCODE_RE = re.compile(r"^\d{6}$")
IFSC_RE = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")

MIN_PASSWORD_LENGTH = 8


class CamelModel(BaseModel):
    """Accepts both camelCase (dashboard payloads) and snake_case field names"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(CamelModel):
    refresh_token: str


class SellerRegistration(CamelModel):
    """
    Seller sign-up payload.

    Only first/last name, email, password and company name are mandatory.
    GST and PAN are optional but must be well formed when present; bank and
    address fields are checked only when the caller sends them.
    """

    # Account
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    password: str
    confirm_password: Optional[str] = None

    # Business
    company_name: str = Field(..., min_length=1)
    business_type: str = "Individual/Sole Proprietor"
    business_description: Optional[str] = ""
    gst_number: Optional[str] = ""
    pan_number: Optional[str] = ""
    business_address: Optional[str] = ""
    city: Optional[str] = ""
    state: Optional[str] = ""
    postal_code: Optional[str] = ""

    # Bank
    bank_name: Optional[str] = ""
    account_holder_name: Optional[str] = ""
    account_number: Optional[str] = ""
    confirm_account_number: Optional[str] = None
    ifsc_code: Optional[str] = ""

    @field_validator("first_name", "last_name", "company_name")
    @classmethod
    def strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        if value and not INDIAN_MOBILE_RE.match(value):
            raise ValueError("Please enter a valid 10-digit Indian mobile number")
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        return value

    @field_validator("gst_number")
    @classmethod
    def check_gst(cls, value: Optional[str]) -> Optional[str]:
        if value:
            value = value.strip().upper()
            if not GST_RE.match(value):
                raise ValueError("Please enter a valid GST number (15 characters)")
        return value

    @field_validator("pan_number")
    @classmethod
    def check_pan(cls, value: Optional[str]) -> Optional[str]:
        if value:
            value = value.strip().upper()
            if not PAN_RE.match(value):
                raise ValueError("Please enter a valid PAN number")
        return value

    @field_validator("postal_code")
    @classmethod
    def check_pincode(cls, value: Optional[str]) -> Optional[str]:
        if value and not PINCODE_RE.match(value):
            raise ValueError("Please enter a valid 6-digit pincode")
        return value

    @field_validator("ifsc_code")
    @classmethod
    def check_ifsc(cls, value: Optional[str]) -> Optional[str]:
        if value:
            value = value.strip().upper()
            if not IFSC_RE.match(value):
                raise ValueError("Please enter a valid IFSC code")
        return value

    @model_validator(mode="after")
    def check_confirmations(self):
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords do not match")
        if self.confirm_account_number is not None and self.confirm_account_number != self.account_number:
            raise ValueError("Account numbers do not match")
        return self


class SellerProfile(BaseModel):
    """Storefront profile shown in the dashboard profile modal"""

    user_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    business_type: Optional[str] = None
    description: Optional[str] = None
    business_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    profile_image: Optional[str] = None
    is_approved: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SellerProfileUpdate(CamelModel):
    """Editable profile fields; omitted fields are left untouched"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    business_type: Optional[str] = None
    description: Optional[str] = None
    business_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        if value and not INDIAN_MOBILE_RE.match(value):
            raise ValueError("Please enter a valid 10-digit Indian mobile number")
        return value

    @field_validator("postal_code")
    @classmethod
    def check_pincode(cls, value: Optional[str]) -> Optional[str]:
        if value and not PINCODE_RE.match(value):
            raise ValueError("Please enter a valid 6-digit pincode")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
