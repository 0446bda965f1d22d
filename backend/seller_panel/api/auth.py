"""
Authentication API endpoints
- Login with JWT access/refresh token pair
- Seller registration (creates an application pending admin approval)
- Refresh token rotation, logout, current user

Author: Amzify Team
Date: 2025-11-03
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from seller_panel.core.auth import (
    REFRESH_TOKEN_TYPE,
    TokenUser,
    create_token_pair,
    decode_token,
    get_current_user,
    hash_password,
    verify_password,
)
from seller_panel.core.config import settings
from seller_panel.domain.seller import LoginRequest, RefreshRequest, SellerRegistration
from seller_panel.repositories.user_repository import EmailAlreadyRegistered, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTRATION_MESSAGE = (
    "Seller application submitted successfully! Our admin team will review your "
    "application within 24-48 hours. You will receive an email once approved."
)


def _refresh_expiry() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=settings.REFRESH_TOKEN_DAYS)


def _token_claims(user: Dict[str, Any]) -> Dict[str, Any]:
    name = f"{user.get('first_name') or ''} {user.get('last_name') or ''}".strip()
    return {"id": user["id"], "email": user["email"], "role": user["role"], "name": name or None}


def _public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": user["id"],
        "email": user["email"],
        "role": user["role"],
        "first_name": user.get("first_name"),
        "last_name": user.get("last_name"),
        "phone": user.get("phone"),
        "is_verified": user.get("is_verified"),
        "company_name": user.get("company_name"),
        "seller_approved": user.get("is_approved"),
    }


@router.post("/login")
async def login(credentials: LoginRequest):
    """
    Exchange email and password for a token pair.

    Sellers must be verified and approved before they can sign in.
    """
    try:
        repo = UserRepository()
        user = repo.find_by_email(credentials.email)

        if not user or not user.get("is_active", True):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        if not verify_password(credentials.password, user["password_hash"]):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        if user["role"] == "seller":
            if not user.get("is_verified"):
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Email not verified. Please verify your email first."
                )
            if user.get("is_approved") is False:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Seller account pending approval")

        tokens = create_token_pair(_token_claims(user))
        repo.store_refresh_token(user["id"], tokens["refreshToken"], _refresh_expiry())

        logger.info(f"User {user['id']} logged in")
        return {"message": "Login successful", "user": _public_user(user), **tokens}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login failed: {e}")
        raise HTTPException(status_code=500, detail=f"Error logging in: {str(e)}")


@router.post("/register/seller", status_code=status.HTTP_201_CREATED)
async def register_seller(registration: SellerRegistration):
    """Submit a seller application. No tokens are issued until an admin approves it."""
    try:
        repo = UserRepository()
        application = repo.create_seller_application(registration, hash_password(registration.password))

        logger.info(f"Seller application {application['application_id']} submitted for {registration.email}")
        return {
            "success": True,
            "message": REGISTRATION_MESSAGE,
            "application": {
                "id": application["application_id"],
                "user_id": application["user_id"],
                "email": registration.email,
                "first_name": registration.first_name,
                "last_name": registration.last_name,
                "company_name": registration.company_name,
                "status": application["status"],
                "created_at": application["created_at"],
                "is_approved": False,
            },
        }

    except EmailAlreadyRegistered as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Seller registration failed: {e}")
        raise HTTPException(status_code=500, detail=f"Error registering seller: {str(e)}")


@router.post("/refresh")
async def refresh(request: RefreshRequest):
    """Rotate a refresh token; the old one stops working"""
    payload = decode_token(request.refresh_token, expected_type=REFRESH_TOKEN_TYPE)

    try:
        repo = UserRepository()
        user = repo.find_by_id(payload["sub"])
        if not user or not user.get("is_active", True):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

        tokens = create_token_pair(_token_claims(user))
        if not repo.rotate_refresh_token(user["id"], request.refresh_token, tokens["refreshToken"], _refresh_expiry()):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

        return tokens

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Token refresh failed: {e}")
        raise HTTPException(status_code=500, detail=f"Error refreshing token: {str(e)}")


@router.post("/logout")
async def logout(current_user: TokenUser = Depends(get_current_user)):
    try:
        UserRepository().delete_refresh_tokens(current_user.id)
        return {"message": "Logged out successfully"}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error logging out: {str(e)}")


@router.get("/me")
async def get_me(current_user: TokenUser = Depends(get_current_user)):
    try:
        user = UserRepository().find_by_id(current_user.id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        return {"user": _public_user(user)}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching user: {str(e)}")
