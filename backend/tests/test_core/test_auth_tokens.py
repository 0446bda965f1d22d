"""
Unit tests for token handling, password hashing and role checks

Author: Amzify Team
Date: 2025-11-12
"""
import asyncio
from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from seller_panel.core.auth import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    TokenUser,
    _create_token,
    create_token_pair,
    decode_token,
    get_current_user,
    hash_password,
    require_seller,
    verify_password,
)

USER = {"id": "seller-1", "email": "seller@example.com", "role": "seller", "name": "Asha Rao"}


class TestTokens:

    def test_token_pair_types(self):
        tokens = create_token_pair(USER)

        assert decode_token(tokens["accessToken"])["type"] == ACCESS_TOKEN_TYPE
        assert decode_token(tokens["refreshToken"], REFRESH_TOKEN_TYPE)["sub"] == "seller-1"

    def test_refresh_token_is_not_an_access_token(self):
        tokens = create_token_pair(USER)

        with pytest.raises(HTTPException) as exc:
            decode_token(tokens["refreshToken"])

        assert exc.value.status_code == 401
        assert exc.value.detail == "Invalid token type"

    def test_expired_token(self):
        token = _create_token(USER, ACCESS_TOKEN_TYPE, timedelta(seconds=-5))

        with pytest.raises(HTTPException) as exc:
            decode_token(token)

        assert exc.value.detail == "Token expired"

    def test_garbage_token(self):
        with pytest.raises(HTTPException) as exc:
            decode_token("not.a.jwt")

        assert exc.value.status_code == 401

    def test_get_current_user_from_bearer(self):
        token = create_token_pair(USER)["accessToken"]
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)

        user = asyncio.run(get_current_user(credentials))

        assert user == TokenUser(id="seller-1", email="seller@example.com", role="seller", name="Asha Rao")

    def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc:
            asyncio.run(get_current_user(None))

        assert exc.value.detail == "Access token required"

    def test_role_checker_rejects_other_roles(self):
        admin = TokenUser(id="admin-1", email="admin@example.com", role="admin")

        with pytest.raises(HTTPException) as exc:
            asyncio.run(require_seller(admin))

        assert exc.value.status_code == 403


class TestPasswords:

    def test_hash_and_verify(self):
        password_hash = hash_password("s3cretpass")

        assert password_hash != "s3cretpass"
        assert verify_password("s3cretpass", password_hash)
        assert not verify_password("wrong-pass", password_hash)
