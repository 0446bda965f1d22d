"""
Social Media Domain Models

Author: Amzify Team
Date: 2025-11-06
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


SUPPORTED_PLATFORMS = ["facebook", "instagram", "twitter", "linkedin", "youtube"]


def _check_platform(value: str) -> str:
    value = value.strip().lower()
    if value not in SUPPORTED_PLATFORMS:
        raise ValueError(f"Unsupported platform: {value}")
    return value


class SocialAccount(BaseModel):
    platform: str
    username: str
    followers: int = 0
    engagement: float = 0.0
    connected: bool = True
    connected_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SocialConnect(BaseModel):
    """
    Connect request. The dashboard sends `{platform, credentials}`; username
    and token may also be given at the top level.
    """
    platform: str
    username: Optional[str] = None
    access_token: Optional[str] = None
    credentials: Dict[str, Any] = Field(default_factory=dict)

    def resolved_username(self) -> str:
        return self.username or self.credentials.get("username") or self.credentials.get("handle") or ""

    def resolved_token(self) -> Optional[str]:
        return self.access_token or self.credentials.get("access_token") or self.credentials.get("accessToken")

    @field_validator("platform")
    @classmethod
    def check_platform(cls, value: str) -> str:
        return _check_platform(value)


class SocialPost(BaseModel):
    id: str
    content: str
    platforms: List[str]
    scheduled_at: Optional[datetime] = None
    status: str = "published"
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SocialPostCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)
    platforms: List[str] = Field(..., min_length=1)
    scheduled_at: Optional[datetime] = None

    @field_validator("platforms")
    @classmethod
    def check_platforms(cls, value: List[str]) -> List[str]:
        return [_check_platform(p) for p in value]
