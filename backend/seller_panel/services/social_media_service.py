"""
Social Media Service

Connected accounts, reach statistics and cross-posting for a seller.

Author: Amzify Team
Date: 2025-11-10
"""
import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from seller_panel.domain.social import SocialConnect, SocialPostCreate
from seller_panel.repositories.social_repository import SocialRepository

logger = logging.getLogger(__name__)


def post_status(scheduled_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """`scheduled` for a future time, otherwise `published` immediately"""
    if scheduled_at is None:
        return "published"
    now = now or datetime.now(timezone.utc)
    if scheduled_at.tzinfo is None:
        scheduled_at = scheduled_at.replace(tzinfo=timezone.utc)
    return "scheduled" if scheduled_at > now else "published"


class SocialMediaService:

    def __init__(self, social_repo: Optional[SocialRepository] = None):
        self.social_repo = social_repo or SocialRepository()

    def connect(self, seller_id: str, request: SocialConnect) -> Dict[str, Any]:
        username = request.resolved_username() or f"{request.platform}_account"
        account = self.social_repo.upsert_account(
            seller_id, request.platform, username, request.resolved_token()
        )
        logger.info(f"Seller {seller_id} connected {request.platform}")
        return account.model_dump()

    def disconnect(self, seller_id: str, platform: str) -> bool:
        disconnected = self.social_repo.disconnect(seller_id, platform.lower())
        if disconnected:
            logger.info(f"Seller {seller_id} disconnected {platform}")
        return disconnected

    def get_stats(self, seller_id: str) -> Dict[str, Any]:
        accounts = self.social_repo.find_accounts(seller_id)
        posts = self.social_repo.count_posts(seller_id)

        total_followers = sum(a.followers for a in accounts)
        avg_engagement = 0
        if accounts:
            total = sum(Decimal(str(a.engagement)) for a in accounts)
            avg_engagement = float((total / len(accounts)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

        return {
            "accounts": [a.model_dump() for a in accounts],
            "connectedPlatforms": [a.platform for a in accounts],
            "totalFollowers": total_followers,
            "avgEngagement": avg_engagement,
            "postsPublished": posts["published"],
            "postsScheduled": posts["scheduled"],
        }

    def create_post(self, seller_id: str, request: SocialPostCreate, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Publish or schedule a post on connected platforms

        Raises:
            ValueError: a target platform is not connected
        """
        connected = {a.platform for a in self.social_repo.find_accounts(seller_id)}
        missing = [p for p in request.platforms if p not in connected]
        if missing:
            raise ValueError(f"Platform not connected: {', '.join(missing)}")

        status = post_status(request.scheduled_at, now)
        post = self.social_repo.create_post(
            seller_id, request.content, request.platforms, request.scheduled_at, status
        )
        logger.info(f"Seller {seller_id} {status} post {post.id} on {request.platforms}")
        return post.model_dump()
