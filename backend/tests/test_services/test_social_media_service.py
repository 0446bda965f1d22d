"""
Unit tests for SocialMediaService

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from seller_panel.domain.social import SocialAccount, SocialConnect, SocialPost, SocialPostCreate
from seller_panel.services.social_media_service import SocialMediaService, post_status

NOW = datetime(2025, 11, 12, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def social_repo():
    repo = MagicMock()
    repo.find_accounts.return_value = [
        SocialAccount(platform='instagram', username='raotraders', followers=1200, engagement=4.2),
        SocialAccount(platform='facebook', username='raotraders', followers=800, engagement=2.9),
    ]
    repo.count_posts.return_value = {'published': 5, 'scheduled': 2}
    return repo


@pytest.fixture
def service(social_repo):
    return SocialMediaService(social_repo=social_repo)


class TestPostStatus:

    def test_future_is_scheduled(self):
        assert post_status(datetime(2025, 11, 13, tzinfo=timezone.utc), NOW) == 'scheduled'

    def test_past_or_missing_is_published(self):
        assert post_status(None, NOW) == 'published'
        assert post_status(datetime(2025, 11, 1), NOW) == 'published'


class TestSocialMediaService:

    def test_connect_reads_username_from_credentials(self, service, social_repo):
        social_repo.upsert_account.return_value = SocialAccount(platform='twitter', username='rao')
        request = SocialConnect(platform='Twitter', credentials={'username': 'rao', 'accessToken': 'tok'})

        service.connect('seller-1', request)

        social_repo.upsert_account.assert_called_once_with('seller-1', 'twitter', 'rao', 'tok')

    def test_connect_defaults_username(self, service, social_repo):
        social_repo.upsert_account.return_value = SocialAccount(platform='youtube', username='youtube_account')

        service.connect('seller-1', SocialConnect(platform='youtube'))

        assert social_repo.upsert_account.call_args[0][2] == 'youtube_account'

    def test_unsupported_platform_is_rejected(self):
        with pytest.raises(ValidationError):
            SocialConnect(platform='myspace')

    def test_stats(self, service):
        stats = service.get_stats('seller-1')

        assert stats['connectedPlatforms'] == ['instagram', 'facebook']
        assert stats['totalFollowers'] == 2000
        assert stats['avgEngagement'] == 3.6
        assert stats['postsPublished'] == 5
        assert stats['postsScheduled'] == 2

    def test_average_engagement_rounds_half_up(self, service, social_repo):
        # Arrange
        social_repo.find_accounts.return_value = [
            SocialAccount(platform='instagram', username='rao', engagement=2.2),
            SocialAccount(platform='twitter', username='rao', engagement=2.3),
        ]

        # Act
        stats = service.get_stats('seller-1')

        # Assert
        assert stats['avgEngagement'] == 2.3

    def test_average_engagement_without_accounts(self, service, social_repo):
        social_repo.find_accounts.return_value = []

        assert service.get_stats('seller-1')['avgEngagement'] == 0

    def test_create_post_requires_connected_platforms(self, service, social_repo):
        request = SocialPostCreate(content='New arrivals!', platforms=['instagram', 'linkedin'])

        with pytest.raises(ValueError, match='linkedin'):
            service.create_post('seller-1', request, now=NOW)

        social_repo.create_post.assert_not_called()

    def test_create_scheduled_post(self, service, social_repo):
        scheduled = datetime(2025, 11, 20, 9, 0, tzinfo=timezone.utc)
        social_repo.create_post.return_value = SocialPost(
            id='post-1', content='Sale!', platforms=['instagram'], scheduled_at=scheduled, status='scheduled'
        )

        post = service.create_post(
            'seller-1', SocialPostCreate(content='Sale!', platforms=['instagram'], scheduled_at=scheduled), now=NOW
        )

        assert social_repo.create_post.call_args[0][4] == 'scheduled'
        assert post['status'] == 'scheduled'
