"""
Unit tests for UserRepository, PayoutRepository and SocialRepository

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest

from seller_panel.domain.seller import SellerRegistration
from seller_panel.repositories.payout_repository import PayoutRepository
from seller_panel.repositories.social_repository import SocialRepository
from seller_panel.repositories.user_repository import EmailAlreadyRegistered, UserRepository


@pytest.fixture
def registration():
    return SellerRegistration(
        firstName="Asha",
        lastName="Rao",
        email="Asha@Example.com",
        password="s3cretpass",
        confirmPassword="s3cretpass",
        companyName="Rao Traders",
        gstNumber="27abcde1234f1z5",
        accountNumber="1234567890",
        confirmAccountNumber="1234567890",
    )


class TestUserRepository:

    @patch('seller_panel.repositories.user_repository.get_db_connection_dict')
    def test_create_seller_application_rejects_taken_email(self, mock_get_conn, fake_db, registration):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {'id': 'existing'}

        with pytest.raises(EmailAlreadyRegistered):
            UserRepository().create_seller_application(registration, 'hash')

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()

    @patch('seller_panel.repositories.user_repository.get_db_connection_dict')
    def test_create_seller_application_writes_three_rows(self, mock_get_conn, fake_db, registration):
        """Test user, profile and application are inserted in one transaction"""
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        created = datetime(2025, 11, 12, tzinfo=timezone.utc)
        cursor.fetchone.side_effect = [
            None,
            {'id': 'user-1'},
            {'id': 'app-1', 'status': 'pending', 'created_at': created},
        ]

        result = UserRepository().create_seller_application(registration, 'hash')

        assert result == {'user_id': 'user-1', 'application_id': 'app-1', 'status': 'pending', 'created_at': created}
        assert cursor.execute.call_count == 4
        conn.commit.assert_called_once()

        user_params = cursor.execute.call_args_list[1][0][1]
        assert user_params[0] == 'asha@example.com'
        assert user_params[1] == 'hash'

        payload = cursor.execute.call_args_list[3][0][1][4].adapted
        assert 'password' not in payload
        assert 'confirm_account_number' not in payload
        assert payload['gst_number'] == '27ABCDE1234F1Z5'

    @patch('seller_panel.repositories.user_repository.get_db_connection_dict')
    def test_rotate_refresh_token_refuses_unknown_token(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = None

        rotated = UserRepository().rotate_refresh_token('user-1', 'old', 'new', datetime.now(timezone.utc))

        assert rotated is False
        assert cursor.execute.call_count == 1
        conn.rollback.assert_called_once()

    @patch('seller_panel.repositories.user_repository.get_db_connection_dict')
    def test_rotate_refresh_token_replaces_token(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {'id': 'rt-1'}

        assert UserRepository().rotate_refresh_token('user-1', 'old', 'new', datetime.now(timezone.utc)) is True
        assert cursor.execute.call_args_list[1][0][1][:2] == ('user-1', 'new')
        conn.commit.assert_called_once()


class TestPayoutRepository:

    @patch('seller_panel.repositories.payout_repository.get_db_connection_dict')
    def test_totals_returns_completed_and_pending(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {'completed': Decimal('500'), 'pending': Decimal('100')}

        totals = PayoutRepository().totals('seller-1')

        assert totals['completed'] == Decimal('500')
        assert "FILTER (WHERE status = 'completed')" in cursor.execute.call_args[0][0]

    @patch('seller_panel.repositories.payout_repository.get_db_connection_dict')
    def test_create_inserts_pending_payout(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {
            'id': 'payout-1', 'seller_id': 'seller-1', 'amount': Decimal('250.00'),
            'status': 'pending', 'method': 'bank_transfer', 'reference': 'PAY-1',
            'created_at': datetime(2025, 11, 12),
        }

        payout = PayoutRepository().create('seller-1', Decimal('250.00'), 'bank_transfer', 'PAY-1')

        assert payout.status == 'pending'
        assert payout.to_dict()['amount'] == 250.0
        conn.commit.assert_called_once()


class TestSocialRepository:

    @patch('seller_panel.repositories.social_repository.get_db_connection_dict')
    def test_upsert_account_reconnects(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {
            'platform': 'instagram', 'username': 'raotraders', 'followers': 0,
            'engagement': 0.0, 'connected': True, 'connected_at': datetime(2025, 11, 12),
        }

        account = SocialRepository().upsert_account('seller-1', 'instagram', 'raotraders', 'tok')

        assert account.connected is True
        assert 'ON CONFLICT (seller_id, platform)' in cursor.execute.call_args[0][0]
        conn.commit.assert_called_once()

    @patch('seller_panel.repositories.social_repository.get_db_connection_dict')
    def test_disconnect_reports_missing_account(self, mock_get_conn, fake_db):
        conn, cursor = fake_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = None

        assert SocialRepository().disconnect('seller-1', 'twitter') is False
