"""
Tests for /api/marketing endpoints

Author: Amzify Team
Date: 2025-11-12
"""
from datetime import date
from decimal import Decimal
from unittest.mock import patch

from seller_panel.domain.marketing import Campaign


class TestCampaigns:

    @patch('seller_panel.api.marketing.CampaignRepository')
    def test_create_campaign(self, mock_repo_class, client, seller_headers):
        mock_repo_class.return_value.create.return_value = Campaign(
            id="camp-1", seller_id="seller-1", name="Diwali Sale", value=Decimal("20"), start_date=date(2025, 11, 1)
        )

        response = client.post(
            "/api/marketing/campaigns",
            json={"name": "Diwali Sale", "value": 20, "start_date": "2025-11-01"},
            headers=seller_headers,
        )

        assert response.status_code == 201
        assert response.json()["campaign"]["value"] == 20.0

    @patch('seller_panel.api.marketing.CampaignRepository')
    def test_percentage_over_100_is_rejected(self, mock_repo_class, client, seller_headers):
        response = client.post(
            "/api/marketing/campaigns", json={"name": "Too good", "value": 150}, headers=seller_headers
        )

        assert response.status_code == 422
        mock_repo_class.return_value.create.assert_not_called()

    @patch('seller_panel.api.marketing.CampaignRepository')
    def test_delete_foreign_campaign(self, mock_repo_class, client, seller_headers):
        mock_repo_class.return_value.delete.return_value = False

        response = client.delete("/api/marketing/campaigns/camp-9", headers=seller_headers)

        assert response.status_code == 404
        mock_repo_class.return_value.delete.assert_called_once_with("camp-9", "seller-1")
