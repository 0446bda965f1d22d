"""
Unit tests for seller registration and profile validation

Author: Amzify Team
Date: 2025-11-12
"""
import pytest
from pydantic import ValidationError

from seller_panel.domain.marketing import CampaignCreate, CampaignUpdate
from seller_panel.domain.seller import SellerProfileUpdate, SellerRegistration


def _registration(**overrides):
    data = {
        "firstName": "Asha",
        "lastName": "Rao",
        "email": "asha@example.com",
        "password": "s3cretpass",
        "companyName": "Rao Traders",
    }
    data.update(overrides)
    return data


class TestSellerRegistration:

    def test_minimal_registration(self):
        registration = SellerRegistration(**_registration())

        assert registration.business_type == "Individual/Sole Proprietor"
        assert registration.gst_number == ""

    def test_snake_case_fields_are_accepted(self):
        registration = SellerRegistration(
            first_name="Asha", last_name="Rao", email="asha@example.com",
            password="s3cretpass", company_name="Rao Traders",
        )

        assert registration.company_name == "Rao Traders"

    def test_identifiers_are_normalised_to_upper_case(self):
        registration = SellerRegistration(**_registration(
            gstNumber="27abcde1234f1z5", panNumber="abcde1234f", ifscCode="sbin0001234",
        ))

        assert registration.gst_number == "27ABCDE1234F1Z5"
        assert registration.pan_number == "ABCDE1234F"
        assert registration.ifsc_code == "SBIN0001234"

    @pytest.mark.parametrize("field,value", [
        ("phone", "5123456789"),
        ("phone", "98765"),
        ("gstNumber", "27ABCDE1234F1X5"),
        ("panNumber", "ABCD1234F"),
        ("postalCode", "56001"),
        ("ifscCode", "SBIN1001234"),
        ("password", "short"),
        ("companyName", "   "),
        ("email", "not-an-email"),
    ])
    def test_invalid_values_are_rejected(self, field, value):
        with pytest.raises(ValidationError):
            SellerRegistration(**_registration(**{field: value}))

    def test_password_confirmation_must_match(self):
        with pytest.raises(ValidationError, match="Passwords do not match"):
            SellerRegistration(**_registration(confirmPassword="different1"))

    def test_account_number_confirmation_must_match(self):
        with pytest.raises(ValidationError, match="Account numbers do not match"):
            SellerRegistration(**_registration(accountNumber="12345678", confirmAccountNumber="87654321"))

    def test_profile_update_only_reports_sent_fields(self):
        update = SellerProfileUpdate(companyName="Rao & Sons", city="Pune")

        assert update.changes() == {"company_name": "Rao & Sons", "city": "Pune"}


class TestCampaigns:

    def test_percentage_above_hundred(self):
        with pytest.raises(ValidationError):
            CampaignCreate(name="Diwali", discount_type="PERCENTAGE", value=120)

    def test_fixed_discount_may_exceed_hundred(self):
        assert CampaignCreate(name="Flat 500", discount_type="FIXED", value=500).value == 500

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            CampaignUpdate(start_date="2025-11-10", end_date="2025-11-01")
