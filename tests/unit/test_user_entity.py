"""
Unit tests for the User entity

Covers construction-time validation, discount tiers, feature gating,
premium eligibility and status messages.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from profilehub.modules.user_management.domain.models.user import (
    FEATURE_CATALOG,
    MembershipType,
    User,
)

from tests.factories import make_user


class TestUserConstruction:
    """Test validation performed when a User is built"""

    def test_valid_user_round_trips_fields(self):
        """Test every field reads back as given"""
        created_at = datetime(2022, 7, 1, 9, 30, tzinfo=timezone.utc)
        user = User(
            id="42",
            email="lucas@example.com",
            name="Lucas Pereira",
            membership_type=MembershipType.PREMIUM,
            purchase_count=17,
            total_spent=812.35,
            created_at=created_at,
        )

        assert user.id == "42"
        assert user.email == "lucas@example.com"
        assert user.name == "Lucas Pereira"
        assert user.membership_type == MembershipType.PREMIUM
        assert user.purchase_count == 17
        assert user.total_spent == 812.35
        assert user.created_at == created_at

    def test_defaults(self):
        """Test purchase_count, total_spent and created_at defaults"""
        before = datetime.now(timezone.utc)
        user = User(id="1", email="a@example.com", name="Ana", membership_type="free")

        assert user.purchase_count == 0
        assert user.total_spent == 0
        assert user.created_at >= before

    def test_email_is_normalized(self):
        """Test email is stripped and lower-cased"""
        user = make_user(email="  Ana.Souza@Example.COM ")
        assert user.email == "ana.souza@example.com"

    @pytest.mark.parametrize("overrides", [
        {"id": ""},
        {"id": "   "},
        {"email": "not-an-email"},
        {"name": "A"},
        {"membership_type": "gold"},
        {"purchase_count": -1},
        {"total_spent": -0.01},
    ])
    def test_invalid_data_fails_construction(self, overrides):
        """Test any invalid attribute rejects the whole entity"""
        with pytest.raises(ValidationError):
            make_user(**overrides)

    def test_unknown_fields_rejected(self):
        """Test extra attributes are not silently accepted"""
        with pytest.raises(ValidationError):
            make_user(nickname="ana")

    def test_user_is_immutable(self):
        """Test attributes cannot be reassigned"""
        user = make_user()
        with pytest.raises(ValidationError):
            user.name = "Someone Else"

    def test_with_changes_returns_new_user(self):
        """Test with_changes keeps the id and leaves the original untouched"""
        user = make_user(name="Ana Souza")
        renamed = user.with_changes(name="Ana Maria")

        assert renamed is not user
        assert renamed.id == user.id
        assert renamed.name == "Ana Maria"
        assert user.name == "Ana Souza"
        assert renamed.created_at == user.created_at

    def test_with_changes_revalidates(self):
        """Test replacement values go through the same validation"""
        with pytest.raises(ValidationError):
            make_user().with_changes(name="X")

    def test_from_raw_accepts_alternate_keys(self):
        """Test reconstruction from upstream-shaped data"""
        user = User.from_raw({
            "id": "7",
            "email": "Olivia@Example.com",
            "full_name": "Olivia Torres",
            "plan": "premium",
            "orders_count": 12,
            "lifetime_value": 640.5,
            "created_at": "2023-04-01T10:00:00+00:00",
        })

        assert user.name == "Olivia Torres"
        assert user.email == "olivia@example.com"
        assert user.membership_type == MembershipType.PREMIUM
        assert user.purchase_count == 12
        assert user.total_spent == 640.5
        assert user.created_at.year == 2023

    def test_from_raw_defaults(self):
        """Test missing optional keys fall back to constructor defaults"""
        user = User.from_raw({"id": "8", "email": "p@example.com", "name": "Pablo"})

        assert user.membership_type == MembershipType.FREE
        assert user.purchase_count == 0
        assert user.total_spent == 0

    def test_to_dict_is_json_friendly(self):
        """Test to_dict serializes enums and timestamps"""
        data = make_user(membership_type=MembershipType.PREMIUM).to_dict()

        assert data["membership_type"] == "premium"
        assert isinstance(data["created_at"], str)


class TestDiscountRate:
    """Test premium discount tiers"""

    def test_free_user_gets_no_discount(self):
        user = make_user(purchase_count=500, total_spent=99999)
        assert user.get_discount_rate() == 0

    def test_premium_base_discount(self):
        user = make_user(membership_type=MembershipType.PREMIUM, purchase_count=5, total_spent=100)
        assert user.get_discount_rate() == 0.15

    def test_premium_loyalty_bonus(self):
        user = make_user(membership_type=MembershipType.PREMIUM, purchase_count=50, total_spent=100)
        assert user.get_discount_rate() == 0.2

    def test_premium_high_value_bonus(self):
        user = make_user(membership_type=MembershipType.PREMIUM, purchase_count=5, total_spent=1000)
        assert user.get_discount_rate() == 0.2

    def test_premium_both_bonuses(self):
        """Test 60 purchases and $1200 spent yields 25%"""
        user = make_user(membership_type=MembershipType.PREMIUM, purchase_count=60, total_spent=1200)
        assert user.get_discount_rate() == 0.25


class TestFeatureAccess:
    """Test feature gating by membership"""

    def test_free_user_denied_premium_features(self):
        user = make_user()
        for feature in ("advanced-analytics", "export-data", "priority-support", "custom-themes", "api-access"):
            assert user.can_access_feature(feature) is False

    def test_free_user_allowed_unknown_feature(self):
        assert make_user().can_access_feature("beta-widget") is True

    def test_free_user_available_features(self):
        features = make_user().get_available_features()

        assert features == ["basic-dashboard", "user-profile", "basic-reports"]
        assert "export-data" not in features

    def test_premium_user_gets_full_catalog(self):
        user = make_user(membership_type=MembershipType.PREMIUM)
        assert user.get_available_features() == list(FEATURE_CATALOG)
        assert len(user.get_available_features()) == 8


class TestPremiumEligibility:
    """Test the purchase/spend eligibility thresholds"""

    @pytest.mark.parametrize("purchase_count,total_spent,expected", [
        (10, 0, True),
        (0, 500, True),
        (9, 499.99, False),
        (0, 0, False),
        (25, 2500, True),
    ])
    def test_thresholds(self, purchase_count, total_spent, expected):
        user = make_user(purchase_count=purchase_count, total_spent=total_spent)
        assert user.is_premium_eligible() is expected


class TestStatusMessage:
    """Test membership status text"""

    def test_premium_message_uses_creation_year(self):
        user = make_user(membership_type=MembershipType.PREMIUM)
        assert user.get_status_message() == "Premium member since 2023"

    def test_eligible_message(self):
        user = make_user(purchase_count=10)
        assert user.get_status_message() == "Eligible for Premium upgrade!"

    def test_purchases_needed_message(self):
        """Test 7 purchases is less effort than $490 (9.8 purchase equivalents)"""
        user = make_user(purchase_count=3, total_spent=10)
        assert user.get_status_message() == "7 more purchases to unlock Premium"

    def test_spending_needed_message(self):
        """Test $20 is less effort than 10 purchases"""
        user = make_user(purchase_count=0, total_spent=480)
        assert user.get_status_message() == "$20.00 more spending to unlock Premium"

    def test_tie_prefers_purchases_message(self):
        """Test 10 purchases vs $500 (10 equivalents) favours purchases"""
        user = make_user(purchase_count=0, total_spent=0)
        assert user.get_status_message() == "10 more purchases to unlock Premium"
