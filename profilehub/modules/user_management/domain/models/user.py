# 📄 File: profilehub/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in ProfileHub - their name, email, membership and purchase history -
# and the rules that decide their discount, which features they can use and whether they can go Premium
# 🧪 Purpose (Technical Summary):
# Immutable domain entity for User with construction-time validation and pure business-rule methods
# (discount tiers, feature gating, premium eligibility, status text)
# 🔗 Dependencies:
# pydantic, email-validator (via EmailStr), datetime, decimal, enum
# 🔄 Connected Modules / Calls From:
# use cases, UserProfileDTO, UserRepository implementations, demo seed data

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class MembershipType(str, Enum):
    """Membership tiers a user can hold"""
    FREE = "free"
    PREMIUM = "premium"


# Feature catalog, in display order
FEATURE_CATALOG: tuple = (
    "basic-dashboard",
    "user-profile",
    "basic-reports",
    "advanced-analytics",
    "export-data",
    "priority-support",
    "custom-themes",
    "api-access",
)

PREMIUM_ONLY_FEATURES = frozenset({
    "advanced-analytics",
    "export-data",
    "priority-support",
    "custom-themes",
    "api-access",
})

# Discount tiers (premium only)
PREMIUM_BASE_DISCOUNT = Decimal("0.15")
LOYALTY_BONUS = Decimal("0.05")
LOYALTY_PURCHASE_THRESHOLD = 50
HIGH_VALUE_BONUS = Decimal("0.05")
HIGH_VALUE_SPEND_THRESHOLD = 1000
MAX_DISCOUNT = Decimal("0.30")

# Premium eligibility thresholds
ELIGIBILITY_PURCHASE_THRESHOLD = 10
ELIGIBILITY_SPEND_THRESHOLD = 500
# Spending amount treated as one purchase when comparing upgrade effort
SPEND_PER_PURCHASE = 50


class User(BaseModel):
    """
    User domain entity.

    Fields:
    - id (str): Unique, non-empty identifier
    - email (str): Validated email, stored stripped and lower-cased
    - name (str): Display name, at least 2 characters
    - membership_type (free/premium): Current membership tier
    - purchase_count (int): Number of purchases, >= 0
    - total_spent (float): Lifetime spend, >= 0
    - created_at (datetime): Account creation time, defaults to now (UTC)

    Instances are frozen. Every "update" goes through with_changes(), which
    re-validates and returns a new User carrying the same id.
    """

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        extra="forbid",
    )

    id: str = Field(..., min_length=1, description="Unique user identifier")
    email: EmailStr
    name: str = Field(..., min_length=2, description="Display name")
    membership_type: MembershipType
    purchase_count: int = Field(default=0, ge=0)
    total_spent: float = Field(default=0.0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("ID is required")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        """Convert to lowercase for consistent lookups"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Factories

    @classmethod
    def from_raw(cls, data: Mapping[str, Any]) -> "User":
        """
        Rebuild a user from persisted or external API data.

        Accepts the alternate keys used by upstream systems
        (full_name, plan, orders_count, lifetime_value) and fills
        the same defaults as the constructor.

        Args:
            data: Raw attribute mapping

        Returns:
            Validated User instance
        """
        attributes: Dict[str, Any] = {
            "id": data.get("id"),
            "email": data.get("email"),
            "name": data.get("name") or data.get("full_name"),
            "membership_type": data.get("membership_type") or data.get("plan") or MembershipType.FREE,
            "purchase_count": data.get("purchase_count") or data.get("orders_count") or 0,
            "total_spent": data.get("total_spent") or data.get("lifetime_value") or 0,
        }
        if data.get("created_at"):
            attributes["created_at"] = data["created_at"]

        return cls.model_validate(attributes)

    def with_changes(self, **changes: Any) -> "User":
        """
        Return a new validated User with the given fields replaced.

        Raises:
            pydantic.ValidationError: If any resulting field is invalid
        """
        return type(self).model_validate({**self.model_dump(), **changes})

    # Business rules

    def is_premium(self) -> bool:
        return self.membership_type == MembershipType.PREMIUM

    def get_discount_rate(self) -> float:
        """
        Discount applied to purchases.

        Premium members get 15%, plus 5% at 50+ purchases and 5% at
        1000+ spent, capped at 30%. Free members get nothing.
        """
        if not self.is_premium():
            return 0.0

        discount = PREMIUM_BASE_DISCOUNT
        if self.purchase_count >= LOYALTY_PURCHASE_THRESHOLD:
            discount += LOYALTY_BONUS
        if self.total_spent >= HIGH_VALUE_SPEND_THRESHOLD:
            discount += HIGH_VALUE_BONUS

        return float(min(discount, MAX_DISCOUNT))

    def can_access_feature(self, feature: str) -> bool:
        """Premium members access everything; free members are denied premium-only features."""
        if self.is_premium():
            return True
        return feature not in PREMIUM_ONLY_FEATURES

    def get_available_features(self) -> List[str]:
        return [feature for feature in FEATURE_CATALOG if self.can_access_feature(feature)]

    def is_premium_eligible(self) -> bool:
        """Users with 10+ purchases or 500+ spent are eligible for premium."""
        return (
            self.purchase_count >= ELIGIBILITY_PURCHASE_THRESHOLD or
            self.total_spent >= ELIGIBILITY_SPEND_THRESHOLD
        )

    def get_status_message(self) -> str:
        """
        Human-readable membership status.

        For ineligible free users, remaining spend is converted into
        purchase equivalents (one per 50 spent) and the smaller effort is
        suggested; ties favour the purchases message.
        """
        if self.is_premium():
            return f"Premium member since {self.created_at.year}"

        if self.is_premium_eligible():
            return "Eligible for Premium upgrade!"

        purchases_needed = max(0, ELIGIBILITY_PURCHASE_THRESHOLD - self.purchase_count)
        spending_needed = max(0, ELIGIBILITY_SPEND_THRESHOLD - self.total_spent)

        if purchases_needed <= spending_needed / SPEND_PER_PURCHASE:
            return f"{purchases_needed} more purchases to unlock Premium"
        return f"${spending_needed:.2f} more spending to unlock Premium"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert user to a JSON-friendly dictionary.

        Returns:
            User data as dictionary
        """
        return self.model_dump(mode="json")
