# 📄 File: profilehub/modules/user_management/application/dto/user_profile_dto.py
# 🧭 Purpose (Layman Explanation):
# The "profile card" we hand back to callers: the user's details plus their discount,
# unlocked features and a friendly status line, all worked out from the user's data
# 🧪 Purpose (Technical Summary):
# Read-only data transfer object projecting the User entity plus four derived fields
# computed by entity business methods (never stored)
# 🔗 Dependencies:
# pydantic, profilehub.modules.user_management.domain.models.user
# 🔄 Connected Modules / Calls From:
# GetUserProfile, ListUsers, UpdateUserProfile, UpgradeMembership, users API router

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from profilehub.modules.user_management.domain.models.user import MembershipType, User


class UserProfileDTO(BaseModel):
    """
    User profile projection returned by the application layer.

    Derived fields:
    - discount_rate: User.get_discount_rate()
    - available_features: User.get_available_features()
    - status_message: User.get_status_message()
    - is_premium_eligible: User.is_premium_eligible()
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(..., description="Unique user identifier", examples=["1"])
    name: str = Field(..., description="Display name", examples=["Ana Souza"])
    email: str = Field(..., description="Contact email", examples=["ana@example.com"])
    membership_type: MembershipType = Field(..., description="Membership tier", examples=["premium"])
    discount_rate: float = Field(..., ge=0, le=1, description="Purchase discount (0..1)", examples=[0.2])
    available_features: List[str] = Field(
        default_factory=list,
        description="Features the user can access, in catalog order"
    )
    status_message: str = Field(..., description="Membership status text")
    is_premium_eligible: bool = Field(..., description="Meets the premium upgrade thresholds")
    purchase_count: int = Field(..., ge=0)
    total_spent: float = Field(..., ge=0)
    member_since: datetime = Field(..., description="Account creation time")

    @classmethod
    def from_entity(cls, user: User) -> "UserProfileDTO":
        """
        Build the profile projection from a User entity.

        Args:
            user: Domain entity

        Returns:
            UserProfileDTO: Profile with derived fields
        """
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            membership_type=user.membership_type,
            discount_rate=user.get_discount_rate(),
            available_features=user.get_available_features(),
            status_message=user.get_status_message(),
            is_premium_eligible=user.is_premium_eligible(),
            purchase_count=user.purchase_count,
            total_spent=user.total_spent,
            member_since=user.created_at,
        )
