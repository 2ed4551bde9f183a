# 📄 File: profilehub/modules/user_management/application/use_cases/upgrade_membership.py
# 🧭 Purpose (Layman Explanation):
# Moves a free user to Premium, but only if they have bought enough or spent enough
# 🧪 Purpose (Technical Summary):
# UpgradeMembership use case implementing the free -> premium transition with eligibility gating,
# persistence of the replacement entity and conversion analytics
# 🔗 Dependencies:
# pydantic, UseCase base, UserProfileDTO, domain User model, shared exceptions
# 🔄 Connected Modules / Calls From:
# users API router (POST /users/{user_id}/upgrade), application composition

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from profilehub.modules.user_management.application.dto.user_profile_dto import UserProfileDTO
from profilehub.modules.user_management.application.use_cases.base import UseCase
from profilehub.modules.user_management.domain.models.user import (
    ELIGIBILITY_PURCHASE_THRESHOLD,
    ELIGIBILITY_SPEND_THRESHOLD,
    MembershipType,
)
from profilehub.shared.core.exceptions import (
    AlreadyPremiumError,
    InvalidInputError,
    NotEligibleError,
    UserNotFoundError,
)
from profilehub.shared.utils.validators import is_blank


class UpgradeMembershipRequest(BaseModel):
    """Membership upgrade request. Only premium is a valid target."""

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = Field(default=None, description="User to upgrade")
    target_membership_type: Any = Field(
        default=MembershipType.PREMIUM.value,
        description="Requested membership tier"
    )

    @field_validator("target_membership_type", mode="before")
    @classmethod
    def unwrap_enum(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            return v.value
        return v


class UpgradeMembership(UseCase):
    """Upgrade an eligible free member to premium."""

    async def execute(self, request: UpgradeMembershipRequest) -> UserProfileDTO:
        """
        Upgrade a membership.

        Args:
            request: Upgrade request

        Returns:
            UserProfileDTO: Profile after the upgrade

        Raises:
            InvalidInputError: If user_id is missing or the target is not premium
            UserNotFoundError: If the user does not exist
            AlreadyPremiumError: If the user is already premium
            NotEligibleError: If the user does not meet the thresholds
        """
        user_id = request.user_id
        target = request.target_membership_type

        self._track("membership_upgrade_attempt", {
            "user_id": user_id,
            "target_membership_type": target,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

        if is_blank(user_id):
            self._track("membership_upgrade_invalid_id", {"user_id": user_id, "reason": "missing_user_id"})
            raise InvalidInputError("User ID is required", field="user_id", reason="missing_user_id")

        if target != MembershipType.PREMIUM.value:
            self._track("membership_upgrade_invalid_type", {
                "user_id": user_id,
                "target_membership_type": target,
                "reason": "only_premium_supported",
            })
            raise InvalidInputError(
                "Only premium membership is supported for upgrades",
                field="target_membership_type",
                reason="only_premium_supported"
            )

        existing_user = await self._user_repository.find_by_id(user_id)

        if existing_user is None:
            self._track("membership_upgrade_user_not_found", {"user_id": user_id})
            self._logger.warning(f"Upgrade requested for unknown user {user_id}")
            raise UserNotFoundError(user_id)

        if existing_user.is_premium():
            self._track("membership_upgrade_already_premium", {
                "user_id": user_id,
                "current_membership": existing_user.membership_type,
                "purchase_count": existing_user.purchase_count,
                "total_spent": existing_user.total_spent,
            })
            self._logger.log_user_action("upgrade_membership", user_id, result="already_premium")
            raise AlreadyPremiumError(user_id)

        if not existing_user.is_premium_eligible():
            self._track("membership_upgrade_not_eligible", {
                "user_id": user_id,
                "current_membership": existing_user.membership_type,
                "purchase_count": existing_user.purchase_count,
                "total_spent": existing_user.total_spent,
                "required_purchases": ELIGIBILITY_PURCHASE_THRESHOLD,
                "required_spent": ELIGIBILITY_SPEND_THRESHOLD,
            })
            self._logger.log_user_action("upgrade_membership", user_id, result="not_eligible")
            raise NotEligibleError(
                user_id=user_id,
                purchase_count=existing_user.purchase_count,
                total_spent=existing_user.total_spent,
                required_purchases=ELIGIBILITY_PURCHASE_THRESHOLD,
                required_spent=ELIGIBILITY_SPEND_THRESHOLD,
            )

        eligibility_reason = (
            "purchase_count"
            if existing_user.purchase_count >= ELIGIBILITY_PURCHASE_THRESHOLD
            else "total_spent"
        )
        self._track("membership_upgrade_eligible_confirmed", {
            "user_id": user_id,
            "current_membership": existing_user.membership_type,
            "purchase_count": existing_user.purchase_count,
            "total_spent": existing_user.total_spent,
            "eligibility_reason": eligibility_reason,
        })

        upgraded_user = existing_user.with_changes(membership_type=MembershipType.PREMIUM)
        await self._user_repository.save(upgraded_user)

        profile = UserProfileDTO.from_entity(upgraded_user)

        self._track("membership_upgrade_successful", {
            "user_id": user_id,
            "previous_membership": existing_user.membership_type,
            "new_membership": upgraded_user.membership_type,
            "purchase_count": upgraded_user.purchase_count,
            "total_spent": upgraded_user.total_spent,
            "upgrade_timestamp": datetime.now(timezone.utc).isoformat(),
            "available_features_count": len(profile.available_features),
            "discount_rate": profile.discount_rate,
        })

        self._track("premium_conversion", {
            "user_id": user_id,
            "conversion_source": "manual_upgrade",
            "time_to_conversion_days": _days_since(existing_user.created_at),
            "purchase_count": upgraded_user.purchase_count,
            "total_spent": upgraded_user.total_spent,
        })

        self._logger.log_user_action(
            "upgrade_membership", user_id, resource="membership",
            extra={"eligibility_reason": eligibility_reason}
        )
        return profile


def _days_since(moment: datetime) -> int:
    # Naive timestamps are treated as UTC
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return max(0, (datetime.now(timezone.utc) - moment).days)
