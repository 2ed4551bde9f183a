# 📄 File: profilehub/modules/user_management/application/use_cases/get_user_profile.py
# 🧭 Purpose (Layman Explanation):
# Looks up one user and returns their profile card with discount, features and status
# 🧪 Purpose (Technical Summary):
# GetUserProfile use case: id validation, repository lookup, DTO projection and access analytics
# 🔗 Dependencies:
# UseCase base, UserProfileDTO, shared exceptions and validators
# 🔄 Connected Modules / Calls From:
# users API router (GET /users/{user_id}), application composition

from profilehub.modules.user_management.application.dto.user_profile_dto import UserProfileDTO
from profilehub.modules.user_management.application.use_cases.base import UseCase
from profilehub.shared.core.exceptions import InvalidInputError, UserNotFoundError
from profilehub.shared.utils.validators import is_blank


class GetUserProfile(UseCase):
    """Fetch a single user's profile."""

    async def execute(self, user_id: str) -> UserProfileDTO:
        """
        Get the profile of one user.

        Args:
            user_id: Identifier of the user to view

        Returns:
            UserProfileDTO: Profile with derived fields

        Raises:
            InvalidInputError: If user_id is empty or blank
            UserNotFoundError: If no user has that id
        """
        self._track("user_profile_access_attempt", {"user_id": user_id})

        if is_blank(user_id):
            self._track("user_profile_invalid_id", {"user_id": user_id, "reason": "empty_or_invalid"})
            self._logger.warning("Profile requested without a user id")
            raise InvalidInputError("User ID is required", field="user_id", reason="empty_or_invalid")

        user = await self._user_repository.find_by_id(user_id)

        if user is None:
            self._track("user_profile_not_found", {"user_id": user_id})
            self._logger.warning(f"Profile requested for unknown user {user_id}")
            raise UserNotFoundError(user_id)

        profile = UserProfileDTO.from_entity(user)

        self._track("user_profile_viewed", {
            "user_id": user.id,
            "membership_type": user.membership_type,
            "discount_rate": profile.discount_rate,
            "purchase_count": user.purchase_count,
            "total_spent": user.total_spent,
            "is_premium_eligible": profile.is_premium_eligible,
            "available_features_count": len(profile.available_features),
            "member_since": user.created_at.isoformat(),
        })

        if profile.is_premium_eligible:
            self._track("user_premium_eligible_viewed", {
                "user_id": user.id,
                "purchase_count": user.purchase_count,
                "total_spent": user.total_spent,
                "current_membership": user.membership_type,
            })

        self._logger.log_user_action("view_profile", user.id, resource="user_profile")
        return profile
