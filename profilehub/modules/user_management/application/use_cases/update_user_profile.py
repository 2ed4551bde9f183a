# 📄 File: profilehub/modules/user_management/application/use_cases/update_user_profile.py
# 🧭 Purpose (Layman Explanation):
# Changes a user's name and/or email, making sure nobody else already uses that email
# 🧪 Purpose (Technical Summary):
# UpdateUserProfile use case: request validation, replacement-entity construction with only
# the provided fields changed, email-conflict check on the normalized address, persistence
# and change analytics
# 🔗 Dependencies:
# pydantic, UseCase base, UserProfileDTO, shared exceptions and validators
# 🔄 Connected Modules / Calls From:
# users API router (PUT /users/{user_id}), application composition

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from profilehub.modules.user_management.application.dto.user_profile_dto import UserProfileDTO
from profilehub.modules.user_management.application.use_cases.base import UseCase
from profilehub.shared.core.exceptions import ConflictError, InvalidInputError, UserNotFoundError
from profilehub.shared.utils.validators import is_blank


class UpdateUserProfileRequest(BaseModel):
    """
    Profile update request.

    Fields left as None keep their current value.
    """

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = Field(default=None, description="User to update")
    name: Optional[str] = Field(default=None, description="New display name")
    email: Optional[str] = Field(default=None, description="New email address")


class UpdateUserProfile(UseCase):
    """Update a user's name and/or email."""

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileDTO:
        """
        Apply a profile update.

        Args:
            request: Update request

        Returns:
            UserProfileDTO: Profile after the update

        Raises:
            InvalidInputError: If user_id is missing or the new values are invalid
            UserNotFoundError: If the user does not exist
            ConflictError: If the email belongs to a different user
        """
        user_id = request.user_id

        self._track("user_profile_update_attempt", {
            "user_id": user_id,
            "fields_to_update": {
                "name": request.name is not None,
                "email": request.email is not None,
            },
        })

        if is_blank(user_id):
            self._track("user_profile_update_invalid_id", {"user_id": user_id, "reason": "missing_user_id"})
            raise InvalidInputError("User ID is required", field="user_id", reason="missing_user_id")

        existing_user = await self._user_repository.find_by_id(user_id)

        if existing_user is None:
            self._track("user_profile_update_not_found", {"user_id": user_id})
            self._logger.warning(f"Update requested for unknown user {user_id}")
            raise UserNotFoundError(user_id)

        changes = {}
        if request.name is not None:
            changes["name"] = request.name
        if request.email is not None:
            changes["email"] = request.email

        try:
            updated_user = existing_user.with_changes(**changes)
        except PydanticValidationError as e:
            self._track("user_profile_update_invalid_data", {"user_id": user_id})
            raise self._invalid_entity(e, user_id)

        # Uniqueness is checked on the address the entity will actually store
        if updated_user.email != existing_user.email:
            user_with_email = await self._user_repository.find_by_email(updated_user.email)
            if user_with_email is not None and user_with_email.id != user_id:
                self._track("user_profile_update_email_conflict", {
                    "user_id": user_id,
                    "requested_email": updated_user.email,
                    "existing_user_with_email": user_with_email.id,
                })
                self._logger.log_user_action(
                    "update_profile", user_id, resource="email", result="email_conflict"
                )
                raise ConflictError(
                    "Email is already taken",
                    resource_type="user",
                    conflict_field="email",
                    existing_value=updated_user.email
                )

        changed_fields = {
            "name": updated_user.name != existing_user.name,
            "email": updated_user.email != existing_user.email,
        }

        await self._user_repository.save(updated_user)

        self._track("user_profile_updated", {
            "user_id": user_id,
            "changed_fields": changed_fields,
            "previous_values": {"name": existing_user.name, "email": existing_user.email},
            "new_values": {"name": updated_user.name, "email": updated_user.email},
            "membership_type": updated_user.membership_type,
            "update_timestamp": datetime.now(timezone.utc).isoformat(),
        })

        if changed_fields["name"]:
            self._track("user_name_updated", {
                "user_id": user_id,
                "previous_name": existing_user.name,
                "new_name": updated_user.name,
            })

        if changed_fields["email"]:
            self._track("user_email_updated", {
                "user_id": user_id,
                "previous_email": existing_user.email,
                "new_email": updated_user.email,
            })

        self._logger.log_user_action(
            "update_profile", user_id, resource="user_profile",
            extra={"changed_fields": changed_fields}
        )
        return UserProfileDTO.from_entity(updated_user)
