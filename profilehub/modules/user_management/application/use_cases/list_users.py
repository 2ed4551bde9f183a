# 📄 File: profilehub/modules/user_management/application/use_cases/list_users.py
# 🧭 Purpose (Layman Explanation):
# Returns the profile cards of all users, optionally narrowed down to e.g. only Premium
# members or only people who bought at least ten times
# 🧪 Purpose (Technical Summary):
# ListUsers use case: optional AND-combined filters over the full repository listing,
# DTO projection and list analytics; repository failures are reported then re-raised unchanged
# 🔗 Dependencies:
# pydantic, UseCase base, UserProfileDTO, domain User model
# 🔄 Connected Modules / Calls From:
# users API router (GET /users), application composition

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from profilehub.modules.user_management.application.dto.user_profile_dto import UserProfileDTO
from profilehub.modules.user_management.application.services.form_validation_service import collect_field_errors
from profilehub.modules.user_management.application.use_cases.base import UseCase
from profilehub.modules.user_management.domain.models.user import MembershipType, User
from profilehub.shared.core.exceptions import InvalidInputError


class ListUsersFilters(BaseModel):
    """Optional list filters; every provided filter must match."""

    model_config = ConfigDict(frozen=True, use_enum_values=True, extra="forbid")

    membership_type: Optional[MembershipType] = Field(default=None, description="Exact membership tier")
    min_purchase_count: Optional[int] = Field(default=None, ge=0, description="Minimum purchases")
    min_total_spent: Optional[float] = Field(default=None, ge=0, description="Minimum lifetime spend")

    def matches(self, user: User) -> bool:
        if self.membership_type is not None and user.membership_type != self.membership_type:
            return False
        if self.min_purchase_count is not None and user.purchase_count < self.min_purchase_count:
            return False
        if self.min_total_spent is not None and user.total_spent < self.min_total_spent:
            return False
        return True


class ListUsers(UseCase):
    """List user profiles with optional filtering."""

    async def execute(
        self,
        filters: Optional[Union[ListUsersFilters, Mapping[str, Any]]] = None
    ) -> List[UserProfileDTO]:
        """
        List all users, optionally filtered.

        Args:
            filters: ListUsersFilters or a mapping with the same keys

        Returns:
            List[UserProfileDTO]: Matching profiles in repository order

        Raises:
            InvalidInputError: If a filter value is malformed
        """
        filters = self._coerce_filters(filters)
        filter_data = filters.model_dump(exclude_none=True, mode="json") if filters else {}

        self._track("users_list_attempt", {
            "filters": filter_data,
            "has_filters": filters is not None,
        })

        try:
            all_users = await self._user_repository.find_all()
        except Exception as e:
            self._track("users_list_error", {"error": str(e), "filters": filter_data})
            self._logger.error(f"Listing users failed: {e}", exc_info=True)
            raise

        self._track("users_list_fetched", {
            "total_users": len(all_users),
            "filters": filter_data,
        })

        filtered_users = all_users
        if filters is not None:
            filtered_users = [user for user in all_users if filters.matches(user)]

            if all_users:
                efficiency = (len(all_users) - len(filtered_users)) / len(all_users) * 100
            else:
                efficiency = 0.0

            self._track("users_list_filtered", {
                "original_count": len(all_users),
                "filtered_count": len(filtered_users),
                "filters": filter_data,
                "filter_efficiency": round(efficiency, 2),
            })

        profiles = [UserProfileDTO.from_entity(user) for user in filtered_users]

        self._track("users_list_completed", {
            "total_users": len(all_users),
            "returned_users": len(profiles),
            "premium_users": sum(1 for p in profiles if p.membership_type == MembershipType.PREMIUM),
            "free_users": sum(1 for p in profiles if p.membership_type == MembershipType.FREE),
            "eligible_for_premium": sum(1 for p in profiles if p.is_premium_eligible),
        })

        self._logger.info(
            f"Listed {len(profiles)} of {len(all_users)} users",
            extra={"filters": filter_data}
        )
        return profiles

    def _coerce_filters(
        self,
        filters: Optional[Union[ListUsersFilters, Mapping[str, Any]]]
    ) -> Optional[ListUsersFilters]:
        if filters is None or isinstance(filters, ListUsersFilters):
            return filters

        try:
            return ListUsersFilters.model_validate(dict(filters))
        except PydanticValidationError as e:
            errors = collect_field_errors(e)
            self._track("users_list_invalid_filters", {"errors": errors})
            raise InvalidInputError("Invalid list filters", reason="invalid_filters", errors=errors)
