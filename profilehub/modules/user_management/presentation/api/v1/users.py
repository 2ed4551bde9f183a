# 📄 File: profilehub/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for viewing users, editing a profile and upgrading to Premium
#
# 🧪 Purpose (Technical Summary):
# FastAPI users router translating HTTP input into use-case requests and DTOs into JSON.
# Domain errors are raised unchanged and rendered by the application exception handlers
#
# 🔗 Dependencies:
# - FastAPI router, Query/Body parameters
# - user_management application use cases, DTO and form validation service
# - profilehub.modules.user_management.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - profilehub.main (router inclusion under API_PREFIX)
# - API integration tests

"""
Users API Endpoints

Endpoints:
- GET /users: List user profiles, optionally filtered
- GET /users/{user_id}: Get one user profile
- PUT /users/{user_id}: Update name and email from the edit-profile form
- POST /users/{user_id}/upgrade: Upgrade an eligible user to premium
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from profilehub.modules.user_management.application.dto.user_profile_dto import UserProfileDTO
from profilehub.modules.user_management.application.services.form_validation_service import FormValidationService
from profilehub.modules.user_management.application.use_cases import (
    GetUserProfile,
    ListUsers,
    ListUsersFilters,
    UpdateUserProfile,
    UpdateUserProfileRequest,
    UpgradeMembership,
    UpgradeMembershipRequest,
)
from profilehub.modules.user_management.domain.models.user import MembershipType
from profilehub.modules.user_management.presentation.api.schemas import (
    MembershipUpgradeRequest,
    ProfileUpdateRequest,
)
from profilehub.modules.user_management.presentation.dependencies import (
    get_list_users_use_case,
    get_update_user_profile_use_case,
    get_upgrade_membership_use_case,
    get_user_profile_use_case,
)

users_router = APIRouter(prefix="/users", tags=["Users"])

_ERROR_RESPONSES = {
    400: {"description": "Invalid input"},
    404: {"description": "User not found"},
}


@users_router.get(
    "",
    response_model=List[UserProfileDTO],
    summary="List users",
    description="List user profiles; every provided filter must match",
)
async def list_users(
    membership_type: Optional[MembershipType] = Query(None, description="Exact membership tier"),
    min_purchase_count: Optional[int] = Query(None, ge=0, description="Minimum purchases"),
    min_total_spent: Optional[float] = Query(None, ge=0, description="Minimum lifetime spend"),
    use_case: ListUsers = Depends(get_list_users_use_case),
) -> List[UserProfileDTO]:
    filters = None
    if membership_type is not None or min_purchase_count is not None or min_total_spent is not None:
        filters = ListUsersFilters(
            membership_type=membership_type,
            min_purchase_count=min_purchase_count,
            min_total_spent=min_total_spent,
        )
    return await use_case.execute(filters)


@users_router.get(
    "/{user_id}",
    response_model=UserProfileDTO,
    summary="Get user profile",
    responses=_ERROR_RESPONSES,
)
async def get_user_profile(
    user_id: str,
    use_case: GetUserProfile = Depends(get_user_profile_use_case),
) -> UserProfileDTO:
    return await use_case.execute(user_id)


@users_router.put(
    "/{user_id}",
    response_model=UserProfileDTO,
    summary="Update user profile",
    description="Validate the edit-profile form and apply the new name and email",
    responses={
        **_ERROR_RESPONSES,
        409: {"description": "Email already taken"},
        422: {"description": "Form validation failed"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ProfileUpdateRequest.model_json_schema()}},
        }
    },
)
async def update_user_profile(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    use_case: UpdateUserProfile = Depends(get_update_user_profile_use_case),
) -> UserProfileDTO:
    """
    Update a profile from the edit-profile form.

    The form is validated first so callers get one message per field;
    the use case then checks existence and email uniqueness.
    """
    form = FormValidationService.validate_edit_profile_form_strict(payload)
    request = UpdateUserProfileRequest(user_id=user_id, name=form.name, email=form.email)
    return await use_case.execute(request)


@users_router.post(
    "/{user_id}/upgrade",
    response_model=UserProfileDTO,
    summary="Upgrade membership",
    description="Upgrade a free member who meets the eligibility thresholds to premium",
    responses={
        **_ERROR_RESPONSES,
        409: {"description": "Already premium"},
        422: {"description": "Not eligible for premium"},
    },
)
async def upgrade_membership(
    user_id: str,
    body: Optional[MembershipUpgradeRequest] = None,
    use_case: UpgradeMembership = Depends(get_upgrade_membership_use_case),
) -> UserProfileDTO:
    target = body.target_membership_type if body is not None else MembershipType.PREMIUM.value
    request = UpgradeMembershipRequest(user_id=user_id, target_membership_type=target)
    return await use_case.execute(request)
