# 📄 File: profilehub/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web endpoint the user operation it needs, already connected to storage and reporting
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies resolving composed use cases from app.state.user_management
# 🔗 Dependencies:
# FastAPI Request, profilehub.bootstrap.UserManagementServices
# 🔄 Connected Modules / Calls From:
# profilehub.modules.user_management.presentation.api.v1.users

from fastapi import Request

from profilehub.bootstrap import UserManagementServices
from profilehub.modules.user_management.application.use_cases import (
    GetUserProfile,
    ListUsers,
    UpdateUserProfile,
    UpgradeMembership,
)


def get_user_management(request: Request) -> UserManagementServices:
    """Composed services attached by the application factory."""
    return request.app.state.user_management


def get_user_profile_use_case(request: Request) -> GetUserProfile:
    return get_user_management(request).get_user_profile


def get_list_users_use_case(request: Request) -> ListUsers:
    return get_user_management(request).list_users


def get_update_user_profile_use_case(request: Request) -> UpdateUserProfile:
    return get_user_management(request).update_user_profile


def get_upgrade_membership_use_case(request: Request) -> UpgradeMembership:
    return get_user_management(request).upgrade_membership
