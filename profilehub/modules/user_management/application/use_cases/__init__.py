# 📄 File: profilehub/modules/user_management/application/use_cases/__init__.py
# 🧭 Purpose (Layman Explanation):
# The four things you can do with users: view one, list them, edit one, upgrade one
# 🧪 Purpose (Technical Summary):
# Use case exports for the user management application layer
# 🔗 Dependencies:
# Use case modules
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, users API router, tests

from .base import UseCase
from .get_user_profile import GetUserProfile
from .list_users import ListUsers, ListUsersFilters
from .update_user_profile import UpdateUserProfile, UpdateUserProfileRequest
from .upgrade_membership import UpgradeMembership, UpgradeMembershipRequest

__all__ = [
    "UseCase",
    "GetUserProfile",
    "ListUsers",
    "ListUsersFilters",
    "UpdateUserProfile",
    "UpdateUserProfileRequest",
    "UpgradeMembership",
    "UpgradeMembershipRequest",
]
