# 📄 File: profilehub/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data models - what we store about a user and what the profile form accepts
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models: the User entity with its membership rules and the
# edit-profile form schema
# 🔗 Dependencies:
# Domain model classes, pydantic
# 🔄 Connected Modules / Calls From:
# Use cases, DTOs, repositories, form validation service

"""
User Management Domain Models

Models:
- User: Immutable user entity with discount, feature and eligibility rules
- EditProfileForm: Input schema for the profile editing form
"""

from .user import (
    User,
    MembershipType,
    FEATURE_CATALOG,
    PREMIUM_ONLY_FEATURES,
    ELIGIBILITY_PURCHASE_THRESHOLD,
    ELIGIBILITY_SPEND_THRESHOLD,
)
from .profile_form import EditProfileForm

__all__ = [
    "User",
    "MembershipType",
    "FEATURE_CATALOG",
    "PREMIUM_ONLY_FEATURES",
    "ELIGIBILITY_PURCHASE_THRESHOLD",
    "ELIGIBILITY_SPEND_THRESHOLD",
    "EditProfileForm",
]
