# 📄 File: profilehub/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core business rules for users - what makes a valid user and how memberships work
# 🧪 Purpose (Technical Summary):
# Domain layer initialization containing business entities and repository interfaces for user management
# 🔗 Dependencies:
# Domain models and repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Business Rules Enforced:
- Fail-fast validation at entity construction
- Premium discount tiers (15% base, +5% loyalty, +5% high value, 30% cap)
- Feature gating for free members
- Premium eligibility (10+ purchases or 500+ spent)
"""

from .models.user import User, MembershipType
from .models.profile_form import EditProfileForm
from .repositories.user_repository import UserRepository

__all__ = [
    "User",
    "MembershipType",
    "EditProfileForm",
    "UserRepository",
]
