# 📄 File: profilehub/modules/user_management/presentation/api/schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the web endpoints accept, so the API documentation shows the right fields
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for the users API. Profile edits are validated by the
# edit-profile form service so field messages match the form rules exactly
# 🔗 Dependencies:
# pydantic, domain MembershipType
# 🔄 Connected Modules / Calls From:
# profilehub.modules.user_management.presentation.api.v1.users

from pydantic import BaseModel, Field

from profilehub.modules.user_management.domain.models.user import MembershipType


class ProfileUpdateRequest(BaseModel):
    """Edit-profile form body (documentation schema)."""

    name: str = Field(..., description="Display name", examples=["Ana Souza"])
    email: str = Field(..., description="Contact email", examples=["ana@example.com"])


class MembershipUpgradeRequest(BaseModel):
    """Membership upgrade body. Only premium is accepted."""

    target_membership_type: str = Field(
        default=MembershipType.PREMIUM.value,
        description="Requested membership tier",
        examples=["premium"]
    )
