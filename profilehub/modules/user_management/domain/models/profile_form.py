# 📄 File: profilehub/modules/user_management/domain/models/profile_form.py
# 🧭 Purpose (Layman Explanation):
# The rules for the "edit my profile" form - what counts as an acceptable name and email
# before we even try to save anything
# 🧪 Purpose (Technical Summary):
# Pydantic schema for edit-profile form input; each field reports only its first failing rule
# 🔗 Dependencies:
# pydantic, profilehub.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# FormValidationService, users API router (PUT /users/{user_id})

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from profilehub.shared.utils.validators import validate_email_address, validate_person_name


class EditProfileForm(BaseModel):
    """
    Edit-profile form data.

    - name: 2-50 characters, letters, spaces and accented letters only
    - email: valid email shape, at most 100 characters
    """

    model_config = ConfigDict(validate_default=True)

    name: str = Field(default="", description="Display name", examples=["Ana Souza"])
    email: str = Field(default="", description="Contact email", examples=["ana@example.com"])

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        result = validate_person_name(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return result.value

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        result = validate_email_address(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return result.value
