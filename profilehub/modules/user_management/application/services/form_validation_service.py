# 📄 File: profilehub/modules/user_management/application/services/form_validation_service.py
# 🧭 Purpose (Layman Explanation):
# Checks what someone typed into the "edit profile" form and, if something is wrong,
# gives back one clear message per field
# 🧪 Purpose (Technical Summary):
# Synchronous validation service turning pydantic validation failures into a
# field -> first-message mapping, in safe (result object) and strict (raising) variants
# 🔗 Dependencies:
# pydantic, domain.models.profile_form, profilehub.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# users API router, use cases (entity validation error mapping)

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from profilehub.modules.user_management.domain.models.profile_form import EditProfileForm
from profilehub.shared.core.exceptions import ValidationError


def collect_field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    """
    Map a pydantic validation failure to {field: message}.

    Only the first error reported for each field is kept. Custom
    ValueError messages are returned without pydantic's prefix.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field_name = str(loc[0]) if loc else "__root__"
        ctx_error = (error.get("ctx") or {}).get("error")
        if error.get("type") == "value_error" and ctx_error is not None:
            message = str(ctx_error)
        else:
            message = error.get("msg", "Invalid value")
        errors.setdefault(field_name, message)
    return errors


@dataclass
class FormValidationResult:
    """Outcome of a form validation: either data or errors is populated."""
    success: bool
    data: Optional[EditProfileForm] = None
    errors: Dict[str, str] = field(default_factory=dict)


class FormValidationService:
    """Validation entry points for user-facing forms."""

    @staticmethod
    def validate_edit_profile_form(data: Any) -> FormValidationResult:
        """
        Validate edit-profile form input without raising.

        Args:
            data: Raw form mapping (name, email)

        Returns:
            FormValidationResult with the validated form or field errors
        """
        if not isinstance(data, dict):
            return FormValidationResult(
                success=False,
                errors={"__root__": "Form data must be an object"}
            )

        try:
            form = EditProfileForm.model_validate(data)
        except PydanticValidationError as e:
            return FormValidationResult(success=False, errors=collect_field_errors(e))

        return FormValidationResult(success=True, data=form)

    @staticmethod
    def validate_edit_profile_form_strict(data: Any) -> EditProfileForm:
        """
        Validate edit-profile form input.

        Raises:
            ValidationError: With the field -> message mapping
        """
        result = FormValidationService.validate_edit_profile_form(data)
        if not result.success:
            raise ValidationError(message="Profile form validation failed", errors=result.errors)
        return result.data
