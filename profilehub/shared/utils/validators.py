# 📄 File: profilehub/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Small checkers that make sure the data typed into the app is correct,
# like verifying an email address looks real or a name only has letters.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects with ordered error
# messages, used by the edit-profile form and by request-shape checks in the use cases.
# 🔗 Dependencies:
# re, typing, email-validator
# 🔄 Connected Modules / Calls From:
# domain.models.profile_form (edit-profile form), application use cases (id checks)

import re
from typing import Any, List, Optional

from email_validator import validate_email, EmailNotValidError

# Text validation patterns
PERSON_NAME_PATTERN = re.compile(r'^[a-zA-ZÀ-ÿ\s]+$')

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None, value: Any = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.value = value

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


# ==============================================================================
# EMAIL VALIDATION
# ==============================================================================

def validate_email_address(email: Any, max_length: int = EMAIL_MAX_LENGTH) -> ValidationResult:
    """
    Validate email address format and length.

    Errors are reported in check order: presence, shape, length.

    Args:
        email: Email address to validate
        max_length: Maximum allowed length

    Returns:
        ValidationResult with validation status, errors and the normalized email
    """
    result = ValidationResult(True)

    if not email or not isinstance(email, str):
        result.add_error("Email is required")
        return result

    try:
        # Shape check only, no DNS lookups
        valid_email = validate_email(email, check_deliverability=False)
        result.value = valid_email.normalized
    except EmailNotValidError:
        result.add_error("Please enter a valid email address")

    if len(email) > max_length:
        result.add_error(f"Email must be less than {max_length} characters")

    return result


# ==============================================================================
# TEXT AND NAME VALIDATION
# ==============================================================================

def validate_person_name(
    name: Any,
    min_length: int = NAME_MIN_LENGTH,
    max_length: int = NAME_MAX_LENGTH
) -> ValidationResult:
    """
    Validate a person's display name.

    Only letters, spaces and Latin-1 accented letters are accepted.

    Args:
        name: Name to validate
        min_length: Minimum allowed length
        max_length: Maximum allowed length

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not name or not isinstance(name, str):
        result.add_error("Name is required")
        return result

    if len(name) < min_length:
        result.add_error(f"Name must be at least {min_length} characters")

    if len(name) > max_length:
        result.add_error(f"Name must be less than {max_length} characters")

    if not PERSON_NAME_PATTERN.match(name):
        result.add_error("Name can only contain letters, spaces, and accents")

    if result.is_valid:
        result.value = name

    return result


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or value.strip() == ""
