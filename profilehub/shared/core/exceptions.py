# 📄 File: profilehub/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types ProfileHub uses to say clearly
# what went wrong, like "this user does not exist" or "not eligible for Premium".
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and the to_dict() payload the application factory renders in API responses.
# 🔗 Dependencies:
# typing, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# Use cases, form validation service, users API router, application factory

from typing import Any, Dict, Optional

from fastapi import status


class ProfileHubException(Exception):
    """
    Base exception class for ProfileHub.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# VALIDATION & INPUT EXCEPTIONS
# =============================================================================

class InvalidInputError(ProfileHubException):
    """
    Exception raised when a request is missing a required field or
    carries a malformed value.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        reason: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if reason:
            details["reason"] = reason
        if errors:
            details["errors"] = errors

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_INPUT"
        )


class ValidationError(ProfileHubException):
    """
    Exception raised for form validation failures.
    Carries the field -> message mapping in details["errors"].
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        self.errors = dict(errors or {})
        details["errors"] = self.errors

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


# =============================================================================
# RESOURCE EXCEPTIONS
# =============================================================================

class NotFoundError(ProfileHubException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not resolve to a stored user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            message=f"User with ID {user_id} not found",
            resource_type="user",
            resource_id=user_id
        )


class ConflictError(ProfileHubException):
    """
    Exception raised for resource conflicts.
    Used when a unique value is already held by another resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        existing_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflict_field:
            details["conflict_field"] = conflict_field
        if existing_value is not None:
            details["existing_value"] = str(existing_value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT_ERROR"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(ProfileHubException):
    """
    Exception raised when business rules are violated.
    Used for domain-specific rule enforcement.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
        error_code: str = "BUSINESS_RULE_VIOLATION"
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class AlreadyPremiumError(BusinessRuleViolationError):
    """Raised when upgrading a user who already holds a premium membership."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            message="User is already a premium member",
            rule="membership_not_premium",
            context={"user_id": user_id},
            status_code=status.HTTP_409_CONFLICT,
            error_code="ALREADY_PREMIUM"
        )


class NotEligibleError(BusinessRuleViolationError):
    """Raised when a free user does not meet the premium eligibility thresholds."""

    def __init__(
        self,
        user_id: str,
        purchase_count: int,
        total_spent: float,
        required_purchases: int,
        required_spent: float
    ):
        self.user_id = user_id
        super().__init__(
            message=(
                "User is not eligible for premium membership. "
                f"Requires {required_purchases}+ purchases or ${required_spent:.0f}+ spent."
            ),
            rule="premium_eligibility",
            context={
                "user_id": user_id,
                "purchase_count": purchase_count,
                "total_spent": total_spent,
                "required_purchases": required_purchases,
                "required_spent": required_spent,
            },
            error_code="NOT_ELIGIBLE"
        )

