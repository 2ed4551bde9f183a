# 📄 File: profilehub/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the core error types that every part of ProfileHub raises and handles.
# 🧪 Purpose (Technical Summary):
# Core package exporting the ProfileHubException hierarchy.
# 🔗 Dependencies:
# exceptions.py
# 🔄 Connected Modules / Calls From:
# Use cases, presentation layer, application factory

from .exceptions import (
    ProfileHubException,
    InvalidInputError,
    ValidationError,
    NotFoundError,
    UserNotFoundError,
    ConflictError,
    BusinessRuleViolationError,
    AlreadyPremiumError,
    NotEligibleError,
)

__all__ = [
    "ProfileHubException",
    "InvalidInputError",
    "ValidationError",
    "NotFoundError",
    "UserNotFoundError",
    "ConflictError",
    "BusinessRuleViolationError",
    "AlreadyPremiumError",
    "NotEligibleError",
]
