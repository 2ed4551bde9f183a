# 📄 File: profilehub/modules/user_management/application/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers used by the user operations: activity reporting and form checking
# 🧪 Purpose (Technical Summary):
# Application services: analytics port and edit-profile form validation
# 🔗 Dependencies:
# analytics_service.py, form_validation_service.py
# 🔄 Connected Modules / Calls From:
# Use cases, analytics sinks, users API router

from .analytics_service import AnalyticsService
from .form_validation_service import (
    FormValidationResult,
    FormValidationService,
    collect_field_errors,
)

__all__ = [
    "AnalyticsService",
    "FormValidationResult",
    "FormValidationService",
    "collect_field_errors",
]
