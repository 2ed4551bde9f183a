# 📄 File: profilehub/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# A toolbox of helpers for logging and checking user input.
# 🧪 Purpose (Technical Summary):
# Utilities package exporting structured logging setup and input validators.
# 🔗 Dependencies:
# logging.py, validators.py
# 🔄 Connected Modules / Calls From:
# profilehub.main, use cases, analytics sinks, edit-profile form

from .logging import (
    StructuredLogger,
    get_logger,
    log_context,
    setup_logging,
)
from .validators import (
    ValidationResult,
    is_blank,
    validate_email_address,
    validate_person_name,
)

__all__ = [
    "StructuredLogger",
    "get_logger",
    "log_context",
    "setup_logging",
    "ValidationResult",
    "is_blank",
    "validate_email_address",
    "validate_person_name",
]
