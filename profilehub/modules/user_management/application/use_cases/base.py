# 📄 File: profilehub/modules/user_management/application/use_cases/base.py
# 🧭 Purpose (Layman Explanation):
# The common backbone every user operation shares: where users are stored,
# where activity is reported, and how reporting problems are kept from breaking things
# 🧪 Purpose (Technical Summary):
# Base class for use cases holding the repository and analytics ports with best-effort,
# failure-isolated event tracking and entity validation error mapping
# 🔗 Dependencies:
# pydantic, domain repositories, application analytics port, shared logging/exceptions
# 🔄 Connected Modules / Calls From:
# GetUserProfile, ListUsers, UpdateUserProfile, UpgradeMembership

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from profilehub.modules.user_management.application.services.analytics_service import AnalyticsService
from profilehub.modules.user_management.application.services.form_validation_service import collect_field_errors
from profilehub.modules.user_management.domain.repositories.user_repository import UserRepository
from profilehub.shared.core.exceptions import InvalidInputError
from profilehub.shared.utils.logging import get_logger


class UseCase:
    """
    Shared wiring for application use cases.

    Subclasses implement an async execute() and report outcomes
    through _track(), which never raises.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        analytics_service: AnalyticsService,
    ):
        self._user_repository = user_repository
        self._analytics_service = analytics_service
        self._logger = get_logger(self.__class__.__module__)

    def _track(self, event: str, properties: Dict[str, Any]) -> None:
        """Report an analytics event; sink failures are logged and dropped."""
        try:
            self._analytics_service.track(event, properties)
        except Exception as e:
            self._logger.warning(
                f"Analytics event {event} dropped: {e}",
                extra={"analytics_event": event, "error_type": type(e).__name__}
            )

    @staticmethod
    def _invalid_entity(exc: PydanticValidationError, user_id: str) -> InvalidInputError:
        """Translate an entity construction failure into InvalidInputError."""
        errors = collect_field_errors(exc)
        return InvalidInputError(
            message="Updated user data is invalid",
            reason="entity_validation_failed",
            errors=errors,
            details={"user_id": user_id}
        )
