# 📄 File: profilehub/modules/user_management/application/services/analytics_service.py
# 🧭 Purpose (Layman Explanation):
# Describes how the app reports what users do (viewed a profile, upgraded, got rejected)
# without caring where those reports end up
# 🧪 Purpose (Technical Summary):
# Analytics port consumed by the use cases; concrete sinks live in the infrastructure layer
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# Use cases, infrastructure.analytics sinks, application composition

from abc import ABC, abstractmethod
from typing import Any, Dict


class AnalyticsService(ABC):
    """
    Fire-and-forget analytics sink.

    Implementations must not block. Use cases isolate every call, so an
    exception raised here is logged and never fails the operation.
    """

    @abstractmethod
    def track(self, event: str, properties: Dict[str, Any]) -> None:
        """
        Record a named event.

        Args:
            event: Event name, e.g. "user_profile_viewed"
            properties: Event properties
        """
        pass

    @abstractmethod
    def set_user_id(self, user_id: str) -> None:
        """Attach a user id to subsequent events."""
        pass

    @abstractmethod
    def set_global_properties(self, properties: Dict[str, Any]) -> None:
        """Merge properties into every subsequent event."""
        pass
